"""Create interactive Folium maps of ranked disposal centers."""
import folium
from loguru import logger
from typing import List, Optional
from models.disposal_center import CenterMatch, GeoPoint

DEFAULT_MAP_CENTER = (40.7128, -74.0060)


class CenterMapGenerator:
    def __init__(self):
        # Nearest centers get the first colors
        self.rank_colors = ['green', 'darkgreen', 'blue', 'cadetblue', 'purple', 'orange', 'gray']

    def create_center_map(self, matches: List[CenterMatch], origin: Optional[GeoPoint] = None,
                          zoom_start: int = 12) -> folium.Map:
        """Create a map with one marker per center and an optional origin marker."""
        map_center = self._map_center(matches, origin)

        m = folium.Map(
            location=map_center,
            zoom_start=zoom_start,
            tiles='OpenStreetMap'
        )

        centers_group = folium.FeatureGroup(name=f"♻️ Disposal Centers ({len(matches)})", show=True)
        for rank, match in enumerate(matches, start=1):
            center = match.center
            color = self.rank_colors[min(rank - 1, len(self.rank_colors) - 1)]
            tooltip = f"#{rank} {center.name}"
            if match.distance_km is not None:
                tooltip += f" ({match.distance_km:.2f} km)"

            folium.Marker(
                location=[center.location.latitude, center.location.longitude],
                popup=folium.Popup(self._create_center_popup(rank, match), max_width=260),
                tooltip=tooltip,
                icon=folium.Icon(color=color, icon='trash')
            ).add_to(centers_group)
        centers_group.add_to(m)

        if origin is not None:
            folium.Marker(
                location=[origin.latitude, origin.longitude],
                popup="📍 Your location",
                icon=folium.Icon(color='red', icon='user')
            ).add_to(m)

        folium.LayerControl(position='topright', collapsed=False).add_to(m)

        logger.info(f"Created Folium map with {len(matches)} centers")
        return m

    @staticmethod
    def _map_center(matches: List[CenterMatch], origin: Optional[GeoPoint]) -> List[float]:
        if origin is not None:
            return [origin.latitude, origin.longitude]
        if matches:
            lats = [m.center.location.latitude for m in matches]
            lons = [m.center.location.longitude for m in matches]
            return [(min(lats) + max(lats)) / 2, (min(lons) + max(lons)) / 2]
        return list(DEFAULT_MAP_CENTER)

    def _create_center_popup(self, rank: int, match: CenterMatch) -> str:
        """Create detailed popup for a center."""
        center = match.center
        distance = f"{match.distance_km:.2f} km" if match.distance_km is not None else "n/a"
        return f"""
        <div style="width: 220px;">
            <h4>#{rank} {center.name}</h4>
            <p><strong>Address:</strong> {center.address}</p>
            <p><strong>Hours:</strong> {center.hours}</p>
            <p><strong>Rating:</strong> {center.rating:.1f} / 5</p>
            <p><strong>Distance:</strong> {distance}</p>
            <p><strong>Accepts:</strong> {', '.join(sorted(center.accepted_waste_types))}</p>
            <p><a href="{center.google_maps_url}" target="_blank">Open in Google Maps</a></p>
        </div>
        """

    def save_map(self, map_obj: folium.Map, output_path: str = "centers_map.html") -> str:
        """Save map to HTML file."""
        map_obj.save(output_path)
        logger.info(f"Saved interactive map to {output_path}")
        return output_path
