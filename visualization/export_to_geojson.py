"""Export ranked disposal centers to GeoJSON and summary CSV."""
import os
import geopandas as gpd
import pandas as pd
from loguru import logger
from shapely.geometry import Point
from typing import List
from configurations.config import Config
from models.disposal_center import CenterMatch


class MatchExporter:
    def __init__(self, export_dir: str = None):
        self.matches_gdf = None
        self.export_dir = export_dir or Config.EXPORT_DIR
        os.makedirs(self.export_dir, exist_ok=True)

    def prepare_matches_geojson(self, matches: List[CenterMatch]) -> gpd.GeoDataFrame:
        """Prepare ranked centers for GeoJSON export."""
        features = []

        for rank, match in enumerate(matches, start=1):
            center = match.center
            features.append({
                'rank': rank,
                'center_id': center.id,
                'name': center.name,
                'address': center.address,
                'accepted_waste': ';'.join(sorted(center.accepted_waste_types)),
                'hours': center.hours,
                'rating': center.rating,
                'distance_km': match.distance_km if match.distance_km is not None else float('nan'),
                'google_maps_url': center.google_maps_url,
                'geometry': Point(center.location.longitude, center.location.latitude)
            })

        columns = ['rank', 'center_id', 'name', 'address', 'accepted_waste', 'hours',
                   'rating', 'distance_km', 'google_maps_url', 'geometry']
        self.matches_gdf = gpd.GeoDataFrame(
            pd.DataFrame(features, columns=columns), geometry='geometry', crs='EPSG:4326'
        )
        logger.info(f"Prepared {len(features)} centers for export")
        return self.matches_gdf

    def export_matches_geojson(self, filename: str = "centers.geojson") -> str:
        """Export prepared centers to a GeoJSON file in the export directory."""
        if self.matches_gdf is None:
            raise ValueError("No center data prepared")

        output_path = os.path.join(self.export_dir, filename)
        self.matches_gdf.to_file(output_path, driver='GeoJSON')
        logger.info(f"Exported centers to: {output_path}")
        return output_path

    def export_summary_csv(self, filename: str = "centers_summary.csv") -> str:
        """Export prepared centers, without geometry, as CSV."""
        if self.matches_gdf is None:
            raise ValueError("No center data prepared")

        summary_df = pd.DataFrame(self.matches_gdf.drop(columns='geometry'))
        summary_df['latitude'] = self.matches_gdf.geometry.y
        summary_df['longitude'] = self.matches_gdf.geometry.x

        output_path = os.path.join(self.export_dir, filename)
        summary_df.to_csv(output_path, index=False)
        logger.info(f"Exported summary to: {output_path}")
        return output_path
