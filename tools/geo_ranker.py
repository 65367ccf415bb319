"""Great-circle ranking of disposal centers around an origin."""
import logging
import math
import numpy as np
from typing import List, Optional, Sequence
from configurations.config import Config
from core.validation import require_positive_radius
from models.disposal_center import CenterMatch, DisposalCenter, GeoPoint
from tools.waste_taxonomy import normalize_key

logger = logging.getLogger(__name__)


def haversine_km(a: GeoPoint, b: GeoPoint, radius_km: float = Config.EARTH_RADIUS_KM) -> float:
    """Great-circle distance between two points in kilometres."""
    lat1, lon1 = math.radians(a.latitude), math.radians(a.longitude)
    lat2, lon2 = math.radians(b.latitude), math.radians(b.longitude)

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = math.sin(dlat / 2) ** 2 + math.cos(lat1) * math.cos(lat2) * math.sin(dlon / 2) ** 2
    h = min(1.0, max(0.0, h))
    return 2 * radius_km * math.atan2(math.sqrt(h), math.sqrt(1 - h))


class GeoRanker:
    def __init__(self, earth_radius_km: float = Config.EARTH_RADIUS_KM):
        self.earth_radius_km = earth_radius_km

    def distances_km(self, origin: GeoPoint, centers: Sequence[DisposalCenter]) -> np.ndarray:
        """Unrounded haversine distance from origin to every center."""
        if not centers:
            return np.zeros(0)
        lat1, lon1 = np.radians(origin.latitude), np.radians(origin.longitude)
        lat2 = np.radians([c.location.latitude for c in centers])
        lon2 = np.radians([c.location.longitude for c in centers])

        dlat = lat2 - lat1
        dlon = lon2 - lon1

        h = np.sin(dlat / 2) ** 2 + np.cos(lat1) * np.cos(lat2) * np.sin(dlon / 2) ** 2
        h = np.clip(h, 0.0, 1.0)
        return 2 * self.earth_radius_km * np.arctan2(np.sqrt(h), np.sqrt(1 - h))

    def rank(self, origin: Optional[GeoPoint], waste_type_key: str,
             radius_km: Optional[float], centers: Sequence[DisposalCenter]) -> List[CenterMatch]:
        """
        Filter centers accepting the waste type and order them by distance.

        With an origin, centers beyond radius_km are dropped and results are
        sorted by distance, then rating (descending), then id. Without an
        origin, catalog order is kept and no distance is attached.
        """
        if radius_km is not None:
            radius_km = require_positive_radius(radius_km)

        key = normalize_key(waste_type_key)
        accepted = [center for center in centers if center.accepts(key)]

        if origin is None:
            logger.debug(f"Ranked {len(accepted)} centers for '{key}' without origin")
            return [CenterMatch(center) for center in accepted]

        distances = self.distances_km(origin, accepted)
        candidates = [
            (float(distance), center)
            for distance, center in zip(distances, accepted)
            if radius_km is None or distance <= radius_km
        ]
        candidates.sort(key=lambda item: (item[0], -item[1].rating, item[1].id))

        logger.debug(f"Ranked {len(candidates)}/{len(accepted)} centers for '{key}' within {radius_km} km")
        return [CenterMatch(center, round(distance, 2)) for distance, center in candidates]
