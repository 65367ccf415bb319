"""Matching service: nearby-center search and disposal impact scoring."""
import threading
from datetime import datetime
from typing import List, Optional, Sequence, Tuple, Union
from loguru import logger
from core.registry import ReferenceRegistry, registry
from core.validation import require_non_blank, require_positive_int
from models.disposal_center import CenterMatch, DisposalCenter, GeoPoint
from models.impact import ImpactResult
from models.waste_profile import WasteTypeProfile
from models.waste_record import DisposalStatus, WasteRecord
from tools.geo_ranker import GeoRanker
from tools.impact_calculator import ImpactCalculator
from tools.waste_taxonomy import WasteTaxonomy, normalize_key

OriginLike = Union[GeoPoint, Sequence[float], None]


class MatchingService:
    """Composes the taxonomy, the ranker and the impact calculator."""

    def __init__(self, taxonomy: Optional[WasteTaxonomy] = None,
                 centers: Optional[Sequence[DisposalCenter]] = None,
                 reference: ReferenceRegistry = registry):
        self._reference = reference
        self.taxonomy = taxonomy or reference.taxonomy()
        self._centers = tuple(centers) if centers is not None else None
        self.ranker = GeoRanker()
        self.calculator = ImpactCalculator(self.taxonomy)

    def catalog(self) -> Tuple[DisposalCenter, ...]:
        """Catalog snapshot for one call: injected centers, else the registry's."""
        if self._centers is not None:
            return self._centers
        return self._reference.catalog()

    def classify(self, raw_waste_type: Optional[str]) -> WasteTypeProfile:
        return self.taxonomy.classify(raw_waste_type)

    def identify(self, description: str) -> WasteTypeProfile:
        require_non_blank(description, "description")
        return self.taxonomy.identify(description)

    def find_centers(self, origin: OriginLike = None, waste_type: Optional[str] = None,
                     radius_km: Optional[float] = None,
                     max_results: Optional[int] = None) -> List[CenterMatch]:
        """Centers accepting the waste type, nearest first when an origin is given."""
        if max_results is not None:
            require_positive_int(max_results, "max_results")
        point = GeoPoint.coerce(origin)
        key = normalize_key(waste_type)

        matches = self.ranker.rank(point, key, radius_km, self.catalog())
        if max_results is not None:
            matches = matches[:max_results]

        logger.info(f"Found {len(matches)} centers for '{key}'"
                    f"{f' within {radius_km} km' if point and radius_km else ''}")
        return matches

    def score_disposal(self, waste_type: Optional[str], item_count: int,
                       disposal_method: str) -> ImpactResult:
        """Impact of disposing item_count items; the result carries the resolved category."""
        return self.calculator.compute_impact(waste_type, item_count, disposal_method)

    def dispose_item(self, record: WasteRecord, disposal_method: str,
                     disposal_center_id: Optional[str] = None,
                     now: Optional[datetime] = None) -> Tuple[WasteRecord, ImpactResult]:
        """Move a record to DISPOSED and score it; a disposed record cannot be scored again."""
        disposed = record.advance(DisposalStatus.DISPOSED, now=now, disposal_center_id=disposal_center_id)
        impact = self.score_disposal(record.waste_type, record.item_count, disposal_method)
        logger.info(f"Record {record.id} disposed: {impact.points_earned} points")
        return disposed, impact


_default_service: Optional[MatchingService] = None
_default_service_lock = threading.Lock()


def get_matching_service() -> MatchingService:
    global _default_service
    with _default_service_lock:
        if _default_service is None:
            _default_service = MatchingService()
        return _default_service


def classify(raw_waste_type: Optional[str]) -> WasteTypeProfile:
    return get_matching_service().classify(raw_waste_type)


def find_centers(origin: OriginLike = None, waste_type: Optional[str] = None,
                 radius_km: Optional[float] = None, max_results: Optional[int] = None) -> List[CenterMatch]:
    return get_matching_service().find_centers(origin, waste_type, radius_km, max_results)


def score_disposal(waste_type: Optional[str], item_count: int, disposal_method: str) -> ImpactResult:
    return get_matching_service().score_disposal(waste_type, item_count, disposal_method)
