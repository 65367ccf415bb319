"""Environmental impact scoring for disposed waste items."""
import logging
import math
from typing import Iterable
from core.validation import require_non_blank, require_positive_int
from models.impact import ImpactResult, ImpactSummary
from tools.waste_taxonomy import WasteTaxonomy, normalize_key

logger = logging.getLogger(__name__)


def round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


class ImpactCalculator:
    def __init__(self, taxonomy: WasteTaxonomy):
        self.taxonomy = taxonomy

    def compute_impact(self, waste_type_key: str, item_count: int, disposal_method: str) -> ImpactResult:
        """
        Compute CO2, energy and water saved plus reward points.

        The disposal method is validated and echoed but does not change the
        result; every figure is a per-unit factor times the item count.
        """
        require_positive_int(item_count, "item_count")
        require_non_blank(disposal_method, "disposal_method")

        profile = self.taxonomy.classify(waste_type_key)
        factors = profile.impact_factors

        result = ImpactResult(
            waste_type=normalize_key(waste_type_key),
            category=profile.category,
            item_count=item_count,
            disposal_method=disposal_method,
            co2_saved=round(factors.co2_per_unit * item_count, 2),
            energy_saved=int(factors.energy_per_unit * item_count),
            water_saved=round(factors.water_per_unit * item_count, 2),
            points_earned=round_half_up(factors.base_points_per_unit * item_count),
        )
        logger.debug(f"Impact for {item_count} x '{result.waste_type}': {result.points_earned} points")
        return result

    @staticmethod
    def summarize(results: Iterable[ImpactResult]) -> ImpactSummary:
        """Aggregate a user's impact history."""
        results = list(results)
        return ImpactSummary(
            total_items=sum(r.item_count for r in results),
            total_co2_saved=round(sum(r.co2_saved for r in results), 2),
            total_energy_saved=sum(r.energy_saved for r in results),
            total_water_saved=round(sum(r.water_saved for r in results), 2),
            total_points=sum(r.points_earned for r in results),
            entries_count=len(results),
        )
