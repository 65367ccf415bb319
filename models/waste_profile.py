"""Data models for waste-type taxonomy profiles."""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, Tuple

CATEGORIES = ("recyclable", "special_handling", "hazardous", "compostable", "reusable")
SAFETY_LEVELS = ("low", "medium", "high", "very_high")
PREP_COMPLEXITIES = ("very_simple", "simple", "medium", "complex")
IMPACT_LEVELS = ("low", "medium", "high", "very_high", "critical")

GENERAL_KEY = "general"


@dataclass(frozen=True)
class ImpactFactors:
    co2_per_unit: float = 0.0
    energy_per_unit: float = 0.0
    water_per_unit: float = 0.0
    base_points_per_unit: float = 0.0


@dataclass(frozen=True)
class WasteTypeProfile:
    key: str
    category: str
    priority_methods: Tuple[str, ...]
    safety_level: str
    prep_complexity: str
    environmental_impact: str
    impact_factors: ImpactFactors = field(default_factory=ImpactFactors)

    @property
    def is_general(self) -> bool:
        return self.key == GENERAL_KEY

    @property
    def recyclable(self) -> bool:
        return self.category == "recyclable"

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data["priority_methods"] = list(self.priority_methods)
        return data


GENERAL_PROFILE = WasteTypeProfile(
    key=GENERAL_KEY,
    category="general",
    priority_methods=("local_guidelines",),
    safety_level="low",
    prep_complexity="simple",
    environmental_impact="low",
    impact_factors=ImpactFactors(),
)
