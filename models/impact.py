"""Data models for environmental impact results."""
from dataclasses import dataclass, asdict
from typing import Any, Dict


@dataclass(frozen=True)
class ImpactResult:
    waste_type: str
    category: str
    item_count: int
    disposal_method: str
    co2_saved: float
    energy_saved: int
    water_saved: float
    points_earned: int

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


@dataclass(frozen=True)
class ImpactSummary:
    total_items: int = 0
    total_co2_saved: float = 0.0
    total_energy_saved: int = 0
    total_water_saved: float = 0.0
    total_points: int = 0
    entries_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)
