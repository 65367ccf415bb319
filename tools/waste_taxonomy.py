"""Waste-type taxonomy: normalized lookup of handling and impact profiles."""
import json
import logging
import re
from types import MappingProxyType
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Tuple
from core.errors import ValidationError
from core.validation import require_non_blank, require_non_negative, require_one_of
from models.waste_profile import (CATEGORIES, GENERAL_PROFILE, IMPACT_LEVELS, PREP_COMPLEXITIES,
                                  SAFETY_LEVELS, ImpactFactors, WasteTypeProfile)
from configurations.waste_taxonomy import DESCRIPTION_KEYWORDS, WASTE_TAXONOMY

logger = logging.getLogger(__name__)

_WORD = re.compile(r"[a-z]+")


def normalize_key(raw_waste_type: Optional[str]) -> str:
    """Trim and lowercase a raw waste-type string."""
    if raw_waste_type is None:
        return ""
    return str(raw_waste_type).strip().lower()


class WasteTaxonomy:
    """Immutable mapping from waste-type key to WasteTypeProfile."""

    def __init__(self, profiles: Iterable[WasteTypeProfile],
                 keywords: Sequence[Tuple[str, Sequence[str]]] = ()):
        table: Dict[str, WasteTypeProfile] = {}
        for profile in profiles:
            key = normalize_key(profile.key)
            if not key:
                raise ValidationError("profile key must not be empty", "key")
            if key in table:
                raise ValidationError(f"duplicate waste-type key '{key}'", "key")
            table[key] = profile
        self._profiles = MappingProxyType(table)
        self._keywords = tuple(
            (normalize_key(key), frozenset(words)) for key, words in keywords
            if normalize_key(key) in table
        )
        logger.debug(f"Loaded taxonomy with {len(table)} waste types")

    @classmethod
    def from_table(cls, table: Mapping[str, Mapping],
                   keywords: Sequence[Tuple[str, Sequence[str]]] = DESCRIPTION_KEYWORDS) -> "WasteTaxonomy":
        """Build a taxonomy from a plain dict table such as WASTE_TAXONOMY."""
        return cls((cls._profile_from_entry(key, entry) for key, entry in table.items()), keywords)

    @classmethod
    def from_json(cls, path: str) -> "WasteTaxonomy":
        with open(path, "r", encoding="utf-8") as f:
            table = json.load(f)
        logger.info(f"Loading taxonomy from {path}")
        return cls.from_table(table)

    @classmethod
    def default(cls) -> "WasteTaxonomy":
        return cls.from_table(WASTE_TAXONOMY)

    @staticmethod
    def _profile_from_entry(key: str, entry: Mapping) -> WasteTypeProfile:
        factors = entry.get("impact_factors", {})
        impact_factors = ImpactFactors(
            co2_per_unit=require_non_negative(factors.get("co2", 0.0), f"{key}.co2"),
            energy_per_unit=require_non_negative(factors.get("energy", 0), f"{key}.energy"),
            water_per_unit=require_non_negative(factors.get("water", 0.0), f"{key}.water"),
            base_points_per_unit=require_non_negative(factors.get("base_points", 0), f"{key}.base_points"),
        )
        return WasteTypeProfile(
            key=normalize_key(key),
            category=require_one_of(
                require_non_blank(entry.get("category"), f"{key}.category"), CATEGORIES, f"{key}.category"),
            priority_methods=tuple(entry.get("priority_methods", ())),
            safety_level=require_one_of(entry.get("safety_level", "low"), SAFETY_LEVELS, f"{key}.safety_level"),
            prep_complexity=require_one_of(
                entry.get("prep_complexity", "simple"), PREP_COMPLEXITIES, f"{key}.prep_complexity"),
            environmental_impact=require_one_of(
                entry.get("environmental_impact", "low"), IMPACT_LEVELS, f"{key}.environmental_impact"),
            impact_factors=impact_factors,
        )

    def classify(self, raw_waste_type: Optional[str]) -> WasteTypeProfile:
        """Return the profile for a raw waste type, or the General profile."""
        return self._profiles.get(normalize_key(raw_waste_type), GENERAL_PROFILE)

    def category(self, raw_waste_type: Optional[str]) -> str:
        return self.classify(raw_waste_type).category

    def identify(self, description: Optional[str]) -> WasteTypeProfile:
        """Identify a waste type from a free-text item description by keyword."""
        words = set(_WORD.findall(normalize_key(description)))
        for key, keywords in self._keywords:
            if words & keywords:
                return self._profiles[key]
        return GENERAL_PROFILE

    def keys(self) -> List[str]:
        return list(self._profiles.keys())

    def profiles(self) -> Mapping[str, WasteTypeProfile]:
        return self._profiles

    def categories(self) -> List[str]:
        seen: List[str] = []
        for profile in self._profiles.values():
            if profile.category not in seen:
                seen.append(profile.category)
        return seen

    def __contains__(self, raw_waste_type: object) -> bool:
        return isinstance(raw_waste_type, str) and normalize_key(raw_waste_type) in self._profiles

    def __len__(self) -> int:
        return len(self._profiles)
