"""Tests for waste-type classification."""
import json
import pytest
from core.errors import ValidationError
from models.waste_profile import GENERAL_PROFILE
from tools.waste_taxonomy import WasteTaxonomy, normalize_key


class TestClassify:
    def setup_method(self):
        self.taxonomy = WasteTaxonomy.default()

    def test_known_type_returns_profile(self):
        profile = self.taxonomy.classify("plastic")

        assert profile.key == "plastic"
        assert profile.category == "recyclable"
        assert profile.priority_methods == ("prevention", "reuse", "recycling")
        assert profile.safety_level == "low"
        assert profile.prep_complexity == "simple"
        assert profile.environmental_impact == "high"
        assert profile.impact_factors.base_points_per_unit == 10

    def test_normalization_is_case_and_whitespace_insensitive(self):
        assert self.taxonomy.classify("PLASTIC ") == self.taxonomy.classify("plastic")
        assert self.taxonomy.classify("  Battery\t") is self.taxonomy.classify("battery")

    def test_unknown_type_falls_back_to_general(self):
        profile = self.taxonomy.classify("unobtainium")

        assert profile is GENERAL_PROFILE
        assert profile.category == "general"
        assert profile.impact_factors.co2_per_unit == 0
        assert profile.impact_factors.base_points_per_unit == 0

    def test_empty_and_none_fall_back_to_general(self):
        assert self.taxonomy.classify("") is GENERAL_PROFILE
        assert self.taxonomy.classify(None) is GENERAL_PROFILE

    def test_category_view(self):
        assert self.taxonomy.category("Battery") == "hazardous"
        assert self.taxonomy.category("phone") == "special_handling"
        assert self.taxonomy.category("food") == "compostable"
        assert self.taxonomy.category("clothing") == "reusable"
        assert self.taxonomy.category("rocks") == "general"

    def test_listing(self):
        assert len(self.taxonomy) == 13
        assert "paint" in self.taxonomy
        assert " PAINT" in self.taxonomy
        assert "unobtainium" not in self.taxonomy
        assert self.taxonomy.categories() == [
            "recyclable", "special_handling", "hazardous", "compostable", "reusable"
        ]

    def test_profiles_are_read_only(self):
        with pytest.raises(TypeError):
            self.taxonomy.profiles()["plastic"] = GENERAL_PROFILE


class TestIdentify:
    def setup_method(self):
        self.taxonomy = WasteTaxonomy.default()

    @pytest.mark.parametrize("description,expected", [
        ("Empty plastic bottle", "plastic"),
        ("broken glass bottle", "glass"),
        ("aluminum can", "metal"),
        ("old AA batteries", "battery"),
        ("cracked phone screen", "phone"),
        ("cardboard box", "paper"),
        ("leftover food", "food"),
        ("worn out jeans", "clothing"),
        ("half empty paint tin", "paint"),
    ])
    def test_keyword_identification(self, description, expected):
        assert self.taxonomy.identify(description).key == expected

    def test_unrecognised_description_is_general(self):
        assert self.taxonomy.identify("mysterious object") is GENERAL_PROFILE

    def test_matches_whole_words_only(self):
        # "scan" must not match the "can" keyword
        assert self.taxonomy.identify("scanner") is GENERAL_PROFILE


class TestLoading:
    def test_duplicate_keys_after_normalization_are_rejected(self):
        entry = {"category": "recyclable", "impact_factors": {"co2": 1.0}}
        with pytest.raises(ValidationError):
            WasteTaxonomy.from_table({"Plastic": entry, "plastic ": entry})

    def test_negative_factor_is_rejected(self):
        with pytest.raises(ValidationError):
            WasteTaxonomy.from_table({"plastic": {"category": "recyclable", "impact_factors": {"co2": -1}}})

    def test_missing_category_is_rejected(self):
        with pytest.raises(ValidationError):
            WasteTaxonomy.from_table({"plastic": {"impact_factors": {"co2": 1}}})

    @pytest.mark.parametrize("field, value", [
        ("category", "shiny"),
        ("category", "general"),
        ("safety_level", "extreme"),
        ("prep_complexity", "impossible"),
        ("environmental_impact", "cosmic"),
    ])
    def test_values_outside_domain_are_rejected(self, field, value):
        entry = {"category": "recyclable", "impact_factors": {"co2": 1.0}}
        entry[field] = value

        with pytest.raises(ValidationError) as excinfo:
            WasteTaxonomy.from_table({"rock": entry})
        assert excinfo.value.field == f"rock.{field}"

    def test_from_json(self, tmp_path):
        path = tmp_path / "taxonomy.json"
        path.write_text(json.dumps({
            "Cork": {
                "category": "compostable",
                "priority_methods": ["composting"],
                "impact_factors": {"co2": 0.3, "energy": 50, "water": 0.1, "base_points": 2}
            }
        }), encoding="utf-8")

        taxonomy = WasteTaxonomy.from_json(str(path))

        assert taxonomy.keys() == ["cork"]
        assert taxonomy.classify("CORK").impact_factors.energy_per_unit == 50


def test_normalize_key():
    assert normalize_key("  Mixed Case ") == "mixed case"
    assert normalize_key(None) == ""
