"""Default waste-type taxonomy table.

Each entry maps a waste-type key to its handling metadata and per-unit
impact factors (co2 in kg, energy in BTU, water in litres, reward points).
"""

WASTE_TAXONOMY = {
    # Recyclables
    "plastic": {
        "category": "recyclable",
        "priority_methods": ["prevention", "reuse", "recycling"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "high",
        "impact_factors": {"co2": 2.1, "energy": 2200, "water": 0.6, "base_points": 10},
    },
    "metal": {
        "category": "recyclable",
        "priority_methods": ["recycling", "reuse", "scrap_dealer"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 4.2, "energy": 6500, "water": 1.4, "base_points": 15},
    },
    "glass": {
        "category": "recyclable",
        "priority_methods": ["recycling", "reuse", "craft_projects"],
        "safety_level": "medium",
        "prep_complexity": "simple",
        "environmental_impact": "high",
        "impact_factors": {"co2": 0.6, "energy": 1300, "water": 0.3, "base_points": 12},
    },
    "paper": {
        "category": "recyclable",
        "priority_methods": ["recycling", "composting", "reuse"],
        "safety_level": "low",
        "prep_complexity": "very_simple",
        "environmental_impact": "medium",
        "impact_factors": {"co2": 3.3, "energy": 4000, "water": 7.2, "base_points": 8},
    },
    # Electronics
    "electronic": {
        "category": "special_handling",
        "priority_methods": ["certified_recycling", "donation", "manufacturer_takeback"],
        "safety_level": "medium",
        "prep_complexity": "medium",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 12.5, "energy": 18000, "water": 6.8, "base_points": 25},
    },
    "phone": {
        "category": "special_handling",
        "priority_methods": ["trade_in", "donation", "certified_recycling"],
        "safety_level": "medium",
        "prep_complexity": "medium",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 15.2, "energy": 22000, "water": 8.0, "base_points": 30},
    },
    "battery": {
        "category": "hazardous",
        "priority_methods": ["specialized_recycling", "retailer_takeback"],
        "safety_level": "high",
        "prep_complexity": "simple",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 8.5, "energy": 12000, "water": 4.2, "base_points": 20},
    },
    # Organic waste
    "organic": {
        "category": "compostable",
        "priority_methods": ["composting", "municipal_organics", "biogas"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "high",
        "impact_factors": {"co2": 1.8, "energy": 800, "water": 0.4, "base_points": 6},
    },
    "food": {
        "category": "compostable",
        "priority_methods": ["prevention", "donation", "composting"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 2.2, "energy": 1000, "water": 0.5, "base_points": 8},
    },
    # Textiles
    "textile": {
        "category": "reusable",
        "priority_methods": ["donation", "textile_recycling", "upcycling"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "high",
        "impact_factors": {"co2": 8.5, "energy": 12000, "water": 20.0, "base_points": 18},
    },
    "clothing": {
        "category": "reusable",
        "priority_methods": ["donation", "consignment", "textile_recycling"],
        "safety_level": "low",
        "prep_complexity": "simple",
        "environmental_impact": "very_high",
        "impact_factors": {"co2": 9.2, "energy": 13500, "water": 22.0, "base_points": 20},
    },
    # Hazardous materials
    "hazardous": {
        "category": "hazardous",
        "priority_methods": ["hazmat_facility", "special_collection"],
        "safety_level": "very_high",
        "prep_complexity": "complex",
        "environmental_impact": "critical",
        "impact_factors": {"co2": 18.0, "energy": 25000, "water": 12.5, "base_points": 30},
    },
    "paint": {
        "category": "hazardous",
        "priority_methods": ["hazmat_facility", "dried_disposal", "donation"],
        "safety_level": "high",
        "prep_complexity": "medium",
        "environmental_impact": "high",
        "impact_factors": {"co2": 12.0, "energy": 15000, "water": 8.0, "base_points": 25},
    },
}

# Keyword rules for free-text identification, checked in order.
DESCRIPTION_KEYWORDS = [
    ("battery", ["battery", "batteries"]),
    ("phone", ["phone", "smartphone", "cellphone"]),
    ("electronic", ["electronic", "electronics", "device", "laptop", "computer"]),
    ("paint", ["paint"]),
    ("clothing", ["clothing", "clothes", "shirt", "jeans", "shoes"]),
    ("textile", ["textile", "fabric"]),
    ("food", ["food", "leftovers"]),
    ("organic", ["organic", "yard", "compost", "leaves"]),
    ("paper", ["paper", "cardboard", "newspaper"]),
    ("glass", ["glass", "jar"]),
    ("metal", ["aluminum", "aluminium", "can", "tin", "metal"]),
    ("plastic", ["plastic", "pet"]),
    ("hazardous", ["chemical", "chemicals", "hazardous", "solvent"]),
]
