"""Shared fixtures for the matching engine tests."""
import math
import pytest
from models.disposal_center import DisposalCenter, GeoPoint
from tools.waste_taxonomy import WasteTaxonomy

ORIGIN = GeoPoint(40.0, -74.0)
KM_PER_DEGREE = 6371.0 * math.pi / 180


def center_north_of(origin: GeoPoint, km: float, id: str, accepted, rating: float = 4.0) -> DisposalCenter:
    """Center placed due north of origin at exactly km great-circle kilometres."""
    return DisposalCenter.create(
        id=id,
        name=f"Center {id}",
        address=f"{id} Test St, City",
        latitude=origin.latitude + km / KM_PER_DEGREE,
        longitude=origin.longitude,
        accepted_waste_types=accepted,
        hours="Mon-Fri 8AM-6PM",
        rating=rating,
    )


@pytest.fixture
def taxonomy():
    return WasteTaxonomy.default()


@pytest.fixture
def origin():
    return ORIGIN


@pytest.fixture
def two_center_catalog():
    """Center A at 2.5 km (plastic, metal) and center B at 6.8 km (all)."""
    return (
        center_north_of(ORIGIN, 6.8, "B", ["all"], rating=4.0),
        center_north_of(ORIGIN, 2.5, "A", ["plastic", "metal"], rating=4.5),
    )
