"""Tests for the disposal HTTP endpoints."""
import pytest
from fastapi.testclient import TestClient
from api.app import app
from services.matching_service import MatchingService, get_matching_service
from tools.waste_taxonomy import WasteTaxonomy
from conftest import ORIGIN, center_north_of


@pytest.fixture
def client():
    catalog = (
        center_north_of(ORIGIN, 6.8, "B", ["all"], rating=4.0),
        center_north_of(ORIGIN, 2.5, "A", ["plastic", "metal"], rating=4.5),
        center_north_of(ORIGIN, 12.0, "C", ["plastic"], rating=5.0),
    )
    service = MatchingService(taxonomy=WasteTaxonomy.default(), centers=catalog)
    app.dependency_overrides[get_matching_service] = lambda: service
    yield TestClient(app)
    app.dependency_overrides.clear()


class TestWasteTypeEndpoints:
    def test_health(self, client):
        assert client.get("/health").json()["status"] == "ok"

    def test_list_waste_types(self, client):
        data = client.get("/api/v1/waste-types").json()

        assert data["total_types"] == 13
        assert data["waste_database"]["plastic"]["impact_factors"]["base_points_per_unit"] == 10
        assert "hazardous" in data["categories"]

    def test_classify_unknown_type(self, client):
        response = client.get("/api/v1/waste-types/unobtainium")

        assert response.status_code == 200
        assert response.json()["profile"]["category"] == "general"

    def test_identify(self, client):
        response = client.post("/api/v1/waste-types/identify", json={"description": "plastic bottle"})

        assert response.status_code == 200
        assert response.json()["wasteType"] == "plastic"
        assert response.json()["recyclable"] is True

    def test_identify_blank_description(self, client):
        response = client.post("/api/v1/waste-types/identify", json={"description": "  "})
        assert response.status_code == 400


class TestDisposalCenterEndpoints:
    def test_nearby_centers_within_radius(self, client):
        response = client.get("/api/v1/disposal-centers", params={
            "wasteType": "Plastic", "latitude": 40.0, "longitude": -74.0, "radius": 10
        })

        assert response.status_code == 200
        data = response.json()
        assert [c["id"] for c in data["centers"]] == ["A", "B"]
        assert [c["distance"] for c in data["centers"]] == [2.5, 6.8]
        assert data["filters_applied"]["location_based"] is True

    def test_max_results(self, client):
        response = client.get("/api/v1/disposal-centers", params={
            "wasteType": "plastic", "latitude": 40.0, "longitude": -74.0, "maxResults": 2
        })
        assert [c["id"] for c in response.json()["centers"]] == ["A", "B"]

    def test_without_location(self, client):
        data = client.get("/api/v1/disposal-centers", params={"wasteType": "plastic"}).json()

        assert [c["id"] for c in data["centers"]] == ["B", "A", "C"]
        assert all(c["distance"] is None for c in data["centers"])

    @pytest.mark.parametrize("params", [
        {"wasteType": "plastic", "latitude": 40.0, "longitude": -74.0, "radius": 0},
        {"wasteType": "plastic", "latitude": 40.0},
        {"wasteType": "plastic", "latitude": 100.0, "longitude": -74.0},
    ])
    def test_invalid_search(self, client, params):
        assert client.get("/api/v1/disposal-centers", params=params).status_code == 400

    def test_map(self, client):
        response = client.get("/api/v1/disposal-centers/map", params={
            "wasteType": "metal", "latitude": 40.0, "longitude": -74.0
        })

        assert response.status_code == 200
        assert "Center A" in response.text


class TestImpactEndpoints:
    def test_track_impact(self, client):
        response = client.post("/api/v1/impact", json={
            "wasteType": "plastic", "itemCount": 2, "disposalMethod": "recycling"
        })

        assert response.status_code == 200
        impact = response.json()["impact_calculated"]
        assert impact["points_earned"] == 20
        assert impact["co2_saved"] == 4.2
        assert impact["category"] == "recyclable"

    def test_zero_items(self, client):
        response = client.post("/api/v1/impact", json={
            "wasteType": "plastic", "itemCount": 0, "disposalMethod": "recycling"
        })

        assert response.status_code == 400
        assert "item_count" in response.json()["detail"]

    def test_summary(self, client):
        response = client.post("/api/v1/impact/summary", json={"entries": [
            {"wasteType": "plastic", "itemCount": 2, "disposalMethod": "recycling"},
            {"wasteType": "clothing", "itemCount": 2, "disposalMethod": "donation"},
        ]})

        summary = response.json()["summary"]
        assert summary["total_items"] == 4
        assert summary["total_points"] == 60
        assert summary["entries_count"] == 2
