"""Tests for the command line interface."""
import json
import pytest
import main as cli
from services.matching_service import MatchingService
from conftest import ORIGIN


@pytest.fixture
def service(monkeypatch, taxonomy, two_center_catalog):
    service = MatchingService(taxonomy=taxonomy, centers=two_center_catalog)
    monkeypatch.setattr(cli, "MatchingService", lambda: service)
    return service


class TestMain:
    def test_classify(self, service, capsys):
        assert cli.main(["classify", "Plastic"]) == 0
        assert json.loads(capsys.readouterr().out)["category"] == "recyclable"

    def test_identify(self, service, capsys):
        assert cli.main(["identify", "old phone charger"]) == 0
        assert json.loads(capsys.readouterr().out)["key"] == "phone"

    def test_centers(self, service, capsys):
        code = cli.main(["centers", "metal", "--lat", str(ORIGIN.latitude),
                         "--lon", str(ORIGIN.longitude), "--radius", "5"])

        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert [c["id"] for c in result["centers"]] == ["A"]
        assert result["centers"][0]["distance"] == 2.5

    def test_centers_writes_exports(self, service, capsys, tmp_path):
        map_path = tmp_path / "map.html"
        code = cli.main(["centers", "plastic", "--lat", "40.0", "--lon", "-74.0",
                         "--output", str(tmp_path), "--geojson", "out.geojson", "--map", str(map_path)])

        assert code == 0
        result = json.loads(capsys.readouterr().out)
        assert (tmp_path / "out.geojson").exists()
        assert result["map"] == str(map_path)
        assert map_path.exists()

    def test_impact(self, service, capsys):
        assert cli.main(["impact", "glass", "3", "recycling"]) == 0
        assert json.loads(capsys.readouterr().out)["item_count"] == 3

    @pytest.mark.parametrize("argv", [
        ["impact", "glass", "0", "recycling"],
        ["centers", "plastic", "--lat", "40.0"],
        ["centers", "plastic", "--lat", "40.0", "--lon", "-74.0", "--radius", "-1"],
    ])
    def test_invalid_input_exit_code(self, service, argv):
        assert cli.main(argv) == 2
