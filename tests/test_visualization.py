"""Tests for GeoJSON export and map rendering of ranked centers."""
import os
import geopandas as gpd
import pandas as pd
import pytest
from services.matching_service import MatchingService
from visualization.export_to_geojson import MatchExporter
from visualization.folium_map import CenterMapGenerator
from conftest import ORIGIN


class TestMatchExporter:
    def _matches(self, taxonomy, catalog):
        return MatchingService(taxonomy=taxonomy, centers=catalog).find_centers(ORIGIN, "plastic", 10)

    def test_prepare_matches(self, tmp_path, taxonomy, two_center_catalog):
        exporter = MatchExporter(str(tmp_path))

        gdf = exporter.prepare_matches_geojson(self._matches(taxonomy, two_center_catalog))

        assert list(gdf['center_id']) == ["A", "B"]
        assert list(gdf['rank']) == [1, 2]
        assert gdf.crs.to_epsg() == 4326
        assert gdf.geometry.iloc[0].x == pytest.approx(-74.0)

    def test_export_geojson_and_csv(self, tmp_path, taxonomy, two_center_catalog):
        exporter = MatchExporter(str(tmp_path))
        exporter.prepare_matches_geojson(self._matches(taxonomy, two_center_catalog))

        geojson_path = exporter.export_matches_geojson("centers.geojson")
        csv_path = exporter.export_summary_csv("centers.csv")

        exported = gpd.read_file(geojson_path)
        assert list(exported['center_id']) == ["A", "B"]
        summary = pd.read_csv(csv_path)
        assert list(summary['distance_km']) == [2.5, 6.8]
        assert 'latitude' in summary.columns

    def test_export_without_data(self, tmp_path):
        with pytest.raises(ValueError):
            MatchExporter(str(tmp_path)).export_matches_geojson()


class TestCenterMapGenerator:
    def test_create_and_save_map(self, tmp_path, taxonomy, two_center_catalog):
        matches = MatchingService(taxonomy=taxonomy, centers=two_center_catalog).find_centers(ORIGIN, "plastic")
        generator = CenterMapGenerator()

        center_map = generator.create_center_map(matches, ORIGIN)
        path = generator.save_map(center_map, str(tmp_path / "map.html"))

        assert os.path.exists(path)
        html = open(path, encoding="utf-8").read()
        assert "Center A" in html
        assert "Center B" in html

    def test_map_without_matches(self):
        center_map = CenterMapGenerator().create_center_map([])
        assert center_map.location == [40.7128, -74.0060]
