"""Command line entry point for the waste disposal matching engine."""
import sys
import json
import argparse
from loguru import logger

from configurations.config import Config
from core.errors import ValidationError
from models.disposal_center import GeoPoint
from services.matching_service import MatchingService
from visualization.export_to_geojson import MatchExporter
from visualization.folium_map import CenterMapGenerator


def _print_json(data) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def run_centers(service: MatchingService, args) -> dict:
    """Rank centers and optionally export them as GeoJSON and an HTML map."""
    if (args.lat is None) != (args.lon is None):
        raise ValidationError("--lat and --lon must be given together", "location")
    origin = GeoPoint(args.lat, args.lon) if args.lat is not None else None

    matches = service.find_centers(origin, args.waste_type, args.radius, args.max)
    result = {
        'wasteType': args.waste_type,
        'centers': [match.to_dict() for match in matches],
        'totalFound': len(matches)
    }

    if args.geojson:
        exporter = MatchExporter(args.output)
        exporter.prepare_matches_geojson(matches)
        result['geojson'] = exporter.export_matches_geojson(args.geojson)

    if args.map:
        map_generator = CenterMapGenerator()
        center_map = map_generator.create_center_map(matches, origin)
        result['map'] = map_generator.save_map(center_map, args.map)

    return result


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Waste classification, disposal-center ranking and impact scoring")
    parser.add_argument("--api", action="store_true", help="Start FastAPI server instead")
    parser.add_argument("--port", type=int, default=Config.API_PORT, help=f"Port for FastAPI server (default: {Config.API_PORT})")
    subparsers = parser.add_subparsers(dest="command")

    classify_parser = subparsers.add_parser("classify", help="Show the taxonomy profile for a waste type")
    classify_parser.add_argument("waste_type")

    identify_parser = subparsers.add_parser("identify", help="Identify a waste type from a description")
    identify_parser.add_argument("description")

    centers_parser = subparsers.add_parser("centers", help="Find disposal centers accepting a waste type")
    centers_parser.add_argument("waste_type")
    centers_parser.add_argument("--lat", type=float, help="Origin latitude")
    centers_parser.add_argument("--lon", type=float, help="Origin longitude")
    centers_parser.add_argument("--radius", type=float, default=Config.DEFAULT_SEARCH_RADIUS_KM, help="Search radius in km")
    centers_parser.add_argument("--max", type=int, default=Config.DEFAULT_MAX_RESULTS, help="Maximum number of results")
    centers_parser.add_argument("--output", default=Config.EXPORT_DIR, help="Export directory")
    centers_parser.add_argument("--geojson", help="GeoJSON file name to export results to")
    centers_parser.add_argument("--map", help="Path of an HTML map to write")

    impact_parser = subparsers.add_parser("impact", help="Score the impact of disposing items")
    impact_parser.add_argument("waste_type")
    impact_parser.add_argument("item_count", type=int)
    impact_parser.add_argument("disposal_method")

    return parser


def main(argv=None) -> int:
    """Command line interface for the matching engine."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger.remove()
    logger.add(sys.stderr, level=Config.LOG_LEVEL)

    if args.api:
        # Start FastAPI server
        import uvicorn
        from api.app import app
        logger.info(f"🚀 Starting FastAPI server on port {args.port}...")
        try:
            uvicorn.run(app, host=Config.API_HOST, port=args.port)
        except OSError as e:
            logger.error(f"❌ Server startup failed: {e}")
            return 1
        return 0

    if args.command is None:
        parser.error("a command is required when not using --api")

    service = MatchingService()
    try:
        if args.command == "classify":
            _print_json(service.classify(args.waste_type).to_dict())
        elif args.command == "identify":
            _print_json(service.identify(args.description).to_dict())
        elif args.command == "centers":
            _print_json(run_centers(service, args))
        elif args.command == "impact":
            _print_json(service.score_disposal(args.waste_type, args.item_count, args.disposal_method).to_dict())
    except ValidationError as e:
        logger.error(f"❌ Invalid input: {e}")
        return 2

    return 0


if __name__ == "__main__":
    sys.exit(main())
