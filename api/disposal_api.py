"""Disposal API endpoints: waste types, nearby centers and impact scoring."""
from typing import List, Optional
from fastapi import APIRouter, Depends, HTTPException, Query
from fastapi.responses import HTMLResponse, JSONResponse
from loguru import logger
from pydantic import BaseModel, Field
from configurations.config import Config
from core.errors import ValidationError
from models.disposal_center import GeoPoint
from services.matching_service import MatchingService, get_matching_service
from visualization.folium_map import CenterMapGenerator

router = APIRouter(prefix="/api/v1", tags=["disposal"])


class IdentifyRequest(BaseModel):
    description: str


class ImpactRequest(BaseModel):
    waste_type: str = Field(..., alias="wasteType")
    item_count: int = Field(1, alias="itemCount")
    disposal_method: str = Field(..., alias="disposalMethod")


class ImpactSummaryRequest(BaseModel):
    entries: List[ImpactRequest]


def _origin(latitude: Optional[float], longitude: Optional[float]) -> Optional[GeoPoint]:
    if latitude is None and longitude is None:
        return None
    if latitude is None or longitude is None:
        raise ValidationError("latitude and longitude must be supplied together", "location")
    return GeoPoint(latitude, longitude)


@router.get("/waste-types")
async def list_waste_types(service: MatchingService = Depends(get_matching_service)):
    """List every waste type in the taxonomy."""
    profiles = service.taxonomy.profiles()
    return JSONResponse({
        "success": True,
        "waste_database": {key: profile.to_dict() for key, profile in profiles.items()},
        "total_types": len(profiles),
        "categories": service.taxonomy.categories()
    })


@router.get("/waste-types/{waste_type}")
async def get_waste_type(waste_type: str, service: MatchingService = Depends(get_matching_service)):
    """Classify a waste type; unknown types resolve to the General profile."""
    profile = service.classify(waste_type)
    return JSONResponse({
        "success": True,
        "wasteType": waste_type,
        "profile": profile.to_dict()
    })


@router.post("/waste-types/identify")
async def identify_waste_type(request: IdentifyRequest,
                              service: MatchingService = Depends(get_matching_service)):
    """Identify a waste type from a free-text description."""
    try:
        profile = service.identify(request.description)
        return JSONResponse({
            "success": True,
            "wasteType": profile.key,
            "category": profile.category,
            "recyclable": profile.recyclable,
            "profile": profile.to_dict()
        })
    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.get("/disposal-centers")
async def find_disposal_centers(
    waste_type: str = Query(..., alias="wasteType"),
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    radius: Optional[float] = Query(Config.DEFAULT_SEARCH_RADIUS_KM),
    max_results: Optional[int] = Query(Config.DEFAULT_MAX_RESULTS, alias="maxResults"),
    service: MatchingService = Depends(get_matching_service)
):
    """Find centers accepting a waste type, nearest first when a location is given."""
    try:
        origin = _origin(latitude, longitude)
        matches = service.find_centers(origin, waste_type, radius, max_results)

        return JSONResponse({
            "success": True,
            "centers": [match.to_dict() for match in matches],
            "totalFound": len(matches),
            "filters_applied": {
                "wasteType": waste_type,
                "radius": radius,
                "maxResults": max_results,
                "location_based": origin is not None
            }
        })

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to find disposal centers: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to find disposal centers: {str(e)}")


@router.get("/disposal-centers/map", response_class=HTMLResponse)
async def disposal_centers_map(
    waste_type: str = Query(..., alias="wasteType"),
    latitude: Optional[float] = Query(None),
    longitude: Optional[float] = Query(None),
    radius: Optional[float] = Query(Config.DEFAULT_SEARCH_RADIUS_KM),
    service: MatchingService = Depends(get_matching_service)
):
    """Interactive map of the centers accepting a waste type."""
    try:
        origin = _origin(latitude, longitude)
        matches = service.find_centers(origin, waste_type, radius)
        center_map = CenterMapGenerator().create_center_map(matches, origin)
        return HTMLResponse(center_map.get_root().render())

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to render disposal center map: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to render map: {str(e)}")


@router.post("/impact")
async def track_impact(request: ImpactRequest, service: MatchingService = Depends(get_matching_service)):
    """Score the environmental impact of a disposal."""
    try:
        impact = service.score_disposal(request.waste_type, request.item_count, request.disposal_method)
        return JSONResponse({
            "success": True,
            "impact_calculated": impact.to_dict()
        })

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))


@router.post("/impact/summary")
async def summarize_impact(request: ImpactSummaryRequest,
                           service: MatchingService = Depends(get_matching_service)):
    """Score a batch of disposals and summarize them."""
    try:
        impacts = [
            service.score_disposal(entry.waste_type, entry.item_count, entry.disposal_method)
            for entry in request.entries
        ]
        summary = service.calculator.summarize(impacts)
        return JSONResponse({
            "success": True,
            "history": [impact.to_dict() for impact in impacts],
            "summary": summary.to_dict()
        })

    except ValidationError as e:
        raise HTTPException(status_code=400, detail=str(e))
