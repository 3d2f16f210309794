from typing import Dict

from fastapi import APIRouter, Depends

from buildex.core.config import settings
from buildex.core.overpass_connection import OverpassClient, overpass_client
from buildex.models.places_model import (
    Category,
    ClearCacheResponse,
    NearbyPlacesRequest,
    NearbyPlacesResult,
)
from buildex.repos.places_repo import PlacesCache
from buildex.services.Places_service import NearbyPlacesService

router = APIRouter(prefix="/places", tags=["places"])

# One cache per process, shared by every request
places_cache = PlacesCache(
    ttl_seconds=settings.PLACES_CACHE_TTL_SECONDS,
    precision=settings.PLACES_COORDINATE_PRECISION,
)

# --- Dependency Injection ---
def get_places_cache() -> PlacesCache:
    return places_cache

def get_overpass_client() -> OverpassClient:
    return overpass_client

def get_places_service(
    cache: PlacesCache = Depends(get_places_cache),
    client: OverpassClient = Depends(get_overpass_client),
) -> NearbyPlacesService:
    return NearbyPlacesService(
        cache,
        client,
        max_results=settings.PLACES_MAX_RESULTS,
        query_timeout_seconds=settings.OVERPASS_QUERY_TIMEOUT_SECONDS,
    )

@router.get("/categories", response_model=Dict[str, Category])
async def list_categories(service: NearbyPlacesService = Depends(get_places_service)):
    return dict(service.get_categories())

@router.post("/nearby", response_model=NearbyPlacesResult)
async def nearby_places_endpoint(
    request: NearbyPlacesRequest,
    service: NearbyPlacesService = Depends(get_places_service)
):
    """Always answers 200; upstream failures come back as success=false."""
    radius = request.radius or settings.PLACES_DEFAULT_RADIUS_METERS
    return await service.fetch_nearby_places(request.category, request.lat, request.lng, radius)

@router.delete("/cache", response_model=ClearCacheResponse)
async def clear_cache_endpoint(service: NearbyPlacesService = Depends(get_places_service)):
    return ClearCacheResponse(cleared=service.clear_cache())
