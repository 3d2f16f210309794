import logging
from typing import Mapping

from buildex.core.categories import CATEGORIES
from buildex.core.errors import AllEndpointsUnavailable, InvalidCategory
from buildex.core.logger import logs
from buildex.core.overpass_connection import OverpassClient
from buildex.core.overpass_query import build_query
from buildex.models.places_model import Category, NearbyPlacesResult
from buildex.repos.places_repo import PlacesCache
from buildex.services.place_normalizer import normalize

INVALID_CATEGORY_MESSAGE = "Invalid category"
TIMEOUT_MESSAGE = "Request timed out. Please try again later."
UNAVAILABLE_MESSAGE = "Nearby places service is currently unavailable. Please try again later."


class NearbyPlacesService:
    """
    Facade for nearby place lookups around a property.
    Never raises for lookup failures; every outcome is a NearbyPlacesResult.
    """

    def __init__(
        self,
        cache: PlacesCache,
        client: OverpassClient,
        categories: Mapping[str, Category] = CATEGORIES,
        max_results: int = 20,
        query_timeout_seconds: int = 25,
    ):
        self.cache = cache
        self.client = client
        self.categories = categories
        self.max_results = max_results
        self.query_timeout_seconds = query_timeout_seconds

    async def fetch_nearby_places(
        self, category: str, lat: float, lng: float, radius: int = 3000
    ) -> NearbyPlacesResult:
        # 1. Check Cache
        cache_key = self.cache.make_key(category, lat, lng, radius)
        cached = self.cache.get(cache_key)
        if cached is not None:
            logs.log(logging.INFO, f"✓ Places cache HIT for {cache_key}")
            return NearbyPlacesResult(success=True, data=cached, from_cache=True)

        logs.log(logging.INFO, f"✗ Places cache MISS for {cache_key}. Fetching from Overpass API...")

        # 2. Build the query; unknown categories stop here, before any network call
        try:
            query = build_query(
                category, lat, lng, radius,
                timeout_seconds=self.query_timeout_seconds,
                categories=self.categories,
            )
        except InvalidCategory as e:
            logs.log(logging.WARNING, str(e))
            return NearbyPlacesResult(success=False, error=INVALID_CATEGORY_MESSAGE, data=[])

        # 3. Query mirrors and normalize
        try:
            raw = await self.client.query(query)
            places = normalize(raw, lat, lng, category, limit=self.max_results)
        except AllEndpointsUnavailable as e:
            message = TIMEOUT_MESSAGE if e.timed_out else UNAVAILABLE_MESSAGE
            return NearbyPlacesResult(success=False, error=message, data=[])
        except Exception as e:
            logs.log(logging.ERROR, f"Nearby places lookup failed: {str(e)}", exc_info=True)
            return NearbyPlacesResult(success=False, error=UNAVAILABLE_MESSAGE, data=[])

        # 4. Cache successful results only
        self.cache.put(cache_key, places)
        logs.log(logging.INFO, f"Found {len(places)} {category} places within {radius}m of {lat}, {lng}")

        return NearbyPlacesResult(success=True, data=places, from_cache=False)

    def get_categories(self) -> Mapping[str, Category]:
        return self.categories

    def clear_cache(self) -> int:
        cleared = self.cache.clear()
        logs.log(logging.INFO, f"Places cache cleared ({cleared} entries)")
        return cleared
