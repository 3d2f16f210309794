"""
Turns raw Overpass elements into Place records, nearest first.
"""
import logging
from typing import Any, Dict, List, Optional, Tuple

from buildex.core.geo import haversine_km
from buildex.core.logger import logs
from buildex.models.places_model import Place

DEFAULT_LIMIT = 20


def _coordinates(element: Dict[str, Any]) -> Optional[Tuple[float, float]]:
    """Nodes carry lat/lon directly; ways carry a center point."""
    lat, lon = element.get("lat"), element.get("lon")
    if lat is not None and lon is not None:
        return float(lat), float(lon)

    center = element.get("center") or {}
    lat, lon = center.get("lat"), center.get("lon")
    if lat is not None and lon is not None:
        return float(lat), float(lon)

    return None


def _address(tags: Dict[str, str]) -> Optional[str]:
    street = tags.get("addr:street")
    if not street:
        return None

    street_line = " ".join(part for part in (tags.get("addr:housenumber"), street) if part)
    return ", ".join(part for part in (street_line, tags.get("addr:city")) if part)


def _to_place(element: Dict[str, Any], origin_lat: float, origin_lng: float, category_key: str) -> Optional[Place]:
    tags = element.get("tags") or {}
    name = tags.get("name")
    if not name:
        return None

    coords = _coordinates(element)
    if coords is None:
        return None
    lat, lon = coords

    return Place(
        id=element.get("id"),
        name=name,
        latitude=lat,
        longitude=lon,
        category=category_key,
        distance_km=haversine_km(origin_lat, origin_lng, lat, lon),
        address=_address(tags),
        phone=tags.get("phone") or tags.get("contact:phone"),
        website=tags.get("website") or tags.get("contact:website"),
        opening_hours=tags.get("opening_hours"),
    )


def normalize(
    raw_response: Dict[str, Any],
    origin_lat: float,
    origin_lng: float,
    category_key: str,
    limit: int = DEFAULT_LIMIT,
) -> List[Place]:
    places: List[Place] = []
    for element in raw_response.get("elements") or []:
        try:
            place = _to_place(element, origin_lat, origin_lng, category_key)
        except (AttributeError, TypeError, ValueError) as e:
            # one broken element must not sink the rest of the response
            logs.log(logging.DEBUG, f"Skipping malformed Overpass element: {str(e)}")
            continue
        if place is not None:
            places.append(place)

    places.sort(key=lambda p: p.distance_km)
    return places[:limit]
