"""
Nearby place categories.
Each category maps to one or more OSM "key=value" tags; a place matching any tag qualifies.
"""
from types import MappingProxyType
from typing import Iterable, Mapping, Tuple

from buildex.core.errors import InvalidCategory
from buildex.models.places_model import Category


def _category(key: str, label: str, icon: str, color: str, tags: Iterable[str]) -> Category:
    return Category(key=key, label=label, icon=icon, color=color, tags=tuple(tags))


_CATEGORY_LIST = [
    _category("cinema", "Movie Theatre", "bi-film", "#E91E63", ["amenity=cinema"]),
    _category("hospital", "Hospital", "bi-hospital", "#F44336", ["amenity=hospital", "amenity=clinic"]),
    _category("school", "School", "bi-book", "#2196F3", ["amenity=school"]),
    _category("college", "College", "bi-mortarboard", "#9C27B0", ["amenity=college", "amenity=university"]),
    _category("restaurant", "Restaurant", "bi-shop", "#FF9800", ["amenity=restaurant"]),
    _category("cafe", "Cafe", "bi-cup-hot", "#795548", ["amenity=cafe"]),
    _category("mall", "Mall", "bi-bag", "#4CAF50", ["shop=mall", "shop=supermarket"]),
    _category("bus_stop", "Bus Stop", "bi-bus-front", "#3F51B5", ["highway=bus_stop", "amenity=bus_station"]),
    _category("metro", "Metro/Railway", "bi-train-front", "#673AB7", ["railway=station", "station=subway"]),
    _category("park", "Park", "bi-tree", "#8BC34A", ["leisure=park", "leisure=garden"]),
    _category("gym", "Gym", "bi-bicycle", "#FF5722", ["leisure=fitness_centre", "amenity=gym"]),
]

# Fixed for the process lifetime; read-only view so nothing can register categories at runtime.
CATEGORIES: Mapping[str, Category] = MappingProxyType({c.key: c for c in _CATEGORY_LIST})


def get_categories() -> Mapping[str, Category]:
    return CATEGORIES


def get_category(key: str, categories: Mapping[str, Category] = CATEGORIES) -> Category:
    try:
        return categories[key]
    except KeyError:
        raise InvalidCategory(key) from None


def split_tag(tag: str) -> Tuple[str, str]:
    """Split an OSM filter like "amenity=hospital" into ("amenity", "hospital")."""
    key, sep, value = tag.partition("=")
    if not sep or not key or not value:
        raise ValueError(f"Malformed OSM tag filter: {tag!r}")
    return key, value
