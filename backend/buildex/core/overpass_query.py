from typing import List, Mapping

from buildex.core.categories import CATEGORIES, get_category, split_tag
from buildex.models.places_model import Category


def build_query(
    category_key: str,
    lat: float,
    lng: float,
    radius_meters: int = 3000,
    timeout_seconds: int = 25,
    categories: Mapping[str, Category] = CATEGORIES,
) -> str:
    """
    Build an Overpass QL union query for every tag of a category.
    Each tag yields a node clause and a way clause; ways are returned with their center.
    Raises InvalidCategory for unknown keys.
    """
    category = get_category(category_key, categories)

    clauses: List[str] = []
    for tag in category.tags:
        key, value = split_tag(tag)
        around = f"(around:{radius_meters},{lat},{lng})"
        clauses.append(f'node["{key}"="{value}"]{around};')
        clauses.append(f'way["{key}"="{value}"]{around};')

    union = "\n".join(clauses)
    return f"""[out:json][timeout:{timeout_seconds}];
(
{union}
);
out center tags;
"""
