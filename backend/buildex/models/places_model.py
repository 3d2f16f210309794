from pydantic import BaseModel, ConfigDict, Field
from typing import List, Optional, Tuple

from buildex.models.base_model import CamelModel


class Category(CamelModel):
    model_config = ConfigDict(frozen=True)

    key: str
    label: str
    icon: str
    color: str
    tags: Tuple[str, ...] = Field(..., min_length=1)


class Place(CamelModel):
    # cached lists hand out these instances, so they must not change
    model_config = ConfigDict(frozen=True)

    id: int
    name: str
    latitude: float
    longitude: float
    category: str
    distance_km: float = Field(..., ge=0)
    address: Optional[str] = None
    phone: Optional[str] = None
    website: Optional[str] = None
    opening_hours: Optional[str] = None


class NearbyPlacesRequest(CamelModel):
    category: str
    lat: float = Field(..., ge=-90, le=90)
    lng: float = Field(..., ge=-180, le=180)
    radius: Optional[int] = Field(None, gt=0, description="Search radius in metres; server default when omitted")


class NearbyPlacesResult(CamelModel):
    success: bool
    data: List[Place] = []
    from_cache: Optional[bool] = None
    error: Optional[str] = None


class ClearCacheResponse(BaseModel):
    cleared: int
