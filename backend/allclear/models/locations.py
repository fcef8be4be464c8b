from pydantic import BaseModel, Field
from typing import List, Optional

from allclear.models.common import CamelModel, RequestModel, UtcDatetime
from allclear.models.friends import GeoPoint
from allclear.models.validators import CategoryType, OptionalText, required_text

class LocationCreate(RequestModel):
    """Model for saving a point of interest"""
    name: required_text("Name") = None
    type: CategoryType = None
    location: GeoPoint = Field(default_factory=dict)
    description: OptionalText = None

class LocationResponse(CamelModel):
    """Map-facing projection of a saved location"""
    id: int
    name: str
    type: str
    lat: float
    lng: float
    description: str
    created_at: Optional[UtcDatetime] = None
    updated_at: Optional[UtcDatetime] = None

    @classmethod
    def from_location(cls, location) -> "LocationResponse":
        return cls(
            id=location.id,
            name=location.name,
            type=location.type,
            lat=location.latitude,
            lng=location.longitude,
            description=location.description or "",
            created_at=location.created_at,
            updated_at=location.updated_at,
        )

class LocationListResponse(BaseModel):
    locations: List[LocationResponse]

class LocationEnvelope(BaseModel):
    location: LocationResponse
