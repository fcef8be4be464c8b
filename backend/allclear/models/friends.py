from pydantic import BaseModel, Field
from typing import Any, List, Optional

from allclear.config import USERNAME_MAX_LENGTH, FriendStatus
from allclear.models.common import CamelModel, RequestModel, UtcDatetime
from allclear.models.validators import Latitude, Longitude, ValidEmail, required_text

class GeoPoint(RequestModel):
    """Map coordinates as sent by the client"""
    lat: Latitude = None
    lng: Longitude = None

class FriendCreate(RequestModel):
    """Model for adding a friend"""
    username: required_text("Username", max_length=USERNAME_MAX_LENGTH) = None
    email: ValidEmail = None
    location: GeoPoint = Field(default_factory=dict)
    status: Optional[FriendStatus] = None

class FriendStatusUpdate(RequestModel):
    """Model for changing a friend's status"""
    status: FriendStatus

class CoordinatesUpdate(BaseModel):
    """
    Raw coordinates for a position update.

    Values are left untyped here; the registry checks them and answers
    with a single "Invalid coordinates" error.
    """
    lat: Any = None
    lng: Any = None

class FriendResponse(CamelModel):
    """Map-facing projection of a friend"""
    id: int
    name: str
    status: str
    lat: float
    lng: float
    last_updated: Optional[UtcDatetime] = None

    @classmethod
    def from_friend(cls, friend) -> "FriendResponse":
        return cls(
            id=friend.id,
            name=friend.username,
            status=friend.status,
            lat=friend.latitude,
            lng=friend.longitude,
            last_updated=friend.last_updated,
        )

class FriendListResponse(BaseModel):
    friends: List[FriendResponse]

class FriendEnvelope(BaseModel):
    friend: FriendResponse

class FriendCreatedResponse(BaseModel):
    message: str
    friend: FriendResponse
