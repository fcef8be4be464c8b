from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from allclear.auth import get_current_user
from allclear.config import MAX_RECORD_ID
from allclear.database import get_db_session
from allclear.models import User
from allclear.models.common import MessageResponse
from allclear.models.friends import CoordinatesUpdate
from allclear.models.locations import (
    LocationCreate, LocationEnvelope, LocationListResponse, LocationResponse
)
from allclear.registry import locations as registry

router = APIRouter(
    prefix="/api/locations",
    tags=["locations"]
)

@router.get("", response_model=LocationListResponse)
def list_locations(
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Get the current user's saved locations
    """
    locations = registry.list_locations(db, current_user.id)
    return LocationListResponse(locations=[LocationResponse.from_location(location) for location in locations])

@router.post("", response_model=LocationEnvelope, status_code=status.HTTP_201_CREATED)
def add_location(
    location_data: LocationCreate,
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Save a point of interest
    """
    location = registry.add_location(
        db,
        owner_id=current_user.id,
        name=location_data.name,
        lat=location_data.location.lat,
        lng=location_data.location.lng,
        type=location_data.type,
        description=location_data.description
    )
    return LocationEnvelope(location=LocationResponse.from_location(location))

@router.put("/{location_id}/coordinates", response_model=LocationEnvelope)
def update_location_coordinates(
    location_id: Annotated[int, Path(le=MAX_RECORD_ID)],
    coordinates: CoordinatesUpdate,
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Move a saved location
    """
    location = registry.update_coordinates(db, current_user.id, location_id, coordinates.lat, coordinates.lng)
    return LocationEnvelope(location=LocationResponse.from_location(location))

@router.delete("/{location_id}", response_model=MessageResponse)
def delete_location(
    location_id: Annotated[int, Path(le=MAX_RECORD_ID)],
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Delete a saved location permanently
    """
    registry.remove_location(db, current_user.id, location_id)
    return MessageResponse(message="Location deleted successfully")
