from typing import Annotated

from fastapi import APIRouter, Depends, Path, status
from sqlalchemy.orm import Session

from allclear.auth import get_current_user
from allclear.config import MAX_RECORD_ID
from allclear.database import get_db_session
from allclear.models import User
from allclear.models.common import MessageResponse
from allclear.models.friends import (
    CoordinatesUpdate, FriendCreate, FriendCreatedResponse, FriendEnvelope,
    FriendListResponse, FriendResponse, FriendStatusUpdate
)
from allclear.registry import friends as registry

router = APIRouter(
    prefix="/api/friends",
    tags=["friends"]
)

@router.get("", response_model=FriendListResponse)
def list_friends(
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Get the current user's active friends, newest first
    """
    friends = registry.list_friends(db, current_user.id)
    return FriendListResponse(friends=[FriendResponse.from_friend(friend) for friend in friends])

@router.post("", response_model=FriendCreatedResponse, status_code=status.HTTP_201_CREATED)
def add_friend(
    friend_data: FriendCreate,
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Add a friend to track

    Each email can be tracked once per user; status defaults to Unknown.
    """
    friend = registry.add_friend(
        db,
        owner_id=current_user.id,
        username=friend_data.username,
        email=friend_data.email,
        lat=friend_data.location.lat,
        lng=friend_data.location.lng,
        status=friend_data.status
    )
    return FriendCreatedResponse(
        message="Friend added successfully",
        friend=FriendResponse.from_friend(friend)
    )

@router.put("/{friend_id}/status", response_model=FriendEnvelope)
def update_friend_status(
    friend_id: Annotated[int, Path(le=MAX_RECORD_ID)],
    status_data: FriendStatusUpdate,
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Change a friend's status
    """
    friend = registry.update_status(db, current_user.id, friend_id, status_data.status)
    return FriendEnvelope(friend=FriendResponse.from_friend(friend))

@router.put("/{friend_id}/location", response_model=FriendEnvelope)
def update_friend_location(
    friend_id: Annotated[int, Path(le=MAX_RECORD_ID)],
    coordinates: CoordinatesUpdate,
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Move a friend on the map
    """
    friend = registry.update_location(db, current_user.id, friend_id, coordinates.lat, coordinates.lng)
    return FriendEnvelope(friend=FriendResponse.from_friend(friend))

@router.delete("/{friend_id}", response_model=MessageResponse)
def remove_friend(
    friend_id: Annotated[int, Path(le=MAX_RECORD_ID)],
    db: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Stop tracking a friend (the record is kept but marked inactive)
    """
    registry.remove_friend(db, current_user.id, friend_id)
    return MessageResponse(message="Friend removed successfully")
