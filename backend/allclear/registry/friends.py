"""
Friend registry.

Every read and write is scoped to the owner's id, and an id that exists
under another owner is indistinguishable from one that does not exist.
Removal is a soft delete: the row stays with ``is_active`` false.
"""
import logging
from typing import Any, List, Optional
from sqlalchemy.orm import Session

from allclear.config import FriendStatus
from allclear.database import DuplicateKeyError, commit
from allclear.errors import DuplicateFriend, NotFound
from allclear.models import Friend
from allclear.models.validators import validate_coordinates
from allclear.utils import utcnow

logger = logging.getLogger("allclear-api")

def _get_owned_friend(db: Session, owner_id: int, friend_id: int) -> Friend:
    friend = db.query(Friend).filter(
        Friend.id == friend_id,
        Friend.owner_id == owner_id,
        Friend.is_active == True
    ).first()
    if friend is None:
        raise NotFound("Friend not found")
    return friend

def list_friends(db: Session, owner_id: int) -> List[Friend]:
    """Active friends of one owner, newest first"""
    return db.query(Friend).filter(
        Friend.owner_id == owner_id,
        Friend.is_active == True
    ).order_by(Friend.created_at.desc(), Friend.id.desc()).all()

def friend_exists(db: Session, owner_id: int, email: str) -> bool:
    """Whether the owner already tracks an active friend with this email"""
    return db.query(Friend.id).filter(
        Friend.owner_id == owner_id,
        Friend.active_email == email,
        Friend.is_active == True
    ).first() is not None

def add_friend(db: Session, owner_id: int, username: str, email: str, lat: float, lng: float,
               status: Optional[FriendStatus] = None) -> Friend:
    """Add a friend for the owner"""
    email = email.strip().lower()
    if friend_exists(db, owner_id, email):
        raise DuplicateFriend()

    now = utcnow()
    friend = Friend(
        owner_id=owner_id,
        username=username,
        email=email,
        active_email=email,
        latitude=lat,
        longitude=lng,
        status=(status or FriendStatus.UNKNOWN).value,
        is_active=True,
        last_updated=now,
        created_at=now
    )
    db.add(friend)
    try:
        commit(db)
    except DuplicateKeyError:
        raise DuplicateFriend()
    db.refresh(friend)

    logger.info(f"Added friend {friend.id} for user_id: {owner_id}")
    return friend

def update_status(db: Session, owner_id: int, friend_id: int, status: FriendStatus) -> Friend:
    """Set a friend's status"""
    friend = _get_owned_friend(db, owner_id, friend_id)
    friend.status = FriendStatus(status).value
    friend.last_updated = utcnow()
    commit(db)
    db.refresh(friend)

    logger.info(f"Updated status of friend {friend_id} to {friend.status}")
    return friend

def update_location(db: Session, owner_id: int, friend_id: int, lat: Any, lng: Any) -> Friend:
    """Move a friend; coordinates are checked before storage is touched"""
    validate_coordinates(lat, lng)

    friend = _get_owned_friend(db, owner_id, friend_id)
    friend.latitude = float(lat)
    friend.longitude = float(lng)
    friend.last_updated = utcnow()
    commit(db)
    db.refresh(friend)

    logger.info(f"Updated location of friend {friend_id}")
    return friend

def remove_friend(db: Session, owner_id: int, friend_id: int) -> None:
    """Soft-delete a friend"""
    friend = _get_owned_friend(db, owner_id, friend_id)
    friend.deactivate()
    commit(db)

    logger.info(f"Removed friend {friend_id} for user_id: {owner_id}")
