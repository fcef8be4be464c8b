import logging
from typing import Any, List, Optional
from sqlalchemy.orm import Session

from allclear.database import commit
from allclear.errors import NotFound
from allclear.models import SavedLocation
from allclear.models.validators import coerce_location_type, validate_coordinates
from allclear.utils import utcnow

logger = logging.getLogger("allclear-api")

def _get_owned_location(db: Session, owner_id: int, location_id: int) -> SavedLocation:
    location = db.query(SavedLocation).filter(
        SavedLocation.id == location_id,
        SavedLocation.owner_id == owner_id
    ).first()
    if location is None:
        raise NotFound("Location not found")
    return location

def list_locations(db: Session, owner_id: int) -> List[SavedLocation]:
    """Saved locations of one owner, newest first"""
    return db.query(SavedLocation).filter(
        SavedLocation.owner_id == owner_id
    ).order_by(SavedLocation.created_at.desc(), SavedLocation.id.desc()).all()

def add_location(db: Session, owner_id: int, name: str, lat: float, lng: float,
                 type: Optional[Any] = None, description: Optional[str] = None) -> SavedLocation:
    """Save a point of interest; unknown types are stored as Other"""
    validate_coordinates(lat, lng)

    now = utcnow()
    location = SavedLocation(
        owner_id=owner_id,
        name=name,
        type=coerce_location_type(type),
        latitude=lat,
        longitude=lng,
        description=description or "",
        created_at=now,
        updated_at=now
    )
    db.add(location)
    commit(db)
    db.refresh(location)

    logger.info(f"Created location {location.id} ({location.type}) for user_id: {owner_id}")
    return location

def update_coordinates(db: Session, owner_id: int, location_id: int, lat: Any, lng: Any) -> SavedLocation:
    """Move a saved location"""
    validate_coordinates(lat, lng)

    location = _get_owned_location(db, owner_id, location_id)
    location.latitude = float(lat)
    location.longitude = float(lng)
    location.updated_at = utcnow()
    commit(db)
    db.refresh(location)

    logger.info(f"Updated coordinates of location {location_id}")
    return location

def remove_location(db: Session, owner_id: int, location_id: int) -> None:
    """Delete a saved location permanently"""
    location = _get_owned_location(db, owner_id, location_id)
    db.delete(location)
    commit(db)

    logger.info(f"Deleted location {location_id} for user_id: {owner_id}")
