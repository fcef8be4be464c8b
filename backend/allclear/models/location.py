from sqlalchemy import Column, Integer, String, Float, ForeignKey, Text
from sqlalchemy.orm import relationship
from allclear.config import LocationType
from allclear.models.base import Base, Timestamp
from allclear.utils import utcnow

class SavedLocation(Base):
    """A user's named point of interest"""
    __tablename__ = "locations"
    
    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    name = Column(String(100), nullable=False)
    type = Column(String(30), default=LocationType.OTHER.value, nullable=False)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    description = Column(Text, default="", nullable=False)
    created_at = Column(Timestamp, default=utcnow)
    updated_at = Column(Timestamp, default=utcnow, onupdate=utcnow)
    
    # Relationships
    owner = relationship("User", back_populates="locations")
