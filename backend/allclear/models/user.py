from sqlalchemy import Column, Integer, String, Boolean
from sqlalchemy.orm import relationship
from allclear.models.base import Base, Timestamp
from allclear.utils import utcnow

class User(Base):
    """Account used for authentication; email is stored lower-cased"""
    __tablename__ = "users"
    
    id = Column(Integer, primary_key=True, index=True)
    first_name = Column(String(100), nullable=False)
    last_name = Column(String(100), nullable=False)
    email = Column(String(255), unique=True, index=True, nullable=False)
    hashed_password = Column(String(255), nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_login = Column(Timestamp, nullable=True)
    created_at = Column(Timestamp, default=utcnow)
    updated_at = Column(Timestamp, default=utcnow, onupdate=utcnow)
    
    # Relationships
    friends = relationship("Friend", back_populates="owner", cascade="all, delete-orphan")
    locations = relationship("SavedLocation", back_populates="owner", cascade="all, delete-orphan")
