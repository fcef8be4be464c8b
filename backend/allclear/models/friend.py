from sqlalchemy import Column, Integer, String, Float, Boolean, ForeignKey, UniqueConstraint
from sqlalchemy.orm import relationship
from allclear.config import FriendStatus
from allclear.models.base import Base, Timestamp
from allclear.utils import utcnow

class Friend(Base):
    """A contact tracked by one owner; removal only flips is_active"""
    __tablename__ = "friends"
    __table_args__ = (
        # active_email is NULL once the friend is removed, so only active rows collide
        UniqueConstraint("owner_id", "active_email", name="uq_friends_owner_active_email"),
    )
    
    id = Column(Integer, primary_key=True, index=True)
    owner_id = Column(Integer, ForeignKey("users.id"), index=True, nullable=False)
    username = Column(String(50), nullable=False)
    email = Column(String(255), nullable=False)
    active_email = Column(String(255), nullable=True)
    latitude = Column(Float, nullable=False)
    longitude = Column(Float, nullable=False)
    status = Column(String(20), default=FriendStatus.UNKNOWN.value, nullable=False)
    is_active = Column(Boolean, default=True, nullable=False)
    last_updated = Column(Timestamp, default=utcnow)
    created_at = Column(Timestamp, default=utcnow)
    
    # Relationships
    owner = relationship("User", back_populates="friends")

    def deactivate(self) -> None:
        self.is_active = False
        self.active_email = None
