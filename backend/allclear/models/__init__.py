from allclear.models.base import Base
from allclear.models.user import User
from allclear.models.friend import Friend
from allclear.models.location import SavedLocation

__all__ = [
    "Base",
    "User",
    "Friend",
    "SavedLocation"
]
