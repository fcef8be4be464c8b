from allclear.routers.general import router as general_router
from allclear.routers.auth import router as auth_router
from allclear.routers.users import router as users_router
from allclear.routers.friends import router as friends_router
from allclear.routers.locations import router as locations_router

__all__ = [
    "general_router",
    "auth_router",
    "users_router",
    "friends_router",
    "locations_router"
]
