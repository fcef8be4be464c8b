from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from allclear.auth import get_current_user
from allclear.database import get_db_session
from allclear.models import User
from allclear.models.auth import (
    PasswordChange, ProfileResponse, ProfileUpdate, ProfileUpdateResponse, UserProfile
)
from allclear.models.common import MessageResponse
from allclear.registry import accounts

router = APIRouter(
    prefix="/api/user",
    tags=["user"]
)

@router.get("/profile", response_model=ProfileResponse)
def read_profile(current_user: User = Depends(get_current_user)):
    """
    Get current user profile
    """
    return ProfileResponse(user=UserProfile.from_user(current_user))

@router.put("/profile", response_model=ProfileUpdateResponse)
def update_profile(
    profile_data: ProfileUpdate,
    database: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Update first name, last name and/or email

    Only the supplied fields change. Moving to an email held by another
    account is rejected.
    """
    user = accounts.update_profile(
        database,
        current_user,
        first_name=profile_data.first_name,
        last_name=profile_data.last_name,
        email=profile_data.email
    )
    return ProfileUpdateResponse(
        message="Profile updated successfully",
        user=UserProfile.from_user(user)
    )

@router.put("/change-password", response_model=MessageResponse)
def change_password(
    password_data: PasswordChange,
    database: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Change the password after confirming the current one
    """
    accounts.change_password(
        database,
        current_user,
        current_password=password_data.current_password,
        new_password=password_data.new_password
    )
    return MessageResponse(message="Password changed successfully")

@router.delete("/delete-account", response_model=MessageResponse)
def delete_account(
    database: Session = Depends(get_db_session),
    current_user: User = Depends(get_current_user)
):
    """
    Permanently delete the account along with its friends and saved locations
    """
    accounts.delete_account(database, current_user.id)
    return MessageResponse(message="Account deleted successfully")
