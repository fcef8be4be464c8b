from pydantic import BaseModel
from typing import Optional

from allclear.models.common import CamelModel, RequestModel, UtcDatetime
from allclear.models.validators import (
    OptionalEmail, OptionalText, ValidEmail, password_rule, required_secret, required_text
)

class SignUpRequest(RequestModel):
    """User registration model"""
    first_name: required_text("First name") = None
    last_name: required_text("Last name") = None
    email: ValidEmail = None
    password: password_rule("Password") = None

class SignInRequest(RequestModel):
    """Credentials for sign-in"""
    email: ValidEmail = None
    password: required_secret("Password") = None

class ProfileUpdate(RequestModel):
    """Partial profile update - omitted or empty fields stay unchanged"""
    first_name: OptionalText = None
    last_name: OptionalText = None
    email: OptionalEmail = None

class PasswordChange(RequestModel):
    """Password change model"""
    current_password: required_secret("Current password") = None
    new_password: password_rule("New password") = None

class UserProfile(CamelModel):
    """User information response model (never includes the password hash)"""
    id: int
    first_name: str
    last_name: str
    email: str
    is_active: bool
    last_login: Optional[UtcDatetime] = None
    created_at: Optional[UtcDatetime] = None

    @classmethod
    def from_user(cls, user) -> "UserProfile":
        return cls(
            id=user.id,
            first_name=user.first_name,
            last_name=user.last_name,
            email=user.email,
            is_active=user.is_active,
            last_login=user.last_login,
            created_at=user.created_at,
        )

class AuthResponse(BaseModel):
    """Token plus profile, returned by sign-up and sign-in"""
    message: str
    token: str
    user: UserProfile

class ProfileResponse(BaseModel):
    user: UserProfile

class ProfileUpdateResponse(BaseModel):
    message: str
    user: UserProfile
