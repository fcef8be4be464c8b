from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from allclear.auth import get_settings
from allclear.config import Settings
from allclear.database import get_db_session
from allclear.models.auth import AuthResponse, SignInRequest, SignUpRequest, UserProfile
from allclear.registry import accounts

router = APIRouter(
    prefix="/api/auth",
    tags=["authentication"]
)

@router.post("/signup", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
def sign_up(
    user_data: SignUpRequest,
    database: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings)
):
    """
    Register a new user

    Creates the account with a hashed password and returns a session token,
    so the client is signed in straight away.
    """
    user, token = accounts.sign_up(
        database,
        settings,
        first_name=user_data.first_name,
        last_name=user_data.last_name,
        email=user_data.email,
        password=user_data.password
    )
    return AuthResponse(
        message="User created successfully",
        token=token,
        user=UserProfile.from_user(user)
    )

@router.post("/signin", response_model=AuthResponse)
def sign_in(
    credentials: SignInRequest,
    database: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings)
):
    """
    Authenticate with email and password and receive a session token

    Unknown emails and wrong passwords get the same 401 response.
    """
    user, token = accounts.sign_in(database, settings, credentials.email, credentials.password)
    return AuthResponse(
        message="Sign in successful",
        token=token,
        user=UserProfile.from_user(user)
    )
