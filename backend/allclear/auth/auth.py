from typing import Optional, Dict, Any
from datetime import timedelta
from jose import ExpiredSignatureError, JWTError, jwt
from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from passlib.context import CryptContext
from sqlalchemy.orm import Session

from allclear.config import Settings
from allclear.database import get_db_session
from allclear.errors import InvalidToken, TokenExpired, Unauthenticated, UserNotFound
from allclear.models import User
from allclear.utils import utcnow

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Bearer token extraction; missing credentials are reported by get_current_user
bearer_scheme = HTTPBearer(auto_error=False)

def hash_password(password: str) -> str:
    """Hash a password"""
    return pwd_context.hash(password)

def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hashed password"""
    return pwd_context.verify(plain_password, hashed_password)

def dummy_verify() -> None:
    """Spend the same hashing time as a real check when no account matched"""
    pwd_context.dummy_verify()

def get_settings(request: Request) -> Settings:
    return request.app.state.settings

def create_access_token(settings: Settings, user_id: int, email: str,
                        expires_delta: Optional[timedelta] = None) -> str:
    """
    Create a signed session token for a user
    """
    issued_at = utcnow()
    if expires_delta is None:
        expires_delta = timedelta(hours=settings.token_expire_hours)

    to_encode = {
        "userId": user_id,
        "email": email,
        "iat": issued_at,
        "exp": issued_at + expires_delta,
    }
    return jwt.encode(to_encode, settings.signing_key, algorithm=settings.jwt_algorithm)

def decode_access_token(settings: Settings, token: str) -> Dict[str, Any]:
    """
    Verify a session token and return its claims
    """
    try:
        payload = jwt.decode(token, settings.signing_key, algorithms=[settings.jwt_algorithm])
    except ExpiredSignatureError:
        raise TokenExpired()
    except JWTError:
        raise InvalidToken()

    if not isinstance(payload.get("userId"), int):
        raise InvalidToken()
    return payload

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    db: Session = Depends(get_db_session),
    settings: Settings = Depends(get_settings)
) -> User:
    """
    Resolve the bearer token to an active user for this request
    """
    if credentials is None or not credentials.credentials:
        raise Unauthenticated()

    payload = decode_access_token(settings, credentials.credentials)

    user = db.query(User).filter(User.id == payload["userId"]).first()
    if user is None or not user.is_active:
        raise UserNotFound()

    return user
