import logging
from typing import Optional, Tuple
from sqlalchemy.orm import Session

from allclear.auth import create_access_token, dummy_verify, hash_password, verify_password
from allclear.config import Settings
from allclear.database import DuplicateKeyError, commit
from allclear.errors import (
    AccountDeactivated, DuplicateEmail, EmailTaken, InvalidCredentials, NotFound, WrongPassword
)
from allclear.models import Friend, SavedLocation, User
from allclear.utils import utcnow

logger = logging.getLogger("allclear-api")

def get_user_by_email(db: Session, email: str) -> Optional[User]:
    """Get user by email (emails are stored lower-cased)"""
    return db.query(User).filter(User.email == email.strip().lower()).first()

def get_user_by_id(db: Session, user_id: int) -> Optional[User]:
    """Get user by ID"""
    return db.query(User).filter(User.id == user_id).first()

def sign_up(db: Session, settings: Settings, first_name: str, last_name: str,
            email: str, password: str) -> Tuple[User, str]:
    """Create an account and issue its first session token"""
    email = email.strip().lower()
    if get_user_by_email(db, email):
        raise DuplicateEmail()

    user = User(
        first_name=first_name,
        last_name=last_name,
        email=email,
        hashed_password=hash_password(password),
        is_active=True
    )
    db.add(user)
    try:
        commit(db)
    except DuplicateKeyError:
        # Lost a race with a concurrent sign-up for the same email
        raise DuplicateEmail()
    db.refresh(user)

    logger.info(f"Created user: {user.id}")
    return user, create_access_token(settings, user.id, user.email)

def sign_in(db: Session, settings: Settings, email: str, password: str) -> Tuple[User, str]:
    """Check credentials, record the login and issue a session token"""
    user = get_user_by_email(db, email)
    if user is None:
        dummy_verify()
        logger.warning("Sign-in rejected: invalid credentials")
        raise InvalidCredentials()

    if not verify_password(password, user.hashed_password):
        logger.warning("Sign-in rejected: invalid credentials")
        raise InvalidCredentials()

    if not user.is_active:
        logger.warning(f"Sign-in rejected: account {user.id} is deactivated")
        raise AccountDeactivated()

    user.last_login = utcnow()
    commit(db)
    db.refresh(user)

    logger.info(f"User signed in: {user.id}")
    return user, create_access_token(settings, user.id, user.email)

def update_profile(db: Session, user: User, first_name: Optional[str] = None,
                   last_name: Optional[str] = None, email: Optional[str] = None) -> User:
    """Update only the supplied profile fields"""
    if email is not None:
        email = email.strip().lower()
        if email != user.email:
            existing_user = get_user_by_email(db, email)
            if existing_user and existing_user.id != user.id:
                raise EmailTaken()
            user.email = email

    if first_name:
        user.first_name = first_name
    if last_name:
        user.last_name = last_name

    try:
        commit(db)
    except DuplicateKeyError:
        raise EmailTaken()
    db.refresh(user)

    logger.info(f"Updated profile for user: {user.id}")
    return user

def change_password(db: Session, user: User, current_password: str, new_password: str) -> None:
    """Replace the stored hash after checking the current password"""
    if not verify_password(current_password, user.hashed_password):
        raise WrongPassword()

    user.hashed_password = hash_password(new_password)
    commit(db)
    logger.info(f"Changed password for user: {user.id}")

def delete_account(db: Session, user_id: int) -> None:
    """
    Permanently delete a user together with their friends and saved locations
    """
    user = get_user_by_id(db, user_id)
    if not user:
        raise NotFound("User not found")

    # Explicit bulk deletes so soft-deleted friends are purged too
    db.query(Friend).filter(Friend.owner_id == user_id).delete(synchronize_session=False)
    db.query(SavedLocation).filter(SavedLocation.owner_id == user_id).delete(synchronize_session=False)
    db.delete(user)
    commit(db)
    logger.info(f"Deleted user: {user_id}")
