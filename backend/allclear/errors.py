from typing import Any, Dict, List, Optional

from fastapi import status


class AppError(Exception):
    """Base class for errors surfaced to API callers as {"message": ...}"""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Internal server error"

    def __init__(self, message: Optional[str] = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class ValidationFailed(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Validation failed"

    def __init__(self, errors: List[Dict[str, Any]], message: Optional[str] = None):
        super().__init__(message)
        self.errors = errors


# Session errors
class Unauthenticated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Access token required"


class InvalidToken(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Invalid token"


class TokenExpired(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "Token expired"


class UserNotFound(AppError):
    status_code = status.HTTP_403_FORBIDDEN
    default_message = "User not found"


# Account errors
class InvalidCredentials(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Invalid email or password"


class AccountDeactivated(AppError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Account is deactivated"


class DuplicateEmail(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "User with this email already exists"


class EmailTaken(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Email already in use"


class WrongPassword(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Current password is incorrect"


# Registry errors
class DuplicateFriend(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Friend with this email already exists"


class InvalidCoordinates(AppError):
    status_code = status.HTTP_400_BAD_REQUEST
    default_message = "Invalid coordinates"


class NotFound(AppError):
    """Missing record or a record owned by someone else; callers never learn which"""
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Not found"
