"""
Declarative field rules shared by the request schemas.

Each rule is an ``Annotated`` type carrying a before-validator, so a schema
states its rules as field types and pydantic reports every failing field in
one pass.
"""
import math
from typing import Annotated, Any, Optional

from email_validator import EmailNotValidError, validate_email
from pydantic import BeforeValidator
from pydantic_core import PydanticCustomError

from allclear.config import PASSWORD_MIN_LENGTH, LocationType
from allclear.errors import InvalidCoordinates

LATITUDE_LIMIT = 90
LONGITUDE_LIMIT = 180
LOCATION_TYPE_VALUES = {location_type.value for location_type in LocationType}


def required_text(label: str, max_length: Optional[int] = None):
    """Non-empty after trimming; returns the trimmed value"""
    def check(value: Any) -> str:
        if not isinstance(value, str) or not value.strip():
            raise PydanticCustomError("required", "{label} is required", {"label": label})
        value = value.strip()
        if max_length is not None and len(value) > max_length:
            raise PydanticCustomError(
                "too_long",
                "{label} cannot be more than {max_length} characters",
                {"label": label, "max_length": max_length},
            )
        return value
    return Annotated[str, BeforeValidator(check)]


def required_secret(label: str):
    """Non-empty, taken as-is (passwords are never trimmed)"""
    def check(value: Any) -> str:
        if not isinstance(value, str) or value == "":
            raise PydanticCustomError("required", "{label} is required", {"label": label})
        return value
    return Annotated[str, BeforeValidator(check)]


def password_rule(label: str):
    def check(value: Any) -> str:
        if not isinstance(value, str) or len(value) < PASSWORD_MIN_LENGTH:
            raise PydanticCustomError(
                "password_too_short",
                "{label} must be at least {min_length} characters long",
                {"label": label, "min_length": PASSWORD_MIN_LENGTH},
            )
        return value
    return Annotated[str, BeforeValidator(check)]


def normalize_email(value: Any) -> str:
    if not isinstance(value, str):
        raise PydanticCustomError("email", "Valid email is required")
    try:
        validate_email(value.strip(), check_deliverability=False)
    except EmailNotValidError:
        raise PydanticCustomError("email", "Valid email is required")
    return value.strip().lower()


def _optional_email(value: Any) -> Optional[str]:
    # Profile updates treat a missing or empty email as "unchanged"
    if value is None or value == "":
        return None
    return normalize_email(value)


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if not isinstance(value, str):
        raise PydanticCustomError("string_type", "Must be a string")
    return value.strip() or None


def is_coordinate(value: Any, limit: float) -> bool:
    """JSON number within [-limit, limit]; strings and booleans never qualify"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return math.isfinite(value) and -limit <= value <= limit


def _coordinate(limit: float, message: str):
    def check(value: Any) -> float:
        if not is_coordinate(value, limit):
            raise PydanticCustomError("coordinate", message)
        return float(value)
    return Annotated[float, BeforeValidator(check)]


def validate_coordinates(lat: Any, lng: Any) -> None:
    """Raise InvalidCoordinates unless both values are in range"""
    if not is_coordinate(lat, LATITUDE_LIMIT) or not is_coordinate(lng, LONGITUDE_LIMIT):
        raise InvalidCoordinates()


def coerce_location_type(value: Any) -> str:
    """Unrecognized categories fall back to Other instead of failing"""
    if isinstance(value, LocationType):
        return value.value
    if isinstance(value, str) and value in LOCATION_TYPE_VALUES:
        return value
    return LocationType.OTHER.value


ValidEmail = Annotated[str, BeforeValidator(normalize_email)]
OptionalEmail = Annotated[Optional[str], BeforeValidator(_optional_email)]
OptionalText = Annotated[Optional[str], BeforeValidator(_optional_text)]
Latitude = _coordinate(LATITUDE_LIMIT, "Valid latitude is required")
Longitude = _coordinate(LONGITUDE_LIMIT, "Valid longitude is required")
CategoryType = Annotated[LocationType, BeforeValidator(coerce_location_type)]
