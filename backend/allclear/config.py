import os
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from dotenv import load_dotenv

logger = logging.getLogger("allclear-api")

# Used only when JWT_SECRET is unset outside production
DEV_SECRET_KEY = "allclear-development-secret-key"

# Validation limits
PASSWORD_MIN_LENGTH = 6
USERNAME_MAX_LENGTH = 50

# Largest id a BIGINT/SQLite INTEGER primary key can hold
MAX_RECORD_ID = 2**63 - 1


class Environment:
    DEVELOPMENT = "development"
    PRODUCTION = "production"


class FriendStatus(str, Enum):
    SAFE = "Safe"
    IN_RISK_ZONE = "In Risk Zone"
    UNKNOWN = "Unknown"
    EMERGENCY = "Emergency"


class LocationType(str, Enum):
    HOME = "Home"
    WORK = "Work"
    SCHOOL = "School"
    HOSPITAL = "Hospital"
    POLICE_STATION = "Police Station"
    FIRE_STATION = "Fire Station"
    SHELTER = "Shelter"
    GAS_STATION = "Gas Station"
    GROCERY_STORE = "Grocery Store"
    PHARMACY = "Pharmacy"
    BANK = "Bank"
    OTHER = "Other"


class ConfigurationError(RuntimeError):
    """Raised at startup when the settings cannot be used"""


@dataclass
class Settings:
    """Process-wide configuration, built once and handed to the app factory"""
    database_url: str
    jwt_secret: Optional[str] = None
    jwt_algorithm: str = "HS256"
    token_expire_hours: int = 24
    environment: str = Environment.DEVELOPMENT
    cors_origins: List[str] = field(default_factory=lambda: ["*"])
    log_level: str = "INFO"

    @property
    def is_production(self) -> bool:
        return self.environment == Environment.PRODUCTION

    @property
    def signing_key(self) -> str:
        return self.jwt_secret or DEV_SECRET_KEY

    def validate(self) -> None:
        """Fail fast on settings that must never reach a production server"""
        if not self.database_url:
            raise ConfigurationError("DATABASE_URL is not configured")

        if self.token_expire_hours <= 0:
            raise ConfigurationError("TOKEN_EXPIRE_HOURS must be positive")

        if self.is_production:
            secret = (self.jwt_secret or "").strip()
            if not secret or secret == DEV_SECRET_KEY or len(secret) < 24:
                raise ConfigurationError(
                    "JWT_SECRET is insecure. Configure a strong non-default secret (>=24 chars)."
                )
        elif not self.jwt_secret:
            logger.warning("JWT_SECRET is not set - using the development signing key")


def _database_url_from_env() -> str:
    url = os.getenv("DATABASE_URL")
    if url:
        return url

    db_host = os.getenv("DB_HOST", "localhost")
    db_user = os.getenv("DB_USER", "root")
    db_password = os.getenv("DB_PASSWORD", "")
    db_name = os.getenv("DB_NAME", "allclear")
    return f"mysql+mysqlconnector://{db_user}:{db_password}@{db_host}/{db_name}"


def load_settings() -> Settings:
    """Read settings from the environment (and a .env file, without overriding real variables)"""
    load_dotenv()
    origins = os.getenv("CORS_ORIGINS", "*")
    return Settings(
        database_url=_database_url_from_env(),
        jwt_secret=os.getenv("JWT_SECRET") or None,
        jwt_algorithm=os.getenv("JWT_ALGORITHM", "HS256"),
        token_expire_hours=int(os.getenv("TOKEN_EXPIRE_HOURS", "24")),
        environment=os.getenv("APP_ENV", Environment.DEVELOPMENT).lower(),
        cors_origins=[origin.strip() for origin in origins.split(",") if origin.strip()],
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )
