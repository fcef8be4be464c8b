import logging
from typing import Iterator

from fastapi import Request
from sqlalchemy import create_engine, text
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from allclear.models import Base

# Setup logging
logger = logging.getLogger("allclear-api")


class StoreError(Exception):
    """Storage failure, tagged so callers never inspect driver messages or codes"""
    FAILURE = "failure"
    DUPLICATE_KEY = "duplicate_key"

    kind = FAILURE

    def __init__(self, message: str = "Storage operation failed"):
        super().__init__(message)


class DuplicateKeyError(StoreError):
    """A unique constraint rejected the write"""
    kind = StoreError.DUPLICATE_KEY


class Database:
    """Engine and session factory for one configured database URL"""

    def __init__(self, database_url: str):
        connect_args = {}
        if database_url.startswith("sqlite"):
            # Request handlers and the lifespan run on different threads
            connect_args["check_same_thread"] = False

        self.engine = create_engine(database_url, connect_args=connect_args, pool_pre_ping=True)
        self.SessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=self.engine)

    def init_schema(self) -> bool:
        """Create tables that do not exist yet"""
        try:
            Base.metadata.create_all(bind=self.engine)
            logger.info("Database schema initialized successfully")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database initialization failed: {str(e)}")
            return False

    def session(self) -> Session:
        return self.SessionLocal()

    def ping(self) -> bool:
        """True when a trivial query succeeds"""
        try:
            with self.engine.connect() as conn:
                conn.execute(text("SELECT 1"))
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database ping failed: {str(e)}")
            return False

    def close(self) -> None:
        self.engine.dispose()
        logger.info("Database connection pool closed")


# Database session dependency
def get_db_session(request: Request) -> Iterator[Session]:
    """Get database session for the duration of one request"""
    db = request.app.state.db.session()
    try:
        yield db
    finally:
        db.close()


def commit(db: Session) -> None:
    """Commit, translating driver errors into tagged store errors"""
    try:
        db.commit()
    except IntegrityError as e:
        db.rollback()
        logger.warning(f"Unique constraint rejected write: {str(e.orig)}")
        raise DuplicateKeyError(str(e.orig)) from e
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Database commit failed: {str(e)}")
        raise StoreError(str(e)) from e
