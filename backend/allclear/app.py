from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from contextlib import asynccontextmanager
from typing import Optional
import logging

from allclear.config import Settings, load_settings
from allclear.database import Database
from allclear.handlers import register_exception_handlers
from allclear.routers import general_router, auth_router, users_router, friends_router, locations_router

logger = logging.getLogger("allclear-api")

def create_app(settings: Optional[Settings] = None) -> FastAPI:
    """Build the API for the given settings (read from the environment by default)"""
    if settings is None:
        settings = load_settings()
    settings.validate()
    logger.setLevel(settings.log_level)

    # Define lifespan context manager for startup/shutdown events
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up the API...")

        # Connect to the database
        logger.info("Initializing database...")
        database = Database(settings.database_url)
        if database.init_schema():
            logger.info("Database initialized successfully")
        else:
            logger.warning("Database initialization failed, requests will fail until it is reachable")
        app.state.db = database

        logger.info("API startup complete")

        yield  # This is where FastAPI serves requests

        # Shutdown code (runs when app is shutting down)
        logger.info("Shutting down the API...")
        database.close()

    app = FastAPI(
        title="AllClear API",
        description="Safety network API for tracking friends and saved locations",
        version="1.0.0",
        lifespan=lifespan
    )
    app.state.settings = settings

    # Add CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    register_exception_handlers(app)

    # Include all routers
    app.include_router(general_router)
    app.include_router(auth_router)
    app.include_router(users_router)
    app.include_router(friends_router)
    app.include_router(locations_router)

    return app
