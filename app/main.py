# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the Users API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from pathlib import Path

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.staticfiles import StaticFiles

from app.config import Settings, get_settings
from app.exceptions import (
    HttpException,
    http_exception_handler,
    unhandled_exception_handler,
    validation_exception_handler,
)
from app.middleware import register_middleware
from app.routers import search, users
from core.services.user_store import UserStore

settings = get_settings()

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


def create_app(
    store: UserStore | None = None,
    settings: Settings | None = None,
) -> FastAPI:
    """
    Create and configure a FastAPI application.

    Args:
        store: The UserStore to serve. A seeded store is built when omitted
            (or an empty one when SEED_USERS is off).
        settings: Settings to configure CORS and static files with
            (defaults to the process settings)

    Returns:
        A configured FastAPI application instance
    """
    settings = settings or get_settings()
    if store is None:
        store = UserStore.with_seed_data() if settings.SEED_USERS else UserStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info(f"Starting Users API in {settings.ENVIRONMENT} mode")
        logger.info(f"User store holds {len(app.state.user_store)} users")
        yield
        logger.info("Shutting down Users API")

    app = FastAPI(
        title="Users API",
        description="In-memory user management with structured error responses.",
        version="1.0.0",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "Create, read, update and delete users",
            },
            {
                "name": "Search",
                "description": "Query-string parameter echo",
            },
        ],
    )
    app.state.user_store = store

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    register_middleware(app)

    # CORS middleware - allows cross-origin requests
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=settings.is_production,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    app.add_exception_handler(HttpException, http_exception_handler)
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(Exception, unhandled_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    app.include_router(
        users.router,
        prefix="/users",
        tags=["Users"]
    )

    app.include_router(
        search.router,
        prefix="/search",
        tags=["Search"]
    )

    @app.get("/", tags=["Root"])
    async def root():
        """Root endpoint - returns a greeting and the server time."""
        return {
            "message": "Hello FastAPI!",
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }

    static_dir = Path(settings.STATIC_DIR)
    if static_dir.is_dir():
        app.mount("/static", StaticFiles(directory=static_dir), name="static")
        logger.debug(f"Serving static files from {static_dir.resolve()}")

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "app.main:app",
        host=settings.API_HOST,
        port=settings.PORT,
        reload=settings.is_development,
    )
