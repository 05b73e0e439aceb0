# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User Directory API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload --port 5000
#   python scripts/start_server.py
# =============================================================================

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.config import Settings, settings as default_settings
from app.exceptions import register_exception_handlers
from app.routers import health, users
from core.services.user_store import UserStore

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if default_settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    Nothing needs opening or closing; startup and shutdown are only logged.
    """
    config: Settings = app.state.settings
    logger.info(
        f"Starting User Directory API in {config.ENVIRONMENT} mode "
        f"with {len(app.state.user_store)} users"
    )
    logger.info(f"CORS origins: {config.cors_origins_list if config.is_production else ['*']}")

    yield

    logger.info("Shutting down User Directory API")


def create_app(
    config: Settings | None = None,
    store: UserStore | None = None,
) -> FastAPI:
    """
    Build a configured FastAPI application.

    Each call gets its own user store (seeded unless one is passed in),
    so separate apps never share records.

    Args:
        config: Settings to use (defaults to the environment-loaded settings)
        store: Pre-built store, mainly for tests

    Returns:
        FastAPI: The application instance
    """
    config = config or default_settings

    application = FastAPI(
        title="User Directory API",
        description="In-memory user directory: list users, add users, check liveness.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "List and create user records",
            },
            {
                "name": "Health",
                "description": "API liveness check",
            },
        ],
    )
    application.state.settings = config
    application.state.user_store = store if store is not None else UserStore()

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    # CORS middleware - allows cross-origin requests from the browser client
    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins_list if config.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    register_exception_handlers(application)

    @application.exception_handler(Exception)
    async def handle_general_exception(request: Request, exc: Exception):
        """Handle unexpected exceptions."""
        logger.exception(f"Unexpected error: {exc}")
        return JSONResponse(
            status_code=500,
            content={
                "detail": "An unexpected error occurred",
                "code": "INTERNAL_ERROR",
            }
        )

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    application.include_router(
        health.router,
        prefix="/api",
        tags=["Health"]
    )

    application.include_router(
        users.router,
        prefix="/api",
        tags=["Users"]
    )

    @application.get("/", tags=["Root"])
    async def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "User Directory API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/api/health",
        }

    return application


# Created at import time so uvicorn can find it
app = create_app()
