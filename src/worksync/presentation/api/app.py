"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

Routes are served at the root unless ``api_prefix`` is configured. The
health check endpoint always stays at /health.

Run with uvicorn's factory mode::

    uvicorn worksync.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from worksync import __version__
from worksync.infrastructure.persistence.sqlalchemy.init_db import (
    create_engine_from_settings,
    create_tables,
    display_url,
)
from worksync.presentation.api.exception_handlers import setup_exception_handlers
from worksync.presentation.api.routers import (
    auth_router,
    schedule_router,
    shifts_router,
    users_router,
)
from worksync.presentation.api.schemas.common import HealthResponse
from worksync_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = __version__

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": "Login with username/password and token introspection.",
    },
    {
        "name": "Users",
        "description": """Team members and their roles.

**Roles:**
- `manager`: schedules shifts and manages accounts
- `employee`: sees their own schedule

The first account can be created without a token; afterwards only
managers can create or change users.
""",
    },
    {
        "name": "Shifts",
        "description": """Scheduled work assignments.

Days use `YYYY-MM-DD`; the legacy `DD.MM.YYYY` form is converted on write.
Times use `HH:MM` (24-hour). Shift writes require a manager.
""",
    },
    {
        "name": "Schedule",
        "description": "Week view (Monday..Sunday) and personal schedule.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


def _configure_logging(settings: Settings) -> None:
    """Configure application logging.

    Sets up logging for the worksync packages with:
    - Console output with timestamps and module names
    - Configurable log level for worksync modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, settings.log_level.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    for name in ("worksync", "worksync_auth", "worksync_config", "worksync_demo"):
        logging.getLogger(name).setLevel(log_level)

    # Quiet down noisy third-party loggers
    for name in ("httpx", "httpcore", "sqlalchemy.engine", "aiosqlite"):
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting WorkSync API v%s...", API_VERSION)
    engine = app.state.engine
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down WorkSync API...")
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the router holding all resource endpoints."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(users_router, prefix="/users", tags=["Users"])
    api_router.include_router(shifts_router, prefix="/shifts", tags=["Shifts"])
    api_router.include_router(schedule_router, prefix="/schedule", tags=["Schedule"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    _configure_logging(settings)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Shift scheduling for small teams.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    # Engine creation does not connect; the first session does
    engine = create_engine_from_settings(settings)
    app.state.settings = settings
    app.state.engine = engine
    app.state.session_maker = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )
    logger.info("Database: %s", display_url(settings.database_url))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=settings.api_prefix)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy", version=API_VERSION)

    return app
