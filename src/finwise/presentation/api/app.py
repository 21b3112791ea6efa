"""FastAPI application factory for the Finwise API.

Every business endpoint is mounted under ``/api/v1``. ``/health`` and
``/`` stay unversioned so health checks and clients can discover the API.
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

import uvicorn
from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from finwise.infrastructure.persistence.sqlalchemy.init_db import create_tables
from finwise.presentation.api.dependencies import get_engine
from finwise.presentation.api.exception_handlers import setup_exception_handlers
from finwise.presentation.api.routers import (
    alerts_router,
    categories_router,
    dashboard_router,
    goals_router,
    investments_router,
    reports_router,
    transactions_router,
)
from finwise.presentation.api.schemas.common import HealthResponse
from finwise_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_V1_PREFIX = "/api/v1"

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# Third-party loggers that drown out ours at INFO
NOISY_LOGGERS = ("sqlalchemy.engine", "aiosqlite", "asyncpg", "httpx")

# (router, path, tag) for every v1 resource
V1_ROUTES = (
    (reports_router, "/reports", "Reports"),
    (dashboard_router, "/dashboard", "Dashboard"),
    (transactions_router, "/transactions", "Transactions"),
    (categories_router, "/categories", "Categories"),
    (goals_router, "/goals", "Goals"),
    (investments_router, "/investments", "Investments"),
    (alerts_router, "/alerts", "Alerts"),
)

OPENAPI_TAGS = [
    {
        "name": "Reports",
        "description": (
            "Paid expenses per category and the rolling monthly balance. "
            "Only settled transactions count."
        ),
    },
    {
        "name": "Dashboard",
        "description": (
            "Income and expenses for an optional inclusive period, pending "
            "amounts, all-time balance, goal progress and invested total."
        ),
    },
    {
        "name": "Transactions",
        "description": (
            "Income (`pending`, `received`) and expense "
            "(`pending`, `paid`, `overdue`) records."
        ),
    },
    {"name": "Categories", "description": "Income and expense categories."},
    {"name": "Goals", "description": "Savings goals with progress."},
    {
        "name": "Investments",
        "description": "Fixed-income and fund positions plus growth simulations.",
    },
    {
        "name": "Alerts",
        "description": "Due-date, overdue, goal-milestone and maturity notices.",
    },
    {"name": "Health", "description": "Liveness check."},
    {"name": "Info", "description": "API discovery."},
]


@lru_cache(maxsize=1)
def _configure_logging(log_level: str) -> None:
    """Route ``finwise`` logs to stdout at ``log_level`` (once per level)."""
    level = getattr(logging, log_level.upper(), logging.INFO)
    logging.basicConfig(
        level=level,
        format=LOG_FORMAT,
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,
    )
    for name in ("finwise", "finwise_config"):
        logging.getLogger(name).setLevel(level)
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Create missing tables on startup and release the pool on shutdown."""
    engine = get_engine()
    logger.info("Starting Finwise API v%s (%s)", API_VERSION, engine.dialect.name)
    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Database refused the connection; is it running?")
        raise SystemExit(1) from None

    yield

    await engine.dispose()
    logger.info("Finwise API stopped, database connections closed")


def create_v1_router() -> APIRouter:
    """Mount every v1 resource router under its path and tag."""
    v1_router = APIRouter()
    for router, path, tag in V1_ROUTES:
        v1_router.include_router(router, prefix=path, tags=[tag])
    return v1_router


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
    _configure_logging(settings.log_level)

    docs_enabled = settings.api_debug
    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Personal finance backend: **income/expense tracking**, "
            "**report aggregation** and **investment simulation**."
        ),
        version=API_VERSION,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    setup_exception_handlers(app)
    app.include_router(create_v1_router(), prefix=API_V1_PREFIX)

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        return HealthResponse(
            status="healthy",
            version=API_VERSION,
            api_versions=["v1"],
        )

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """Name, version, display currency and resource URLs."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if docs_enabled else None,
            "api_base": API_V1_PREFIX,
            "currency": settings.currency,
            "endpoints": {
                "health": "/health",
                **{tag.lower(): f"{API_V1_PREFIX}{path}" for _, path, tag in V1_ROUTES},
            },
        }

    return app


def main() -> None:
    """Run the API with uvicorn (``finwise-api`` console script)."""
    settings = get_settings()
    uvicorn.run(
        "finwise.presentation.api.app:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.api_debug,
    )


# Application instance for uvicorn
app = create_app()
