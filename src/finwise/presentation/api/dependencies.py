"""FastAPI dependencies: database session, repository factory and settings.

Routers receive a ``RepoFactory`` and hand it to ``Query.from_factory`` or
``Command.from_factory``; committing is the router's job.
"""

import logging
from functools import lru_cache
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends
from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from finwise.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
)
from finwise.presentation.api.config import get_api_settings
from finwise_config.settings import Settings, get_settings

logger = logging.getLogger(__name__)


def _ensure_sqlite_directory(url: str) -> None:
    parsed = make_url(url)
    if parsed.get_backend_name() == "sqlite" and parsed.database:
        Path(parsed.database).parent.mkdir(parents=True, exist_ok=True)


@lru_cache(maxsize=1)
def get_engine() -> AsyncEngine:
    """Process-wide engine; its pool is shared by every request."""
    url = get_settings().database_url
    _ensure_sqlite_directory(url)
    logger.debug("Creating database engine for %s", make_url(url).render_as_string())
    return create_async_engine(url, echo=False, pool_pre_ping=True)


@lru_cache(maxsize=1)
def get_session_maker() -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(get_engine(), class_=AsyncSession, expire_on_commit=False)


async def get_db_session() -> AsyncGenerator[AsyncSession, None]:
    """One session per request, closed when the response is sent."""
    session_maker = get_session_maker()
    async with session_maker() as session:
        yield session


DBSession = Annotated[AsyncSession, Depends(get_db_session)]
ApiSettings = Annotated[Settings, Depends(get_api_settings)]


async def get_repository_factory(session: DBSession) -> SQLAlchemyRepositoryFactory:
    return SQLAlchemyRepositoryFactory(session=session)


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
