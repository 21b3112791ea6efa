"""Finwise settings, read from the environment and an optional ``.env`` file.

OS environment variables always win. The ``.env`` file is the first that
exists of:

- the path in ``FINWISE_ENV_FILE`` (relative paths resolve against the
  project root)
- ``config/.env.dev``
- ``config/.env``
"""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any

from pydantic import Field, computed_field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

ENV_FILE_VARIABLE = "FINWISE_ENV_FILE"
ENV_FILE_CANDIDATES = (".env.dev", ".env")


def _project_root() -> Path:
    here = Path(__file__).resolve().parent
    for candidate in (here, *here.parents):
        has_marker = (candidate / "config").is_dir() or (
            candidate / "pyproject.toml"
        ).is_file()
        # Docker images install the project under /app
        if has_marker or candidate == Path("/app"):
            return candidate
    return here.parents[1]


def get_config_dir() -> Path:
    """Directory holding the ``.env`` files."""
    return _project_root() / "config"


def _env_file() -> Path | None:
    explicit = os.environ.get(ENV_FILE_VARIABLE)
    if explicit:
        path = Path(explicit)
        if not path.is_absolute():
            path = _project_root() / path
        if path.exists():
            return path

    config_dir = get_config_dir()
    for name in ENV_FILE_CANDIDATES:
        if (config_dir / name).exists():
            return config_dir / name
    return None


class Settings(BaseSettings):
    """Runtime configuration.

    Field names map to upper-case variables, e.g. ``database_url`` is read
    from ``DATABASE_URL`` and ``report_window_months`` from
    ``REPORT_WINDOW_MONTHS``.
    """

    model_config = SettingsConfigDict(
        env_file=_env_file(),
        env_file_encoding="utf-8",
        extra="ignore",
    )

    app_name: str = "Finwise"
    currency: str = Field(default="BRL", description="Display-only currency code")

    # sqlite+aiosqlite locally, postgresql+asyncpg when deployed
    database_url: str = "sqlite+aiosqlite:///./data/finwise.db"

    api_host: str = "0.0.0.0"
    api_port: int = 8000
    api_debug: bool = False
    api_cors_origins: str = ""

    report_window_months: int = Field(default=12, ge=1, le=60)
    upcoming_bills_days: int = Field(default=7, ge=0, le=365)

    log_level: str = "INFO"

    @field_validator("api_cors_origins", mode="before")
    @classmethod
    def _join_cors_origins(cls, value: Any) -> str:
        if isinstance(value, (list, tuple)):
            return ",".join(value)
        return str(value) if value else ""

    @computed_field  # type: ignore[prop-decorator]
    @property
    def cors_origins(self) -> list[str]:
        """Allowed CORS origins; empty disables cross-origin requests."""
        return [o.strip() for o in self.api_cors_origins.split(",") if o.strip()]


@lru_cache()
def get_settings() -> Settings:
    return Settings()


def clear_settings_cache() -> None:
    """Forget the cached ``Settings`` so the next call re-reads the environment."""
    get_settings.cache_clear()
