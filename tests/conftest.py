"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (domain, application)
    │   ├── domain/
    │   ├── application/
    │   └── presentation/
    └── integration/       # API tests against a temporary SQLite database
        └── api/

Environment Variables:
    FINWISE_ENV_FILE    Alternative .env file for the test run
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv

from finwise_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line(
        "markers",
        "integration: Tests that run the API against a temporary SQLite database",
    )


@pytest.fixture(scope="session", autouse=True)
def configure_app_settings():
    """Start and finish the session with a fresh settings cache."""
    clear_settings_cache()
    yield
    clear_settings_cache()
