"""
Ledger configuration.

Settings come from environment variables first, then the project's .env file.
Test mode (``--test`` flag or LEDGER_TEST_MODE) points DATABASE_URL at
TEST_DATABASE_URL, so automated runs never touch the working ledger.
"""
import os
from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

PROJECT_ROOT = Path(__file__).parent.parent.parent

TEST_MODE_ENV = "LEDGER_TEST_MODE"
_TRUTHY = ("1", "true", "yes")

_test_mode = False


def set_test_mode(enabled: bool = True):
    """
    Switch test mode for this process.

    Also exported through LEDGER_TEST_MODE so the alembic subprocess and any
    settings built later agree on the database.
    """
    global _test_mode
    _test_mode = enabled
    os.environ[TEST_MODE_ENV] = "1" if enabled else "0"


def is_test_mode() -> bool:
    return _test_mode or os.environ.get(TEST_MODE_ENV, "").lower() in _TRUTHY


class Settings(BaseSettings):
    """Ledger settings. Field names are the environment variable names."""
    model_config = SettingsConfigDict(
        env_file=str(PROJECT_ROOT / ".env"),
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
        )

    # Database
    DATABASE_URL: str = "sqlite:///./backend/data/sqlite/ledger.db"
    TEST_DATABASE_URL: str = "sqlite:///./backend/data/sqlite/test_ledger.db"

    # API
    API_V1_PREFIX: str = "/api/v1"
    PROJECT_NAME: str = "Ledger"
    VERSION: str = "0.1.0"

    # Server
    HOST: str = "0.0.0.0"
    PORT: int = Field(default=8000, gt=0, lt=65536)
    TEST_PORT: int = Field(default=8001, gt=0, lt=65536)

    # Logging
    LOG_LEVEL: str = "INFO"
    LOG_TO_FILE: bool = True

    # Browser origins allowed to call the API; empty means no CORS headers
    CORS_ORIGINS: list[str] = []


def get_settings() -> Settings:
    """Current settings, with DATABASE_URL swapped for TEST_DATABASE_URL in test mode."""
    settings = Settings()
    if is_test_mode():
        return settings.model_copy(update={"DATABASE_URL": settings.TEST_DATABASE_URL})
    return settings
