"""
Ledger FastAPI application.
Main entry point for the backend API.
"""
import sqlite3
import subprocess
import sys
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncGenerator

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from backend.app.api.errors import register_exception_handlers
from backend.app.api.v1.router import router as api_v1_router
from backend.app.config import get_settings, set_test_mode, is_test_mode
from backend.app.logging_config import configure_logging, get_logger
from backend.app.services.operation_types import build_default_registry

# Check for --test flag in command line arguments
# This must be done before settings are read
if "--test" in sys.argv:
    set_test_mode(True)
    print("[Ledger] 🧪 Test mode enabled (--test flag detected)")
    sys.argv.remove("--test")  # Remove flag so uvicorn doesn't complain

settings = get_settings()

configure_logging(settings.LOG_LEVEL, enable_file_logging=settings.LOG_TO_FILE)
logger = get_logger(__name__)

PROJECT_ROOT = Path(__file__).parent.parent.parent


def _sqlite_path(db_url: str) -> Path | None:
    if not db_url.startswith("sqlite:///"):
        return None
    db_path = Path(db_url.replace("sqlite:///", ""))
    if not db_path.is_absolute():
        db_path = PROJECT_ROOT / db_path
    return db_path


def _needs_migration(db_path: Path) -> bool:
    if not db_path.exists():
        logger.warning("Database file not found, running migrations", db_path=str(db_path))
        return True
    if db_path.stat().st_size == 0:
        logger.warning("Database file is empty (0 bytes), running migrations", db_path=str(db_path))
        return True

    # Plain sqlite3 is enough to count tables, no engine needed
    try:
        conn = sqlite3.connect(str(db_path))
        try:
            cursor = conn.execute("SELECT count(*) FROM sqlite_master WHERE type='table' AND name NOT LIKE 'sqlite_%'")
            table_count = cursor.fetchone()[0]
        finally:
            conn.close()
    except sqlite3.DatabaseError as e:
        logger.warning(f"Database appears corrupted, running migrations: {e}", db_path=str(db_path))
        return True

    if table_count == 0:
        logger.warning("Database has no tables, running migrations", db_path=str(db_path))
        return True

    logger.info(f"Database initialized with {table_count} tables", db_path=str(db_path))
    return False


def ensure_database_exists():
    """
    Ensure the SQLite database exists and is migrated.

    If the file is missing, empty or has no tables, `alembic upgrade head`
    is run. Non-SQLite URLs are left to the operator.
    """
    settings = get_settings()

    db_path = _sqlite_path(settings.DATABASE_URL)
    if db_path is None or not _needs_migration(db_path):
        return

    db_path.parent.mkdir(parents=True, exist_ok=True)
    alembic_ini = PROJECT_ROOT / "backend" / "alembic.ini"

    logger.info("Running Alembic migrations...")
    result = subprocess.run(
        ["alembic", "-c", str(alembic_ini), "-x", f"sqlalchemy.url={settings.DATABASE_URL}", "upgrade", "head"],
        cwd=PROJECT_ROOT,
        capture_output=True,
        text=True,
        )

    if result.returncode != 0:
        logger.error("Failed to create database", stderr=result.stderr)
        sys.exit(1)

    logger.info("Database created and migrated successfully")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator:
    """
    Application lifespan context manager.
    Handles startup and shutdown events.
    """
    logger.info(
        "Starting Ledger",
        version=settings.VERSION,
        database_url=settings.DATABASE_URL.split("///")[-1],
        test_mode=is_test_mode(),
        operation_types=len(app.state.operation_types),
        )

    ensure_database_exists()

    yield

    logger.info("Shutting down Ledger")


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.VERSION,
    openapi_url=f"{settings.API_V1_PREFIX}/openapi.json",
    docs_url=f"{settings.API_V1_PREFIX}/docs",
    redoc_url=f"{settings.API_V1_PREFIX}/redoc",
    lifespan=lifespan,
    )

# Built once per process, read-only afterwards
app.state.operation_types = build_default_registry()

if settings.CORS_ORIGINS:
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
        )

register_exception_handlers(app)

app.include_router(api_v1_router, prefix=settings.API_V1_PREFIX)


@app.get("/")
async def root():
    """
    Root endpoint.
    Provides basic API information.
    """
    return {
        "name": settings.PROJECT_NAME,
        "version": settings.VERSION,
        "docs": f"{settings.API_V1_PREFIX}/docs",
        }


def run():
    """Console entry point: serve the app with uvicorn on settings.PORT (TEST_PORT with --test)."""
    port = settings.TEST_PORT if is_test_mode() else settings.PORT
    uvicorn.run("backend.app.main:app", host=settings.HOST, port=port, log_config=None)


if __name__ == "__main__":
    run()
