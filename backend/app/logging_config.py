"""
Logging configuration for the ledger backend.

Uses structlog on top of the standard logging module:
- Console output (always)
- File output with weekly rotation (optional)
- JSON rendering by default, key=value console rendering on request

Log rotation: weekly, 52 backups (one year), rotated files are gzip-compressed.
"""
import gzip
import logging
import logging.handlers
import shutil
import sys
from pathlib import Path
from typing import Any

import structlog
from structlog.types import EventDict

LOG_FILE_NAME = "ledger.log"


def get_log_directory() -> Path:
    """Get or create the log directory."""
    log_dir = Path(__file__).parent.parent.parent / "logs"
    log_dir.mkdir(parents=True, exist_ok=True)
    return log_dir


def add_log_level(logger: Any, method_name: str, event_dict: EventDict) -> EventDict:
    """Add the upper-cased level name to the event dict."""
    if method_name == "warn":
        method_name = "warning"
    event_dict["level"] = method_name.upper()
    return event_dict


def _get_rotated_filename(default_name: str) -> str:
    """
    Custom namer for rotated log files.

    Example: ledger.log.2025-11-28 -> ledger.log.2025-11-28.gz
    """
    return default_name + ".gz"


def _compress_rotated_file(source: str, dest: str) -> None:
    """Gzip a rotated log file and remove the uncompressed original."""
    with open(source, 'rb') as f_in:
        with gzip.open(dest, 'wb') as f_out:
            shutil.copyfileobj(f_in, f_out)

    Path(source).unlink()


def _build_file_handler(level: int) -> logging.Handler:
    log_file = get_log_directory() / LOG_FILE_NAME

    # W0 = rotate every Monday at midnight (UTC)
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=str(log_file),
        when="W0",
        interval=1,
        backupCount=52,
        encoding="utf-8",
        utc=True,
        )
    handler.setLevel(level)
    handler.rotator = _compress_rotated_file
    handler.namer = _get_rotated_filename
    return handler


def configure_logging(log_level: str = "INFO", enable_file_logging: bool = True, json_logs: bool = True) -> None:
    """
    Configure structured logging for the application.

    Args:
        log_level: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        enable_file_logging: Whether to also write to logs/ledger.log
        json_logs: Render events as JSON (True) or as key=value text (False)
    """
    numeric_level = getattr(logging, log_level.upper(), logging.INFO)

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(numeric_level)
    handlers = [console_handler]

    if enable_file_logging:
        handlers.append(_build_file_handler(numeric_level))

    # force=True replaces whatever handlers were installed before
    logging.basicConfig(
        format="%(message)s",
        handlers=handlers,
        level=numeric_level,
        force=True,
        )

    renderer = structlog.processors.JSONRenderer() if json_logs else structlog.dev.ConsoleRenderer(colors=False)

    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.stdlib.add_logger_name,
            add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.processors.UnicodeDecoder(),
            renderer,
            ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
        )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """
    Get a structured logger.

    Usage:
        logger = get_logger(__name__)
        logger.info("message", key="value")
    """
    return structlog.get_logger(name)
