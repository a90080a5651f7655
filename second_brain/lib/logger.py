"""Logging setup for the API server and the chat CLI."""

import json
import logging
import sys
from datetime import UTC, datetime
from pathlib import Path
from typing import Any

NOISY_LIBRARIES = ("httpx", "httpcore", "openai", "urllib3", "uvicorn.access")

LEVEL_COLORS = {
    logging.DEBUG: "\033[36m",
    logging.INFO: "\033[32m",
    logging.WARNING: "\033[33m",
    logging.ERROR: "\033[31m",
    logging.CRITICAL: "\033[35m",
}
RESET = "\033[0m"


def log_fields(**fields: Any) -> dict[str, Any]:
    """Build an ``extra=`` mapping whose keys StructuredFormatter emits top-level."""
    return {"extra_fields": fields}


class StructuredFormatter(logging.Formatter):
    """One JSON object per line."""

    def format(self, record: logging.LogRecord) -> str:
        entry = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            **getattr(record, "extra_fields", {}),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


class SimpleFormatter(logging.Formatter):
    """``[LEVEL] logger: message`` colored by level."""

    def format(self, record: logging.LogRecord) -> str:
        color = LEVEL_COLORS.get(record.levelno, "")
        line = f"{color}[{record.levelname}]{RESET} {record.name}: {record.getMessage()}"
        if record.exc_info:
            line = f"{line}\n{self.formatException(record.exc_info)}"
        return line


def _console_handler(structured: bool) -> logging.Handler:
    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(StructuredFormatter() if structured else SimpleFormatter())
    return handler


def _file_handler(log_file: str) -> logging.Handler:
    path = Path(log_file)
    path.parent.mkdir(parents=True, exist_ok=True)
    handler = logging.FileHandler(path)
    # Files are always JSON so they can be shipped as-is
    handler.setFormatter(StructuredFormatter())
    return handler


def setup_logging(
    log_level: str = "INFO",
    log_file: str | None = None,
    structured: bool = False,
    quiet: bool = False,
) -> None:
    """Configure the root logger, replacing any handlers already installed.

    Args:
        log_level: Logging level name (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_file: Optional path for a JSON log file
        structured: Emit JSON on the console instead of colored text
        quiet: Only show warnings from application modules (used by the CLI)
    """
    level = getattr(logging, str(log_level).upper(), logging.INFO)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()
    root_logger.addHandler(_console_handler(structured))
    if log_file:
        root_logger.addHandler(_file_handler(log_file))

    for name in NOISY_LIBRARIES:
        logging.getLogger(name).setLevel(logging.WARNING)

    app_logger = logging.getLogger("second_brain")
    app_logger.setLevel(logging.WARNING if quiet else logging.NOTSET)
    if not quiet:
        root_logger.info(f"Logging initialized at {logging.getLevelName(level)} level")
