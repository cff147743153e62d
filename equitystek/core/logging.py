"""Structured logging for equitystek.

structlog on top of stdlib logging: console rendering while developing,
JSON lines when ``EQUITYSTEK_JSON_LOGS`` is set. Only the service layer
logs; the calculators are silent.
"""

from __future__ import annotations

import logging
import logging.handlers
import os
import sys
from pathlib import Path
from typing import Any

import structlog

from equitystek.core.settings import get_settings

LOG_DIR = Path(__file__).resolve().parents[2] / "logs"
LOG_FILE = LOG_DIR / "equitystek.log"
LOG_FILE_MAX_BYTES = 10 * 1024 * 1024
LOG_FILE_BACKUPS = 5

_SHARED_PROCESSORS: tuple[Any, ...] = (
    structlog.stdlib.filter_by_level,
    structlog.contextvars.merge_contextvars,
    structlog.processors.add_log_level,
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
)

_configured = False


def _handlers() -> list[logging.Handler]:
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if os.environ.get("PYTEST_CURRENT_TEST"):
        return handlers
    try:
        LOG_DIR.mkdir(exist_ok=True)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                LOG_FILE,
                maxBytes=LOG_FILE_MAX_BYTES,
                backupCount=LOG_FILE_BACKUPS,
                encoding="utf-8",
            )
        )
    except OSError:
        # read-only install: stderr only
        pass
    return handlers


def _renderer(json_output: bool) -> Any:
    if json_output:
        return structlog.processors.JSONRenderer()
    return structlog.dev.ConsoleRenderer(colors=False)


def configure_logging(
    level: str | None = None,
    json_output: bool | None = None,
) -> structlog.stdlib.BoundLogger:
    """Configure structlog and the stdlib root logger once per process.

    Args:
        level: Log level name; defaults to ``AppSettings.log_level``
        json_output: JSON lines instead of console output; defaults to
            ``AppSettings.json_logs``

    Returns:
        Root bound logger
    """
    global _configured
    if _configured:
        return structlog.get_logger()

    settings = get_settings()
    level_name = (level or settings.log_level).upper()
    if json_output is None:
        json_output = settings.json_logs

    logging.basicConfig(
        format="%(message)s",
        level=getattr(logging, level_name, logging.INFO),
        handlers=_handlers(),
        force=True,
    )
    structlog.configure(
        processors=[*_SHARED_PROCESSORS, _renderer(json_output)],
        logger_factory=structlog.stdlib.LoggerFactory(),
        wrapper_class=structlog.stdlib.BoundLogger,
        cache_logger_on_first_use=True,
    )

    _configured = True
    return structlog.get_logger()


def get_logger(name: str | None = None) -> structlog.stdlib.BoundLogger:
    """Return a bound logger, configuring logging on first use."""
    if not _configured:
        configure_logging()
    logger = structlog.get_logger()
    return logger.bind(logger_name=name) if name else logger
