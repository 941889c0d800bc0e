"""
Logging setup for the raytracer library.

Library modules only ever call ``get_logger(__name__)`` and attach structured
fields through ``extra={"extra_data": {...}}``. Applications decide how those
records are rendered by calling ``setup_logging`` once at startup.
"""

import json
import logging
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict

from .config import Settings, settings as default_settings

_TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_TEXT_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, with ``extra_data`` merged in at top level."""

    def format(self, record: logging.LogRecord) -> str:
        entry: Dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)

        entry.update(getattr(record, "extra_data", None) or {})
        return json.dumps(entry, default=str)


class TextFormatter(logging.Formatter):
    """Single-line human-readable records."""

    def __init__(self) -> None:
        super().__init__(fmt=_TEXT_FORMAT, datefmt=_TEXT_DATE_FORMAT)


def _formatter_for(config: Settings) -> logging.Formatter:
    if config.LOG_FORMAT == "json":
        return StructuredFormatter()
    return TextFormatter()


def _handlers_for(config: Settings, level: int) -> list[logging.Handler]:
    formatter = _formatter_for(config)
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stdout)]

    if config.LOG_FILE:
        log_path = Path(config.LOG_FILE)
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path))

    for handler in handlers:
        handler.setFormatter(formatter)
        handler.setLevel(level)
    return handlers


def setup_logging(config: Settings | None = None) -> None:
    """
    Configure the root logger from settings.

    Replaces any handlers already on the root logger. Unknown level names fall
    back to INFO.
    """
    config = config or default_settings
    level = getattr(logging, config.LOG_LEVEL.upper(), logging.INFO)
    logging.basicConfig(level=level, handlers=_handlers_for(config, level), force=True)


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


class ContextLogger(logging.LoggerAdapter):
    """Adapter that adds fixed fields to the ``extra_data`` of every record."""

    def process(self, msg: Any, kwargs: Any) -> tuple:
        extra = kwargs.setdefault("extra", {})
        extra["extra_data"] = {
            **self.extra,
            **extra.get("extra_data", {}),
            **kwargs.pop("extra_data", {}),
        }
        return msg, kwargs


def get_context_logger(name: str, **context: Any) -> ContextLogger:
    """Logger whose records all carry ``context`` as structured fields."""
    return ContextLogger(get_logger(name), context)
