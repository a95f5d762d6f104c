"""Structured logging for hook runs.

Every record goes to a rotating JSON-lines file; when ``console`` is on, a
short ``[splashgen]`` line is also written to stderr so it shows up in the
Cordova build output without mixing into the JSON report on stdout.
"""

from __future__ import annotations

import json
import logging
import logging.handlers
import os
import platform
from datetime import datetime, timezone
from pathlib import Path
from typing import Any


_LOGGER_NAME = "splashgen"
LOG_FILENAME = "splashgen.log"
LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Record attributes passed through ``extra=`` that end up in the JSON payload.
_CONTEXT_FIELDS = ("event", "platform", "target", "fallback")


def _config_root() -> Path:
    if platform.system() == "Windows":
        base = Path(os.environ.get("APPDATA", Path.home() / "AppData" / "Roaming"))
        return base / "Splashgen"
    if platform.system() == "Darwin":
        return Path.home() / "Library" / "Application Support" / "Splashgen"
    return Path.home() / ".config" / "splashgen"


def log_dir(override: Path | None = None) -> Path:
    path = override or (_config_root() / "logs")
    path.mkdir(parents=True, exist_ok=True)
    return path


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts_utc": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in _CONTEXT_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=True, default=str)


def _level(name: str) -> int:
    name = str(name).upper()
    return getattr(logging, name) if name in LEVELS else logging.INFO


def configure_logging(
    keep_files: int = 7,
    console: bool = True,
    directory: Path | None = None,
    level: str = "INFO",
) -> logging.Logger:
    logger = logging.getLogger(_LOGGER_NAME)
    logger.setLevel(_level(level))
    if logger.handlers:
        return logger

    path = log_dir(directory) / LOG_FILENAME
    handler = logging.handlers.TimedRotatingFileHandler(
        filename=path,
        when="midnight",
        backupCount=max(2, keep_files),
        encoding="utf-8",
    )
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    if console:
        stream_handler = logging.StreamHandler()
        stream_handler.setFormatter(logging.Formatter("[splashgen] %(levelname)s %(message)s"))
        logger.addHandler(stream_handler)

    logger.debug(f"logging to {path}", extra={"event": "logging_configured"})
    return logger


def get_logger(name: str | None = None) -> logging.Logger:
    return logging.getLogger(f"{_LOGGER_NAME}.{name}" if name else _LOGGER_NAME)
