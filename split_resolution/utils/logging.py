"""Structured logging helpers for split resolution."""
from __future__ import annotations

import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict

_LOGGER_NAME = "split_resolution"
_SERVICE_NAME = "split-resolution"
_DEFAULT_LEVEL = "WARNING"


def _resolve_level() -> int:
    raw = str(os.getenv("SPLIT_RESOLUTION_LOG_LEVEL", _DEFAULT_LEVEL)).strip().upper()
    level = logging.getLevelName(raw)
    if isinstance(level, int):
        return level
    return logging.WARNING


def get_logger() -> logging.Logger:
    """Return a shared logger instance."""
    logger = logging.getLogger(_LOGGER_NAME)
    if logger.handlers:
        return logger

    if logger.level == logging.NOTSET:
        logger.setLevel(_resolve_level())
    handler = logging.StreamHandler()
    formatter = logging.Formatter("%(asctime)s | %(levelname)s | %(name)s | %(message)s")
    handler.setFormatter(formatter)
    logger.addHandler(handler)
    return logger


def log_event(
    event: str,
    payload: Dict[str, Any] | None = None,
    *,
    level: str = "info",
) -> None:
    """Write one structured log event in JSON format."""
    logger = get_logger()
    writer = getattr(logger, level.lower(), logger.info)
    numeric_level = logging.getLevelName(level.upper())
    if isinstance(numeric_level, int) and not logger.isEnabledFor(numeric_level):
        return

    data: Dict[str, Any] = {
        "event": event,
        "ts": datetime.now(timezone.utc).isoformat(),
        "service": _SERVICE_NAME,
        "level": level.lower(),
    }
    if payload:
        data.update(payload)

    message = json.dumps(data, ensure_ascii=False, default=str)
    writer("%s", message)
