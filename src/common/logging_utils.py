"""Centralized logging configuration and structured-context helpers."""
from __future__ import annotations

import logging
import os
import time
from typing import Any, Dict, Optional

from constants import Constants


def _resolve_level(value: int | str | None) -> int:
    if isinstance(value, int):
        return value
    if isinstance(value, str):
        candidate = logging.getLevelName(value.strip().upper())
        if isinstance(candidate, int):
            return candidate
    env_level = os.environ.get(Constants.ENV_LOG_LEVEL)
    if isinstance(env_level, str):
        candidate = logging.getLevelName(env_level.strip().upper())
        if isinstance(candidate, int):
            return candidate
    return logging.INFO


def configure_logging(level: int | str | None = None) -> None:
    """Configure the root logger once; later calls only adjust the level.

    Args:
        level: Explicit level name or number. Falls back to NUSPECREAD_LOG_LEVEL, then INFO.
    """
    resolved = _resolve_level(level)
    root = logging.getLogger()
    if not root.hasHandlers():
        logging.basicConfig(level=resolved, format=Constants.LOG_FORMAT)
    else:
        root.setLevel(resolved)


def is_debug_enabled(logger: logging.Logger) -> bool:
    """Return True when debug records would be emitted by the logger."""
    return logger.isEnabledFor(logging.DEBUG)


def extra_context(**fields: Any) -> Dict[str, Any]:
    """Build the ``extra`` mapping for a structured log record.

    None values are dropped so records only carry the fields that were set.
    """
    context = {key: value for key, value in fields.items() if value is not None}
    return {"context": context}


class Timer:
    """Context manager measuring elapsed wall time in milliseconds."""

    def __init__(self) -> None:
        self._start: Optional[float] = None
        self.duration_ms: float = 0.0

    def __enter__(self) -> "Timer":
        self._start = time.perf_counter()
        return self

    def __exit__(self, *exc_info) -> None:
        if self._start is not None:
            self.duration_ms = (time.perf_counter() - self._start) * 1000.0
