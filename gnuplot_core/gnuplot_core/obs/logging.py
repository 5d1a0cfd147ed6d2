from __future__ import annotations
import json
import logging
from datetime import datetime, timezone
from typing import Union

LOGGER_NAME = "gnuplot_core"

# Discovery fields a caller may attach via ``extra=``
STRUCTURED_FIELDS = (
    "executable",
    "version",
    "patch_level",
    "terminal_count",
    "duration_ms",
    "timeout_s",
    "returncode",
    "transcript_bytes",
    "error_code",
)


class JsonFormatter(logging.Formatter):
    """One JSON object per record; discovery fields are copied when present."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname.lower(),
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for key in STRUCTURED_FIELDS:
            value = getattr(record, key, None)
            if value is not None:
                payload[key] = value
        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)
        return json.dumps(payload, default=str)


def get_logger(name: str = LOGGER_NAME) -> logging.Logger:
    logger = logging.getLogger(name)
    if not logger.handlers:
        h = logging.StreamHandler()
        h.setFormatter(JsonFormatter())
        logger.addHandler(h)
        logger.setLevel(logging.INFO)
    return logger


def set_level(level: Union[int, str]) -> logging.Logger:
    """
    Set the package log level from a settings value such as ``"debug"`` or 10.

    Raises:
        ValueError: If ``level`` is not a known logging level name
    """
    if isinstance(level, str):
        resolved = logging.getLevelName(level.strip().upper())
        if not isinstance(resolved, int):
            raise ValueError(f"unknown log level: {level!r}")
        level = resolved
    logger = get_logger(LOGGER_NAME)
    logger.setLevel(level)
    return logger
