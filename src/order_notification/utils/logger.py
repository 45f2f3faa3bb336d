import json
import logging
import os
from datetime import datetime, timezone
from typing import Any, Dict, Optional


LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Attributes every LogRecord carries; anything else arrived through `extra=`.
_RESERVED_ATTRS = frozenset(
    vars(logging.LogRecord("", logging.INFO, "", 0, "", (), None)).keys()
) | {"message", "asctime"}


def _resolve_level(level: Optional[str]) -> int:
    if level is None:
        level = LOG_LEVEL
    return getattr(logging, str(level).upper(), logging.INFO)


class JsonFormatter(logging.Formatter):
    """
    Simple JSON formatter for webhook logs.
    Produces one JSON object per log line, including any `extra=` fields.
    """

    def format(self, record: logging.LogRecord) -> str:
        payload: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S,%f%z"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                payload[key] = value

        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)

        return json.dumps(payload, default=str)


def get_logger(name: str = "order-notification", level: Optional[str] = None) -> logging.Logger:
    """
    Returns a singleton JSON-logging logger for the given name.
    Safe to call many times; handlers are only attached once. The level is
    applied on every call, so a request without LOG_LEVEL goes back to the
    environment default instead of keeping the previous request's level.
    """
    logger = logging.getLogger(name)
    logger.setLevel(_resolve_level(level))

    if getattr(logger, "_configured", False):
        return logger

    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    logger.addHandler(handler)

    # Do not propagate to the root logger; we emit JSON ourselves.
    logger.propagate = False

    logger._configured = True  # type: ignore[attr-defined]

    return logger
