from __future__ import annotations

import json
import logging
from datetime import UTC, datetime

# Proxied source paths embed a whole URL; cap them so records stay one short line.
MAX_PATH_LENGTH = 120
EXTRA_KEYS = ("event", "path", "mode", "count")


def _shorten(value: str, limit: int = MAX_PATH_LENGTH) -> str:
    if len(value) <= limit:
        return value
    return value[: limit - 3] + "..."


class JsonFormatter(logging.Formatter):
    """One JSON object per record, with the builder's extra fields when set."""

    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "timestamp": datetime.now(UTC).isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in EXTRA_KEYS:
            value = getattr(record, key, None)
            if value is None:
                continue
            if key == "path":
                value = _shorten(str(value))
            payload[key] = value
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False)


def setup_logging(level: str = "INFO") -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())
    handler = logging.StreamHandler()
    handler.setFormatter(JsonFormatter())
    root.handlers.clear()
    root.addHandler(handler)
