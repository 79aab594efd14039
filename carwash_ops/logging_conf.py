from __future__ import annotations

import json
import logging
from typing import Any, Dict, Optional

from .config import SupabaseSettings, get_supabase_settings

_RESERVED = {
    "levelname", "name", "msg", "args", "exc_info", "exc_text", "stack_info", "lineno",
    "pathname", "filename", "funcName", "created", "msecs", "relativeCreated", "thread",
    "threadName", "processName", "process", "message", "asctime", "levelno", "module",
    "taskName",
}

# Extras the entity stores attach to every record
STORE_FIELDS = ("table", "entity", "row_id", "operation")


class JsonFormatter(logging.Formatter):
    """One JSON object per record; store context fields come right after the message"""

    def format(self, record: logging.LogRecord) -> str:  # type: ignore[override]
        payload: Dict[str, Any] = {
            "time": self.formatTime(record, "%Y-%m-%dT%H:%M:%S"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key in STORE_FIELDS:
            if key in record.__dict__:
                payload[key] = record.__dict__[key]
        for key, value in record.__dict__.items():
            if key in _RESERVED or key in payload:
                continue
            payload[key] = value
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"), default=str)


def configure_logging(level: str = "INFO", json_output: bool = False) -> None:
    root = logging.getLogger()
    root.setLevel(level.upper())

    handler = logging.StreamHandler()
    if json_output:
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter("%(asctime)s - %(name)s - %(levelname)s - %(message)s"))

    # Clear existing handlers to avoid duplicate logs
    for h in list(root.handlers):
        root.removeHandler(h)

    root.addHandler(handler)

    # supabase's http stack is chatty at INFO
    logging.getLogger("httpx").setLevel(logging.WARNING)


def configure_logging_from_settings(settings: Optional[SupabaseSettings] = None) -> None:
    """Configure logging from LOG_LEVEL / LOG_JSON"""
    settings = settings or get_supabase_settings()
    configure_logging(settings.LOG_LEVEL, json_output=settings.LOG_JSON)
