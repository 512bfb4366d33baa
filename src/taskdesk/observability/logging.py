from __future__ import annotations

import json
import logging
from datetime import datetime, timezone
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import Any, Optional

from taskdesk.config import Settings

# LogRecord attributes set by the logging module itself; the rest are `extra` fields.
_RESERVED = frozenset((
    "name", "msg", "args", "levelname", "levelno", "pathname", "filename",
    "module", "exc_info", "exc_text", "stack_info", "lineno", "funcName",
    "created", "msecs", "relativeCreated", "thread", "threadName", "processName",
    "process", "message", "taskName",
))


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "ts": datetime.fromtimestamp(record.created, timezone.utc).isoformat().replace("+00:00", "Z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }

        payload.update((k, v) for k, v in record.__dict__.items() if k not in _RESERVED)

        if record.exc_info:
            payload["exc"] = self.formatException(record.exc_info)

        return json.dumps(payload, ensure_ascii=False, default=str)


def setup_logging(settings: Optional[Settings] = None) -> Path:
    """
    Send every record through JsonFormatter, both to stderr and to
    `<log_dir>/taskdesk.jsonl`. Level and directory come from Settings, read
    from the environment when none is given. Returns the log file path.
    """
    settings = settings or Settings.from_env()
    level = settings.log_level.upper()
    settings.log_dir.mkdir(parents=True, exist_ok=True)
    log_path = settings.log_dir / "taskdesk.jsonl"

    # replace, don't stack, when called again
    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()

    fmt = JsonFormatter()
    handlers: list[logging.Handler] = [
        logging.StreamHandler(),
        RotatingFileHandler(log_path, maxBytes=10_000_000, backupCount=10, encoding="utf-8"),
    ]
    for handler in handlers:
        handler.setLevel(level)
        handler.setFormatter(fmt)
        root.addHandler(handler)

    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    return log_path
