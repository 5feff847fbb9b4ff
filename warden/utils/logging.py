"""Logging setup for warden.

Modules log through :func:`get_logger`; :func:`configure_logging` is left to
the embedding application.
"""

from __future__ import annotations

import json
import logging
import logging.config
import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

DECISION_FIELDS = ("rule", "area", "subject")


class JsonFormatter(logging.Formatter):
    """One JSON object per record, carrying the decision fields when present."""

    def format(self, record: logging.LogRecord) -> str:
        created = datetime.fromtimestamp(record.created, tz=timezone.utc)
        payload: Dict[str, Any] = {
            "timestamp": created.isoformat(timespec="seconds"),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        payload.update({name: record.__dict__[name] for name in DECISION_FIELDS if name in record.__dict__})
        if record.exc_info:
            payload["exception"] = self.formatException(record.exc_info)
        return json.dumps(payload, ensure_ascii=False, default=str)


def _console_handler(enable_rich: bool) -> Dict[str, Any]:
    if not enable_rich:
        return {"class": "logging.StreamHandler", "formatter": "json"}
    return {
        "class": "rich.logging.RichHandler",
        "formatter": "rich",
        "rich_tracebacks": True,
        "show_path": False,
    }


def configure_logging(
    *,
    level: str = "INFO",
    log_dir: Optional[Path] = None,
    rich: Optional[bool] = None,
) -> None:
    """Send records to ``<log_dir>/warden.log`` as JSON and to the console.

    ``log_dir`` defaults to ``$WARDEN_LOG_DIR`` or ``~/.warden/logs``; ``rich``
    defaults to ``$WARDEN_RICH`` (on unless ``0``). Repeated calls replace the
    root handlers.
    """

    if log_dir is None:
        log_dir = Path(os.environ.get("WARDEN_LOG_DIR", Path.home() / ".warden" / "logs"))
    log_dir.mkdir(parents=True, exist_ok=True)
    if rich is None:
        rich = os.environ.get("WARDEN_RICH", "1") != "0"

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "formatters": {
                "json": {"()": JsonFormatter},
                "rich": {"format": "%(message)s", "datefmt": "%H:%M:%S"},
            },
            "handlers": {
                "file": {
                    "class": "logging.handlers.RotatingFileHandler",
                    "formatter": "json",
                    "filename": str(log_dir / "warden.log"),
                    "maxBytes": 5 * 1024 * 1024,
                    "backupCount": 5,
                    "encoding": "utf-8",
                },
                "console": _console_handler(rich),
            },
            "root": {"level": level.upper(), "handlers": ["file", "console"]},
        }
    )


def get_logger(name: str) -> logging.Logger:
    return logging.getLogger(name)


__all__ = ["configure_logging", "get_logger", "JsonFormatter"]
