import json
import logging
import os
import sys
from typing import Optional

DEFAULT_FORMAT = "%(asctime)s %(levelname)s %(name)s | %(message)s"
DATE_FORMAT = "%Y-%m-%dT%H:%M:%S%z"

# Attributes every LogRecord carries; anything else came in through extra=
_RESERVED_ATTRS = set(vars(logging.makeLogRecord({}))) | {"message", "asctime"}

_configured = False


class JsonFormatter(logging.Formatter):
    """One JSON object per line, including any fields passed via extra=."""

    def format(self, record: logging.LogRecord) -> str:
        log = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and key not in log:
                log[key] = value
        if record.exc_info:
            log["exc_info"] = self.formatException(record.exc_info)
        if record.stack_info:
            log["stack"] = self.formatStack(record.stack_info)
        return json.dumps(log, ensure_ascii=False, default=str)


def _resolve_log_level() -> int:
    level_name = os.getenv("LOG_LEVEL", "INFO").upper()
    level = logging.getLevelName(level_name)
    return level if isinstance(level, int) else logging.INFO


def _resolve_formatter() -> logging.Formatter:
    if os.getenv("LOG_FORMAT", "plain").lower() == "json":
        return JsonFormatter(datefmt=DATE_FORMAT)
    return logging.Formatter(DEFAULT_FORMAT, DATE_FORMAT)


def configure_logging(force: bool = False) -> None:
    global _configured
    if _configured and not force:
        return

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(_resolve_formatter())

    logging.basicConfig(
        level=_resolve_log_level(),
        handlers=[handler],
        force=True,
    )
    _configured = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    configure_logging()
    return logging.getLogger(name)
