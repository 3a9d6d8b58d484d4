"""Structured JSON logging."""
import json
import logging
import sys
import traceback
from datetime import datetime, timezone
from typing import Any, Dict, Optional

# Attributes every LogRecord carries; anything else came in through ``extra``.
_RESERVED = set(vars(logging.LogRecord("", 0, "", 0, "", (), None))) | {"message", "asctime"}


class StructuredLogger:
    """Logger that writes one JSON object per line."""

    def __init__(self, service_name: str, level: int = logging.INFO):
        self.service_name = service_name
        self.logger = logging.getLogger(service_name)
        self.logger.setLevel(level)
        self.logger.propagate = False

        self.logger.handlers.clear()
        self.logger.addHandler(self._setup_handler(sys.stdout))

    def _setup_handler(self, stream):
        handler = logging.StreamHandler(stream)
        handler.setFormatter(JsonFormatter(self.service_name))
        return handler

    def debug(self, message: str, **context: Any):
        self.logger.debug(message, extra=context)

    def info(self, message: str, **context: Any):
        self.logger.info(message, extra=context)

    def warning(self, message: str, **context: Any):
        self.logger.warning(message, extra=context)

    def error(self, message: str, exc_info: bool = False, **context: Any):
        self.logger.error(message, exc_info=exc_info, extra=context)


class JsonFormatter(logging.Formatter):
    def __init__(self, service_name: str):
        super().__init__()
        self.service_name = service_name

    def format(self, record: logging.LogRecord) -> str:
        log_entry: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "service": self.service_name,
            "message": record.getMessage(),
        }
        log_entry.update(self._context(record))

        if record.exc_info:
            log_entry["exception"] = "".join(traceback.format_exception(*record.exc_info))

        return json.dumps(log_entry, default=str)

    @staticmethod
    def _context(record: logging.LogRecord) -> Dict[str, Any]:
        return {key: value for key, value in vars(record).items() if key not in _RESERVED}


def get_logger(service_name: str, level: Optional[int] = None) -> StructuredLogger:
    """Get a structured logger for the service."""
    if level is None:
        from infrastructure.config import get_log_level

        level = get_log_level()
    return StructuredLogger(service_name=service_name, level=level)
