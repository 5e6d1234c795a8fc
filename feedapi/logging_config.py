"""
Feed API Logging Configuration
Structured JSON logging with context for debugging and monitoring
"""
import logging
import sys
import json
import traceback
from datetime import datetime, timezone
from typing import Optional
from functools import wraps
import time

from .config import get_settings

LOG_LEVEL = get_settings().log_level.upper()


class StructuredFormatter(logging.Formatter):
    """One JSON object per record, context keys merged in"""

    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": getattr(record, "logger_name", record.name),
            "message": record.getMessage(),
        }
        log_data.update(getattr(record, "context", {}))
        return json.dumps(log_data, default=str)


class StructuredLogger:
    """Thin wrapper over a stdlib logger taking keyword context"""

    def __init__(self, name: str):
        self.name = name
        self.logger = logging.getLogger(name)
        self.logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))

        # Re-importing must not stack handlers
        self.logger.handlers = []
        handler = logging.StreamHandler(sys.stdout)
        handler.setFormatter(StructuredFormatter())
        self.logger.addHandler(handler)

    def _log(self, level: int, message: str, context: dict):
        self.logger.log(level, message, extra={"context": context, "logger_name": self.name})

    def debug(self, message: str, **context):
        self._log(logging.DEBUG, message, context)

    def info(self, message: str, **context):
        self._log(logging.INFO, message, context)

    def warning(self, message: str, **context):
        self._log(logging.WARNING, message, context)

    def error(self, message: str, error: Optional[Exception] = None, **context):
        if error:
            context.update(
                error_type=type(error).__name__,
                error_message=str(error),
                traceback=traceback.format_exc(),
            )
        self._log(logging.ERROR, message, context)


def timed(logger: StructuredLogger):
    """Log call duration at DEBUG; failures are left to the caller to report"""
    def decorator(func):
        name = func.__qualname__

        @wraps(func)
        def wrapper(*args, **kwargs):
            start = time.perf_counter()
            outcome = "failed"
            try:
                result = func(*args, **kwargs)
                outcome = "completed"
                return result
            finally:
                logger.debug(
                    f"{name} {outcome}",
                    function=name,
                    duration_ms=round((time.perf_counter() - start) * 1000, 2),
                )

        return wrapper

    return decorator


api_logger = StructuredLogger("feedapi.api")
db_logger = StructuredLogger("feedapi.db")
request_logger = StructuredLogger("feedapi.requests")
