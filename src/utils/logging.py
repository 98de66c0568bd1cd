"""Structured JSON logging configuration."""

import json
import logging
from datetime import datetime, timezone
from typing import Dict, Any

MASK = "***"

# Extra keys whose values must never reach the log stream
SENSITIVE_KEYS = frozenset({
    'password', 'password_hash', 'token', 'access_token', 'authorization',
    'verification_code', 'verificationcode', 'secret', 'auth_token',
    'phone', 'to',
})


class JSONFormatter(logging.Formatter):
    """Format log records as JSON for structured logging."""

    # Standard LogRecord attributes that should not be included as extra fields
    _STANDARD_ATTRS = {
        'name', 'msg', 'args', 'created', 'filename', 'funcName', 'levelname',
        'levelno', 'lineno', 'module', 'msecs', 'message', 'pathname',
        'process', 'processName', 'relativeCreated', 'thread', 'threadName',
        'exc_info', 'exc_text', 'stack_info', 'taskName'
    }

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        # logger.info("message", extra={"email": ...}) puts email in record.__dict__
        for key, value in record.__dict__.items():
            if key in self._STANDARD_ATTRS or callable(value):
                continue
            log_data[key] = MASK if key.lower() in SENSITIVE_KEYS else value

        return json.dumps(log_data, default=str)


def setup_structured_logging(level: str = "INFO"):
    """Configure structured JSON logging for the application.

    This configures all loggers including uvicorn access logs.
    """
    handler = logging.StreamHandler()
    handler.setFormatter(JSONFormatter())
    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    # Keep uvicorn access logs in the same format, warnings and above only
    uvicorn_access = logging.getLogger("uvicorn.access")
    uvicorn_access.handlers = [handler]
    uvicorn_access.setLevel(logging.WARNING)
