import logging
import sys
import json
from datetime import datetime, timezone
from typing import Optional
from songs_api.core.config import settings

# Attributes every LogRecord carries; anything else was passed via ``extra``
_RESERVED_ATTRS = set(vars(logging.LogRecord("", 0, "", 0, "", None, None))) | {"message", "asctime"}

class JSONFormatter(logging.Formatter):
    """Custom JSON formatter for logs"""
    def format(self, record: logging.LogRecord) -> str:
        log_data = {
            "timestamp": datetime.now(timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno
        }

        # Add extra fields if present
        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS and not key.startswith("_"):
                log_data[key] = value

        # Add exception info if present
        if record.exc_info:
            log_data["exception"] = {
                "type": str(record.exc_info[0].__name__),
                "message": str(record.exc_info[1]),
                "traceback": self.formatException(record.exc_info)
            }

        return json.dumps(log_data, default=str)

def setup_logging(debug: Optional[bool] = None, environment: Optional[str] = None) -> None:
    """Configure application logging"""
    if debug is None:
        debug = settings.DEBUG
    if environment is None:
        environment = settings.ENVIRONMENT

    root_logger = logging.getLogger()

    # Remove existing handlers
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    # Set log level based on environment
    log_level = logging.DEBUG if debug else logging.INFO
    root_logger.setLevel(log_level)

    # Create console handler with JSON formatter
    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setFormatter(JSONFormatter())
    root_logger.addHandler(console_handler)

    # Set levels for third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.INFO)  # Keep access logs
    logging.getLogger("uvicorn.error").setLevel(logging.INFO)   # Keep error logs
    logging.getLogger("httpx").setLevel(logging.WARNING)

    root_logger.info(
        "Application logging configured",
        extra={
            "environment": environment,
            "debug": debug,
            "log_level": logging.getLevelName(log_level),
            "formatter": "JSON"
        }
    )
