"""Logging setup for the organizer service."""

import json
import logging
import sys
from datetime import UTC, datetime
from typing import Any

from organizer.config import Settings

PACKAGE_LOGGER = "organizer"
TEXT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# Libraries that log per request or per statement
CHATTY_LOGGERS = ("uvicorn.access", "opentelemetry")


class JsonFormatter(logging.Formatter):
    """Formats each record as one JSON object tagged with service and environment."""

    def __init__(self, service: str, environment: str):
        super().__init__()
        self.service = service
        self.environment = environment

    def format(self, record: logging.LogRecord) -> str:
        entry: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, UTC).isoformat(),
            "level": record.levelname,
            "service": self.service,
            "environment": self.environment,
            "logger": record.name,
            "message": record.getMessage(),
        }
        if record.exc_info:
            entry["exception"] = self.formatException(record.exc_info)
        return json.dumps(entry, default=str)


def uses_json(settings: Settings) -> bool:
    """Whether log lines should be JSON for these settings."""
    if settings.log_format == "auto":
        return settings.environment == "production"
    return settings.log_format == "json"


def setup_logging(settings: Settings) -> None:
    """
    Route all logging to stdout.

    The organizer package logs at DEBUG when ``debug`` is set. SQL statements
    are logged only with ``db_echo``. Everything else stays at INFO, apart
    from libraries in ``CHATTY_LOGGERS`` which only report warnings.

    Args:
        settings: Application settings
    """
    handler = logging.StreamHandler(sys.stdout)
    if uses_json(settings):
        handler.setFormatter(JsonFormatter(settings.app_name, settings.environment))
    else:
        handler.setFormatter(logging.Formatter(TEXT_FORMAT))

    root_logger = logging.getLogger()
    for existing in root_logger.handlers[:]:
        root_logger.removeHandler(existing)
    root_logger.addHandler(handler)
    root_logger.setLevel(logging.INFO)

    logging.getLogger(PACKAGE_LOGGER).setLevel(logging.DEBUG if settings.debug else logging.INFO)
    logging.getLogger("sqlalchemy.engine").setLevel(
        logging.INFO if settings.db_echo else logging.WARNING
    )
    for name in CHATTY_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)

    logging.getLogger(__name__).debug(
        f"Logging configured: json={uses_json(settings)} debug={settings.debug} "
        f"db_echo={settings.db_echo}"
    )
