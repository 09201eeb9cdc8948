"""JSON structured logging configuration."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

SERVICE_NAME = "de-score"

_SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")
# Firecrawl scrapes go through httpx; one INFO line per request is noise
_HTTP_CLIENT_LOGGERS = ("httpx", "httpcore")


def setup_logging(log_level: str = "INFO") -> None:
    """Send root and uvicorn logs to stdout as one JSON object per line.

    Every line carries ``service``; HTTP client chatter is only shown at DEBUG.
    """
    level = getattr(logging, log_level.upper(), logging.INFO)

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(
        JsonFormatter(
            fmt="%(asctime)s %(levelname)s %(name)s %(message)s",
            rename_fields={
                "asctime": "timestamp",
                "levelname": "level",
                "name": "logger",
            },
            static_fields={"service": SERVICE_NAME},
            datefmt="%Y-%m-%dT%H:%M:%S%z",
        )
    )

    root = logging.getLogger()
    root.setLevel(level)
    root.handlers.clear()
    root.addHandler(handler)

    for name in _SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.addHandler(handler)
        server_logger.propagate = False

    client_level = logging.DEBUG if level <= logging.DEBUG else logging.WARNING
    for name in _HTTP_CLIENT_LOGGERS:
        logging.getLogger(name).setLevel(client_level)
