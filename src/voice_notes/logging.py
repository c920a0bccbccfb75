"""Structured JSON logging shared by every module of the service."""

import logging
import os
import sys

from pythonjsonlogger import jsonlogger

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
SERVER_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | None = None) -> logging.Logger:
    """
    Routes the root logger and the Uvicorn loggers through one JSON handler.

    Records carry trace_id and span_id so they line up with ddtrace spans
    when log injection is enabled.

    Args:
        level: Log level name; falls back to the LOG_LEVEL environment
            variable, then INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    level = (level or os.getenv("LOG_LEVEL") or "INFO").upper()

    handler = logging.StreamHandler(sys.stdout)
    handler.setFormatter(jsonlogger.JsonFormatter(LOG_FORMAT))

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers = [handler]

    for name in SERVER_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.setLevel(level)
        server_logger.handlers = [handler]
        server_logger.propagate = False

    return root_logger
