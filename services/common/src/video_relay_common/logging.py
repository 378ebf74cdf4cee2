"""Structured JSON logging shared by the relay services."""

import logging
import sys

from pythonjsonlogger.json import JsonFormatter

HANDLER_NAME = "video_relay_json"
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s %(trace_id)s %(span_id)s"
UVICORN_LOGGERS = ("uvicorn", "uvicorn.access", "uvicorn.error")


def setup_logging(level: str | int | None = None) -> logging.Logger:
    """
    Installs the JSON stdout handler once and returns the root logger.

    Every module calls this at import time. The first call replaces the
    default handlers of the root and Uvicorn loggers with a single JSON
    handler (timestamp, level, logger name, message, trace_id, span_id).
    Later calls reuse that handler and only change the level when one is
    given.

    Args:
        level: Level name or number. The first call defaults to INFO.

    Returns:
        logging.Logger: The configured root logger instance.
    """
    root_logger = logging.getLogger()
    uvicorn_loggers = [logging.getLogger(name) for name in UVICORN_LOGGERS]

    if json_handler(root_logger) is None:
        stream_handler = logging.StreamHandler(sys.stdout)
        stream_handler.set_name(HANDLER_NAME)
        stream_handler.setFormatter(JsonFormatter(LOG_FORMAT))

        root_logger.handlers = [stream_handler]
        for u_logger in uvicorn_loggers:
            u_logger.handlers = [stream_handler]
            u_logger.propagate = False

        if level is None:
            level = logging.INFO

    if level is not None:
        if isinstance(level, str):
            level = level.upper()
        for target in (root_logger, *uvicorn_loggers):
            target.setLevel(level)

    return root_logger


def json_handler(logger: logging.Logger) -> logging.Handler | None:
    """Returns the JSON handler installed by setup_logging, if any."""
    for handler in logger.handlers:
        if handler.get_name() == HANDLER_NAME:
            return handler
    return None
