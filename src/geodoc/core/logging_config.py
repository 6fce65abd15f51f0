"""
Logging for geodoc.

Every geodoc module logs through a child of the ``geodoc`` logger. Nothing is
configured on import; ``setup_logging`` is for applications and scripts that
want geodoc's records written somewhere.
"""

import json
import logging
import sys
from typing import Any, Dict, Optional, TextIO

from geodoc.core.config import settings

LIBRARY_LOGGER_NAME = "geodoc"


class JSONFormatter(logging.Formatter):
    """
    Write each record as one JSON object.

    Records emitted while classifying a document carry a ``document_type``
    extra, which is copied into the output.
    """

    def format(self, record: logging.LogRecord) -> str:
        log_data: Dict[str, Any] = {
            "timestamp": self.formatTime(record, self.datefmt),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }

        document_type = getattr(record, "document_type", None)
        if document_type is not None:
            log_data["document_type"] = document_type

        if record.exc_info:
            log_data["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_data, default=str)


def get_log_level(level_name: Optional[str] = None) -> int:
    """
    Resolve a log level name.

    Args:
        level_name: Level name, case-insensitive. When None, ``settings.log_level``
            is used, then DEBUG in development and WARNING elsewhere.

    Returns:
        Logging level constant, INFO for unknown names
    """
    if level_name is None:
        level_name = settings.log_level or (
            "DEBUG" if settings.environment == "development" else "WARNING"
        )
    level = logging.getLevelName(level_name.upper())
    return level if isinstance(level, int) else logging.INFO


def get_logger(name: str) -> logging.Logger:
    """Return a logger under the ``geodoc`` logger (typically for ``__name__``)."""
    if name != LIBRARY_LOGGER_NAME and not name.startswith(LIBRARY_LOGGER_NAME + "."):
        name = f"{LIBRARY_LOGGER_NAME}.{name}"
    return logging.getLogger(name)


def setup_logging(
    log_level: Optional[str] = None,
    json_logs: bool = False,
    stream: Optional[TextIO] = None,
) -> logging.Logger:
    """
    Write geodoc's records to a stream.

    Calling again replaces the handler installed by the previous call. Records
    no longer propagate to the root logger, so they are written once.

    Args:
        log_level: Level name, resolved by ``get_log_level``
        json_logs: Whether to write records as JSON objects
        stream: Output stream, defaults to stderr

    Returns:
        The ``geodoc`` logger
    """
    logger = logging.getLogger(LIBRARY_LOGGER_NAME)
    level = get_log_level(log_level)

    for handler in logger.handlers[:]:
        logger.removeHandler(handler)
        handler.close()

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    if json_logs:
        handler.setFormatter(JSONFormatter())
    else:
        handler.setFormatter(
            logging.Formatter(
                "%(levelname)s - %(asctime)s - %(name)s - %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )

    logger.addHandler(handler)
    logger.setLevel(level)
    logger.propagate = False
    return logger
