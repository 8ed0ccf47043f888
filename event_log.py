"""
Structured single-line JSON logging

Every event is one JSON object per line so logs stay easy to filter and parse.
"""
import json
import logging
import os
from typing import Optional

LOGGER_NAME = "random_integer"

logger = logging.getLogger(LOGGER_NAME)


def configure_logging(level: Optional[str] = None):
    """Set up the root handler with a bare message format."""
    level_name = (level or os.getenv("LOG_LEVEL", "INFO")).upper()
    logging.basicConfig(level=level_name, format="%(message)s")
    logger.setLevel(level_name)


def log_event(event: str, level: int = logging.INFO, **data):
    """Emit a single-line JSON log."""
    if not logger.isEnabledFor(level):
        return
    payload = {"event": event, **data}
    logger.log(level, json.dumps(payload, default=str))
