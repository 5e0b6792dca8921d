# File: json_walker/core/log_setup.py

import logging
import sys
from typing import Optional

from json_walker.core.config.settings import settings


def configure_logging(level: Optional[int] = None) -> None:
    """
    Sends package logs to stderr so stdout only ever carries paths.
    Calling it again just updates the level.
    """
    package_logger = logging.getLogger("json_walker")
    package_logger.setLevel(settings.LOG_LEVEL if level is None else level)

    if not package_logger.handlers:
        handler = logging.StreamHandler(sys.stderr)
        handler.setFormatter(logging.Formatter(settings.LOG_FORMAT))
        package_logger.addHandler(handler)
