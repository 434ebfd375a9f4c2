# capkit/logging/logger.py
"""
Unified logging setup for capkit.

All modules use:
    from capkit.logging.logger import get_logger
    logger = get_logger(__name__)

Configuration happens once, in configure_logging(). Library code never
installs handlers on import.
"""

from __future__ import annotations

import logging
import sys
from typing import TYPE_CHECKING, Union

if TYPE_CHECKING:
    from capkit.core.schema import LoggingConfig

DEFAULT_FORMAT = "[%(levelname)s] %(name)s: %(message)s"


def configure_logging(
    level: Union[int, str] = logging.INFO,
    fmt: str = DEFAULT_FORMAT,
    stream=sys.stdout,
) -> None:
    """
    Configure root logging handler.

    Called once early in the application lifecycle.
    Safe to call multiple times: handler duplication is prevented.
    """
    root = logging.getLogger()
    if not root.handlers:
        handler = logging.StreamHandler(stream)
        handler.setFormatter(logging.Formatter(fmt))
        root.addHandler(handler)

    root.setLevel(level)


def configure_from_config(config: "LoggingConfig", stream=sys.stdout) -> None:
    """Configure logging from the ``logging`` section of a CapkitConfig."""
    configure_logging(level=config.level, fmt=config.format, stream=stream)


def get_logger(name: str) -> logging.Logger:
    """
    Modules call this to get a logger.

    Example:
        logger = get_logger(__name__)
    """
    return logging.getLogger(name)
