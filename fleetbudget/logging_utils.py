"""Mini README: Application-wide logging helpers for the fleet tracker.

Structure:
    * configure_root_logger - installs the shared stderr handler once and
      adjusts the root level on later calls.
    * get_logger - factory returning module loggers with baseline setup.

Usage:
    Modules create a module-level ``LOGGER = get_logger(__name__)``. The CLI
    calls ``configure_root_logger`` with the level chosen by settings or the
    ``--log-level`` option so diagnostics stay off the interactive menu
    unless requested.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

LOG_FORMAT = "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

_HANDLER: Optional[logging.Handler] = None


def resolve_level(level: Union[int, str]) -> int:
    """Translate level names such as ``"debug"`` into logging constants."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.WARNING) -> None:
    """Attach the fleet handler to the root logger and set its level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    if _HANDLER is not None:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT))
    root_logger.addHandler(handler)
    _HANDLER = handler


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring the shared handler exists."""

    if _HANDLER is None:
        configure_root_logger()
    return logging.getLogger(name)
