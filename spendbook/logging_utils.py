"""Mini README: Application-wide logging helpers for Spendbook.

Structure:
    * get_logger - factory returning module loggers with baseline configuration.
    * configure_root_logger - installs the shared handler and sets the level.
    * resolve_level - converts level names such as ``"debug"`` to integers.

Usage:
    Modules call ``get_logger(__name__)`` once at import time. The handler is
    attached exactly once; later calls to ``configure_root_logger`` only adjust
    the level so the CLI can honour settings loaded after import.
"""

from __future__ import annotations

import logging
from typing import Optional, Union

_LOGGER_INITIALISED = False


def resolve_level(level: Union[int, str]) -> int:
    """Translate a level name or number into a ``logging`` level."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown logging level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger with a compact, timestamped formatter."""

    global _LOGGER_INITIALISED
    root_logger = logging.getLogger()
    root_logger.setLevel(resolve_level(level))
    if _LOGGER_INITIALISED:
        return

    handler = logging.StreamHandler()
    handler.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(handler)
    _LOGGER_INITIALISED = True


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger ensuring baseline configuration."""

    if not _LOGGER_INITIALISED:
        configure_root_logger()
    return logging.getLogger(name)
