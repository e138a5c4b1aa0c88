"""Root logger setup for the ``statsview`` command line.

``STATSVIEW_LOG_LEVEL`` (a level name or number) wins over everything else.
Otherwise a truthy ``STATSVIEW_DEBUG`` or the ``--debug`` flag selects DEBUG,
and INFO is used when neither is set.
"""

from __future__ import annotations

import logging
import os
from typing import Optional

_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
_DATEFMT = "%H:%M:%S"
LEVEL_ENV = "STATSVIEW_LOG_LEVEL"
DEBUG_ENV = "STATSVIEW_DEBUG"


def _env_level() -> Optional[int]:
    text = (os.getenv(LEVEL_ENV) or "").strip()
    if not text:
        return None
    if text.isdigit():
        return int(text)
    level = logging.getLevelName(text.upper())
    return level if isinstance(level, int) else None


def _env_debug() -> bool:
    value = os.getenv(DEBUG_ENV)
    return value is not None and value.strip().lower() in {"1", "true", "yes", "on"}


def configure_root(debug: bool = False) -> int:
    """Install the compact root handler once and set the effective level.

    Returns:
        The level applied to the root logger.
    """
    level = _env_level()
    if level is None:
        level = logging.DEBUG if debug or _env_debug() else logging.INFO

    root = logging.getLogger()
    if not root.handlers:
        logging.basicConfig(level=level, format=_FORMAT, datefmt=_DATEFMT)
    root.setLevel(level)
    return level


def level_name(level: int) -> str:
    return logging.getLevelName(level)


__all__ = ["DEBUG_ENV", "LEVEL_ENV", "configure_root", "level_name"]
