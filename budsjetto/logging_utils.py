"""Mini README: Application-wide logging helpers for Budsjetto.

Structure:
    * configure_root_logger - attach a single formatted handler to the root logger.
    * get_logger - factory returning module loggers with baseline configuration.

Usage:
    Modules create a module level ``LOGGER = get_logger(__name__)``. The
    command line and the web application call ``configure_root_logger`` with
    the level from settings; repeated calls only adjust the level so reloading
    modules never stacks duplicate handlers.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO, Union

_HANDLER: Optional[logging.Handler] = None


class _CurrentStderrHandler(logging.StreamHandler):
    """Stream handler writing to whatever ``sys.stderr`` is at emit time."""

    @property
    def stream(self) -> TextIO:  # type: ignore[override]
        return sys.stderr

    @stream.setter
    def stream(self, value: TextIO) -> None:
        pass


def _coerce_level(level: Union[int, str]) -> int:
    """Accept numeric levels or names such as ``"debug"``."""

    if isinstance(level, int):
        return level
    resolved = logging.getLevelName(str(level).strip().upper())
    if not isinstance(resolved, int):
        raise ValueError(f"Unknown log level: {level}")
    return resolved


def configure_root_logger(level: Union[int, str] = logging.INFO) -> None:
    """Configure the root logger once; later calls only update the level."""

    global _HANDLER
    root_logger = logging.getLogger()
    root_logger.setLevel(_coerce_level(level))
    if _HANDLER is not None:
        return

    _HANDLER = _CurrentStderrHandler()
    _HANDLER.setFormatter(
        logging.Formatter(
            "[%(asctime)s] [%(levelname)s] %(name)s - %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )
    )
    root_logger.addHandler(_HANDLER)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a module-specific logger."""

    return logging.getLogger(name)
