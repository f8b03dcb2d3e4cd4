"""
Application-wide logging configuration.

All modules obtain a child of the ``tables_to_go`` logger through
``get_logger(__name__)``. :func:`configure_logging` attaches one stderr
handler and switches to DEBUG for verbose runs.
"""

from __future__ import annotations

import logging
import sys

_ROOT_LOGGER_NAME = "tables_to_go"
_CONSOLE_FORMAT = "> %(levelname)s %(name)s: %(message)s"


def configure_logging(verbose: bool = False) -> logging.Logger:
    """Set up the root ``tables_to_go`` logger; safe to call repeatedly."""
    root = logging.getLogger(_ROOT_LOGGER_NAME)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)

    if not any(getattr(handler, "_tables_to_go", False) for handler in root.handlers):
        console_handler = logging.StreamHandler(sys.stderr)
        console_handler.setFormatter(logging.Formatter(fmt=_CONSOLE_FORMAT))
        console_handler._tables_to_go = True  # type: ignore[attr-defined]
        root.addHandler(console_handler)

    return root


def get_logger(name: str) -> logging.Logger:
    """
    Return a child logger scoped to the given name.

    Args:
        name: Typically ``__name__`` of the calling module.
    """
    if name == _ROOT_LOGGER_NAME or name.startswith(f"{_ROOT_LOGGER_NAME}."):
        return logging.getLogger(name)
    return logging.getLogger(f"{_ROOT_LOGGER_NAME}.{name}")
