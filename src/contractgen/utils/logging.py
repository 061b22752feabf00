"""Logging utilities.

Purpose:
    Centralize logging configuration for the package.

Key responsibilities:
    - Provide a helper to obtain loggers under the ``contractgen`` namespace.
    - Leave handler and level configuration to the application.

Public contracts:
    - ``get_logger(name)``: Return a logger below the package logger.

Notes/Edge cases:
    - Logging configuration is idempotent; a single ``NullHandler`` is installed
      on the package logger so library users see no output unless they opt in.
"""

from __future__ import annotations

import logging

_ROOT = "contractgen"


def get_logger(name: str | None = None) -> logging.Logger:
    """Return a logger for ``name`` nested under the package logger."""

    root = logging.getLogger(_ROOT)
    if not any(isinstance(h, logging.NullHandler) for h in root.handlers):
        root.addHandler(logging.NullHandler())
    if not name or name == _ROOT:
        return root
    if not name.startswith(_ROOT + "."):
        name = f"{_ROOT}.{name}"
    return logging.getLogger(name)


__all__ = ["get_logger"]
