"""Shared helpers: errors and logging."""
from __future__ import annotations

from .errors import ConfigurationError, PermissionDenied, WardenError
from .logging import configure_logging, get_logger

__all__ = [
    "ConfigurationError",
    "PermissionDenied",
    "WardenError",
    "configure_logging",
    "get_logger",
]
