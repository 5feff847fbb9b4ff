"""Custom exceptions used across the warden package."""
from __future__ import annotations


class WardenError(Exception):
    """Base exception for all warden-specific errors."""


class ConfigurationError(WardenError):
    """Raised when configuration loading or validation fails."""


class PermissionDenied(WardenError):
    """Raised by :meth:`warden.security.acl.Acl.authorize` on a denied check."""

    def __init__(self, key: str, message: str | None = None) -> None:
        self.key = key
        super().__init__(message or f"Permission {key!r} denied")


__all__ = [
    "WardenError",
    "ConfigurationError",
    "PermissionDenied",
]
