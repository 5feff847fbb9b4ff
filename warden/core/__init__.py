"""Runtime configuration."""
from __future__ import annotations

from .config import AclConfigManager, AclSettings, LoggingSettings

__all__ = ["AclConfigManager", "AclSettings", "LoggingSettings"]
