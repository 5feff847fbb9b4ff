"""In-process authorization registry.

Register rules on an :class:`~warden.security.acl.Acl`, optionally attach
roles, then ask ``acl.can("articles.edit")``.
"""
from __future__ import annotations

from warden.core.config import AclConfigManager, AclSettings
from warden.security import (
    Acl,
    Authorizable,
    CallableRule,
    PermissionEvaluator,
    PermissionSet,
    Role,
    RoleRule,
    Roles,
    Rule,
    RuleInterface,
    StaticRule,
    User,
)
from warden.utils.errors import ConfigurationError, PermissionDenied, WardenError

__all__ = [
    "Acl",
    "AclConfigManager",
    "AclSettings",
    "Authorizable",
    "CallableRule",
    "ConfigurationError",
    "PermissionDenied",
    "PermissionEvaluator",
    "PermissionSet",
    "Role",
    "RoleRule",
    "Roles",
    "Rule",
    "RuleInterface",
    "StaticRule",
    "User",
    "WardenError",
]
