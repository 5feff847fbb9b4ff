"""Authorization primitives: the Acl, rules, roles and subjects."""
from __future__ import annotations

from .acl import Acl
from .permissions import PermissionEvaluator, PermissionSet
from .roles import DEFAULT_AREA, Role, Roles
from .rules import CallableRule, RoleRule, Rule, RuleInterface, StaticRule
from .subjects import Authorizable, User

__all__ = [
    "Acl",
    "Authorizable",
    "CallableRule",
    "DEFAULT_AREA",
    "PermissionEvaluator",
    "PermissionSet",
    "Role",
    "RoleRule",
    "Roles",
    "Rule",
    "RuleInterface",
    "StaticRule",
    "User",
]
