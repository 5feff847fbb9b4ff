"""Subjects that can be checked for permissions."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Mapping, Optional, Protocol, runtime_checkable

from warden.security.permissions import SEPARATOR, PermissionEvaluator, PermissionSet
from warden.security.roles import Role


@runtime_checkable
class Authorizable(Protocol):
    """Capability required by the permission-checking rules.

    The Acl itself only passes subjects through to rules.
    """

    def has_permission(self, key: str) -> bool: ...

    def get_role(self) -> Optional[Role]: ...


@dataclass
class User(PermissionEvaluator):
    """Default :class:`Authorizable` implementation.

    Permissions granted to the user directly take precedence over the role:
    as soon as the user holds any permission of its own, the role's
    permissions are no longer consulted. Inactive roles grant nothing.
    """

    id: str
    role: Optional[Role] = None
    permissions: PermissionSet = field(default_factory=PermissionSet)

    def get_role(self) -> Optional[Role]:
        return self.role

    def has_role(self) -> bool:
        return self.role is not None

    def has_permission(self, key: str) -> bool:
        if not self.permissions.is_empty():
            return self.permissions.has(key)
        if self.role is None or not self.role.active:
            return False
        return self.role.has_permission(key)

    def can(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return all(self.has_permission(part) for part in key.split(SEPARATOR))

    def cant(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return not self.can(key, parameters, subject)


__all__ = ["Authorizable", "User"]
