"""Roles and the area-aware role registry."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional

from warden.security.permissions import PermissionEvaluator, PermissionSet

DEFAULT_AREA = "default"


@dataclass
class Role(PermissionEvaluator):
    """A named, area-tagged bag of permissions."""

    key: str
    area: str = DEFAULT_AREA
    name: Optional[str] = None
    active: bool = True
    permissions: PermissionSet = field(default_factory=PermissionSet)

    def __post_init__(self) -> None:
        if not self.permissions.name:
            self.permissions.name = self.key

    @property
    def title(self) -> str:
        return self.name or self.key

    def has_permission(self, key: str) -> bool:
        return self.permissions.has(key)

    def can(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return self.permissions.can(key)

    def cant(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return not self.can(key, parameters, subject)


class Roles:
    """Ordered registry of roles keyed by :attr:`Role.key`.

    Filtering methods return new registries; the receiver is never modified
    by them.
    """

    def __init__(self, *roles: Role) -> None:
        self._roles: Dict[str, Role] = {}
        for role in roles:
            self.add(role)

    def add(self, role: Role) -> "Roles":
        self._roles[role.key] = role
        return self

    def all(self) -> Dict[str, Role]:
        return dict(self._roles)

    def area(self, area: str) -> "Roles":
        return Roles(*(role for role in self._roles.values() if role.area == area))

    def active(self) -> "Roles":
        return Roles(*(role for role in self._roles.values() if role.active))

    def get(self, key: str) -> Optional[Role]:
        return self._roles.get(key)

    def has(self, key: str) -> bool:
        return key in self._roles

    def __iter__(self) -> Iterator[Role]:
        return iter(self._roles.values())

    def __len__(self) -> int:
        return len(self._roles)

    def __contains__(self, key: object) -> bool:
        return key in self._roles

    def __repr__(self) -> str:
        return f"Roles({', '.join(self._roles)})"


__all__ = ["DEFAULT_AREA", "Role", "Roles"]
