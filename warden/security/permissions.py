"""Permission sets held by roles and users."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Iterable, List, Mapping, Optional, Protocol, Set, runtime_checkable

SEPARATOR = "|"


@runtime_checkable
class PermissionEvaluator(Protocol):
    """Anything answering ``can``/``cant`` for a permission key."""

    def can(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool: ...

    def cant(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool: ...


@dataclass
class PermissionSet(PermissionEvaluator):
    """A named collection of permission keys.

    ``can`` accepts the same composite syntax as the Acl: ``"a|b"`` holds only
    when every key is present.
    """

    name: str = ""
    keys: Set[str] = field(default_factory=set)

    @classmethod
    def of(cls, *keys: str, name: str = "") -> "PermissionSet":
        return cls(name=name, keys=set(keys))

    def add(self, *keys: str) -> "PermissionSet":
        self.keys.update(keys)
        return self

    def set(self, keys: Iterable[str]) -> "PermissionSet":
        self.keys = set(keys)
        return self

    def remove(self, *keys: str) -> "PermissionSet":
        self.keys.difference_update(keys)
        return self

    def has(self, key: str) -> bool:
        return key in self.keys

    def all(self) -> List[str]:
        return sorted(self.keys)

    def is_empty(self) -> bool:
        return not self.keys

    def can(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return all(self.has(part) for part in key.split(SEPARATOR))

    def cant(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return not self.can(key, parameters, subject)

    def __contains__(self, key: object) -> bool:
        return key in self.keys

    def __len__(self) -> int:
        return len(self.keys)


__all__ = ["PermissionEvaluator", "PermissionSet", "SEPARATOR"]
