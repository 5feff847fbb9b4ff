"""Rules deciding whether a subject holds a permission.

Every rule implements :class:`RuleInterface`. The Acl looks a rule up by key
and calls :meth:`RuleInterface.matches`; it never inspects which strategy a
rule uses.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Callable, Iterable, Mapping, Optional

from warden.security.roles import DEFAULT_AREA
from warden.utils.logging import get_logger

if TYPE_CHECKING:
    from warden.security.acl import Acl

logger = get_logger(__name__)

Handler = Callable[..., Any]
Matcher = Callable[["Acl", str, Mapping[str, Any], Any], Any]


class RuleInterface:
    """Base class for a keyed unit of decision logic."""

    def __init__(self, key: str, area: str = DEFAULT_AREA) -> None:
        self._key = key
        self._area = area

    def get_key(self) -> str:
        return self._key

    def get_area(self) -> str:
        return self._area

    @property
    def key(self) -> str:
        return self._key

    @property
    def area(self) -> str:
        return self._area

    def matches(self, acl: "Acl", key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        """Return whether ``subject`` passes this rule for ``key``."""

        raise NotImplementedError

    def __repr__(self) -> str:
        return f"{type(self).__name__}(key={self._key!r}, area={self._area!r})"


class Rule(RuleInterface):
    """Rule built through :meth:`warden.security.acl.Acl.rule`.

    By default the subject must hold the permission key itself. An optional
    handler refines the decision; it is called as
    ``handler(subject, **parameters)`` and its result is used as the match.
    Parameter keys therefore have to be strings; any other key raises
    ``TypeError`` out of :meth:`matches`, and that error is not caught.
    """

    def __init__(self, key: str, area: str = DEFAULT_AREA) -> None:
        super().__init__(key, area)
        self._title: Optional[str] = None
        self._needs_permission = True
        self._handler: Optional[Handler] = None

    def set_area(self, area: str) -> "Rule":
        self._area = area
        return self

    def set_title(self, title: str) -> "Rule":
        self._title = title
        return self

    def get_title(self) -> str:
        return self._title or self._key

    def needs_permission(self, needed: bool = True) -> "Rule":
        self._needs_permission = needed
        return self

    def set_handler(self, handler: Handler) -> "Rule":
        self._handler = handler
        return self

    def get_handler(self) -> Optional[Handler]:
        return self._handler

    def matches(self, acl: "Acl", key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        if self._needs_permission:
            if subject is None:
                return False
            if not subject.has_permission(key):
                return False
        if self._handler is None:
            return True
        return bool(self._handler(subject, **parameters))


class StaticRule(RuleInterface):
    """Rule with a fixed outcome, independent of the subject."""

    def __init__(self, key: str, allowed: bool, area: str = DEFAULT_AREA) -> None:
        super().__init__(key, area)
        self.allowed = allowed

    def matches(self, acl: "Acl", key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        return self.allowed


class RoleRule(RuleInterface):
    """Match subjects whose role is one of ``roles``.

    The role must also be registered with the Acl and active there, so
    removing a role from the registry revokes the rule for its holders.
    """

    def __init__(self, key: str, roles: Iterable[str], area: str = DEFAULT_AREA) -> None:
        super().__init__(key, area)
        self.roles = frozenset(roles)

    def matches(self, acl: "Acl", key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        if subject is None:
            return False
        role = subject.get_role()
        if role is None or role.key not in self.roles:
            return False
        registered = acl.get_role(role.key)
        if registered is None:
            logger.debug("role not registered", extra={"rule": self._key, "area": self._area})
            return False
        return registered.active


class CallableRule(RuleInterface):
    """Delegate the decision to ``func(acl, key, parameters, subject)``."""

    def __init__(self, key: str, func: Matcher, area: str = DEFAULT_AREA) -> None:
        super().__init__(key, area)
        self.func = func

    def matches(self, acl: "Acl", key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        return bool(self.func(acl, key, parameters, subject))


__all__ = ["CallableRule", "Handler", "Matcher", "RoleRule", "Rule", "RuleInterface", "StaticRule"]
