"""The Acl facade: rule registry, role registry and permission resolution."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, Dict, Iterable, Mapping, Optional, Union

from warden.security.permissions import SEPARATOR, PermissionEvaluator
from warden.security.roles import DEFAULT_AREA, Role, Roles
from warden.security.rules import Rule, RuleInterface
from warden.utils.errors import PermissionDenied
from warden.utils.logging import get_logger

if TYPE_CHECKING:
    from warden.core.config import AclSettings

logger = get_logger(__name__)


class Acl(PermissionEvaluator):
    """Resolve permission checks against registered rules.

    An Acl is mutable and holds a single current user; share one between
    concurrent requests only with external locking.
    """

    def __init__(self, *, default_rule_area: str = DEFAULT_AREA) -> None:
        self._current_user: Any = None
        self._default_rule_area = default_rule_area
        self._rules: Dict[str, RuleInterface] = {}
        self._roles: Optional[Roles] = None

    @classmethod
    def from_settings(cls, settings: "AclSettings") -> "Acl":
        return cls(default_rule_area=settings.default_rule_area)

    # -- subject -----------------------------------------------------------------
    def set_current_user(self, subject: Any) -> "Acl":
        self._current_user = subject
        return self

    def get_current_user(self) -> Any:
        return self._current_user

    # -- rules ---------------------------------------------------------------------
    def set_default_rule_area(self, area: str) -> "Acl":
        self._default_rule_area = area
        return self

    def get_default_rule_area(self) -> str:
        return self._default_rule_area

    def rule(self, key: str) -> Rule:
        """Create a :class:`Rule` in the default area, register and return it."""

        rule = Rule(key, area=self._default_rule_area)
        self.add_rule(rule)
        return rule

    def add_rule(self, rule: RuleInterface) -> "Acl":
        key = rule.get_key()
        if key in self._rules:
            logger.debug("rule replaced", extra={"rule": key, "area": rule.get_area()})
        self._rules[key] = rule
        return self

    def get_rule(self, key: str) -> Optional[RuleInterface]:
        return self._rules.get(key)

    def get_rules(self) -> Dict[str, RuleInterface]:
        return self._rules

    # -- evaluation ----------------------------------------------------------------
    def can(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        """Return whether the subject holds ``key``.

        ``key`` may combine several permissions as ``"user.create|user.update"``.
        All of them must match; evaluation stops at the first denial. Each part
        receives ``parameters[part]`` as its own parameters. Without
        ``subject`` the current user is checked.
        """

        if parameters is None:
            parameters = {}
        if SEPARATOR not in key:
            return self._check(key, parameters, subject)

        for part in key.split(SEPARATOR):
            part_parameters = parameters.get(part)
            if part_parameters is None:
                part_parameters = {}
            if not self.can(part, part_parameters, subject):
                return False
        return True

    def cant(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> bool:
        return not self.can(key, parameters, subject)

    def authorize(
        self,
        key: str,
        parameters: Optional[Mapping[str, Any]] = None,
        subject: Any = None,
    ) -> None:
        """Raise :class:`PermissionDenied` unless :meth:`can` allows ``key``."""

        if self.cant(key, parameters, subject):
            raise PermissionDenied(key)

    def _check(self, key: str, parameters: Mapping[str, Any], subject: Any) -> bool:
        rule = self.get_rule(key)
        if rule is None:
            logger.debug("no rule registered", extra={"rule": key})
            return False
        if subject is None:
            subject = self._current_user
        allowed = bool(rule.matches(self, key, parameters, subject))
        logger.debug(
            "permission %s",
            "granted" if allowed else "denied",
            extra={"rule": key, "area": rule.get_area(), "subject": getattr(subject, "id", None)},
        )
        return allowed

    # -- roles ---------------------------------------------------------------------
    def set_roles(self, roles: Union[Roles, Iterable[Role]]) -> "Acl":
        """Replace the role registry.

        A :class:`Roles` instance is kept as is; any other iterable of roles is
        wrapped into a new registry.
        """

        if isinstance(roles, Roles):
            self._roles = roles
        else:
            self._roles = Roles(*roles)
        return self

    def get_roles(self, area: Optional[str] = None) -> Dict[str, Role]:
        if area is None:
            return self.roles().all()
        return self.roles().area(area).all()

    def roles(self) -> Roles:
        """Return the role registry, or a new empty one if none was set.

        The empty registry is not stored on the Acl.
        """

        if self._roles is None:
            return Roles()
        return self._roles

    def get_role(self, key: str) -> Optional[Role]:
        return self.roles().get(key)

    def has_role(self, key: str) -> bool:
        return self.roles().has(key)


__all__ = ["Acl", "PermissionEvaluator"]
