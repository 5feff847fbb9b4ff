import pytest

from warden import Acl, Role, RoleRule, Rule, StaticRule, User
from warden.security.permissions import PermissionSet
from warden.security.rules import CallableRule


def _editor(*permissions: str) -> User:
    return User("u1", role=Role("editor", permissions=PermissionSet.of(*permissions)))


def test_rule_requires_subject_permission() -> None:
    acl = Acl()
    acl.rule("articles.read")

    assert acl.can("articles.read", subject=_editor("articles.read"))
    assert not acl.can("articles.read", subject=_editor("articles.update"))
    assert not acl.can("articles.read")


def test_rule_handler_receives_parameters_as_keywords() -> None:
    acl = Acl()
    seen = {}

    def owns_article(user, article_owner=None):
        seen["user"] = user
        return article_owner == user.id

    acl.rule("articles.update").set_handler(owns_article)
    user = _editor("articles.update")
    acl.set_current_user(user)

    assert acl.can("articles.update", {"article_owner": "u1"})
    assert seen["user"] is user
    assert not acl.can("articles.update", {"article_owner": "u2"})


def test_rule_without_permission_requirement_uses_handler_only() -> None:
    acl = Acl()
    acl.rule("newsletter.subscribe").needs_permission(False).set_handler(lambda user: user is None)

    assert acl.can("newsletter.subscribe")
    assert not acl.can("newsletter.subscribe", subject=_editor())


def test_rule_without_permission_or_handler_always_matches() -> None:
    acl = Acl()
    acl.rule("public").needs_permission(False)
    assert acl.can("public")


def test_rule_fluent_configuration() -> None:
    rule = Rule("articles.read").set_title("Read articles").set_area("frontend")
    assert rule.get_title() == "Read articles"
    assert rule.get_area() == "frontend"
    assert rule.area == "frontend"
    assert rule.key == "articles.read"
    assert Rule("x").get_title() == "x"
    assert Rule("x").get_handler() is None


def test_static_rule_ignores_subject() -> None:
    acl = Acl()
    acl.add_rule(StaticRule("open", True, area="frontend"))
    assert acl.can("open")
    assert acl.get_rule("open").get_area() == "frontend"


def test_role_rule_consults_acl_roles() -> None:
    acl = Acl()
    acl.add_rule(RoleRule("dashboard.view", roles=["editor", "admin"]))
    user = _editor()

    assert not acl.can("dashboard.view", subject=user)

    acl.set_roles([Role("editor")])
    assert acl.can("dashboard.view", subject=user)
    assert not acl.can("dashboard.view", subject=User("guest", role=Role("guest")))
    assert not acl.can("dashboard.view", subject=User("nobody"))
    assert not acl.can("dashboard.view")


def test_role_rule_denies_inactive_registered_role() -> None:
    acl = Acl()
    acl.add_rule(RoleRule("dashboard.view", roles=["editor"]))
    acl.set_roles([Role("editor", active=False)])
    assert not acl.can("dashboard.view", subject=_editor())


def test_callable_rule_receives_full_context() -> None:
    acl = Acl()
    calls = []

    def decide(acl_, key, parameters, subject):
        calls.append((acl_, key, parameters, subject))
        return parameters.get("ok", False)

    acl.add_rule(CallableRule("custom", decide))
    user = User("u1")
    assert acl.can("custom", {"ok": True}, user)
    assert calls == [(acl, "custom", {"ok": True}, user)]
    assert not acl.can("custom")


def test_rule_handler_rejects_non_string_parameter_keys() -> None:
    acl = Acl()
    acl.rule("articles.read").needs_permission(False).set_handler(lambda user, **kwargs: True)

    with pytest.raises(TypeError):
        acl.can("articles.read", {1: "x"})
