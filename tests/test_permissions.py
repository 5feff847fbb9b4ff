from warden.security.permissions import PermissionSet


def test_permission_set_mutation() -> None:
    permissions = PermissionSet(name="editor")
    assert permissions.is_empty()

    permissions.add("articles.read", "articles.update")
    assert permissions.all() == ["articles.read", "articles.update"]
    assert "articles.read" in permissions
    assert len(permissions) == 2

    permissions.remove("articles.update")
    assert not permissions.has("articles.update")

    permissions.set(["comments.read"])
    assert permissions.all() == ["comments.read"]


def test_permission_set_composite_can() -> None:
    permissions = PermissionSet.of("a", "b")
    assert permissions.can("a")
    assert permissions.can("a|b")
    assert not permissions.can("a|c")
    assert permissions.cant("c")
    assert not permissions.can("a|")
