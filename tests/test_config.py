import logging
from pathlib import Path

import pytest

from warden.core.config import AclConfigManager, AclSettings
from warden.utils.errors import ConfigurationError


def test_defaults_without_config(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("WARDEN_CONFIG", raising=False)
    settings = AclConfigManager().load()
    assert settings.default_rule_area == "default"
    assert settings.logging.level == "INFO"


def test_load_yaml_from_env(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    config_path = tmp_path / "warden.yml"
    config_path.write_text(
        "default_rule_area: frontend\nlogging:\n  level: debug\n  rich: false\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("WARDEN_CONFIG", str(config_path))
    manager = AclConfigManager()
    settings = manager.get_settings()
    assert settings.default_rule_area == "frontend"
    assert settings.logging.level == "DEBUG"
    assert settings.logging.rich is False
    assert manager.get_settings() is settings


def test_load_toml(tmp_path: Path) -> None:
    config_path = tmp_path / "warden.toml"
    config_path.write_text('default_rule_area = "backend"\n', encoding="utf-8")
    settings = AclConfigManager(config_path).load()
    assert settings.default_rule_area == "backend"


@pytest.mark.parametrize(
    ("name", "content"),
    [
        ("missing.yml", None),
        ("warden.ini", "default_rule_area = x"),
        ("blank.yml", "default_rule_area: '  '\n"),
        ("level.yml", "logging:\n  level: LOUD\n"),
        ("list.yml", "- a\n- b\n"),
        ("broken.toml", "default_rule_area = \n"),
        ("intkey.yml", "1: frontend\n"),
    ],
)
def test_invalid_configuration(tmp_path: Path, name: str, content: str | None) -> None:
    config_path = tmp_path / name
    if content is not None:
        config_path.write_text(content, encoding="utf-8")
    with pytest.raises(ConfigurationError):
        AclConfigManager(config_path).load()


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers, level = list(root.handlers), root.level
    yield
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_apply_logging_writes_json(tmp_path: Path, restore_root_logging) -> None:
    settings = AclSettings(logging={"level": "DEBUG", "directory": tmp_path, "rich": False})
    settings.apply_logging()
    logging.getLogger("warden.test").info("configured", extra={"rule": "articles.read"})
    for handler in logging.getLogger().handlers:
        handler.flush()
    content = (tmp_path / "warden.log").read_text(encoding="utf-8")
    assert '"rule": "articles.read"' in content
    assert '"message": "configured"' in content
