from pathlib import Path

import pytest

from firedebug.config import Settings, coerce_to_bool, load_settings
from firedebug.constants import DEFAULT_STORE_FILE, DEV_MARKER
from firedebug.models import FiredebugError


def test_coerce_to_bool():
    for value in (True, "true", "yes", "on", "1", "enabled", "whatever", 1):
        assert coerce_to_bool(value) is True
    for value in (False, "false", "No", " off ", "0", "disabled", "", "  ", 0):
        assert coerce_to_bool(value) is False
    assert coerce_to_bool(None, default=True) is True
    assert coerce_to_bool(None) is False


def test_defaults():
    settings = Settings()
    assert settings.enabled is True
    assert settings.app_id == ""
    assert settings.marker == DEV_MARKER
    assert settings.store == DEFAULT_STORE_FILE


def test_from_dict(monkeypatch, tmp_path):
    monkeypatch.setenv("PREFS", str(tmp_path))
    settings = Settings.from_dict({"enabled": "off", "app_id": "com.x.dev", "store": "$PREFS/p.json", "extra": 1})
    assert settings.enabled is False
    assert settings.app_id == "com.x.dev"
    assert settings.store == tmp_path / "p.json"


def test_missing_default_config(monkeypatch, tmp_path, test_logger):
    monkeypatch.delenv("FIREDEBUG_CONFIG", raising=False)
    monkeypatch.setattr("firedebug.config.CONFIG_FILE", tmp_path / "config.toml")
    assert load_settings(None, test_logger) == Settings()


def test_missing_explicit_config(tmp_path, test_logger):
    with pytest.raises(FiredebugError):
        load_settings(tmp_path / "config.toml", test_logger)


def test_load_file(tmp_path, test_logger):
    path = tmp_path / "config.toml"
    path.write_text('[firedebug]\nenabled = false\napp_id = "com.example.app.dev"\nmarker = ".debug"\nstore = "/tmp/x.json"\n')

    settings = load_settings(path, test_logger)

    assert settings == Settings(enabled=False, app_id="com.example.app.dev", marker=".debug", store=Path("/tmp/x.json"))


def test_config_from_env(monkeypatch, tmp_path, test_logger):
    path = tmp_path / "other.toml"
    path.write_text('[firedebug]\napp_id = "from.env.dev"\n')
    monkeypatch.setenv("FIREDEBUG_CONFIG", str(path))
    assert load_settings(None, test_logger).app_id == "from.env.dev"


def test_empty_section(tmp_path, test_logger):
    path = tmp_path / "config.toml"
    path.write_text("[other]\nkey = 1\n")
    assert load_settings(path, test_logger) == Settings()


@pytest.mark.parametrize("content", ["[firedebug\n", "firedebug = 3\n"])
def test_bad_config(tmp_path, test_logger, content):
    path = tmp_path / "config.toml"
    path.write_text(content)
    with pytest.raises(FiredebugError):
        load_settings(path, test_logger)


def test_config_is_a_directory(tmp_path, test_logger):
    with pytest.raises(FiredebugError):
        load_settings(tmp_path, test_logger)


def test_config_invalid_utf8(tmp_path, test_logger):
    path = tmp_path / "config.toml"
    path.write_bytes(b'[firedebug]\napp_id = "\xff"\n')
    with pytest.raises(FiredebugError):
        load_settings(path, test_logger)
