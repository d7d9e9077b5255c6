import pytest

from arena.core.config import Settings


def test_defaults(monkeypatch):
    for key in ["ARENA_HOST", "ARENA_PORT", "ARENA_TEMPLATE", "ARENA_ASSETS_DIR", "ARENA_LOG_DIR", "ARENA_LOG_LEVEL"]:
        monkeypatch.delenv(key, raising=False)

    settings = Settings.from_env()

    assert settings.host == "0.0.0.0"
    assert settings.port == 8080
    assert settings.template == "index.html"
    assert settings.assets_dir == "assets"
    assert settings.log_dir is None
    assert settings.log_level == "INFO"


def test_env_overrides(monkeypatch):
    monkeypatch.setenv("ARENA_PORT", "9090")
    monkeypatch.setenv("ARENA_ASSETS_DIR", "static")
    monkeypatch.setenv("ARENA_LOG_LEVEL", "debug")

    settings = Settings.from_env()

    assert settings.port == 9090
    assert settings.assets_dir == "static"
    assert settings.log_level == "DEBUG"


def test_invalid_port(monkeypatch):
    monkeypatch.setenv("ARENA_PORT", "eighty")

    with pytest.raises(ValueError, match="ARENA_PORT"):
        Settings.from_env()
