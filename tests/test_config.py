"""Tests for environment-driven settings."""

import pytest

from hello_service.config import DEFAULT_PORT, Settings


@pytest.fixture(autouse=True)
def isolated_env(monkeypatch, tmp_path):
    # Keep a developer's .env or shell PORT out of the assertions
    monkeypatch.chdir(tmp_path)
    for key in ("PORT", "HOST", "LOG_LEVEL"):
        monkeypatch.delenv(key, raising=False)


def test_defaults_when_port_unset():
    settings = Settings()

    assert settings.port == 8080 == DEFAULT_PORT
    assert settings.host == "0.0.0.0"
    assert settings.log_level == "info"


def test_port_from_environment(monkeypatch):
    monkeypatch.setenv("PORT", "9090")

    assert Settings().port == 9090


@pytest.mark.parametrize("value", ["", "abc", "80.5", "9090x"])
def test_invalid_port_falls_back_to_default(monkeypatch, value):
    monkeypatch.setenv("PORT", value)

    assert Settings().port == DEFAULT_PORT


def test_port_from_dotenv_file(tmp_path):
    (tmp_path / ".env").write_text("PORT=7070\n", encoding="utf-8")

    assert Settings().port == 7070


def test_environment_overrides_dotenv_file(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("PORT=7070\n", encoding="utf-8")
    monkeypatch.setenv("PORT", "9090")

    assert Settings().port == 9090
