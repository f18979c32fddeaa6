from __future__ import annotations

import pytest

from config import get_settings_module, load_settings


@pytest.mark.parametrize(
    "env, expected",
    [
        ("production", "config.production"),
        ("PROD", "config.production"),
        ("testing", "config.testing"),
        ("test", "config.testing"),
        ("development", "config.development"),
        ("anything", "config.development"),
    ],
)
def test_settings_module_follows_app_env(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_settings_module_defaults_to_development(monkeypatch):
    monkeypatch.delenv("APP_ENV", raising=False)
    assert get_settings_module() == "config.development"


def test_create_app_reads_testing_settings(app):
    assert app.config["TESTING"] is True
    assert app.config["DEFAULT_SUBJECT"] == "general"


def test_load_settings_supplies_data_file_for_app_env(monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    settings = load_settings()
    assert settings.__name__ == "config.testing"
    assert settings.DATA_FILE
    assert settings.DEFAULT_SUBJECT == "general"
