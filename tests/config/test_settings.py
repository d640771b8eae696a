from types import SimpleNamespace

import pytest

from attendance_dashboard.config import get_settings_module
from attendance_dashboard.config.settings import build_settings, load_settings
from attendance_dashboard.core.exceptions import NotConfiguredError


@pytest.mark.parametrize(
    "env,expected",
    [
        ("production", "attendance_dashboard.config.production"),
        ("TEST", "attendance_dashboard.config.testing"),
        ("anything", "attendance_dashboard.config.development"),
    ],
)
def test_get_settings_module(monkeypatch, env, expected):
    monkeypatch.setenv("APP_ENV", env)
    assert get_settings_module() == expected


def test_testing_settings_load():
    settings = load_settings("attendance_dashboard.config.testing")

    assert settings.timezone == "UTC"
    assert settings.max_presence_entries == 100
    assert settings.auto_init_db is False


def test_missing_secret_key_is_not_configured():
    module = SimpleNamespace(SECRET_KEY="", DB_CONFIG={"host": "h", "user": "u", "database": "d"})

    with pytest.raises(NotConfiguredError):
        build_settings(module, module_name="x")


def test_missing_db_fields_are_reported():
    module = SimpleNamespace(SECRET_KEY="s", DB_CONFIG={"host": "h", "user": ""})

    with pytest.raises(NotConfiguredError) as exc_info:
        build_settings(module, module_name="x")

    assert "DB_USER" in str(exc_info.value)
    assert "DB_NAME" in str(exc_info.value)
