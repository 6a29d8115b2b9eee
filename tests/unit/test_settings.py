from __future__ import annotations

import pytest

from modkit.settings import Settings


def test_settings_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("MODKIT_LOGGING__LOG_LEVEL", raising=False)

    settings = Settings(_env_file=None)

    assert settings.app.project_name == "modkit"
    assert settings.paths.data_dir_name == "modkit"
    assert settings.logging.enabled is True
    assert settings.logging.log_level == "INFO"


def test_settings_read_nested_environment_variables(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("MODKIT_APP__ENVIRONMENT", "prod")
    monkeypatch.setenv("MODKIT_LOGGING__LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("MODKIT_LOGGING__FORMAT", "json")

    settings = Settings(_env_file=None)

    assert settings.app.environment == "prod"
    assert settings.app.project_name == "modkit"
    assert settings.logging.log_level == "DEBUG"
    assert settings.logging.format == "json"
    assert settings.logging.rotation == "1 MB"
