"""Tests for configuration loading."""

from __future__ import annotations

from pathlib import Path

import pytest

from component_di.core.config import (
    ContainerSettings,
    LoggingSettings,
    clear_settings_cache,
    load_app_settings,
)


@pytest.fixture(autouse=True)
def fresh_settings() -> None:
    """Ensure each test sees a fresh settings instance."""

    clear_settings_cache()


def test_defaults_loaded_without_env_file() -> None:
    """Default values should be returned when no overrides are present."""

    settings = load_app_settings(include_environment=False)
    assert settings.container.components == []
    assert settings.container.detect_cycles is True
    assert settings.container.direct_components_only is True
    assert settings.logging.level == "INFO"


def test_env_file_overrides(tmp_path: Path) -> None:
    """Values defined in an env file should override defaults."""

    env_file = tmp_path / "test.env"
    env_file.write_text(
        "COMPONENT_DI_CONTAINER__COMPONENTS=app.db:Database, app.web:Web\n"
        "COMPONENT_DI_CONTAINER__DETECT_CYCLES=false\n"
        "COMPONENT_DI_LOGGING__LEVEL=\n",
        encoding="utf-8",
    )

    settings = load_app_settings(env_file=env_file, include_environment=False)
    assert settings.container.components == ["app.db:Database", "app.web:Web"]
    assert settings.container.detect_cycles is False
    assert settings.logging.level == "INFO"


def test_environment_wins_over_env_file(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    """Process environment values take precedence over the env file."""

    env_file = tmp_path / "test.env"
    env_file.write_text("COMPONENT_DI_LOGGING__LEVEL=DEBUG\n", encoding="utf-8")
    monkeypatch.setenv("COMPONENT_DI_LOGGING__LEVEL", "WARNING")

    settings = load_app_settings(env_file=env_file)
    assert settings.logging.level == "WARNING"


def test_environment_ignored_when_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("COMPONENT_DI_LOGGING__STRUCTURED", "true")

    assert load_app_settings().logging.structured is True
    clear_settings_cache()
    assert load_app_settings(include_environment=False).logging.structured is False


def test_components_accept_list_or_empty_value() -> None:
    assert ContainerSettings(components=["a:B"]).components == ["a:B"]
    assert ContainerSettings(components=None).components == []
    assert ContainerSettings(components=" , ").components == []


def test_overrides_accept_nested_sections() -> None:
    """Section overrides may be plain dicts or settings models."""

    settings = load_app_settings(
        include_environment=False,
        container={"components": ["app.db:Database"], "detect_cycles": False},
        logging=LoggingSettings(level="DEBUG"),
    )
    assert settings.container.components == ["app.db:Database"]
    assert settings.container.detect_cycles is False
    assert settings.logging.level == "DEBUG"


def test_overrides_leave_cached_settings_untouched() -> None:
    base = load_app_settings(include_environment=False)
    load_app_settings(include_environment=False, container={"components": ["a:B"]})

    assert load_app_settings(include_environment=False) is base
    assert base.container.components == []
