"""Application configuration models and loader utilities."""

from __future__ import annotations

import os
from functools import lru_cache
from pathlib import Path
from typing import Any, cast

from dotenv import dotenv_values
from pydantic import BaseModel, Field, field_validator


class ContainerSettings(BaseModel):
    """Settings controlling container behaviour and startup components."""

    components: list[str] = Field(
        default_factory=list,
        description="Component import paths loaded at startup, in order",
    )
    detect_cycles: bool = Field(
        default=True, description="Fail fast when a factory resolves its own tag"
    )
    direct_components_only: bool = Field(
        default=True,
        description="Require components to extend Component directly",
    )

    @field_validator("components", mode="before")
    @classmethod
    def _split_components(cls, value: Any) -> Any:
        """Accept a comma separated string as produced by environment files."""
        if value is None:
            return []
        if isinstance(value, str):
            return [item.strip() for item in value.split(",") if item.strip()]
        return value


class LoggingSettings(BaseModel):
    """Logging preferences."""

    level: str = Field(default="INFO", description="Root logging level")
    structured: bool = Field(
        default=False,
        description="Use brace-style records with a fixed field order",
    )
    container_level: str | None = Field(
        default=None,
        description="Level for container and component logs, defaults to level",
    )


class AppSettings(BaseModel):
    """Aggregated application configuration."""

    container: ContainerSettings = Field(default_factory=ContainerSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)


ENV_PREFIX = "COMPONENT_DI_"


def _normalize_key(raw_key: str) -> list[str]:
    """Convert an environment variable key into a nested attribute path."""
    trimmed = raw_key.removeprefix(ENV_PREFIX)
    return [segment.lower() for segment in trimmed.split("__") if segment]


def _merge_into_tree(tree: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a value to a nested dictionary given a path."""
    cursor = tree
    for segment in path[:-1]:
        next_node = cursor.setdefault(segment, {})
        cursor = cast(dict[str, Any], next_node)
    cursor[path[-1]] = value


def _collect_env_values(
    env_file: Path | str | None, include_environment: bool
) -> dict[str, Any]:
    """Load configuration values from environment variables and optional file."""
    collected: dict[str, Any] = {}

    file_values = {}
    if env_file:
        env_path = Path(env_file)
        if env_path.is_file():
            file_values = {
                key: value
                for key, value in dotenv_values(env_path).items()
                if key and key.startswith(ENV_PREFIX)
            }

    env_values = {}
    if include_environment:
        env_values = {
            key: value
            for key, value in os.environ.items()
            if key.startswith(ENV_PREFIX)
        }

    combined: dict[str, Any] = {**file_values, **env_values}

    for key, value in combined.items():
        path = _normalize_key(key)
        if not path:
            continue
        normalized_value: Any = value
        if isinstance(value, str) and value == "":
            continue
        if isinstance(value, str):
            lowercase_value = value.lower()
            if lowercase_value == "true":
                normalized_value = True
            elif lowercase_value == "false":
                normalized_value = False
        _merge_into_tree(collected, path, normalized_value)

    return collected


@lru_cache(maxsize=1)
def _load_base_settings(
    env_file: Path | str | None, include_environment: bool
) -> AppSettings:
    """Load and cache settings from the env file and process environment."""
    return AppSettings.model_validate(
        _collect_env_values(env_file, include_environment)
    )


def clear_settings_cache() -> None:
    """Forget settings cached by :func:`load_app_settings`."""
    _load_base_settings.cache_clear()


def load_app_settings(
    env_file: Path | str | None = None,
    include_environment: bool = True,
    **overrides: Any,
) -> AppSettings:
    """Load application settings, applying env files and overrides.

    Overrides replace whole top-level sections and may be dicts or models.
    """
    settings = _load_base_settings(env_file, include_environment)
    if not overrides:
        return settings
    return AppSettings.model_validate({**settings.model_dump(), **overrides})


__all__ = [
    "AppSettings",
    "ContainerSettings",
    "LoggingSettings",
    "clear_settings_cache",
    "load_app_settings",
]
