"""Logging setup for applications booted through the container."""

from __future__ import annotations

import logging
import logging.config
from typing import Any

from .config import LoggingSettings

PACKAGE_LOGGER = "component_di"

_FORMATTERS: dict[bool, dict[str, Any]] = {
    True: {"format": "{asctime} {levelname} {name} {message}", "style": "{"},
    False: {"format": "%(asctime)s %(levelname)s %(name)s %(message)s"},
}


def build_logging_config(settings: LoggingSettings) -> dict[str, Any]:
    """Return the dictConfig mapping for ``settings``.

    Registration and boot messages come from the ``component_di`` logger,
    whose level can be raised or lowered apart from the root level.
    """
    root_level = settings.level.upper()
    container_level = (settings.container_level or root_level).upper()
    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {"default": _FORMATTERS[settings.structured]},
        "handlers": {
            "console": {
                "class": "logging.StreamHandler",
                "formatter": "default",
            },
        },
        "loggers": {
            PACKAGE_LOGGER: {"level": container_level},
        },
        "root": {
            "handlers": ["console"],
            "level": root_level,
        },
    }


def configure_logging(settings: LoggingSettings) -> None:
    """Configure application logging according to provided settings."""
    logging.config.dictConfig(build_logging_config(settings))


__all__ = ["PACKAGE_LOGGER", "build_logging_config", "configure_logging"]
