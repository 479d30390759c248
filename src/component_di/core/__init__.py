"""Core container, component base class, configuration and logging."""

from .component import Component
from .config import (
    AppSettings,
    ContainerSettings,
    LoggingSettings,
    clear_settings_cache,
    load_app_settings,
)
from .container import ComponentReference, Container, validate_factory
from .errors import (
    CircularResolutionError,
    ComponentNotFoundError,
    ContainerError,
    InvalidComponentReferenceError,
    InvalidComponentTypeError,
    InvalidFactorySignatureError,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .interfaces import Factory
from .logging import configure_logging
from .models import ComponentState, ServiceDefinition

__all__ = [
    "AppSettings",
    "CircularResolutionError",
    "Component",
    "ComponentNotFoundError",
    "ComponentReference",
    "ComponentState",
    "Container",
    "ContainerError",
    "ContainerSettings",
    "Factory",
    "InvalidComponentReferenceError",
    "InvalidComponentTypeError",
    "InvalidFactorySignatureError",
    "LoggingSettings",
    "ServiceAlreadyRegisteredError",
    "ServiceDefinition",
    "ServiceNotFoundError",
    "clear_settings_cache",
    "configure_logging",
    "load_app_settings",
    "validate_factory",
]
