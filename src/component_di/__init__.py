"""Service registry and lazy-instantiation container for application startup."""

from component_di.core import (
    CircularResolutionError,
    Component,
    ComponentNotFoundError,
    ComponentState,
    Container,
    ContainerError,
    Factory,
    InvalidComponentReferenceError,
    InvalidComponentTypeError,
    InvalidFactorySignatureError,
    ServiceAlreadyRegisteredError,
    ServiceDefinition,
    ServiceNotFoundError,
)

__all__ = [
    "CircularResolutionError",
    "Component",
    "ComponentNotFoundError",
    "ComponentState",
    "Container",
    "ContainerError",
    "Factory",
    "InvalidComponentReferenceError",
    "InvalidComponentTypeError",
    "InvalidFactorySignatureError",
    "ServiceAlreadyRegisteredError",
    "ServiceDefinition",
    "ServiceNotFoundError",
]
