"""Exceptions raised by the service container."""

from __future__ import annotations


class ContainerError(RuntimeError):
    """Base class for container failures surfaced at startup."""


class ServiceAlreadyRegisteredError(ContainerError):
    """Raised when a tag is registered twice."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"A service with the tag '{tag}' already exists")
        self.tag = tag


class InvalidFactorySignatureError(ContainerError):
    """Raised when a factory cannot produce a service instance."""


class ServiceNotFoundError(ContainerError):
    """Raised when resolving a tag that was never registered."""

    def __init__(self, tag: str) -> None:
        super().__init__(f"Service with the tag '{tag}' not found")
        self.tag = tag


class CircularResolutionError(ContainerError):
    """Raised when a factory resolves a tag that is still being built."""

    def __init__(self, chain: tuple[str, ...]) -> None:
        super().__init__(f"Circular resolution detected: {' -> '.join(chain)}")
        self.chain = chain


class InvalidComponentReferenceError(ContainerError):
    """Raised when an object other than a class reference is given."""


class ComponentNotFoundError(ContainerError):
    """Raised when a component reference cannot be resolved to a class."""


class InvalidComponentTypeError(ContainerError):
    """Raised when a class does not extend ``Component`` directly."""


__all__ = [
    "CircularResolutionError",
    "ComponentNotFoundError",
    "ContainerError",
    "InvalidComponentReferenceError",
    "InvalidComponentTypeError",
    "InvalidFactorySignatureError",
    "ServiceAlreadyRegisteredError",
    "ServiceNotFoundError",
]
