"""Service container with lazy singletons and ordered component boot."""

from __future__ import annotations

import inspect
import logging
from collections.abc import Iterable, Mapping
from typing import TYPE_CHECKING, Any, Never, NoReturn

from .component import Component
from .errors import (
    CircularResolutionError,
    InvalidComponentReferenceError,
    InvalidComponentTypeError,
    InvalidFactorySignatureError,
    ServiceAlreadyRegisteredError,
    ServiceNotFoundError,
)
from .interfaces import Factory
from .loader import import_component_class
from .models import ComponentState, ServiceDefinition

if TYPE_CHECKING:
    from .config import ContainerSettings

LOGGER = logging.getLogger(__name__)

ComponentReference = type[Component] | str

_MISSING: Any = object()
_VOID_ANNOTATIONS = (None, type(None), NoReturn, Never)
_VOID_ANNOTATION_NAMES = {
    "None",
    "NoReturn",
    "Never",
    "typing.NoReturn",
    "typing.Never",
}


def validate_factory(factory: Any, *, label: str) -> None:
    """Ensure ``factory`` can be called as ``factory(container, params)``.

    Factories annotated as returning ``None`` (or never returning) are
    rejected. Unannotated callables such as lambdas and classes are accepted.
    """
    if not callable(factory):
        msg = f"Invalid factory for {label}. A factory must be callable."
        raise InvalidFactorySignatureError(msg)

    try:
        signature = inspect.signature(factory)
    except (TypeError, ValueError):
        # Builtins without an introspectable signature cannot be checked.
        return

    try:
        signature.bind(None, {})
    except TypeError as exc:
        msg = (
            f"Invalid factory for {label}. "
            "A factory must accept (container, params) positionally."
        )
        raise InvalidFactorySignatureError(msg) from exc

    if isinstance(factory, type):
        # Class signatures carry the ``-> None`` of ``__init__``.
        return
    annotation = signature.return_annotation
    if isinstance(annotation, str):
        is_void = annotation.strip() in _VOID_ANNOTATION_NAMES
    else:
        is_void = any(annotation is void for void in _VOID_ANNOTATIONS)
    if is_void:
        msg = f"Invalid factory for {label}. A factory must return an object."
        raise InvalidFactorySignatureError(msg)


class Container:
    """Registry of lazily built services and loader of components.

    Services are registered under unique tags with a factory. Singleton
    services are built on the first :meth:`get` and cached for the lifetime
    of the container; the ``params`` given to later calls are ignored.
    Non-singleton services are rebuilt on every call.

    Components are loaded with :meth:`load_components`, which runs each
    ``register`` hook immediately, and are booted in load order by
    :meth:`boot`.

    The container is meant to be owned by a single initialisation thread
    and performs no locking.
    """

    def __init__(
        self, *, detect_cycles: bool = True, direct_components_only: bool = True
    ) -> None:
        """Initialise empty stores."""
        self._services: dict[str, ServiceDefinition] = {}
        self._singletons: dict[str, object] = {}
        self._variables: dict[str, Any] = {}
        self._components: list[Component] = []
        self._resolving: list[str] = []
        self._booted = False
        self.detect_cycles = detect_cycles
        self.direct_components_only = direct_components_only

    @classmethod
    def from_settings(cls, settings: ContainerSettings) -> Container:
        """Build a container and load the components named in ``settings``."""
        container = cls(
            detect_cycles=settings.detect_cycles,
            direct_components_only=settings.direct_components_only,
        )
        container.load_components(settings.components)
        return container

    # Services

    def has(self, tag: str) -> bool:
        """Return ``True`` when a service is registered under ``tag``."""
        return tag in self._services

    def __contains__(self, tag: object) -> bool:
        return tag in self._services

    def tags(self) -> tuple[str, ...]:
        """Registered tags in registration order."""
        return tuple(self._services)

    def definition(self, tag: str) -> ServiceDefinition:
        """Return the stored definition for ``tag``."""
        try:
            return self._services[tag]
        except KeyError:
            raise ServiceNotFoundError(tag) from None

    def add(self, tag: str, factory: Factory, singleton: bool = True) -> None:
        """Register ``factory`` under ``tag`` without building anything."""
        if self.has(tag):
            raise ServiceAlreadyRegisteredError(tag)
        validate_factory(factory, label=f"service '{tag}'")
        self._services[tag] = ServiceDefinition(factory=factory, singleton=singleton)
        LOGGER.debug("Registered service %s (singleton=%s)", tag, singleton)

    def get(self, tag: str, params: Mapping[str, Any] | None = None) -> Any:
        """Resolve the service registered under ``tag``.

        A cached singleton is returned as is, whatever ``params`` holds.
        """
        if not self.has(tag):
            raise ServiceNotFoundError(tag)
        if tag in self._singletons:
            return self._singletons[tag]

        definition = self._services[tag]
        if not self.detect_cycles:
            instance = definition.factory(self, {} if params is None else params)
        else:
            if tag in self._resolving:
                start = self._resolving.index(tag)
                raise CircularResolutionError((*self._resolving[start:], tag))
            self._resolving.append(tag)
            try:
                instance = definition.factory(self, {} if params is None else params)
            finally:
                self._resolving.pop()

        if definition.singleton:
            self._singletons[tag] = instance
            LOGGER.debug("Cached singleton %s", tag)
        return instance

    def try_get(
        self, tag: str, params: Mapping[str, Any] | None = None
    ) -> Any | None:
        """Resolve ``tag`` if registered; return ``None`` otherwise."""
        if not self.has(tag):
            return None
        return self.get(tag, params)

    def instantiate(
        self, factory: Factory, params: Mapping[str, Any] | None = None
    ) -> Any:
        """Call ``factory`` with this container without registering a tag."""
        validate_factory(factory, label="direct instantiation")
        return factory(self, {} if params is None else params)

    # Variables

    def variable(self, key: str, value: Any = _MISSING) -> Any:
        """Read ``key`` or, when ``value`` is given, store and return it."""
        if value is _MISSING:
            return self._variables.get(key)
        self._variables[key] = value
        return value

    def set_variable(self, key: str, value: Any) -> None:
        """Store ``value`` under ``key``."""
        self._variables[key] = value

    def get_variable(self, key: str, default: Any = None) -> Any:
        """Return the value stored under ``key`` or ``default``."""
        return self._variables.get(key, default)

    # Components

    @property
    def components(self) -> tuple[Component, ...]:
        """Loaded components in load order."""
        return tuple(self._components)

    @property
    def booted(self) -> bool:
        return self._booted

    def load_components(self, references: Iterable[ComponentReference]) -> None:
        """Construct each component and run its ``register`` hook in order.

        Components loaded before a failing entry stay loaded.
        """
        if isinstance(references, str):
            msg = (
                f"Invalid component references {references!r}. "
                "A sequence of references expected, single string given."
            )
            raise InvalidComponentReferenceError(msg)
        for reference in references:
            component_class = self._resolve_component(reference)
            component = component_class(self)
            component.register()
            component.state = ComponentState.REGISTERED
            self._components.append(component)
            LOGGER.debug("Loaded component %s", component_class.__qualname__)

    def boot(self) -> None:
        """Run the ``boot`` hook of every loaded component in load order.

        Calling this twice runs every hook twice.
        """
        if self._booted:
            LOGGER.warning("Container already booted; running boot hooks again")
        for component in tuple(self._components):
            component.boot()
            component.state = ComponentState.BOOTED
        self._booted = True
        LOGGER.info("Booted %d component(s)", len(self._components))

    def _resolve_component(self, reference: object) -> type[Component]:
        """Turn a class or import path into a validated component class."""
        if isinstance(reference, str):
            component_class = import_component_class(reference)
        elif isinstance(reference, type):
            component_class = reference
        else:
            msg = (
                f"Invalid component {type(reference).__qualname__}. "
                "Class reference expected, instance given."
            )
            raise InvalidComponentReferenceError(msg)

        if self.direct_components_only:
            valid = Component in component_class.__bases__
        else:
            valid = issubclass(component_class, Component)
        if not valid:
            base = "directly " if self.direct_components_only else ""
            msg = (
                f"Invalid component {component_class.__qualname__}. "
                f"A component must {base}extend component_di.Component."
            )
            raise InvalidComponentTypeError(msg)
        return component_class


__all__ = ["ComponentReference", "Container", "validate_factory"]
