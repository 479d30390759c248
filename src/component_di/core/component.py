"""Base class for units of registration and boot logic."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from .models import ComponentState

if TYPE_CHECKING:
    from .container import Container


class Component(ABC):
    """Group of related services loaded into a :class:`Container`.

    ``register`` runs as soon as the container loads the component and is
    expected to call :meth:`Container.add`. ``boot`` runs later, once every
    component has registered, and may resolve services with
    :meth:`Container.get`.
    """

    def __init__(self, container: Container) -> None:
        self._container = container
        self.state: ComponentState | None = None

    @property
    def container(self) -> Container:
        """Container this component was loaded into."""
        return self._container

    @abstractmethod
    def register(self) -> None:
        """Register services with the container."""

    @abstractmethod
    def boot(self) -> None:
        """Finish initialisation once all components are registered."""


__all__ = ["Component"]
