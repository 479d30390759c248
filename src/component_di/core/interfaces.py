"""Protocol interfaces for values supplied by the embedding application."""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, Protocol

if TYPE_CHECKING:
    from .container import Container


class Factory(Protocol):
    """Callable producing one service instance."""

    def __call__(self, container: Container, params: Mapping[str, Any]) -> object:
        """Build the service, resolving collaborators through ``container``."""
        raise NotImplementedError


__all__ = ["Factory"]
