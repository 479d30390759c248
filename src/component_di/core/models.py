"""Core data models used by the container."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from .interfaces import Factory


@dataclass(frozen=True, slots=True)
class ServiceDefinition:
    """A validated factory stored under a tag."""

    factory: Factory
    singleton: bool = True


class ComponentState(str, Enum):
    """Lifecycle stage of a loaded component."""

    REGISTERED = "registered"
    BOOTED = "booted"


__all__ = ["ComponentState", "ServiceDefinition"]
