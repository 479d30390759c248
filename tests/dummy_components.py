"""Components used by the container and CLI tests."""

from __future__ import annotations

from component_di import Component


class Greeter:
    """Small service with a configurable greeting."""

    def __init__(self, greeting: str = "hello") -> None:
        self.greeting = greeting


class DummyComponent(Component):
    """Registers a single service and counts boot calls."""

    boot_calls = 0

    def register(self) -> None:
        self.container.add("test", lambda c, p: Greeter())

    def boot(self) -> None:
        self.boot_calls += 1


class IndirectComponent(DummyComponent):
    """Extends Component only through another component."""


class NotAComponent:
    """Has the hooks but not the base class."""

    def __init__(self, container: object) -> None:
        self.container = container

    def register(self) -> None:
        pass

    def boot(self) -> None:
        pass


def _record_boot(component: Component, name: str) -> None:
    order = component.container.variable("boot_order") or []
    component.container.variable("boot_order", [*order, name])


class ServiceBComponent(Component):
    """Registers tag ``b``."""

    def register(self) -> None:
        self.container.add("b", lambda c, p: Greeter("from b"))

    def boot(self) -> None:
        _record_boot(self, "b")


class ServiceAComponent(Component):
    """Registers tag ``a`` and needs ``b`` while registering."""

    def register(self) -> None:
        greeter = self.container.get("b")
        self.container.add("a", lambda c, p: Greeter(f"a after {greeter.greeting}"))

    def boot(self) -> None:
        _record_boot(self, "a")


def make_greeter() -> Greeter:
    """Not a class, so it cannot be loaded as a component."""
    return Greeter()


class LateLoaderComponent(Component):
    """Loads another component while booting."""

    def register(self) -> None:
        pass

    def boot(self) -> None:
        self.container.load_components([DummyComponent])
