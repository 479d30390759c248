"""Resolution of component references given as import paths."""

from __future__ import annotations

import importlib

from .errors import ComponentNotFoundError


def _split_reference(reference: str) -> tuple[str, str]:
    """Split ``pkg.module:Attr`` or ``pkg.module.Attr`` into module and attribute."""
    if ":" in reference:
        module_name, _, attribute = reference.partition(":")
    else:
        module_name, _, attribute = reference.rpartition(".")
    if not module_name or not attribute:
        msg = (
            f"Component class '{reference}' not found. "
            "Use the form 'package.module:ClassName'."
        )
        raise ComponentNotFoundError(msg)
    return module_name, attribute


def import_component_class(reference: str) -> type:
    """Import the class named by ``reference``."""
    module_name, attribute = _split_reference(reference.strip())
    try:
        target: object = importlib.import_module(module_name)
    except ImportError as exc:
        msg = f"Component class '{reference}' not found: {exc}"
        raise ComponentNotFoundError(msg) from exc

    for part in attribute.split("."):
        try:
            target = getattr(target, part)
        except AttributeError as exc:
            msg = f"Component class '{reference}' not found"
            raise ComponentNotFoundError(msg) from exc

    if not isinstance(target, type):
        msg = f"Component reference '{reference}' does not name a class"
        raise ComponentNotFoundError(msg)
    return target


__all__ = ["import_component_class"]
