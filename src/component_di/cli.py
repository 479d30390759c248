"""Command-line entry point for component-di."""

from __future__ import annotations

import argparse
import sys
from collections.abc import Sequence
from pathlib import Path

from component_di.core import (
    AppSettings,
    Container,
    ContainerError,
    configure_logging,
    load_app_settings,
)


def build_parser() -> argparse.ArgumentParser:
    """Create and configure the CLI argument parser."""
    parser = argparse.ArgumentParser(
        description="Load, register and boot application components"
    )
    parser.add_argument(
        "--env-file",
        type=Path,
        default=None,
        help="Path to a .env file containing configuration overrides.",
    )
    parser.add_argument(
        "command",
        nargs="?",
        default="info",
        choices=["info", "boot"],
        help="Operation to execute.",
    )
    parser.add_argument(
        "--component",
        dest="components",
        action="append",
        default=[],
        metavar="REF",
        help=(
            "Component import path such as 'package.module:ClassName'. "
            "Loaded after the configured components; may be repeated."
        ),
    )
    return parser


def execute(args: argparse.Namespace, settings: AppSettings) -> int:
    """Execute the requested CLI command and return the exit status."""
    command = args.command
    if command == "info":
        _print_info(settings, extra=args.components)
        return 0
    if command == "boot":
        return _run_boot(settings, extra=args.components)
    return 2


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    settings = load_app_settings(env_file=args.env_file)
    configure_logging(settings.logging)
    return execute(args, settings)


def _print_info(settings: AppSettings, *, extra: Sequence[str]) -> None:
    """Describe the effective configuration."""
    components = [*settings.container.components, *extra]
    print(f"Cycle detection: {'on' if settings.container.detect_cycles else 'off'}")
    print(
        "Direct components only: "
        f"{'yes' if settings.container.direct_components_only else 'no'}"
    )
    if not components:
        print("No components configured.")
        return
    print(f"Components ({len(components)}):")
    for reference in components:
        print(f"  {reference}")


def _run_boot(settings: AppSettings, *, extra: Sequence[str]) -> int:
    """Load and boot components, then list the registered services."""
    try:
        container = Container.from_settings(settings.container)
        container.load_components(extra)
        container.boot()
    except ContainerError as exc:
        print(f"Boot failed: {exc}")
        return 1

    print(f"Booted {len(container.components)} component(s).")
    for tag in container.tags():
        kind = "singleton" if container.definition(tag).singleton else "factory"
        print(f"  {tag} ({kind})")
    return 0


if __name__ == "__main__":  # pragma: no cover
    sys.exit(main())
