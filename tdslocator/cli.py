"""Command line front end for inspecting connection locators."""

from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from .config import DriverConfig, load_config
from .driver import Driver
from .errors import InvalidLocatorError
from .registry import DriverRegistry

EXIT_INVALID_LOCATOR = 2


def parse_args(argv: Sequence[str]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(prog="tdslocator", description=__doc__)
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)
    for name, help_text in (
        ("parse", "Print the resolved connection properties"),
        ("describe", "Print a descriptor for every supported property"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("locator", nargs="?", help="jdbc:jtds: locator; defaults to the profile locator")
        sub.add_argument("--profile", help="Profile from the config file to take the locator from")
        sub.add_argument(
            "-p",
            "--property",
            action="append",
            default=[],
            metavar="KEY=VALUE",
            help="Override property (repeatable)",
        )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    config = load_config()
    try:
        locator, overrides = _resolve_input(args, config)
    except ValueError as exc:
        print(str(exc), file=sys.stderr)
        return 1

    registry = DriverRegistry()
    registry.register(lambda: Driver(config=config))
    try:
        driver = registry.driver_for(locator)
    except LookupError as exc:
        print(str(exc), file=sys.stderr)
        return EXIT_INVALID_LOCATOR
    try:
        if args.command == "parse":
            props = driver.parse_locator(locator, overrides)
            for key in sorted(props):
                print(f"{key}={props[key]}")
        else:
            for descriptor in driver.describe_properties(locator, overrides):
                flag = "*" if descriptor.required else " "
                choices = f" [{'|'.join(descriptor.choices)}]" if descriptor.choices else ""
                print(f"{flag} {descriptor.display_name}={descriptor.current_value}{choices}")
                print(f"    {descriptor.description}")
    except InvalidLocatorError as exc:
        print(f"{type(exc).__name__}: {exc} (SQLSTATE {exc.sqlstate})", file=sys.stderr)
        return EXIT_INVALID_LOCATOR
    return 0


def _resolve_input(args: argparse.Namespace, config: DriverConfig) -> tuple[str, dict[str, str]]:
    overrides: dict[str, str] = {}
    locator = args.locator
    if args.profile or not locator:
        if not args.profile and not config.active_profile:
            raise ValueError("Provide a locator or --profile.")
        profile = config.profile(args.profile)
        locator = locator or profile.locator
        overrides.update(profile.properties)
    for item in args.property:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise ValueError(f"Property '{item}' must look like KEY=VALUE.")
        overrides[key.upper()] = value
    return locator, overrides
