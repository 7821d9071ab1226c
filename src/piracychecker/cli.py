#!/usr/bin/env python3
import argparse
import sys

from piracychecker import __version__
from piracychecker.lib.catalog import get_pirate_apps
from piracychecker.lib.config import Config
from piracychecker.lib.detector import PirateAppDetector, parse_package_list
from piracychecker.lib.logger import Logger
from piracychecker.lib.pirate_app import AppCategory

EXIT_CLEAN = 0
EXIT_ERROR = 1
EXIT_PIRACY = 2


class PackageListError(Exception):
    """Raised when a package list file cannot be read."""

    pass


def _read_package_file(path: str) -> list[str]:
    """
    Read raw package lines from `path`, or from stdin when `path` is '-'.

    Raises:
        PackageListError: If the file cannot be read.
    """

    if path == "-":
        return sys.stdin.read().splitlines()

    try:
        with open(path, encoding="utf-8") as fh:
            return fh.read().splitlines()
    except (OSError, UnicodeDecodeError) as e:
        reason = e.strerror if isinstance(e, OSError) and e.strerror else e
        raise PackageListError(f"Cannot read package list '{path}': {reason}") from e


def _build_parser() -> argparse.ArgumentParser:
    """Build the top-level argparse parser with subcommands."""

    parser = argparse.ArgumentParser(prog="piracychecker", description="Detect known pirate apps")
    parser.add_argument("--config", help="Path to a piracychecker.cfg file")
    sub = parser.add_subparsers(dest="command", required=True)

    p_version = sub.add_parser("version", help="Print the package version")
    p_version.set_defaults(handler=cmd_version)

    p_list = sub.add_parser("list", help="List the known pirate apps")
    p_list.add_argument("--category", choices=[c.value for c in AppCategory], help="Only list this category")
    p_list.add_argument("--no-stores", action="store_true", help="Leave out unauthorized stores")
    p_list.set_defaults(handler=cmd_list)

    p_check = sub.add_parser("check", help="Check installed packages for pirate apps")
    p_check.add_argument("packages", nargs="*", help="Installed package identifiers")
    p_check.add_argument("-f", "--file", help="File with one package per line ('-' for stdin)")
    p_check.add_argument("--no-stores", action="store_true", help="Ignore unauthorized stores")
    p_check.set_defaults(handler=cmd_check)

    return parser


def cmd_version(_: argparse.Namespace) -> int:
    """
    Print the package version.

    Args:
        _ (argparse.Namespace): Unused argparse namespace.

    Returns:
        int: Process exit code (0 on success).
    """

    print(__version__)
    return EXIT_CLEAN


def cmd_list(ns: argparse.Namespace) -> int:
    """Print one tab-separated line per known pirate app."""

    apps = get_pirate_apps(include_stores=not ns.no_stores)
    if ns.category:
        category = AppCategory.from_str(ns.category)
        apps = [app for app in apps if app.category is category]

    for app in apps:
        print(f"{app.name}\t{app.package_name}\t{app.category.name}")

    return EXIT_CLEAN


def cmd_check(ns: argparse.Namespace) -> int:
    """
    Check installed packages for pirate apps.

    Returns:
        int: 0 when clean, 2 when pirate apps were found, 1 on error.
    """

    try:
        raw = list(ns.packages)
        if ns.file:
            raw.extend(_read_package_file(ns.file))

        installed = parse_package_list(raw)
        if not installed:
            Logger.warning("No installed packages given.")

        Logger.info(f"Checking {len(installed)} package(s)...")
        detector = PirateAppDetector(include_stores=False if ns.no_stores else None)
        found = detector.find_all(installed)

        if not found:
            Logger.success("No pirate apps found.")
            return EXIT_CLEAN

        for app in found:
            Logger.warning(f"Found {app.name} ({app.package_name}) [{app.category.name}]")
        Logger.error(f"{len(found)} pirate app(s) detected.")
        return EXIT_PIRACY

    except PackageListError as e:
        Logger.error(str(e))
        return EXIT_ERROR
    except Exception as e:
        if Config.is_loaded() and Config.get("dev", "stack_trace_errors", False):
            raise

        Logger.error(f"Failed to check packages: {e}")
        return EXIT_ERROR


def main(argv: list[str] | None = None) -> int:
    """
    Entry point for the `piracychecker` CLI.

    Initializes logging, loads configuration, and dispatches subcommands.

    Args:
        argv (list[str] | None): Arguments excluding the executable; if None, uses sys.argv[1:].

    Returns:
        int: Process exit code.
    """

    Logger.setup(Logger.INFO)

    parser = _build_parser()
    ns = parser.parse_args(argv)

    Config.load(ns.config)
    Logger.set_level(Config.get("dev", "log_level", Logger.INFO))

    if Config.get("dev", "log_level", Logger.INFO) == Logger.DEBUG:
        Logger.debug("Developer logging enabled.")
    if Config.get("dev", "stack_trace_errors", False):
        Logger.debug("Stack trace errors enabled.")

    return ns.handler(ns)


if __name__ == "__main__":
    try:
        sys.exit(main())
    except Exception as e:
        if Config.is_loaded() and Config.get("dev", "stack_trace_errors", False):
            raise
        Logger.error(f"Error: {e}")
        sys.exit(EXIT_ERROR)
