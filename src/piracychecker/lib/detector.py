"""
Detection of pirate apps among installed packages.

This module defines `PirateAppDetector`, which compares a set of installed
package identifiers against the catalog (plus any configured extras), and
`parse_package_list` for normalizing raw package listings.
"""

from collections.abc import Iterable

from piracychecker.lib.catalog import get_pirate_apps
from piracychecker.lib.config import Config
from piracychecker.lib.logger import Logger
from piracychecker.lib.pirate_app import AppCategory, PirateApp

PACKAGE_PREFIX = "package:"


def parse_package_list(lines: Iterable[str]) -> list[str]:
    """
    Normalize an installed-package listing.

    Blank lines and ``#`` comments are skipped and a leading ``package:`` prefix
    (as printed by ``pm list packages``) is removed. Order is kept and
    duplicates are dropped.

    Args:
        lines (Iterable[str]): Raw lines, one identifier per line.

    Returns:
        list[str]: Package identifiers.
    """

    seen: dict[str, None] = {}
    for line in lines:
        entry = line.strip()
        if not entry or entry.startswith("#"):
            continue
        if entry.startswith(PACKAGE_PREFIX):
            entry = entry[len(PACKAGE_PREFIX):].strip()
        if entry:
            seen.setdefault(entry, None)

    return list(seen)


class PirateAppDetector:
    """Match installed package identifiers against known pirate apps."""

    def __init__(
        self,
        apps: Iterable[PirateApp] | None = None,
        include_stores: bool | None = None,
        extra_apps: Iterable[PirateApp] | None = None,
    ):
        """
        Args:
            apps (Iterable[PirateApp], optional): Apps to look for. Defaults to the catalog.
            include_stores (bool, optional): Report unauthorized stores. Defaults to config value.
            extra_apps (Iterable[PirateApp], optional): Additional apps to look for.
                Defaults to the identifiers in config ``detection.extra_packages``.
        """

        self.include_stores = (
            include_stores if include_stores is not None else self._setting("include_stores", True)
        )

        if apps is None:
            known = get_pirate_apps(self.include_stores)
        else:
            known = [app for app in apps if self.include_stores or app.category is not AppCategory.STORE]

        if extra_apps is None:
            extra_apps = [PirateApp(pkg, [pkg]) for pkg in self._setting("extra_packages", [])]

        self.apps: list[PirateApp] = list(dict.fromkeys([*known, *extra_apps]))

        Logger.debug(f"Loaded {len(self.apps)} pirate app(s) (stores {'included' if self.include_stores else 'ignored'}).")

    @staticmethod
    def _setting(key: str, default):
        """Read a detection setting, using built-in defaults when no config is loaded."""

        if Config.is_loaded():
            return Config.get("detection", key, default)
        return Config.default("detection", key, default)

    def find_all(self, installed: Iterable[str]) -> list[PirateApp]:
        """
        Return every known pirate app present in `installed`.

        Args:
            installed (Iterable[str]): Installed package identifiers.

        Returns:
            list[PirateApp]: Matches in catalog order, then extra apps.
        """

        packages = set(installed)
        found = []
        for app in self.apps:
            if app.package_name in packages:
                Logger.debug(f"Matched '{app.package_name}' ({app.name}).")
                found.append(app)

        return found

    def find_first(self, installed: Iterable[str]) -> PirateApp | None:
        """Return the first known pirate app present in `installed`, or None."""

        found = self.find_all(installed)
        return found[0] if found else None

    def is_clean(self, installed: Iterable[str]) -> bool:
        """Return True when no known pirate app is installed."""

        return not self.find_all(installed)
