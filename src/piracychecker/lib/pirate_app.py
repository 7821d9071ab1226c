"""
Pirate application records.

A `PirateApp` describes one application whose presence on a device indicates
piracy: a display name, an `AppCategory` and the package identifier, stored
as a sequence of fragments that are joined on access.
"""

import warnings
from collections.abc import Sequence
from enum import Enum


class AppCategory(Enum):
    """Kind of pirate application."""

    STORE = "store"
    OTHER = "other"

    @classmethod
    def from_str(cls, value: str) -> "AppCategory":
        """
        Parse a category name, ignoring case.

        Raises:
            ValueError: If `value` names no category.
        """

        try:
            return cls[value.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown app category '{value}'") from None


class PirateApp:
    """
    Immutable record of a known pirate application.

    The package identifier is given as fragments (e.g. ``["com.", "forpda.", "lp"]``)
    which are copied on construction, so later changes to the caller's list
    have no effect.
    """

    __slots__ = ("_name", "_pack", "_category")

    def __init__(self, name: str, pack: Sequence[str], category: AppCategory = AppCategory.OTHER):
        """
        Args:
            name (str): Human-readable application name.
            pack (Sequence[str]): Package identifier fragments, in order.
            category (AppCategory, optional): Kind of application. Defaults to OTHER.
        """

        self._name = name
        self._pack = tuple(pack)
        self._category = category

    @property
    def name(self) -> str:
        return self._name

    @property
    def category(self) -> AppCategory:
        return self._category

    @property
    def package_name(self) -> str:
        """The full package identifier."""

        return "".join(self._pack)

    @property
    def package(self) -> str:
        """Deprecated alias of `package_name`."""

        warnings.warn(
            "PirateApp.package is deprecated, use PirateApp.package_name",
            DeprecationWarning,
            stacklevel=2,
        )
        return self.package_name

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PirateApp):
            return NotImplemented
        return (self._name, self._pack, self._category) == (other._name, other._pack, other._category)

    def __hash__(self) -> int:
        return hash((self._name, self._pack, self._category))

    def __repr__(self) -> str:
        return f"PirateApp(name={self._name!r}, package_name={self.package_name!r}, category={self._category.name})"
