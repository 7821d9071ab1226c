"""
# piracychecker Core Library

This package contains the core building blocks of piracychecker: the
`PirateApp` record, the built-in catalog, the detector, and the configuration
and logging infrastructure that the CLI depends on.
"""

from piracychecker.lib.catalog import KNOWN_PIRATE_APPS, get_pirate_apps
from piracychecker.lib.detector import PirateAppDetector, parse_package_list
from piracychecker.lib.pirate_app import AppCategory, PirateApp

__all__ = [
    "KNOWN_PIRATE_APPS",
    "AppCategory",
    "PirateApp",
    "PirateAppDetector",
    "get_pirate_apps",
    "parse_package_list",
]
