"""
# piracychecker Technical Documentation

piracychecker knows about "pirate" applications: patchers, cheat engines and
unauthorized app stores whose presence on a device is treated as evidence of
software piracy. It checks a list of installed package identifiers against
that knowledge. These docs are generated from the project's docstrings.

---

## Purpose

piracychecker provides the building blocks for:
- Describing pirate apps as immutable `PirateApp` records.
- Shipping a catalog of well-known pirate apps and stores.
- Detecting those apps in an installed-package listing.
- Managing configuration and structured logging across modules.

---

## How to Use This Documentation

- Browse the **modules** listed in the sidebar to explore available APIs.
- Each class and function includes argument and return value details.
- Private helpers (`_method`, `_Class`) are minimally documented.
"""

from importlib.metadata import version

__version__ = version("piracychecker")
