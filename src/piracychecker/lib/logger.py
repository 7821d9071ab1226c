"""
Logging for piracychecker.

This module defines the `Logger` singleton class, a thin wrapper around the
standard `logging` module that prefixes each message with a colored symbol
for its level and adds a custom SUCCESS level.
"""

import logging

from colorama import Fore, Style


class Logger:
    """A singleton class for handling formatted and colored logging."""

    _logger: logging.Logger | None = None

    NAME = "piracychecker"

    SUCCESS = 25
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR
    DEBUG = logging.DEBUG

    _SYMBOLS = {
        SUCCESS: f"{Fore.GREEN}{Style.BRIGHT}[+]{Style.RESET_ALL}",
        INFO: f"{Fore.BLUE}{Style.BRIGHT}[*]{Style.RESET_ALL}",
        WARNING: f"{Fore.YELLOW}{Style.BRIGHT}[!]{Style.RESET_ALL}",
        ERROR: f"{Fore.RED}{Style.BRIGHT}[-]{Style.RESET_ALL}",
        DEBUG: f"{Fore.LIGHTBLACK_EX}{Style.BRIGHT}[>]{Style.RESET_ALL}",
    }

    @classmethod
    def _log(cls, level: int, message: str) -> None:
        """Write a log message based on log level."""

        if cls._logger is None:
            cls.setup(cls.INFO)

        cls._logger.log(level, f"{cls._SYMBOLS[level]} {message}")

    @classmethod
    def set_level(cls, level: int | str) -> None:
        """
        Set the log level for the singleton.

        Args:
            level (int | str): The log level to set, either a number or a level name.
        """

        if cls._logger is None:
            cls.setup(level)
            return

        cls._logger.setLevel(level)

    @classmethod
    def setup(cls, log_level: int | str) -> None:
        """
        Set up the Logger singleton.

        Args:
            log_level (int | str): The initial log level.
        """

        logging.addLevelName(cls.SUCCESS, "SUCCESS")

        cls._logger = logging.getLogger(cls.NAME)
        cls._logger.setLevel(log_level)
        cls._logger.propagate = False

        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(message)s"))
        cls._logger.handlers.clear()
        cls._logger.addHandler(handler)

    @classmethod
    def success(cls, message: str) -> None:
        """
        Log a success message.

        Args:
            message (str): The success message to log.
        """

        cls._log(cls.SUCCESS, message)

    @classmethod
    def info(cls, message: str) -> None:
        """
        Log an info message.

        Args:
            message (str): The info message to log.
        """

        cls._log(cls.INFO, message)

    @classmethod
    def warning(cls, message: str) -> None:
        """
        Log a warning message.

        Args:
            message (str): The warning message to log.
        """

        cls._log(cls.WARNING, message)

    @classmethod
    def error(cls, message: str) -> None:
        """
        Log an error message.

        Args:
            message (str): The error message to log.
        """

        cls._log(cls.ERROR, message)

    @classmethod
    def debug(cls, message: str) -> None:
        """
        Log a debug message.

        Args:
            message (str): The debug message to log.
        """

        cls._log(cls.DEBUG, message)
