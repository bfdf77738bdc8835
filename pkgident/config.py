"""Handles the configuration for pkgident.

This module reads configuration files, sets default values, and allows for
overriding configuration options with command-line arguments.
"""

import configparser
from argparse import Namespace
from collections.abc import Callable
from logging import getLevelName, getLogger
from os import getenv
from pathlib import Path
from typing import Any

from .display import FORMATS
from .xdg import config_path

logger = getLogger("pkgident.config")


class InvalidOptionNameError(RuntimeError):
    """Exception raised when an invalid configuration option name is used."""

    pass


class Config:
    """Read and store the variables from pkgident config files."""

    def __init__(self, path: Path | None = None) -> None:
        """Initializes the configuration object.

        Args:
            path: An optional path to a specific config file.
        """
        if path:
            self.configfiles = [path]
        elif _pth := getenv("PKGIDENT_CONF"):
            self.configfiles = [Path(_pth).expanduser()]
        else:
            self.configfiles = [Path("/etc/pkgident.cfg"), config_path("pkgident.cfg")]
        self.read()

        self._define_config_options()
        self._parse_config()

    def read(self) -> None:
        """Reads the configuration files."""
        self.config = configparser.ConfigParser(inline_comment_prefixes=("#", ";"))
        try:
            self.config.read(self.configfiles)
        except configparser.Error as e:
            logger.error(e)

    def _parse_config(self) -> None:
        """Parses the configuration options from the config files."""
        for datum in self.data:
            attr, inipath, default, fixup, getter = datum

            try:
                val = fixup(self._get_option(inipath, getter))
            except configparser.Error:
                val = default() if callable(default) else default
            except ValueError as e:
                logger.error("Config option %s.%s ignored: %s", *inipath, e)
                val = default() if callable(default) else default

            setattr(self, str(attr), val)
            logger.debug('config.%s set to "%s"', attr, val)

    def _define_config_options(self) -> None:
        """Defines all available configuration options."""

        def normalizer(x: Any) -> Any:
            return x

        def output_format(x: str) -> str:
            x = x.strip().lower()
            if x not in FORMATS:
                raise ValueError(f"unknown output format {x!r}")
            return x

        def log_level(x: str) -> str:
            x = x.strip().upper()
            if not isinstance(getLevelName(x), int):
                raise ValueError(f"unknown log level {x!r}")
            return x

        data: list[tuple[Any, ...]] = [
            ("output_format", ("pkgident", "format"), "plain", output_format),
            ("log_level", ("pkgident", "log_level"), "INFO", log_level),
            (
                "check_history_order",
                ("pspec", "check_history_order"),
                True,
                bool,
                self.config.getboolean,
            ),
        ]

        def add_normalizer(x):
            return x if len(x) > 3 else x + (normalizer,)

        n_data = (add_normalizer(x) for x in data)

        getter = self.config.get

        def add_getter(x):
            return x if len(x) > 4 else x + (getter,)

        self.data: list[tuple[str, tuple[str, ...], Any, Callable, Callable]] = [
            add_getter(x) for x in n_data
        ]

    def _fixup(self, opt: str) -> Callable | None:
        """Returns the fixup of option `opt`, None if there is no such option."""
        return next((x[3] for x in self.data if x[0] == opt), None)

    def set_option(self, opt: str, val: Any) -> None:
        """Sets a configuration option to a new value.

        The value goes through the same fixup as values read from the
        config files.

        Args:
            opt: The name of the option to set.
            val: The new value for the option.

        Raises:
            InvalidOptionNameError: If opt is not a valid option name.
            ValueError: If val is not valid for the option.
        """
        fixup = self._fixup(opt)
        if fixup is None:
            raise InvalidOptionNameError(opt)

        setattr(self, opt, fixup(val))

    def _get_option(self, secopt, getter):
        """Gets an option from the configuration.

        Args:
            secopt: A tuple containing the section and option name.
            getter: The function to use to get the option.

        Returns:
            The value of the option.
        """
        try:
            return getter(*secopt)
        except (configparser.NoSectionError, configparser.NoOptionError):
            logger.debug("Config option {0}.{1} not found.".format(*secopt))
            raise

    def merge_args(self, args: Namespace) -> None:
        """Merges command-line arguments into the configuration.

        Args:
            args: The parsed command-line arguments.
        """
        if args.output_format:
            self.set_option("output_format", args.output_format)

        if args.debug:
            self.set_option("log_level", "DEBUG")
