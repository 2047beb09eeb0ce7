"""Defines the global settings that control how tables are loaded, logged, and cached.

Settings are grouped into sections, each option declaring the :class:`.CustomConfigParser`
getter used to read it and its default value. A config file only needs the options it changes:

.. code-block:: ini

    [iers]
    LoaderName = LocalDotDatSeriesLoader
    LoaderLocation = /opt/iers

    [tides]
    CacheToleranceULPs = 4

"""

from __future__ import annotations

# Standard Library Imports
from configparser import ConfigParser
from configparser import Error as ConfigError
from importlib import resources
from logging import CRITICAL, DEBUG, ERROR, INFO, NOTSET, WARNING
from pathlib import Path
from typing import TYPE_CHECKING

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from typing import Any, Final


class SubConfig:
    """Class that represents a section in the configuration.

    Enforce improved config convention:
        `BehavioralConfig.section.value` rather than something like `BehavioralConfig["section"]["value"]`.
    """

    def __init__(self, section: str):
        """Instantiate a `SubConfig` object.

        Args:
            section (``str``): name of section that this SubConfig object represents
        """
        if not isinstance(section, str):
            raise TypeError("Config section must be a string")
        self.section = section

    def setonce(self, name: str, value: Any):
        """Set the option `name`, raising if the section already holds it.

        Args:
            name (``str``): name of the option to set
            value (``any``): value of the option
        """
        if name in vars(self):
            raise AttributeError(
                f"SubConfig {self.section!r} already has a value set for {name!r}:{getattr(self, name)!r}",
            )
        setattr(self, name, value)


class CustomConfigParser(ConfigParser):
    """Config parser understanding logging levels and null strings."""

    LOGGING_LEVELS: Final[dict[str, int]] = {
        "CRITICAL": CRITICAL,
        "ERROR": ERROR,
        "WARNING": WARNING,
        "INFO": INFO,
        "DEBUG": DEBUG,
        "NOTSET": NOTSET,
    }

    def getlogginglevel(self, section: str, option: str) -> int:
        """Return the logging level named by the option, ``NOTSET`` if it is unknown."""
        return self.LOGGING_LEVELS.get(self.get(section, option), NOTSET)

    def getnullstr(self, section: str, option: str) -> str | None:
        """Return the option as a ``str``, or ``None`` for "null", "none" or an empty value."""
        got = self.get(section, option)
        return None if got.lower() in ("null", "none", "") else got


class BehavioralConfig:
    """Singleton, config settings class."""

    DEFAULT_CONFIG_FILE: Final[str] = "default_behavior.config"

    OPTIONS: Final[dict[str, dict[str, tuple[str, Any]]]] = {
        "logging": {
            "OutputLocation": ("get", "stdout"),
            "Level": ("getlogginglevel", DEBUG),
            "MaxFileSize": ("getint", 1048576),
            "MaxFileCount": ("getint", 50),
            "AllowMultipleHandlers": ("getboolean", False),
        },
        "iers": {
            "LoaderName": ("get", "ModuleDotDatSeriesLoader"),
            "LoaderLocation": ("get", "iers"),
        },
        "eop": {
            "LoaderName": ("get", "LocalDotDatEOPLoader"),
            "LoaderLocation": ("getnullstr", None),
        },
        "tides": {
            "CacheToleranceULPs": ("getint", 1),
        },
    }
    """``dict``: parser getter name and default value of each option, by section."""

    __shared_inst: BehavioralConfig | None = None

    def __init__(self, config_file_path: str | None = None):
        """Build the configuration and make it the shared one.

        Args:
            config_file_path (``str``, optional): config file to read. Defaults to the bundled
                defaults. A path that does not exist yields the default values.
        """
        self._parser = CustomConfigParser()

        if config_file_path is None:
            res = resources.files("iersconv.common").joinpath(self.DEFAULT_CONFIG_FILE)
            with (
                resources.as_file(res) as res_filepath,
                open(res_filepath, encoding="utf-8") as config_file,
            ):
                self._parser.read_file(config_file)

        elif Path(config_file_path).exists():
            with open(config_file_path, encoding="utf-8") as config_file:
                self._parser.read_file(config_file)

        for section, options in self.OPTIONS.items():
            sub = SubConfig(section)
            for option, (getter_name, default) in options.items():
                try:
                    value = getattr(self._parser, getter_name)(section, option)
                except ConfigError:
                    value = default
                sub.setonce(option, value)

            setattr(self, section, sub)

        BehavioralConfig.__shared_inst = self

    @classmethod
    def getConfig(cls, config_file_path: str | None = None) -> BehavioralConfig:
        """Return a reference to the singleton shared config."""
        if cls.__shared_inst is None:
            cls.__shared_inst = BehavioralConfig(config_file_path=config_file_path or None)

        return cls.__shared_inst
