"""Hold common label types for easier importing."""

from __future__ import annotations

# Standard Library Imports
from enum import Enum


class IERSConventions(str, Enum):
    """Defines the supported IERS conventions versions.

    The value of each member is also the name of the resource directory holding its tables.
    """

    IERS_1996: str = "1996"
    """``str``: IERS conventions (1996), IAU-1980 nutation theory."""

    IERS_2003: str = "2003"
    """``str``: IERS conventions (2003), Technical Note 32."""

    IERS_2010: str = "2010"
    """``str``: IERS conventions (2010), Technical Note 36."""


class TideSystem(str, Enum):
    """Defines how the permanent tide is handled by a static gravity field."""

    ZERO_TIDE: str = "zero_tide"
    """``str``: permanent tide already included in the static field."""

    TIDE_FREE: str = "tide_free"
    """``str``: permanent tide excluded from the static field."""

    UNKNOWN: str = "unknown"
    """``str``: unknown/unspecified tide system."""


class SeriesLoaderLabel(str, Enum):
    """Defines valid labels for IERS table loaders."""

    MODULE: str = "ModuleDotDatSeriesLoader"
    """``str``: tables bundled as package resources."""

    LOCAL: str = "LocalDotDatSeriesLoader"
    """``str``: tables stored in a local directory."""


class EOPLoaderLabel(str, Enum):
    """Defines valid labels for EOP data loaders."""

    LOCAL: str = "LocalDotDatEOPLoader"
    """``str``: EOP file stored on the local file system."""
