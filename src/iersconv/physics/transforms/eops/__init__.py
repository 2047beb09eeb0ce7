"""Earth orientation parameters package."""

from __future__ import annotations

# Standard Library Imports
import datetime
from dataclasses import dataclass


@dataclass(frozen=True)
class EarthOrientationParameter:
    """Data class to define EOP-type data used internally."""

    date: datetime.date
    """datetime.date: Defines the year, month, & date associated with the given data."""

    x_p: float
    """float: Polar motion x coordinate (radians)."""

    y_p: float
    """float: Polar motion y coordinate (radians)."""

    d_delta_psi: float
    """float: Psi nutation correction term (radians).

    Enforces consistency with GCRF coordinates.
    """

    d_delta_eps: float
    """float: Epsilon nutation correction term (radians).

    Enforces consistency with GCRF coordinates.
    """

    delta_ut1: float
    """float: Difference between UTC and UT1 (seconds)."""

    length_of_day: float
    """float: Excess length of day (seconds)."""

    delta_atomic_time: int
    """int: Difference in atomic time w.r.t UTC, via leap seconds (seconds)"""


@dataclass(frozen=True)
class NutationCorrection:
    """Corrections to the IAU 1980 nutation angles, w.r.t. the celestial pole offsets."""

    dd_psi: float
    """float: correction to the nutation in longitude (radians)."""

    dd_eps: float
    """float: correction to the nutation in obliquity (radians)."""


@dataclass(frozen=True)
class PoleCorrection:
    """Coordinates of the celestial intermediate pole w.r.t. the terrestrial reference frame."""

    x_p: float
    """float: Polar motion x coordinate (radians)."""

    y_p: float
    """float: Polar motion y coordinate (radians)."""


NULL_NUTATION_CORRECTION = NutationCorrection(dd_psi=0.0, dd_eps=0.0)
""":class:`.NutationCorrection`: correction used when no EOP data covers a date."""

NULL_POLE_CORRECTION = PoleCorrection(x_p=0.0, y_p=0.0)
""":class:`.PoleCorrection`: correction used when no EOP data covers a date."""
