"""Provides the tide generating bodies that perturb the central body's gravity field.

A tide generating body only needs a gravitational parameter and a position in the central
body's frame. :class:`.EphemerisBody` builds one from an inertial position function and a frame
callable, so any ephemeris source can be plugged in. :class:`.Sun` and :class:`.Moon` default to
the low-precision analytic ephemerides, which are well within what solid tides need.

.. code-block:: python

    moon = Moon()
    r_moon = moon.getPosition(julian_date, pseudoEarthFixedRotation)

"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array, cos, sin

# Local Imports
from .. import constants as const
from .earth import Earth

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable

    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.stardate import JulianDate


ASTRONOMICAL_UNIT: float = 149597870.7
"""``float``: astronomical unit, (km)."""


class TideGeneratingBody(ABC):
    r"""Base class for bodies raising tides on the central body.

    Attributes:
        mu (``float``): gravitational parameter, (km^3/sec^2).
    """

    mu: float

    @abstractmethod
    def getPosition(self, julian_date: JulianDate, frame: Callable[[JulianDate], ndarray]) -> ndarray:
        """Calculate the position of the body's center in the given frame.

        Args:
            julian_date (:class:`.JulianDate`): epoch at which the position is calculated (TT).
            frame (``callable``): returns the 3x3 rotation from inertial coordinates into the
                desired frame at an epoch.

        Returns:
            ``ndarray``: 3x1 position vector of the body in `frame`, (km).
        """
        raise NotImplementedError


class EphemerisBody(TideGeneratingBody):
    """Tide generating body backed by an inertial position function."""

    def __init__(self, mu: float, position_function: Callable[[JulianDate], ndarray]):
        """Store the body's gravitational parameter and ephemeris.

        Args:
            mu (``float``): gravitational parameter, (km^3/sec^2).
            position_function (``callable``): returns the ECI position of the body relative to the
                central body at an epoch, (km).
        """
        self.mu = mu
        self._position_function = position_function

    def getPosition(self, julian_date: JulianDate, frame: Callable[[JulianDate], ndarray]) -> ndarray:
        """Rotate the inertial ephemeris position into `frame`."""
        return frame(julian_date) @ self._position_function(julian_date)


def _meanObliquity(tc: float) -> float:
    """Low precision mean obliquity of the ecliptic, (radians)."""
    return (23.439291 - 0.0130042 * tc) * const.DEG2RAD


def lowPrecisionSunPosition(julian_date: JulianDate) -> ndarray:
    """Calculate the ECI position of the Sun relative to the Earth.

    References:
        :cite:t:`vallado_2013_astro`, Section 5.1.1, Algorithm 29

    Args:
        julian_date (:class:`.JulianDate`): epoch of the position.

    Returns:
        ``ndarray``: 3x1 position vector, (km).
    """
    tc = (float(julian_date) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY
    mean_longitude = 280.460 + 36000.771 * tc
    mean_anomaly = (357.5291092 + 35999.05034 * tc) * const.DEG2RAD
    ecliptic_longitude = (
        mean_longitude
        + 1.914666471 * sin(mean_anomaly)
        + 0.019994643 * sin(2 * mean_anomaly)
    ) * const.DEG2RAD
    magnitude = (
        1.000140612 - 0.016708617 * cos(mean_anomaly) - 0.000139589 * cos(2 * mean_anomaly)
    ) * ASTRONOMICAL_UNIT
    obliquity = _meanObliquity(tc)

    return magnitude * array(
        [
            cos(ecliptic_longitude),
            cos(obliquity) * sin(ecliptic_longitude),
            sin(obliquity) * sin(ecliptic_longitude),
        ],
    )


def lowPrecisionMoonPosition(julian_date: JulianDate) -> ndarray:
    """Calculate the ECI position of the Moon relative to the Earth.

    References:
        :cite:t:`vallado_2013_astro`, Section 5.3.1, Algorithm 31

    Args:
        julian_date (:class:`.JulianDate`): epoch of the position.

    Returns:
        ``ndarray``: 3x1 position vector, (km).
    """
    tc = (float(julian_date) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY

    def _sind(angle):
        return sin(angle * const.DEG2RAD)

    def _cosd(angle):
        return cos(angle * const.DEG2RAD)

    ecliptic_longitude = (
        218.32
        + 481267.8813 * tc
        + 6.29 * _sind(134.9 + 477198.85 * tc)
        - 1.27 * _sind(259.2 - 413335.38 * tc)
        + 0.66 * _sind(235.7 + 890534.23 * tc)
        + 0.21 * _sind(269.9 + 954397.70 * tc)
        - 0.19 * _sind(357.5 + 35999.05 * tc)
        - 0.11 * _sind(186.6 + 966404.05 * tc)
    ) * const.DEG2RAD
    ecliptic_latitude = (
        5.13 * _sind(93.3 + 483202.03 * tc)
        + 0.28 * _sind(228.2 + 960400.87 * tc)
        - 0.28 * _sind(318.3 + 6003.18 * tc)
        - 0.17 * _sind(217.6 - 407332.20 * tc)
    ) * const.DEG2RAD
    parallax = (
        0.9508
        + 0.0518 * _cosd(134.9 + 477198.85 * tc)
        + 0.0095 * _cosd(259.2 - 413335.38 * tc)
        + 0.0078 * _cosd(235.7 + 890534.23 * tc)
        + 0.0028 * _cosd(269.9 + 954397.70 * tc)
    ) * const.DEG2RAD
    obliquity = _meanObliquity(tc)
    magnitude = Earth.radius / sin(parallax)

    return magnitude * array(
        [
            cos(ecliptic_latitude) * cos(ecliptic_longitude),
            cos(obliquity) * cos(ecliptic_latitude) * sin(ecliptic_longitude)
            - sin(obliquity) * sin(ecliptic_latitude),
            sin(obliquity) * cos(ecliptic_latitude) * sin(ecliptic_longitude)
            + cos(obliquity) * sin(ecliptic_latitude),
        ],
    )


class Sun(EphemerisBody):
    r"""Sun tide generating body.

    Attributes:
        mu (``float``): gravitational parameter (km^3/sec^2), from DE430.

    References:
        :cite:t:`folkner_2014_planetary`, Table 8.
    """

    MU: float = 1.32712440041939400e11

    def __init__(self, position_function: Callable[[JulianDate], ndarray] | None = None):
        """Use the low precision analytic ephemeris unless `position_function` is given."""
        if position_function is None:
            position_function = lowPrecisionSunPosition
        super().__init__(self.MU, position_function)


class Moon(EphemerisBody):
    r"""Moon tide generating body.

    Attributes:
        mu (``float``): gravitational parameter, (km^3/sec^2), from DE430.

    References:
        :cite:t:`folkner_2014_planetary`, Table 8.
    """

    MU: float = 4902.800066

    def __init__(self, position_function: Callable[[JulianDate], ndarray] | None = None):
        """Use the low precision analytic ephemeris unless `position_function` is given."""
        if position_function is None:
            position_function = lowPrecisionMoonPosition
        super().__init__(self.MU, position_function)
