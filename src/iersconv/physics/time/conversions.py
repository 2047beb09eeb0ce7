"""Helper functions that convert between different forms of time."""

from __future__ import annotations

# Local Imports
from .. import constants as const
from ..maths import wrapAngle2Pi
from .stardate import JulianDate


def greenwichMeanTime(julian_date):
    """Determine the Greenwich mean sidereal time associated with the given julian_date.

    Note:
        The UT1 - TT difference (about a minute) is ignored, which is well below the accuracy
        needed for the tidal arguments this feeds.

    References:
        :cite:t:`vallado_2013_astro`, Section 3.5.2

    Args:
        julian_date (:class:`.JulianDate`): Julian date to convert to GST

    Returns:
        float: Greenwich sidereal time in radians
    """
    tut1 = (float(julian_date) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY
    gst = (
        -6.2e-6 * tut1**3
        + 0.093104 * tut1**2
        + (876600 * 3600 + 8640184.812866) * tut1
        + 67310.54841
    )
    # Convert from seconds to radians
    return wrapAngle2Pi(gst * (1 / 240) * const.DEG2RAD)


def tai2TerrestrialTime(year, month, day, hour, minute, second) -> JulianDate:
    """Convert an atomic time (TAI) calendar date into a Terrestrial Time :class:`.JulianDate`.

    References:
        :cite:t:`vallado_2013_astro`, Section 3.5.5, Eq. 3-49

    Args:
        year (int): current year
        month (int): current month
        day (int): current day of month
        hour (int): hour of the day
        minute (int): minute of the hour
        second (float): seconds of the minute

    Returns:
        :class:`.JulianDate`: the epoch on the TT scale
    """
    tai = JulianDate.getJulianDate(year, month, day, hour, minute, second)
    return JulianDate(tai + const.TT_MINUS_TAI * const.SEC2DAYS)


def utc2TerrestrialTime(year, month, day, hour, minute, second, delta_atomic_time) -> JulianDate:
    """Convert a UTC calendar date into a Terrestrial Time :class:`.JulianDate`.

    Args:
        year (int): current year
        month (int): current month
        day (int): current day of month
        hour (int): hour of the day
        minute (int): minute of the hour
        second (float): seconds of the minute
        delta_atomic_time (float): TAI - UTC, via leap seconds (sec)

    Returns:
        :class:`.JulianDate`: the epoch on the TT scale
    """
    utc = JulianDate.getJulianDate(year, month, day, hour, minute, second)
    return JulianDate(utc + (delta_atomic_time + const.TT_MINUS_TAI) * const.SEC2DAYS)
