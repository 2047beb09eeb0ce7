"""Defines the :class:`.JulianDate` class and supporting functions.

Subclassing the `float` type keeps Julian dates cheap to pass around while still making it clear
at a glance which values are epochs and which are durations:

.. code-block:: python

    epoch = JulianDate.getJulianDate(2007, 4, 5, 12, 0, 0)
    offset = epoch.j2000Offset()  # seconds since J2000.0
    assert JulianDate.fromJ2000Offset(offset) == epoch

"""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime, timedelta

# Third Party Imports
from numpy import floor

# Local Imports
from .. import constants as const

J2000_DATETIME: datetime = datetime(2000, 1, 1, 12, 0, 0)
"""``datetime``: calendar date of :data:`.J2000_JULIAN_DATE`, on the same time scale."""

_CALENDAR_LIMITS: tuple[tuple[str, float, float], ...] = (
    ("Month", 1, 12),
    ("Day", 1, 31),
    ("Hour", 0.0, 24.0),
    ("Minute", 0.0, 60.0),
    ("Second", 0.0, 120.0),
)
"""``tuple``: name, lowest and highest accepted value of each calendar field after the year."""


class JulianDate(float):
    """Class representing a Terrestrial Time Julian date in floating point form."""

    @classmethod
    def getJulianDate(cls, year, month, day, hour, minute, second):
        """From a calendar date & time [ymdhms], return the :class:`.JulianDate`.

        The time scale of the result is the time scale of the inputs. Valid for the years 1900
        to 2100.

        References:
            :cite:t:`vallado_2013_astro`, Section 3.5.1, Algorithm 14

        Args:
            year (int): Calendar year
            month (int): Month of the year
            day (int): Day of the month
            hour (int): Hours in the day
            minute (int): Minutes in the hour
            second (float): Seconds in the minute, up to 120 to allow for leap seconds

        Raises:
            ValueError: a calendar field is out of range.

        Returns:
            :class:`.JulianDate`: corresponding epoch in Julian date format
        """
        for (name, lowest, highest), field in zip(_CALENDAR_LIMITS, (month, day, hour, minute, second)):
            if not lowest <= field <= highest:
                raise ValueError(f"JulianDate: {name} must lie in [{lowest}, {highest}], got {field}")

        julian_day = (
            367 * year
            - floor(7 * (year + floor((month + 9) / 12)) / 4)
            + floor(275 * month / 9)
            + day
            + 1721013.5
        )
        day_fraction = (hour * 3600 + minute * 60 + second) / const.DAYS2SEC

        return cls(julian_day + day_fraction)

    @classmethod
    def fromJ2000Offset(cls, offset: float) -> JulianDate:
        """Return the :class:`.JulianDate` lying `offset` seconds after J2000.0."""
        return cls(const.J2000_JULIAN_DATE + offset * const.SEC2DAYS)

    def j2000Offset(self) -> float:
        """Return the number of seconds elapsed since J2000.0."""
        return (float(self) - const.J2000_JULIAN_DATE) * const.DAYS2SEC

    @property
    def julian_centuries(self) -> float:
        """``float``: Julian centuries elapsed since J2000.0."""
        return (float(self) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY

    def __repr__(self):
        """Return a string representation of this :class:`.JulianDate`."""
        iso = julianDateToDatetime(self).isoformat(timespec="microseconds")
        return f"JulianDate({float(self)}, ISO={iso})"


def datetimeToJulianDate(date_time: datetime) -> JulianDate:
    """Convert a naive ``datetime`` into a :class:`.JulianDate` on the same time scale."""
    return JulianDate(const.J2000_JULIAN_DATE + (date_time - J2000_DATETIME) / timedelta(days=1))


def julianDateToDatetime(julian_date: JulianDate) -> datetime:
    """Convert a :class:`.JulianDate` into a naive ``datetime``, to the nearest microsecond."""
    return J2000_DATETIME + timedelta(days=float(julian_date) - const.J2000_JULIAN_DATE)
