"""Global math & physics constants.

This module holds all constants that are used in various places across the
codebase, allowing for a consistent place to store them. Constants specific
to objects and classes remain in those files.

References:
    #. :cite:t:`iers_2010_conventions`
    #. :cite:t:`vallado_2013_astro`
"""

from __future__ import annotations

# Third Party Imports
from numpy import pi

# Conversion constants
PI = pi
TWOPI = 2.0 * pi
DAYS2SEC = 24.0 * 3600
SEC2DAYS = 1.0 / DAYS2SEC
DEG2RAD = pi / 180.0
ARCSEC2DEG = 1.0 / 3600.0
ARCSEC2RAD = ARCSEC2DEG * DEG2RAD
MICROARCSEC2RAD = 1.0e-6 * ARCSEC2RAD

# Time constants
J2000_JULIAN_DATE = 2451545.0  # Julian date of the J2000.0 epoch, 2000-01-01T12:00:00 TT
DAYS_PER_JULIAN_CENTURY = 36525.0
TT_MINUS_TAI = 32.184  # Terrestrial time minus atomic time, (sec)
