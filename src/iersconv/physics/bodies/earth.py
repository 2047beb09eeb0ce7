"""Defines the :class:`.Earth` class."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..maths import rot3
from ..time.conversions import greenwichMeanTime

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.stardate import JulianDate


class Earth:
    """Defines the common Earth constants.

    Attributes:
        mu (``float``): gravitational parameter, (km^3/sec^2).
        radius (``float``): mean equatorial radius (km).

    References:
        #. :cite:t:`vallado_2013_astro`, Appendix D.1, Table D-1
    """

    mu = 398600.4415
    radius = 6378.1363


def pseudoEarthFixedRotation(julian_date: JulianDate) -> ndarray:
    """Return the rotation from inertial coordinates into the pseudo Earth-fixed frame.

    Only the Earth's rotation angle (GMST) is accounted for, which is what tide generating body
    longitudes need.

    Args:
        julian_date (:class:`.JulianDate`): epoch on the TT scale.

    Returns:
        ``ndarray``: 3x3 passive rotation matrix.
    """
    return rot3(greenwichMeanTime(julian_date))
