"""Defines the fundamental nutation arguments and the generator producing them.

References:
    :cite:t:`iers_2010_conventions`, Section 5.7.2
"""

from __future__ import annotations

# Standard Library Imports
from dataclasses import dataclass
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import asarray, zeros
from numpy.polynomial.polynomial import polyval

# Local Imports
from .. import constants as const
from ..maths import wrapAngle2Pi
from ..time.conversions import greenwichMeanTime

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.stardate import JulianDate


ARGUMENT_NAMES: tuple[str, ...] = (
    "l",
    "l_prime",
    "f",
    "d",
    "omega",
    "l_me",
    "l_ve",
    "l_e",
    "l_ma",
    "l_j",
    "l_sa",
    "l_u",
    "l_ne",
    "p_a",
    "gamma",
)
"""``tuple``: order of the angles in :attr:`.FundamentalArguments.angles`.

Delaunay arguments, planetary mean longitudes, general precession in longitude, and GMST + pi.
"""

NUM_ARGUMENTS: int = len(ARGUMENT_NAMES)
"""``int``: number of fundamental arguments a series multiplier row may reference."""

NUM_TABULATED_ARGUMENTS: int = NUM_ARGUMENTS - 1
"""``int``: number of arguments read from a table, gamma is always computed from the date."""


@dataclass(frozen=True, eq=False)
class FundamentalArguments:
    """Snapshot of the fundamental nutation arguments at one epoch."""

    julian_date: JulianDate
    """:class:`.JulianDate`: epoch at which the arguments were evaluated (TT)."""

    tc: float
    """``float``: Julian centuries of TT elapsed since J2000.0."""

    angles: ndarray
    """``ndarray``: (15, ) argument values ordered as :data:`.ARGUMENT_NAMES`, (radians)."""

    @property
    def l(self) -> float:  # noqa: E743
        """``float``: mean anomaly of the Moon, (radians)."""
        return self.angles[0]

    @property
    def l_prime(self) -> float:
        """``float``: mean anomaly of the Sun, (radians)."""
        return self.angles[1]

    @property
    def f(self) -> float:
        """``float``: mean argument of latitude of the Moon, L - Omega, (radians)."""
        return self.angles[2]

    @property
    def d(self) -> float:
        """``float``: mean elongation of the Moon from the Sun, (radians)."""
        return self.angles[3]

    @property
    def omega(self) -> float:
        """``float``: mean longitude of the ascending node of the Moon, (radians)."""
        return self.angles[4]

    @property
    def gamma(self) -> float:
        """``float``: Greenwich mean sidereal time + pi, (radians)."""
        return self.angles[NUM_ARGUMENTS - 1]

    def getArgument(self, name: str) -> float:
        """Return a single argument by its name in :data:`.ARGUMENT_NAMES`."""
        return self.angles[ARGUMENT_NAMES.index(name)]


class FundamentalArgumentsGenerator:
    """Evaluates the polynomial expressions of the fundamental arguments at a given epoch.

    Each tabulated argument is :math:`s \\sum_k c_k t^k` where :math:`t` is in Julian centuries
    of TT since J2000.0 and :math:`s` converts the coefficients' unit into radians. Arguments
    absent from the table evaluate to zero.
    """

    def __init__(self, scales: ndarray, coefficients: list[ndarray], name: str = "<memory>"):
        """Store the polynomial expression of each tabulated argument.

        Args:
            scales (``ndarray``): (N, ) factor converting each row into radians.
            coefficients (``list``): N arrays of polynomial coefficients, lowest degree first.
            name (``str``, optional): name of the table the arguments were read from.

        Raises:
            ValueError: if more rows than :data:`.NUM_TABULATED_ARGUMENTS` are given, or the
                number of scales does not match the number of coefficient rows.
        """
        if len(coefficients) > NUM_TABULATED_ARGUMENTS:
            err = f"{name}: at most {NUM_TABULATED_ARGUMENTS} arguments, got {len(coefficients)}"
            raise ValueError(err)
        if len(scales) != len(coefficients):
            err = f"{name}: {len(scales)} scales given for {len(coefficients)} arguments"
            raise ValueError(err)

        self.name = name
        self._scales = asarray(scales, dtype=float)
        self._coefficients = tuple(asarray(row, dtype=float) for row in coefficients)

    def evaluateAll(self, julian_date: JulianDate) -> FundamentalArguments:
        """Evaluate every fundamental argument at `julian_date`.

        Args:
            julian_date (:class:`.JulianDate`): epoch on the TT scale.

        Returns:
            :class:`.FundamentalArguments`: the evaluated arguments.
        """
        tc = (float(julian_date) - const.J2000_JULIAN_DATE) / const.DAYS_PER_JULIAN_CENTURY
        angles = zeros(NUM_ARGUMENTS)
        for index, (scale, coefficients) in enumerate(zip(self._scales, self._coefficients)):
            angles[index] = scale * polyval(tc, coefficients)

        angles[NUM_ARGUMENTS - 1] = wrapAngle2Pi(greenwichMeanTime(julian_date) + const.PI)
        angles.flags.writeable = False

        return FundamentalArguments(julian_date=julian_date, tc=tc, angles=angles)
