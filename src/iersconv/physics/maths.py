"""General mathematics functions that provided extended capability to `numpy` and `scipy`.

* `scipy docs <https://docs.scipy.org/doc/scipy/index.html>`_
* `numpy docs <https://numpy.org/doc/stable/>`_
"""

from __future__ import annotations

# Third Party Imports
from numpy import array, cos, float64, fmod, int64, isnan, ndarray, sin

# Local Imports
from . import constants as const

_MAGNITUDE_MASK = 0x7FFFFFFFFFFFFFFF
"""``int``: bit mask removing the sign bit of an IEEE-754 double."""


def rot1(angle: float) -> ndarray:
    r"""Return the passive rotation of the coordinate frame by `angle` about its first axis.

    Args:
        angle (``float``): angle rotated through, (radians).

    Returns:
        ``ndarray``: 3x3 rotation matrix :math:`R_1(\theta)`.
    """
    c_a, s_a = cos(angle), sin(angle)
    return array([[1.0, 0.0, 0.0], [0.0, c_a, s_a], [0.0, -s_a, c_a]])


def rot3(angle: float) -> ndarray:
    r"""Return the passive rotation of the coordinate frame by `angle` about its third axis.

    Args:
        angle (``float``): angle rotated through, (radians).

    Returns:
        ``ndarray``: 3x3 rotation matrix :math:`R_3(\theta)`.
    """
    c_a, s_a = cos(angle), sin(angle)
    return array([[c_a, s_a, 0.0], [-s_a, c_a, 0.0], [0.0, 0.0, 1.0]])


def wrapAngle2Pi(angle: float) -> float:
    r"""Force angle into range of :math:`[0, 2\pi)`."""
    # Fmod takes sign of dividend (first arg)
    if (angle := fmod(angle, const.TWOPI)) < 0:
        angle += const.TWOPI
    return angle


def _orderedBits(value: float) -> int:
    """Map a double onto an integer line where adjacent doubles differ by one.

    Both signed zeros map to ``0``, so the distance across zero is also counted in ULPs.
    """
    bits = int(float64(value).view(int64))
    return bits if bits >= 0 else -(bits & _MAGNITUDE_MASK)


def ulpEquals(value: float, expected: float, max_ulps: int = 1) -> bool:
    r"""Check whether two doubles are within `max_ulps` units in the last place of each other.

    Note:
        ``NaN`` never compares equal, not even to itself.

    Args:
        value (``float``): Value being compared.
        expected (``float``): Value that `value` is compared against.
        max_ulps (``int``, optional): number of representable doubles allowed between the two
            values. Defaults to 1.

    Returns:
        ``bool``: whether `value` and `expected` are considered equal.
    """
    if isnan(value) or isnan(expected):
        return False

    return abs(_orderedBits(value) - _orderedBits(expected)) <= max_ulps
