"""Defines the :class:`.TidalCoefficientCache`, the solid Earth tides gravity field corrector.

The tides raised by the Sun and the Moon deform the central body, which shows up as time
varying corrections to its normalized spherical harmonic coefficients up to degree and order 4.
Force models query the corrections coefficient by coefficient at the same epoch, so the whole
set is computed once per epoch and held in a single-entry cache.

References:
    :cite:t:`iers_2010_conventions`, Section 6.2
"""

from __future__ import annotations

# Standard Library Imports
from threading import RLock
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import nan, zeros
from scipy.linalg import norm

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.labels import TideSystem
from ...common.logger import iersconvLogInfo
from .. import constants as const
from ..maths import ulpEquals
from ..time.stardate import JulianDate
from .earth import Earth
from .legendre import AssociatedLegendreRecursion

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable, Sequence

    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..conventions import ConventionSet
    from ..series.functions import DatedFunction
    from .love_numbers import LoveNumbers
    from .third_body import TideGeneratingBody


MAX_DEGREE: int = 4
"""``int``: highest degree of the tidal corrections."""

MAX_ORDER: int = 4
"""``int``: highest order of the tidal corrections."""

INDIRECT_EFFECT_DEGREE: int = 4
"""``int``: degree receiving the indirect effect of the degree 2 tides."""


class TidalCoefficientCache:
    """Tide induced corrections to the normalized spherical harmonic coefficients.

    Coefficients are requested at an offset, in seconds of TT since J2000.0. The corrections for
    every degree and order are recomputed only when the offset changes by more than the
    configured number of units in the last place, otherwise the cached tables are read.

    A refill and the read following it happen under the same lock, so a caller never observes
    tables that do not match the requested offset.
    """

    def __init__(
        self,
        central_body_frame: Callable[[JulianDate], ndarray],
        ae: float,
        mu: float,
        central_tide_system: TideSystem,
        love_numbers: LoveNumbers,
        frequency_dependence: DatedFunction,
        permanent_tide: float,
        bodies: Sequence[TideGeneratingBody],
        tolerance_ulps: int | None = None,
    ):
        """Bind the cache to a central body and a set of tide generating bodies.

        Args:
            central_body_frame (``callable``): returns the 3x3 rotation from inertial coordinates
                into the central body's rotating frame at an epoch.
            ae (``float``): reference radius of the central body's gravity field, (km).
            mu (``float``): gravitational parameter of the central body, (km^3/sec^2).
            central_tide_system (:class:`.TideSystem`): tide system of the static gravity field
                the corrections are added to.
            love_numbers (:class:`.LoveNumbers`): nominal Love numbers.
            frequency_dependence (:class:`.DatedFunction`): returns the five frequency dependent
                corrections to C20, C21, S21, C22 and S22 at an epoch.
            permanent_tide (``float``): permanent tide part of C20.
            bodies (``Sequence``): tide generating bodies.
            tolerance_ulps (``int``, optional): offsets this many units in the last place apart
                share a cache entry. Defaults to the configured ``tides.CacheToleranceULPs``.
        """
        if tolerance_ulps is None:
            tolerance_ulps = BehavioralConfig.getConfig().tides.CacheToleranceULPs

        self._central_body_frame = central_body_frame
        self._ae = ae
        self._mu = mu
        self._central_tide_system = TideSystem(central_tide_system)
        self._love_numbers = love_numbers
        self._frequency_dependence = frequency_dependence
        self._permanent_tide = permanent_tide
        self._bodies = tuple(bodies)
        self._tolerance_ulps = tolerance_ulps

        self._legendre = AssociatedLegendreRecursion(MAX_DEGREE)
        self._love_size = min(love_numbers.getSize(), MAX_DEGREE + 1)

        self._lock = RLock()
        self._cnm = zeros((MAX_DEGREE + 1, MAX_ORDER + 1))
        self._snm = zeros((MAX_DEGREE + 1, MAX_ORDER + 1))
        self._offset = nan

    @classmethod
    def fromConventions(
        cls,
        conventions: ConventionSet,
        central_body_frame: Callable[[JulianDate], ndarray],
        bodies: Sequence[TideGeneratingBody],
        central_tide_system: TideSystem = TideSystem.ZERO_TIDE,
        ae: float = Earth.radius,
        mu: float = Earth.mu,
        tolerance_ulps: int | None = None,
    ) -> TidalCoefficientCache:
        """Build the cache from the tidal models of `conventions`.

        Every model is loaded here, so missing or malformed tables fail the construction.

        Raises:
            :class:`.ResourceLoadError`: a tidal table is missing or malformed.
        """
        tides = cls(
            central_body_frame,
            ae,
            mu,
            central_tide_system,
            conventions.getLoveNumbers(),
            conventions.getTideFrequencyDependenceFunction(),
            conventions.getPermanentTide(),
            bodies,
            tolerance_ulps=tolerance_ulps,
        )
        iersconvLogInfo(
            f"Solid tides field built from IERS {conventions.conventions.value} conventions "
            f"for {len(tides._bodies)} bodies",
        )
        return tides

    def getMaxDegree(self) -> int:
        """Return the highest degree of the corrections."""
        return MAX_DEGREE

    def getMaxOrder(self) -> int:
        """Return the highest order of the corrections."""
        return MAX_ORDER

    def getMu(self) -> float:
        """Return the central body gravitational parameter, (km^3/sec^2)."""
        return self._mu

    def getAe(self) -> float:
        """Return the central body reference radius, (km)."""
        return self._ae

    def getReferenceDate(self) -> JulianDate:
        """Return the epoch offsets are counted from."""
        return JulianDate(const.J2000_JULIAN_DATE)

    def getOffset(self, julian_date: JulianDate) -> float:
        """Return the offset of `julian_date` from :meth:`.getReferenceDate`, (sec)."""
        return JulianDate(julian_date).j2000Offset()

    def getTideSystem(self) -> TideSystem:
        """Return the tide system of the corrected field.

        The permanent tide is removed from the corrections when the static field already holds
        it, so the corrected field is always zero tide.
        """
        return TideSystem.ZERO_TIDE

    def getNormalizedCnm(self, offset: float, n: int, m: int) -> float:
        """Return the correction to the normalized cosine coefficient of degree `n`, order `m`.

        Args:
            offset (``float``): offset from J2000.0, (sec of TT).
            n (``int``): degree, from 0 to 4.
            m (``int``): order, from 0 to `n`.

        Raises:
            ValueError: `n` and `m` do not satisfy :math:`0 \\le m \\le n \\le 4`.
        """
        self._checkIndices(n, m)
        with self._lock:
            self._fillCache(offset)
            return self._cnm[n, m]

    def getNormalizedSnm(self, offset: float, n: int, m: int) -> float:
        """Return the correction to the normalized sine coefficient of degree `n`, order `m`.

        See Also:
            :meth:`.getNormalizedCnm`
        """
        self._checkIndices(n, m)
        with self._lock:
            self._fillCache(offset)
            return self._snm[n, m]

    @staticmethod
    def _checkIndices(n: int, m: int):
        if not 0 <= m <= n <= MAX_DEGREE:
            raise ValueError(f"Invalid tidal coefficient indices: degree {n}, order {m}")

    def _fillCache(self, offset: float):
        """Recompute both tables unless they already hold the corrections at `offset`."""
        if ulpEquals(offset, self._offset, self._tolerance_ulps):
            return

        julian_date = JulianDate.fromJ2000Offset(offset)
        self._cnm.fill(0.0)
        self._snm.fill(0.0)

        for body in self._bodies:
            self._addFrequencyIndependentPart(body, julian_date)

        self._addFrequencyDependentPart(julian_date)

        if self._central_tide_system == TideSystem.ZERO_TIDE:
            self._cnm[2, 0] -= self._permanent_tide

        self._offset = offset

    def _addFrequencyIndependentPart(self, body: TideGeneratingBody, julian_date: JulianDate):
        """Add the Love number weighted response to `body` at `julian_date`.

        References:
            :cite:t:`iers_2010_conventions`, Eq. 6.6 and 6.7
        """
        position = body.getPosition(julian_date, self._central_body_frame)
        x, y, z = position[0], position[1], position[2]
        r = norm(position)
        rho = norm(position[:2])
        cos_lambda = x / rho
        sin_lambda = y / rho
        pnm = self._legendre.evaluate(z / r, rho / r)

        gm_ratio = body.mu / self._mu
        ae_over_r = self._ae / r
        love = self._love_numbers

        cos_m_lambda, sin_m_lambda = 1.0, 0.0
        for m in range(self._love_size):
            for n in range(m, self._love_size):
                coeff = gm_ratio * ae_over_r ** (n + 1) * pnm[n, m] / (2 * n + 1)
                k_real = love.getReal(n, m)
                k_imaginary = love.getImaginary(n, m)

                self._cnm[n, m] += coeff * (k_real * cos_m_lambda + k_imaginary * sin_m_lambda)
                self._snm[n, m] += coeff * (k_real * sin_m_lambda - k_imaginary * cos_m_lambda)

                if n == 2:
                    k_plus = love.getPlus(n, m)
                    self._cnm[INDIRECT_EFFECT_DEGREE, m] += coeff * k_plus * cos_m_lambda
                    self._snm[INDIRECT_EFFECT_DEGREE, m] += coeff * k_plus * sin_m_lambda

            cos_m_lambda, sin_m_lambda = (
                cos_m_lambda * cos_lambda - sin_m_lambda * sin_lambda,
                sin_m_lambda * cos_lambda + cos_m_lambda * sin_lambda,
            )

    def _addFrequencyDependentPart(self, julian_date: JulianDate):
        """Add the frequency dependent corrections to the degree 2 coefficients.

        References:
            :cite:t:`iers_2010_conventions`, Eq. 6.8
        """
        delta_c20, delta_c21, delta_s21, delta_c22, delta_s22 = self._frequency_dependence.value(
            julian_date,
        )
        self._cnm[2, 0] += delta_c20
        self._cnm[2, 1] += delta_c21
        self._snm[2, 1] += delta_s21
        self._cnm[2, 2] += delta_c22
        self._snm[2, 2] += delta_s22
