"""Defines the :class:`.NutationFrameTransform` between the Mean Of Date and True Of Date frames.

References:
    #. :cite:t:`vallado_2013_astro`, Section 3.7.2, Eqn 3-79 and 3-86
    #. :cite:t:`iers_1996_conventions`, Chapter 5
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import cos

# Local Imports
from ..maths import rot1, rot3
from .eops import NULL_NUTATION_CORRECTION, NULL_POLE_CORRECTION

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..conventions import ConventionSet
    from ..time.stardate import JulianDate
    from .eops import NutationCorrection, PoleCorrection
    from .eops.history import EOPHistory


class NutationFrameTransform:
    """Nutation of the Earth's pole, rotating Mean Of Date (MOD) into True Of Date (TOD).

    Every model is fetched at construction, so conventions lacking a nutation model fail here
    rather than at the first epoch.

    Attributes:
        conventions (:class:`.ConventionSet`): conventions supplying the nutation models.
        eop_history (:class:`.EOPHistory` | ``None``): source of the nutation corrections, none
            being applied when it is ``None``.
    """

    def __init__(self, conventions: ConventionSet, eop_history: EOPHistory | None = None):
        """Fetch the nutation models of `conventions`.

        Args:
            conventions (:class:`.ConventionSet`): conventions supplying the nutation models.
            eop_history (:class:`.EOPHistory`, optional): source of the nutation corrections.

        Raises:
            :class:`.UnsupportedModelError`: `conventions` has no IAU 1980 style nutation model.
            :class:`.ResourceLoadError`: a nutation table is missing or malformed.
        """
        self.conventions = conventions
        self.eop_history = eop_history
        self._arguments = conventions.getNutationArguments()
        self._delta_psi = conventions.getNutationInLongitudeFunction()
        self._delta_eps = conventions.getNutationInObliquityFunction()
        self._mean_eps = conventions.getMeanObliquityOfEclipticFunction()
        self._eqe_correction = conventions.getEquationOfEquinoxesCorrectionFunction()

    def _getNutationCorrection(self, julian_date: JulianDate) -> NutationCorrection:
        if self.eop_history is None:
            return NULL_NUTATION_CORRECTION
        return self.eop_history.getNutationCorrection(julian_date)

    def getTransform(self, julian_date: JulianDate) -> ndarray:
        """Return the rotation from MOD into TOD coordinates at `julian_date`.

        .. math::

            [N]^T = R_1(-\\epsilon) R_3(-\\Delta\\Psi) R_1(\\bar{\\epsilon})

        Args:
            julian_date (:class:`.JulianDate`): epoch on the TT scale.

        Returns:
            ``ndarray``: 3x3 passive rotation matrix, ``r_tod = matrix @ r_mod``.
        """
        arguments = self._arguments.evaluateAll(julian_date)
        correction = self._getNutationCorrection(julian_date)

        mean_eps = self._mean_eps.value(arguments)
        delta_psi = self._delta_psi.value(arguments) + correction.dd_psi
        true_eps = mean_eps + self._delta_eps.value(arguments) + correction.dd_eps

        return rot1(-true_eps) @ rot3(-delta_psi) @ rot1(mean_eps)

    def getEquationOfEquinoxes(self, julian_date: JulianDate) -> float:
        """Return the equation of the equinoxes at `julian_date`, (radians).

        The corrected nutation in longitude is projected onto the equator, and the moon terms of
        the conventions are added.

        Args:
            julian_date (:class:`.JulianDate`): epoch on the TT scale.
        """
        arguments = self._arguments.evaluateAll(julian_date)
        correction = self._getNutationCorrection(julian_date)

        delta_psi = self._delta_psi.value(arguments) + correction.dd_psi
        mean_eps = self._mean_eps.value(arguments)

        return delta_psi * cos(mean_eps) + self._eqe_correction.value(arguments)

    def getLOD(self, julian_date: JulianDate) -> float:
        """Return the excess length of day at `julian_date`, zero without EOP history, (sec)."""
        if self.eop_history is None:
            return 0.0
        return self.eop_history.getLOD(julian_date)

    def getPoleCorrection(self, julian_date: JulianDate) -> PoleCorrection:
        """Return the polar motion at `julian_date`, null without EOP history."""
        if self.eop_history is None:
            return NULL_POLE_CORRECTION
        return self.eop_history.getPoleCorrection(julian_date)
