"""Defines the :class:`.ConventionSet` giving access to the models of one IERS conventions version.

Each version binds every model accessor either to a table it knows how to load or to "no
model". Loaded models are memoized, so each table is read at most once per
:class:`.ConventionSet`. Failures are never memoized: a later call retries the load.

References:
    #. :cite:t:`iers_1996_conventions`
    #. :cite:t:`iers_2003_conventions`
    #. :cite:t:`iers_2010_conventions`
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Local Imports
from ..common.exceptions import UnsupportedModelError
from ..common.labels import IERSConventions
from . import constants as const
from .series.functions import (
    CompositeFunction,
    DatedFunction,
    EquationOfEquinoxesCorrection,
    PolynomialNutation,
    ZeroFunction,
)
from .series.loaders import getSeriesLoader
from .time.conversions import tai2TerrestrialTime

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    from collections.abc import Callable
    from typing import Any

    # Local Imports
    from .bodies.love_numbers import LoveNumbers
    from .series.arguments import FundamentalArgumentsGenerator
    from .series.functions import TimeFunction
    from .series.loaders import SeriesLoader


NUTATION_ARGUMENTS_TABLE: str = "nutation-arguments.dat"
"""``str``: fundamental arguments table, present for every version."""

LOVE_NUMBERS_TABLE: str = "love-numbers.dat"
"""``str``: nominal Love numbers table, present for every version."""

TIDE_FREQUENCY_DEPENDENCE_TABLES: tuple[str, ...] = (
    "tide-frequency-dependence-c20.dat",
    "tide-frequency-dependence-c21.dat",
    "tide-frequency-dependence-s21.dat",
    "tide-frequency-dependence-c22.dat",
    "tide-frequency-dependence-s22.dat",
)
"""``tuple``: frequency dependent corrections to C20, C21, S21, C22 and S22, in that order."""

TIDE_FREQUENCY_DEPENDENCE_FACTOR: float = 1.0e-12
"""``float``: unit of the frequency dependence tables."""

NUTATION_1996_FACTOR: float = 1.0e-4 * const.ARCSEC2RAD
"""``float``: unit of the IERS 1996 nutation tables, 0.1 milliarcseconds."""

PERMANENT_TIDE_AMPLITUDE: float = 4.4228e-8
"""``float``: amplitude :math:`A_0 H_0` of the permanent tide, (unit-less)."""

PERMANENT_TIDE_FACTOR: float = -0.31460
"""``float``: degree 2 zonal tide generating potential factor, (unit-less)."""

EQE_1: float = 0.00264 * const.ARCSEC2RAD
"""``float``: coefficient of :math:`\\sin\\Omega` in the equation of the equinoxes correction."""

EQE_2: float = 0.000063 * const.ARCSEC2RAD
"""``float``: coefficient of :math:`\\sin 2\\Omega` in the equation of the equinoxes correction."""

EQE_CORRECTION_START: tuple = (1997, 2, 27, 0, 0, 30.0)
"""``tuple``: TAI calendar date the equation of the equinoxes correction takes effect."""


def _precessionZeta1996(convention_set: ConventionSet) -> TimeFunction:
    return PolynomialNutation(
        0.0,
        2306.2181 * const.ARCSEC2RAD,
        0.30188 * const.ARCSEC2RAD,
        0.017998 * const.ARCSEC2RAD,
    )


def _precessionTheta1996(convention_set: ConventionSet) -> TimeFunction:
    return PolynomialNutation(
        0.0,
        2004.3109 * const.ARCSEC2RAD,
        -0.42665 * const.ARCSEC2RAD,
        -0.041833 * const.ARCSEC2RAD,
    )


def _precessionZ1996(convention_set: ConventionSet) -> TimeFunction:
    return PolynomialNutation(
        0.0,
        2306.2181 * const.ARCSEC2RAD,
        1.09468 * const.ARCSEC2RAD,
        0.018203 * const.ARCSEC2RAD,
    )


def _meanObliquity1996(convention_set: ConventionSet) -> TimeFunction:
    return PolynomialNutation(
        84381.448 * const.ARCSEC2RAD,
        -46.8150 * const.ARCSEC2RAD,
        -0.00059 * const.ARCSEC2RAD,
        0.001813 * const.ARCSEC2RAD,
    )


def _nutationInLongitude1996(convention_set: ConventionSet) -> TimeFunction:
    return convention_set.loadSeries("tab5.1-psi.dat", NUTATION_1996_FACTOR, NUTATION_1996_FACTOR)


def _nutationInObliquity1996(convention_set: ConventionSet) -> TimeFunction:
    return convention_set.loadSeries(
        "tab5.1-epsilon.dat",
        NUTATION_1996_FACTOR,
        NUTATION_1996_FACTOR,
    )


def _equinoxesCorrection1996(convention_set: ConventionSet) -> TimeFunction:
    return EquationOfEquinoxesCorrection(EQE_1, EQE_2, tai2TerrestrialTime(*EQE_CORRECTION_START))


def _zeroFunction(convention_set: ConventionSet) -> TimeFunction:
    return ZeroFunction()


def _nutationArguments(convention_set: ConventionSet) -> FundamentalArgumentsGenerator:
    return convention_set.loader.loadArguments(convention_set.tableName(NUTATION_ARGUMENTS_TABLE))


def _microArcsecondSeries(table: str) -> Callable[[ConventionSet], TimeFunction]:
    """Build a binding loading the Poisson series `table`, tabulated in microarcseconds."""

    def _load(convention_set: ConventionSet) -> TimeFunction:
        return convention_set.loadSeries(table, const.MICROARCSEC2RAD, const.MICROARCSEC2RAD)

    return _load


def _loveNumbers(convention_set: ConventionSet) -> LoveNumbers:
    return convention_set.loader.loadLoveNumbers(convention_set.tableName(LOVE_NUMBERS_TABLE))


def _tideFrequencyDependence(convention_set: ConventionSet) -> DatedFunction:
    components = [
        convention_set.loadSeries(
            table,
            TIDE_FREQUENCY_DEPENDENCE_FACTOR,
            TIDE_FREQUENCY_DEPENDENCE_FACTOR,
        )
        for table in TIDE_FREQUENCY_DEPENDENCE_TABLES
    ]
    return DatedFunction(convention_set.getNutationArguments(), CompositeFunction(*components))


def _permanentTide(convention_set: ConventionSet) -> float:
    k20 = convention_set.getLoveNumbers().getReal(2, 0)
    return PERMANENT_TIDE_AMPLITUDE * PERMANENT_TIDE_FACTOR * k20


_COMMON_BINDINGS: dict[str, Callable[[ConventionSet], Any] | None] = {
    "nutation_arguments": _nutationArguments,
    "love_numbers": _loveNumbers,
    "tide_frequency_dependence": _tideFrequencyDependence,
    "permanent_tide": _permanentTide,
}

_CIO_BINDINGS: dict[str, Callable[[ConventionSet], Any] | None] = {
    "x": _microArcsecondSeries("tab5.2a.dat"),
    "y": _microArcsecondSeries("tab5.2b.dat"),
    "precession_zeta": None,
    "precession_theta": None,
    "precession_z": None,
    "nutation_in_longitude": None,
    "nutation_in_obliquity": None,
    "mean_obliquity": None,
    "equinoxes_correction": _zeroFunction,
}

_BINDINGS: dict[IERSConventions, dict[str, Callable[[ConventionSet], Any] | None]] = {
    IERSConventions.IERS_1996: {
        **_COMMON_BINDINGS,
        "x": None,
        "y": None,
        "sxy2x": None,
        "precession_zeta": _precessionZeta1996,
        "precession_theta": _precessionTheta1996,
        "precession_z": _precessionZ1996,
        "nutation_in_longitude": _nutationInLongitude1996,
        "nutation_in_obliquity": _nutationInObliquity1996,
        "mean_obliquity": _meanObliquity1996,
        "equinoxes_correction": _equinoxesCorrection1996,
    },
    IERSConventions.IERS_2003: {
        **_COMMON_BINDINGS,
        **_CIO_BINDINGS,
        "sxy2x": _microArcsecondSeries("tab5.2c.dat"),
    },
    IERSConventions.IERS_2010: {
        **_COMMON_BINDINGS,
        **_CIO_BINDINGS,
        "sxy2x": _microArcsecondSeries("tab5.2d.dat"),
    },
}
"""``dict``: model bindings of each version, ``None`` marking a model the version does not define."""


class ConventionSet:
    """Memoized access to the models defined by one IERS conventions version.

    .. code-block:: python

        conventions = ConventionSet(IERSConventions.IERS_1996)
        arguments = conventions.getNutationArguments().evaluateAll(julian_date)
        delta_psi = conventions.getNutationInLongitudeFunction().value(arguments)

    """

    def __init__(self, conventions: IERSConventions | str, loader: SeriesLoader | None = None):
        """Bind the models of `conventions`.

        Args:
            conventions (:class:`.IERSConventions` | ``str``): conventions version.
            loader (:class:`.SeriesLoader`, optional): loader reading the tables. Defaults to the
                loader named by the behavioral config.
        """
        self.conventions = IERSConventions(conventions)
        self.loader = loader if loader is not None else getSeriesLoader()
        self._bindings = _BINDINGS[self.conventions]
        self._models: dict[str, Any] = {}

    def tableName(self, table: str) -> str:
        """Return the loader name of `table` for this version."""
        return f"{self.conventions.value}/{table}"

    def loadSeries(self, table: str, poly_factor: float, non_poly_factor: float) -> TimeFunction:
        """Load the Poisson series `table` of this version."""
        return self.loader.loadPoissonSeries(self.tableName(table), poly_factor, non_poly_factor)

    def _getModel(self, key: str) -> Any:
        """Return the memoized model `key`, building it on first access.

        Raises:
            :class:`.UnsupportedModelError`: this version has no such model.
            :class:`.ResourceLoadError`: the model's table is missing or malformed.
        """
        if key in self._models:
            return self._models[key]

        builder = self._bindings[key]
        if builder is None:
            raise UnsupportedModelError(
                f"IERS {self.conventions.value} conventions do not define a {key!r} model",
            )

        model = builder(self)
        self._models[key] = model
        return model

    def getNutationArguments(self) -> FundamentalArgumentsGenerator:
        """Return the generator of the fundamental nutation arguments."""
        return self._getModel("nutation_arguments")

    def getXFunction(self) -> TimeFunction:
        """Return the X coordinate of the CIP in the GCRS, (radians)."""
        return self._getModel("x")

    def getYFunction(self) -> TimeFunction:
        """Return the Y coordinate of the CIP in the GCRS, (radians)."""
        return self._getModel("y")

    def getSXY2XFunction(self) -> TimeFunction:
        """Return the CIO locator :math:`s + XY/2`, (radians)."""
        return self._getModel("sxy2x")

    def getPrecessionZetaFunction(self) -> TimeFunction:
        """Return the :math:`\\zeta_A` precession angle, (radians)."""
        return self._getModel("precession_zeta")

    def getPrecessionThetaFunction(self) -> TimeFunction:
        """Return the :math:`\\theta_A` precession angle, (radians)."""
        return self._getModel("precession_theta")

    def getPrecessionZFunction(self) -> TimeFunction:
        """Return the :math:`z_A` precession angle, (radians)."""
        return self._getModel("precession_z")

    def getNutationInLongitudeFunction(self) -> TimeFunction:
        """Return the nutation in longitude :math:`\\Delta\\Psi`, (radians)."""
        return self._getModel("nutation_in_longitude")

    def getNutationInObliquityFunction(self) -> TimeFunction:
        """Return the nutation in obliquity :math:`\\Delta\\epsilon`, (radians)."""
        return self._getModel("nutation_in_obliquity")

    def getMeanObliquityOfEclipticFunction(self) -> TimeFunction:
        """Return the mean obliquity of the ecliptic :math:`\\epsilon_A`, (radians)."""
        return self._getModel("mean_obliquity")

    def getEquationOfEquinoxesCorrectionFunction(self) -> TimeFunction:
        """Return the correction terms added to the equation of the equinoxes, (radians)."""
        return self._getModel("equinoxes_correction")

    def getLoveNumbers(self) -> LoveNumbers:
        """Return the nominal Love numbers of the solid Earth tides."""
        return self._getModel("love_numbers")

    def getTideFrequencyDependenceFunction(self) -> DatedFunction:
        """Return the frequency dependent corrections to C20, C21, S21, C22 and S22.

        The function is bound to the nutation arguments, so it is evaluated directly at a
        :class:`.JulianDate` and returns the five corrections as an array.
        """
        return self._getModel("tide_frequency_dependence")

    def getPermanentTide(self) -> float:
        """Return the permanent tide contribution to the normalized C20 coefficient."""
        return self._getModel("permanent_tide")
