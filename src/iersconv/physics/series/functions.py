"""Defines the time functions evaluated against :class:`.FundamentalArguments`.

Every variant exposes the same ``value(arguments)`` capability, so nutation, precession, and tide
models can hold any of them without knowing how they were built.
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import array, asarray, cos, dot, sin, zeros
from numpy.polynomial.polynomial import polyval

# Local Imports
from .arguments import NUM_ARGUMENTS

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray

    # Local Imports
    from ..time.stardate import JulianDate
    from .arguments import FundamentalArguments, FundamentalArgumentsGenerator


class TimeFunction(ABC):
    """Abstract function of the fundamental arguments at one epoch."""

    @abstractmethod
    def value(self, arguments: FundamentalArguments):
        """Evaluate the function.

        Args:
            arguments (:class:`.FundamentalArguments`): arguments evaluated at the desired epoch.

        Returns:
            ``float`` | ``ndarray``: value of the function.
        """
        raise NotImplementedError

    def __call__(self, arguments: FundamentalArguments):
        """Alias of :meth:`.value`."""
        return self.value(arguments)


class ZeroFunction(TimeFunction):
    """Function that is identically zero."""

    def value(self, arguments: FundamentalArguments) -> float:
        """Always return ``0.0``."""
        return 0.0


class PolynomialNutation(TimeFunction):
    """Polynomial in Julian centuries of TT since J2000.0."""

    def __init__(self, *coefficients: float):
        """Store the polynomial coefficients, lowest degree first.

        Args:
            coefficients (``float``): polynomial coefficients, (radians per century^k).
        """
        self._coefficients = array(coefficients, dtype=float)

    @property
    def coefficients(self) -> ndarray:
        """``ndarray``: polynomial coefficients, lowest degree first."""
        return self._coefficients.copy()

    def value(self, arguments: FundamentalArguments) -> float:
        """Evaluate the polynomial at ``arguments.tc``."""
        return polyval(arguments.tc, self._coefficients)


class PoissonSeries(TimeFunction):
    r"""Polynomial plus polynomial-weighted sinusoids of the fundamental arguments.

    .. math::

        f(t) = \sum_k p_k t^k + \sum_i t^{j_i} \left(s_i \sin\phi_i + c_i \cos\phi_i\right),
        \quad \phi_i = \sum_a m_{i,a} F_a

    References:
        :cite:t:`iers_2010_conventions`, Section 5.5.4
    """

    def __init__(
        self,
        polynomial: ndarray,
        powers: ndarray,
        sin_coefficients: ndarray,
        cos_coefficients: ndarray,
        multipliers: ndarray,
        name: str = "<memory>",
    ):
        """Store the already scaled series terms.

        Args:
            polynomial (``ndarray``): polynomial part coefficients, lowest degree first, (radians).
            powers (``ndarray``): (K, ) power of time multiplying each periodic term.
            sin_coefficients (``ndarray``): (K, ) sine amplitudes, (radians).
            cos_coefficients (``ndarray``): (K, ) cosine amplitudes, (radians).
            multipliers (``ndarray``): (K, 15) integer multipliers of the fundamental arguments.
            name (``str``, optional): name of the table the series was read from.
        """
        self.name = name
        self._polynomial = asarray(polynomial, dtype=float)
        self._powers = asarray(powers, dtype=float)
        self._sin = asarray(sin_coefficients, dtype=float)
        self._cos = asarray(cos_coefficients, dtype=float)
        self._multipliers = asarray(multipliers, dtype=float).reshape(-1, NUM_ARGUMENTS)
        if not len(self._powers) == len(self._sin) == len(self._cos) == len(self._multipliers):
            err = f"{name}: inconsistent number of periodic terms"
            raise ValueError(err)

    @property
    def num_terms(self) -> int:
        """``int``: number of periodic terms in the series."""
        return len(self._powers)

    def value(self, arguments: FundamentalArguments) -> float:
        """Evaluate the series at the epoch of `arguments`."""
        tc = arguments.tc
        phases = self._multipliers @ arguments.angles
        weights = tc**self._powers
        periodic = dot(weights, self._sin * sin(phases) + self._cos * cos(phases))
        return polyval(tc, self._polynomial) + periodic


class EquationOfEquinoxesCorrection(TimeFunction):
    """Moon correction terms added to the equation of the equinoxes from a start date onwards.

    IAU 1994 resolution C7 added two terms to the equation of the equinoxes, taking effect on
    1997-02-27 for continuity.
    """

    def __init__(self, eqe1: float, eqe2: float, start_date: JulianDate):
        """Store the correction constants.

        Args:
            eqe1 (``float``): coefficient of :math:`\\sin\\Omega`, (radians).
            eqe2 (``float``): coefficient of :math:`\\sin 2\\Omega`, (radians).
            start_date (:class:`.JulianDate`): first epoch (TT) the terms apply to.
        """
        self.eqe1 = eqe1
        self.eqe2 = eqe2
        self.start_date = start_date

    def value(self, arguments: FundamentalArguments) -> float:
        """Return the correction, zero before :attr:`.start_date`."""
        if arguments.julian_date < self.start_date:
            return 0.0

        omega = arguments.omega
        return self.eqe1 * sin(omega) + self.eqe2 * sin(omega + omega)


class CompositeFunction(TimeFunction):
    """Vector of scalar functions evaluated against the same arguments."""

    def __init__(self, *components: TimeFunction):
        """Store the component functions, in output order."""
        self.components = tuple(components)

    def value(self, arguments: FundamentalArguments) -> ndarray:
        """Evaluate every component and return them as an array."""
        values = zeros(len(self.components))
        for index, component in enumerate(self.components):
            values[index] = component.value(arguments)
        return values


class DatedFunction:
    """Binds a :class:`.TimeFunction` to the generator of its arguments.

    This lets callers that only know about epochs (e.g. force models) evaluate the function
    directly at a :class:`.JulianDate`.
    """

    def __init__(self, generator: FundamentalArgumentsGenerator, function: TimeFunction):
        """Store the arguments generator and the function."""
        self.generator = generator
        self.function = function

    def value(self, julian_date: JulianDate):
        """Evaluate the function at `julian_date`."""
        return self.function.value(self.generator.evaluateAll(julian_date))
