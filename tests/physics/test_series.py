from __future__ import annotations

# Third Party Imports
import pytest
from numpy import allclose, array, cos, isclose, sin, zeros

# IERSCONV Imports
from iersconv.physics import constants as const
from iersconv.physics.series.arguments import (
    ARGUMENT_NAMES,
    NUM_ARGUMENTS,
    NUM_TABULATED_ARGUMENTS,
    FundamentalArguments,
    FundamentalArgumentsGenerator,
)
from iersconv.physics.series.functions import (
    CompositeFunction,
    DatedFunction,
    EquationOfEquinoxesCorrection,
    PoissonSeries,
    PolynomialNutation,
    ZeroFunction,
)
from iersconv.physics.time.stardate import JulianDate

ONE_CENTURY_JD = JulianDate(const.J2000_JULIAN_DATE + const.DAYS_PER_JULIAN_CENTURY)


def _makeArguments(tc: float, julian_date: float = const.J2000_JULIAN_DATE, **angles):
    values = zeros(NUM_ARGUMENTS)
    for name, value in angles.items():
        values[ARGUMENT_NAMES.index(name)] = value
    return FundamentalArguments(julian_date=JulianDate(julian_date), tc=tc, angles=values)


def testArgumentsGenerator():
    """Test evaluating the tabulated polynomial arguments."""
    generator = FundamentalArgumentsGenerator([1.0, 2.0], [[1.0, 1.0], [0.0, 0.0, 1.0]])
    arguments = generator.evaluateAll(ONE_CENTURY_JD)

    assert arguments.tc == 1.0
    assert arguments.l == 2.0
    assert arguments.l_prime == 2.0
    assert arguments.getArgument("f") == 0.0
    assert 0.0 <= arguments.gamma < const.TWOPI
    assert arguments.julian_date == ONE_CENTURY_JD

    with pytest.raises(ValueError, match="read-only"):
        arguments.angles[0] = 1.0


def testArgumentsGeneratorValidation():
    """Test malformed argument tables are rejected."""
    with pytest.raises(ValueError, match="at most"):
        FundamentalArgumentsGenerator(
            [1.0] * (NUM_TABULATED_ARGUMENTS + 1),
            [[0.0]] * (NUM_TABULATED_ARGUMENTS + 1),
        )
    with pytest.raises(ValueError, match="scales"):
        FundamentalArgumentsGenerator([1.0], [[0.0], [1.0]])


def testPolynomialNutation():
    """Test polynomials are evaluated lowest degree first."""
    polynomial = PolynomialNutation(1.0, 2.0, 3.0)
    assert polynomial.value(_makeArguments(2.0)) == 17.0
    assert polynomial(_makeArguments(0.0)) == 1.0
    assert allclose(polynomial.coefficients, [1.0, 2.0, 3.0])


def testPoissonSeries():
    """Test polynomial and periodic parts of a Poisson series."""
    multipliers = zeros((2, NUM_ARGUMENTS))
    multipliers[0, ARGUMENT_NAMES.index("l")] = 1
    multipliers[1, ARGUMENT_NAMES.index("omega")] = 2
    series = PoissonSeries([0.5, 0.1], [0, 1], [1.0, 0.0], [0.0, 2.0], multipliers)

    arguments = _makeArguments(0.5, l=0.3, omega=1.2)
    expected = 0.5 + 0.1 * 0.5 + sin(0.3) + 0.5 * 2.0 * cos(2.4)
    assert series.num_terms == 2
    assert isclose(series.value(arguments), expected)


def testPoissonSeriesInconsistentTerms():
    """Test periodic terms must all have the same length."""
    with pytest.raises(ValueError, match="inconsistent"):
        PoissonSeries([0.0], [0, 1], [1.0], [0.0, 2.0], zeros((2, NUM_ARGUMENTS)))


def testZeroFunction():
    """Test the zero function."""
    assert ZeroFunction().value(_makeArguments(0.3, omega=1.0)) == 0.0


def testEquationOfEquinoxesCorrection():
    """Test the correction only applies from its start date onwards."""
    start = JulianDate(2450506.5)
    correction = EquationOfEquinoxesCorrection(1.0e-8, 2.0e-9, start)

    before = _makeArguments(-0.03, julian_date=start - 1.0, omega=0.7)
    after = _makeArguments(-0.03, julian_date=start + 1.0, omega=0.7)

    assert correction.value(before) == 0.0
    assert isclose(correction.value(after), 1.0e-8 * sin(0.7) + 2.0e-9 * sin(1.4))


def testCompositeFunction():
    """Test vector functions evaluate each component against the same arguments."""
    composite = CompositeFunction(PolynomialNutation(1.0, 1.0), ZeroFunction(), PolynomialNutation(3.0))
    values = composite.value(_makeArguments(2.0))
    assert allclose(values, array([3.0, 0.0, 3.0]))


def testDatedFunction():
    """Test dated functions evaluate their arguments from a date."""
    generator = FundamentalArgumentsGenerator([1.0], [[0.0, 1.0]])
    dated = DatedFunction(generator, PolynomialNutation(0.0, 2.0))
    assert dated.value(ONE_CENTURY_JD) == 2.0
