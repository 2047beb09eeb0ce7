from __future__ import annotations

# Standard Library Imports
import os

# Third Party Imports
import numpy as np
import pytest
from numpy import allclose, eye, hypot, inf, isclose, nextafter, sqrt

# IERSCONV Imports
from iersconv.common.behavioral_config import BehavioralConfig
from iersconv.common.exceptions import ResourceLoadError
from iersconv.common.labels import IERSConventions, TideSystem
from iersconv.physics import constants as const
from iersconv.physics.bodies import Earth, Moon, Sun
from iersconv.physics.bodies.earth import pseudoEarthFixedRotation
from iersconv.physics.bodies.love_numbers import LoveNumbers
from iersconv.physics.bodies.tides_field import TidalCoefficientCache
from iersconv.physics.conventions import ConventionSet
from iersconv.physics.series.loaders import LocalDotDatSeriesLoader, ModuleDotDatSeriesLoader
from iersconv.physics.time.stardate import JulianDate

# Local Imports
from .. import FIXTURE_DATA_DIR, IERS_TABLES_PATH, TEST_START_JD
from .conftest import ConstantFrequencyDependence, CountingBody

LOVE_ROWS = [
    [2, 0, 0.30190, 0.0, -0.00089],
    [2, 1, 0.29830, -0.00144, -0.00080],
    [2, 2, 0.30102, -0.00130, -0.00057],
    [3, 0, 0.093, 0.0, 0.0],
    [3, 1, 0.093, 0.0, 0.0],
    [3, 2, 0.093, 0.0, 0.0],
    [3, 3, 0.094, 0.0, 0.0],
]

AE = 6378.1363
MU = 398600.4415
BODY_MU = 4902.800066
DISTANCE = 2.0 * AE
OFFSET = 6.0e8

EXACT = {"rtol": 1.0e-12, "atol": 0.0}

LOWER_TRIANGLE = [(n, m) for n in range(5) for m in range(n + 1)]


def identityFrame(julian_date: JulianDate):
    """Central body frame aligned with the inertial frame."""
    return eye(3)


def buildCache(
    bodies,
    frequency_dependence=None,
    central_tide_system=TideSystem.TIDE_FREE,
    permanent_tide=0.0,
    tolerance_ulps=None,
    frame=identityFrame,
) -> TidalCoefficientCache:
    """Build a cache around a central body, inertially fixed unless `frame` is given."""
    if frequency_dependence is None:
        frequency_dependence = ConstantFrequencyDependence()
    return TidalCoefficientCache(
        frame,
        AE,
        MU,
        central_tide_system,
        LoveNumbers.fromRows(LOVE_ROWS),
        frequency_dependence,
        permanent_tide,
        bodies,
        tolerance_ulps=tolerance_ulps,
    )


def degreeFactor(n: int) -> float:
    """Return the Legendre-free part of the coefficient of degree `n` for the test body."""
    return BODY_MU / MU * (AE / DISTANCE) ** (n + 1) / (2 * n + 1)


def testCacheHit():
    """Test every coefficient at one offset comes from a single computation."""
    body = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    frequency_dependence = ConstantFrequencyDependence()
    tides = buildCache([body], frequency_dependence=frequency_dependence)

    for n, m in LOWER_TRIANGLE:
        tides.getNormalizedCnm(OFFSET, n, m)
        tides.getNormalizedSnm(OFFSET, n, m)

    assert body.calls == 1
    assert frequency_dependence.calls == 1


def testCacheTolerance():
    """Test offsets one unit in the last place apart share the cache, farther ones refill it."""
    body = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    tides = buildCache([body])

    tides.getNormalizedCnm(OFFSET, 2, 0)
    tides.getNormalizedCnm(nextafter(OFFSET, inf), 2, 0)
    assert body.calls == 1

    tides.getNormalizedCnm(OFFSET + 1.0, 2, 0)
    assert body.calls == 2

    tides.getNormalizedSnm(OFFSET, 2, 2)
    assert body.calls == 3


def testCacheRefillValues():
    """Test a refill beyond the tolerance recomputes the corrections for the new offset."""
    body = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    tides = buildCache([body], frame=pseudoEarthFixedRotation)

    c20, c22, s22 = (
        tides.getNormalizedCnm(OFFSET, 2, 0),
        tides.getNormalizedCnm(OFFSET, 2, 2),
        tides.getNormalizedSnm(OFFSET, 2, 2),
    )
    assert tides.getNormalizedCnm(nextafter(OFFSET, inf), 2, 2) == c22

    # About a quarter of a sidereal day later the body has moved in Earth-fixed longitude
    later = OFFSET + 6.0 * 3600.0
    later_c22, later_s22 = tides.getNormalizedCnm(later, 2, 2), tides.getNormalizedSnm(later, 2, 2)
    assert body.calls == 2
    assert not allclose([later_c22, later_s22], [c22, s22], rtol=1.0e-3, atol=0.0)
    assert isclose(hypot(later_c22, later_s22), hypot(c22, s22), rtol=1.0e-9, atol=0.0)
    assert isclose(tides.getNormalizedCnm(later, 2, 0), c20, rtol=1.0e-12, atol=0.0)

    assert tides.getNormalizedCnm(OFFSET, 2, 2) == c22
    assert tides.getNormalizedSnm(OFFSET, 2, 2) == s22
    assert body.calls == 3


def testZeroTolerance():
    """Test a zero tolerance only reuses the cache for the exact same offset."""
    body = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    tides = buildCache([body], tolerance_ulps=0)

    tides.getNormalizedCnm(OFFSET, 2, 0)
    tides.getNormalizedCnm(OFFSET, 3, 0)
    assert body.calls == 1

    tides.getNormalizedCnm(nextafter(OFFSET, inf), 2, 0)
    assert body.calls == 2


def testInvalidIndices():
    """Test indices outside the lower triangle up to degree 4 are rejected."""
    tides = buildCache([CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])])
    for n, m in [(2, 3), (5, 0), (-1, 0), (2, -1), (5, 5)]:
        with pytest.raises(ValueError, match="Invalid tidal coefficient indices"):
            tides.getNormalizedCnm(OFFSET, n, m)
        with pytest.raises(ValueError, match="Invalid tidal coefficient indices"):
            tides.getNormalizedSnm(OFFSET, n, m)


def testFrequencyDependenceOnly():
    """Test a massless body leaves exactly the frequency dependent corrections."""
    values = [1.0e-12, 2.0e-12, 3.0e-12, 4.0e-12, 5.0e-12]
    tides = buildCache(
        [CountingBody(0.0, [DISTANCE, 0.0, 0.0])],
        frequency_dependence=ConstantFrequencyDependence(values),
    )

    assert tides.getNormalizedCnm(OFFSET, 2, 0) == values[0]
    assert tides.getNormalizedCnm(OFFSET, 2, 1) == values[1]
    assert tides.getNormalizedSnm(OFFSET, 2, 1) == values[2]
    assert tides.getNormalizedCnm(OFFSET, 2, 2) == values[3]
    assert tides.getNormalizedSnm(OFFSET, 2, 2) == values[4]
    for n, m in LOWER_TRIANGLE:
        if n != 2:
            assert tides.getNormalizedCnm(OFFSET, n, m) == 0.0
            assert tides.getNormalizedSnm(OFFSET, n, m) == 0.0
    assert tides.getNormalizedSnm(OFFSET, 2, 0) == 0.0


def testPermanentTide():
    """Test the permanent tide is only removed when the static field is zero tide."""
    permanent_tide = 4.4228e-8 * -0.31460 * 0.30190
    body = [CountingBody(BODY_MU, [DISTANCE, 1000.0, 3000.0])]
    tide_free = buildCache(body, permanent_tide=permanent_tide)
    zero_tide = buildCache(body, central_tide_system=TideSystem.ZERO_TIDE, permanent_tide=permanent_tide)

    c20_tide_free = tide_free.getNormalizedCnm(OFFSET, 2, 0)
    assert zero_tide.getNormalizedCnm(OFFSET, 2, 0) == c20_tide_free - permanent_tide
    for n, m in LOWER_TRIANGLE:
        if (n, m) != (2, 0):
            assert zero_tide.getNormalizedCnm(OFFSET, n, m) == tide_free.getNormalizedCnm(OFFSET, n, m)
            assert zero_tide.getNormalizedSnm(OFFSET, n, m) == tide_free.getNormalizedSnm(OFFSET, n, m)


def testBodyOnEquatorXAxis():
    """Test the corrections raised by a body over the equator at zero longitude."""
    tides = buildCache([CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])])
    p20, p22 = -sqrt(5.0) / 2.0, sqrt(15.0) / 2.0
    coeff20, coeff22 = degreeFactor(2) * p20, degreeFactor(2) * p22

    assert isclose(tides.getNormalizedCnm(OFFSET, 2, 0), coeff20 * 0.30190, **EXACT)
    assert isclose(tides.getNormalizedCnm(OFFSET, 2, 2), coeff22 * 0.30102, **EXACT)
    assert isclose(tides.getNormalizedSnm(OFFSET, 2, 2), coeff22 * 0.00130, **EXACT)
    assert tides.getNormalizedCnm(OFFSET, 2, 1) == 0.0

    # Degree 2 tides reach degree 4 through k+
    assert isclose(tides.getNormalizedCnm(OFFSET, 4, 0), coeff20 * -0.00089, **EXACT)
    assert isclose(tides.getNormalizedCnm(OFFSET, 4, 2), coeff22 * -0.00057, **EXACT)
    assert tides.getNormalizedCnm(OFFSET, 4, 3) == 0.0
    assert tides.getNormalizedCnm(OFFSET, 4, 4) == 0.0

    # Odd degrees only see the direct response
    p31, p33 = -sqrt(42.0) / 4.0, sqrt(35.0 / 8.0)
    assert isclose(tides.getNormalizedCnm(OFFSET, 3, 1), degreeFactor(3) * p31 * 0.093, **EXACT)
    assert isclose(tides.getNormalizedCnm(OFFSET, 3, 3), degreeFactor(3) * p33 * 0.094, **EXACT)


def testBodyOnEquatorYAxis():
    """Test the longitude of the body rotates the sectorial corrections."""
    tides = buildCache([CountingBody(BODY_MU, [0.0, DISTANCE, 0.0])])
    coeff20, coeff22 = degreeFactor(2) * -sqrt(5.0) / 2.0, degreeFactor(2) * sqrt(15.0) / 2.0

    assert isclose(tides.getNormalizedCnm(OFFSET, 2, 2), -coeff22 * 0.30102, **EXACT)
    assert isclose(tides.getNormalizedSnm(OFFSET, 2, 2), -coeff22 * 0.00130, **EXACT)
    assert tides.getNormalizedSnm(OFFSET, 2, 1) == 0.0
    assert isclose(tides.getNormalizedCnm(OFFSET, 2, 0), coeff20 * 0.30190, **EXACT)


def testBodiesAreSummed():
    """Test the corrections of several bodies add up."""
    first = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    second = CountingBody(2.0 * BODY_MU, [0.0, 2.0 * DISTANCE, 1000.0])
    both = buildCache([first, second])
    for n, m in LOWER_TRIANGLE:
        expected = buildCache([first]).getNormalizedCnm(OFFSET, n, m)
        expected += buildCache([second]).getNormalizedCnm(OFFSET, n, m)
        assert isclose(both.getNormalizedCnm(OFFSET, n, m), expected, rtol=1e-12, atol=1e-25)


def testPolarBody():
    """Test a body on the polar axis follows IEEE semantics instead of raising."""
    tides = buildCache([CountingBody(BODY_MU, [0.0, 0.0, DISTANCE])])
    with np.errstate(invalid="ignore", divide="ignore"):
        assert np.isnan(tides.getNormalizedCnm(OFFSET, 2, 1))
        assert np.isnan(tides.getNormalizedSnm(OFFSET, 2, 2))
        assert np.isfinite(tides.getNormalizedCnm(OFFSET, 2, 0))


def testProviderAccessors():
    """Test the values exposed to gravity field consumers."""
    tides = buildCache([])
    julian_date = JulianDate(const.J2000_JULIAN_DATE + 1.0)

    assert tides.getMaxDegree() == 4
    assert tides.getMaxOrder() == 4
    assert tides.getMu() == MU
    assert tides.getAe() == AE
    assert tides.getReferenceDate() == const.J2000_JULIAN_DATE
    assert isclose(tides.getOffset(julian_date), const.DAYS2SEC)
    assert tides.getTideSystem() is TideSystem.ZERO_TIDE
    assert tides.getNormalizedCnm(OFFSET, 2, 0) == 0.0


def testConfiguredTolerance():
    """Test the cache tolerance defaults to the configured one."""
    BehavioralConfig.getConfig().tides.CacheToleranceULPs = 8
    body = CountingBody(BODY_MU, [DISTANCE, 0.0, 0.0])
    tides = buildCache([body])

    tides.getNormalizedCnm(OFFSET, 2, 0)
    tides.getNormalizedCnm(OFFSET + 8 * (nextafter(OFFSET, inf) - OFFSET), 2, 0)
    assert body.calls == 1


@pytest.mark.datafiles(FIXTURE_DATA_DIR)
def testFromConventions(datafiles: str):
    """Test the cache built from the tables of a conventions version."""
    loader = LocalDotDatSeriesLoader(os.path.join(datafiles, IERS_TABLES_PATH))
    conventions = ConventionSet(IERSConventions.IERS_2010, loader=loader)
    tides = TidalCoefficientCache.fromConventions(
        conventions,
        pseudoEarthFixedRotation,
        [Sun(), Moon()],
    )
    offset = tides.getOffset(TEST_START_JD)

    assert tides.getAe() == Earth.radius
    assert tides.getMu() == Earth.mu
    for n, m in LOWER_TRIANGLE:
        assert abs(tides.getNormalizedCnm(offset, n, m)) < 1.0e-7
        assert abs(tides.getNormalizedSnm(offset, n, m)) < 1.0e-7

    # Degree 4 only receives the k+ contribution of degree 2
    assert tides.getNormalizedCnm(offset, 2, 0) != 0.0
    assert 0.0 < abs(tides.getNormalizedCnm(offset, 4, 0)) < 1.0e-10


def testFromBundledConventions():
    """Test the cache built from the bundled tables adds the frequency dependence to degree 2."""
    conventions = ConventionSet(IERSConventions.IERS_2010, loader=ModuleDotDatSeriesLoader("iers"))
    bodies = [Sun(), Moon()]
    tides = TidalCoefficientCache.fromConventions(conventions, pseudoEarthFixedRotation, bodies)
    frequency_independent = TidalCoefficientCache(
        pseudoEarthFixedRotation,
        Earth.radius,
        Earth.mu,
        TideSystem.ZERO_TIDE,
        conventions.getLoveNumbers(),
        ConstantFrequencyDependence(),
        conventions.getPermanentTide(),
        bodies,
    )
    offset = tides.getOffset(TEST_START_JD)
    delta_c20, delta_c21, delta_s21, delta_c22, delta_s22 = conventions.getTideFrequencyDependenceFunction().value(
        JulianDate.fromJ2000Offset(offset),
    )

    for n, m in LOWER_TRIANGLE:
        assert abs(tides.getNormalizedCnm(offset, n, m)) < 1.0e-7
        assert abs(tides.getNormalizedSnm(offset, n, m)) < 1.0e-7

    differences = [
        (tides.getNormalizedCnm(offset, 2, 0) - frequency_independent.getNormalizedCnm(offset, 2, 0), delta_c20),
        (tides.getNormalizedCnm(offset, 2, 1) - frequency_independent.getNormalizedCnm(offset, 2, 1), delta_c21),
        (tides.getNormalizedSnm(offset, 2, 1) - frequency_independent.getNormalizedSnm(offset, 2, 1), delta_s21),
        (tides.getNormalizedCnm(offset, 2, 2) - frequency_independent.getNormalizedCnm(offset, 2, 2), delta_c22),
        (tides.getNormalizedSnm(offset, 2, 2) - frequency_independent.getNormalizedSnm(offset, 2, 2), delta_s22),
    ]
    for difference, expected in differences:
        assert expected != 0.0
        assert isclose(difference, expected, rtol=1.0e-6, atol=1.0e-22)

    assert tides.getNormalizedCnm(offset, 3, 0) == frequency_independent.getNormalizedCnm(offset, 3, 0)


def testFromBundledConventions1996():
    """Test the 1996 frequency dependence is not bundled, failing the construction."""
    conventions = ConventionSet(IERSConventions.IERS_1996, loader=ModuleDotDatSeriesLoader("iers"))
    with pytest.raises(ResourceLoadError):
        TidalCoefficientCache.fromConventions(conventions, pseudoEarthFixedRotation, [Sun(), Moon()])

