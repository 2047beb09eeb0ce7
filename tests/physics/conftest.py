from __future__ import annotations

# Standard Library Imports
from collections import Counter

# Third Party Imports
import pytest
from numpy import array, zeros

# IERSCONV Imports
from iersconv.physics.series.loaders import ModuleDotDatSeriesLoader, SeriesLoader

NUTATION_1996_TABLES: dict[str, list[list[float]]] = {
    "1996/tab5.1-psi.dat": [
        [0.0],
        [0, -171996.0, 0.0, 0, 0, 0, 0, 1],
        [1, -174.2, 0.0, 0, 0, 0, 0, 1],
        [0, -13187.0, 0.0, 0, 0, 2, -2, 2],
    ],
    "1996/tab5.1-epsilon.dat": [
        [0.0],
        [0, 0.0, 92025.0, 0, 0, 0, 0, 1],
        [1, 0.0, 8.9, 0, 0, 0, 0, 1],
        [0, 0.0, 5736.0, 0, 0, 2, -2, 2],
    ],
}
"""``dict``: truncated IAU 1980 nutation series, enough to exercise the nutation models."""


class InMemorySeriesLoader(SeriesLoader):
    """Series loader serving tables from memory, counting every read."""

    def __init__(self, tables: dict[str, list[list[float]]], fallback: SeriesLoader | None = None):
        """Serve `tables`, deferring any other table to `fallback`."""
        super().__init__("<memory>")
        self.tables = tables
        self.fallback = fallback
        self.read_count = Counter()

    def _readTable(self, name: str) -> list[list[float]]:
        self.read_count[name] += 1
        if name in self.tables:
            return self.tables[name]
        if self.fallback is not None:
            return self.fallback._readTable(name)
        raise FileNotFoundError(f"No table named {name!r}")


class CountingBody:
    """Tide generating body at a fixed position, counting position requests."""

    def __init__(self, mu: float, position):
        self.mu = mu
        self.position = array(position, dtype=float)
        self.calls = 0

    def getPosition(self, julian_date, frame):
        self.calls += 1
        return frame(julian_date) @ self.position


class ConstantFrequencyDependence:
    """Frequency dependence returning the same five corrections at every epoch."""

    def __init__(self, values=None):
        self.values = zeros(5) if values is None else array(values, dtype=float)
        self.calls = 0

    def value(self, julian_date):
        self.calls += 1
        return self.values


@pytest.fixture(name="bundled_loader")
def getBundledLoader() -> ModuleDotDatSeriesLoader:
    """Return a loader reading the tables bundled with the package."""
    return ModuleDotDatSeriesLoader("iers")


@pytest.fixture(name="memory_loader")
def getMemoryLoader(bundled_loader: ModuleDotDatSeriesLoader) -> InMemorySeriesLoader:
    """Return a counting loader serving the truncated nutation tables and the bundled ones."""
    return InMemorySeriesLoader(dict(NUTATION_1996_TABLES), fallback=bundled_loader)
