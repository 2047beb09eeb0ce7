"""Module defining the infrastructure used to read IERS tables from various sources.

Every table is a '.dat' file of whitespace-delimited float rows, read with
:func:`.loadDatFile`. Three table layouts are understood:

* Poisson series: the first row holds the polynomial coefficients, lowest degree first. Every
  following row is ``j a_sin a_cos m_1 ... m_k`` with at most 15 multipliers, missing trailing
  multipliers being zero.
* Fundamental arguments: up to 14 rows ``scale c_0 c_1 ...``.
* Love numbers: rows ``n m k_real k_imaginary k_plus``.
"""

from __future__ import annotations

# Standard Library Imports
from abc import ABC, abstractmethod
from importlib import resources
from pathlib import Path, PurePosixPath

# Third Party Imports
from numpy import array, zeros

# Local Imports
from ...common.behavioral_config import BehavioralConfig
from ...common.exceptions import ResourceLoadError
from ...common.labels import SeriesLoaderLabel
from ...common.logger import iersconvLogDebug, iersconvLogError
from ...common.utilities import loadDatFile
from ..bodies.love_numbers import LoveNumbers
from .arguments import NUM_ARGUMENTS, FundamentalArgumentsGenerator
from .functions import PoissonSeries

PERIODIC_TERM_PREFIX: int = 3
"""``int``: number of columns preceding the multipliers in a Poisson series term row."""


class SeriesLoader(ABC):
    """Abstract class defining how IERS tables should be loaded and parsed."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (``str``): Specifies where the tables to load are located.
        """
        self._location: str = location

    @property
    def location(self) -> str:
        """``str``: where the tables are loaded from."""
        return self._location

    @abstractmethod
    def _readTable(self, name: str) -> list[list[float]]:
        """Read the raw rows of the table called `name`.

        Raises:
            ``FileNotFoundError``: table does not exist
            ``ValueError``: table contains a non-numeric value
            ``OSError``: table is empty
        """
        raise NotImplementedError

    def _loadRows(self, name: str) -> list[list[float]]:
        """Read the table called `name`, converting every read failure into a load error."""
        iersconvLogDebug(f"Loading IERS table {name!r} from {self._location!r}")
        try:
            return self._readTable(name)
        except (FileNotFoundError, ValueError, OSError) as err:
            msg = f"Unable to load IERS table {name!r} from {self._location!r}"
            iersconvLogError(msg)
            raise ResourceLoadError(msg) from err

    def loadPoissonSeries(
        self,
        name: str,
        poly_factor: float,
        non_poly_factor: float,
    ) -> PoissonSeries:
        """Load a Poisson series table.

        Args:
            name (``str``): name of the table.
            poly_factor (``float``): factor converting the polynomial coefficients to radians.
            non_poly_factor (``float``): factor converting the periodic amplitudes to radians.

        Raises:
            :class:`.ResourceLoadError`: table is missing or malformed.

        Returns:
            :class:`.PoissonSeries`: the scaled series.
        """
        rows = self._loadRows(name)
        polynomial = array(rows[0]) * poly_factor

        num_terms = len(rows) - 1
        multipliers = zeros((num_terms, NUM_ARGUMENTS))
        powers, sin_coefficients, cos_coefficients = zeros(num_terms), zeros(num_terms), zeros(num_terms)
        for index, row in enumerate(rows[1:]):
            num_multipliers = len(row) - PERIODIC_TERM_PREFIX
            if num_multipliers < 0 or num_multipliers > NUM_ARGUMENTS:
                msg = f"IERS table {name!r}: malformed periodic term on row {index + 2}"
                iersconvLogError(msg)
                raise ResourceLoadError(msg)
            powers[index], sin_coefficients[index], cos_coefficients[index] = row[:PERIODIC_TERM_PREFIX]
            multipliers[index, :num_multipliers] = row[PERIODIC_TERM_PREFIX:]

        return PoissonSeries(
            polynomial,
            powers,
            sin_coefficients * non_poly_factor,
            cos_coefficients * non_poly_factor,
            multipliers,
            name=name,
        )

    def loadArguments(self, name: str) -> FundamentalArgumentsGenerator:
        """Load a fundamental arguments table.

        Raises:
            :class:`.ResourceLoadError`: table is missing or malformed.
        """
        rows = self._loadRows(name)
        try:
            return FundamentalArgumentsGenerator(
                [row[0] for row in rows],
                [row[1:] for row in rows],
                name=name,
            )
        except ValueError as err:
            iersconvLogError(str(err))
            raise ResourceLoadError(str(err)) from err

    def loadLoveNumbers(self, name: str) -> LoveNumbers:
        """Load a Love numbers table.

        Raises:
            :class:`.ResourceLoadError`: table is missing or malformed.
        """
        rows = self._loadRows(name)
        if any(len(row) != 5 for row in rows):
            msg = f"IERS table {name!r}: Love number rows must hold exactly 5 values"
            iersconvLogError(msg)
            raise ResourceLoadError(msg)

        try:
            return LoveNumbers.fromRows(rows)
        except ValueError as err:
            iersconvLogError(f"IERS table {name!r}: {err}")
            raise ResourceLoadError(f"IERS table {name!r}: {err}") from err


class ModuleDotDatSeriesLoader(SeriesLoader):
    """Concrete class defining how tables should be loaded as Python module resources."""

    DATA_MODULE: str = "iersconv.physics.data"
    """``str``: defines the data module the location is relative to."""

    def _readTable(self, name: str) -> list[list[float]]:
        """Read a table bundled with the package."""
        res = resources.files(self.DATA_MODULE).joinpath(self._location)
        for part in PurePosixPath(name).parts:
            res = res.joinpath(part)
        with resources.as_file(res) as file_resource:
            return loadDatFile(file_resource)


class LocalDotDatSeriesLoader(SeriesLoader):
    """Concrete class defining how tables should be loaded from a local directory."""

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (``str``): directory holding one sub-directory of tables per conventions.
        """
        super().__init__(location)
        self._path = Path(self._location)

    def _readTable(self, name: str) -> list[list[float]]:
        """Read a table from the local directory."""
        return loadDatFile(self._path / name)


_LOADER_MAP: dict[str, type[SeriesLoader]] = {
    SeriesLoaderLabel.MODULE: ModuleDotDatSeriesLoader,
    SeriesLoaderLabel.LOCAL: LocalDotDatSeriesLoader,
}
"""dict[str, type[SeriesLoader]]: Maps loader class names to loader class references."""


def getSeriesLoader(
    loader_name: str | None = None,
    loader_location: str | None = None,
) -> SeriesLoader:
    """Return the series loader specified by `loader_name` and `loader_location`.

    Args:
        loader_name (``str``, optional): name of the concrete :class:`.SeriesLoader` to use.
            Defaults to the configured ``iers.LoaderName``.
        loader_location (``str``, optional): location the loader reads tables from. Defaults to
            the configured ``iers.LoaderLocation``.

    Raises:
        ValueError: `loader_name` is not a known loader.

    Returns:
        :class:`.SeriesLoader`: the configured loader.
    """
    behave_config = BehavioralConfig.getConfig()
    if loader_name is None:
        loader_name = behave_config.iers.LoaderName

    if loader_location is None:
        loader_location = behave_config.iers.LoaderLocation

    try:
        loader_class = _LOADER_MAP[loader_name]
    except KeyError:
        err = f"Specified loader '{loader_name}' is undefined"
        raise ValueError(err)  # noqa: B904

    return loader_class(loader_location)
