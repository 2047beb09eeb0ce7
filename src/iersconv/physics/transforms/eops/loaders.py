"""Module defining the infrastructure used to retrieve EOP values from various sources."""

from __future__ import annotations

# Standard Library Imports
import datetime
from abc import ABC, abstractmethod
from pathlib import Path

# Local Imports
from ....common.exceptions import MissingEOP, ResourceLoadError
from ....common.logger import iersconvLogDebug, iersconvLogError
from ....common.utilities import loadDatFile
from ... import constants as const
from . import EarthOrientationParameter


def parseCelestrakRow(row: list[float]) -> EarthOrientationParameter:
    """Build an :class:`.EarthOrientationParameter` from a row in the Celestrak layout.

    Rows are ``year month day mjd x_p y_p dut1 lod d_psi d_eps dx dy dat``, with the angles in
    arcseconds. The MJD and the celestial pole offsets ``dx``, ``dy`` are not used.

    Args:
        row (``list``): one row of the EOP file, read with :func:`.loadDatFile`.

    Returns:
        :class:`.EarthOrientationParameter`: the parameters of that day, angles in radians.
    """
    year, month, day, _, x_p, y_p, dut1, lod, d_psi, d_eps = row[:10]
    return EarthOrientationParameter(
        date=datetime.date(int(year), int(month), int(day)),
        x_p=x_p * const.ARCSEC2RAD,
        y_p=y_p * const.ARCSEC2RAD,
        d_delta_psi=d_psi * const.ARCSEC2RAD,
        d_delta_eps=d_eps * const.ARCSEC2RAD,
        delta_ut1=dut1,
        length_of_day=lod,
        delta_atomic_time=int(row[12]),
    )


class EOPLoader(ABC):
    """Abstract class defining how Earth Orientation Parameters should be loaded.

    The data is read once, on first use, and kept in memory indexed by date.
    """

    def __init__(self, location: str):
        """Initializes the loader.

        Args:
            location (``str``): Specifies where the EOP content to load is located.
        """
        self._location: str = location
        self._eop_data: dict[datetime.date, EarthOrientationParameter] | None = None

    @property
    def location(self) -> str:
        """``str``: where the EOP content is loaded from."""
        return self._location

    @abstractmethod
    def _readRows(self) -> list[list[float]]:
        """Read the raw rows of the EOP content."""
        raise NotImplementedError

    def ensureLoaded(self) -> dict[datetime.date, EarthOrientationParameter]:
        """Load the EOP content unless it is already in memory, and return it indexed by date.

        Raises:
            :class:`.ResourceLoadError`: the EOP content is missing or malformed.
        """
        if self._eop_data is None:
            iersconvLogDebug(f"Loading EOP data from {self._location!r}")
            try:
                parameters = [parseCelestrakRow(row) for row in self._readRows()]
            except (FileNotFoundError, ValueError, IndexError, OSError) as err:
                msg = f"Unable to load EOP data from {self._location!r}"
                iersconvLogError(msg)
                raise ResourceLoadError(msg) from err

            self._eop_data = {eop.date: eop for eop in parameters}

        return self._eop_data

    def getEarthOrientationParameters(self, eop_date: datetime.date) -> EarthOrientationParameter:
        """Return the :class:`.EarthOrientationParameter` for the specified `eop_date`.

        Args:
            eop_date (``datetime.date``): date at which to get EOP values.

        Raises:
            MissingEOP: no EOP data for `eop_date`.
        """
        try:
            return self.ensureLoaded()[eop_date]
        except KeyError:
            raise MissingEOP(f"Could not retrieve EOP data for specified date: {eop_date}")  # noqa: B904

    def validEOP(self, eop_date: datetime.date) -> bool:
        """Checks if the given date has an associated set of Earth Orientation Parameters."""
        return eop_date in self.ensureLoaded()

    def earliestEOPDate(self) -> datetime.date:
        """Returns the earliest valid EOP date."""
        return min(self.ensureLoaded())

    def latestEOPDate(self) -> datetime.date:
        """Returns the latest valid EOP date."""
        return max(self.ensureLoaded())


class LocalDotDatEOPLoader(EOPLoader):
    """Concrete class defining how EOPs should be loaded from a local '.dat' file."""

    def _readRows(self) -> list[list[float]]:
        """Read the rows of the local file."""
        return loadDatFile(Path(self._location))
