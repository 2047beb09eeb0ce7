"""Defines the :class:`.EOPHistory` feeding EOP corrections to the frame transforms."""

from __future__ import annotations

# Standard Library Imports
from datetime import timedelta
from typing import TYPE_CHECKING

# Local Imports
from ....common.behavioral_config import BehavioralConfig
from ....common.exceptions import MissingEOP
from ....common.labels import EOPLoaderLabel
from ....common.logger import iersconvLogWarning
from ... import constants as const
from ...time.stardate import julianDateToDatetime
from . import NULL_NUTATION_CORRECTION, NULL_POLE_CORRECTION, NutationCorrection, PoleCorrection
from .loaders import LocalDotDatEOPLoader

# Type Checking Imports
if TYPE_CHECKING:
    # Standard Library Imports
    import datetime

    # Local Imports
    from ...time.stardate import JulianDate
    from . import EarthOrientationParameter
    from .loaders import EOPLoader


_LOADER_MAP: dict[str, type[EOPLoader]] = {
    EOPLoaderLabel.LOCAL: LocalDotDatEOPLoader,
}
"""dict[str, type[EOPLoader]]: Maps loader class names to loader class references."""


class EOPHistory:
    """Daily Earth orientation parameters, looked up by the UTC calendar date of an epoch.

    Dates the loaded data does not cover yield null corrections, a warning being logged the
    first time this happens.
    """

    def __init__(self, loader: EOPLoader):
        """Load the EOP data right away.

        Args:
            loader (:class:`.EOPLoader`): source of the EOP data.
        """
        self._loader = loader
        self._loader.ensureLoaded()
        self._warned = False

    @classmethod
    def fromConfig(
        cls,
        loader_name: str | None = None,
        loader_location: str | None = None,
    ) -> EOPHistory | None:
        """Build the history named by the behavioral config.

        Args:
            loader_name (``str``, optional): name of the concrete :class:`.EOPLoader` to use.
            loader_location (``str``, optional): location the loader reads the EOP data from.

        Raises:
            ValueError: `loader_name` is not a known loader.

        Returns:
            :class:`.EOPHistory` | ``None``: ``None`` when no EOP location is configured.
        """
        behave_config = BehavioralConfig.getConfig()
        if loader_name is None:
            loader_name = behave_config.eop.LoaderName

        if loader_location is None:
            loader_location = behave_config.eop.LoaderLocation

        if loader_location is None:
            return None

        try:
            loader_class = _LOADER_MAP[loader_name]
        except KeyError:
            err = f"Specified loader '{loader_name}' is undefined"
            raise ValueError(err)  # noqa: B904

        return cls(loader_class(loader_location))

    def _utcDate(self, julian_date: JulianDate) -> datetime.date:
        """Return the UTC calendar date of the TT epoch `julian_date`.

        UTC lags TT by TT - TAI plus the leap seconds of the row holding the TT date, or of the
        row before it. Without either row the TT date is returned.
        """
        tt_datetime = julianDateToDatetime(julian_date)
        for row_date in (tt_datetime.date(), tt_datetime.date() - timedelta(days=1)):
            if self._loader.validEOP(row_date):
                leap_seconds = self._loader.getEarthOrientationParameters(row_date).delta_atomic_time
                return (tt_datetime - timedelta(seconds=const.TT_MINUS_TAI + leap_seconds)).date()

        return tt_datetime.date()

    def _getEOP(self, julian_date: JulianDate) -> EarthOrientationParameter | None:
        eop_date = self._utcDate(julian_date)
        try:
            return self._loader.getEarthOrientationParameters(eop_date)
        except MissingEOP:
            if not self._warned:
                iersconvLogWarning(f"No EOP data for {eop_date}, using null corrections")
                self._warned = True
            return None

    def getNutationCorrection(self, julian_date: JulianDate) -> NutationCorrection:
        """Return the nutation angle corrections at `julian_date`."""
        eop = self._getEOP(julian_date)
        if eop is None:
            return NULL_NUTATION_CORRECTION

        return NutationCorrection(dd_psi=eop.d_delta_psi, dd_eps=eop.d_delta_eps)

    def getPoleCorrection(self, julian_date: JulianDate) -> PoleCorrection:
        """Return the polar motion at `julian_date`."""
        eop = self._getEOP(julian_date)
        if eop is None:
            return NULL_POLE_CORRECTION

        return PoleCorrection(x_p=eop.x_p, y_p=eop.y_p)

    def getLOD(self, julian_date: JulianDate) -> float:
        """Return the excess length of day at `julian_date`, (sec)."""
        eop = self._getEOP(julian_date)
        if eop is None:
            return 0.0

        return eop.length_of_day
