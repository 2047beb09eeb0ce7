"""Configure importable things that aren't pytest fixtures."""

from __future__ import annotations

# Standard Library Imports
from pathlib import Path

# IERSCONV Imports
from iersconv.physics.time.stardate import JulianDate

# Common file paths
FIXTURE_DATA_DIR = Path(__file__).parent / "datafiles"
EOP_DATA_PATH = Path("dat/eops.dat")
IERS_TABLES_PATH = Path("iers")


# Common julian dates
TEST_START_JD: JulianDate = JulianDate.getJulianDate(2018, 12, 1, 12, 0, 0)
EOP_UNCOVERED_JD: JulianDate = JulianDate.getJulianDate(2019, 6, 1, 12, 0, 0)
