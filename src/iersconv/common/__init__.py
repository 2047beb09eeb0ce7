"""Contains the configuration, logging, and error handling shared by the physics packages."""

from __future__ import annotations

# Standard Library Imports
from datetime import datetime


def pathSafeTime(dt: datetime | None = None) -> str:
    """Return a time stamp of `dt` usable in a log file name.

    Args:
        dt: The date and time to stamp. Defaults to now.

    Returns:
        `dt` in ISO format to the second, with the colons replaced by dashes.
    """
    if dt is None:
        dt = datetime.now()
    return dt.isoformat(timespec="seconds").replace(":", "-")
