"""Various helper functions that are used across multiple modules."""

from __future__ import annotations

# Local Imports
from .logger import iersconvLogError

COMMENT_CHARACTER: str = "#"
"""``str``: lines of a dat file starting with this character are ignored."""


def loadDatFile(file_name, delim=None):
    """Load the corresponding dat file.

    Note:
        Assumes all data is representable by ``float``. Blank lines and lines starting with
        :data:`.COMMENT_CHARACTER` are skipped, so tables may carry a descriptive header.

    Args:
        file_name (``str``): name of dat file to load
        delim (``str``, optional): delimiter character to separate data on same line. Defaults to
            ``None``, which removes all whitespace between values.

    Raises:
        ``FileNotFoundError``: helps with debugging bad filenames
        ``ValueError``: error parsing dat file, likely because values are convertible to ``float``
        ``IOError``: valid dat file is empty

    Returns:
        ``list``: nested list of float values of each row
    """
    try:
        with open(file_name, encoding="utf-8") as data_file:
            data = [
                [float(x) for x in line.split(sep=delim)]
                for line in data_file
                if line.strip() and not line.lstrip().startswith(COMMENT_CHARACTER)
            ]
    except FileNotFoundError as err:
        msg = f"Could not find DAT file: {file_name}"
        iersconvLogError(msg)
        raise err
    except ValueError as err:
        msg = f"Parsing error reading DAT file: {file_name}"
        iersconvLogError(msg)
        raise ValueError(msg) from err

    if not data:
        msg = f"Empty DAT file: {file_name}"
        iersconvLogError(msg)
        raise OSError(msg)

    return data
