"""Defines the :class:`.LoveNumbers` container."""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import asarray, zeros

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray


class LoveNumbers:
    """Triangular tables of nominal Love numbers indexed by (degree, order).

    Three tables are held: the real and imaginary parts of :math:`k_{nm}` and :math:`k^{+}_{nm}`,
    which couples degree 2 tides into the degree 4 coefficients.

    References:
        :cite:t:`iers_2010_conventions`, Table 6.3
    """

    def __init__(self, real: ndarray, imaginary: ndarray, plus: ndarray):
        """Store read-only copies of the three tables.

        Args:
            real (``ndarray``): (N, N) real part of :math:`k_{nm}`.
            imaginary (``ndarray``): (N, N) imaginary part of :math:`k_{nm}`.
            plus (``ndarray``): (N, N) :math:`k^{+}_{nm}`.

        Raises:
            ValueError: the tables are not square or do not share a shape.
        """
        tables = []
        for table in (real, imaginary, plus):
            table = asarray(table, dtype=float).copy()  # noqa: PLW2901
            if table.ndim != 2 or table.shape[0] != table.shape[1]:
                raise ValueError(f"Love number tables must be square, got shape {table.shape}")
            table.flags.writeable = False
            tables.append(table)

        if not tables[0].shape == tables[1].shape == tables[2].shape:
            raise ValueError("Love number tables must share the same shape")

        self._real, self._imaginary, self._plus = tables

    @classmethod
    def fromRows(cls, rows: list[list[float]]) -> LoveNumbers:
        """Build the tables from ``n m k_real k_imaginary k_plus`` rows.

        Raises:
            ValueError: a row has an order greater than its degree or a negative index.
        """
        size = int(max(row[0] for row in rows)) + 1
        real, imaginary, plus = zeros((size, size)), zeros((size, size)), zeros((size, size))
        for row in rows:
            degree, order = int(row[0]), int(row[1])
            if order < 0 or order > degree:
                raise ValueError(f"invalid Love number indices ({degree}, {order})")
            real[degree, order] = row[2]
            imaginary[degree, order] = row[3]
            plus[degree, order] = row[4]

        return cls(real, imaginary, plus)

    def getReal(self, n: int, m: int) -> float:
        """Return the real part of :math:`k_{nm}`."""
        return self._real[n, m]

    def getImaginary(self, n: int, m: int) -> float:
        """Return the imaginary part of :math:`k_{nm}`."""
        return self._imaginary[n, m]

    def getPlus(self, n: int, m: int) -> float:
        """Return :math:`k^{+}_{nm}`."""
        return self._plus[n, m]

    def getSize(self) -> int:
        """Return the maximum degree of the tables plus one."""
        return self._real.shape[0]
