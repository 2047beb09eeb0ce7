r"""Defines the fully normalized associated Legendre functions used by the tides field.

The functions are computed with the forward-column recursion, which is stable for the low
degrees needed here:

.. math::

    \bar{P}_{n,m}(t) = a_{n,m}\, t\, \bar{P}_{n-1,m}(t) - b_{n,m}\, \bar{P}_{n-2,m}(t)

with :math:`t = \sin\phi` and :math:`u = \cos\phi`, seeded by the sectorial terms.

References:
    #. :cite:t:`holmes_2002_legendre`
    #. :cite:t:`iers_2010_conventions`, Section 6.2
"""

from __future__ import annotations

# Standard Library Imports
from typing import TYPE_CHECKING

# Third Party Imports
from numpy import sqrt, zeros

# Type Checking Imports
if TYPE_CHECKING:
    # Third Party Imports
    from numpy import ndarray


class AssociatedLegendreRecursion:
    """Evaluates :math:`\\bar{P}_{n,m}` for all :math:`0 \\le m \\le n \\le N`.

    The recursion coefficients only depend on the indices, so they are computed once at
    construction. The entries with :math:`m > n` are never written and stay zero.
    """

    def __init__(self, max_degree: int = 4):
        """Precompute the recursion coefficients.

        Args:
            max_degree (``int``, optional): highest degree evaluated. Defaults to 4.
        """
        if max_degree < 1:
            raise ValueError(f"Legendre recursion needs a max degree of at least 1, got {max_degree}")

        self.max_degree = max_degree
        size = max_degree + 1
        self._a = zeros((size, size))
        self._b = zeros((size, size))
        self._d = zeros(size)
        for n in range(1, size):
            for m in range(n):
                self._a[n, m] = sqrt((2.0 * n - 1.0) * (2.0 * n + 1.0) / ((n - m) * (n + m)))
                if n >= 2:
                    self._b[n, m] = sqrt(
                        (2.0 * n + 1.0)
                        * (n + m - 1.0)
                        * (n - m - 1.0)
                        / ((n - m) * (n + m) * (2.0 * n - 3.0)),
                    )
            self._d[n] = sqrt((2.0 * n + 1.0) / (2.0 * n))

        self._pnm = zeros((size, size))

    def evaluate(self, t: float, u: float) -> ndarray:
        """Fill the table of normalized associated Legendre functions.

        Args:
            t (``float``): sine of the latitude.
            u (``float``): cosine of the latitude.

        Returns:
            ``ndarray``: (N+1, N+1) lower triangular table, indexed ``[n, m]``. The table is reused
            by the next call.
        """
        pnm = self._pnm
        pnm[0, 0] = 1.0
        pnm[1, 0] = self._a[1, 0] * t
        pnm[1, 1] = sqrt(3.0) * u

        for m in range(self.max_degree + 1):
            if m >= 2:
                pnm[m, m] = self._d[m] * u * pnm[m - 1, m - 1]
            if 1 <= m < self.max_degree:
                pnm[m + 1, m] = self._a[m + 1, m] * t * pnm[m, m]
            for n in range(max(m + 2, 2), self.max_degree + 1):
                pnm[n, m] = self._a[n, m] * t * pnm[n - 1, m] - self._b[n, m] * pnm[n - 2, m]

        return pnm
