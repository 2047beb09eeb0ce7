"""Earth orientation corrections following the IERS conventions.

The package computes nutation, precession, and tide-induced gravity-field perturbations for
satellite dynamics. The main entry points are:

* :class:`.ConventionSet`: per-convention bundle of nutation/precession time functions.
* :class:`.TidalCoefficientCache`: tide-corrected spherical harmonic coefficients.
* :class:`.NutationFrameTransform`: Mean Of Date to True Of Date rotation.
"""

from __future__ import annotations

__version__ = "1.0.0"
