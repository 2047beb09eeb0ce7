"""Contains classes and conversion functions for different definitions of time.

Epochs are carried as :class:`.JulianDate` values on the Terrestrial Time (TT) scale. Anything
beyond the handful of conversions needed by the nutation and tide models is left to the caller.
"""
