"""Time functions, fundamental nutation arguments, and the loaders reading them from IERS tables."""
