"""Bundled IERS tables, one directory per conventions version under ``iers/``."""
