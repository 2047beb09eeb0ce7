"""Earth orientation, nutation, and tidal gravity algorithms.

These algorithms follow the IERS conventions and are written to be dropped into force models and
frame-transform chains with as little ceremony as possible.
"""
