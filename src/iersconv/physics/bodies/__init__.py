"""Contains classes defining the central body, the tide generating bodies and their tides."""

from __future__ import annotations

# Local Imports
from .earth import Earth
from .third_body import Moon, Sun

__all__ = ["Earth", "Moon", "Sun"]
