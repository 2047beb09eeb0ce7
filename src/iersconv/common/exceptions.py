"""Contains all the custom-defined exceptions used in IERSCONV."""

from __future__ import annotations


class ResourceLoadError(Exception):
    """Exception indicating an IERS table or other data resource is missing or malformed."""


class UnsupportedModelError(Exception):
    """Exception indicating a convention/function combination has no defined implementation."""


class MissingEOP(Exception):  # noqa: N818
    """Error thrown when an EOP can't be found for a specified date."""
