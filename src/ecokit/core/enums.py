"""Core enumerations used across the package."""

from __future__ import annotations

from enum import Enum


class SizeStandard(str, Enum):
    """Unit standards for human-readable byte sizes.

    Values are strings to ease CLI interchange.
    """

    IEC = "IEC"
    SI = "SI"


__all__ = ["SizeStandard"]
