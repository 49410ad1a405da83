"""Percent-style string formatting with a small, fixed set of conversions and flags."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]