"""A small printf-style formatter: rendering, printing and single conversions."""

__version__ = "0.1.0"
__all__ = ["conversions", "printf"]