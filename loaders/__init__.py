"""
Loaders Package

Reads input data files into points and bounds.
"""

from .data_loader import LoadResult, load_data, parse_lines, parse_decimal

__all__ = [
    "LoadResult",
    "load_data",
    "parse_lines",
    "parse_decimal",
]
