"""
Constructible Plot Package

Plots a 2-column data file as a raster image, including:

- Data file loading (points + running bounds)
- View transform (Decimal data space → pixel space)
- Points / lines rendering
- JPEG output
"""
__all__ = [
    "config",
    "errors",
    "main",
    "loaders",
    "models",
    "utils",
    "visualization",
]
