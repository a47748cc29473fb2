"""
Data Models

Defines the core data structures:
- RawPoint / PixelPoint
- Bounds
- ViewTransform
"""

from .point import RawPoint, PixelPoint
from .bounds import Bounds
from .view_transform import ViewTransform

__all__ = ["RawPoint", "PixelPoint", "Bounds", "ViewTransform"]
