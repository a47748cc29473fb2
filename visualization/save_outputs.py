"""
Output-saving utilities for the plotting pipeline.

This module provides:
    • save_rendered_image(path, image)

Uses utils.image_io for filesystem handling.
"""

import numpy as np

from config import JPEG_QUALITY
from utils.image_io import save_image


def save_rendered_image(path: str, image: np.ndarray):
    """
    Writes the rendered raster as a maximum-quality JPEG.

    Raises:
        ImageWriteError: if encoding or writing fails.
    """
    save_image(path, image, jpeg_quality=JPEG_QUALITY)
