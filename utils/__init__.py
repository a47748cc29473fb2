"""
Utility Functions

Provides geometry operations and file I/O utilities used across the
loader, renderer and output stages.
"""

from .geometry import point_distance, extend_line, clip_segment
from .image_io import read_text_lines, ensure_output_dir, save_image

__all__ = [
    "point_distance",
    "extend_line",
    "clip_segment",
    "read_text_lines",
    "ensure_output_dir",
    "save_image",
]
