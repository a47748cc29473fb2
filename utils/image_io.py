"""
File I/O utilities for the plotting pipeline.

This module provides:
    • read_text_lines(path)
    • ensure_output_dir(path)
    • save_image(path, image, jpeg_quality)

Handles all filesystem interaction in a consistent, testable way.
"""

import os
from typing import Iterator

import cv2
import numpy as np

from errors import DataFileError, ImageWriteError


# -------------------------------------------------------------------------
#  TEXT INPUT
# -------------------------------------------------------------------------

def read_text_lines(path: str) -> Iterator[str]:
    """
    Yields the lines of a UTF-8 text file without their line endings.

    LF and CRLF endings are both accepted, and a leading BOM is dropped.

    Raises:
        DataFileError: if the file cannot be opened, read or decoded.
    """
    try:
        with open(path, "r", encoding="utf-8-sig", newline=None) as f:
            for line in f:
                yield line.rstrip("\r\n")
    except (OSError, UnicodeDecodeError) as e:
        raise DataFileError(f"Could not read data file '{path}': {e}") from e


# -------------------------------------------------------------------------
#  OUTPUT DIRECTORY HANDLING
# -------------------------------------------------------------------------

def ensure_output_dir(path: str):
    """
    Ensures that an output directory exists.
    """
    if path and not os.path.exists(path):
        os.makedirs(path, exist_ok=True)


# -------------------------------------------------------------------------
#  IMAGE SAVING
# -------------------------------------------------------------------------

def save_image(path: str, image: np.ndarray, jpeg_quality: int = 100):
    """
    Encode an image as JPEG and write it to disk, ensuring the directory exists.

    Raises:
        ImageWriteError: if the directory cannot be created or cv2 reports
            that encoding/writing failed.
    """
    try:
        ensure_output_dir(os.path.dirname(path))
        ok = cv2.imwrite(path, image, [cv2.IMWRITE_JPEG_QUALITY, int(jpeg_quality)])
    except (OSError, cv2.error) as e:
        raise ImageWriteError(f"Could not write image '{path}': {e}") from e

    if not ok:
        raise ImageWriteError(f"Could not write image '{path}'.")
