"""Shared fixtures for the plotting tests."""

from pathlib import Path
from typing import List

import pytest

from helpers import RecordingCanvas, make_points
from models.point import RawPoint


@pytest.fixture
def recording_canvas() -> RecordingCanvas:
    return RecordingCanvas()


@pytest.fixture
def square_points() -> List[RawPoint]:
    """Four corners of a 10x10 square plus an interior point."""
    return make_points((0, 0), (10, 10), (0, 10), (10, 0), (5, 3))


@pytest.fixture
def write_data(tmp_path):
    """Write text to a data file and return its path."""

    def _write(text: str, name: str = "data.txt") -> Path:
        path = tmp_path / name
        path.write_text(text, encoding="utf-8")
        return path

    return _write
