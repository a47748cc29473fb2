"""
Error types for the plotting pipeline.

Every fatal condition raises a subclass of PlotError. main.py catches
PlotError at the top level, prints it and returns a non-zero status.
Malformed data lines are not errors; they are reported and skipped by
the data loader.
"""


class PlotError(Exception):
    """Base class for all fatal pipeline errors."""


class ConfigError(PlotError):
    """Invalid or missing command-line options."""


class DataFileError(PlotError):
    """The input data file could not be opened, read or decoded."""


class EmptyDataError(PlotError):
    """No valid points were loaded, so there is nothing to transform."""


class DegenerateDataError(PlotError):
    """All points share one value on an axis (zero range)."""

    def __init__(self, axis: str):
        super().__init__(
            f"All data points share the same {axis} value; "
            f"cannot scale a zero {axis}-range to the output image."
        )
        self.axis = axis


class RenderError(PlotError):
    """A primitive could not be drawn (e.g. non-finite coordinate)."""


class ImageWriteError(PlotError):
    """The output image could not be encoded or written."""


class HelpRequested(Exception):
    """-?/--help was given; carries the help text for the caller to print."""

    def __init__(self, help_text: str):
        super().__init__(help_text)
        self.help_text = help_text
