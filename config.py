"""
Configuration for the constructible-plot renderer.

Holds the defaults of the original tool, the drawing colours, and the
command-line parsing that produces a RenderConfig. Parsing never exits
the process; it raises ConfigError and leaves the exit status to main.py.
"""

import argparse
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional

from errors import ConfigError, HelpRequested


# ---------------------------------------------------------------
# DEFAULTS (used when not passed on the command line)
# ---------------------------------------------------------------

DEFAULT_OUTPUT_WIDTH = 2000
DEFAULT_OUTPUT_HEIGHT = 2000
DEFAULT_POINT_SIZE = 10

OUTPUT_EXTENSION = ".jpg"


# ---------------------------------------------------------------
# NUMERIC / ENCODING PARAMETERS
# ---------------------------------------------------------------

DECIMAL_PRECISION = 28             # significant digits for transform math
JPEG_QUALITY = 100

# View buffer around the data extent: the view spans 4x the data range,
# with the data starting 1.5 ranges in from the left/top edge.
VIEW_RANGE_FACTOR = 4
VIEW_OFFSET_FACTOR = 1.5

# Fractional bits used for sub-pixel coordinates in cv2 draw calls.
SUBPIXEL_SHIFT = 4


# ---------------------------------------------------------------
# VISUALIZATION COLORS (BGR, as cv2 expects)
# ---------------------------------------------------------------

COLOR_BACKGROUND = (255, 255, 255)  # white
COLOR_POINT_FILL = (255, 185, 142)  # light blue, RGB(142, 185, 255)
COLOR_STROKE = (0, 0, 0)            # black

STROKE_WIDTH = 1


# ---------------------------------------------------------------
# RENDER CONFIGURATION
# ---------------------------------------------------------------

class ProgramMode(Enum):
    POINTS = "points"
    LINES = "lines"


VALID_MODES = ", ".join(m.value for m in ProgramMode)


@dataclass(frozen=True)
class RenderConfig:
    """
    Everything the core needs to know about one run.

    output_height only sizes the canvas and the line extension; the
    view transform scales both axes from output_width.
    """
    mode: ProgramMode
    input_file: str = ""
    output_file: str = ""
    output_width: int = DEFAULT_OUTPUT_WIDTH
    output_height: int = DEFAULT_OUTPUT_HEIGHT
    point_size: int = DEFAULT_POINT_SIZE
    draw_points_in_line_mode: bool = False


# ---------------------------------------------------------------
# COMMAND LINE
# ---------------------------------------------------------------

class _RaisingArgumentParser(argparse.ArgumentParser):
    """ArgumentParser that raises ConfigError instead of exiting."""

    def error(self, message):
        raise ConfigError(f"{message}\n\n{self.format_help()}")


def build_parser() -> argparse.ArgumentParser:
    # -h is the output height, as in the original tool, so help moves to -?
    parser = _RaisingArgumentParser(
        prog="constructible-plot",
        description="Plot a 2-column data file as points or as a complete "
                    "graph of extended lines and circles.",
        add_help=False,
    )
    parser.add_argument(
        "-m", "--mode", required=True, metavar="MODE",
        help=f"output MODE, one of: {VALID_MODES}",
    )
    parser.add_argument(
        "-i", "--input-file", required=True, metavar="FILE",
        help="data input FILE",
    )
    parser.add_argument(
        "-o", "--output-file", required=True, metavar="FILE",
        help=f"image output FILE; '{OUTPUT_EXTENSION}' is appended if missing",
    )
    parser.add_argument(
        "-d", "--draw-points", action="store_true",
        help="if set, will include points in line mode",
    )
    parser.add_argument(
        "--point-size", type=int, default=DEFAULT_POINT_SIZE, metavar="SIZE",
        help="SIZE of points, in pixels",
    )
    parser.add_argument(
        "-h", "--height", type=int, default=DEFAULT_OUTPUT_HEIGHT,
        metavar="HEIGHT",
        help=f"HEIGHT in pixels of output file. Default is {DEFAULT_OUTPUT_HEIGHT}",
    )
    parser.add_argument(
        "-w", "--width", type=int, default=DEFAULT_OUTPUT_WIDTH,
        metavar="WIDTH",
        help="WIDTH in pixels of output file. Both axes are scaled from the "
             f"width. Default is {DEFAULT_OUTPUT_WIDTH}",
    )
    parser.add_argument(
        "-?", "--help", action="store_true",
        help="show this message",
    )
    return parser


def parse_mode(text: str) -> ProgramMode:
    """Case-insensitive lookup of a ProgramMode by name."""
    for mode in ProgramMode:
        if text.lower() == mode.value:
            return mode
    raise ConfigError(f"Invalid mode '{text}'. Available options are: {VALID_MODES}")


def ensure_output_extension(path: str) -> str:
    """
    Appends '.jpg' unless the name already ends with it (any case).

    Example:
        'out'      → 'out.jpg'
        'out.JPG'  → 'out.JPG'
    """
    if path.lower().endswith(OUTPUT_EXTENSION):
        return path
    return path + OUTPUT_EXTENSION


def parse_command_line(argv: Optional[List[str]] = None) -> RenderConfig:
    """
    Parses command-line options into a validated RenderConfig.

    Raises:
        ConfigError: on missing/unknown options, an invalid mode, or a
            non-positive width, height or point size.
        HelpRequested: -?/--help was given; checked before anything else
            so required options may be missing.
    """
    parser = build_parser()

    help_parser = _RaisingArgumentParser(add_help=False, allow_abbrev=False)
    help_parser.add_argument("-?", "--help", action="store_true")
    if help_parser.parse_known_args(argv)[0].help:
        raise HelpRequested(parser.format_help())

    args = parser.parse_args(argv)

    mode = parse_mode(args.mode)

    if args.width <= 0:
        raise ConfigError("Requires output width > 0.")
    if args.height <= 0:
        raise ConfigError("Requires output height > 0.")
    if args.point_size <= 0:
        raise ConfigError("Requires point size > 0.")

    return RenderConfig(
        mode=mode,
        input_file=args.input_file,
        output_file=ensure_output_extension(args.output_file),
        output_width=args.width,
        output_height=args.height,
        point_size=args.point_size,
        draw_points_in_line_mode=args.draw_points,
    )
