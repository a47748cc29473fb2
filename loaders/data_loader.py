"""
Data file loader.

Reads a 2-column, comma-separated data file into RawPoints plus the
running Bounds of every value that parsed.

Line grammar:
    ;<anything>          comment, ignored
    <decimal>,<decimal>  point
    anything else        invalid, reported and skipped

Bounds are updated field by field: a line whose x parses but whose y does
not still contributes its x to the bounds, although the point itself is
rejected. Output images depend on this, so it is kept.
"""

import re
from dataclasses import dataclass, field
from decimal import Decimal
from typing import Iterable, List, Optional, Tuple

from models.bounds import Bounds
from models.point import RawPoint
from utils.image_io import read_text_lines


COMMENT_PREFIX = ";"
FIELD_SEPARATOR = ","

# one optional sign, leading or trailing, around digits with an optional
# fraction; no exponent, NaN or Infinity
_DECIMAL_RE = re.compile(r"^\s*([+-]?)(\d+(?:\.\d*)?|\.\d+)([+-]?)\s*$")


@dataclass
class LoadResult:
    points: List[RawPoint] = field(default_factory=list)
    bounds: Bounds = field(default_factory=Bounds)
    # (1-based line number, raw text)
    invalid_lines: List[Tuple[int, str]] = field(default_factory=list)


def parse_decimal(text: str) -> Optional[Decimal]:
    """
    Parses one field exactly as a Decimal.

    Returns None if the field is not a plain decimal number.

    Example:
        ' -1.50 ' → Decimal('-1.50')
        '5-'      → Decimal('-5')
        '1e3'     → None
    """
    m = _DECIMAL_RE.match(text)
    if not m:
        return None

    lead, digits, trail = m.groups()
    if lead and trail:
        return None
    return Decimal((lead or trail) + digits)


def parse_lines(lines: Iterable[str], verbose: bool = True) -> LoadResult:
    """
    Parses data lines (without line endings) into points and bounds.

    Parameters
    ----------
    lines : iterable of str
        Input lines in file order.
    verbose : bool
        Print a warning for every invalid line.

    Returns
    -------
    LoadResult
        Points in file order, the running bounds, and the invalid lines.
    """
    result = LoadResult()

    for line_no, line in enumerate(lines, start=1):
        if line.startswith(COMMENT_PREFIX):
            continue

        splits = line.split(FIELD_SEPARATOR)
        good_fields = 0
        x = y = None

        if len(splits) == 2:
            x = parse_decimal(splits[0])
            if x is not None:
                result.bounds.update_x(x)
                good_fields += 1

            y = parse_decimal(splits[1])
            if y is not None:
                result.bounds.update_y(y)
                good_fields += 1

        if good_fields == 2:
            result.points.append(RawPoint(x, y))
        else:
            result.invalid_lines.append((line_no, line))
            if verbose:
                print(f"[WARN] Invalid line: {line}")

    return result


def load_data(path: str, verbose: bool = True) -> LoadResult:
    """
    Loads a data file from disk.

    Raises:
        DataFileError: if the file cannot be read.
    """
    return parse_lines(read_text_lines(path), verbose=verbose)
