"""Tile-sheet grid inference.

Sprite sheets in this domain are overwhelmingly single-row strips, so the
candidate list tries wide strips first, then tall strips, then small grids.
The order is part of the manifest contract: the first candidate that divides
the image evenly wins.
"""

import re

from .core.types import Dimensions, Frame

GRID_CANDIDATES: tuple[tuple[int, int], ...] = (
    # Horizontal strips
    (12, 1), (10, 1), (8, 1), (6, 1), (5, 1), (4, 1), (3, 1), (2, 1),
    # Vertical strips
    (1, 12), (1, 10), (1, 8), (1, 6), (1, 5), (1, 4), (1, 3), (1, 2),
    # Small grids
    (4, 2), (3, 2), (2, 3), (4, 4),
)

# Matches "8x1", "4X2", "6 x 1" anywhere in a filename
GRID_HINT_PATTERN = re.compile(r"(\d+)\s*x\s*(\d+)", re.IGNORECASE)

# Larger hints are almost always pixel sizes written into the filename
MAX_HINT_FRAMES = 64


def infer_grid(size: Dimensions | None) -> Frame | None:
    """Propose a column/row split for a sprite sheet.

    Args:
        size: Image dimensions, or None if unknown

    Returns:
        The first candidate grid that divides the image evenly, or None
    """
    if size is None:
        return None

    for cols, rows in GRID_CANDIDATES:
        if size.width % cols == 0 and size.height % rows == 0:
            return Frame(cols=cols, rows=rows)
    return None


def parse_grid_hint(filename: str) -> Frame | None:
    """Read an explicit ``<cols>x<rows>`` grid hint from a filename."""
    match = GRID_HINT_PATTERN.search(filename)
    if not match:
        return None

    cols, rows = int(match.group(1)), int(match.group(2))
    if cols <= 0 or rows <= 0 or cols * rows > MAX_HINT_FRAMES:
        return None
    return Frame(cols=cols, rows=rows)


def infer_frame(filename: str, size: Dimensions | None) -> Frame | None:
    """Pick the frame grid for a sprite file.

    A grid hint in the filename is trusted when the size is unknown or when
    the hint divides the image evenly. Otherwise the grid is inferred from
    the dimensions.

    Args:
        filename: Base filename including extension
        size: Image dimensions, or None if unknown

    Returns:
        Frame grid, or None if neither the hint nor the dimensions give one
    """
    hint = parse_grid_hint(filename)
    if hint is not None:
        if size is None:
            return hint
        if size.width % hint["cols"] == 0 and size.height % hint["rows"] == 0:
            return hint
    return infer_grid(size)
