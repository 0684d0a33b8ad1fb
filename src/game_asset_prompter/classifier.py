"""Background vs. sprite classification.

Signals are checked from most to least deliberate: folder placement,
then filename words, then pixel geometry, then a default of sprite.
"""

import re
from enum import Enum
from pathlib import PurePosixPath

from .core.types import Dimensions
from .tagging import CAMEL_BOUNDARY


class AssetKind(Enum):
    BACKGROUND = "background"
    SPRITE = "sprite"


# "bg" is read as a background folder, like "background"
BACKGROUND_FOLDERS = frozenset({"background", "backgrounds", "bg"})
SPRITE_FOLDERS = frozenset({"sprite", "sprites"})

BACKGROUND_NAME_PATTERN = re.compile(
    r"background|backdrop|(?<![a-z])bg(?![a-z])"
    r"|castle|forest|desert|ocean|city|snow|sky|field|mountain|landscape"
)
SPRITE_NAME_PATTERN = re.compile(
    r"sprite|tilesheet|sheet|player|character|soldier|zombie|enemy|hero"
)

# Size heuristic thresholds
BACKGROUND_MIN_WIDTH = 1024
BACKGROUND_MIN_HEIGHT = 900
BACKGROUND_MIN_ASPECT = 1.6
BACKGROUND_MIN_AREA = 900 * 700
SPRITE_MAX_SIDE = 800


def folder_hint(relative_path: str) -> AssetKind | None:
    """Classify from the directory segments of a path.

    Args:
        relative_path: Path relative to the asset root, using "/" separators

    Returns:
        Kind named by the leftmost hinting folder, or None
    """
    for part in PurePosixPath(relative_path).parent.parts:
        segment = part.lower()
        if segment in BACKGROUND_FOLDERS:
            return AssetKind.BACKGROUND
        if segment in SPRITE_FOLDERS:
            return AssetKind.SPRITE
    return None


def name_hint(filename: str) -> AssetKind | None:
    """Classify from words in the filename."""
    name = CAMEL_BOUNDARY.sub(r"\1 \2", PurePosixPath(filename).stem).lower()
    if BACKGROUND_NAME_PATTERN.search(name):
        return AssetKind.BACKGROUND
    if SPRITE_NAME_PATTERN.search(name):
        return AssetKind.SPRITE
    return None


def size_hint(size: Dimensions | None) -> AssetKind | None:
    """Classify from pixel geometry.

    Large, wide or high-area images are backgrounds; anything that fits in
    an 800x800 box is a sprite. Sizes in between stay undecided.
    """
    if size is None:
        return None

    width, height = size
    if (
        width >= BACKGROUND_MIN_WIDTH
        or height >= BACKGROUND_MIN_HEIGHT
        or (height > 0 and width / height >= BACKGROUND_MIN_ASPECT)
        or width * height >= BACKGROUND_MIN_AREA
    ):
        return AssetKind.BACKGROUND
    if width <= SPRITE_MAX_SIDE and height <= SPRITE_MAX_SIDE:
        return AssetKind.SPRITE
    return None


def classify(relative_path: str, filename: str, size: Dimensions | None) -> AssetKind:
    """Assign an image to a manifest category.

    Args:
        relative_path: Path relative to the asset root
        filename: Base filename including extension
        size: Sniffed dimensions, or None if unknown

    Returns:
        AssetKind.BACKGROUND or AssetKind.SPRITE
    """
    return (
        folder_hint(relative_path)
        or name_hint(filename)
        or size_hint(size)
        or AssetKind.SPRITE
    )
