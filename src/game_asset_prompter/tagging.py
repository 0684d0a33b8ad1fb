"""Filename tag extraction.

Turns names like ``forestNight_bg.png`` into ``["forest", "night"]``.
"""

import re
from pathlib import PurePosixPath

# Generic asset-naming noise that says nothing about content
STOP_WORDS = frozenset(
    {
        "bg",
        "background",
        "color",
        "colour",
        "sprite",
        "player",
        "character",
        "tilesheet",
        "sheet",
        "image",
        "img",
    }
)

CAMEL_BOUNDARY = re.compile(r"([a-z])([A-Z])")
NON_ALNUM = re.compile(r"[^a-z0-9]+")


def asset_id(filename: str) -> str:
    """Derive the manifest id from a filename by stripping its extension."""
    return PurePosixPath(filename).stem


def split_words(filename: str) -> list[str]:
    """Split a filename into lowercase alphanumeric words.

    The extension is dropped and camelCase boundaries become separators.
    """
    stem = asset_id(filename)
    spaced = CAMEL_BOUNDARY.sub(r"\1 \2", stem)
    return [word for word in NON_ALNUM.split(spaced.lower()) if word]


def filename_tags(filename: str) -> list[str]:
    """Extract normalized tags from a filename.

    Args:
        filename: Base filename including extension

    Returns:
        Tags in order of first occurrence, stop words and duplicates removed
    """
    tags: list[str] = []
    for word in split_words(filename):
        if word in STOP_WORDS or word in tags:
            continue
        tags.append(word)
    return tags
