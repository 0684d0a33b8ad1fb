"""Manifest persistence.

The manifest is stored as indented JSON with a trailing newline. Readers
are lenient: a missing or damaged file, or a category that isn't a list,
is read as empty, and unusable entries are dropped with a warning.
"""

import json
import logging
from pathlib import Path
from typing import Any

from .core.types import AssetEntry, Manifest
from .core.validator import entry_load_error, is_valid_frame

logger = logging.getLogger(__name__)

CATEGORIES = ("backgrounds", "players", "hazards", "coins")


def empty_manifest() -> Manifest:
    """Create a manifest with every category empty."""
    return Manifest(backgrounds=[], players=[], hazards=[], coins=[])


def _coerce_entry(item: Any, category: str) -> AssetEntry | None:
    error = entry_load_error(item)
    if error is not None:
        logger.warning("Dropping %s entry %r: %s", category, item, error)
        return None

    entry: AssetEntry = dict(item)  # type: ignore[assignment]
    if "frame" in entry and not is_valid_frame(entry["frame"]):
        logger.warning(
            "Dropping invalid frame of %s entry %r: %r", category, entry["id"], entry["frame"]
        )
        del entry["frame"]
    return entry


def coerce_manifest(data: Any) -> Manifest:
    """Build a Manifest from loosely-shaped JSON data.

    Categories that are missing or not lists become empty. Entries without
    a string id and path and a list of string tags are dropped, and so is a
    frame that is not a pair of positive integer cols and rows.
    """
    manifest = empty_manifest()
    if not isinstance(data, dict):
        return manifest

    for category in CATEGORIES:
        items = data.get(category)
        if not isinstance(items, list):
            continue
        entries = [_coerce_entry(item, category) for item in items]
        manifest[category] = [e for e in entries if e is not None]  # type: ignore[literal-required]
    return manifest


def dump_manifest(manifest: Manifest) -> str:
    """Serialize a manifest to its on-disk text form."""
    return json.dumps(manifest, indent=2) + "\n"


def write_manifest(manifest: Manifest, path: Path) -> None:
    """Write a manifest to disk, creating parent directories as needed."""
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8", newline="\n") as f:
        f.write(dump_manifest(manifest))


def load_manifest(path: Path) -> Manifest:
    """Read a manifest from disk.

    Args:
        path: Manifest JSON file

    Returns:
        The manifest, or an empty manifest if the file can't be used
    """
    try:
        with path.open("r", encoding="utf-8") as f:
            data = json.load(f)
    except FileNotFoundError:
        logger.info("No manifest at %s, using an empty one", path)
        return empty_manifest()
    except (OSError, json.JSONDecodeError) as e:
        logger.warning("Could not read manifest %s: %s", path, e)
        return empty_manifest()

    return coerce_manifest(data)
