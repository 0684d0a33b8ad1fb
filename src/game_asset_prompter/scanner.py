"""Directory scanning and manifest building.

This module walks the asset source folders, sniffs each image header,
classifies the file, and collects the results into a Manifest. The output
depends only on the file tree: rescanning unchanged files gives an
identical manifest.
"""

import logging
import os
from concurrent.futures import ThreadPoolExecutor, as_completed
from dataclasses import dataclass, field
from pathlib import Path

from .classifier import AssetKind, classify
from .core.metadata import read_dimensions
from .core.types import AssetEntry, Manifest
from .grid import infer_frame
from .manifest import empty_manifest
from .sources import ImageFile, LegacyFolderSource, LibrarySource, Source
from .sources.filesystem import DEFAULT_EXTENSIONS
from .tagging import asset_id, filename_tags

logger = logging.getLogger(__name__)


@dataclass
class ScanConfig:
    """Where to look for assets and how to scan them.

    Attributes:
        assets_dir: Root of the asset folders
        public_root: Directory that entry paths are made relative to;
            defaults to the parent of assets_dir so paths read "/assets/..."
        library_dir: Nested library tree under assets_dir
        legacy_dirs: Flat folders under assets_dir kept for older layouts
        extensions: Raster file suffixes to include
        max_workers: Thread count for header reads, None for the default
    """

    assets_dir: Path
    public_root: Path | None = None
    library_dir: str = "library"
    legacy_dirs: tuple[str, ...] = ("backgrounds", "sprites")
    extensions: frozenset[str] = field(default=DEFAULT_EXTENSIONS)
    max_workers: int | None = None

    def sources(self) -> list[Source]:
        sources: list[Source] = [
            LibrarySource(self.assets_dir / self.library_dir, self.assets_dir, self.extensions)
        ]
        for folder in self.legacy_dirs:
            sources.append(
                LegacyFolderSource(self.assets_dir / folder, self.assets_dir, self.extensions)
            )
        return sources

    @property
    def resolved_public_root(self) -> Path:
        return self.public_root if self.public_root is not None else self.assets_dir.parent


def public_path(file_path: Path, public_root: Path) -> str:
    """Build the stable locator for a file, e.g. "/assets/library/hero.png".

    Raises:
        ValueError: If the file is not under public_root
    """
    relative = Path(os.path.abspath(file_path)).relative_to(os.path.abspath(public_root))
    return "/" + relative.as_posix()


def describe_file(image: ImageFile, public_root: Path) -> tuple[AssetKind, AssetEntry]:
    """Classify a single image and build its manifest entry.

    Args:
        image: File found by a source
        public_root: Directory that the entry path is relative to

    Returns:
        Tuple of (kind, entry)
    """
    size = read_dimensions(image.path)
    kind = classify(image.relative_path, image.filename, size)

    entry = AssetEntry(
        id=asset_id(image.filename),
        path=public_path(image.path, public_root),
        tags=filename_tags(image.filename),
    )
    if kind is AssetKind.SPRITE:
        frame = infer_frame(image.filename, size)
        if frame is not None:
            entry["frame"] = frame

    logger.debug("%s -> %s (size=%s)", image.relative_path, kind.value, size)
    return kind, entry


def collect_files(config: ScanConfig) -> list[ImageFile]:
    """List files from every configured source, deduplicated and sorted."""
    files: dict[Path, ImageFile] = {}
    for source in config.sources():
        for image in source.list_files():
            files.setdefault(Path(os.path.abspath(image.path)), image)
    return sorted(files.values(), key=lambda f: f.relative_path)


def _describe_or_skip(
    image: ImageFile, public_root: Path
) -> tuple[ImageFile, AssetKind, AssetEntry] | None:
    try:
        kind, entry = describe_file(image, public_root)
    except Exception as e:
        # Log and continue so one bad file can't sink the scan
        logger.warning("Failed to process %s: %s", image.path, e)
        return None
    return image, kind, entry


def scan_assets(config: ScanConfig) -> Manifest:
    """Scan the asset folders and build a fresh manifest.

    Header reads are fanned out over a thread pool; results are sorted
    after collection so completion order never reaches the output.

    Entries with the same id in the same category collide: the file that
    sorts last by relative path wins and a warning is logged.

    Args:
        config: Scan configuration

    Returns:
        Manifest with backgrounds and players sorted by id. hazards and
        coins are always empty.
    """
    files = collect_files(config)
    public_root = config.resolved_public_root

    results: list[tuple[ImageFile, AssetKind, AssetEntry]] = []
    with ThreadPoolExecutor(max_workers=config.max_workers) as executor:
        futures = [executor.submit(_describe_or_skip, image, public_root) for image in files]
        for future in as_completed(futures):
            result = future.result()
            if result is not None:
                results.append(result)

    results.sort(key=lambda r: r[0].relative_path)

    by_kind: dict[AssetKind, dict[str, AssetEntry]] = {kind: {} for kind in AssetKind}
    for image, kind, entry in results:
        bucket = by_kind[kind]
        previous = bucket.get(entry["id"])
        if previous is not None:
            logger.warning(
                "Duplicate %s id %r: %s replaces %s",
                kind.value,
                entry["id"],
                entry["path"],
                previous["path"],
            )
        bucket[entry["id"]] = entry

    manifest = empty_manifest()
    manifest["backgrounds"] = sorted(by_kind[AssetKind.BACKGROUND].values(), key=lambda e: e["id"])
    manifest["players"] = sorted(by_kind[AssetKind.SPRITE].values(), key=lambda e: e["id"])

    logger.info(
        "Scanned %d files: %d backgrounds, %d players",
        len(files),
        len(manifest["backgrounds"]),
        len(manifest["players"]),
    )
    return manifest
