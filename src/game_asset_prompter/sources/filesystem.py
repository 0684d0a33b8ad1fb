"""Filesystem asset sources.

This module provides Source implementations for the nested asset library
and for the older flat background/sprite folders.
"""

import logging
import os
from abc import abstractmethod
from collections.abc import Iterable
from pathlib import Path

from .base import ImageFile, Source

logger = logging.getLogger(__name__)

DEFAULT_EXTENSIONS = frozenset({".png", ".jpg", ".jpeg", ".webp"})


def validate_path_safety(path: Path, base_dir: Path) -> None:
    """Validate that a path stays within the base directory.

    This prevents symlinks from pulling files outside the asset tree into
    the manifest.

    Args:
        path: Path to validate
        base_dir: Base directory that path must be within

    Raises:
        ValueError: If path escapes the base directory
    """
    resolved_path = path.resolve()
    resolved_base = base_dir.resolve()

    if not resolved_path.is_relative_to(resolved_base):
        raise ValueError(f"Path {path} escapes base directory {base_dir}")


class _DirectorySource(Source):
    """Shared filtering for sources rooted at one directory."""

    def __init__(
        self,
        directory: Path,
        assets_dir: Path,
        extensions: Iterable[str] = DEFAULT_EXTENSIONS,
    ):
        """Initialize the source.

        Args:
            directory: Directory to list
            assets_dir: Root that relative paths are computed against
            extensions: Accepted file suffixes, compared case-insensitively
        """
        self.directory = directory
        self.assets_dir = assets_dir
        self.extensions = frozenset(ext.lower() for ext in extensions)

    def _accept(self, file_path: Path) -> ImageFile | None:
        if file_path.name.startswith("."):
            return None
        if file_path.suffix.lower() not in self.extensions:
            return None

        try:
            validate_path_safety(file_path, self.assets_dir)
            if not file_path.is_file():
                return None
        except (OSError, ValueError) as e:
            logger.warning("Skipping %s: %s", file_path, e)
            return None

        relative_path = file_path.relative_to(self.assets_dir).as_posix()
        return ImageFile(path=file_path, relative_path=relative_path)

    @abstractmethod
    def _filenames(self) -> Iterable[Path]:
        pass

    def list_files(self) -> list[ImageFile]:
        if not self.directory.is_dir():
            logger.debug("Asset directory missing, treating as empty: %s", self.directory)
            return []

        files = []
        for file_path in self._filenames():
            image = self._accept(file_path)
            if image is not None:
                files.append(image)
        return sorted(files, key=lambda f: f.relative_path)


class LibrarySource(_DirectorySource):
    """Free-form library tree, walked recursively.

    Example:
        >>> source = LibrarySource(Path('assets/library'), Path('assets'))
        >>> files = source.list_files()
    """

    def _filenames(self) -> Iterable[Path]:
        def on_error(error: OSError) -> None:
            logger.warning("Cannot read directory %s: %s", error.filename, error)

        for dirpath, dirnames, filenames in os.walk(self.directory, onerror=on_error):
            # Skip hidden folders
            dirnames[:] = [d for d in dirnames if not d.startswith(".")]
            for filename in filenames:
                yield Path(dirpath) / filename


class LegacyFolderSource(_DirectorySource):
    """Flat legacy folder such as ``assets/backgrounds``; not recursive."""

    def _filenames(self) -> Iterable[Path]:
        try:
            return list(self.directory.iterdir())
        except OSError as e:
            logger.warning("Cannot read directory %s: %s", self.directory, e)
            return []
