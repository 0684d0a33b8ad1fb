"""Asset sources for the directory scanner.

This package contains the Source interface and the filesystem
implementations for the library tree and the legacy flat folders.
"""

from .base import ImageFile, Source
from .filesystem import LegacyFolderSource, LibrarySource, validate_path_safety

__all__ = [
    "ImageFile",
    "LegacyFolderSource",
    "LibrarySource",
    "Source",
    "validate_path_safety",
]
