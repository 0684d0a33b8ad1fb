"""Base abstractions for asset sources.

This module defines the interface that every asset source implements so
that the scanner can treat the nested library tree and the legacy flat
folders uniformly.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ImageFile:
    """A raster file discovered by a source.

    Attributes:
        path: Path on disk, rooted like the source's assets directory
        relative_path: Posix path relative to the assets directory, used
            for folder hints
    """

    path: Path
    relative_path: str

    @property
    def filename(self) -> str:
        return self.path.name


class Source(ABC):
    """Abstract base class for all asset sources.

    Implementations decide which directories to look in and how deep to
    walk. Missing directories must yield an empty list rather than raise.
    """

    @abstractmethod
    def list_files(self) -> list[ImageFile]:
        """List raster files available from this source.

        Returns:
            Files sorted by relative path
        """
        pass
