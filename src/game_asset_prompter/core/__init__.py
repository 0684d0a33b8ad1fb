"""Core utilities for manifest handling.

This package contains schema validation, type definitions,
and image header sniffing that are shared by the scanner
and the request-time selection code.
"""

from .metadata import read_dimensions, read_jpeg_size, read_png_size, sniff_dimensions
from .types import (
    AssetEntry,
    AssetRefs,
    Design,
    Dimensions,
    Frame,
    GameConfig,
    GameplayConfig,
    Manifest,
)
from .validator import validate_manifest, validate_manifest_with_error_details

__all__ = [
    "AssetEntry",
    "AssetRefs",
    "Design",
    "Dimensions",
    "Frame",
    "GameConfig",
    "GameplayConfig",
    "Manifest",
    "read_dimensions",
    "read_jpeg_size",
    "read_png_size",
    "sniff_dimensions",
    "validate_manifest",
    "validate_manifest_with_error_details",
]
