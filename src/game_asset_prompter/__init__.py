"""Game Asset Prompter.

This package classifies loose image files into backgrounds and animated
sprites, writes them to a JSON manifest, and turns free-text prompts into
game configs that pick matching assets and tune gameplay.
"""

# Build-time scanning
from .classifier import AssetKind, classify
from .grid import infer_grid
from .scanner import ScanConfig, scan_assets
from .tagging import filename_tags

# Request-time selection
from .design import build_design
from .generator import generate_config
from .knobs import DEFAULT_GAMEPLAY, derive_knobs
from .prompt import tokenize
from .selector import SelectionResult, select_asset, select_assets

# Core utilities
from .core import AssetEntry, GameConfig, GameplayConfig, Manifest
from .core import sniff_dimensions, validate_manifest, validate_manifest_with_error_details
from .manifest import load_manifest, write_manifest

__version__ = "0.1.0"

__all__ = [
    # Scanning
    "AssetKind",
    "ScanConfig",
    "classify",
    "filename_tags",
    "infer_grid",
    "scan_assets",
    # Selection
    "DEFAULT_GAMEPLAY",
    "SelectionResult",
    "build_design",
    "derive_knobs",
    "generate_config",
    "select_asset",
    "select_assets",
    "tokenize",
    # Core utilities
    "AssetEntry",
    "GameConfig",
    "GameplayConfig",
    "Manifest",
    "load_manifest",
    "sniff_dimensions",
    "validate_manifest",
    "validate_manifest_with_error_details",
    "write_manifest",
]
