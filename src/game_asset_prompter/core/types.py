"""Type definitions for asset manifests and generated game configs.

This module defines TypedDict classes that mirror the JSON schema structure
defined in schemas/manifest.schema.json, plus the records produced per
prompt at request time.
"""

from typing import Literal, NamedTuple, NotRequired, TypedDict


class Dimensions(NamedTuple):
    """Pixel size read from an image header."""

    width: int
    height: int


class Frame(TypedDict):
    """Tile-sheet grid of an animated sprite."""

    cols: int
    rows: int


class AssetEntry(TypedDict):
    """Individual classified asset within a manifest category."""

    id: str  # Filename without extension
    path: str  # Stable locator, e.g. "/assets/library/hero_8x1.png"
    tags: list[str]  # Normalized lowercase tags from the filename
    frame: NotRequired[Frame]  # Only on sprites with an inferred grid


class Manifest(TypedDict):
    """Complete catalog written by the scanner."""

    backgrounds: list[AssetEntry]
    players: list[AssetEntry]
    hazards: list[AssetEntry]  # Reserved, always empty
    coins: list[AssetEntry]  # Reserved, always empty


class GameplayConfig(TypedDict):
    """Gameplay knobs derived from a prompt."""

    speed: float
    gravity: float
    theme: Literal["light", "dark"]
    platformRate: float
    coinRate: float
    hazardRate: float
    jump: float


class AssetRefs(TypedDict):
    """Asset references attached to a generated config."""

    background: str | None
    player: str | None
    playerFrame: Frame | None


class GameConfig(GameplayConfig):
    """Gameplay knobs merged with the selected assets."""

    assets: AssetRefs


class DesignTags(TypedDict):
    bg: list[str]
    player: list[str]


class DesignChoice(TypedDict):
    backgroundId: str | None
    playerId: str | None


class Design(TypedDict):
    """Randomized design brief built from a prompt and the manifest."""

    promptUsed: str
    theme: str
    role: str
    tags: DesignTags
    knobs: GameplayConfig
    chosen: DesignChoice
