"""Prompt to game config.

Merges the asset selection and the gameplay knobs for one prompt into a
single config record. Empty categories produce null asset references.
"""

import logging
from collections.abc import Sequence

from .core.types import AssetEntry, AssetRefs, Design, Frame, GameConfig, Manifest
from .knobs import derive_knobs
from .prompt import tokenize
from .selector import select_asset, select_assets

logger = logging.getLogger(__name__)

# Hand-placed sheets that never went through the scanner
TILESHEET_MARKER = "tilesheet"
TILESHEET_FRAME = Frame(cols=8, rows=1)


def find_by_id(entries: Sequence[AssetEntry], asset_id: str | None) -> AssetEntry | None:
    if not asset_id:
        return None
    for entry in entries:
        if entry.get("id") == asset_id:
            return entry
    return None


def player_frame(player: AssetEntry | None) -> Frame | None:
    """Frame grid for the chosen player.

    Uses the scanned grid when present. A player whose path mentions
    "tilesheet" but has no grid gets an 8x1 strip.
    """
    if player is None:
        return None
    frame = player.get("frame")
    if frame:
        return Frame(cols=frame["cols"], rows=frame["rows"])
    if TILESHEET_MARKER in str(player.get("path") or "").lower():
        return Frame(**TILESHEET_FRAME)
    return None


def _first(entries: Sequence[AssetEntry]) -> AssetEntry | None:
    return entries[0] if entries else None


def _select_with_design(
    manifest: Manifest, prompt: str, design: Design
) -> tuple[AssetEntry | None, AssetEntry | None]:
    backgrounds = manifest["backgrounds"]
    players = manifest["players"]
    chosen = design.get("chosen") or {}
    tags = design.get("tags") or {}
    buckets = (design.get("theme") or "", design.get("role") or "")

    background = find_by_id(backgrounds, chosen.get("backgroundId"))
    if background is None:
        background = select_asset(backgrounds, tags.get("bg") or [], prompt, buckets) or _first(backgrounds)

    player = find_by_id(players, chosen.get("playerId"))
    if player is None:
        player = select_asset(players, tags.get("player") or [], prompt, buckets) or _first(players)

    return background, player


def generate_config(prompt: str, manifest: Manifest, design: Design | None = None) -> GameConfig:
    """Build the game config for a prompt.

    Args:
        prompt: Free-text prompt, may be empty
        manifest: Asset catalog
        design: Optional design brief; its chosen ids and knobs take
            precedence over prompt scoring

    Returns:
        GameConfig with knobs and asset references
    """
    if design is not None:
        background, player = _select_with_design(manifest, prompt, design)
    else:
        selection = select_assets(manifest, prompt)
        background, player = selection.background, selection.player
        logger.debug(
            "Bias for %r: background=%s player=%s",
            prompt,
            selection.background_bias,
            selection.player_bias,
        )

    knobs = derive_knobs(tokenize(prompt))
    if design is not None and design.get("knobs"):
        knobs.update(design["knobs"])

    return GameConfig(
        **knobs,
        assets=AssetRefs(
            background=background["path"] if background else None,
            player=player["path"] if player else None,
            playerFrame=player_frame(player),
        ),
    )
