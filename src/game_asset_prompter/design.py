"""Randomized design briefs.

A design brief picks a theme, an actor role and concrete asset ids for a
prompt. Unlike plain selection it fills gaps at random: a prompt with no
theme words gets a theme drawn in proportion to how many backgrounds fit
it, and ties between fitting assets are broken by chance. Pass a seeded
``random.Random`` to make it reproducible.
"""

import logging
import random
from collections.abc import Sequence
from types import MappingProxyType

from .core.types import AssetEntry, Design, DesignChoice, DesignTags, Manifest
from .knobs import derive_knobs
from .prompt import has_any, tokenize

logger = logging.getLogger(__name__)

DESIGN_THEMES = MappingProxyType(
    {
        "space": ("space", "galaxy", "cosmos", "star", "sci-fi", "scifi"),
        "forest": ("forest", "woods", "trees", "grass"),
        "desert": ("desert", "sand", "dunes", "hot"),
        "castle": ("castle", "medieval", "stone"),
        "water": ("water", "ocean", "sea", "underwater"),
        "city": ("city", "urban", "street"),
        "fall": ("fall", "autumn", "orange", "leaf", "leaves"),
    }
)

DESIGN_ACTORS = MappingProxyType(
    {
        "soldier": ("soldier", "army", "military", "rifle", "troop", "gun"),
        "zombie": ("zombie", "undead", "ghoul", "horror"),
        "alien": (
            "alien", "ufo", "ship", "spaceship", "drone", "bug", "monster",
            "enemy", "bird", "robot",
        ),
    }
)

DEFAULT_ROLE = "enemy"


def _lower_tags(entry: AssetEntry) -> list[str]:
    return [str(tag).lower() for tag in entry.get("tags") or []]


def pick_theme(tokens: frozenset[str], backgrounds: Sequence[AssetEntry], rng: random.Random) -> str:
    """Pick the first theme named by the prompt, else a weighted random one.

    Each theme's weight is the number of backgrounds carrying one of its
    synonyms as a tag, with a floor of 1 so every theme stays possible.
    """
    for theme, words in DESIGN_THEMES.items():
        if has_any(tokens, words):
            return theme

    themes = list(DESIGN_THEMES)
    weights = [
        max(1, sum(1 for bg in backgrounds if any(tag in words for tag in _lower_tags(bg))))
        for words in DESIGN_THEMES.values()
    ]
    return rng.choices(themes, weights=weights)[0]


def pick_role(tokens: frozenset[str]) -> str | None:
    for role, words in DESIGN_ACTORS.items():
        if has_any(tokens, words):
            return role
    return None


def pick_background(
    backgrounds: Sequence[AssetEntry], theme: str, rng: random.Random
) -> AssetEntry | None:
    themed = [bg for bg in backgrounds if any(theme in tag for tag in _lower_tags(bg))]
    pool = themed or list(backgrounds)
    return rng.choice(pool) if pool else None


def pick_player(
    players: Sequence[AssetEntry], role: str | None, rng: random.Random
) -> AssetEntry | None:
    preferred = DESIGN_ACTORS[role] if role else ()
    matching = [pl for pl in players if any(tag in preferred for tag in _lower_tags(pl))]
    pool = matching or list(players)
    return rng.choice(pool) if pool else None


def build_design(prompt: str, manifest: Manifest, rng: random.Random | None = None) -> Design:
    """Build a design brief for a prompt.

    Args:
        prompt: Free-text prompt, may be empty
        manifest: Asset catalog
        rng: Random source; a fresh unseeded one if omitted

    Returns:
        Design with the chosen theme, role, asset ids and gameplay knobs
    """
    if rng is None:
        rng = random.Random()

    tokens = tokenize(prompt)
    backgrounds = manifest["backgrounds"]
    players = manifest["players"]

    theme = pick_theme(tokens, backgrounds, rng)
    role = pick_role(tokens)
    background = pick_background(backgrounds, theme, rng)
    player = pick_player(players, role, rng)

    logger.debug("Design for %r: theme=%s role=%s", prompt, theme, role)

    return Design(
        promptUsed=prompt,
        theme=theme,
        role=role or DEFAULT_ROLE,
        tags=DesignTags(bg=[theme], player=[role or DEFAULT_ROLE]),
        knobs=derive_knobs(tokens, theme=theme),
        chosen=DesignChoice(
            backgroundId=background["id"] if background else None,
            playerId=player["id"] if player else None,
        ),
    )
