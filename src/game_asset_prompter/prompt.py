"""Prompt tokenizing and synonym bucket matching.

A bucket is a named group of synonyms for one theme or actor. A bucket is
present in a prompt when any of its synonyms appears as a whole token.
The tables here are fixed; selection and gameplay knobs both read them.
"""

import re
from collections.abc import Iterable
from types import MappingProxyType

NON_TOKEN_CHARS = re.compile(r"[^a-z0-9 ]")

BUCKETS = MappingProxyType(
    {
        # Themes
        "space": ("space", "galaxy", "cosmos", "star", "sci-fi", "scifi"),
        "night": ("night", "dark", "noir", "midnight"),
        "forest": ("forest", "woods", "trees", "grass"),
        "grass": ("grass", "field", "meadow", "plains"),
        "desert": ("desert", "sand", "dunes", "hot"),
        "fall": ("fall", "autumn", "orange", "leaf", "leaves"),
        "castle": ("castle", "medieval", "keep", "fortress", "stone"),
        "water": ("water", "ocean", "sea", "underwater", "river", "lake"),
        # Actors
        "zombie": ("zombie", "undead", "ghoul", "horror"),
        "soldier": ("soldier", "army", "military", "troop", "rifle", "gun"),
        "enemy": (
            "enemy", "alien", "ufo", "ship", "spaceship", "fighter", "plane",
            "jet", "bug", "monster", "boss", "drone", "bird",
        ),
    }
)

THEME_BUCKETS = ("space", "night", "forest", "grass", "desert", "fall", "castle", "water")
ACTOR_BUCKETS = ("zombie", "soldier", "enemy")

# Tags each actor bucket contributes to player selection
ACTOR_BIAS = MappingProxyType(
    {
        "zombie": ("zombie",),
        "soldier": ("soldier",),
        "enemy": ("enemy", "alien", "ship", "drone", "bird"),
    }
)


def normalize_prompt(prompt: str) -> str:
    return prompt.lower()


def tokenize(prompt: str) -> frozenset[str]:
    """Split a prompt into a set of lowercase word tokens.

    Everything outside ``[a-z0-9 ]`` becomes a space, so "sci-fi" yields
    the tokens "sci" and "fi".
    """
    return frozenset(NON_TOKEN_CHARS.sub(" ", normalize_prompt(prompt)).split())


def has_any(tokens: frozenset[str], words: Iterable[str]) -> bool:
    return any(word in tokens for word in words)


def present_buckets(tokens: frozenset[str], names: Iterable[str] | None = None) -> list[str]:
    """Return the names of buckets with a synonym in ``tokens``.

    Args:
        tokens: Prompt token set
        names: Buckets to test, in order; defaults to the whole table

    Returns:
        Present bucket names in table order
    """
    if names is None:
        names = BUCKETS.keys()
    return [name for name in names if has_any(tokens, BUCKETS[name])]


def active_synonyms(buckets: Iterable[str]) -> frozenset[str]:
    """Union of the synonyms of the given buckets."""
    return frozenset(word for name in buckets for word in BUCKETS[name])


def background_bias(tokens: frozenset[str]) -> list[str]:
    """Theme buckets present in the prompt, used to bias background choice."""
    return present_buckets(tokens, THEME_BUCKETS)


def player_bias(tokens: frozenset[str]) -> list[str]:
    """Actor tags implied by the prompt, used to bias player choice."""
    bias: list[str] = []
    for name in present_buckets(tokens, ACTOR_BUCKETS):
        bias.extend(ACTOR_BIAS[name])
    return bias
