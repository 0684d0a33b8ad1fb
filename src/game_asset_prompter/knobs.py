"""Gameplay knob derivation.

Each knob starts at its default and is adjusted by rules keyed off whole
prompt tokens or present buckets. Rules run top to bottom and a later rule
overrides an earlier one, so for gravity the order is:

    default 0.7 -> space 0.4 -> water 0.5 -> heavy/hardcore 0.9

A prompt with both "space" and "ocean" gets water gravity, and "heavy"
beats both. A design brief passes its chosen theme instead, so its gravity
always matches that theme.
"""

from .core.types import GameplayConfig
from .prompt import has_any, present_buckets

DEFAULT_GAMEPLAY = GameplayConfig(
    speed=3,
    gravity=0.7,
    theme="light",
    platformRate=0.06,
    coinRate=0.05,
    hazardRate=0.03,
    jump=12,
)

FAST_WORDS = ("fast", "speed", "runner", "dash", "quick")
SLOW_WORDS = ("slow", "chill", "cozy")
HEAVY_WORDS = ("heavy", "hardcore")
DARK_WORDS = ("horror",)
PLATFORM_WORDS = ("platformer", "parkour", "jump")
COIN_WORDS = ("collect", "coin", "coins", "ring", "rings", "gems", "collectibles", "kids", "kid", "cozy")
HAZARD_WORDS = ("lava", "spike", "spikes", "enemy", "bullet", "trap", "hard", "hardcore", "difficult")
GENTLE_WORDS = ("kids", "kid", "cozy")
HIGH_JUMP_WORDS = ("parkour", "ninja", "high", "bouncy")

# Low gravity needs a minimum jump so platforms stay reachable
LOW_GRAVITY = 0.6
LOW_GRAVITY_MIN_JUMP = 13


def derive_knobs(tokens: frozenset[str], theme: str | None = None) -> GameplayConfig:
    """Map prompt tokens to gameplay knobs.

    Args:
        tokens: Prompt token set
        theme: Theme picked by the design step. When given, it alone
            decides space or water gravity and the space dark look,
            in place of the prompt's theme buckets

    Returns:
        A fresh GameplayConfig; all defaults when no rule fires
    """
    buckets = set(present_buckets(tokens))
    theme_buckets = {theme} if theme is not None else buckets
    knobs = GameplayConfig(**DEFAULT_GAMEPLAY)

    if has_any(tokens, FAST_WORDS):
        knobs["speed"] = 5
    elif has_any(tokens, SLOW_WORDS):
        knobs["speed"] = 2.5

    if "space" in theme_buckets:
        knobs["gravity"] = 0.4
    if "water" in theme_buckets:
        knobs["gravity"] = 0.5
    if has_any(tokens, HEAVY_WORDS):
        knobs["gravity"] = 0.9

    if "night" in buckets or "space" in theme_buckets or has_any(tokens, DARK_WORDS):
        knobs["theme"] = "dark"

    if has_any(tokens, PLATFORM_WORDS):
        knobs["platformRate"] = 0.08

    if has_any(tokens, COIN_WORDS):
        knobs["coinRate"] = 0.08

    if has_any(tokens, HAZARD_WORDS):
        knobs["hazardRate"] = 0.05
    elif has_any(tokens, GENTLE_WORDS):
        knobs["hazardRate"] = 0.015

    if has_any(tokens, HIGH_JUMP_WORDS):
        knobs["jump"] = 14
    if knobs["gravity"] < LOW_GRAVITY:
        knobs["jump"] = max(knobs["jump"], LOW_GRAVITY_MIN_JUMP)

    return knobs
