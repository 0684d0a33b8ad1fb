"""Prompt-driven asset scoring and selection.

Every entry in a manifest category is scored against the prompt and the
bias tags derived from it, and the best entry wins. Matching is loose on
purpose: a tag counts when it occurs anywhere inside the lowercased
prompt, so "star" matches "starship".
"""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, field

from .core.types import AssetEntry, Manifest
from .prompt import (
    BUCKETS,
    active_synonyms,
    background_bias,
    normalize_prompt,
    player_bias,
    present_buckets,
    tokenize,
)

# Credit for a term that belongs to a bucket present in the prompt
BUCKET_BONUS = 0.5


@dataclass
class SelectionResult:
    """Assets chosen for one prompt, plus the bias tags that steered them."""

    background: AssetEntry | None
    player: AssetEntry | None
    background_bias: list[str] = field(default_factory=list)
    player_bias: list[str] = field(default_factory=list)


def score_entry(
    tags: Iterable[str],
    bias: Iterable[str],
    prompt_text: str,
    synonyms: frozenset[str] = frozenset(),
) -> float:
    """Score one entry against a prompt.

    Entry tags and bias tags are concatenated, so a tag present in both
    counts twice. Each term earns 1 if it is a substring of the prompt and
    BUCKET_BONUS if it is a synonym of a bucket present in the prompt.

    Args:
        tags: Entry tags
        bias: Bias tags for this category
        prompt_text: Lowercased prompt
        synonyms: Synonyms of every bucket present in the prompt

    Returns:
        The entry's score
    """
    score = 0.0
    for term in [*tags, *bias]:
        term = str(term).lower()
        if not term:
            continue
        if term in prompt_text:
            score += 1
        if term in synonyms:
            score += BUCKET_BONUS
    return score


def select_asset(
    entries: Sequence[AssetEntry],
    bias: Iterable[str],
    prompt: str,
    extra_buckets: Iterable[str] = (),
) -> AssetEntry | None:
    """Pick the best-scoring entry from a category.

    The first entry wins ties, so with no prompt signal the result is the
    first entry of the (id-sorted) category.

    Args:
        entries: Manifest category
        bias: Bias tags for this category
        prompt: Raw prompt text
        extra_buckets: Buckets to treat as present regardless of the prompt

    Returns:
        The chosen entry, or None if the category is empty
    """
    if not entries:
        return None

    prompt_text = normalize_prompt(prompt)
    buckets = present_buckets(tokenize(prompt))
    buckets += [name for name in extra_buckets if name in BUCKETS and name not in buckets]
    synonyms = active_synonyms(buckets)
    bias = list(bias)

    best = entries[0]
    best_score = -1.0
    for entry in entries:
        score = score_entry(entry.get("tags") or [], bias, prompt_text, synonyms)
        if score > best_score:
            best, best_score = entry, score
    return best


def select_assets(manifest: Manifest, prompt: str) -> SelectionResult:
    """Choose a background and a player for a prompt.

    Args:
        manifest: Asset catalog
        prompt: Free-text prompt, may be empty

    Returns:
        SelectionResult; either asset is None when its category is empty
    """
    tokens = tokenize(prompt)
    bg_bias = background_bias(tokens)
    pl_bias = player_bias(tokens)

    return SelectionResult(
        background=select_asset(manifest["backgrounds"], bg_bias, prompt),
        player=select_asset(manifest["players"], pl_bias, prompt),
        background_bias=bg_bias,
        player_bias=pl_bias,
    )
