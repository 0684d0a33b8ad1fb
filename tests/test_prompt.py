"""Tests for prompt tokenizing and bucket matching."""

import pytest

from game_asset_prompter.prompt import (
    BUCKETS,
    THEME_BUCKETS,
    background_bias,
    player_bias,
    present_buckets,
    tokenize,
)


class TestTokenize:
    """Test token set construction."""

    def test_lowercases_and_splits(self) -> None:
        assert tokenize("A Scary  Zombie\tForest") == {"a", "scary", "zombie", "forest"}

    def test_punctuation_becomes_space(self) -> None:
        """Test that anything outside [a-z0-9 ] separates tokens."""
        assert tokenize("sci-fi, night!runner") == {"sci", "fi", "night", "runner"}

    def test_duplicates_collapse(self) -> None:
        assert tokenize("coin coin COIN") == {"coin"}

    def test_empty_prompt(self) -> None:
        assert tokenize("") == frozenset()
        assert tokenize("  !!  ") == frozenset()


class TestBuckets:
    """Test bucket detection."""

    def test_table_is_read_only(self) -> None:
        with pytest.raises(TypeError):
            BUCKETS["lava"] = ("lava",)  # type: ignore[index]

    def test_present_in_table_order(self) -> None:
        """Test that detected buckets follow table order, not prompt order."""
        assert present_buckets(tokenize("ocean at midnight in space")) == ["space", "night", "water"]

    def test_shared_synonym_hits_both_buckets(self) -> None:
        """Test that "grass" belongs to forest and grass."""
        assert present_buckets(tokenize("grass")) == ["forest", "grass"]

    def test_whole_tokens_only(self) -> None:
        """Test that bucket matching doesn't use substrings."""
        assert present_buckets(tokenize("starship seaside")) == []

    def test_no_signal(self) -> None:
        assert present_buckets(tokenize("")) == []


class TestBias:
    """Test bias tag derivation."""

    def test_background_bias_uses_theme_buckets(self) -> None:
        assert background_bias(tokenize("a scary zombie forest")) == ["forest"]
        assert set(background_bias(tokenize("zombie soldier"))) <= set(THEME_BUCKETS)

    def test_player_bias(self) -> None:
        assert player_bias(tokenize("a scary zombie forest")) == ["zombie"]
        assert player_bias(tokenize("army vs ufo")) == [
            "soldier",
            "enemy",
            "alien",
            "ship",
            "drone",
            "bird",
        ]

    def test_empty_prompt_has_no_bias(self) -> None:
        assert background_bias(tokenize("")) == []
        assert player_bias(tokenize("")) == []
