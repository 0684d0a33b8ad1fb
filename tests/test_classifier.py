"""Tests for background/sprite classification."""

import pytest

from game_asset_prompter.classifier import AssetKind, classify, folder_hint, name_hint, size_hint
from game_asset_prompter.core.types import Dimensions

BACKGROUND = AssetKind.BACKGROUND
SPRITE = AssetKind.SPRITE


class TestPrecedence:
    """Test that signals are applied in order."""

    def test_folder_beats_filename(self) -> None:
        """Test that hero.png under backgrounds/ is a background."""
        assert classify("backgrounds/hero.png", "hero.png", None) is BACKGROUND

    def test_sprite_folder_beats_background_name(self) -> None:
        """Test that a sprite folder overrides a thematic filename."""
        assert classify("library/sprites/forest.png", "forest.png", Dimensions(2048, 1024)) is SPRITE

    def test_filename_beats_missing_size(self) -> None:
        """Test that castle_bg.png with no folder or size is a background."""
        assert classify("castle_bg.png", "castle_bg.png", None) is BACKGROUND

    def test_filename_beats_size(self) -> None:
        """Test that a sprite name wins over background-sized pixels."""
        assert classify("library/hero.png", "hero.png", Dimensions(1920, 1080)) is SPRITE

    def test_size_when_no_hints(self) -> None:
        """Test that geometry decides for neutral names."""
        assert classify("library/mystery.png", "mystery.png", Dimensions(1920, 1080)) is BACKGROUND
        assert classify("library/mystery.png", "mystery.png", Dimensions(64, 64)) is SPRITE

    def test_default_is_sprite(self) -> None:
        """Test that nothing to go on resolves to sprite."""
        assert classify("library/mystery.webp", "mystery.webp", None) is SPRITE
        assert classify("library/mystery.png", "mystery.png", Dimensions(820, 700)) is SPRITE


class TestFolderHint:
    """Test folder segment hints."""

    @pytest.mark.parametrize(
        "path,expected",
        [
            ("backgrounds/a.png", BACKGROUND),
            ("library/Background/a.png", BACKGROUND),
            ("library/bg/a.png", BACKGROUND),
            ("sprites/a.png", SPRITE),
            ("library/Sprite/a.png", SPRITE),
            ("library/misc/a.png", None),
        ],
    )
    def test_segments(self, path: str, expected: AssetKind | None) -> None:
        assert folder_hint(path) is expected

    def test_leftmost_segment_wins(self) -> None:
        """Test that the outermost hinting folder decides."""
        assert folder_hint("sprites/backgrounds/a.png") is SPRITE

    def test_filename_is_not_a_folder(self) -> None:
        """Test that the file's own name isn't read as a folder."""
        assert folder_hint("library/backgrounds.png") is None


class TestNameHint:
    """Test filename patterns."""

    @pytest.mark.parametrize(
        "filename",
        ["forest_01.png", "snowy_peaks.jpg", "darkCity.png", "sky.webp", "level_bg.png", "bg.png"],
    )
    def test_background_names(self, filename: str) -> None:
        assert name_hint(filename) is BACKGROUND

    @pytest.mark.parametrize(
        "filename",
        ["zombie_walk.png", "playerIdle.png", "Soldier.png", "enemy3.png", "run_tilesheet.png"],
    )
    def test_sprite_names(self, filename: str) -> None:
        assert name_hint(filename) is SPRITE

    def test_bg_needs_word_boundary(self) -> None:
        """Test that "bg" inside a longer word doesn't count."""
        assert name_hint("bgm_icon.png") is None

    def test_background_patterns_checked_first(self) -> None:
        """Test that a name with both kinds of word is a background."""
        assert name_hint("zombie_forest.png") is BACKGROUND


class TestSizeHint:
    """Test the geometry heuristic."""

    @pytest.mark.parametrize(
        "size",
        [
            Dimensions(1024, 100),  # wide
            Dimensions(300, 900),  # tall
            Dimensions(800, 100),  # aspect >= 1.6
            Dimensions(850, 850),  # area >= 900x700
        ],
    )
    def test_backgrounds(self, size: Dimensions) -> None:
        assert size_hint(size) is BACKGROUND

    def test_area_checked_before_sprite_band(self) -> None:
        """Test that an 800x800 image is a background by area."""
        assert size_hint(Dimensions(800, 800)) is BACKGROUND  # area 640000 >= 630000
        assert size_hint(Dimensions(700, 700)) is SPRITE

    def test_undecided(self) -> None:
        """Test that sizes between the bands give no hint."""
        assert size_hint(Dimensions(820, 700)) is None
        assert size_hint(None) is None
