"""Tests for manifest persistence and schema validation."""

import json
import logging
import tempfile
from pathlib import Path

import pytest
from jsonschema import ValidationError

from game_asset_prompter.core.validator import (
    entry_load_error,
    is_valid_frame,
    validate_manifest,
    validate_manifest_with_error_details,
)
from game_asset_prompter.manifest import (
    coerce_manifest,
    dump_manifest,
    empty_manifest,
    load_manifest,
    write_manifest,
)


class TestLoadManifest:
    """Test lenient manifest reading."""

    def test_missing_file_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            assert load_manifest(Path(tmpdir) / "manifest.json") == empty_manifest()

    def test_invalid_json_is_empty(self) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "manifest.json"
            path.write_text("{not json", encoding="utf-8")
            assert load_manifest(path) == empty_manifest()

    def test_reads_written_manifest(self, sample_manifest) -> None:
        with tempfile.TemporaryDirectory() as tmpdir:
            path = Path(tmpdir) / "assets" / "manifest.json"
            write_manifest(sample_manifest, path)
            assert load_manifest(path) == sample_manifest


class TestCoerceManifest:
    """Test shaping loose JSON into a manifest."""

    def test_non_list_categories_become_empty(self) -> None:
        manifest = coerce_manifest({"backgrounds": "oops", "players": [{"id": "a", "path": "/a.png", "tags": []}]})
        assert manifest["backgrounds"] == []
        assert manifest["players"] == [{"id": "a", "path": "/a.png", "tags": []}]
        assert manifest["hazards"] == []
        assert manifest["coins"] == []

    def test_non_object_items_dropped(self) -> None:
        manifest = coerce_manifest({"players": ["a.png", None, {"id": "b", "path": "/b.png", "tags": []}]})
        assert [e["id"] for e in manifest["players"]] == ["b"]

    def test_non_object_root(self) -> None:
        assert coerce_manifest([1, 2, 3]) == empty_manifest()

    @pytest.mark.parametrize(
        "entry",
        [
            {"id": "forest", "tags": ["forest"]},
            {"path": "/forest.png", "tags": ["forest"]},
            {"id": "", "path": "/forest.png", "tags": []},
            {"id": "forest", "path": 7, "tags": []},
            {"id": "forest", "path": "/forest.png", "tags": 5},
            {"id": "forest", "path": "/forest.png", "tags": ["forest", 3]},
        ],
    )
    def test_unusable_entries_dropped(self, entry, caplog) -> None:
        """Test that entries missing what selection needs are dropped."""
        keep = {"id": "city", "path": "/city.png", "tags": ["city"]}
        with caplog.at_level(logging.WARNING):
            manifest = coerce_manifest({"backgrounds": [entry, keep]})

        assert manifest["backgrounds"] == [keep]
        assert "Dropping backgrounds entry" in caplog.text

    @pytest.mark.parametrize(
        "frame",
        [{"cols": 8}, {"cols": 0, "rows": 1}, {"cols": "8", "rows": 1}, {"cols": True, "rows": 1}, None, [8, 1]],
    )
    def test_invalid_frame_removed(self, frame) -> None:
        """Test that a bad frame is removed while the entry is kept."""
        entry = {"id": "hero", "path": "/hero.png", "tags": ["hero"], "frame": frame}
        manifest = coerce_manifest({"players": [entry]})
        assert manifest["players"] == [{"id": "hero", "path": "/hero.png", "tags": ["hero"]}]

    def test_valid_frame_and_extra_keys_kept(self) -> None:
        entry = {"id": "Hero", "path": "/hero.png", "tags": ["Hero"], "frame": {"cols": 4, "rows": 2}, "note": "x"}
        assert coerce_manifest({"players": [entry]})["players"] == [entry]


class TestDumpManifest:
    """Test the on-disk text form."""

    def test_key_order_and_newline(self) -> None:
        text = dump_manifest(empty_manifest())
        assert text.endswith("}\n")
        assert list(json.loads(text)) == ["backgrounds", "players", "hazards", "coins"]


class TestValidateManifest:
    """Test JSON Schema validation."""

    def test_valid_manifest(self, sample_manifest) -> None:
        validate_manifest(sample_manifest)  # Should not raise
        assert validate_manifest_with_error_details(sample_manifest) == (True, None)

    def test_missing_category(self) -> None:
        manifest = empty_manifest()
        del manifest["coins"]  # type: ignore[misc]
        with pytest.raises(ValidationError):
            validate_manifest(manifest)

    def test_bad_frame_reports_location(self) -> None:
        manifest = empty_manifest()
        manifest["players"] = [{"id": "a", "path": "/a.png", "tags": [], "frame": {"cols": 0, "rows": 1}}]

        is_valid, error = validate_manifest_with_error_details(manifest)

        assert not is_valid
        assert error is not None
        assert error.startswith("Validation error at players -> 0 -> frame -> cols")


class TestEntryChecks:
    """Test the checks applied to entries read back from disk."""

    def test_usable_entry(self) -> None:
        assert entry_load_error({"id": "a", "path": "/a.png", "tags": []}) is None

    def test_missing_field_reported(self) -> None:
        assert entry_load_error({"id": "a", "tags": []}) == "entry: 'path' is a required property"

    def test_tag_location_reported(self) -> None:
        error = entry_load_error({"id": "a", "path": "/a.png", "tags": ["ok", 3]})
        assert error is not None
        assert error.startswith("tags -> 1:")

    def test_frame_uses_schema_definition(self) -> None:
        assert is_valid_frame({"cols": 8, "rows": 1})
        assert not is_valid_frame({"cols": 8, "rows": 1, "fps": 12})
        assert not is_valid_frame({"cols": -1, "rows": 1})
