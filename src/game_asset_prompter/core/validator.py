"""JSON Schema validation for asset manifests.

This module loads the formal JSON Schema and validates manifests before
output. It also checks single entries read back from disk, where the rules
are looser: only what selection and config generation rely on is enforced.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

import jsonschema
from jsonschema import Draft202012Validator, ValidationError
from jsonschema.exceptions import best_match

from .types import Manifest

# Path to the schema file shipped as package data
# src/game_asset_prompter/core/validator.py -> src/game_asset_prompter/schemas/
SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "manifest.schema.json"

# Fields every loaded entry needs. Extra keys and tag spelling are tolerated.
LOADABLE_ENTRY_SCHEMA: dict[str, Any] = {
    "type": "object",
    "required": ["id", "path", "tags"],
    "properties": {
        "id": {"type": "string", "minLength": 1},
        "path": {"type": "string", "minLength": 1},
        "tags": {"type": "array", "items": {"type": "string"}},
    },
}


def load_schema() -> dict[str, Any]:
    """Load the JSON schema from disk.

    Returns:
        Dictionary containing the JSON Schema.

    Raises:
        FileNotFoundError: If schema file doesn't exist
        json.JSONDecodeError: If schema is invalid JSON
    """
    if not SCHEMA_PATH.exists():
        raise FileNotFoundError(f"Schema file not found: {SCHEMA_PATH}")

    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        return json.load(f)  # type: ignore[no-any-return]


def _error_location(error: ValidationError, root: str) -> str:
    return " -> ".join(str(p) for p in error.path) if error.path else root


@lru_cache(maxsize=None)
def _entry_validator() -> Draft202012Validator:
    return Draft202012Validator(LOADABLE_ENTRY_SCHEMA)


@lru_cache(maxsize=None)
def _frame_validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema()["$defs"]["frame"])


def entry_load_error(entry: Any) -> str | None:
    """Check that a loaded entry can be selected and referenced.

    Args:
        entry: One item of a manifest category, as read from JSON

    Returns:
        A short description of the first problem, or None if usable
    """
    error = best_match(_entry_validator().iter_errors(entry))
    if error is None:
        return None
    return f"{_error_location(error, 'entry')}: {error.message}"


def is_valid_frame(frame: Any) -> bool:
    """Check a frame grid against the manifest schema's frame definition."""
    return _frame_validator().is_valid(frame)


def validate_manifest(manifest: Manifest) -> None:
    """Validate a manifest against the JSON Schema.

    Args:
        manifest: The manifest dictionary to validate

    Raises:
        ValidationError: If the manifest doesn't conform to the schema
        FileNotFoundError: If schema file is missing
        json.JSONDecodeError: If schema is invalid
    """
    schema = load_schema()
    jsonschema.validate(instance=manifest, schema=schema)


def validate_manifest_with_error_details(manifest: Manifest) -> tuple[bool, str | None]:
    """Validate a manifest and return detailed error information.

    Args:
        manifest: The manifest dictionary to validate

    Returns:
        Tuple of (is_valid, error_message). error_message is None if valid.
    """
    try:
        validate_manifest(manifest)
        return True, None
    except ValidationError as e:
        error_msg = f"Validation error at {_error_location(e, 'root')}: {e.message}"
        if e.instance:
            error_msg += f"\nInvalid value: {e.instance}"
        return False, error_msg
    except (FileNotFoundError, json.JSONDecodeError) as e:
        return False, f"Schema error: {e}"
