"""Shared fixtures for building synthetic images and asset trees."""

import struct
import zlib
from collections.abc import Callable
from pathlib import Path

import pytest

from game_asset_prompter.core.types import AssetEntry, Manifest


def build_png(width: int, height: int) -> bytes:
    """Minimal PNG: signature plus an IHDR chunk."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 6, 0, 0, 0)
    crc = struct.pack(">I", zlib.crc32(b"IHDR" + ihdr) & 0xFFFFFFFF)
    return b"\x89PNG\r\n\x1a\n" + struct.pack(">I", len(ihdr)) + b"IHDR" + ihdr + crc


def build_jpeg(width: int, height: int, sof_marker: int = 0xC0) -> bytes:
    """Minimal JPEG: SOI, a JFIF APP0 segment, a frame header and EOI."""
    app0_payload = b"JFIF\x00" + b"\x01\x01" + b"\x00" + b"\x00\x01\x00\x01" + b"\x00\x00"
    app0 = b"\xff\xe0" + struct.pack(">H", len(app0_payload) + 2) + app0_payload

    components = b"\x01\x22\x00" + b"\x02\x11\x01" + b"\x03\x11\x01"
    sof_payload = struct.pack(">BHHB", 8, height, width, 3) + components
    sof = bytes([0xFF, sof_marker]) + struct.pack(">H", len(sof_payload) + 2) + sof_payload

    return b"\xff\xd8" + app0 + sof + b"\xff\xd9"


@pytest.fixture
def png_bytes() -> Callable[[int, int], bytes]:
    return build_png


@pytest.fixture
def jpeg_bytes() -> Callable[..., bytes]:
    return build_jpeg


@pytest.fixture
def write_file() -> Callable[[Path, bytes], Path]:
    """Write bytes to a path, creating parent folders."""

    def _write(path: Path, data: bytes) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_bytes(data)
        return path

    return _write


@pytest.fixture
def sample_manifest() -> Manifest:
    """Small manifest with entries pre-sorted by id."""
    backgrounds: list[AssetEntry] = [
        {"id": "city_bg", "path": "/assets/backgrounds/city_bg.png", "tags": ["city"]},
        {"id": "forest_bg", "path": "/assets/backgrounds/forest_bg.png", "tags": ["forest"]},
        {"id": "space_bg", "path": "/assets/backgrounds/space_bg.png", "tags": ["space"]},
    ]
    players: list[AssetEntry] = [
        {
            "id": "hero_run",
            "path": "/assets/sprites/hero_run.png",
            "tags": ["hero", "run"],
            "frame": {"cols": 6, "rows": 1},
        },
        {
            "id": "soldier_tilesheet",
            "path": "/assets/sprites/soldier_tilesheet.png",
            "tags": ["soldier"],
        },
        {
            "id": "zombie_walk",
            "path": "/assets/sprites/zombie_walk.png",
            "tags": ["zombie", "walk"],
            "frame": {"cols": 8, "rows": 1},
        },
    ]
    return Manifest(backgrounds=backgrounds, players=players, hazards=[], coins=[])
