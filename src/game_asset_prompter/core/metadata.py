"""Image header sniffing.

Reads pixel dimensions straight from PNG and JPEG headers without decoding
the image. Malformed or truncated input always resolves to ``None`` so that
callers can fall back to other heuristics.
"""

import logging
import struct
from pathlib import Path

from .types import Dimensions

logger = logging.getLogger(__name__)

PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"
JPEG_SOI = b"\xff\xd8"

# Start-of-frame markers carrying the image size (baseline, progressive)
JPEG_SOF_MARKERS = frozenset({0xC0, 0xC2})

PNG_TYPES = frozenset({"png"})
JPEG_TYPES = frozenset({"jpg", "jpeg"})

# Large EXIF/ICC segments can push the JPEG frame header well past the start
MAX_HEADER_BYTES = 512 * 1024


def read_png_size(data: bytes) -> Dimensions | None:
    """Read width and height from the IHDR chunk of a PNG.

    The IHDR chunk is always first, so the size sits at a fixed offset:
    8-byte signature, 4-byte chunk length, 4-byte chunk type, then width
    and height as big-endian uint32.

    Args:
        data: Leading bytes of the file

    Returns:
        Dimensions, or None if the data is not a usable PNG header
    """
    if len(data) < 24 or not data.startswith(PNG_SIGNATURE):
        return None

    width, height = struct.unpack(">II", data[16:24])
    if width == 0 or height == 0:
        return None
    return Dimensions(width, height)


def read_jpeg_size(data: bytes) -> Dimensions | None:
    """Scan JPEG marker segments for a start-of-frame header.

    Each segment is ``FF <marker> <len:u16be> <payload>`` where ``len``
    counts itself but not the marker. The SOF payload starts with a 1-byte
    sample precision followed by height and width as big-endian uint16.

    Args:
        data: Leading bytes of the file

    Returns:
        Dimensions, or None if no frame header is found before the data ends
    """
    if not data.startswith(JPEG_SOI):
        return None

    offset = 2
    end = len(data)
    while offset + 4 <= end:
        if data[offset] != 0xFF:
            return None

        marker = data[offset + 1]
        if marker == 0xFF:
            # Fill byte before the real marker
            offset += 1
            continue

        (length,) = struct.unpack(">H", data[offset + 2 : offset + 4])
        if length < 2 or offset + 2 + length > end:
            return None

        if marker in JPEG_SOF_MARKERS:
            if length < 7:
                return None
            height, width = struct.unpack(">HH", data[offset + 5 : offset + 9])
            if width == 0 or height == 0:
                return None
            return Dimensions(width, height)

        offset += 2 + length

    return None


def sniff_dimensions(data: bytes, file_type: str) -> Dimensions | None:
    """Read dimensions for a declared format family.

    Formats other than PNG and JPEG are reported as unknown.
    """
    file_type = file_type.lower().lstrip(".")
    if file_type in PNG_TYPES:
        return read_png_size(data)
    if file_type in JPEG_TYPES:
        return read_jpeg_size(data)
    return None


def read_dimensions(file_path: Path) -> Dimensions | None:
    """Read the header of an image file and sniff its dimensions.

    Args:
        file_path: Path to the image

    Returns:
        Dimensions, or None if the file can't be read or its header is unknown
    """
    file_type = file_path.suffix.lstrip(".").lower()
    if file_type not in PNG_TYPES | JPEG_TYPES:
        return None

    try:
        with file_path.open("rb") as f:
            data = f.read(MAX_HEADER_BYTES)
    except OSError as e:
        logger.warning("Could not read header of %s: %s", file_path, e)
        return None

    return sniff_dimensions(data, file_type)
