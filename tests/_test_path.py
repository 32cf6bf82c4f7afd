"""Test helpers.

These tests assume your repo layout is:
  project_root/
    src/
      imagerules/
    tests/
"""

import struct
import sys
import zlib
from pathlib import Path

import numpy as np
from PIL import Image

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))


def write_image(directory, width: int, height: int, name: str = "img.png") -> Path:
    """Write a solid gray width x height image into `directory` and return its path."""
    arr = np.full((height, width, 3), 160, dtype=np.uint8)
    path = Path(directory) / name
    Image.fromarray(arr, "RGB").save(path)
    return path


def _png_chunk(kind: bytes, data: bytes) -> bytes:
    return struct.pack(">I", len(data)) + kind + data + struct.pack(">I", zlib.crc32(kind + data) & 0xFFFFFFFF)


def write_png_header(directory, width: int, height: int, name: str = "huge.png") -> Path:
    """Write a PNG that declares width x height in its header but carries no pixel data."""
    ihdr = struct.pack(">IIBBBBB", width, height, 8, 2, 0, 0, 0)
    data = b"\x89PNG\r\n\x1a\n" + _png_chunk(b"IHDR", ihdr) + _png_chunk(b"IDAT", b"") + _png_chunk(b"IEND", b"")
    path = Path(directory) / name
    path.write_bytes(data)
    return path
