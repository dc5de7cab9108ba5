"""Packing of 128x128 RGB lightmaps into one square atlas, with PNG output."""

from __future__ import annotations

import math
import os
import struct
import zlib
from collections.abc import Sequence
from dataclasses import dataclass, field
from typing import Any

LIGHTMAP_SIZE = 128
NUM_COMPONENTS = 3
LIGHTMAP_BYTES = LIGHTMAP_SIZE * LIGHTMAP_SIZE * NUM_COMPONENTS

_PNG_SIGNATURE = b"\x89PNG\r\n\x1a\n"


@dataclass(frozen=True)
class TextureTile:
    x: int
    y: int
    width: int
    height: int


def _image_bits(lightmap: Any) -> bytes:
    bits = getattr(lightmap, "image_bits", lightmap)
    bits = bytes(bits)
    if len(bits) < LIGHTMAP_BYTES:
        raise ValueError(f"a lightmap needs {LIGHTMAP_BYTES} bytes, got {len(bits)}")
    return bits


def _png_chunk(kind: bytes, payload: bytes) -> bytes:
    crc = zlib.crc32(kind + payload) & 0xFFFFFFFF
    return struct.pack(">I", len(payload)) + kind + payload + struct.pack(">I", crc)


@dataclass
class TextureAtlas:
    """A square RGB image holding lightmap tiles left to right, top to bottom."""

    width: int = 0
    height: int = 0
    tiles: list[TextureTile] = field(default_factory=list)
    buffer: bytearray = field(default_factory=bytearray)

    @classmethod
    def from_lightmaps(cls, lightmaps: Sequence[Any]) -> TextureAtlas:
        """Pack lightmaps (bytes, or objects with ``image_bits``) into an atlas."""
        if not lightmaps:
            return cls()

        grid = math.ceil(math.sqrt(len(lightmaps)))
        dim = grid * LIGHTMAP_SIZE
        atlas = cls(width=dim, height=dim, buffer=bytearray(dim * dim * NUM_COMPONENTS))

        row_bytes = LIGHTMAP_SIZE * NUM_COMPONENTS
        x_offset = y_offset = 0
        for lightmap in lightmaps:
            bits = _image_bits(lightmap)
            tile = TextureTile(x_offset, y_offset, LIGHTMAP_SIZE, LIGHTMAP_SIZE)
            atlas.tiles.append(tile)

            for row in range(tile.height):
                src = row * row_bytes
                dst = ((tile.y + row) * dim + tile.x) * NUM_COMPONENTS
                atlas.buffer[dst:dst + row_bytes] = bits[src:src + row_bytes]

            x_offset += LIGHTMAP_SIZE
            if x_offset >= dim:
                x_offset = 0
                y_offset += LIGHTMAP_SIZE
        return atlas

    def to_png(self) -> bytes:
        """Encode the atlas as an 8-bit RGB PNG."""
        if self.width == 0 or self.height == 0:
            raise ValueError("cannot encode an empty atlas")
        stride = self.width * NUM_COMPONENTS
        raw = b"".join(
            b"\x00" + bytes(self.buffer[y * stride:(y + 1) * stride])
            for y in range(self.height)
        )
        header = struct.pack(">IIBBBBB", self.width, self.height, 8, 2, 0, 0, 0)
        return (
            _PNG_SIGNATURE
            + _png_chunk(b"IHDR", header)
            + _png_chunk(b"IDAT", zlib.compress(raw))
            + _png_chunk(b"IEND", b"")
        )

    def save_png(self, path: str | os.PathLike[str]) -> None:
        """Write the atlas to ``path`` as a PNG file."""
        data = self.to_png()
        with open(path, "wb") as stream:
            stream.write(data)