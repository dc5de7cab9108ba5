"""Reader for VVD vertex data files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

MAX_NUM_LODS = 8

_HEADER = struct.Struct(f"<4I{MAX_NUM_LODS}I4I")
_VERTEX = struct.Struct("<3f3bB3f3f2f")
_FIXUP = struct.Struct("<3I")


def _read(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    try:
        return layout.unpack_from(data, offset)
    except struct.error as exc:
        raise ValueError(f"VVD data truncated at offset {offset}") from exc


@dataclass(frozen=True)
class Vertex:
    position: tuple[float, float, float]
    normal: tuple[float, float, float]
    uv: tuple[float, float]


@dataclass
class VVDLod:
    vertices: list[Vertex] = field(default_factory=list)


def _vertex(data: bytes, start: int, index: int) -> Vertex:
    fields = _read(_VERTEX, data, start + index * _VERTEX.size)
    return Vertex(position=fields[7:10], normal=fields[10:13], uv=fields[13:15])


@dataclass
class VVDFile:
    """Per-LOD vertex lists of a VVD file."""

    checksum: int
    lods: list[VVDLod] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> VVDFile:
        fields = _read(_HEADER, data, 0)
        checksum, num_lods = fields[2], fields[3]
        lod_vertex_counts = fields[4:4 + MAX_NUM_LODS]
        num_fixups, fixup_start, vertex_start, _tangent_start = fields[4 + MAX_NUM_LODS:]

        lods = [VVDLod() for _ in range(num_lods)]

        if num_fixups == 0:
            if not lods:
                raise ValueError("VVD file without fixups has no LODs")
            lods[0].vertices.extend(
                _vertex(data, vertex_start, i) for i in range(lod_vertex_counts[0])
            )
        else:
            for f in range(num_fixups):
                lod, source_id, count = _read(_FIXUP, data, fixup_start + f * _FIXUP.size)
                if lod >= num_lods:
                    raise ValueError(f"fixup refers to LOD {lod}, file has {num_lods}")
                for i in range(count):
                    vertex = _vertex(data, vertex_start, source_id + i)
                    for target in reversed(lods[: lod + 1]):
                        target.vertices.append(vertex)

        return cls(checksum=checksum, lods=lods)