"""Reader for VTX mesh strip files."""

from __future__ import annotations

import struct
from dataclasses import dataclass, field

STRIP_IS_TRILIST = 0x01
STRIP_IS_TRISTRIP = 0x02

_HEADER = struct.Struct("<IIHHIIIIII")
_BODY_PART = struct.Struct("<II")
_MODEL = struct.Struct("<II")
_LOD = struct.Struct("<IIf")
_MESH = struct.Struct("<IIB")
_STRIP_GROUP = struct.Struct("<IIIIIIB")
_VERTEX = struct.Struct("<3BBH3b")
_STRIP = struct.Struct("<IIIIhBII")

_VERT_ID_FIELD = 4


def _read(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    try:
        return layout.unpack_from(data, offset)
    except struct.error as exc:
        raise ValueError(f"VTX data truncated at offset {offset}") from exc


@dataclass
class Strip:
    num_indices: int
    index_offset: int
    flags: int

    @property
    def is_trilist(self) -> bool:
        return bool(self.flags & STRIP_IS_TRILIST)

    @property
    def is_tristrip(self) -> bool:
        return bool(self.flags & STRIP_IS_TRISTRIP)


@dataclass
class StripGroup:
    vert_ids: list[int] = field(default_factory=list)
    indices: list[int] = field(default_factory=list)
    strips: list[Strip] = field(default_factory=list)


@dataclass
class VTXMesh:
    strip_groups: list[StripGroup] = field(default_factory=list)


@dataclass
class LOD:
    meshes: list[VTXMesh] = field(default_factory=list)


@dataclass
class Model:
    lods: list[LOD] = field(default_factory=list)


@dataclass
class BodyPart:
    models: list[Model] = field(default_factory=list)


def _strip_group(data: bytes, base: int) -> StripGroup:
    num_verts, vert_ofs, num_indices, index_ofs, num_strips, strip_ofs, _flags = _read(
        _STRIP_GROUP, data, base
    )
    vert_ids = [
        _read(_VERTEX, data, base + vert_ofs + v * _VERTEX.size)[_VERT_ID_FIELD]
        for v in range(num_verts)
    ]
    indices = list(_read(struct.Struct(f"<{num_indices}H"), data, base + index_ofs))
    strips = []
    for s in range(num_strips):
        fields = _read(_STRIP, data, base + strip_ofs + s * _STRIP.size)
        strips.append(Strip(num_indices=fields[0], index_offset=fields[1], flags=fields[5]))
    return StripGroup(vert_ids=vert_ids, indices=indices, strips=strips)


def _mesh(data: bytes, base: int) -> VTXMesh:
    count, offset, _flags = _read(_MESH, data, base)
    return VTXMesh(
        [_strip_group(data, base + offset + i * _STRIP_GROUP.size) for i in range(count)]
    )


def _lod(data: bytes, base: int) -> LOD:
    count, offset, _switch = _read(_LOD, data, base)
    return LOD([_mesh(data, base + offset + i * _MESH.size) for i in range(count)])


def _model(data: bytes, base: int) -> Model:
    count, offset = _read(_MODEL, data, base)
    return Model([_lod(data, base + offset + i * _LOD.size) for i in range(count)])


def _body_part(data: bytes, base: int) -> BodyPart:
    count, offset = _read(_BODY_PART, data, base)
    return BodyPart([_model(data, base + offset + i * _MODEL.size) for i in range(count)])


@dataclass
class VTXFile:
    """Body parts, models, LODs, meshes and strip groups of a VTX file."""

    checksum: int
    body_parts: list[BodyPart] = field(default_factory=list)

    @classmethod
    def from_bytes(cls, data: bytes) -> VTXFile:
        header = _read(_HEADER, data, 0)
        checksum = header[5]
        num_body_parts, body_part_offset = header[8], header[9]
        return cls(
            checksum=checksum,
            body_parts=[
                _body_part(data, body_part_offset + i * _BODY_PART.size)
                for i in range(num_body_parts)
            ],
        )