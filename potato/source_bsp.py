"""Pieces of VBSP map reading: static props, leaf lookup and material names."""

from __future__ import annotations

import struct
from collections.abc import Sequence
from dataclasses import dataclass, field

_UINT32 = struct.Struct("<I")
_MODEL_NAME_SIZE = 128
_PROP = struct.Struct("<3f3f3HBBIff3f")
_PROP_BASE_STRIDE = 56

_MAPS_PREFIX = "maps/"


class BSPError(Exception):
    """Raised when BSP data is malformed."""


@dataclass(frozen=True)
class StaticProp:
    origin: tuple[float, float, float]
    angles: tuple[float, float, float]
    model_index: int
    leaf_index: int
    leaf_count: int
    light_origin: tuple[float, float, float]


@dataclass
class StaticPropLump:
    """Model dictionary, leaf list and placed props of a static prop game lump."""

    model_names: list[str] = field(default_factory=list)
    leaves: list[int] = field(default_factory=list)
    props: list[StaticProp] = field(default_factory=list)


def _unpack(layout: struct.Struct, data: bytes, offset: int) -> tuple:
    try:
        return layout.unpack_from(data, offset)
    except struct.error as exc:
        raise BSPError(f"static prop lump truncated at offset {offset}") from exc


def _prop_stride(version: int) -> int:
    stride = _PROP_BASE_STRIDE
    if version > 4:
        stride += 4
    if version > 5:
        stride += 4
    return stride


def parse_static_prop_lump(data: bytes, version: int) -> StaticPropLump:
    """Parse the contents of a ``sprp`` game lump of the given version."""
    offset = 0
    (dict_count,) = _unpack(_UINT32, data, offset)
    offset += _UINT32.size

    names = []
    for _ in range(dict_count):
        raw = data[offset:offset + _MODEL_NAME_SIZE]
        if len(raw) < _MODEL_NAME_SIZE:
            raise BSPError(f"static prop lump truncated at offset {offset}")
        names.append(raw.split(b"\0", 1)[0].decode("latin-1"))
        offset += _MODEL_NAME_SIZE

    (leaf_count,) = _unpack(_UINT32, data, offset)
    offset += _UINT32.size
    leaves = list(_unpack(struct.Struct(f"<{leaf_count}H"), data, offset))
    offset += leaf_count * 2

    (prop_count,) = _unpack(_UINT32, data, offset)
    offset += _UINT32.size

    stride = _prop_stride(version)
    props = []
    for _ in range(prop_count):
        f = _unpack(_PROP, data, offset)
        props.append(
            StaticProp(
                origin=f[0:3],
                angles=f[3:6],
                model_index=f[6],
                leaf_index=f[7],
                leaf_count=f[8],
                light_origin=f[15:18],
            )
        )
        offset += stride
    return StaticPropLump(model_names=names, leaves=leaves, props=props)


@dataclass(frozen=True)
class Plane:
    normal: tuple[float, float, float]
    dist: float


@dataclass(frozen=True)
class Node:
    planenum: int
    children: tuple[int, int]


def find_leaf(
    nodes: Sequence[Node],
    planes: Sequence[Plane],
    headnode: int,
    position: Sequence[float],
) -> int:
    """Index of the leaf containing ``position``, walking down from ``headnode``."""
    i = headnode
    while i >= 0:
        try:
            node = nodes[i]
            plane = planes[node.planenum]
        except IndexError as exc:
            raise BSPError(f"node {i} refers outside the node or plane lists") from exc
        nx, ny, nz = plane.normal
        distance = nx * position[0] + ny * position[1] + nz * position[2] - plane.dist
        i = node.children[0] if distance >= 0 else node.children[1]
    return -(i + 1)


def extract_base_texture(material_name: str) -> str:
    """Strip the ``maps/<map>/`` prefix and cubemap coordinate suffixes from a material."""
    if not material_name.startswith(_MAPS_PREFIX):
        return material_name
    second_slash = material_name.find("/", len(_MAPS_PREFIX))
    if second_slash == -1:
        return material_name
    sub = material_name[second_slash + 1:]
    for _ in range(3):
        underscore = sub.rfind("_")
        if underscore != -1:
            sub = sub[:underscore]
    return sub