"""Assembly of renderable meshes from MDL mesh info and VTX strip data."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field

from potato.vtx import StripGroup, VTXFile
from potato.vvd import VVDFile

_MDL_EXTENSION = ".mdl"
_VVD_EXTENSION = ".vvd"
_VTX_EXTENSION = ".dx90.vtx"


class ModelError(Exception):
    """Raised when a model's files cannot be combined."""


@dataclass(frozen=True)
class MeshInfo:
    """Per-mesh data taken from the MDL file."""

    skinref_index: int
    vertex_offset: int


@dataclass
class Mesh:
    """Triangle-list indices into the model's vertex list, plus its texture slot."""

    texture_index: int
    indices: list[int] = field(default_factory=list)


def companion_paths(mdl_filename: str) -> tuple[str, str]:
    """Return the ``.vvd`` and ``.dx90.vtx`` paths that belong to an ``.mdl`` path."""
    ext_pos = mdl_filename.rfind(_MDL_EXTENSION)
    if ext_pos == -1:
        raise ModelError(f"no {_MDL_EXTENSION} extension in {mdl_filename!r}")
    stem = mdl_filename[:ext_pos]
    return stem + _VVD_EXTENSION, stem + _VTX_EXTENSION


def check_checksums(mdl_checksum: int, vtx: VTXFile, vvd: VVDFile) -> None:
    """Raise :class:`ModelError` unless the VTX and VVD files match the MDL."""
    if mdl_checksum != vtx.checksum:
        raise ModelError("Checksums don't match! (MDL <-> VTX)")
    if mdl_checksum != vvd.checksum:
        raise ModelError("Checksums don't match! (MDL <-> VVD)")


def _vertex_id(group: StripGroup, index_position: int) -> int:
    try:
        return group.vert_ids[group.indices[index_position]]
    except IndexError as exc:
        raise ModelError(f"strip index {index_position} is out of range") from exc


def _trilist(group: StripGroup, start: int, count: int, offset: int) -> list[int]:
    return [_vertex_id(group, i) + offset for i in range(start, start + count)]


def _tristrip(group: StripGroup, start: int, count: int, offset: int) -> list[int]:
    # Each position yields the triangle formed with the next two indices; triples
    # that would run past the group's index list are dropped.
    result: list[int] = []
    last = len(group.indices) - 2
    for i in range(start, min(start + count, last)):
        result.extend(_vertex_id(group, i + k) + offset for k in range(3))
    return result


def build_meshes(vtx: VTXFile, mesh_infos: Sequence[MeshInfo]) -> list[Mesh]:
    """Build meshes from the first body part, model and LOD of ``vtx``."""
    try:
        vtx_meshes = vtx.body_parts[0].models[0].lods[0].meshes
    except IndexError as exc:
        raise ModelError("VTX file has no body part, model or LOD") from exc
    if len(vtx_meshes) > len(mesh_infos):
        raise ModelError(
            f"VTX has {len(vtx_meshes)} meshes, MDL describes {len(mesh_infos)}"
        )

    meshes = []
    for vtx_mesh, info in zip(vtx_meshes, mesh_infos):
        mesh = Mesh(texture_index=info.skinref_index)
        for group in vtx_mesh.strip_groups:
            for strip in group.strips:
                if strip.is_trilist:
                    mesh.indices.extend(
                        _trilist(group, strip.index_offset, strip.num_indices, info.vertex_offset)
                    )
                elif strip.is_tristrip:
                    mesh.indices.extend(
                        _tristrip(group, strip.index_offset, strip.num_indices, info.vertex_offset)
                    )
        meshes.append(mesh)
    return meshes