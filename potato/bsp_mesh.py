"""Geometry helpers for building BSP face meshes: normals, fans and displacements."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

Vec3 = tuple[float, float, float]

_CORNERS = 4


def _sub(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] - b[0], a[1] - b[1], a[2] - b[2])


def _add(a: Sequence[float], b: Sequence[float]) -> Vec3:
    return (a[0] + b[0], a[1] + b[1], a[2] + b[2])


def _scale(a: Sequence[float], s: float) -> Vec3:
    return (a[0] * s, a[1] * s, a[2] * s)


def find_normal(a: Sequence[float], b: Sequence[float], c: Sequence[float]) -> Vec3:
    """Unit normal of triangle ``a, b, c`` as ``(b - c) x (a - c)``."""
    u = _sub(b, c)
    v = _sub(a, c)
    norm = (
        u[1] * v[2] - u[2] * v[1],
        u[2] * v[0] - u[0] * v[2],
        u[0] * v[1] - u[1] * v[0],
    )
    length = math.sqrt(norm[0] ** 2 + norm[1] ** 2 + norm[2] ** 2)
    if length == 0.0:
        raise ValueError("degenerate triangle has no normal")
    return (norm[0] / length, norm[1] / length, norm[2] / length)


def fan_indices(base_index: int, vertex_count: int) -> list[int]:
    """Triangle-list indices for a convex polygon drawn as a fan from its first vertex."""
    indices: list[int] = []
    for i in range(2, vertex_count):
        indices.extend((base_index, base_index + i - 1, base_index + i))
    return indices


def _unpack_offset(item: Any) -> tuple[Sequence[float], float]:
    if hasattr(item, "distance"):
        return item.pos, item.distance
    offset, distance = item
    return offset, distance


def _verts_wide(power: int) -> int:
    if power < 1:
        raise ValueError(f"displacement power must be at least 1, got {power}")
    return (2 << (power - 1)) + 1


def displacement_positions(
    corners: Sequence[Sequence[float]],
    start_position: Sequence[float],
    power: int,
    offsets: Sequence[Any],
) -> list[Vec3]:
    """Grid positions of a displacement surface, row by row.

    ``corners`` are the face's four vertices in edge order; the one nearest to
    ``start_position`` (by Manhattan distance) is the grid origin. ``offsets``
    holds one ``(direction, distance)`` pair (or an object with ``pos`` and
    ``distance``) per grid vertex.
    """
    if len(corners) != _CORNERS:
        raise ValueError(f"Bad displacement: {len(corners)} corners instead of {_CORNERS}")
    wide = _verts_wide(power)
    if len(offsets) < wide * wide:
        raise ValueError(f"displacement needs {wide * wide} offsets, got {len(offsets)}")

    low_base = tuple(float(v) for v in start_position)
    base_i = min(
        range(_CORNERS),
        key=lambda k: sum(abs(corners[k][axis] - low_base[axis]) for axis in range(3)),
    )

    high_base = tuple(corners[(base_i + 3) % _CORNERS])
    high_ray = _sub(corners[(base_i + 2) % _CORNERS], high_base)
    low_ray = _sub(corners[(base_i + 1) % _CORNERS], low_base)

    positions: list[Vec3] = []
    for y in range(wide):
        fy = y / (wide - 1)
        mid_base = _add(low_base, _scale(low_ray, fy))
        mid_ray = _sub(_add(high_base, _scale(high_ray, fy)), mid_base)
        for x in range(wide):
            fx = x / (wide - 1)
            offset, distance = _unpack_offset(offsets[x + y * wide])
            positions.append(
                _add(_add(mid_base, _scale(mid_ray, fx)), _scale(offset, distance))
            )
    return positions


def displacement_triangle_order(verts_wide: int) -> list[int]:
    """Grid indices of the triangles covering a ``verts_wide`` square grid.

    Each cell gives two triangles; the diagonal alternates with the parity of the
    cell's top-left index.
    """
    if verts_wide < 2:
        raise ValueError(f"a displacement grid is at least 2 wide, got {verts_wide}")
    order: list[int] = []
    for y in range(verts_wide - 1):
        for x in range(verts_wide - 1):
            i = x + y * verts_wide
            v1, v2, v3, v4 = i, i + 1, i + verts_wide, i + verts_wide + 1
            if i % 2:
                order.extend((v1, v3, v2, v2, v3, v4))
            else:
                order.extend((v1, v3, v4, v2, v1, v4))
    return order