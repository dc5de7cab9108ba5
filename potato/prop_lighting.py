"""Static prop placement matrices and ambient-cube lighting."""

from __future__ import annotations

import math
from collections.abc import Sequence
from typing import Any

Vec3 = tuple[float, float, float]
Matrix4 = tuple[tuple[float, float, float, float], ...]

_WHITE: Vec3 = (1.0, 1.0, 1.0)
_CUBE_SIDES = 6


def transform_matrix(angles: Sequence[float], origin: Sequence[float]) -> Matrix4:
    """Build a column-major 4x4 matrix from pitch/yaw/roll degrees and a position.

    The result is a tuple of four columns, each a tuple of four floats.
    """
    pitch, yaw, roll = (math.radians(a) for a in angles[:3])
    sin_p, cos_p = math.sin(pitch), math.cos(pitch)
    sin_y, cos_y = math.sin(yaw), math.cos(yaw)
    sin_r, cos_r = math.sin(roll), math.cos(roll)

    return (
        (cos_p * cos_y, cos_p * sin_y, -sin_p, 0.0),
        (
            sin_p * sin_r * cos_y - cos_r * sin_y,
            sin_p * sin_r * sin_y + cos_r * cos_y,
            sin_r * cos_p,
            0.0,
        ),
        (
            sin_p * cos_r * cos_y + sin_r * sin_y,
            sin_p * cos_r * sin_y - sin_r * cos_y,
            cos_r * cos_p,
            0.0,
        ),
        (float(origin[0]), float(origin[1]), float(origin[2]), 1.0),
    )


def _unpack(sample: Any) -> tuple[float, float, float, int]:
    if hasattr(sample, "exponent"):
        return sample.r, sample.g, sample.b, sample.exponent
    r, g, b, exponent = sample
    return r, g, b, exponent


def ambient_from_cube(samples: Sequence[Any] | None) -> list[Vec3]:
    """Decode six RGB-exponent samples into linear colours.

    Each sample is ``(r, g, b, exponent)`` or an object with those attributes.
    ``None`` (no ambient cube for the leaf) gives six white colours.
    """
    if samples is None:
        return [_WHITE] * _CUBE_SIDES
    if len(samples) != _CUBE_SIDES:
        raise ValueError(f"an ambient cube has {_CUBE_SIDES} samples, got {len(samples)}")
    colors = []
    for sample in samples:
        r, g, b, exponent = _unpack(sample)
        scale = 2.0 ** exponent
        colors.append((r * scale, g * scale, b * scale))
    return colors