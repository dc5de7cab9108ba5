"""Ray/box intersection and evenly spaced debug colours."""

from __future__ import annotations

import math
from collections.abc import Sequence

Vec3 = tuple[float, float, float]
Color = tuple[float, float, float, float]

_SATURATION = 0.7
_VALUE = 0.9


def _div(a: float, b: float) -> float:
    if b == 0.0:
        if a == 0.0:
            return math.nan
        return math.copysign(math.inf, a) * math.copysign(1.0, b)
    return a / b


def _max(a: float, b: float) -> float:
    return b if a < b else a


def _min(a: float, b: float) -> float:
    return b if b < a else a


def ray_box_intersection(
    start: Sequence[float],
    end: Sequence[float],
    mins: Sequence[float],
    maxs: Sequence[float],
) -> Vec3 | None:
    """Entry point of the line from ``start`` towards ``end`` into an axis-aligned box.

    Returns ``None`` when the line misses the box or the box lies behind ``start``.
    """
    direction = [e - s for s, e in zip(start, end)]
    t1 = [_div(lo - s, d) for lo, s, d in zip(mins, start, direction)]
    t2 = [_div(hi - s, d) for hi, s, d in zip(maxs, start, direction)]
    for axis in range(3):
        if t1[axis] > t2[axis]:
            t1[axis], t2[axis] = t2[axis], t1[axis]

    tmin = _max(_max(t1[0], t1[1]), t1[2])
    tmax = _min(_min(t2[0], t2[1]), t2[2])

    if tmax > tmin and tmax > 0.0:
        return tuple(s + d * tmin for s, d in zip(start, direction))  # type: ignore[return-value]
    return None


def generate_unique_colors(count: int) -> list[Color]:
    """``count`` RGBA colours with hues spread evenly around the HSV wheel."""
    colors: list[Color] = []
    for i in range(count):
        hue = i / count
        c = _VALUE * _SATURATION
        x = c * (1.0 - abs(math.fmod(hue * 6.0, 2.0) - 1.0))
        m = _VALUE - c
        if hue < 1 / 6:
            rgb = (c + m, x + m, m)
        elif hue < 2 / 6:
            rgb = (x + m, c + m, m)
        elif hue < 3 / 6:
            rgb = (m, c + m, x + m)
        elif hue < 4 / 6:
            rgb = (m, x + m, c + m)
        elif hue < 5 / 6:
            rgb = (x + m, m, c + m)
        else:
            rgb = (c + m, m, x + m)
        colors.append((*rgb, 1.0))
    return colors