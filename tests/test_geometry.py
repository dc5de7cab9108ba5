import math

import pytest

from potato.geometry import generate_unique_colors, ray_box_intersection

MINS = (0.0, 0.0, 0.0)
MAXS = (1.0, 1.0, 1.0)


def test_axis_aligned_ray_hits_near_face():
    point = ray_box_intersection((-10.0, 0.5, 0.5), (10.0, 0.5, 0.5), MINS, MAXS)
    assert point == pytest.approx((0.0, 0.5, 0.5))


def test_diagonal_ray_hits_corner():
    point = ray_box_intersection((-1.0, -1.0, -1.0), (2.0, 2.0, 2.0), MINS, MAXS)
    assert point == pytest.approx(MINS)


def test_reversed_ray_hits_far_face():
    point = ray_box_intersection((10.0, 0.5, 0.5), (-10.0, 0.5, 0.5), MINS, MAXS)
    assert point == pytest.approx((1.0, 0.5, 0.5))


def test_ray_missing_box():
    assert ray_box_intersection((-10.0, 5.0, 0.5), (10.0, 5.0, 0.5), MINS, MAXS) is None


def test_box_behind_start():
    assert ray_box_intersection((10.0, 0.5, 0.5), (20.0, 0.5, 0.5), MINS, MAXS) is None


def test_hit_point_lies_on_box_surface():
    start = (-3.0, 0.2, -4.0)
    end = (3.0, 0.9, 4.0)
    point = ray_box_intersection(start, end, MINS, MAXS)
    assert point is not None
    assert all(lo - 1e-9 <= p <= hi + 1e-9 for p, lo, hi in zip(point, MINS, MAXS))
    assert any(math.isclose(p, lo) or math.isclose(p, hi) for p, lo, hi in zip(point, MINS, MAXS))


def test_no_colors():
    assert generate_unique_colors(0) == []


@pytest.mark.parametrize("count", [1, 6, 13])
def test_colors_value_and_saturation(count):
    colors = generate_unique_colors(count)
    assert len(colors) == count
    for r, g, b, a in colors:
        assert a == 1.0
        assert max(r, g, b) == pytest.approx(0.9)
        assert min(r, g, b) == pytest.approx(0.9 * (1 - 0.7))


def test_colors_are_distinct():
    colors = generate_unique_colors(12)
    assert len(set(colors)) == 12