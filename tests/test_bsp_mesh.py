import math

import pytest

from potato.bsp_mesh import (
    displacement_positions,
    displacement_triangle_order,
    fan_indices,
    find_normal,
)


def _dot(a, b):
    return sum(x * y for x, y in zip(a, b))


def _sub(a, b):
    return tuple(x - y for x, y in zip(a, b))


def test_find_normal_is_unit_and_perpendicular():
    a, b, c = (1.0, 2.0, 3.0), (4.0, -1.0, 0.5), (-2.0, 0.0, 7.0)
    n = find_normal(a, b, c)
    assert math.isclose(math.sqrt(_dot(n, n)), 1.0)
    assert math.isclose(_dot(n, _sub(a, c)), 0.0, abs_tol=1e-9)
    assert math.isclose(_dot(n, _sub(b, c)), 0.0, abs_tol=1e-9)


def test_find_normal_flips_with_winding():
    a, b, c = (0.0, 0.0, 0.0), (5.0, 0.0, 0.0), (0.0, 3.0, 0.0)
    n1 = find_normal(a, b, c)
    n2 = find_normal(b, a, c)
    assert all(math.isclose(x, -y) for x, y in zip(n1, n2))


def test_find_normal_degenerate_raises():
    with pytest.raises(ValueError):
        find_normal((0, 0, 0), (1, 1, 1), (2, 2, 2))


def test_fan_triangle():
    assert fan_indices(0, 3) == [0, 1, 2]


@pytest.mark.parametrize("count", [3, 4, 7])
def test_fan_structure(count):
    base = 100
    indices = fan_indices(base, count)
    assert len(indices) == 3 * (count - 2)
    triangles = [indices[i:i + 3] for i in range(0, len(indices), 3)]
    assert all(t[0] == base for t in triangles)
    assert {i for t in triangles for i in t} == set(range(base, base + count))


def test_fan_too_few_vertices():
    assert fan_indices(5, 2) == []


CORNERS = [(0.0, 0.0, 0.0), (0.0, 64.0, 0.0), (64.0, 64.0, 0.0), (64.0, 0.0, 0.0)]


def _flat_offsets(wide, direction=(0.0, 0.0, 1.0), distance=0.0):
    return [(direction, distance)] * (wide * wide)


def test_displacement_flat_grid_spans_corners():
    positions = displacement_positions(CORNERS, CORNERS[0], 2, _flat_offsets(5))
    wide = 5
    assert len(positions) == wide * wide
    assert positions[0] == CORNERS[0]
    assert positions[wide - 1] == CORNERS[3]
    assert positions[wide * (wide - 1)] == CORNERS[1]
    assert positions[-1] == CORNERS[2]
    assert all(p[2] == 0.0 for p in positions)


def test_displacement_offsets_are_applied():
    positions = displacement_positions(CORNERS, CORNERS[0], 1, _flat_offsets(3, distance=5.0))
    flat = displacement_positions(CORNERS, CORNERS[0], 1, _flat_offsets(3))
    for raised, base in zip(positions, flat):
        assert raised[:2] == base[:2]
        assert raised[2] == base[2] + 5.0


def test_displacement_picks_nearest_corner_as_origin():
    rotated = CORNERS[1:] + CORNERS[:1]
    a = displacement_positions(CORNERS, CORNERS[0], 1, _flat_offsets(3))
    b = displacement_positions(rotated, CORNERS[0], 1, _flat_offsets(3))
    assert a == b


def test_displacement_bad_corner_count():
    with pytest.raises(ValueError):
        displacement_positions(CORNERS[:3], CORNERS[0], 1, _flat_offsets(3))


def test_displacement_too_few_offsets():
    with pytest.raises(ValueError):
        displacement_positions(CORNERS, CORNERS[0], 1, _flat_offsets(2))


def test_displacement_bad_power():
    with pytest.raises(ValueError):
        displacement_positions(CORNERS, CORNERS[0], 0, _flat_offsets(3))


def test_triangle_order_single_cell():
    assert displacement_triangle_order(2) == [0, 2, 3, 1, 0, 3]


@pytest.mark.parametrize("wide", [3, 5, 9])
def test_triangle_order_cells(wide):
    order = displacement_triangle_order(wide)
    assert len(order) == (wide - 1) ** 2 * 6
    assert all(0 <= i < wide * wide for i in order)
    for cell in range(0, len(order), 6):
        block = order[cell:cell + 6]
        top_left = min(block)
        assert set(block) == {top_left, top_left + 1, top_left + wide, top_left + wide + 1}


def test_triangle_order_too_small():
    with pytest.raises(ValueError):
        displacement_triangle_order(1)