"""
Test Hull Algorithms
====================

Gift wrapping, Quickhull and boundary edge extraction.

Usage:
    pytest test_hull_algorithms.py
"""

import pytest

from hullkit import (
    DegenerateInputError,
    InvalidInputError,
    Line,
    Point,
    find_hull,
    generate_random_points,
    get_convex_hull_lines,
    gift_wrapping,
    quick_hull,
)

HULL_ALGORITHMS = [quick_hull, gift_wrapping]

UNIT_SQUARE = [Point(0, 0), Point(1, 0), Point(1, 1), Point(0, 1)]

SCENARIO = [
    Point(0, 0),
    Point(-1, -1),
    Point(0, 4),
    Point(3, 2),
    Point(5, 6),
    Point(0, 1.5),
]
SCENARIO_HULL = {Point(-1, -1), Point(0, 4), Point(5, 6), Point(3, 2)}


def assert_closed_cycle(lines):
    """Each edge starts where the previous one ends, and the last returns to the first."""
    for current, following in zip(lines, lines[1:] + lines[:1]):
        assert current.end == following.start


def assert_convex_boundary(lines, points):
    """No input point lies strictly right of any boundary edge."""
    for line in lines:
        for point in points:
            assert line.side_of(point) >= 0


# ========== Shared properties ==========

@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_unit_square(hull_fn):
    hull = hull_fn(UNIT_SQUARE)
    assert len(hull) == 4
    assert set(hull) == set(UNIT_SQUARE)

    lines = get_convex_hull_lines(hull)
    assert len(lines) == 4
    assert_closed_cycle(lines)
    assert {line.start for line in lines} == set(UNIT_SQUARE)


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_interior_point_excluded(hull_fn):
    hull = hull_fn(UNIT_SQUARE + [Point(0.5, 0.5)])
    assert set(hull) == set(UNIT_SQUARE)
    assert Point(0.5, 0.5) not in hull


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_scenario_hull(hull_fn):
    hull = hull_fn(SCENARIO)
    assert set(hull) == SCENARIO_HULL
    assert len(hull) == len(SCENARIO_HULL)
    assert Point(0, 1.5) not in hull
    assert Point(0, 0) not in hull


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_accepts_coordinate_pairs(hull_fn):
    hull = hull_fn([(0, 0), (1, 0), (1, 1), (0, 1)])
    assert set(hull) == set(UNIT_SQUARE)


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_empty_input_rejected(hull_fn):
    with pytest.raises(InvalidInputError):
        hull_fn([])


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_malformed_point_rejected(hull_fn):
    with pytest.raises(InvalidInputError):
        hull_fn([(0, 0), (1, 2, 3)])


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_single_point(hull_fn):
    assert hull_fn([Point(2, 3)]) == [Point(2, 3)]
    assert hull_fn([Point(2, 3), Point(2, 3)]) == [Point(2, 3)]


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_input_not_mutated(hull_fn):
    points = list(SCENARIO)
    hull_fn(points)
    assert points == SCENARIO


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
@pytest.mark.parametrize("seed", [0, 1, 2, 3, 4])
def test_random_hull_is_subset_and_convex(hull_fn, seed):
    points = generate_random_points(30, seed=seed)
    hull = hull_fn(points)

    assert set(hull) <= set(points)

    lines = get_convex_hull_lines(hull)
    assert len(lines) == len(set(hull))
    assert_closed_cycle(lines)
    assert_convex_boundary(lines, points)


def test_point_on_hull_side_is_skipped():
    # (1, 0) sits on the bottom edge and comes first in the input
    points = [Point(1, 0), Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)]
    corners = {Point(0, 0), Point(2, 0), Point(2, 2), Point(0, 2)}

    for hull_fn in HULL_ALGORITHMS:
        hull = hull_fn(points)
        assert set(hull) == corners

        lines = get_convex_hull_lines(hull)
        assert len(lines) == 4
        assert_closed_cycle(lines)


@pytest.mark.parametrize("seed", [10, 11, 12])
def test_algorithms_agree_on_random_points(seed):
    points = generate_random_points(40, seed=seed)
    assert set(quick_hull(points)) == set(gift_wrapping(points))


# ========== Quickhull ==========

def test_quick_hull_contains_extremes():
    points = generate_random_points(25, seed=42)
    hull = quick_hull(points)

    leftest = min(points, key=lambda p: (p.x, p.y))
    rightest = max(points, key=lambda p: (p.x, p.y))
    assert hull[0] == leftest
    assert hull[1] == rightest


def test_quick_hull_extreme_tie_breaks():
    points = [Point(0, 3), Point(0, 1), Point(4, 0), Point(4, 2), Point(2, 5)]
    hull = quick_hull(points)
    assert hull[0] == Point(0, 1)
    assert hull[1] == Point(4, 2)


def test_find_hull_empty():
    base = Line(Point(0, 0), Point(1, 0))
    assert find_hull([], base) == []


def test_find_hull_nothing_left_of_base():
    base = Line(Point(0, 0), Point(4, 0))
    assert find_hull([Point(1, -1), Point(2, 0), Point(0, 0)], base) == []


def test_find_hull_farthest_first():
    base = Line(Point(0, 0), Point(4, 0))
    points = [Point(1, 1), Point(2, 3), Point(3, 1), Point(2, 1)]
    hull = find_hull(points, base)
    assert hull[0] == Point(2, 3)
    assert set(hull) == {Point(2, 3)}


def test_find_hull_first_maximum_wins():
    base = Line(Point(0, 0), Point(4, 0))
    hull = find_hull([Point(1, 2), Point(3, 2)], base)
    assert hull == [Point(1, 2), Point(3, 2)]


@pytest.mark.parametrize("hull_fn", HULL_ALGORITHMS)
def test_vertical_collinear_points_keep_endpoints(hull_fn):
    # leftest and rightest share an x coordinate
    points = [Point(0, 0), Point(0, 4), Point(0, 2), Point(0, 1)]
    assert hull_fn(points) == [Point(0, 0), Point(0, 4)]


# ========== Gift wrapping ==========

def test_gift_wrapping_starts_at_leftmost():
    hull = gift_wrapping(SCENARIO)
    assert hull[0] == Point(-1, -1)
    assert hull == [Point(-1, -1), Point(0, 4), Point(5, 6), Point(3, 2)]


def test_gift_wrapping_does_not_repeat_start():
    hull = gift_wrapping(UNIT_SQUARE)
    assert hull.count(Point(0, 0)) == 1


def test_gift_wrapping_collinear_first_edge_takes_farther_point():
    hull = gift_wrapping([Point(0, 0), Point(1, 1), Point(2, 2), Point(2, 0)])
    assert hull == [Point(0, 0), Point(2, 2), Point(2, 0)]


def test_gift_wrapping_two_points():
    assert gift_wrapping([Point(1, 1), Point(0, 0)]) == [Point(0, 0), Point(1, 1)]


def test_gift_wrapping_iteration_bound():
    with pytest.raises(DegenerateInputError):
        gift_wrapping(UNIT_SQUARE, max_iterations=2)


# ========== Edge extraction ==========

def test_edges_are_counter_clockwise():
    lines = get_convex_hull_lines([Point(1, 1), Point(0, 0), Point(0, 1), Point(1, 0)])
    assert Line(Point(0, 0), Point(1, 0)) in lines
    assert Line(Point(1, 0), Point(1, 1)) in lines
    assert Line(Point(1, 1), Point(0, 1)) in lines
    assert Line(Point(0, 1), Point(0, 0)) in lines


def test_edges_ignore_duplicate_vertices():
    lines = get_convex_hull_lines(UNIT_SQUARE + [Point(1, 1), Point(0, 0)])
    assert len(lines) == 4
    assert_closed_cycle(lines)


def test_edges_degenerate_hulls():
    assert get_convex_hull_lines([]) == []
    assert get_convex_hull_lines([Point(0, 0)]) == []

    lines = get_convex_hull_lines([Point(0, 0), Point(1, 1)])
    assert lines == [Line(Point(0, 0), Point(1, 1)), Line(Point(1, 1), Point(0, 0))]
