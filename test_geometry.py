"""Tests for the geometric containment and distance helpers."""

import math
import random

from motion_authenticity.utils.motion_utils import GeometryUtils, Point, clamp


def test_point_in_circle_includes_boundary():
    center = Point(100, 100)
    assert GeometryUtils.point_in_circle(Point(100, 100), center, 32)
    assert GeometryUtils.point_in_circle(Point(132, 100), center, 32)
    assert not GeometryUtils.point_in_circle(Point(132.5, 100), center, 32)


def test_point_in_circle_without_center():
    assert not GeometryUtils.point_in_circle(Point(0, 0), None, 10)


def test_distance_to_segment_projects_inside():
    a, b = Point(0, 0), Point(100, 0)
    assert GeometryUtils.distance_to_segment(Point(50, 30), a, b) == 30


def test_distance_to_segment_clamps_to_endpoints():
    a, b = Point(0, 0), Point(100, 0)
    # Beyond the end the closest point is b itself, not the infinite line
    assert GeometryUtils.distance_to_segment(Point(130, 40), a, b) == 50
    assert GeometryUtils.distance_to_segment(Point(-30, -40), a, b) == 50


def test_distance_to_degenerate_segment_is_point_distance():
    a = Point(10, 10)
    p = Point(13, 14)
    assert GeometryUtils.distance_to_segment(p, a, a) == 5
    assert GeometryUtils.distance_to_segment(p, a, a) == GeometryUtils.calculate_distance(p, a)


def test_segment_distance_never_exceeds_endpoint_distance():
    rng = random.Random(7)
    for _ in range(500):
        a = Point(rng.uniform(-200, 200), rng.uniform(-200, 200))
        b = Point(rng.uniform(-200, 200), rng.uniform(-200, 200))
        p = Point(rng.uniform(-300, 300), rng.uniform(-300, 300))
        d = GeometryUtils.distance_to_segment(p, a, b)
        assert d <= p.distance_to(a) + 1e-9
        assert d <= p.distance_to(b) + 1e-9


def test_distance_to_polyline_uses_nearest_segment():
    points = [Point(0, 0), Point(100, 0), Point(100, 100)]
    assert GeometryUtils.distance_to_polyline(Point(50, 10), points) == 10
    assert GeometryUtils.distance_to_polyline(Point(120, 60), points) == 20
    assert math.isclose(GeometryUtils.distance_to_polyline(Point(130, -40), points), 50)


def test_distance_to_polyline_needs_a_segment():
    assert GeometryUtils.distance_to_polyline(Point(0, 0), [Point(1, 1)]) == math.inf


def test_clamp():
    assert clamp(5, 0, 10) == 5
    assert clamp(-1, 0, 10) == 0
    assert clamp(11, 0, 10) == 10
