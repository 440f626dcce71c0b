"""
Shared utilities for pointer trace recording and analysis.

This module provides the value types and the geometric and velocity
calculations used by the recorder, the path generator and the feature
extractor.
"""

import math
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple

import numpy as np


@dataclass(frozen=True)
class Point:
    """Represents a 2D point on the tracking surface."""
    x: float
    y: float

    def __repr__(self):
        return f"Point({self.x:.1f}, {self.y:.1f})"

    def distance_to(self, other: 'Point') -> float:
        """Calculate Euclidean distance to another point."""
        return math.hypot(self.x - other.x, self.y - other.y)


@dataclass(frozen=True)
class Sample:
    """One recorded pointer position.

    ``dt`` is the time since the previous sample and ``elapsed`` the
    cumulative time since recording began, both in milliseconds.
    ``elapsed`` is None for traces imported without cumulative timestamps.
    """
    x: float
    y: float
    dt: float
    elapsed: Optional[float] = None

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> 'Sample':
        elapsed = data.get('elapsed')
        return cls(
            float(data['x']),
            float(data['y']),
            float(data['dt']),
            None if elapsed is None else float(elapsed)
        )

    def to_point(self) -> Point:
        return Point(self.x, self.y)


def clamp(value: float, low: float, high: float) -> float:
    return max(low, min(high, value))


class GeometryUtils:
    """Stateless containment and distance tests against the track."""

    @staticmethod
    def calculate_distance(p1: Point, p2: Point) -> float:
        """Calculate Euclidean distance between two points."""
        return math.hypot(p1.x - p2.x, p1.y - p2.y)

    @staticmethod
    def point_in_circle(point: Point, center: Optional[Point], radius: float) -> bool:
        """True iff ``point`` lies inside or on the circle."""
        if center is None:
            return False
        dx = point.x - center.x
        dy = point.y - center.y
        return dx * dx + dy * dy <= radius * radius

    @staticmethod
    def distance_to_segment(point: Point, seg_start: Point, seg_end: Point) -> float:
        """Distance from point to the closed segment [seg_start, seg_end]."""
        dx = seg_end.x - seg_start.x
        dy = seg_end.y - seg_start.y
        if dx == 0 and dy == 0:
            return GeometryUtils.calculate_distance(point, seg_start)

        t = ((point.x - seg_start.x) * dx + (point.y - seg_start.y) * dy) / (dx * dx + dy * dy)
        t = clamp(t, 0.0, 1.0)
        proj_x = seg_start.x + t * dx
        proj_y = seg_start.y + t * dy
        return math.hypot(point.x - proj_x, point.y - proj_y)

    @staticmethod
    def distance_to_polyline(point: Point, points: Sequence[Point]) -> float:
        """Minimum distance from point to any segment of the polyline."""
        best = math.inf
        for i in range(1, len(points)):
            best = min(best, GeometryUtils.distance_to_segment(point, points[i-1], points[i]))
        return best


class VelocityCalculator:
    """Utility class for velocity calculations over a trace."""

    @staticmethod
    def windowed_velocities(samples: Sequence[Sample], window: int,
                            dt_floor: float = 0.1) -> np.ndarray:
        """Velocities between each sample and the one ``window`` steps earlier.

        Uses the elapsed-time difference when both samples carry one,
        otherwise the sum of the floored per-step ``dt`` across the window.
        Windows with a non-positive time delta are skipped.
        """
        n = len(samples)
        if window < 1 or n <= window:
            return np.empty(0)

        xs = np.array([s.x for s in samples], dtype=float)
        ys = np.array([s.y for s in samples], dtype=float)
        dts = np.array([s.dt for s in samples], dtype=float)
        elapsed = np.array(
            [np.nan if s.elapsed is None else s.elapsed for s in samples],
            dtype=float
        )

        # Sum over samples i-window+1..i of the floored dt
        csum = np.concatenate(([0.0], np.cumsum(np.maximum(dts, dt_floor))))
        summed = csum[window + 1:] - csum[1:n - window + 1]

        spans = elapsed[window:] - elapsed[:-window]
        spans = np.where(np.isnan(spans), summed, spans)

        distances = np.hypot(xs[window:] - xs[:-window], ys[window:] - ys[:-window])
        valid = spans > 0
        return distances[valid] / spans[valid]

    @staticmethod
    def calculate_velocity_statistics(velocities: np.ndarray) -> Dict[str, float]:
        """Mean and population variance of a velocity series."""
        if len(velocities) == 0:
            return {'mean': 0.0, 'variance': 0.0}

        mean = float(np.mean(velocities))
        variance = float(np.mean((velocities - mean) ** 2))
        return {'mean': mean, 'variance': variance}


class DataValidator:
    """Utility class for normalising trace data from outside the recorder."""

    @staticmethod
    def to_samples(trace: Iterable[Any]) -> Tuple[Sample, ...]:
        """Accept Sample objects or mappings with x, y, dt and optional elapsed."""
        samples: List[Sample] = []
        for item in trace:
            if isinstance(item, Sample):
                samples.append(item)
            elif isinstance(item, Mapping):
                samples.append(Sample.from_mapping(item))
            else:
                raise TypeError(f"Unsupported trace item: {item!r}")
        return tuple(samples)

    @staticmethod
    def to_points(points: Iterable[Any]) -> Tuple[Point, ...]:
        """Accept Point objects, (x, y) pairs or mappings with x and y."""
        result = []
        for p in points:
            if isinstance(p, Point):
                result.append(p)
            elif isinstance(p, Mapping):
                result.append(Point(float(p['x']), float(p['y'])))
            else:
                x, y = p
                result.append(Point(float(x), float(y)))
        return tuple(result)
