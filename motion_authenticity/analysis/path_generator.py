"""
Randomized track generation.

Produces the left-to-right polyline the subject has to follow. The first
point is the start anchor and the last point the end anchor.
"""

import random
from typing import Optional, Tuple

from ..config.settings import EvaluatorConfig
from ..utils.motion_utils import Point, clamp


class PathGenerator:
    """Generates a bounded, monotonic-in-x squiggle inside a surface."""

    def __init__(self, config: Optional[EvaluatorConfig] = None,
                 rng: Optional[random.Random] = None):
        self.config = config or EvaluatorConfig()
        self.rng = rng or random.Random()

    def _uniform(self, low: float, high: float) -> float:
        return self.rng.random() * (high - low) + low

    def generate(self, width: float, height: float) -> Tuple[Point, ...]:
        """
        Generate a new track for a surface of the given size.

        Args:
            width: Surface width in pixels
            height: Surface height in pixels

        Returns:
            Tuple of SEGMENTS + 1 points with strictly increasing x

        Raises:
            ValueError: If the bounds are non-positive or cannot hold the padding
        """
        cfg = self.config
        if width <= 0 or height <= 0:
            raise ValueError(f"Surface bounds must be positive, got {width}x{height}")
        if width <= 2 * cfg.PADDING_X or height <= 2 * cfg.PADDING_Y:
            raise ValueError(
                f"Surface {width}x{height} cannot hold padding "
                f"{cfg.PADDING_X}x{cfg.PADDING_Y} on both sides"
            )

        segments = cfg.SEGMENTS
        step_x = (width - 2 * cfg.PADDING_X) / segments

        x = cfg.PADDING_X
        y = height / 2 + self._uniform(-cfg.START_JITTER, cfg.START_JITTER)
        # Only binds on surfaces shorter than 2 * PADDING_Y + 2 * START_JITTER
        y = clamp(y, cfg.PADDING_Y, height - cfg.PADDING_Y)
        points = [Point(x, y)]

        for _ in range(segments):
            x += step_x
            y = clamp(y + self._uniform(-cfg.STEP_JITTER, cfg.STEP_JITTER),
                      cfg.PADDING_Y, height - cfg.PADDING_Y)
            points.append(Point(x, y))

        return tuple(points)


def generate_path(width: float, height: float,
                  config: Optional[EvaluatorConfig] = None,
                  rng: Optional[random.Random] = None) -> Tuple[Point, ...]:
    """Simple interface to generate a track."""
    return PathGenerator(config, rng).generate(width, height)
