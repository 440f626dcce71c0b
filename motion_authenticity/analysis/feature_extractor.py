"""
Statistical feature extraction for recorded pointer traces.

Human pointer motion carries micro-structure that scripted motion lacks:
uneven speed, sub-pixel jitter, small course corrections and hesitations.
This module measures each of those on a completed trace.
"""

import math
from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional, Sequence

import numpy as np

from ..config.settings import EvaluatorConfig
from ..utils.motion_utils import DataValidator, Sample, VelocityCalculator


@dataclass(frozen=True)
class FeatureSet:
    """Features of one completed trace."""
    mean_velocity: float
    variance: float
    velocity_std: float
    velocity_cv: float
    jitter_ratio: float
    direction_noise: float
    idle_pauses: int
    sample_count: int
    jitter_count: int = 0

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class FeatureExtractor:
    """
    Computes velocity, jitter, direction-noise and pause features.

    All computations are pure functions of the trace. Inputs too short to
    measure a feature yield zero for that feature rather than an error.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def extract(self, trace: Iterable[Any]) -> FeatureSet:
        samples = DataValidator.to_samples(trace)
        cfg = self.config

        velocities = VelocityCalculator.windowed_velocities(
            samples, cfg.VELOCITY_WINDOW, cfg.DT_FLOOR
        )
        stats = VelocityCalculator.calculate_velocity_statistics(velocities)
        mean = stats['mean']
        variance = stats['variance']
        velocity_std = math.sqrt(max(variance, 0.0))
        velocity_cv = velocity_std / mean if mean > 0 else 0.0

        jitter_count = self._jitter_count(samples)
        jitter_ratio = jitter_count / max(1, len(samples) - 1)

        return FeatureSet(
            mean_velocity=mean,
            variance=variance,
            velocity_std=velocity_std,
            velocity_cv=velocity_cv,
            jitter_ratio=jitter_ratio,
            direction_noise=self._direction_noise(samples),
            idle_pauses=self._idle_pauses(samples),
            sample_count=len(samples),
            jitter_count=jitter_count
        )

    def _jitter_count(self, samples: Sequence[Sample]) -> int:
        """Consecutive pairs that moved less than JITTER_PIXELS on both axes."""
        if len(samples) < 2:
            return 0
        xs = np.array([s.x for s in samples], dtype=float)
        ys = np.array([s.y for s in samples], dtype=float)
        limit = self.config.JITTER_PIXELS
        small = (np.abs(np.diff(xs)) < limit) & (np.abs(np.diff(ys)) < limit)
        return int(np.count_nonzero(small))

    def _direction_noise(self, samples: Sequence[Sample]) -> float:
        """Fraction of consecutive movement vectors turning more than the cosine limit."""
        if len(samples) < 3:
            return 0.0
        xs = np.array([s.x for s in samples], dtype=float)
        ys = np.array([s.y for s in samples], dtype=float)
        vx = np.diff(xs)
        vy = np.diff(ys)
        mags = np.hypot(vx, vy)

        prev_mag, curr_mag = mags[:-1], mags[1:]
        # Near-stationary steps have no meaningful heading
        valid = (prev_mag >= self.config.DIRECTION_MIN_MAGNITUDE) & \
                (curr_mag >= self.config.DIRECTION_MIN_MAGNITUDE)
        comparisons = int(np.count_nonzero(valid))
        if comparisons == 0:
            return 0.0

        dot = vx[:-1] * vx[1:] + vy[:-1] * vy[1:]
        cosine = dot[valid] / (prev_mag[valid] * curr_mag[valid])
        noisy = int(np.count_nonzero(cosine < self.config.DIRECTION_COSINE))
        return noisy / comparisons

    def _idle_pauses(self, samples: Sequence[Sample]) -> int:
        return sum(1 for s in samples if s.dt > self.config.IDLE_PAUSE_MS)


def extract_features(trace: Iterable[Any],
                     config: Optional[EvaluatorConfig] = None) -> FeatureSet:
    """Simple interface to extract features from a trace."""
    return FeatureExtractor(config).extract(trace)
