"""
Configuration settings for the motion authenticity evaluator.
"""

import json
import math
from typing import Any, Dict


class EvaluatorConfig:
    """Configuration constants for path tracking and motion classification.

    Every value is an empirically chosen default. Instances accept keyword
    overrides, e.g. ``EvaluatorConfig(CV_THRESHOLD=0.3)``.
    """

    # Track geometry (in pixels)
    PATH_WIDTH = 44
    START_RADIUS = 32
    END_RADIUS = 36
    END_RADIUS_MARGIN = 4
    COLLISION_SLACK = 0.52  # fraction of PATH_WIDTH

    # Path generation
    PADDING_X = 70
    PADDING_Y = 60
    SEGMENTS = 12
    START_JITTER = 30
    STEP_JITTER = 90

    # Timing configurations (in milliseconds)
    DT_FLOOR = 0.1
    IDLE_PAUSE_MS = 50

    # Recording
    MIN_SAMPLES_FOR_COMPLETION = 12

    # Feature extraction
    VELOCITY_WINDOW = 6
    JITTER_PIXELS = 3
    DIRECTION_MIN_MAGNITUDE = 0.4
    DIRECTION_COSINE = 0.93

    # Classification thresholds
    VARIANCE_THRESHOLD = 0.01
    CV_THRESHOLD = 0.25
    DIRECTION_NOISE_THRESHOLD = 0.08
    JITTER_THRESHOLD = 0.10
    MIN_IDLE_PAUSES = 2
    MIN_SAMPLES = 70

    def __init__(self, **overrides: Any):
        for key, value in overrides.items():
            name = key.upper()
            if not self._is_setting(name):
                raise ValueError(f"Unknown setting: {key}")
            setattr(self, name, self._coerce(name, value))

    @classmethod
    def _coerce(cls, name: str, value: Any):
        """Parse an override as a finite number; integral values stay int for int settings."""
        if isinstance(value, bool) or not isinstance(value, (int, float, str)):
            raise ValueError(f"Setting {name} must be a number, got {value!r}")
        try:
            number = float(value)
        except ValueError:
            raise ValueError(f"Setting {name} must be a number, got {value!r}") from None
        if not math.isfinite(number):
            raise ValueError(f"Setting {name} must be finite, got {value!r}")
        if isinstance(getattr(cls, name), int) and number.is_integer():
            return int(number)
        return number

    @classmethod
    def _is_setting(cls, name: str) -> bool:
        return name in cls.setting_names()

    @classmethod
    def setting_names(cls):
        """Names of all tunable settings, in declaration order."""
        return [name for name in vars(cls) if name.isupper()]

    @classmethod
    def from_file(cls, path: str) -> 'EvaluatorConfig':
        """Load overrides from a JSON object file."""
        with open(path, 'r') as f:
            data = json.load(f)
        if not isinstance(data, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")
        return cls(**data)

    def to_dict(self) -> Dict[str, Any]:
        return {name: getattr(self, name) for name in self.setting_names()}

    @property
    def end_target_radius(self) -> float:
        """Effective end anchor radius, shrunk so the outer glow does not count."""
        return self.END_RADIUS - self.END_RADIUS_MARGIN

    @property
    def collision_distance(self) -> float:
        return self.PATH_WIDTH * self.COLLISION_SLACK
