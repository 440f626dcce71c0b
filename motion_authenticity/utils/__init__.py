"""
Utilities package for trace recording and analysis.

This package provides the shared value types, geometry and velocity helpers
used across the recorder, the path generator and the feature extractor.
"""

from .motion_utils import (
    Point,
    Sample,
    GeometryUtils,
    VelocityCalculator,
    DataValidator,
    clamp
)

__all__ = [
    'Point',
    'Sample',
    'GeometryUtils',
    'VelocityCalculator',
    'DataValidator',
    'clamp'
]
