"""
Motion Authenticity Package
Tells human pointer motion apart from scripted motion by tracking a randomized path.
"""

from .core.listener import MotionListener
from .core.recorder import TraceRecorder
from .analysis.classifier import Classifier, Verdict
from .analysis.feature_extractor import FeatureExtractor, FeatureSet
from .analysis.path_generator import PathGenerator
from .config.settings import EvaluatorConfig

__version__ = "1.0.0"
__all__ = [
    "MotionListener",
    "TraceRecorder",
    "Classifier",
    "Verdict",
    "FeatureExtractor",
    "FeatureSet",
    "PathGenerator",
    "EvaluatorConfig",
]
