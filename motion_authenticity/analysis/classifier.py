"""
Threshold classifier for human vs synthetic pointer motion.
"""

from dataclasses import asdict, dataclass
from typing import Any, Dict, Iterable, Optional

from ..config.settings import EvaluatorConfig
from .feature_extractor import FeatureExtractor, FeatureSet


@dataclass(frozen=True)
class RequirementFlags:
    """Outcome of each individual threshold rule."""
    pass_variance: bool
    pass_cv: bool
    pass_direction: bool
    pass_chaos: bool
    pass_jitter: bool
    pass_pauses: bool
    pass_samples: bool


@dataclass(frozen=True)
class Verdict:
    """Pass/fail decision with the features and rules behind it."""
    passed: bool
    features: FeatureSet
    requirements: RequirementFlags

    def to_dict(self) -> Dict[str, Any]:
        """Anonymized form for telemetry: feature values and flags only."""
        return {
            'passed': self.passed,
            'features': self.features.to_dict(),
            'requirements': asdict(self.requirements)
        }


class Classifier:
    """
    Applies the threshold rules to a FeatureSet.

    Any one chaos signal (variance, coefficient of variation or direction
    noise) is enough, since pointer smoothing in hardware or drivers can
    suppress one of them on genuine input. Jitter, pauses and sample count
    are all required.
    """

    def __init__(self, config: Optional[EvaluatorConfig] = None):
        self.config = config or EvaluatorConfig()

    def classify(self, features: FeatureSet) -> Verdict:
        cfg = self.config

        pass_variance = features.variance > cfg.VARIANCE_THRESHOLD
        pass_cv = features.velocity_cv > cfg.CV_THRESHOLD
        pass_direction = features.direction_noise > cfg.DIRECTION_NOISE_THRESHOLD
        pass_chaos = pass_variance or pass_cv or pass_direction
        pass_jitter = features.jitter_ratio > cfg.JITTER_THRESHOLD
        pass_pauses = features.idle_pauses >= cfg.MIN_IDLE_PAUSES
        pass_samples = features.sample_count > cfg.MIN_SAMPLES

        requirements = RequirementFlags(
            pass_variance=pass_variance,
            pass_cv=pass_cv,
            pass_direction=pass_direction,
            pass_chaos=pass_chaos,
            pass_jitter=pass_jitter,
            pass_pauses=pass_pauses,
            pass_samples=pass_samples
        )
        passed = pass_chaos and pass_jitter and pass_pauses and pass_samples
        return Verdict(passed=passed, features=features, requirements=requirements)


def classify_features(features: FeatureSet,
                      config: Optional[EvaluatorConfig] = None) -> Verdict:
    """Simple interface to classify a FeatureSet."""
    return Classifier(config).classify(features)


def evaluate_trace(trace: Iterable[Any],
                   config: Optional[EvaluatorConfig] = None) -> Verdict:
    """Extract features from a completed trace and classify them."""
    features = FeatureExtractor(config).extract(trace)
    return Classifier(config).classify(features)
