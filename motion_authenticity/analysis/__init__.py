"""
Track generation and motion analysis.

This module provides the randomized track generator, the trace feature
extractor and the threshold classifier.
"""

from .path_generator import PathGenerator, generate_path
from .feature_extractor import FeatureExtractor, FeatureSet, extract_features
from .classifier import Classifier, RequirementFlags, Verdict, classify_features, evaluate_trace

__all__ = [
    'PathGenerator',
    'generate_path',
    'FeatureExtractor',
    'FeatureSet',
    'extract_features',
    'Classifier',
    'RequirementFlags',
    'Verdict',
    'classify_features',
    'evaluate_trace'
]
