"""Tests for trace feature extraction."""

import pytest

from motion_authenticity.analysis.feature_extractor import FeatureExtractor, extract_features
from motion_authenticity.utils.motion_utils import Sample


def build_trace(xs, ys, dts, with_elapsed=True):
    samples = []
    elapsed = 0.0
    for x, y, dt in zip(xs, ys, dts):
        elapsed += dt
        samples.append(Sample(x, y, dt, elapsed if with_elapsed else None))
    return samples


def straight_trace(count=80, step=5, dt=10):
    return build_trace(
        [100 + step * i for i in range(count)],
        [200] * count,
        [dt] * count
    )


def wobbly_trace(count=100):
    """Small 2px steps with a zig-zag and alternating short/long gaps."""
    wobble = [0, 2, 0, -2]
    return build_trace(
        [100 + 2 * i for i in range(count)],
        [200 + wobble[i % 4] for i in range(count)],
        [8 if i % 2 == 0 else 60 for i in range(count)]
    )


def test_straight_uniform_trace_has_no_chaos():
    features = extract_features(straight_trace())

    assert features.sample_count == 80
    assert features.mean_velocity == pytest.approx(0.5)
    assert features.variance == pytest.approx(0.0, abs=1e-12)
    assert features.velocity_cv == pytest.approx(0.0, abs=1e-9)
    assert features.jitter_ratio == 0
    assert features.direction_noise == 0
    assert features.idle_pauses == 0


def test_wobbly_trace_features():
    features = extract_features(wobbly_trace())

    assert features.sample_count == 100
    assert features.jitter_count == 99
    assert features.jitter_ratio == 1.0
    assert features.direction_noise == pytest.approx(0.5, abs=0.01)
    assert features.idle_pauses == 50
    assert features.mean_velocity > 0


def test_short_trace_has_zero_velocity_stats():
    features = extract_features(straight_trace(count=6))
    assert features.mean_velocity == 0
    assert features.variance == 0
    assert features.velocity_cv == 0


def test_empty_trace_yields_zero_features():
    features = extract_features([])
    assert features.sample_count == 0
    assert features.jitter_ratio == 0
    assert features.direction_noise == 0
    assert features.idle_pauses == 0


def test_missing_elapsed_falls_back_to_summed_dt():
    xs = [100 + 5 * i for i in range(20)]
    ys = [200] * 20
    dts = [10] * 20
    with_elapsed = extract_features(build_trace(xs, ys, dts))
    without = extract_features(build_trace(xs, ys, dts, with_elapsed=False))
    assert without.mean_velocity == pytest.approx(with_elapsed.mean_velocity)
    assert without.variance == pytest.approx(with_elapsed.variance, abs=1e-12)


def test_varying_speed_gives_variance():
    # Alternate slow and fast stretches of the same timing
    xs = []
    x = 0.0
    for i in range(60):
        x += 1 if (i // 10) % 2 == 0 else 12
        xs.append(x)
    features = extract_features(build_trace(xs, [0] * 60, [10] * 60))
    assert features.variance > 0.01
    assert features.velocity_cv > 0.25


def test_stationary_steps_are_ignored_for_direction():
    trace = build_trace([100, 100.1, 100.2, 100.3, 100.4], [50] * 5, [10] * 5)
    features = extract_features(trace)
    assert features.direction_noise == 0
    assert features.jitter_ratio == 1.0


def test_sharp_turns_count_as_direction_noise():
    # Right, right, up, up: one turn out of three comparisons
    trace = build_trace([0, 10, 20, 20, 20], [0, 0, 0, 10, 20], [10] * 5)
    assert extract_features(trace).direction_noise == pytest.approx(1 / 3)


def test_idle_pause_threshold_is_strict():
    trace = build_trace([0, 5, 10, 15], [0] * 4, [50, 50.5, 120, 10])
    assert extract_features(trace).idle_pauses == 2


def test_mappings_are_accepted():
    mappings = [{'x': 5 * i, 'y': 0, 'dt': 10, 'elapsed': 10 * (i + 1)} for i in range(10)]
    samples = [Sample(5 * i, 0, 10, 10 * (i + 1)) for i in range(10)]
    assert extract_features(mappings) == extract_features(samples)
    assert extract_features(mappings).mean_velocity == pytest.approx(0.5)


def test_extraction_is_deterministic():
    extractor = FeatureExtractor()
    trace = wobbly_trace()
    assert extractor.extract(trace) == extractor.extract(trace)
