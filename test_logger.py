"""Tests for status logging and the metrics report."""

from motion_authenticity.analysis.classifier import classify_features
from motion_authenticity.analysis.feature_extractor import FeatureSet
from motion_authenticity.core.recorder import StatusSignal, Tone
from motion_authenticity.utils.logger import MotionLogger, format_metrics


def sample_verdict():
    return classify_features(FeatureSet(
        mean_velocity=0.42, variance=0.02, velocity_std=0.1414, velocity_cv=0.3367,
        jitter_ratio=0.3, direction_noise=0.12, idle_pauses=4, sample_count=90, jitter_count=27
    ))


def test_metrics_placeholders_without_verdict():
    text = format_metrics(None)
    assert text.splitlines()[0] == "samples: --"
    assert len(text.splitlines()) == 8


def test_metrics_for_verdict():
    lines = format_metrics(sample_verdict()).splitlines()
    assert lines[0] == "samples: 90 (ok)"
    assert lines[1] == "mean velocity: 0.42 px/ms"
    assert lines[2] == "variance: 0.020 (ok)"
    assert lines[4] == "direction noise: 12.0% (ok)"
    assert lines[6] == "jitter ratio: 30.0% (ok)"
    assert lines[7] == "idle pauses: 4 (ok)"


def test_metrics_flag_low_values():
    verdict = classify_features(FeatureSet(0, 0, 0, 0, 0, 0, 0, 5))
    assert "samples: 5 (LOW)" in format_metrics(verdict)


def test_status_is_printed(capsys):
    MotionLogger().log_status(StatusSignal("Recording...", Tone.RECORDING))
    assert "RECORDING: Recording..." in capsys.readouterr().out


def test_quiet_logger_prints_nothing(capsys):
    log = MotionLogger(verbose=False)
    log.log_status(StatusSignal("ready", Tone.READY))
    log.log_verdict(sample_verdict())
    assert capsys.readouterr().out == ""


def test_debug_file_records_features_only(tmp_path):
    path = tmp_path / "debug.log"
    log = MotionLogger(str(path), verbose=False)
    log.log_status(StatusSignal("Edge collision detected.", Tone.FAIL))
    log.log_verdict(sample_verdict())
    log.close()

    content = path.read_text(encoding="utf-8")
    assert "status tone=fail" in content
    assert "'jitter_ratio': 0.3" in content
    assert "'x'" not in content


def test_unwritable_debug_file_falls_back_to_console(tmp_path):
    log = MotionLogger(str(tmp_path / "missing" / "debug.log"), verbose=False)
    assert log.debug_file is None
    log.log_status(StatusSignal("ready", Tone.READY))
    log.close()
