"""
Logging utilities for attempt status, tracks and verdicts.

Verdict logging only ever carries feature values and rule outcomes, never
pointer coordinates.
"""

import datetime
import logging
from typing import Optional, Sequence

logger = logging.getLogger(__name__)

TONE_ICONS = {
    'ready': '🟦',
    'recording': '🔴',
    'pass': '✅',
    'fail': '❌',
}


def _badge(ok: bool) -> str:
    return "ok" if ok else "LOW"


def format_metrics(verdict) -> str:
    """Render the diagnostics panel for a verdict, or placeholders for None."""
    if verdict is None:
        return "\n".join([
            "samples: --",
            "mean velocity: --",
            "variance: --",
            "velocity std / cv: --",
            "direction noise: --",
            "chaos metric: --",
            "jitter ratio: --",
            "idle pauses: --",
        ])

    f = verdict.features
    r = verdict.requirements
    return "\n".join([
        f"samples: {f.sample_count} ({_badge(r.pass_samples)})",
        f"mean velocity: {f.mean_velocity:.2f} px/ms",
        f"variance: {f.variance:.3f} ({_badge(r.pass_variance)})",
        f"velocity std: {f.velocity_std:.3f} | cv: {f.velocity_cv * 100:.1f}% ({_badge(r.pass_cv)})",
        f"direction noise: {f.direction_noise * 100:.1f}% ({_badge(r.pass_direction)})",
        f"chaos metric: {_badge(r.pass_chaos)} (variance | cv | turns)",
        f"jitter ratio: {f.jitter_ratio * 100:.1f}% ({_badge(r.pass_jitter)})",
        f"idle pauses: {f.idle_pauses} ({_badge(r.pass_pauses)})",
    ])


class MotionLogger:
    """Handles console and debug-file logging of attempts."""

    def __init__(self, debug_file: Optional[str] = None, verbose: bool = True):
        self.verbose = verbose
        self.debug_file = None
        if debug_file:
            try:
                self.debug_file = open(debug_file, 'w', encoding='utf-8')
                self.debug_file.write(f"Debug logging started at {datetime.datetime.now()}\n")
                self.debug_file.flush()
            except OSError as e:
                logger.warning(f"Could not open debug file {debug_file}: {e}")

    def _timestamp(self) -> str:
        return datetime.datetime.now().strftime("%H:%M:%S.%f")[:-3]

    def _debug(self, message: str):
        if self.debug_file:
            self.debug_file.write(f"[{self._timestamp()}] {message}\n")
            self.debug_file.flush()

    def log_status(self, signal):
        """Log a status transition."""
        tone = getattr(signal.tone, 'value', signal.tone)
        if self.verbose:
            print(f"[{self._timestamp()}] {TONE_ICONS.get(tone, '•')} {tone.upper()}: {signal.text}")
        self._debug(f"status tone={tone} text={signal.text!r}")

    def log_path(self, points: Sequence):
        """Log a newly installed track."""
        if self.verbose and points:
            start, end = points[0], points[-1]
            print(f"[{self._timestamp()}] 🧭 NEW TRACK: {len(points)} points")
            print(f"   Start beacon: ({int(start.x)}, {int(start.y)})")
            print(f"   End beacon: ({int(end.x)}, {int(end.y)})")
        self._debug(f"track points={len(points)}")

    def log_verdict(self, verdict):
        """Log an evaluated attempt; feature values only."""
        if self.verbose:
            label = "HUMAN" if verdict.passed else "SYNTHETIC"
            print(f"[{self._timestamp()}] 🧪 VERDICT: {label}")
            for line in format_metrics(verdict).splitlines():
                print(f"   {line}")
        self._debug(f"verdict {verdict.to_dict()}")

    def close(self):
        """Close the debug file."""
        if self.debug_file:
            self.debug_file.close()
            self.debug_file = None
