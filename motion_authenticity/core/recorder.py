"""
Trace recorder state machine.

Consumes pointer positions against the current track, guards them with the
geometry checks, and hands completed traces to the feature extractor and
classifier.
"""

import time
from dataclasses import dataclass
from enum import Enum
from typing import Callable, List, Optional, Sequence, Tuple

from ..analysis.classifier import Classifier, Verdict
from ..analysis.feature_extractor import FeatureExtractor
from ..config.settings import EvaluatorConfig
from ..utils.motion_utils import DataValidator, GeometryUtils, Point, Sample


class RecorderState(Enum):
    IDLE = 'idle'
    RECORDING = 'recording'
    COMPLETED = 'completed'
    FAILED = 'failed'


class Tone(Enum):
    READY = 'ready'
    RECORDING = 'recording'
    PASS = 'pass'
    FAIL = 'fail'


class FailureReason(Enum):
    EDGE_COLLISION = 'edge_collision'
    LEFT_SURFACE = 'left_surface'
    TRACE_TOO_SHORT = 'trace_too_short'


FAILURE_MESSAGES = {
    FailureReason.EDGE_COLLISION: "Edge collision detected.",
    FailureReason.LEFT_SURFACE: "Cursor left the surface.",
    FailureReason.TRACE_TOO_SHORT: "Movement trace too short.",
}

READY_MESSAGE = "Hover the start beacon to begin."
RESET_MESSAGE = "Attempt reset. Hover the start beacon to begin."
RECORDING_MESSAGE = "Recording... stay inside the glow."
PASS_MESSAGE = "Human micro motion detected. Challenge cleared."
SYNTHETIC_MESSAGE = "Motion looked synthetic. Try again."


@dataclass(frozen=True)
class StatusSignal:
    text: str
    tone: Tone


def monotonic_ms() -> float:
    return time.perf_counter() * 1000.0


class TraceRecorder:
    """
    State machine for one tracking attempt at a time.

    IDLE -> RECORDING when the pointer enters the start anchor. While
    recording every position is checked against the track; leaving the
    track or the surface fails the attempt, reaching the end anchor
    completes it. COMPLETED and FAILED are reported to the caller and the
    recorder is back in IDLE afterwards, with the trace discarded.
    """

    def __init__(self,
                 config: Optional[EvaluatorConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 on_status: Optional[Callable[[StatusSignal], None]] = None,
                 on_verdict: Optional[Callable[[Verdict], None]] = None):
        self.config = config or EvaluatorConfig()
        self.clock = clock or monotonic_ms
        self.on_status = on_status
        self.on_verdict = on_verdict
        self.extractor = FeatureExtractor(self.config)
        self.classifier = Classifier(self.config)

        self._path: Tuple[Point, ...] = ()
        self._samples: List[Sample] = []
        self._trail: List[Point] = []
        self._state = RecorderState.IDLE
        self._last_time = 0.0
        self._elapsed = 0.0

        self.verdict: Optional[Verdict] = None
        self.status: Optional[StatusSignal] = None
        self.failure_reason: Optional[FailureReason] = None

    # Read-only views for renderers and diagnostics

    @property
    def state(self) -> RecorderState:
        return self._state

    @property
    def path_points(self) -> Tuple[Point, ...]:
        return self._path

    @property
    def path_width(self) -> float:
        return self.config.PATH_WIDTH

    @property
    def trace(self) -> Tuple[Sample, ...]:
        return tuple(self._samples)

    @property
    def trail(self) -> Tuple[Point, ...]:
        return tuple(self._trail)

    @property
    def start_anchor(self) -> Optional[Point]:
        return self._path[0] if self._path else None

    @property
    def end_anchor(self) -> Optional[Point]:
        return self._path[-1] if self._path else None

    @property
    def is_recording(self) -> bool:
        return self._state is RecorderState.RECORDING

    # Commands

    def install_path(self, points: Sequence) -> None:
        """Replace the track. Any live attempt is abandoned first."""
        path = DataValidator.to_points(points)
        if len(path) < 2:
            raise ValueError("A track needs at least two points")

        self._abandon()
        self._path = path
        self._trail = []
        self.verdict = None
        self.failure_reason = None
        self._emit(READY_MESSAGE, Tone.READY)

    def reset(self) -> None:
        """Abandon the current attempt without a pass/fail signal."""
        self._abandon()
        self._trail = []
        self._emit(RESET_MESSAGE, Tone.READY)

    def handle_pointer_left(self) -> RecorderState:
        if self._state is RecorderState.RECORDING:
            return self._fail(FailureReason.LEFT_SURFACE)
        return self._state

    def handle_pointer(self, x: float, y: float) -> RecorderState:
        """
        Process one pointer position in surface coordinates.

        Returns:
            The state this event led to: IDLE, RECORDING, COMPLETED or FAILED
        """
        if not self._path:
            return self._state

        pos = Point(float(x), float(y))
        now = self.clock()

        if self._state is not RecorderState.RECORDING:
            if not GeometryUtils.point_in_circle(pos, self.start_anchor, self.config.START_RADIUS):
                return self._state
            self._begin(now)

        # A clock that steps backwards is treated like a too-small step
        dt = max(now - self._last_time, self.config.DT_FLOOR)
        self._last_time = now

        if GeometryUtils.distance_to_polyline(pos, self._path) > self.config.collision_distance:
            return self._fail(FailureReason.EDGE_COLLISION)

        self._elapsed += dt
        self._samples.append(Sample(pos.x, pos.y, dt, self._elapsed))
        self._trail.append(pos)

        if GeometryUtils.point_in_circle(pos, self.end_anchor, self.config.end_target_radius):
            return self._complete()
        return self._state

    # Transitions

    def _begin(self, now: float):
        self._samples = []
        self._trail = []
        self._state = RecorderState.RECORDING
        self._last_time = now
        self._elapsed = 0.0
        self.failure_reason = None
        self._emit(RECORDING_MESSAGE, Tone.RECORDING)

    def _abandon(self):
        self._samples = []
        self._state = RecorderState.IDLE
        self._elapsed = 0.0

    def _fail(self, reason: FailureReason) -> RecorderState:
        self._abandon()
        self._trail = []
        self.failure_reason = reason
        self._emit(f"{FAILURE_MESSAGES[reason]} Return to start to try again.", Tone.FAIL)
        return RecorderState.FAILED

    def _complete(self) -> RecorderState:
        if len(self._samples) < self.config.MIN_SAMPLES_FOR_COMPLETION:
            return self._fail(FailureReason.TRACE_TOO_SHORT)

        attempt = tuple(self._samples)
        self._abandon()

        features = self.extractor.extract(attempt)
        verdict = self.classifier.classify(features)
        self.verdict = verdict

        if verdict.passed:
            self._emit(PASS_MESSAGE, Tone.PASS)
        else:
            self._emit(SYNTHETIC_MESSAGE, Tone.FAIL)
        if self.on_verdict:
            self.on_verdict(verdict)
        return RecorderState.COMPLETED

    def _emit(self, text: str, tone: Tone):
        self.status = StatusSignal(text, tone)
        if self.on_status:
            self.on_status(self.status)
