"""
Main motion listener that coordinates track generation, trace recording and logging.
"""

import logging
import queue
import random
import threading
from typing import Callable, Optional

from ..analysis.path_generator import PathGenerator
from ..config.settings import EvaluatorConfig
from ..utils.logger import MotionLogger
from .events import MotionEvent, PointerLeft, PointerMoved, RegeneratePath, ResetAttempt
from .recorder import RecorderState, TraceRecorder

logger = logging.getLogger(__name__)

_STOP = object()


class MotionListener:
    """
    Single event-dispatch loop around one TraceRecorder.

    Events are processed one at a time to completion, either directly via
    dispatch() or by the worker thread draining the queue fed by post().
    The worker is the only consumer, so the recorder never sees two events
    at once.
    """

    def __init__(self, width: float, height: float,
                 config: Optional[EvaluatorConfig] = None,
                 clock: Optional[Callable[[], float]] = None,
                 rng: Optional[random.Random] = None,
                 motion_logger: Optional[MotionLogger] = None):
        self.width = width
        self.height = height
        self.config = config or EvaluatorConfig()
        self.logger = motion_logger or MotionLogger()
        self.path_generator = PathGenerator(self.config, rng)
        self.recorder = TraceRecorder(
            self.config,
            clock=clock,
            on_status=self.logger.log_status,
            on_verdict=self.logger.log_verdict
        )

        # Thread management
        self.running = False
        self.events: queue.Queue = queue.Queue()
        self.thread = None
        self.device_thread = None

        self.regenerate_path()

    def regenerate_path(self):
        points = self.path_generator.generate(self.width, self.height)
        self.recorder.install_path(points)
        self.logger.log_path(points)

    def dispatch(self, event: MotionEvent) -> RecorderState:
        """Process one event to completion and return the resulting state."""
        if isinstance(event, PointerMoved):
            return self.recorder.handle_pointer(event.x, event.y)
        if isinstance(event, PointerLeft):
            return self.recorder.handle_pointer_left()
        if isinstance(event, RegeneratePath):
            self.regenerate_path()
        elif isinstance(event, ResetAttempt):
            self.recorder.reset()
        else:
            raise TypeError(f"Unknown event: {event!r}")
        return self.recorder.state

    def post(self, event: MotionEvent):
        """Queue an event for the worker thread."""
        self.events.put(event)

    def start(self, device_manager=None) -> bool:
        """Start the dispatch worker, and a device reader if one is given."""
        if self.running:
            return True
        self.running = True

        self.thread = threading.Thread(target=self._event_loop)
        self.thread.daemon = True
        self.thread.start()

        if device_manager is not None:
            self.device_thread = threading.Thread(target=self._device_loop, args=(device_manager,))
            self.device_thread.daemon = True
            self.device_thread.start()

        return True

    def stop(self):
        """Drain the queue, stop the worker and close the logger."""
        self.running = False
        self.events.put(_STOP)
        if self.thread:
            self.thread.join(timeout=1)
        if self.device_thread:
            self.device_thread.join(timeout=1)
        self.logger.close()

    def _event_loop(self):
        while True:
            event = self.events.get()
            if event is _STOP:
                break
            try:
                self.dispatch(event)
            except Exception as e:
                logger.error(f"Error dispatching {event!r}: {e}")

    def _device_loop(self, device_manager):
        try:
            for event in device_manager.read_events(self.width, self.height):
                if not self.running:
                    break
                self.post(event)
        except OSError as e:
            logger.error(f"Error reading pointer device: {e}")
            self.post(PointerLeft())
