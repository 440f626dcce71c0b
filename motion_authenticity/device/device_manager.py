"""
Device management for absolute pointing devices (touchscreens, tablets).
"""

import logging
from typing import Iterator, Optional, Tuple

import evdev
from evdev import ecodes

from ..core.events import MotionEvent, PointerLeft, PointerMoved

logger = logging.getLogger(__name__)

AXIS_CODES = (
    (ecodes.ABS_MT_POSITION_X, ecodes.ABS_MT_POSITION_Y),
    (ecodes.ABS_X, ecodes.ABS_Y),
)


class DeviceManager:
    """Finds an absolute pointing device and turns its events into pointer events."""

    def __init__(self, device=None):
        self.device = None
        self.x_code = ecodes.ABS_X
        self.y_code = ecodes.ABS_Y
        self.x_range: Tuple[int, int] = (0, 1919)  # Default
        self.y_range: Tuple[int, int] = (0, 1079)  # Default
        if device is not None:
            self._configure(device)

    def find_device(self):
        """Find and configure the first device reporting absolute X/Y."""
        devices = [evdev.InputDevice(path) for path in evdev.list_devices()]

        for device in devices:
            if self._configure(device):
                logger.info(f"Found pointing device: {device.name}")
                logger.info(f"Axis ranges: x={self.x_range} y={self.y_range}")
                return device

        logger.error("No absolute pointing device found")
        return None

    def _configure(self, device) -> bool:
        caps = device.capabilities()
        abs_info = dict(caps.get(ecodes.EV_ABS, []))

        for x_code, y_code in AXIS_CODES:
            if x_code in abs_info and y_code in abs_info:
                self.device = device
                self.x_code = x_code
                self.y_code = y_code
                self.x_range = (abs_info[x_code].min, abs_info[x_code].max)
                self.y_range = (abs_info[y_code].min, abs_info[y_code].max)
                return True
        return False

    def get_device_info(self):
        """Get device and axis information."""
        return {
            'device': self.device,
            'x_range': self.x_range,
            'y_range': self.y_range,
        }

    @staticmethod
    def _scale(value: float, axis_range: Tuple[int, int], size: float) -> float:
        low, high = axis_range
        if high <= low:
            return 0.0
        return (value - low) / (high - low) * size

    def to_surface(self, raw_x: float, raw_y: float,
                   surface_width: float, surface_height: float) -> Tuple[float, float]:
        """Map raw device coordinates onto the tracking surface."""
        return (
            self._scale(raw_x, self.x_range, surface_width),
            self._scale(raw_y, self.y_range, surface_height),
        )

    def read_events(self, surface_width: float, surface_height: float) -> Iterator[MotionEvent]:
        """
        Yield pointer events from the device, one per SYN_REPORT batch.

        A lifted finger or pen (BTN_TOUCH release, tracking id -1) is
        reported as the pointer leaving the surface.
        """
        if self.device is None:
            raise RuntimeError("No device configured; call find_device() first")

        raw_x: Optional[float] = None
        raw_y: Optional[float] = None
        moved = False
        lifted = False

        for ev in self.device.read_loop():
            if ev.type == ecodes.EV_ABS:
                if ev.code == self.x_code:
                    raw_x = ev.value
                    moved = True
                elif ev.code == self.y_code:
                    raw_y = ev.value
                    moved = True
                elif ev.code == ecodes.ABS_MT_TRACKING_ID and ev.value == -1:
                    lifted = True
            elif ev.type == ecodes.EV_KEY and ev.code == ecodes.BTN_TOUCH and ev.value == 0:
                lifted = True
            elif ev.type == ecodes.EV_SYN and ev.code == ecodes.SYN_REPORT:
                if lifted:
                    yield PointerLeft()
                elif moved and raw_x is not None and raw_y is not None:
                    yield PointerMoved(*self.to_surface(raw_x, raw_y, surface_width, surface_height))
                moved = False
                lifted = False
