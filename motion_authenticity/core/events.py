"""
Input events accepted by the motion listener.
"""

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class PointerMoved:
    """Pointer position, already in tracking-surface coordinates."""
    x: float
    y: float


@dataclass(frozen=True)
class PointerLeft:
    """The pointer left the tracking surface."""


@dataclass(frozen=True)
class RegeneratePath:
    """Install a freshly generated track."""


@dataclass(frozen=True)
class ResetAttempt:
    """Abandon the current attempt and keep the track."""


MotionEvent = Union[PointerMoved, PointerLeft, RegeneratePath, ResetAttempt]
