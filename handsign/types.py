"""
Type definitions for hand sign recognition.
"""
from dataclasses import dataclass
from enum import Enum, IntEnum
from typing import List, Optional, Protocol, Sequence, Tuple, runtime_checkable


Point = Tuple[float, ...]
Hand = Sequence[Point]


class Finger(IntEnum):
    """The five fingers, in landmark order."""
    THUMB = 0
    INDEX = 1
    MIDDLE = 2
    RING = 3
    PINKY = 4


class FingerCurl(Enum):
    """Discrete bend amount of a finger."""
    NO_CURL = "no_curl"
    HALF_CURL = "half_curl"
    FULL_CURL = "full_curl"


class FingerDirection(Enum):
    """Discrete pointing orientation of a finger's tip segment."""
    VERTICAL_UP = "vertical_up"
    VERTICAL_DOWN = "vertical_down"
    HORIZONTAL_LEFT = "horizontal_left"
    HORIZONTAL_RIGHT = "horizontal_right"
    DIAGONAL_UP_LEFT = "diagonal_up_left"
    DIAGONAL_UP_RIGHT = "diagonal_up_right"
    DIAGONAL_DOWN_LEFT = "diagonal_down_left"
    DIAGONAL_DOWN_RIGHT = "diagonal_down_right"


@dataclass(frozen=True)
class GestureEstimate:
    """Confidence that one registered gesture matches the current hand."""
    name: str
    confidence: float  # 0..1


@dataclass(frozen=True)
class DisplayChange:
    """Emitted when the displayed gesture changes."""
    name: str  # gesture name or "none"
    message: Optional[str]


@runtime_checkable
class LandmarkSource(Protocol):
    """Supplies the hands detected in the latest frame."""

    async def read(self) -> Optional[List[Hand]]:
        """Return detected hands (possibly empty), or None if not ready."""
        ...


@runtime_checkable
class DisplaySink(Protocol):
    """Presentation layer that receives display change events."""

    async def show(self, change: DisplayChange) -> None:
        """Show the new message, or clear it when ``change.message`` is None."""
        ...
