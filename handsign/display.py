"""
Selection of the displayed gesture and debouncing of the on-screen label.
"""
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Mapping, Optional, Sequence

from .types import DisplayChange, GestureEstimate

logger = logging.getLogger(__name__)

DEFAULT_MIN_CONFIDENCE = 0.85


class DisplayGesture(Enum):
    """Gestures the display knows a message for."""
    YES = "yes"
    ILY = "ily"
    NAMASTE = "namaste"
    PEACE = "peace"
    OK = "ok"


# Library gesture names mapped to the app's own vocabulary
GESTURE_ALIASES: Dict[str, str] = {
    "victory": "peace",
    "thumbs_up": "yes",
}

GESTURE_MESSAGES: Dict[DisplayGesture, str] = {
    DisplayGesture.YES: "YES! 👍",
    DisplayGesture.ILY: "I LOVE YOU! 🤟❤️",
    DisplayGesture.NAMASTE: "NAMASTE 🙏",
    DisplayGesture.PEACE: "PEACE! ✌️",
    DisplayGesture.OK: "OK! 👌",
}


def resolve_gesture(name: str) -> Optional[DisplayGesture]:
    """Map an estimator gesture name to a display gesture, or None if unknown."""
    try:
        return DisplayGesture(GESTURE_ALIASES.get(name, name))
    except ValueError:
        return None


def select_best(estimates: Sequence[GestureEstimate]) -> Optional[GestureEstimate]:
    """Highest-confidence estimate; the first one wins ties."""
    best = None
    for estimate in estimates:
        if best is None or estimate.confidence > best.confidence:
            best = estimate
    return best


@dataclass(frozen=True)
class DisplayState:
    """What is on screen: nothing (Idle) or one gesture with its message."""
    gesture: Optional[DisplayGesture] = None
    message: Optional[str] = None

    @property
    def is_idle(self) -> bool:
        return self.gesture is None

    @property
    def name(self) -> str:
        return self.gesture.value if self.gesture is not None else "none"


IDLE = DisplayState()


class DisplayStateMachine:
    """
    Turns per-frame estimates into display change events.

    The best estimate is shown when its confidence is at least
    ``min_confidence`` and it resolves to a known message. Seeing the same
    gesture again produces no event, nor does staying Idle.
    """

    def __init__(self, min_confidence: float = DEFAULT_MIN_CONFIDENCE,
                 messages: Mapping[DisplayGesture, str] = GESTURE_MESSAGES):
        self.min_confidence = min_confidence
        self.messages = dict(messages)
        self.state: DisplayState = IDLE

    def next_state(self, estimates: Sequence[GestureEstimate]) -> DisplayState:
        """State the display should be in for these estimates."""
        best = select_best(estimates)
        if best is None or best.confidence < self.min_confidence:
            return IDLE

        gesture = resolve_gesture(best.name)
        if gesture is None:
            logger.debug("No display gesture for %r", best.name)
            return IDLE

        message = self.messages.get(gesture)
        if message is None:
            return IDLE
        return DisplayState(gesture=gesture, message=message)

    def update(self, estimates: Sequence[GestureEstimate]) -> Optional[DisplayChange]:
        """
        Advance the state machine by one frame.

        Args:
            estimates: Estimates for the current frame (empty if no hand)

        Returns:
            DisplayChange if the displayed gesture changed, None otherwise
        """
        new_state = self.next_state(estimates)
        if new_state.gesture == self.state.gesture:
            return None

        logger.info("Display: %s -> %s", self.state.name, new_state.name)
        self.state = new_state
        return DisplayChange(name=new_state.name, message=new_state.message)

    def reset(self) -> Optional[DisplayChange]:
        """Return to Idle, e.g. when the hand is lost."""
        return self.update([])
