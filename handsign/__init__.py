"""
Hand Sign Recognition

Scores hand landmarks from a pose-estimation model against declarative
gesture descriptions and drives a debounced on-screen label.
"""

__version__ = "0.1.0"

from .types import (
    Finger,
    FingerCurl,
    FingerDirection,
    GestureEstimate,
    DisplayChange,
    LandmarkSource,
    DisplaySink,
)
from .config import load_config, Cfg
from .descriptor import GestureDescription, GestureDescriptor, GestureRegistry
from .estimator import GestureEstimator
from .display import DisplayGesture, DisplayState, DisplayStateMachine, resolve_gesture
from .gestures import GestureProcessor
from .library import default_registry
from .loop import DetectionLoop
from .display_mock import MockDisplay

__all__ = [
    "Finger",
    "FingerCurl",
    "FingerDirection",
    "GestureEstimate",
    "DisplayChange",
    "LandmarkSource",
    "DisplaySink",
    "load_config",
    "Cfg",
    "GestureDescription",
    "GestureDescriptor",
    "GestureRegistry",
    "GestureEstimator",
    "DisplayGesture",
    "DisplayState",
    "DisplayStateMachine",
    "resolve_gesture",
    "GestureProcessor",
    "default_registry",
    "DetectionLoop",
    "MockDisplay",
]
