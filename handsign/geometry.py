"""
Finger curl and direction estimates derived from raw hand landmarks.

Landmarks follow the MediaPipe hand layout: index 0 is the wrist and every
finger owns a chain of four points from its base joint to its tip. Points are
image coordinates (x to the right, y downward) with an optional relative depth.
"""
import logging
import math
from dataclasses import dataclass
from typing import Dict, Optional, Sequence, Tuple

import numpy as np

from .types import Finger, FingerCurl, FingerDirection

logger = logging.getLogger(__name__)

NUM_LANDMARKS = 21

FINGER_JOINTS: Dict[Finger, Tuple[int, int, int, int]] = {
    Finger.THUMB: (1, 2, 3, 4),
    Finger.INDEX: (5, 6, 7, 8),
    Finger.MIDDLE: (9, 10, 11, 12),
    Finger.RING: (13, 14, 15, 16),
    Finger.PINKY: (17, 18, 19, 20),
}

# Mean interior bend angle (degrees) covered by each curl category
CURL_RANGES: Dict[FingerCurl, Tuple[float, float]] = {
    FingerCurl.NO_CURL: (0.0, 30.0),
    FingerCurl.HALF_CURL: (30.0, 60.0),
    FingerCurl.FULL_CURL: (60.0, 180.0),
}

_DIAG = math.sqrt(0.5)

# Unit reference vectors in the image plane (y grows downward)
DIRECTION_VECTORS: Dict[FingerDirection, Tuple[float, float]] = {
    FingerDirection.VERTICAL_UP: (0.0, -1.0),
    FingerDirection.VERTICAL_DOWN: (0.0, 1.0),
    FingerDirection.HORIZONTAL_LEFT: (-1.0, 0.0),
    FingerDirection.HORIZONTAL_RIGHT: (1.0, 0.0),
    FingerDirection.DIAGONAL_UP_LEFT: (-_DIAG, -_DIAG),
    FingerDirection.DIAGONAL_UP_RIGHT: (_DIAG, -_DIAG),
    FingerDirection.DIAGONAL_DOWN_LEFT: (-_DIAG, _DIAG),
    FingerDirection.DIAGONAL_DOWN_RIGHT: (_DIAG, _DIAG),
}

_EPS = 1e-9


@dataclass(frozen=True)
class FingerGeometry:
    """Continuous curl and tip direction of one finger.

    ``curl`` is the mean bend angle in degrees at the two interior joints
    (0 for a straight finger). ``direction`` is the unit vector of the distal
    segment projected on the image plane. Either is None when the landmarks
    are degenerate.
    """
    curl: Optional[float]
    direction: Optional[Tuple[float, float]]

    @property
    def is_neutral(self) -> bool:
        return self.curl is None and self.direction is None


NEUTRAL = FingerGeometry(curl=None, direction=None)


def as_points(landmarks: Sequence[Sequence[float]]) -> Optional[np.ndarray]:
    """
    Convert landmarks to an (N, 3) float array.

    Args:
        landmarks: Sequence of (x, y) or (x, y, z) points

    Returns:
        Array of points, or None if there are too few or they can't be parsed
    """
    if landmarks is None:
        return None
    try:
        pts = np.asarray(landmarks, dtype=float)
    except (TypeError, ValueError):
        logger.debug("Unparseable landmarks dropped")
        return None

    if pts.ndim != 2 or pts.shape[0] < NUM_LANDMARKS or pts.shape[1] < 2:
        return None

    if pts.shape[1] == 2:
        pts = np.hstack([pts, np.zeros((pts.shape[0], 1))])
    return pts[:, :3]


def finger_geometry(points: np.ndarray, finger: Finger) -> FingerGeometry:
    """
    Compute curl and direction for a single finger.

    Args:
        points: (N, 3) landmark array as returned by ``as_points``
        finger: Finger to measure

    Returns:
        FingerGeometry, neutral if the finger's joints are degenerate
    """
    chain = points[list(FINGER_JOINTS[finger])]
    if not np.all(np.isfinite(chain)):
        logger.debug("Non-finite landmarks for %s", finger.name)
        return NEUTRAL

    with np.errstate(over="ignore", invalid="ignore"):
        segments = np.diff(chain, axis=0)
        lengths = np.linalg.norm(segments, axis=1)
    # huge coordinates overflow to inf once subtracted or squared
    if not np.all(np.isfinite(lengths)):
        logger.debug("Overflowing landmarks for %s", finger.name)
        return NEUTRAL
    if np.any(lengths < _EPS):
        logger.debug("Zero-length segment for %s", finger.name)
        return NEUTRAL

    unit = segments / lengths[:, None]
    cosines = np.clip(np.sum(unit[:-1] * unit[1:], axis=1), -1.0, 1.0)
    curl = float(np.mean(np.degrees(np.arccos(cosines))))
    if not math.isfinite(curl):
        return NEUTRAL

    distal = segments[-1, :2]
    norm = float(np.linalg.norm(distal))
    direction = None
    if _EPS < norm < math.inf:
        direction = (float(distal[0] / norm), float(distal[1] / norm))
        if not all(math.isfinite(c) for c in direction):
            direction = None

    return FingerGeometry(curl=curl, direction=direction)


def hand_geometry(points: np.ndarray) -> Dict[Finger, FingerGeometry]:
    """Compute geometry for all five fingers."""
    return {finger: finger_geometry(points, finger) for finger in Finger}


def angle_between(v: Tuple[float, float], ref: Tuple[float, float]) -> float:
    """Angle in degrees between two unit vectors."""
    dot = v[0] * ref[0] + v[1] * ref[1]
    return math.degrees(math.acos(max(-1.0, min(1.0, dot))))


def curl_category(curl: Optional[float]) -> Optional[FingerCurl]:
    """Discretize a continuous curl value."""
    if curl is None:
        return None
    if curl < CURL_RANGES[FingerCurl.HALF_CURL][0]:
        return FingerCurl.NO_CURL
    if curl < CURL_RANGES[FingerCurl.FULL_CURL][0]:
        return FingerCurl.HALF_CURL
    return FingerCurl.FULL_CURL


def direction_category(direction: Optional[Tuple[float, float]]) -> Optional[FingerDirection]:
    """Return the reference direction closest to a unit vector."""
    if direction is None:
        return None
    return min(
        DIRECTION_VECTORS,
        key=lambda d: angle_between(direction, DIRECTION_VECTORS[d]),
    )
