"""
Scores observed hand landmarks against registered gesture descriptors.
"""
import logging
from typing import Dict, List, Optional, Sequence, Tuple

from .descriptor import FingerSpec, GestureDescriptor, GestureRegistry
from .geometry import (
    CURL_RANGES,
    DIRECTION_VECTORS,
    FingerGeometry,
    angle_between,
    as_points,
    curl_category,
    direction_category,
    hand_geometry,
)
from .types import Finger, FingerCurl, FingerDirection, GestureEstimate

logger = logging.getLogger(__name__)

# Half-width of each direction's own sector (eight directions, 45 degrees apart)
DIRECTION_SECTOR_DEG = 22.5

DEFAULT_TOLERANCE = 30.0
DEFAULT_NOISE_FLOOR = 0.1
DEFAULT_CURL_MARGIN = 15.0


def curl_match(curl: Optional[float], category: FingerCurl, margin: float) -> float:
    """
    Membership of a continuous curl value in a curl category.

    Returns 1 inside the category's range, falling linearly to 0 over
    ``margin`` degrees outside it.
    """
    if curl is None:
        return 0.0
    low, high = CURL_RANGES[category]
    if low <= curl <= high:
        return 1.0
    if margin <= 0:
        return 0.0
    distance = low - curl if curl < low else curl - high
    return max(0.0, 1.0 - distance / margin)


def direction_match(direction: Optional[Tuple[float, float]], category: FingerDirection,
                    tolerance: float) -> float:
    """
    Membership of an observed unit vector in a direction category.

    Returns 1 within the category's sector, falling linearly to 0 over
    ``tolerance`` degrees beyond it. Never decreases as tolerance grows.
    """
    if direction is None:
        return 0.0
    theta = angle_between(direction, DIRECTION_VECTORS[category])
    excess = theta - DIRECTION_SECTOR_DEG
    if excess <= 0:
        return 1.0
    if tolerance <= 0:
        return 0.0
    return max(0.0, 1.0 - excess / tolerance)


class GestureEstimator:
    """
    Confidence of every registered gesture for one set of landmarks.

    For each finger a descriptor constrains, the best weighted curl match and
    the best weighted direction match are added and multiplied by the finger's
    importance. The total is divided by the highest attainable total, so a
    hand that matches every accepted category scores exactly 1.
    """

    def __init__(self, registry: GestureRegistry, noise_floor: float = DEFAULT_NOISE_FLOOR,
                 curl_margin: float = DEFAULT_CURL_MARGIN):
        self.registry = registry
        self.noise_floor = noise_floor
        self.curl_margin = curl_margin

        for d in registry:
            if d.max_score() <= 0:
                logger.warning("Gesture %r has no non-zero weights and will never match", d.name)

    def estimate(self, landmarks: Sequence[Sequence[float]],
                 tolerance: float = DEFAULT_TOLERANCE) -> List[GestureEstimate]:
        """
        Score the landmarks against every registered gesture.

        Args:
            landmarks: 21 (x, y[, z]) points of one hand
            tolerance: Extra angular deviation in degrees accepted for directions

        Returns:
            Estimates in registration order, omitting those below the noise
            floor. Empty if the landmarks are missing or incomplete.
        """
        points = as_points(landmarks)
        if points is None:
            return []

        geometry = hand_geometry(points)
        estimates = []
        for descriptor in self.registry:
            confidence = self.score(descriptor, geometry, tolerance)
            if confidence < self.noise_floor:
                continue
            estimates.append(GestureEstimate(name=descriptor.name, confidence=confidence))
        return estimates

    def score(self, descriptor: GestureDescriptor, geometry: Dict[Finger, FingerGeometry],
              tolerance: float) -> float:
        """Normalized confidence of one descriptor in [0, 1]."""
        max_score = descriptor.max_score()
        if max_score <= 0:
            return 0.0

        total = sum(
            self._finger_score(spec, geometry[finger], tolerance)
            for finger, spec in descriptor.fingers
        )
        return min(1.0, max(0.0, total / max_score))

    def _finger_score(self, spec: FingerSpec, geom: FingerGeometry, tolerance: float) -> float:
        curl_score = max(
            (w * curl_match(geom.curl, curl, self.curl_margin) for curl, w in spec.curls),
            default=0.0,
        )
        direction_score = max(
            (w * direction_match(geom.direction, d, tolerance) for d, w in spec.directions),
            default=0.0,
        )
        return spec.weight * (curl_score + direction_score)

    def estimate_pose(self, landmarks: Sequence[Sequence[float]]
                      ) -> List[Tuple[Finger, Optional[FingerCurl], Optional[FingerDirection]]]:
        """Discrete curl and direction per finger, for display and debugging."""
        points = as_points(landmarks)
        if points is None:
            return []
        return [
            (finger, curl_category(geom.curl), direction_category(geom.direction))
            for finger, geom in hand_geometry(points).items()
        ]
