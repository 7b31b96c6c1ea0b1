"""
Synthetic hand landmarks for tests.

Each finger is drawn as three equal segments starting at a fixed base point.
``heading`` is the direction of the first segment in degrees (0 = right,
90 = up on screen) and every interior joint turns by ``bend`` degrees, so the
finger's curl is exactly ``bend`` and its tip segment points at
``heading - 2 * bend``.
"""
import math
from typing import Dict, List, Tuple

from handsign.types import Finger

SEGMENT_PX = 40.0
WRIST = (320.0, 420.0, 0.0)

FINGER_BASES = {
    Finger.THUMB: (250.0, 380.0),
    Finger.INDEX: (270.0, 300.0),
    Finger.MIDDLE: (310.0, 290.0),
    Finger.RING: (350.0, 300.0),
    Finger.PINKY: (390.0, 320.0),
}

Pose = Dict[Finger, Tuple[float, float]]  # finger -> (bend, heading)


def finger_chain(base: Tuple[float, float], heading: float, bend: float,
                 length: float = SEGMENT_PX) -> List[Tuple[float, float, float]]:
    x, y = base
    points = [(x, y, 0.0)]
    for _ in range(3):
        x += length * math.cos(math.radians(heading))
        y -= length * math.sin(math.radians(heading))
        points.append((x, y, 0.0))
        heading -= bend
    return points


def make_hand(pose: Pose) -> List[Tuple[float, float, float]]:
    """Build 21 landmarks; fingers missing from ``pose`` are straight and up."""
    points = [WRIST]
    for finger in Finger:
        bend, heading = pose.get(finger, (0.0, 90.0))
        points.extend(finger_chain(FINGER_BASES[finger], heading, bend))
    return points


UP = 90.0
RIGHT = 0.0

NAMASTE = make_hand({finger: (0.0, UP) for finger in Finger})

ILY = make_hand({
    Finger.THUMB: (0.0, RIGHT),
    Finger.INDEX: (0.0, UP),
    Finger.MIDDLE: (90.0, UP),
    Finger.RING: (90.0, UP),
    Finger.PINKY: (0.0, UP),
})

OK = make_hand({
    Finger.THUMB: (45.0, UP),
    Finger.INDEX: (45.0, UP),
    Finger.MIDDLE: (0.0, UP),
    Finger.RING: (0.0, UP),
    Finger.PINKY: (0.0, UP),
})

# Index up-left, middle up, ring and pinky folded back to point up-left
VICTORY = make_hand({
    Finger.THUMB: (45.0, 180.0),
    Finger.INDEX: (0.0, 135.0),
    Finger.MIDDLE: (0.0, UP),
    Finger.RING: (90.0, 315.0),
    Finger.PINKY: (90.0, 315.0),
})

# Thumb up, the other four folded so their tips point left
THUMBS_UP = make_hand({
    Finger.THUMB: (0.0, UP),
    Finger.INDEX: (90.0, RIGHT),
    Finger.MIDDLE: (90.0, RIGHT),
    Finger.RING: (90.0, RIGHT),
    Finger.PINKY: (90.0, RIGHT),
})

# Thumb up, the other four only half folded with their tips pointing right
THUMBS_UP_LOOSE = make_hand({
    Finger.THUMB: (0.0, UP),
    Finger.INDEX: (50.0, 100.0),
    Finger.MIDDLE: (50.0, 100.0),
    Finger.RING: (50.0, 100.0),
    Finger.PINKY: (50.0, 100.0),
})
