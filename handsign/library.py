"""
Built-in gesture descriptions.

``victory`` and ``thumbs_up`` are the generic library poses; ``ily``,
``namaste`` and ``ok`` are the app's own signs.
"""
from .descriptor import GestureDescription, GestureRegistry
from .types import Finger, FingerCurl, FingerDirection


def victory_gesture() -> GestureDescription:
    g = GestureDescription("victory")

    g.add_curl(Finger.THUMB, FingerCurl.HALF_CURL, 0.5)
    g.add_curl(Finger.THUMB, FingerCurl.NO_CURL, 0.5)
    g.add_direction(Finger.THUMB, FingerDirection.VERTICAL_UP, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_UP_LEFT, 1.0)

    g.add_curl(Finger.INDEX, FingerCurl.NO_CURL, 1.0)
    g.add_direction(Finger.INDEX, FingerDirection.VERTICAL_UP, 0.75)
    g.add_direction(Finger.INDEX, FingerDirection.DIAGONAL_UP_LEFT, 1.0)

    g.add_curl(Finger.MIDDLE, FingerCurl.NO_CURL, 1.0)
    g.add_direction(Finger.MIDDLE, FingerDirection.VERTICAL_UP, 1.0)
    g.add_direction(Finger.MIDDLE, FingerDirection.DIAGONAL_UP_LEFT, 0.75)

    for finger in (Finger.RING, Finger.PINKY):
        g.add_curl(finger, FingerCurl.FULL_CURL, 1.0)
        g.add_direction(finger, FingerDirection.VERTICAL_UP, 0.2)
        g.add_direction(finger, FingerDirection.DIAGONAL_UP_LEFT, 1.0)
        g.add_direction(finger, FingerDirection.HORIZONTAL_LEFT, 0.2)

    g.set_weight(Finger.INDEX, 2)
    g.set_weight(Finger.MIDDLE, 2)
    return g


def thumbs_up_gesture() -> GestureDescription:
    g = GestureDescription("thumbs_up")

    g.add_curl(Finger.THUMB, FingerCurl.NO_CURL, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.VERTICAL_UP, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_UP_LEFT, 0.25)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_UP_RIGHT, 0.25)

    for finger in (Finger.INDEX, Finger.MIDDLE, Finger.RING, Finger.PINKY):
        g.add_curl(finger, FingerCurl.FULL_CURL, 1.0)
        g.add_curl(finger, FingerCurl.HALF_CURL, 0.9)
        g.add_direction(finger, FingerDirection.HORIZONTAL_LEFT, 1.0)
        g.add_direction(finger, FingerDirection.HORIZONTAL_RIGHT, 1.0)
    return g


def ily_gesture() -> GestureDescription:
    g = GestureDescription("ily")

    # Thumb out sideways, never pointing down
    g.add_curl(Finger.THUMB, FingerCurl.NO_CURL, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.HORIZONTAL_LEFT, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.HORIZONTAL_RIGHT, 1.0)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_UP_LEFT, 0.7)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_UP_RIGHT, 0.7)
    g.add_direction(Finger.THUMB, FingerDirection.VERTICAL_DOWN, 0.0)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_DOWN_LEFT, 0.0)
    g.add_direction(Finger.THUMB, FingerDirection.DIAGONAL_DOWN_RIGHT, 0.0)

    for finger in (Finger.INDEX, Finger.PINKY):
        g.add_curl(finger, FingerCurl.NO_CURL, 1.0)
        g.add_direction(finger, FingerDirection.VERTICAL_UP, 1.0)

    g.add_curl(Finger.MIDDLE, FingerCurl.FULL_CURL, 1.0)
    g.add_curl(Finger.RING, FingerCurl.FULL_CURL, 1.0)

    g.set_weight(Finger.PINKY, 2)
    return g


def namaste_gesture() -> GestureDescription:
    g = GestureDescription("namaste")
    for finger in Finger:
        g.add_curl(finger, FingerCurl.NO_CURL, 1.0)
        g.add_direction(finger, FingerDirection.VERTICAL_UP, 1.0)
    g.set_weight(Finger.INDEX, 2)
    return g


def ok_gesture() -> GestureDescription:
    g = GestureDescription("ok")
    g.add_curl(Finger.THUMB, FingerCurl.HALF_CURL, 1.0)
    g.add_curl(Finger.INDEX, FingerCurl.HALF_CURL, 1.0)
    for finger in (Finger.MIDDLE, Finger.RING, Finger.PINKY):
        g.add_curl(finger, FingerCurl.NO_CURL, 1.0)
        g.add_direction(finger, FingerDirection.VERTICAL_UP, 0.9)
    return g


def default_registry() -> GestureRegistry:
    """Registry of every built-in gesture, in display priority order."""
    return GestureRegistry([
        victory_gesture(),
        thumbs_up_gesture(),
        ily_gesture(),
        namaste_gesture(),
        ok_gesture(),
    ])
