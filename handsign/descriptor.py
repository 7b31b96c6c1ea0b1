"""
Declarative gesture descriptions.

A gesture is described per finger by the curl categories and tip directions
it accepts, each with a confidence weight in [0, 1], plus an optional
importance multiplier for the finger. Descriptions are assembled with the
``GestureDescription`` builder at startup and frozen into immutable
``GestureDescriptor`` values that are shared read-only by the estimator.
"""
from dataclasses import dataclass
from typing import Dict, Iterable, Iterator, Optional, Tuple, Union

from .types import Finger, FingerCurl, FingerDirection


@dataclass(frozen=True)
class FingerSpec:
    """Accepted curls and directions for one finger of a gesture."""
    curls: Tuple[Tuple[FingerCurl, float], ...] = ()
    directions: Tuple[Tuple[FingerDirection, float], ...] = ()
    weight: float = 1.0

    @property
    def max_curl(self) -> float:
        return max((w for _, w in self.curls), default=0.0)

    @property
    def max_direction(self) -> float:
        return max((w for _, w in self.directions), default=0.0)

    def max_score(self) -> float:
        """Highest score this finger can contribute."""
        return self.weight * (self.max_curl + self.max_direction)


@dataclass(frozen=True)
class GestureDescriptor:
    """Frozen description of one named gesture."""
    name: str
    fingers: Tuple[Tuple[Finger, FingerSpec], ...]

    def finger(self, finger: Finger) -> Optional[FingerSpec]:
        for f, spec in self.fingers:
            if f == finger:
                return spec
        return None

    def max_score(self) -> float:
        """Highest total score attainable; 0 means the descriptor is ill-formed."""
        return sum(spec.max_score() for _, spec in self.fingers)


class GestureDescription:
    """
    Append-only builder for a ``GestureDescriptor``.

    Adding the same (finger, category) twice keeps the last weight. Fingers
    without curl entries leave curl unconstrained, likewise for directions.
    """

    def __init__(self, name: str):
        self.name = name
        self._curls: Dict[Finger, Dict[FingerCurl, float]] = {}
        self._directions: Dict[Finger, Dict[FingerDirection, float]] = {}
        self._weights: Dict[Finger, float] = {}

    def add_curl(self, finger: Finger, curl: FingerCurl, weight: float = 1.0) -> "GestureDescription":
        self._curls.setdefault(finger, {})[curl] = float(weight)
        return self

    def add_direction(self, finger: Finger, direction: FingerDirection,
                      weight: float = 1.0) -> "GestureDescription":
        self._directions.setdefault(finger, {})[direction] = float(weight)
        return self

    def set_weight(self, finger: Finger, weight: float) -> "GestureDescription":
        """Set the importance multiplier of a finger (default 1)."""
        self._weights[finger] = float(weight)
        return self

    def freeze(self) -> GestureDescriptor:
        fingers = []
        for finger in Finger:
            curls = tuple(self._curls.get(finger, {}).items())
            directions = tuple(self._directions.get(finger, {}).items())
            if not curls and not directions:
                continue
            fingers.append((finger, FingerSpec(
                curls=curls,
                directions=directions,
                weight=self._weights.get(finger, 1.0),
            )))
        return GestureDescriptor(name=self.name, fingers=tuple(fingers))


class GestureRegistry:
    """Ordered, read-only collection of gesture descriptors."""

    def __init__(self, descriptors: Iterable[Union[GestureDescriptor, GestureDescription]]):
        frozen = []
        seen = set()
        for d in descriptors:
            if isinstance(d, GestureDescription):
                d = d.freeze()
            if d.name in seen:
                raise ValueError(f"Duplicate gesture name: {d.name}")
            seen.add(d.name)
            frozen.append(d)
        self._descriptors: Tuple[GestureDescriptor, ...] = tuple(frozen)

    def __iter__(self) -> Iterator[GestureDescriptor]:
        return iter(self._descriptors)

    def __len__(self) -> int:
        return len(self._descriptors)

    @property
    def names(self) -> Tuple[str, ...]:
        return tuple(d.name for d in self._descriptors)

    def get(self, name: str) -> Optional[GestureDescriptor]:
        for d in self._descriptors:
            if d.name == name:
                return d
        return None
