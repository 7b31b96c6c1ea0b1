"""
Frame processing that turns detected hands into display change events.
"""
import logging
from typing import List, Optional, Sequence

from .config import Cfg
from .descriptor import GestureRegistry
from .display import DisplayState, DisplayStateMachine
from .estimator import GestureEstimator
from .library import default_registry
from .types import DisplayChange, GestureEstimate, Hand

logger = logging.getLogger(__name__)


class GestureProcessor:
    """
    Main gesture processor that coordinates scoring and display selection.
    """

    def __init__(self, cfg: Cfg, registry: Optional[GestureRegistry] = None):
        """Initialize gesture processor with configuration."""
        self.cfg = cfg
        self.registry = registry if registry is not None else default_registry()
        self.tolerance = cfg.estimator.tolerance_deg
        self.estimator = GestureEstimator(
            self.registry,
            noise_floor=cfg.estimator.noise_floor,
            curl_margin=cfg.estimator.curl_margin_deg,
        )
        self.state_machine = DisplayStateMachine(min_confidence=cfg.selection.min_confidence)
        self.last_estimates: List[GestureEstimate] = []

    @property
    def state(self) -> DisplayState:
        """Last committed display state."""
        return self.state_machine.state

    def estimate(self, hands: Sequence[Hand]) -> List[GestureEstimate]:
        """Score the first detected hand; no hands gives no estimates."""
        if not hands:
            return []
        return self.estimator.estimate(hands[0], self.tolerance)

    def process_hands(self, hands: Sequence[Hand]) -> Optional[DisplayChange]:
        """
        Process the hands found in one frame.

        Args:
            hands: Detected hands, each a sequence of 21 landmarks

        Returns:
            DisplayChange if the displayed gesture changed, None otherwise
        """
        estimates = self.estimate(hands)
        if estimates:
            logger.debug("Estimates: %s", ", ".join(
                f"{e.name}={e.confidence:.2f}" for e in estimates))
        self.last_estimates = estimates
        return self.state_machine.update(estimates)
