"""
Mock display implementation for testing display change events.
"""
import logging
from typing import List, Optional

from .types import DisplayChange

logger = logging.getLogger(__name__)


class MockDisplay:
    """Mock display that logs and records changes instead of drawing them."""

    def __init__(self):
        """Initialize the mock display."""
        self.changes: List[DisplayChange] = []

    @property
    def current_message(self) -> Optional[str]:
        return self.changes[-1].message if self.changes else None

    async def show(self, change: DisplayChange) -> None:
        """Record the change instead of rendering it."""
        self.changes.append(change)
        logger.info("[MockDisplay] %s: %s (change #%d)", change.name, change.message, len(self.changes))

    def reset_counters(self) -> None:
        """Forget recorded changes."""
        self.changes.clear()
