"""
Periodic detection loop with skip-if-busy scheduling.
"""
import asyncio
import logging
from typing import Optional, Set

from .gestures import GestureProcessor
from .types import DisplaySink, LandmarkSource

logger = logging.getLogger(__name__)


class DetectionLoop:
    """
    Runs one detection cycle per interval.

    A tick that fires while the previous cycle is still running is skipped
    rather than queued. A cycle whose source is not ready yet does nothing,
    and a cycle that fails is logged and dropped.
    """

    def __init__(self, source: LandmarkSource, processor: GestureProcessor,
                 sink: DisplaySink, interval_s: float = 0.1):
        self.source = source
        self.processor = processor
        self.sink = sink
        self.interval_s = interval_s

        self.cycles = 0
        self.skipped = 0
        self.failed = 0
        self._in_flight = False
        self._failure: Optional[BaseException] = None

    @property
    def busy(self) -> bool:
        return self._in_flight

    async def tick(self) -> bool:
        """
        Run a single detection cycle.

        Returns:
            True if a cycle completed, False if it was skipped or the source
            was not ready, or the frame failed
        """
        if self._in_flight:
            self.skipped += 1
            logger.debug("Detection still running, skipping tick")
            return False

        self._in_flight = True
        try:
            try:
                hands = await self.source.read()
                if hands is None:
                    return False

                # Scoring is CPU bound, keep it off the event loop
                change = await asyncio.to_thread(self.processor.process_hands, hands)
            except Exception as e:
                # a bad frame is dropped, the next tick tries again
                self.failed += 1
                logger.warning("Detection cycle failed: %s", e)
                return False
            self.cycles += 1

            if change is not None:
                await self.sink.show(change)
            return True
        finally:
            self._in_flight = False

    async def run(self, stop_event: asyncio.Event) -> None:
        """Fire ticks every ``interval_s`` seconds until ``stop_event`` is set."""
        pending: Set[asyncio.Task] = set()

        def _done(task: asyncio.Task) -> None:
            pending.discard(task)
            if not task.cancelled() and task.exception() is not None and self._failure is None:
                self._failure = task.exception()
                stop_event.set()

        logger.info("Detection loop started (every %.0f ms)", self.interval_s * 1000)
        while not stop_event.is_set():
            task = asyncio.create_task(self.tick())
            pending.add(task)
            task.add_done_callback(_done)
            try:
                await asyncio.wait_for(stop_event.wait(), timeout=self.interval_s)
            except asyncio.TimeoutError:
                pass

        if pending:
            await asyncio.gather(*pending, return_exceptions=True)
        logger.info("Detection loop stopped after %d cycles (%d skipped, %d failed)",
                    self.cycles, self.skipped, self.failed)

        if self._failure is not None:
            raise self._failure
