"""
Main application for hand sign recognition.
"""
import argparse
import asyncio
import logging
import sys
from typing import List, Optional

import cv2
import numpy as np

from .config import Cfg, load_config
from .gestures import GestureProcessor
from .landmarks import HandsTracker, draw_hand
from .loop import DetectionLoop
from .types import DisplayChange, Hand

logger = logging.getLogger(__name__)


class CameraLandmarkSource:
    """Runs the hand tracker on the most recent camera frame."""

    def __init__(self, tracker: HandsTracker):
        self.tracker = tracker
        self.frame: Optional[np.ndarray] = None
        self.hands: List[Hand] = []

    def submit(self, frame: np.ndarray) -> None:
        self.frame = frame

    async def read(self) -> Optional[List[Hand]]:
        frame = self.frame
        if frame is None:
            # camera not delivering yet
            return None
        self.hands = await asyncio.to_thread(self.tracker.process, frame)
        return self.hands


class OverlayDisplay:
    """Holds the committed message and draws it over the frame."""

    def __init__(self, font_scale: float = 1.6):
        self.font_scale = font_scale
        self.message: Optional[str] = None

    async def show(self, change: DisplayChange) -> None:
        self.message = change.message

    def draw(self, frame: np.ndarray) -> np.ndarray:
        if not self.message:
            return frame

        # Hershey fonts have no emoji glyphs
        text = self.message.encode("ascii", "ignore").decode().strip()
        height, width = frame.shape[:2]
        thickness = max(2, int(self.font_scale * 2))
        (text_w, _), _ = cv2.getTextSize(text, cv2.FONT_HERSHEY_DUPLEX, self.font_scale, thickness)
        origin = ((width - text_w) // 2, height - 80)

        cv2.putText(frame, text, (origin[0] + 4, origin[1] + 4), cv2.FONT_HERSHEY_DUPLEX,
                    self.font_scale, (0, 0, 0), thickness + 2)
        cv2.putText(frame, text, origin, cv2.FONT_HERSHEY_DUPLEX,
                    self.font_scale, (255, 255, 255), thickness)
        return frame


class GestureDisplayApp:
    """Main application class for hand sign recognition."""

    def __init__(self, config: Cfg):
        """Initialize the application with configuration."""
        self.config = config

        # Open the camera before loading the tracker model
        self.cap = cv2.VideoCapture(self.config.camera.index)
        if not self.cap.isOpened():
            self.cap.release()
            raise RuntimeError(f"Failed to open camera {self.config.camera.index}")
        self.cap.set(cv2.CAP_PROP_FRAME_WIDTH, self.config.camera.width)
        self.cap.set(cv2.CAP_PROP_FRAME_HEIGHT, self.config.camera.height)
        self.cap.set(cv2.CAP_PROP_FPS, self.config.camera.fps)

        self.tracker = HandsTracker(
            max_num_hands=self.config.mediapipe.max_num_hands,
            min_detection_conf=self.config.mediapipe.min_detection_confidence,
            min_tracking_conf=self.config.mediapipe.min_tracking_confidence
        )
        self.processor = GestureProcessor(self.config)
        self.source = CameraLandmarkSource(self.tracker)
        self.overlay = OverlayDisplay(font_scale=self.config.display.font_scale)
        self.detection = DetectionLoop(
            self.source, self.processor, self.overlay,
            interval_s=self.config.loop.interval_ms / 1000.0
        )

    async def run(self):
        """Run the capture and render loop while detection runs alongside."""
        logger.info("Starting %s, press 'q' to quit", self.config.display.window_name)
        logger.info("Gestures: %s", ", ".join(self.processor.registry.names))

        stop = asyncio.Event()
        detection = asyncio.create_task(self.detection.run(stop))
        try:
            while not stop.is_set():
                ret, frame = self.cap.read()
                if not ret:
                    logger.error("Failed to read frame from camera")
                    break

                self.source.submit(frame.copy())

                if self.config.display.show_landmarks and self.source.hands:
                    frame = draw_hand(frame, self.source.hands[0])
                frame = self.overlay.draw(frame)

                cv2.imshow(self.config.display.window_name, frame)
                if cv2.waitKey(1) & 0xFF == ord('q'):
                    break

                # let the detection loop run
                await asyncio.sleep(0)
        finally:
            stop.set()
            await detection
            self.cap.release()
            self.tracker.close()
            cv2.destroyAllWindows()


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Show the hand sign held up to the camera.")
    parser.add_argument("--config", default=None, help="Path to a YAML config file")
    return parser.parse_args(argv)


async def main(argv=None) -> int:
    """Entry point for the application."""
    args = parse_args(argv)
    config = load_config(args.config)
    logging.basicConfig(
        level=config.logging.level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s"
    )

    try:
        app = GestureDisplayApp(config)
        await app.run()
    except KeyboardInterrupt:
        logger.info("Application interrupted by user")
    except RuntimeError as e:
        logger.error("Error: %s", e)
        return 1
    return 0


def cli() -> None:
    sys.exit(asyncio.run(main()))


if __name__ == "__main__":
    cli()
