"""
Hand landmark detection and skeleton drawing using MediaPipe.
"""
import logging
from typing import List, Optional, Sequence

import cv2
import mediapipe as mp
import numpy as np

from .geometry import FINGER_JOINTS
from .types import Point

logger = logging.getLogger(__name__)

WRIST = 0


class HandsTracker:
    """Hand landmark tracker using MediaPipe Hands."""

    def __init__(self, max_num_hands: int = 1, min_detection_conf: float = 0.6, min_tracking_conf: float = 0.6):
        """
        Initialize the hands tracker.

        Args:
            max_num_hands: Maximum number of hands to detect
            min_detection_conf: Minimum confidence for hand detection
            min_tracking_conf: Minimum confidence for hand tracking
        """
        self.mp_hands = mp.solutions.hands
        self.hands = self.mp_hands.Hands(
            static_image_mode=False,
            max_num_hands=max_num_hands,
            min_detection_confidence=min_detection_conf,
            min_tracking_confidence=min_tracking_conf
        )
        logger.info("Hand landmark model loaded.")

    def process(self, frame_bgr: np.ndarray) -> List[List[Point]]:
        """
        Process a frame and return landmarks of every detected hand.

        Args:
            frame_bgr: Input frame in BGR format

        Returns:
            One list of 21 (x_px, y_px, z) points per hand, empty if no hand
        """
        height, width = frame_bgr.shape[:2]

        # Convert BGR to RGB for MediaPipe
        frame_rgb = cv2.cvtColor(frame_bgr, cv2.COLOR_BGR2RGB)
        results = self.hands.process(frame_rgb)

        if not results.multi_hand_landmarks:
            return []

        hands = []
        for hand_landmarks in results.multi_hand_landmarks:
            # z is relative depth, scaled like x so the axes stay comparable
            hands.append([
                (lm.x * width, lm.y * height, lm.z * width)
                for lm in hand_landmarks.landmark
            ])
        return hands

    def close(self) -> None:
        self.hands.close()


def draw_hand(frame: np.ndarray, landmarks: Optional[Sequence[Point]]) -> np.ndarray:
    """
    Draw the hand skeleton: finger bones from the wrist out, then the joints.

    Args:
        frame: Frame to draw on
        landmarks: 21 pixel-space points, or None

    Returns:
        Frame with the skeleton drawn
    """
    if not landmarks:
        return frame

    def px(i):
        return int(landmarks[i][0]), int(landmarks[i][1])

    for chain in FINGER_JOINTS.values():
        joints = (WRIST,) + chain
        for a, b in zip(joints, joints[1:]):
            cv2.line(frame, px(a), px(b), (255, 0, 255), 2)

    for i in range(len(landmarks)):
        cv2.circle(frame, px(i), 4, (0, 255, 255), -1)

    return frame
