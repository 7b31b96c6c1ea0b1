"""
Test cases for application start-up.
"""
import importlib.util
import unittest
import sys
from pathlib import Path
from unittest import mock

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handsign.config import load_config

HAS_TRACKING = (importlib.util.find_spec("cv2") is not None
                and importlib.util.find_spec("mediapipe") is not None)


@unittest.skipUnless(HAS_TRACKING, "opencv and mediapipe are required")
class TestGestureDisplayApp(unittest.TestCase):
    """Test camera and tracker set-up."""

    def test_missing_camera_does_not_load_tracker(self):
        from handsign import main

        cap = mock.Mock()
        cap.isOpened.return_value = False
        with mock.patch.object(main.cv2, "VideoCapture", return_value=cap), \
                mock.patch.object(main, "HandsTracker") as tracker:
            with self.assertRaises(RuntimeError):
                main.GestureDisplayApp(load_config())

        tracker.assert_not_called()
        cap.release.assert_called_once()


if __name__ == '__main__':
    unittest.main()
