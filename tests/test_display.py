"""
Test cases for displayed gesture selection and debouncing.
"""
import unittest
import sys
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from handsign.display import (
    DisplayGesture,
    DisplayStateMachine,
    GESTURE_MESSAGES,
    resolve_gesture,
    select_best,
)
from handsign.types import DisplayChange, GestureEstimate


class TestResolveGesture(unittest.TestCase):
    """Test alias resolution."""

    def test_library_names_are_aliased(self):
        self.assertEqual(resolve_gesture("victory"), DisplayGesture.PEACE)
        self.assertEqual(resolve_gesture("thumbs_up"), DisplayGesture.YES)

    def test_own_names_resolve_directly(self):
        self.assertEqual(resolve_gesture("ily"), DisplayGesture.ILY)
        self.assertEqual(resolve_gesture("namaste"), DisplayGesture.NAMASTE)
        self.assertEqual(resolve_gesture("ok"), DisplayGesture.OK)

    def test_unknown_name(self):
        self.assertIsNone(resolve_gesture("fist"))

    def test_every_gesture_has_a_message(self):
        self.assertEqual(set(GESTURE_MESSAGES), set(DisplayGesture))


class TestSelectBest(unittest.TestCase):
    """Test best estimate selection."""

    def test_empty(self):
        self.assertIsNone(select_best([]))

    def test_strict_maximum(self):
        best = select_best([GestureEstimate("ok", 0.7), GestureEstimate("ily", 0.9)])
        self.assertEqual(best.name, "ily")

    def test_first_wins_ties(self):
        best = select_best([GestureEstimate("ok", 0.9), GestureEstimate("ily", 0.9)])
        self.assertEqual(best.name, "ok")


class TestDisplayStateMachine(unittest.TestCase):
    """Test state transitions and change events."""

    def setUp(self):
        self.machine = DisplayStateMachine(min_confidence=0.85)

    def test_starts_idle(self):
        self.assertTrue(self.machine.state.is_idle)
        self.assertEqual(self.machine.state.name, "none")

    def test_idle_to_idle_emits_nothing(self):
        self.assertIsNone(self.machine.update([]))
        self.assertTrue(self.machine.state.is_idle)

    def test_show_then_debounce(self):
        change = self.machine.update([GestureEstimate("ok", 0.95)])
        self.assertEqual(change, DisplayChange(name="ok", message="OK! 👌"))
        self.assertEqual(self.machine.state.gesture, DisplayGesture.OK)

        self.assertIsNone(self.machine.update([GestureEstimate("ok", 0.9)]))
        self.assertEqual(self.machine.state.gesture, DisplayGesture.OK)

    def test_change_between_gestures(self):
        self.machine.update([GestureEstimate("ok", 0.95)])
        change = self.machine.update([GestureEstimate("victory", 0.99)])
        self.assertEqual(change, DisplayChange(name="peace", message="PEACE! ✌️"))

    def test_hand_lost_clears_display(self):
        self.machine.update([GestureEstimate("ily", 1.0)])
        change = self.machine.update([])
        self.assertEqual(change, DisplayChange(name="none", message=None))
        self.assertTrue(self.machine.state.is_idle)

    def test_threshold_is_inclusive(self):
        change = self.machine.update([GestureEstimate("namaste", 0.85)])
        self.assertIsNotNone(change)
        self.assertEqual(change.name, "namaste")

    def test_below_threshold_is_rejected(self):
        self.assertIsNone(self.machine.update([GestureEstimate("namaste", 0.8499)]))
        self.assertTrue(self.machine.state.is_idle)

    def test_below_threshold_clears_shown_gesture(self):
        self.machine.update([GestureEstimate("namaste", 0.9)])
        change = self.machine.update([GestureEstimate("namaste", 0.5)])
        self.assertEqual(change.name, "none")

    def test_unmapped_name_goes_idle(self):
        self.machine.update([GestureEstimate("ok", 0.9)])
        change = self.machine.update([GestureEstimate("fist", 0.99), GestureEstimate("ok", 0.9)])
        self.assertEqual(change, DisplayChange(name="none", message=None))

    def test_missing_message_goes_idle(self):
        machine = DisplayStateMachine(messages={DisplayGesture.OK: "OK"})
        self.assertIsNone(machine.update([GestureEstimate("ily", 1.0)]))
        self.assertTrue(machine.state.is_idle)

    def test_reset(self):
        self.machine.update([GestureEstimate("ok", 0.9)])
        self.assertEqual(self.machine.reset().name, "none")
        self.assertIsNone(self.machine.reset())


if __name__ == '__main__':
    unittest.main()
