"""Unit tests for SmartHidePanel constants.

Validates constant values across all constant groups for type correctness,
range validity, and consistency with the configuration defaults.
"""

import unittest
from unittest.mock import patch

from smarthidepanel import constants
from smarthidepanel.constants.panel import PanelConstants, ProximityPolicy
from smarthidepanel.constants.timers import TimerConstants


class TestConstants(unittest.TestCase):
    """Tests for validating SmartHidePanel constants."""

    def test_timer_constants(self):
        """Validate TimerConstants defaults match the documented timings."""
        self.assertEqual(constants.timers.ENTER_DELAY_MS, 0)
        self.assertEqual(constants.timers.LEAVE_DELAY_MS, 750)
        self.assertEqual(constants.timers.POLL_INTERVAL_MS, 50)
        self.assertEqual(constants.timers.ANIMATION_DURATION_MS, 200)

    def test_panel_constants(self):
        """Validate PanelConstants properties."""
        self.assertEqual(constants.panel.HOT_ZONE_HEIGHT_PX, 2)
        self.assertEqual(constants.panel.POINTER_TOP_THRESHOLD_PX, 5)
        self.assertEqual(constants.panel.PROXIMITY_MARGIN_PX, 50)
        self.assertIn(constants.panel.DEFAULT_PROXIMITY_POLICY, ProximityPolicy.CHOICES)

    def test_default_config_uses_constants(self):
        """Validate DEFAULT_CONFIG is built from the constant groups."""
        defaults = constants.config.defaults.DEFAULT_CONFIG
        self.assertEqual(defaults["leave_delay_ms"], constants.timers.LEAVE_DELAY_MS)
        self.assertEqual(defaults["hot_zone_height_px"], constants.panel.HOT_ZONE_HEIGHT_PX)
        self.assertIs(defaults["drag_suppresses_pointer"], True)
        self.assertIn(defaults["log_level"], constants.logs.LEVEL_NAMES)

    def test_log_constants(self):
        """Validate LogConstants properties."""
        self.assertTrue(constants.logs.LOG_FILENAME)
        self.assertGreater(constants.logs.MAX_LOG_SIZE, 0)

    def test_app_constants(self):
        self.assertEqual(constants.app.LOGGER_NAME, "SmartHidePanel")

    def test_invalid_timer_default_is_rejected(self):
        """A default outside its range fails validation at construction."""
        with patch.object(TimerConstants, "LEAVE_DELAY_MS", 99999):
            with self.assertRaises(ValueError):
                TimerConstants()

    def test_invalid_policy_default_is_rejected(self):
        with patch.object(PanelConstants, "DEFAULT_PROXIMITY_POLICY", "loose"):
            with self.assertRaises(ValueError):
                PanelConstants()


if __name__ == "__main__":
    unittest.main()
