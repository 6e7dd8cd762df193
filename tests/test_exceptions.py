"""Test wake-up light exceptions."""
from __future__ import annotations

from homeassistant.exceptions import HomeAssistantError, ServiceValidationError

from custom_components.wakeup_light.const import DOMAIN
from custom_components.wakeup_light.exceptions import (
    BrightnessOutOfRangeError,
    InvalidAlarmError,
    MutationFailedError,
    MutationInProgressError,
    WakeupLightException,
)


class TestWakeupLightException:
    """Test the translatable base exception."""

    def test_default_key(self):
        """Test the default translation key."""
        err = WakeupLightException()

        assert isinstance(err, HomeAssistantError)
        assert err.translation_domain == DOMAIN
        assert err.translation_key == "unknown_error"

    def test_override_key(self):
        """Test a key can be given per instance."""
        err = WakeupLightException(translation_key="status_unavailable")

        assert err.translation_key == "status_unavailable"


class TestMutationErrors:
    """Test write errors."""

    def test_mutation_failed(self):
        """Test placeholders carry the action and error."""
        err = MutationFailedError("set_brightness", "HTTP 500")

        assert err.translation_key == "mutation_failed"
        assert err.translation_placeholders == {
            "action": "set_brightness",
            "error": "HTTP 500",
        }
        assert err.action == "set_brightness"

    def test_mutation_in_progress(self):
        """Test the pending action is named."""
        err = MutationInProgressError("lights_on")

        assert err.translation_key == "mutation_in_progress"
        assert err.translation_placeholders == {"action": "lights_on"}


class TestValidationErrors:
    """Test local input validation errors."""

    def test_invalid_alarm(self):
        """Test invalid alarm input is a service validation error."""
        err = InvalidAlarmError("hour", "25", "must be between 0 and 23")

        assert isinstance(err, ServiceValidationError)
        assert err.translation_key == "invalid_alarm"
        assert err.field == "hour"
        assert err.translation_placeholders["value"] == "25"

    def test_brightness_out_of_range(self):
        """Test the maximum is reported as text."""
        err = BrightnessOutOfRangeError("warm", "300", 255)

        assert err.translation_key == "brightness_out_of_range"
        assert err.translation_placeholders == {
            "channel": "warm",
            "value": "300",
            "maximum": "255",
        }
