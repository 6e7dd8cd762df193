"""Test wake-up light request and response schemas."""
from __future__ import annotations

import pytest
import voluptuous as vol

from custom_components.wakeup_light.api.schemas import (
    ALARM_REQUEST_SCHEMA,
    ALARM_RESPONSE_SCHEMA,
    TOGGLE_ALARM_RESPONSE_SCHEMA,
    brightness_schema,
    strict_int,
)


class TestStrictInt:
    """Test the strict integer validator."""

    def test_accepts_int(self):
        """Test plain integers pass through."""
        assert strict_int(7) == 7

    @pytest.mark.parametrize("value", [True, False, 7.0, "7", None])
    def test_rejects_non_int(self, value):
        """Test bools, floats and strings are rejected."""
        with pytest.raises(vol.Invalid):
            strict_int(value)


class TestAlarmSchemas:
    """Test alarm schemas."""

    @pytest.mark.parametrize(("hour", "minute"), [(0, 0), (23, 59), (6, 30)])
    def test_request_accepts_bounds(self, hour: int, minute: int):
        """Test the full 24-hour range is accepted."""
        assert ALARM_REQUEST_SCHEMA({"hour": hour, "minute": minute}) == {
            "hour": hour,
            "minute": minute,
        }

    @pytest.mark.parametrize(("hour", "minute"), [(24, 0), (0, 60), (-1, 0)])
    def test_request_rejects_out_of_range(self, hour: int, minute: int):
        """Test out-of-range values are rejected."""
        with pytest.raises(vol.Invalid):
            ALARM_REQUEST_SCHEMA({"hour": hour, "minute": minute})

    def test_response_requires_is_set(self):
        """Test get-alarm responses must carry isSet."""
        with pytest.raises(vol.Invalid):
            ALARM_RESPONSE_SCHEMA({"hour": 6, "minute": 30})

    def test_toggle_response_removes_extra(self):
        """Test unknown toggle response fields are dropped."""
        assert TOGGLE_ALARM_RESPONSE_SCHEMA(
            {"isAlarmSet": True, "alarmTime": "06:30", "ok": 1}
        ) == {"isAlarmSet": True, "alarmTime": "06:30"}

    @pytest.mark.parametrize("alarm_time", ["7:05", "00:00", "23:59"])
    def test_toggle_response_accepts_valid_time(self, alarm_time: str):
        """Test clock times in range are accepted."""
        assert TOGGLE_ALARM_RESPONSE_SCHEMA(
            {"isAlarmSet": False, "alarmTime": alarm_time}
        )["alarmTime"] == alarm_time

    @pytest.mark.parametrize("alarm_time", ["99:99", "24:00", "12:60", "1230", "ab:cd"])
    def test_toggle_response_rejects_invalid_time(self, alarm_time: str):
        """Test an impossible alarm time is an invalid response."""
        with pytest.raises(vol.Invalid):
            TOGGLE_ALARM_RESPONSE_SCHEMA({"isAlarmSet": True, "alarmTime": alarm_time})


class TestBrightnessSchema:
    """Test the bounded brightness schema."""

    def test_bound_is_injected(self):
        """Test the upper bound follows the configured range."""
        assert brightness_schema(1023)({"warm": 1023, "cool": 0})
        with pytest.raises(vol.Invalid):
            brightness_schema(255)({"warm": 1023, "cool": 0})

    def test_request_rejects_extra_keys(self):
        """Test request bodies may not carry unknown keys."""
        with pytest.raises(vol.Invalid):
            brightness_schema(255)({"warm": 1, "cool": 1, "mode": "x"})

    def test_response_drops_extra_keys(self):
        """Test response bodies lose unknown keys."""
        schema = brightness_schema(255, response=True)
        assert schema({"warm": 1, "cool": 2, "mode": "x"}) == {"warm": 1, "cool": 2}
