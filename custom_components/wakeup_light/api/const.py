from __future__ import annotations

ENDPOINT_STATUS = "status"
ENDPOINT_SET_ALARM = "set-alarm"
ENDPOINT_GET_ALARM = "get-alarm"
ENDPOINT_TOGGLE_ALARM = "toggle-alarm"
ENDPOINT_MANUAL_ON = "manual-on"
ENDPOINT_MANUAL_OFF = "manual-off"
ENDPOINT_SET_BRIGHTNESS = "set-brightness"

DEFAULT_SCHEME = "http://"

# Firmware revisions disagree on the PWM resolution of the LED channels.
BRIGHTNESS_MIN = 0
BRIGHTNESS_MAX_8BIT = 255
BRIGHTNESS_MAX_10BIT = 1023
SUPPORTED_BRIGHTNESS_MAX = (BRIGHTNESS_MAX_8BIT, BRIGHTNESS_MAX_10BIT)

HOUR_MIN = 0
HOUR_MAX = 23
MINUTE_MIN = 0
MINUTE_MAX = 59

REQUEST_TIMEOUT = 10
