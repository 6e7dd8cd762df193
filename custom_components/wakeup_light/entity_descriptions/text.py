from __future__ import annotations

from dataclasses import dataclass

from homeassistant.components.text import TextEntityDescription, TextMode


@dataclass(frozen=True, kw_only=True)
class WakeupLightTextEntityDescription(TextEntityDescription):
    """Describes one alarm time field."""

    field: str


TEXT_DESCRIPTIONS: dict[str, WakeupLightTextEntityDescription] = {
    "alarm_hour": WakeupLightTextEntityDescription(
        key="alarm_hour",
        translation_key="alarm_hour",
        icon="mdi:clock-digital",
        mode=TextMode.TEXT,
        native_max=4,
        field="hour",
    ),
    "alarm_minute": WakeupLightTextEntityDescription(
        key="alarm_minute",
        translation_key="alarm_minute",
        icon="mdi:clock-digital",
        mode=TextMode.TEXT,
        native_max=4,
        field="minute",
    ),
}
