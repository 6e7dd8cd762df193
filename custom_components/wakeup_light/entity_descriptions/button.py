from __future__ import annotations

from collections.abc import Callable, Coroutine
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from homeassistant.components.button import ButtonEntityDescription

from ..models import LIGHT_PRESETS, LightPreset, MutationKind

if TYPE_CHECKING:
    from ..coordinator import WakeupLightCoordinator


@dataclass(frozen=True, kw_only=True)
class WakeupLightButtonEntityDescription(ButtonEntityDescription):
    """Describes a wake-up light button that writes to the device."""

    mutation_kind: MutationKind
    press_fn: Callable[[WakeupLightCoordinator], Coroutine[Any, Any, None]]


BUTTON_DESCRIPTIONS: dict[str, WakeupLightButtonEntityDescription] = {
    "set_alarm": WakeupLightButtonEntityDescription(
        key="set_alarm",
        translation_key="set_alarm",
        icon="mdi:alarm-plus",
        mutation_kind=MutationKind.SET_ALARM,
        press_fn=lambda coordinator: coordinator.async_commit_alarm(),
    ),
    "max_brightness": WakeupLightButtonEntityDescription(
        key="max_brightness",
        translation_key="max_brightness",
        icon="mdi:lightbulb-on",
        mutation_kind=MutationKind.LIGHTS_ON,
        press_fn=lambda coordinator: coordinator.async_lights_on(),
    ),
    "lights_off": WakeupLightButtonEntityDescription(
        key="lights_off",
        translation_key="lights_off",
        icon="mdi:lightbulb-off",
        mutation_kind=MutationKind.LIGHTS_OFF,
        press_fn=lambda coordinator: coordinator.async_lights_off(),
    ),
}


def _preset_description(preset: LightPreset) -> WakeupLightButtonEntityDescription:
    return WakeupLightButtonEntityDescription(
        key=f"preset_{preset.key}",
        translation_key=f"preset_{preset.key}",
        icon="mdi:palette",
        mutation_kind=MutationKind.SET_BRIGHTNESS,
        press_fn=lambda coordinator: coordinator.async_apply_preset(preset),
    )


PRESET_BUTTON_DESCRIPTIONS: dict[str, WakeupLightButtonEntityDescription] = {
    key: _preset_description(preset) for key, preset in LIGHT_PRESETS.items()
}
