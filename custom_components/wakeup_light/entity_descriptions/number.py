from __future__ import annotations

from dataclasses import dataclass

from homeassistant.components.number import NumberEntityDescription, NumberMode


@dataclass(frozen=True, kw_only=True)
class WakeupLightNumberEntityDescription(NumberEntityDescription):
    """Describes one brightness channel slider."""

    channel: str


NUMBER_DESCRIPTIONS: dict[str, WakeupLightNumberEntityDescription] = {
    "warm_white": WakeupLightNumberEntityDescription(
        key="warm_white",
        translation_key="warm_white",
        icon="mdi:white-balance-incandescent",
        mode=NumberMode.SLIDER,
        native_step=1,
        channel="warm",
    ),
    "cool_white": WakeupLightNumberEntityDescription(
        key="cool_white",
        translation_key="cool_white",
        icon="mdi:white-balance-sunny",
        mode=NumberMode.SLIDER,
        native_step=1,
        channel="cool",
    ),
}
