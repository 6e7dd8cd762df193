"""Named warm/cool brightness presets."""

from __future__ import annotations

from dataclasses import dataclass

from .buffer import BrightnessLevels

# Preset levels are defined on the 10-bit scale and scaled to the
# configured firmware range.
PRESET_REFERENCE_MAX = 1023


@dataclass(frozen=True)
class LightPreset:
    """A fixed warm/cool combination."""

    key: str
    warm: int
    cool: int

    def levels(self, brightness_max: int) -> BrightnessLevels:
        """Return the preset levels scaled to brightness_max."""
        return BrightnessLevels(
            warm=round(self.warm * brightness_max / PRESET_REFERENCE_MAX),
            cool=round(self.cool * brightness_max / PRESET_REFERENCE_MAX),
        )


# Color temperature presets
PRESET_OFF = LightPreset("off", 0, 0)
PRESET_WARM = LightPreset("warm", 1023, 0)
PRESET_NEUTRAL = LightPreset("neutral", 820, 820)
PRESET_COOL = LightPreset("cool", 0, 1023)

# Time of day presets
PRESET_MORNING = LightPreset("morning", 1023, 410)
PRESET_DAY = LightPreset("day", 615, 1023)
PRESET_EVENING = LightPreset("evening", 820, 205)
PRESET_NIGHT = LightPreset("night", 205, 0)
PRESET_BEDTIME = LightPreset("bedtime", 500, 0)

LIGHT_PRESETS: dict[str, LightPreset] = {
    preset.key: preset
    for preset in (
        PRESET_OFF,
        PRESET_WARM,
        PRESET_NEUTRAL,
        PRESET_COOL,
        PRESET_MORNING,
        PRESET_DAY,
        PRESET_EVENING,
        PRESET_NIGHT,
        PRESET_BEDTIME,
    )
}
