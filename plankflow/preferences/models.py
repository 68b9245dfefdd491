"""User preferences.

Read-only from the workout's point of view: the summary reads `weight_kg`,
the feedback dispatcher reads the sound/vibration toggles. Weight is always
stored in kilograms; the unit system only affects how it is displayed.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

from plankflow.core.rounding import round_half_up

LB_PER_KG = 2.20462

UnitSystem = Literal["metric", "imperial"]
Theme = Literal["light", "dark"]
FontStyle = Literal["default", "compact"]


class Preferences(BaseModel):
    """User preferences.

    Attributes:
        weight_kg: Body weight in kilograms, None if never entered
        unit_system: Unit used to display and enter weight
        sound_enabled: Play cue sounds
        vibration_enabled: Emit vibration pulses
        theme: Color theme
        font_style: Font style
    """

    model_config = ConfigDict(frozen=True)

    weight_kg: float | None = Field(default=None, gt=0)
    unit_system: UnitSystem = "metric"
    sound_enabled: bool = True
    vibration_enabled: bool = True
    theme: Theme = "dark"
    font_style: FontStyle = "default"

    def display_weight(self) -> float | None:
        """Weight in the selected unit system (pounds are rounded to whole numbers)."""
        if self.weight_kg is None:
            return None
        if self.unit_system == "imperial":
            return round_half_up(self.weight_kg * LB_PER_KG)
        return self.weight_kg

    def with_display_weight(self, value: float | None) -> "Preferences":
        """Return a copy with weight entered in the selected unit system."""
        if value is None:
            return self.model_copy(update={"weight_kg": None})
        weight_kg = value if self.unit_system == "metric" else round_half_up(value / LB_PER_KG)
        return Preferences.model_validate({**self.model_dump(), "weight_kg": weight_kg})
