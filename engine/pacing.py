"""
pacing.py — Step Delay
=======================
Pacing holds the one mutable `speed_ms` scalar the controller waits on
between steps.  It can change at any time; whoever is waiting reads the
new value at the next suspension.

The speed slider maps linearly and inversely onto the delay:

    slider 1   →  ~118 ms   (slowest)
    slider 60  →   10 ms    (fastest)
"""

from typing import Optional

from config import Settings, SETTINGS


def slider_to_delay_ms(value: int, settings: Settings = SETTINGS) -> float:
    """Map a speed-slider position to a per-step delay in milliseconds."""
    v = settings.clamp_speed_slider(value)
    factor = 1 - v / settings.speed_slider_max
    return settings.min_delay_ms + factor * (settings.max_delay_ms - settings.min_delay_ms)


class Pacing:
    """
    Attributes:
        speed_ms : Delay between consecutive steps, in milliseconds.
        slider   : Last slider position, or None if set in raw ms.
    """

    def __init__(self, speed_ms: Optional[float] = None, settings: Settings = SETTINGS):
        self._settings = settings
        self.speed_ms: float         = 0.0
        self.slider:   Optional[int] = None
        if speed_ms is None:
            self.set_slider(settings.default_speed_slider)
        else:
            self.set_ms(speed_ms)

    def set_ms(self, ms: float) -> None:
        self.speed_ms = max(0.0, float(ms))
        self.slider   = None

    def set_slider(self, value: int) -> None:
        self.slider   = self._settings.clamp_speed_slider(value)
        self.speed_ms = slider_to_delay_ms(self.slider, self._settings)

    @property
    def seconds(self) -> float:
        return self.speed_ms / 1000.0

    def __repr__(self) -> str:
        return f"Pacing(speed_ms={self.speed_ms:.1f})"
