"""
config.py — Application Settings
==================================
Every tunable the app reads, as typed class attributes (same pattern as
ui.canvas.CanvasConfig).  `Settings.from_env()` overlays SORTVIZ_*
environment variables on top of the defaults:

    SORTVIZ_HOST, SORTVIZ_PORT, SORTVIZ_DEBUG, SORTVIZ_LOG_LEVEL,
    SORTVIZ_DEFAULT_SIZE, SORTVIZ_DEFAULT_ALGORITHM
"""

import os
from typing import Mapping, Optional


class Settings:
    # server
    host:       str  = "0.0.0.0"
    port:       int  = 5000
    debug:      bool = False
    log_level:  str  = "INFO"

    # array size slider
    min_size:      int = 5
    max_size:      int = 150
    default_size:  int = 40

    # speed slider: 1 (slow) … 60 (fast), mapped inversely onto a delay
    speed_slider_min:      int   = 1
    speed_slider_max:      int   = 60
    default_speed_slider:  int   = 30
    min_delay_ms:          float = 10.0
    max_delay_ms:          float = 120.0

    default_algorithm: str = "bubble"

    # how many steps one /api/state poll may catch up on
    max_steps_per_tick: int = 25

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "Settings":
        env = os.environ if environ is None else environ
        s = cls()
        s.host              = env.get("SORTVIZ_HOST", s.host)
        s.port              = int(env.get("SORTVIZ_PORT", s.port))
        s.debug             = env.get("SORTVIZ_DEBUG", "").lower() in ("1", "true", "yes") or s.debug
        s.log_level         = env.get("SORTVIZ_LOG_LEVEL", s.log_level).upper()
        s.default_size      = s.clamp_size(int(env.get("SORTVIZ_DEFAULT_SIZE", s.default_size)))
        s.default_algorithm = env.get("SORTVIZ_DEFAULT_ALGORITHM", s.default_algorithm)
        return s

    def clamp_size(self, size: int) -> int:
        """Array sizes outside the slider range are clamped, never rejected."""
        return max(self.min_size, min(self.max_size, int(size)))

    def clamp_speed_slider(self, value: int) -> int:
        return max(self.speed_slider_min, min(self.speed_slider_max, int(value)))


SETTINGS = Settings()
