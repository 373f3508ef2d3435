"""
ui/
---
Presentation layer.

    from ui import render_bars
    from ui import playback_controls, algorithm_selector, …
"""

from ui.canvas import render_bars, bar_height, CanvasConfig

from ui.controls import (
    PLAY_LABELS,
    playback_controls,
    algorithm_selector,
    array_controls,
    speed_control,
    metrics_panel,
    algorithm_card,
    pseudocode_viewer,
    explanation_panel,
    analytics_panel,
)

__all__ = [
    "PLAY_LABELS",
    "render_bars",
    "bar_height",
    "CanvasConfig",
    "playback_controls",
    "algorithm_selector",
    "array_controls",
    "speed_control",
    "metrics_panel",
    "algorithm_card",
    "pseudocode_viewer",
    "explanation_panel",
    "analytics_panel",
]
