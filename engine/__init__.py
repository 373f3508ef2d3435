"""
engine/
-------
Playback & recording layer.

    from engine import PlaybackController, RunStatus, Recorder
"""

from engine.pacing     import Pacing, slider_to_delay_ms
from engine.reporter   import MetricsReporter, LoggingReporter
from engine.controller import PlaybackController, RunStatus
from engine.recorder   import Recorder, RunMetrics, record

__all__ = [
    "PlaybackController",
    "RunStatus",
    "Pacing",
    "slider_to_delay_ms",
    "MetricsReporter",
    "LoggingReporter",
    "Recorder",
    "RunMetrics",
    "record",
]
