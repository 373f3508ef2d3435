"""
controller.py — Playback Controller
====================================
The PlaybackController is the ONLY object the UI interacts with during a
run.  It owns the array, the selected algorithm and the live generator,
and exposes a clean start/pause/resume/speed API.

State machine (RunStatus):
    IDLE     →  start()          →  SORTING
    SORTING  →  toggle_pause()   →  PAUSED
    PAUSED   →  resume()         →  SORTING   (fresh run on the current array)
    SORTING  →  (final step)     →  DONE
    DONE     →  start()          →  SORTING
    any but SORTING  →  request_new_array()  →  IDLE

Pausing stops the run outright: the generator is closed, the array keeps
whatever the algorithm had already written, and resume() starts the
algorithm again from the top on that partially sorted array with the
counters back at zero.

Driving a run:
  • tick()   – call periodically from an event loop / poll handler;
               takes as many steps as the pacing delay says are due.
  • run()    – blocking loop that sleeps speed_ms after every step.
  • advance()– exactly one step, no pacing (tests, manual stepping).

Thread safety:
  This class is NOT thread-safe.  Exactly one generator is in flight and
  it is only ever resumed by the thread calling tick()/run()/advance().
  The web app wraps every call in one lock.
"""

import logging
import time
from enum import Enum
from typing import Callable, Iterator, Optional, Sequence, Dict, Any, Iterable

from config import Settings, SETTINGS
from bars import ArrayState, Highlight, EMPTY_HIGHLIGHT
from algorithms import REGISTRY, AlgoInfo, get_algorithm
from algorithms.context import RunContext, CancelToken
from algorithms.step import Step
from engine.pacing import Pacing
from engine.reporter import MetricsReporter

logger = logging.getLogger(__name__)

RenderFn = Callable[[Sequence[float], Highlight], None]


# ---------------------------------------------------------------------------
# States
# ---------------------------------------------------------------------------
class RunStatus(Enum):
    IDLE    = "idle"
    SORTING = "sorting"
    PAUSED  = "paused"
    DONE    = "done"


# ---------------------------------------------------------------------------
# Controller
# ---------------------------------------------------------------------------
class PlaybackController:
    """
    Attributes:
        array          : The ArrayState being sorted.
        pacing         : Shared Pacing (speed_ms) read before every wait.
        reporter       : MetricsReporter receiving counter/status changes.
        on_render      : Optional callback(values, highlight) fired after
                         every step and whenever a new array is loaded.
        status         : Current RunStatus.
        algorithm      : Registry key of the selected algorithm.
        last_step      : Most recent Step rendered (None before the first).
        inputs_enabled : False while sorting; the UI greys out size /
                         algorithm / new-array controls when False.
    """

    def __init__(
        self,
        on_render: Optional[RenderFn] = None,
        reporter: Optional[MetricsReporter] = None,
        pacing: Optional[Pacing] = None,
        settings: Settings = SETTINGS,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        self.settings:       Settings         = settings
        self.reporter:       MetricsReporter  = reporter if reporter is not None else MetricsReporter()
        self.array:          ArrayState       = ArrayState(reporter=self.reporter)
        self.pacing:         Pacing           = pacing if pacing is not None else Pacing(settings=settings)
        self.on_render:      Optional[RenderFn] = on_render
        self.status:         RunStatus        = RunStatus.IDLE
        self.algorithm:      str              = (
            settings.default_algorithm if settings.default_algorithm in REGISTRY else "bubble"
        )
        self.last_step:      Optional[Step]   = None
        self.inputs_enabled: bool             = True

        self._ctx:        Optional[RunContext]      = None
        self._generator:  Optional[Iterator[Step]]  = None
        self._clock       = clock
        self._sleep       = sleep
        self._last_tick:  float = 0.0

    # ------------------------------------------------------------------
    # Configuration (rejected while sorting)
    # ------------------------------------------------------------------
    def request_new_array(self, size: Optional[int] = None, rng=None) -> bool:
        """Generate a fresh random array.  Ignored while sorting."""
        if self.status is RunStatus.SORTING:
            logger.debug("new array rejected: sorting in progress")
            return False
        size = self.settings.clamp_size(self.settings.default_size if size is None else size)
        self.array.generate(size, rng=rng)
        self._reset_to_idle()
        return True

    def load_values(self, values: Iterable[float]) -> bool:
        """Load explicit values instead of random ones.  Ignored while sorting."""
        if self.status is RunStatus.SORTING:
            logger.debug("load rejected: sorting in progress")
            return False
        self.array.load(values)
        self._reset_to_idle()
        return True

    def select_algorithm(self, key: str) -> bool:
        """Pick the algorithm for the next run.  Ignored while sorting."""
        if self.status is RunStatus.SORTING:
            logger.debug("algorithm change to %r rejected: sorting in progress", key)
            return False
        if key not in REGISTRY:
            raise ValueError(f"Unknown algorithm: {key}")
        self.algorithm = key
        return True

    # ------------------------------------------------------------------
    # Speed (allowed at any time)
    # ------------------------------------------------------------------
    def set_speed(self, ms: float) -> None:
        self.pacing.set_ms(ms)

    def set_speed_slider(self, value: int) -> None:
        self.pacing.set_slider(value)

    # ------------------------------------------------------------------
    # Lifecycle
    # ------------------------------------------------------------------
    def start(self, algorithm_id: Optional[str] = None) -> bool:
        """Begin a run of the selected algorithm.  No-op while sorting."""
        if self.status is RunStatus.SORTING:
            return False
        if algorithm_id is not None:
            self.select_algorithm(algorithm_id)

        info = get_algorithm(self.algorithm)
        self.array.reset_counters()
        self._ctx       = RunContext(self.array, CancelToken(), self.pacing)
        self._generator = info.fn(self._ctx)
        self.last_step  = None
        self.inputs_enabled = False
        self._last_tick = self._clock()
        self._set_status(RunStatus.SORTING)
        logger.info("run started: %s on %d values", info.label, len(self.array))
        return True

    def toggle_pause(self) -> bool:
        """Stop the in-flight run, keeping its partial progress in the array."""
        if self.status is not RunStatus.SORTING:
            return False
        self._ctx.token.cancel()
        self.inputs_enabled = True
        self._set_status(RunStatus.PAUSED)
        self._stop_generator()
        logger.info(
            "run paused after %d step(s): comparisons=%d writes=%d",
            self._ctx.steps, self.array.comparisons, self.array.writes,
        )
        return True

    def resume(self) -> bool:
        """Start again from scratch on the (partially sorted) array."""
        if self.status is not RunStatus.PAUSED:
            return False
        return self.start()

    def play_pause(self) -> bool:
        """The single Start / Pause / Resume button."""
        if self.status is RunStatus.SORTING:
            return self.toggle_pause()
        return self.start()

    # ------------------------------------------------------------------
    # Driving the generator
    # ------------------------------------------------------------------
    def advance(self) -> bool:
        """Take exactly one step.  Returns True if a step was rendered."""
        if self._generator is None:
            return False
        if self.status is not RunStatus.SORTING or self._ctx.cancelled:
            self._stop_generator()
            return False

        try:
            step = next(self._generator)
        except StopIteration:
            self._complete()
            return False

        self.last_step = step
        self._render(step.values, step.highlight)
        if step.is_final or self._ctx.cancelled:
            self._complete()
        return True

    def tick(self, now: Optional[float] = None, max_steps: Optional[int] = None) -> int:
        """
        Call periodically (e.g. every 50 ms).  If sorting and enough time
        has elapsed, advances as many steps as the delay allows, capped
        at max_steps.  Returns the number of steps taken.
        """
        if self.status is not RunStatus.SORTING:
            return 0
        cap = self.settings.max_steps_per_tick if max_steps is None else max_steps
        now = self._clock() if now is None else now
        interval = self.pacing.seconds

        if interval > 0:
            due = int((now - self._last_tick) // interval)
            if due <= 0:
                return 0
        else:
            due = cap

        taken = 0
        for _ in range(min(due, cap)):
            if not self.advance():
                break
            taken += 1

        # carry the unused remainder into the next poll; resync when capped
        if interval > 0 and taken == due and self.status is RunStatus.SORTING:
            self._last_tick += taken * interval
        else:
            self._last_tick = now
        return taken

    def run(self, algorithm_id: Optional[str] = None) -> RunStatus:
        """
        Blocking: start (unless already sorting) and drive the run to
        completion or cancellation, sleeping speed_ms after each step.
        """
        if self.status is not RunStatus.SORTING and not self.start(algorithm_id):
            return self.status
        while self.advance():
            if self.status is RunStatus.SORTING and self.pacing.speed_ms > 0:
                self._sleep(self.pacing.seconds)
        return self.status

    # ------------------------------------------------------------------
    # Read-only accessors
    # ------------------------------------------------------------------
    @property
    def values(self) -> Sequence[float]:
        return self.array.snapshot()

    @property
    def comparisons(self) -> int:
        return self.array.comparisons

    @property
    def writes(self) -> int:
        return self.array.writes

    @property
    def is_sorting(self) -> bool:
        return self.status is RunStatus.SORTING

    @property
    def algorithm_info(self) -> AlgoInfo:
        return REGISTRY[self.algorithm]

    @property
    def highlight(self) -> Highlight:
        return self.last_step.highlight if self.last_step is not None else EMPTY_HIGHLIGHT

    def to_dict(self) -> Dict[str, Any]:
        step = self.last_step
        return {
            "status":         self.status.value,
            "algorithm":      self.algorithm,
            "size":           len(self.array),
            "comparisons":    self.array.comparisons,
            "writes":         self.array.writes,
            "speed_ms":       round(self.pacing.speed_ms, 2),
            "inputs_enabled": self.inputs_enabled,
            "step_number":    step.step_number if step else None,
            "explanation":    step.explanation if step else "",
        }

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------
    def _complete(self) -> None:
        cancelled = self._ctx is not None and self._ctx.cancelled
        self._stop_generator()
        self._generator = None
        self.inputs_enabled = True
        if cancelled:
            self._set_status(RunStatus.PAUSED)
            return
        self._set_status(RunStatus.DONE)
        logger.info(
            "run done: %s comparisons=%d writes=%d",
            self.algorithm, self.array.comparisons, self.array.writes,
        )

    def _close_generator(self) -> None:
        gen = self._generator
        # a reporter/render callback may pause us while the generator runs;
        # advance() closes it on the next call instead
        if gen is None or getattr(gen, "gi_running", False):
            return
        gen.close()
        self._generator = None

    def _stop_generator(self) -> None:
        """Close the generator; redraw if its cleanup wrote held values back."""
        writes = self.array.writes
        self._close_generator()
        if self.array.writes != writes:
            self._render(self.array.snapshot(), self.highlight)

    def _reset_to_idle(self) -> None:
        self._close_generator()
        self._generator = None
        self._ctx       = None
        self.last_step  = None
        self.inputs_enabled = True
        self._set_status(RunStatus.IDLE)
        self._render(self.array.snapshot(), EMPTY_HIGHLIGHT)

    def _set_status(self, status: RunStatus) -> None:
        if status is self.status:
            return
        self.status = status
        self.reporter.on_status_changed(status)

    def _render(self, values: Sequence[float], highlight: Highlight) -> None:
        if self.on_render is not None:
            self.on_render(values, highlight)
