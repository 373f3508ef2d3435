"""Tests for the PlaybackController state machine, pacing and cancellation."""

import random

import pytest

from bars import EMPTY_HIGHLIGHT
from engine import PlaybackController, RunStatus, Pacing
from conftest import ALGORITHMS, is_permutation


class TestLifecycle:
    def test_initial_state(self, controller):
        assert controller.status is RunStatus.IDLE
        assert controller.inputs_enabled
        assert controller.algorithm == "bubble"
        assert controller.values == ()

    def test_new_array_resets_to_idle_and_renders(self, controller, renders):
        assert controller.request_new_array(8, rng=random.Random(1))
        assert len(controller.values) == 8
        assert controller.status is RunStatus.IDLE
        assert renders[-1] == (controller.values, EMPTY_HIGHLIGHT)

    def test_new_array_size_is_clamped(self, controller, settings):
        controller.request_new_array(10_000)
        assert len(controller.values) == settings.max_size
        controller.request_new_array(-3)
        assert len(controller.values) == settings.min_size

    def test_new_array_default_size(self, controller, settings):
        controller.request_new_array()
        assert len(controller.values) == settings.default_size

    @pytest.mark.parametrize("key", ALGORITHMS)
    def test_run_to_done(self, controller, reporter, key):
        controller.load_values([5, 3, 8, 1, 9, 2])
        status = controller.run(key)
        assert status is RunStatus.DONE
        assert list(controller.values) == [1, 2, 3, 5, 8, 9]
        assert reporter.statuses == [RunStatus.SORTING, RunStatus.DONE]
        assert controller.inputs_enabled

    def test_final_render_marks_everything_sorted(self, controller, renders):
        controller.load_values([3, 1, 2])
        controller.run("quick")
        values, hl = renders[-1]
        assert values == (1, 2, 3)
        assert hl.sorted == {0, 1, 2}

    def test_render_after_every_step(self, controller, renders):
        controller.load_values([2, 1])
        renders.clear()
        controller.start("bubble")
        taken = 0
        while controller.advance():
            taken += 1
        assert len(renders) == taken

    def test_start_is_noop_while_sorting(self, controller):
        controller.load_values([3, 2, 1])
        assert controller.start()
        assert not controller.start("merge")
        assert controller.algorithm == "bubble"

    def test_start_unknown_algorithm(self, controller):
        controller.load_values([1])
        with pytest.raises(ValueError):
            controller.start("bogo")
        assert controller.status is RunStatus.IDLE

    def test_rerun_after_done(self, controller):
        controller.load_values([2, 1])
        controller.run()
        assert controller.run() is RunStatus.DONE
        assert controller.comparisons == 1
        assert controller.writes == 0


class TestCounters:
    def test_reset_at_start(self, controller, reporter):
        controller.load_values([4, 3, 2, 1])
        controller.run("selection")
        assert controller.comparisons > 0
        reporter.comparisons.clear()
        controller.start("selection")
        assert controller.comparisons == 0
        assert controller.writes == 0
        assert reporter.comparisons[0] == 0

    def test_monotonic_during_run(self, controller, reporter):
        controller.load_values([9, 7, 5, 3, 1, 8, 6, 4, 2])
        reporter.comparisons.clear()
        reporter.writes.clear()
        controller.run("insertion")
        assert reporter.comparisons == sorted(reporter.comparisons)
        assert reporter.writes == sorted(reporter.writes)


class TestConfigurationGating:
    def test_rejected_while_sorting(self, controller):
        controller.load_values([3, 2, 1])
        controller.start()
        before = controller.values
        assert not controller.request_new_array(5)
        assert not controller.load_values([1])
        assert not controller.select_algorithm("merge")
        assert controller.values == before
        assert controller.algorithm == "bubble"
        assert not controller.inputs_enabled

    def test_select_unknown(self, controller):
        with pytest.raises(ValueError):
            controller.select_algorithm("bogo")

    def test_speed_allowed_while_sorting(self, controller):
        controller.load_values([3, 2, 1])
        controller.start()
        controller.set_speed(55)
        assert controller.pacing.speed_ms == 55
        controller.set_speed_slider(60)
        assert controller.pacing.speed_ms == pytest.approx(10.0)


class TestPauseResume:
    def test_pause_and_resume_when_not_allowed(self, controller):
        assert not controller.toggle_pause()
        assert not controller.resume()
        controller.load_values([1, 2])
        controller.run()
        assert not controller.toggle_pause()
        assert not controller.resume()
        assert controller.status is RunStatus.DONE

    def test_pause_keeps_partial_progress(self, controller, reporter):
        controller.load_values([5, 3, 8, 1])
        controller.start("bubble")
        controller.advance()            # compare(0, 1)
        controller.advance()            # swap → [3, 5, 8, 1]
        assert controller.toggle_pause()
        assert controller.status is RunStatus.PAUSED
        assert controller.inputs_enabled
        assert list(controller.values) == [3, 5, 8, 1]
        assert controller.writes == 2
        assert not controller.advance()
        assert reporter.statuses == [RunStatus.SORTING, RunStatus.PAUSED]

    def test_resume_restarts_on_partial_array(self, controller):
        controller.load_values([5, 3, 8, 1])
        controller.start("bubble")
        controller.advance()
        controller.advance()
        controller.toggle_pause()
        assert controller.resume()
        assert controller.status is RunStatus.SORTING
        assert controller.comparisons == 0
        assert controller.writes == 0
        controller.advance()
        assert controller.last_step.step_number == 0
        assert controller.last_step.values == (3, 5, 8, 1)
        assert controller.run() is RunStatus.DONE
        assert list(controller.values) == [1, 3, 5, 8]

    def test_play_pause_button(self, controller):
        controller.load_values([3, 2, 1])
        assert controller.play_pause()
        assert controller.status is RunStatus.SORTING
        assert controller.play_pause()
        assert controller.status is RunStatus.PAUSED
        assert controller.play_pause()
        assert controller.status is RunStatus.SORTING

    def test_new_array_after_pause(self, controller):
        controller.load_values([3, 2, 1])
        controller.start()
        controller.advance()
        controller.toggle_pause()
        assert controller.request_new_array(4)
        assert controller.status is RunStatus.IDLE
        assert controller.last_step is None

    @pytest.mark.parametrize("key", ALGORITHMS)
    def test_cancel_anywhere_leaves_permutation(self, controller, key):
        values = [random.Random(k).random() for k in range(20)]
        controller.load_values(values)
        controller.run(key)
        total = controller.last_step.step_number + 1

        for stop_after in range(1, total, 3):
            controller.load_values(values)
            controller.start(key)
            for _ in range(stop_after):
                controller.advance()
            controller.toggle_pause()
            assert controller.status is RunStatus.PAUSED
            assert is_permutation(controller.values, values), stop_after

    @pytest.mark.parametrize("key", ALGORITHMS)
    def test_pause_from_render_callback(self, settings, key):
        """A pause requested mid-run from a callback is honoured by run()."""
        values = [random.Random(k + 50).random() for k in range(15)]
        seen = []
        controller = PlaybackController(settings=settings, sleep=lambda s: None)

        def on_render(snapshot, hl):
            seen.append(snapshot)
            if len(seen) == 7:
                controller.toggle_pause()

        controller.set_speed(0)
        controller.load_values(values)
        controller.on_render = on_render
        seen.clear()
        assert controller.run(key) is RunStatus.PAUSED
        # one extra frame when held values were written back on close
        assert len(seen) in (7, 8)
        assert seen[-1] == tuple(controller.values)
        assert is_permutation(seen[-1], values)

    def test_pause_from_reporter_mid_operation(self, settings):
        """Pausing while the generator is executing still stops the run."""
        from conftest import RecordingReporter

        class PausingReporter(RecordingReporter):
            controller = None

            def on_writes_changed(self, total):
                super().on_writes_changed(total)
                if total == 3 and self.controller is not None:
                    self.controller.toggle_pause()

        rep = PausingReporter()
        controller = PlaybackController(reporter=rep, settings=settings, sleep=lambda s: None)
        controller.set_speed(0)
        values = [0.9, 0.8, 0.7, 0.6, 0.5, 0.4]
        controller.load_values(values)
        rep.controller = controller
        assert controller.run("insertion") is RunStatus.PAUSED
        assert is_permutation(controller.values, values)
        assert not controller.advance()

    @pytest.mark.parametrize("key, values, expected", [
        ("insertion", [3, 2, 1],    (2, 3, 1)),
        ("merge",     [2, 1, 4, 3], (1, 2, 4, 3)),
    ])
    def test_pause_redraws_committed_values(self, controller, renders, key, values, expected):
        """The frame left on screen after a pause matches the array."""
        controller.load_values(values)
        controller.start(key)
        controller.advance()            # compare
        controller.advance()            # shift / merge write: a value is held out
        assert not is_permutation(renders[-1][0], values)
        controller.toggle_pause()
        assert controller.values == expected
        assert renders[-1][0] == expected

    def test_deferred_pause_redraws_committed_values(self, settings):
        from conftest import RecordingReporter

        class PausingReporter(RecordingReporter):
            controller = None

            def on_writes_changed(self, total):
                super().on_writes_changed(total)
                if total == 3 and self.controller is not None:
                    self.controller.toggle_pause()

        frames = []
        rep = PausingReporter()
        controller = PlaybackController(
            on_render=lambda v, hl: frames.append(tuple(v)),
            reporter=rep, settings=settings, sleep=lambda s: None,
        )
        controller.set_speed(0)
        values = [0.9, 0.8, 0.7, 0.6, 0.5, 0.4]
        controller.load_values(values)
        rep.controller = controller
        assert controller.run("insertion") is RunStatus.PAUSED
        assert frames[-1] == tuple(controller.values)
        assert is_permutation(frames[-1], values)


class TestPacing:
    def test_tick_follows_clock(self, settings):
        now = [0.0]
        controller = PlaybackController(settings=settings, clock=lambda: now[0])
        controller.set_speed(100)
        controller.load_values([4, 3, 2, 1])
        controller.start()
        assert controller.tick(now=0.05) == 0
        assert controller.tick(now=0.10) == 1
        assert controller.tick(now=0.35) == 2
        assert controller.tick(now=10.0, max_steps=3) == 3

    @pytest.mark.parametrize("speed_ms, expected", [(30, 33), (70, 14), (100, 10)])
    def test_tick_keeps_pace_with_coarser_polls(self, settings, speed_ms, expected):
        """Polling every 50 ms for one second still yields ~1000/speed steps."""
        controller = PlaybackController(settings=settings, clock=lambda: 0.0)
        controller.set_speed(speed_ms)
        controller.load_values(list(range(40, 0, -1)))
        controller.start("bubble")
        taken = sum(controller.tick(now=k * 0.05) for k in range(1, 21))
        assert expected - 1 <= taken <= expected + 1
        assert controller.status is RunStatus.SORTING

    def test_tick_resyncs_after_cap(self, settings):
        controller = PlaybackController(settings=settings, clock=lambda: 0.0)
        controller.set_speed(10)
        controller.load_values(list(range(40, 0, -1)))
        controller.start("bubble")
        assert controller.tick(now=5.0, max_steps=3) == 3
        # the backlog is dropped rather than replayed
        assert controller.tick(now=5.005) == 0
        assert controller.tick(now=5.015) == 1

    def test_tick_idle_does_nothing(self, controller):
        assert controller.tick() == 0

    def test_tick_zero_delay_uses_cap(self, controller):
        controller.load_values(list(range(30, 0, -1)))
        controller.start("bubble")
        assert controller.tick(max_steps=5) == 5

    def test_tick_reaches_done(self, controller):
        controller.load_values([2, 1])
        controller.start("merge")
        controller.tick(max_steps=100)
        assert controller.status is RunStatus.DONE

    def test_run_sleeps_between_steps(self, settings):
        sleeps = []
        controller = PlaybackController(settings=settings, sleep=sleeps.append)
        controller.set_speed(20)
        controller.load_values([3, 1, 2])
        controller.run("insertion")
        steps = controller.last_step.step_number + 1
        assert len(sleeps) == steps - 1
        assert all(s == pytest.approx(0.02) for s in sleeps)

    def test_speed_change_applies_to_next_wait(self, settings):
        sleeps = []
        controller = PlaybackController(settings=settings, sleep=sleeps.append)
        controller.set_speed(50)

        def on_render(values, hl):
            if controller.last_step is not None and controller.last_step.step_number == 1:
                controller.set_speed(5)

        controller.load_values([5, 4, 3, 2, 1])
        controller.on_render = on_render
        controller.run("bubble")
        assert sleeps[0] == pytest.approx(0.05)
        assert all(s == pytest.approx(0.005) for s in sleeps[1:])

    def test_shared_pacing_object(self, settings):
        pacing = Pacing(speed_ms=30)
        controller = PlaybackController(pacing=pacing, settings=settings)
        pacing.set_ms(7)
        assert controller.pacing.speed_ms == 7


class TestToDict:
    def test_state_fields(self, controller):
        controller.load_values([2, 1])
        controller.start("quick")
        controller.advance()
        state = controller.to_dict()
        assert state["status"] == "sorting"
        assert state["algorithm"] == "quick"
        assert state["size"] == 2
        assert state["comparisons"] == 1
        assert state["inputs_enabled"] is False
        assert state["step_number"] == 0
        assert state["explanation"]
