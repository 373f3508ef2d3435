"""Shared fixtures and helpers for the visualizer tests."""

import random
from collections import Counter

import pytest

from config import Settings
from bars import ArrayState
from algorithms import REGISTRY
from algorithms.context import RunContext
from engine import PlaybackController, MetricsReporter


ALGORITHMS = list(REGISTRY)


class Tagged(float):
    """A float that remembers where it started, for stability checks."""

    def __new__(cls, value, tag):
        obj = float.__new__(cls, value)
        obj.tag = tag
        return obj


class RecordingReporter(MetricsReporter):
    def __init__(self):
        self.comparisons = []
        self.writes = []
        self.statuses = []

    def on_comparisons_changed(self, total):
        self.comparisons.append(total)

    def on_writes_changed(self, total):
        self.writes.append(total)

    def on_status_changed(self, status):
        self.statuses.append(status)


def run_emitter(key, values):
    """Run one emitter headless; returns (array_state, steps)."""
    arr = ArrayState(values)
    ctx = RunContext(arr)
    steps = list(REGISTRY[key].fn(ctx))
    return arr, steps


def is_permutation(a, b):
    return Counter(a) == Counter(b)


@pytest.fixture
def settings():
    s = Settings()
    s.default_size = 12
    s.min_size = 1
    return s


@pytest.fixture
def reporter():
    return RecordingReporter()


@pytest.fixture
def renders():
    return []


@pytest.fixture
def controller(settings, reporter, renders):
    c = PlaybackController(
        on_render=lambda values, hl: renders.append((tuple(values), hl)),
        reporter=reporter,
        settings=settings,
        sleep=lambda s: None,
    )
    c.set_speed(0)
    return c


@pytest.fixture
def rng():
    return random.Random(1234)
