"""
reporter.py — Metrics Reporter
===============================
The callback contract for live metrics.  ArrayState calls the two
counter hooks synchronously on every change; the controller calls
on_status_changed on every status transition.

MetricsReporter is a no-op base class: subclass it and override only
what you need.  LoggingReporter writes everything to the log.
"""

import logging

logger = logging.getLogger(__name__)


class MetricsReporter:
    def on_comparisons_changed(self, total: int) -> None:
        pass

    def on_writes_changed(self, total: int) -> None:
        pass

    def on_status_changed(self, status) -> None:
        pass


class LoggingReporter(MetricsReporter):
    """Logs status changes at INFO and counter changes at DEBUG."""

    def __init__(self, log: logging.Logger = logger):
        self.log = log

    def on_comparisons_changed(self, total: int) -> None:
        self.log.debug("comparisons=%d", total)

    def on_writes_changed(self, total: int) -> None:
        self.log.debug("writes=%d", total)

    def on_status_changed(self, status) -> None:
        self.log.info("status -> %s", getattr(status, "value", status))
