"""Service wiring host build events to timing and the final report."""

from __future__ import annotations

import logging
from typing import Any, Callable, List, Optional

from ..config import Settings, get_settings
from ..events import EventClassifier
from ..models import RegistrySnapshot, UnsupportedEvent
from ..report import render_report
from ..tracking import ExecutionRegistry, TimingTracker

LOGGER = logging.getLogger(__name__)


class Profiler:
    """Receives host events one at a time and reports elapsed time per phase on close."""

    def __init__(
        self,
        classifier: Optional[EventClassifier] = None,
        tracker: Optional[TimingTracker] = None,
        registry: Optional[ExecutionRegistry] = None,
        sink: Optional[Callable[[str], None]] = None,
        settings: Optional[Settings] = None,
    ) -> None:
        self.settings = settings or get_settings()
        self.classifier = classifier or EventClassifier()
        self.tracker = tracker or TimingTracker()
        self.registry = registry or ExecutionRegistry()
        self.sink = sink or logging.getLogger(self.settings.report_logger).info

    def on_event(self, raw_event: Any, thread_id: Optional[int] = None) -> None:
        """Handle one host event; unknown shapes are remembered, never raised."""

        event = self.classifier.classify(raw_event)
        if isinstance(event, UnsupportedEvent):
            LOGGER.debug("Unsupported event %s", event.type_name)
            self.registry.record_unsupported(event.type_name)
            return

        if event.identifier is None:
            return

        if event.is_start:
            LOGGER.debug("Start of %s", event.identifier)
            self.tracker.on_start(event.identifier, thread_id=thread_id)
            return

        duration_ms = self.tracker.on_end(event.identifier, thread_id=thread_id)
        if duration_ms is None:
            LOGGER.warning("Received end event for event type that was not started: %s", event.identifier)
            return

        if duration_ms < 0:
            LOGGER.warning("Negative duration of %s ms measured for %s", duration_ms, event.identifier)
            if self.settings.negative_duration_policy == "drop":
                return
            duration_ms = 0

        LOGGER.debug("Recorded %s ms for %s", duration_ms, event.identifier)
        self.registry.record(event.identifier, duration_ms)

    def snapshot(self) -> RegistrySnapshot:
        return self.registry.snapshot()

    def report(self) -> List[str]:
        """Render the report lines for everything recorded so far."""

        return render_report(self.snapshot())

    def close(self) -> None:
        """Emit the report to the sink."""

        for line in self.report():
            self.sink(line)
