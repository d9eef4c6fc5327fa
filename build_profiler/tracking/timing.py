"""Per-thread pending start times."""

from __future__ import annotations

import threading
import time
from typing import Callable, Dict, List, Optional


def monotonic_millis() -> int:
    return time.monotonic_ns() // 1_000_000


class TimingTracker:
    """Pairs start and end events of an identifier within one thread.

    Without an explicit ``thread_id`` pending starts live in thread-local
    storage and are discarded when the thread exits. Callers passing a
    ``thread_id`` get a separate map per id. A second start for an
    identifier that is still pending replaces the first one.
    """

    def __init__(self, clock: Optional[Callable[[], int]] = None) -> None:
        self._clock = clock or monotonic_millis
        self._local = threading.local()
        self._starts: Dict[int, Dict[str, int]] = {}
        self._lock = threading.Lock()

    def on_start(self, identifier: str, thread_id: Optional[int] = None) -> None:
        """Remember the current time as the start of ``identifier``."""

        started_at = self._clock()
        self._thread_starts(thread_id)[identifier] = started_at

    def on_end(self, identifier: str, thread_id: Optional[int] = None) -> Optional[int]:
        """Consume the pending start of ``identifier`` and return the elapsed milliseconds.

        Returns ``None`` when ``identifier`` was not started on this thread.
        """

        started_at = self._thread_starts(thread_id).pop(identifier, None)
        if started_at is None:
            return None
        return self._clock() - started_at

    def pending(self, thread_id: Optional[int] = None) -> List[str]:
        """Identifiers started but not yet ended on the given thread."""

        if thread_id is None:
            return sorted(getattr(self._local, "starts", {}))
        with self._lock:
            return sorted(self._starts.get(thread_id, {}))

    def _thread_starts(self, thread_id: Optional[int]) -> Dict[str, int]:
        if thread_id is None:
            starts = getattr(self._local, "starts", None)
            if starts is None:
                starts = self._local.starts = {}
            return starts
        with self._lock:
            return self._starts.setdefault(thread_id, {})
