"""Thread-safe store of completed durations and unsupported event names."""

from __future__ import annotations

import threading
from typing import Dict, List, Set

from ..models import RegistrySnapshot


class ExecutionRegistry:
    """Collects duration samples (in milliseconds) per identifier."""

    def __init__(self) -> None:
        self._executions: Dict[str, List[int]] = {}
        self._unsupported: Set[str] = set()
        self._lock = threading.Lock()

    def record(self, identifier: str, duration_ms: int) -> None:
        """Append a completed duration for ``identifier``."""

        if not identifier:
            raise ValueError("identifier must not be empty")
        if duration_ms < 0:
            raise ValueError(f"negative duration {duration_ms} ms for '{identifier}'")
        with self._lock:
            self._executions.setdefault(identifier, []).append(int(duration_ms))

    def record_unsupported(self, type_name: str) -> None:
        """Remember that an event of ``type_name`` could not be classified."""

        with self._lock:
            self._unsupported.add(type_name)

    def snapshot(self) -> RegistrySnapshot:
        """Return a copy of the recorded state with keys and names sorted."""

        with self._lock:
            executions = {key: list(self._executions[key]) for key in sorted(self._executions)}
            unsupported = sorted(self._unsupported)
        return RegistrySnapshot(executions=executions, unsupported=unsupported)

    def reset(self) -> None:
        """Forget everything recorded so far."""

        with self._lock:
            self._executions.clear()
            self._unsupported.clear()
