"""Start/end pairing and duration storage."""

from .registry import ExecutionRegistry
from .timing import TimingTracker, monotonic_millis

__all__ = ["ExecutionRegistry", "TimingTracker", "monotonic_millis"]
