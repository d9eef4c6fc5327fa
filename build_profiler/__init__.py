"""Build lifecycle profiler."""

from .services import Profiler

__all__ = ["Profiler"]
