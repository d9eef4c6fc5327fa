"""Report rendering helpers."""

from .formatting import format_duration
from .renderer import SEPARATOR, ranked_summaries, render_report, summarize

__all__ = ["SEPARATOR", "format_duration", "ranked_summaries", "render_report", "summarize"]
