"""Builds the textual execution time report."""

from __future__ import annotations

from typing import Iterable, List, Sequence

from ..models import ExecutionSummary, RegistrySnapshot
from .formatting import format_duration

SEPARATOR = "-" * 72
EXECUTION_HEADER = "Execution times:"
UNSUPPORTED_HEADER = "Unsupported events encountered:"


def summarize(identifier: str, samples: Sequence[int]) -> ExecutionSummary:
    """Aggregate the samples of one identifier."""

    if not samples:
        raise ValueError(f"no samples recorded for '{identifier}'")
    total = sum(samples)
    return ExecutionSummary(
        identifier=identifier,
        count=len(samples),
        total_ms=total,
        min_ms=min(samples),
        max_ms=max(samples),
        avg_ms=total // len(samples),
    )


def ranked_summaries(snapshot: RegistrySnapshot) -> List[ExecutionSummary]:
    """Summaries ordered by total descending, then identifier ascending."""

    summaries = [summarize(identifier, samples) for identifier, samples in snapshot.executions.items()]
    return sorted(summaries, key=lambda item: (-item.total_ms, item.identifier))


def format_summary(summary: ExecutionSummary) -> str:
    return (
        f"[{format_duration(summary.total_ms)}] executions: {summary.count:3d}, "
        f"min: {format_duration(summary.min_ms)}, max: {format_duration(summary.max_ms)}, "
        f"avg: {format_duration(summary.avg_ms)} - {summary.identifier}"
    )


def render_report(snapshot: RegistrySnapshot) -> List[str]:
    """Return the report lines for ``snapshot``; always ends with a separator."""

    lines: List[str] = []

    summaries = ranked_summaries(snapshot)
    if summaries:
        lines.append(EXECUTION_HEADER)
        lines.extend(format_summary(summary) for summary in summaries)

    if snapshot.unsupported:
        lines.append(SEPARATOR)
        lines.append(UNSUPPORTED_HEADER)
        lines.extend(_unsupported_lines(snapshot.unsupported))

    lines.append(SEPARATOR)
    return lines


def _unsupported_lines(type_names: Iterable[str]) -> Iterable[str]:
    for type_name in sorted(type_names):
        yield f" - {type_name}"
