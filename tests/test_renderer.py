import pytest

from build_profiler.models import RegistrySnapshot
from build_profiler.report import SEPARATOR, ranked_summaries, render_report, summarize

IDENTIFIER = "group:artifact:goal1@execution"


def test_separator_width():
    assert SEPARATOR == "-" * 72


def test_summarize_truncates_average():
    summary = summarize("X", [1, 2, 2])

    assert summary.count == 3
    assert summary.total_ms == 5
    assert summary.min_ms == 1
    assert summary.max_ms == 2
    assert summary.avg_ms == 1


def test_summarize_requires_samples():
    with pytest.raises(ValueError):
        summarize("X", [])


def test_full_report():
    snapshot = RegistrySnapshot(
        executions={IDENTIFIER: [226345, 6123, 8595677]},
        unsupported=["java.lang.String"],
    )

    assert render_report(snapshot) == [
        "Execution times:",
        "[  2:27 hrs] executions:   3, min:  6.123 sec, max:   2:23 hrs, avg:  49:02 min - " + IDENTIFIER,
        SEPARATOR,
        "Unsupported events encountered:",
        " - java.lang.String",
        SEPARATOR,
    ]


def test_empty_report_is_a_single_separator():
    assert render_report(RegistrySnapshot()) == [SEPARATOR]


def test_report_without_unsupported_events():
    lines = render_report(RegistrySnapshot(executions={"X": [1500]}))

    assert lines == [
        "Execution times:",
        "[ 1.500 sec] executions:   1, min:  1.500 sec, max:  1.500 sec, avg:  1.500 sec - X",
        SEPARATOR,
    ]


def test_report_with_only_unsupported_events():
    lines = render_report(RegistrySnapshot(unsupported=["b.Event", "a.Event"]))

    assert lines == [SEPARATOR, "Unsupported events encountered:", " - a.Event", " - b.Event", SEPARATOR]


def test_lines_are_ordered_by_total_descending_then_identifier():
    snapshot = RegistrySnapshot(
        executions={
            "small": [10],
            "tie-b": [50, 50],
            "tie-a": [100],
            "large": [1000],
        }
    )

    assert [summary.identifier for summary in ranked_summaries(snapshot)] == ["large", "tie-a", "tie-b", "small"]
    lines = render_report(snapshot)
    assert len(lines) == 6
    assert lines[1].endswith(" - large")
    assert lines[2].endswith(" - tie-a")
    assert lines[3].endswith(" - tie-b")
    assert lines[4].endswith(" - small")


def test_rendering_twice_is_identical():
    snapshot = RegistrySnapshot(executions={"X": [3, 4]}, unsupported=["builtins.str"])

    assert render_report(snapshot) == render_report(snapshot)


def test_snapshot_rejects_invalid_samples():
    with pytest.raises(ValueError):
        RegistrySnapshot(executions={"X": []})
    with pytest.raises(ValueError):
        RegistrySnapshot(executions={"X": [-5]})
