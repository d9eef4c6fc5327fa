from concurrent.futures import ThreadPoolExecutor

import pytest

from build_profiler.tracking import ExecutionRegistry


def test_record_appends_samples():
    registry = ExecutionRegistry()
    registry.record("b", 5)
    registry.record("a", 3)
    registry.record("b", 7)

    snapshot = registry.snapshot()
    assert snapshot.executions == {"a": [3], "b": [5, 7]}
    assert list(snapshot.executions) == ["a", "b"]


def test_unsupported_names_are_deduplicated_and_sorted():
    registry = ExecutionRegistry()
    registry.record_unsupported("zeta.Event")
    registry.record_unsupported("alpha.Event")
    registry.record_unsupported("zeta.Event")

    assert registry.snapshot().unsupported == ["alpha.Event", "zeta.Event"]


def test_negative_sample_is_rejected():
    registry = ExecutionRegistry()

    with pytest.raises(ValueError):
        registry.record("X", -1)
    assert registry.snapshot().executions == {}


def test_empty_identifier_is_rejected():
    with pytest.raises(ValueError):
        ExecutionRegistry().record("", 1)


def test_snapshot_is_a_copy():
    registry = ExecutionRegistry()
    registry.record("X", 1)
    snapshot = registry.snapshot()
    registry.record("X", 2)

    assert snapshot.executions == {"X": [1]}


def test_reset_clears_everything():
    registry = ExecutionRegistry()
    registry.record("X", 1)
    registry.record_unsupported("builtins.str")
    registry.reset()

    snapshot = registry.snapshot()
    assert snapshot.executions == {}
    assert snapshot.unsupported == []


def test_concurrent_records_are_not_lost():
    registry = ExecutionRegistry()

    def work(worker: int) -> None:
        for sample in range(500):
            registry.record(f"phase-{worker % 4}", sample)
            registry.record_unsupported(f"type-{worker % 3}")

    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(work, range(16)))

    snapshot = registry.snapshot()
    assert sum(len(samples) for samples in snapshot.executions.values()) == 16 * 500
    assert all(len(samples) == 4 * 500 for samples in snapshot.executions.values())
    assert snapshot.unsupported == ["type-0", "type-1", "type-2"]
