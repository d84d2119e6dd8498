from __future__ import annotations

from sudoku import (
    CompositeObserver,
    Grid,
    NullObserver,
    RecordingObserver,
    SinkObserver,
    SolveStats,
)


def test_stats_track_depth_and_counts() -> None:
    stats = SolveStats()
    grid = Grid.empty()

    stats.on_insert(grid, 1)
    stats.on_insert(grid, 2)
    stats.on_backtrack(grid, 2)
    stats.on_insert(grid, 2)

    assert stats.to_payload() == {"insertions": 3, "backtracks": 1, "max_depth": 2}


def test_sink_ignores_backtracks() -> None:
    received = []
    sink = SinkObserver(received.append)
    grid = Grid.empty()

    sink.on_insert(grid, 1)
    sink.on_backtrack(grid, 1)

    assert received == [grid]


def test_composite_fans_out_in_order() -> None:
    calls = []

    class Probe:
        def __init__(self, name: str) -> None:
            self.name = name

        def on_insert(self, grid, depth):
            calls.append((self.name, "insert", depth))

        def on_backtrack(self, grid, depth):
            calls.append((self.name, "backtrack", depth))

    composite = CompositeObserver.of([Probe("a"), NullObserver(), Probe("b")])
    composite.on_insert(Grid.empty(), 3)
    composite.on_backtrack(Grid.empty(), 3)

    assert calls == [
        ("a", "insert", 3),
        ("b", "insert", 3),
        ("a", "backtrack", 3),
        ("b", "backtrack", 3),
    ]


def test_recording_observer_keeps_snapshots() -> None:
    recorder = RecordingObserver()
    first = Grid.empty()
    second = first.insert(0, 0, 1)

    recorder.on_insert(first, 1)
    recorder.on_backtrack(first, 1)
    recorder.on_insert(second, 1)

    assert recorder.snapshots == [first, second]
