"""Tests for per-window history tracking."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

from bufswitch.history import HistoryTracker
from bufswitch.host import Buffer, MemoryHost, Window


def test_first_observation_records_single_entry():
    tracker = HistoryTracker()
    win = Window("w1")
    a = Buffer("a")
    tracker.record(win, a)
    assert tracker.stack(win) == [a]


def test_most_recent_first_without_duplicates():
    tracker = HistoryTracker()
    win = Window("w1")
    a, b, c = Buffer("a"), Buffer("b"), Buffer("c")
    for buf in (a, b, c, a, b, b):
        tracker.record(win, buf)
    stack = tracker.stack(win)
    assert stack == [b, a, c]
    assert len(stack) == len(set(map(id, stack)))


def test_dead_buffers_pruned_on_next_update():
    tracker = HistoryTracker()
    win = Window("w1")
    a, b, c = Buffer("a"), Buffer("b"), Buffer("c")
    tracker.record(win, a)
    tracker.record(win, b)
    a.kill()
    # Lazy: still present until the window is updated again
    assert tracker.stack(win) == [b, a]
    tracker.record(win, c)
    assert tracker.stack(win) == [c, b]


def test_windows_are_independent():
    tracker = HistoryTracker()
    w1, w2 = Window("w1"), Window("w2")
    a, b = Buffer("a"), Buffer("b")
    tracker.record(w1, a)
    tracker.record(w2, b)
    tracker.record(w1, b)
    assert tracker.stack(w1) == [b, a]
    assert tracker.stack(w2) == [b]


def test_suspended_tracker_ignores_updates():
    tracker = HistoryTracker()
    win = Window("w1")
    a, b = Buffer("a"), Buffer("b")
    tracker.record(win, a)
    tracker.suspend()
    tracker.record(win, b)
    assert tracker.stack(win) == [a]
    tracker.resume()
    tracker.record(win, b)
    assert tracker.stack(win) == [b, a]


def test_observe_updates_every_window():
    host = MemoryHost()
    w1 = host.add_window("w1")
    w2 = host.add_window("w2")
    a = host.add_buffer("a")
    b = host.add_buffer("b")
    host.set_displayed_buffer(w1, a)
    host.set_displayed_buffer(w2, b)
    tracker = HistoryTracker()
    tracker.observe(host)
    assert tracker.stack(w1) == [a]
    assert tracker.stack(w2) == [b]


def test_forget_closed_window():
    tracker = HistoryTracker()
    win = Window("w1")
    tracker.record(win, Buffer("a"))
    assert win in tracker
    tracker.forget(win)
    assert win not in tracker
    assert tracker.stack(win) == []
    tracker.forget(win)  # no-op


def test_unknown_window_has_empty_stack():
    assert HistoryTracker().stack(Window("nowhere")) == []


if __name__ == '__main__':
    test_first_observation_records_single_entry()
    test_most_recent_first_without_duplicates()
    test_dead_buffers_pruned_on_next_update()
    test_windows_are_independent()
    test_suspended_tracker_ignores_updates()
    test_observe_updates_every_window()
    test_forget_closed_window()
    test_unknown_window_has_empty_stack()
    print("All history tests passed.")
