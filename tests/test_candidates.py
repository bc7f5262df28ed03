"""Tests for candidate ordering and classification rules."""
import sys
import os
sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..'))

import pytest

from bufswitch.candidates import CandidateSetBuilder, PreconditionError
from bufswitch.history import HistoryTracker
from bufswitch.host import Buffer, Window
from bufswitch.rules import NameRegex, Predicate, RuleSet


def make_builder(tracker):
    return CandidateSetBuilder(
        tracker,
        ignore=RuleSet.from_config(["^ "]),
        uninteresting=RuleSet([NameRegex(r"^\*scratch\*$")]),
    )


def test_interesting_history_then_other_then_uninteresting():
    a, b, temp, c, scratch = (Buffer(n) for n in ("A", "B", " temp", "C", "*scratch*"))
    win = Window("w1")
    tracker = HistoryTracker()
    tracker.record(win, a)
    tracker.record(win, b)  # history is [B, A]
    snapshot = make_builder(tracker).build(win, [a, b, temp, c, scratch])
    assert [buf.name for buf in snapshot] == ["B", "A", "C", "*scratch*"]


def test_uninteresting_history_precedes_uninteresting_other():
    win = Window("w1")
    x = Buffer("x")
    msgs = Buffer("*Messages*")
    scratch = Buffer("*scratch*")
    tracker = HistoryTracker()
    tracker.record(win, scratch)
    tracker.record(win, x)
    builder = CandidateSetBuilder(tracker, RuleSet(), RuleSet.from_config([r"^\*"]))
    snapshot = builder.build(win, [msgs, x, scratch])
    assert list(snapshot) == [x, scratch, msgs]


def test_dead_history_entries_skipped():
    win = Window("w1")
    a, b = Buffer("a"), Buffer("b")
    tracker = HistoryTracker()
    tracker.record(win, a)
    tracker.record(win, b)
    b.kill()
    snapshot = make_builder(tracker).build(win, [a])
    assert list(snapshot) == [a]


def test_predicate_rule_can_ignore():
    win = Window("w1")
    a, b = Buffer("a"), Buffer("b")
    b.read_only = True
    ignore = RuleSet()
    ignore.add(lambda buf: getattr(buf, "read_only", False))
    builder = CandidateSetBuilder(HistoryTracker(), ignore, RuleSet())
    assert list(builder.build(win, [a, b])) == [a]
    assert isinstance(list(ignore)[0], Predicate)


def test_rule_set_is_or():
    rules = RuleSet([NameRegex("^x"), Predicate(lambda buf: buf.name.endswith("y"))])
    assert rules.matches(Buffer("xa"))
    assert rules.matches(Buffer("ay"))
    assert not rules.matches(Buffer("ab"))
    assert not RuleSet().matches(Buffer("anything"))


def test_minibuffer_window_refused():
    builder = make_builder(HistoryTracker())
    with pytest.raises(PreconditionError):
        builder.build(Window("mini", is_minibuffer=True), [Buffer("a")])


def test_dedicated_window_refused():
    builder = make_builder(HistoryTracker())
    with pytest.raises(PreconditionError):
        builder.build(Window("w", strongly_dedicated=True), [Buffer("a")])
