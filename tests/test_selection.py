"""Tests for the immutable selection tracker."""

from __future__ import annotations

from component_hub.selection import SelectionTracker


def test_toggle_adds_then_removes():
    tracker = SelectionTracker().toggle("1")
    assert tracker.is_selected("1")
    assert tracker.size() == 1

    tracker = tracker.toggle("1")
    assert not tracker.is_selected("1")
    assert tracker.size() == 0


def test_toggle_returns_new_tracker():
    original = SelectionTracker()
    toggled = original.toggle("1")

    assert original.size() == 0
    assert toggled is not original


def test_toggle_unknown_id_is_accepted():
    tracker = SelectionTracker().toggle("does-not-exist")
    assert "does-not-exist" in tracker


def test_clear_empties():
    tracker = SelectionTracker().toggle("1").toggle("2")
    assert tracker.clear().size() == 0


def test_select_many_unions_with_existing():
    tracker = SelectionTracker().toggle("1").select_many(["1", "2", "3"])
    assert tracker.size() == 3


def test_ordered_follows_catalog_order_not_toggle_order(make_entry):
    entries = [make_entry(id=str(i), name=f"E{i}") for i in range(1, 5)]
    tracker = SelectionTracker().toggle("4").toggle("1").toggle("3")

    assert [e.id for e in tracker.ordered(entries)] == ["1", "3", "4"]


def test_iteration_is_sorted_and_len_matches():
    tracker = SelectionTracker().toggle("b").toggle("a")
    assert list(tracker) == ["a", "b"]
    assert len(tracker) == 2
