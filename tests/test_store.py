"""Tests for the selection store."""

from pathlib import Path

import pytest

from ctxpick.events import EventType
from ctxpick.ranges import WHOLE, LineSpan, RangeError
from ctxpick.store import SelectionStore


@pytest.fixture
def store(tmp_path: Path) -> SelectionStore:
    return SelectionStore(root=tmp_path)


@pytest.fixture
def updates(store: SelectionStore) -> list[int]:
    """Record every update published by the store."""
    calls: list[int] = []
    store.events.subscribe(EventType.UPDATE, lambda: calls.append(1))
    return calls


def test_add_path_is_idempotent(store, updates):
    assert store.add_path("src/app.py")
    assert not store.add_path("src/app.py")

    assert store.snapshot_paths() == ["src/app.py"]
    assert len(updates) == 1


def test_add_path_canonicalises(store, tmp_path, updates):
    store.add_path("src/app.py")
    store.add_path("./src/../src/app.py")
    store.add_path(tmp_path / "src" / "app.py")

    assert store.snapshot_paths() == ["src/app.py"]
    assert len(updates) == 1


@pytest.mark.parametrize("path", ["", None])
def test_add_empty_path_is_noop(store, updates, path):
    assert not store.add_path(path)
    store.add_path_range(path, "1-2")

    assert store.snapshot_paths() == []
    assert store.ranges_by_path == {}
    assert updates == []


def test_order_preserved(store):
    for path in ["b.py", "a.py", "b.py", "c.py", "a.py"]:
        store.add_path(path)

    assert store.snapshot_paths() == ["b.py", "a.py", "c.py"]


def test_span_ranges_are_deduplicated(store, updates):
    store.add_path_range("a.py", "1-2")
    store.add_path_range("a.py", "1-2")

    assert store.ranges_for("a.py") == [LineSpan(1, 2)]
    # one for the range, one for selecting the path
    assert len(updates) == 2


def test_whole_ranges_accumulate(store, updates):
    store.add_path_range("a.py", "")
    store.add_path_range("a.py", "")

    assert store.ranges_for("a.py") == [WHOLE, WHOLE]
    assert store.snapshot_paths() == ["a.py"]
    assert len(updates) == 3


def test_add_range_for_selected_path(store, updates):
    store.add_path("a.py")
    store.add_path_range("a.py", "4-4")

    assert store.snapshot_paths() == ["a.py"]
    assert store.ranges_for("a.py") == [LineSpan(4, 4)]
    assert len(updates) == 2


def test_add_range_accepts_descriptors(store):
    store.add_path_range("a.py", LineSpan(2, 3))
    store.add_path_range("a.py", "2-3")
    store.add_path_range("a.py", WHOLE)

    assert store.ranges_for("a.py") == [LineSpan(2, 3), WHOLE]


def test_malformed_range_changes_nothing(store, updates):
    with pytest.raises(RangeError):
        store.add_path_range("a.py", "lines 1 to 2")

    assert store.snapshot_paths() == []
    assert store.ranges_by_path == {}
    assert updates == []


def test_ranges_keys_are_selected(store):
    store.add_path_range("a.py", "1-2")
    store.add_path_range("b.py", "")

    assert set(store.ranges_by_path) <= set(store.selected_paths)


def test_remove_at(store, updates):
    for path in ["a.py", "b.py", "c.py"]:
        store.add_path(path)
    updates.clear()

    assert store.remove_at(2)
    assert store.snapshot_paths() == ["a.py", "c.py"]
    assert len(updates) == 1


@pytest.mark.parametrize("index", [0, -1, 3, 100])
def test_remove_at_out_of_range(store, updates, index):
    store.add_path("a.py")
    store.add_path("b.py")
    updates.clear()

    assert not store.remove_at(index)
    assert store.snapshot_paths() == ["a.py", "b.py"]
    assert updates == []


def test_removed_path_keeps_its_ranges(store):
    store.add_path_range("a.py", "1-2")
    assert store.remove_at(1)
    assert store.snapshot_paths() == []

    store.add_path("a.py")
    assert store.ranges_for("a.py") == [LineSpan(1, 2)]


def test_remove_path(store):
    store.add_path("a.py")
    store.add_path("b.py")

    assert store.remove_path("./a.py")
    assert not store.remove_path("a.py")
    assert store.snapshot_paths() == ["b.py"]


def test_toggle_path(store, updates):
    assert store.toggle_path("a.py")
    assert "a.py" in store
    assert not store.toggle_path("a.py")
    assert "a.py" not in store
    assert len(updates) == 2


def test_append_unchecked_skips_duplicate_check(store):
    store.add_path("a.py")
    store.append_path_unchecked("a.py")

    assert store.snapshot_paths() == ["a.py", "a.py"]


def test_snapshot_is_independent(store):
    store.add_path("a.py")
    snapshot = store.snapshot_paths()
    snapshot.append("b.py")
    snapshot[0] = "changed.py"

    assert store.snapshot_paths() == ["a.py"]


def test_reset_clears_state_and_subscriptions(store, updates):
    store.add_path_range("a.py", "1-2")
    updates.clear()

    store.reset()
    assert updates == []
    assert store.snapshot_paths() == []
    assert store.ranges_by_path == {}

    store.add_path("b.py")
    assert updates == []


def test_paths_outside_root_are_absolute(store, tmp_path):
    outside = tmp_path.parent / "elsewhere.py"
    store.add_path(outside)

    assert store.snapshot_paths() == [outside.as_posix()]
