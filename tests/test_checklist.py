"""
Tests for the ordered checklist store.

Covers:
- Adding items (trimming, blank text, ids and timestamps)
- Removing, toggling and editing items
- Moving items with clamped targets
- Dense 0..n-1 ordering after every change
"""

import itertools

from tasknote.core.checklist import ChecklistStore, normalize_items
from tasknote.core.models import ChecklistItem


def make_store(*texts):
    """Store with predictable ids ("item-1", "item-2", ...) and a fixed clock."""
    counter = itertools.count(1)
    store = ChecklistStore(
        id_factory=lambda: f"item-{next(counter)}",
        clock=lambda: "2024-01-01T00:00:00+00:00",
    )
    for text in texts:
        store.add(text)
    return store


def texts(store):
    return [item.text for item in store.sorted_items()]


def orders(store):
    return [item.order for item in store.sorted_items()]


# --- Adding ---

def test_add_appends_unchecked_item():
    """New items go to the end, unchecked, with the next order value."""
    store = make_store("milk", "eggs")

    item = store.add("bread")

    assert item.text == "bread"
    assert item.completed is False
    assert item.order == 2
    assert item.id == "item-3"
    assert item.created_at == "2024-01-01T00:00:00+00:00"
    assert texts(store) == ["milk", "eggs", "bread"]


def test_add_trims_text():
    store = make_store()
    item = store.add("  buy milk  ")
    assert item.text == "buy milk"


def test_add_blank_text_is_noop():
    """Blank or whitespace-only text adds nothing."""
    store = make_store("milk")

    assert store.add("") is None
    assert store.add("   ") is None
    assert store.add(None) is None
    assert len(store) == 1


def test_default_ids_are_unique():
    store = ChecklistStore()
    first = store.add("a")
    second = store.add("b")
    assert first.id != second.id
    assert first.created_at is not None


# --- Removing ---

def test_remove_closes_gap():
    """Removing from the middle renumbers the rest densely."""
    store = make_store("a", "b", "c", "d")

    store.remove("item-2")

    assert texts(store) == ["a", "c", "d"]
    assert orders(store) == [0, 1, 2]


def test_remove_unknown_id_is_noop():
    store = make_store("a", "b")
    store.remove("missing")
    assert texts(store) == ["a", "b"]


# --- Toggling and editing ---

def test_toggle_completed_flips_state():
    store = make_store("a")

    store.toggle_completed("item-1")
    assert store.get("item-1").completed is True

    store.toggle_completed("item-1")
    assert store.get("item-1").completed is False


def test_toggle_does_not_change_order():
    store = make_store("a", "b", "c")
    store.toggle_completed("item-2")
    assert orders(store) == [0, 1, 2]
    assert texts(store) == ["a", "b", "c"]


def test_update_text_allows_empty():
    """Editing keeps empty text (unlike add)."""
    store = make_store("a")

    store.update_text("item-1", "")

    assert store.get("item-1").text == ""
    assert len(store) == 1


def test_update_unknown_id_is_noop():
    store = make_store("a")
    store.update_text("missing", "x")
    store.toggle_completed("missing")
    assert texts(store) == ["a"]
    assert store.get("item-1").completed is False


# --- Moving ---

def test_move_down():
    store = make_store("a", "b", "c", "d")

    store.move("item-1", 2)

    assert texts(store) == ["b", "c", "a", "d"]
    assert orders(store) == [0, 1, 2, 3]


def test_move_up():
    store = make_store("a", "b", "c", "d")

    store.move("item-4", 0)

    assert texts(store) == ["d", "a", "b", "c"]


def test_move_target_is_clamped():
    """Out-of-range targets land at the nearest end."""
    store = make_store("a", "b", "c")

    store.move("item-1", 99)
    assert texts(store) == ["b", "c", "a"]

    store.move("item-1", -5)
    assert texts(store) == ["a", "b", "c"]
    assert orders(store) == [0, 1, 2]


def test_move_unknown_id_is_noop():
    store = make_store("a", "b")
    store.move("missing", 0)
    assert texts(store) == ["a", "b"]


# --- Seeding and normalization ---

def test_seeded_items_are_normalized():
    """Gapped or unsorted orders become dense, sorted by order."""
    items = [
        ChecklistItem(id="x", text="third", order=10),
        ChecklistItem(id="y", text="first", order=-3),
        ChecklistItem(id="z", text="second", order=4),
    ]

    store = ChecklistStore(items)

    assert texts(store) == ["first", "second", "third"]
    assert orders(store) == [0, 1, 2]


def test_store_does_not_mutate_seed_items():
    original = ChecklistItem(id="x", text="a", order=5)
    store = ChecklistStore([original])

    store.toggle_completed("x")

    assert original.completed is False
    assert original.order == 5


def test_normalize_items_is_stable_for_equal_orders():
    items = [
        ChecklistItem(id="a", text="a", order=1),
        ChecklistItem(id="b", text="b", order=1),
        ChecklistItem(id="c", text="c", order=0),
    ]

    normalized = normalize_items(items)

    assert [item.id for item in normalized] == ["c", "a", "b"]
    assert [item.order for item in normalized] == [0, 1, 2]


def test_iteration_follows_order():
    store = make_store("a", "b", "c")
    store.move("item-3", 0)
    assert [item.text for item in store] == ["c", "a", "b"]


def test_drag_reorder_scenario():
    """Moving the second of two items to the top swaps their orders."""
    store = make_store("Buy milk", "Walk dog")

    store.move("item-2", 0)

    assert [(item.text, item.order) for item in store] == [("Walk dog", 0), ("Buy milk", 1)]


def test_orders_stay_dense_through_mixed_edits():
    store = make_store("a", "b", "c", "d", "e")

    store.remove("item-1")
    store.add("f")
    store.move("item-5", 0)
    store.remove("item-3")
    store.move("item-6", 2)

    assert orders(store) == list(range(len(store)))
    assert texts(store) == ["e", "b", "f", "d"]
