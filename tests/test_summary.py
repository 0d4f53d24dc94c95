"""
Tests for note summaries and previews.
"""

import pytest

from tasknote.core.models import ChecklistItem, CombinedNote, ListNote, NoteFormat, TextNote
from tasknote.core.summary import checklist_progress, describe_checklist, is_empty, preview


def make_items(*completed):
    return [
        ChecklistItem(id=str(index), text=f"item {index}", completed=done, order=index)
        for index, done in enumerate(completed)
    ]


def test_is_empty():
    assert is_empty(TextNote())
    assert is_empty(ListNote())
    assert is_empty(CombinedNote())
    assert not is_empty(TextNote(content="x"))
    assert not is_empty(ListNote(items=make_items(False)))
    assert not is_empty(CombinedNote(content="x"))


@pytest.mark.parametrize("completed, percent", [
    ((), 0),
    ((False,), 0),
    ((True, False), 50),
    ((True, False, False), 33),
    ((True, True, False), 67),
    ((True,) + (False,) * 7, 13),
    ((True, True, True), 100),
])
def test_checklist_progress_percent(completed, percent):
    progress = checklist_progress(make_items(*completed))

    assert progress.total == len(completed)
    assert progress.completed == sum(completed)
    assert progress.percent == percent


def test_describe_checklist():
    assert describe_checklist([]) == "0 items in checklist"
    assert describe_checklist(make_items(False)) == "1 item in checklist"
    assert describe_checklist(make_items(True, False, True, False)) == "4 items in checklist • 2 completed"


def test_preview_truncates_text():
    result = preview(TextNote(content="abcdefghij"), max_length=4)

    assert result.format is NoteFormat.TEXT
    assert result.text == "abcd"
    assert result.text_truncated is True
    assert result.items == []


def test_preview_short_text_not_truncated():
    result = preview(TextNote(content="abc"), max_length=4)
    assert result.text == "abc"
    assert result.text_truncated is False


def test_preview_shows_first_items_by_order():
    shuffled = list(reversed(make_items(False, True, False, False, True)))

    result = preview(ListNote(items=shuffled), max_items=3)

    assert [item.order for item in result.items] == [0, 1, 2]
    assert result.hidden_items == 2
    assert result.progress.completed == 2


def test_preview_combined_has_text_and_items():
    result = preview(CombinedNote(content="trip", items=make_items(False)))

    assert result.text == "trip"
    assert len(result.items) == 1
    assert result.hidden_items == 0


def test_preview_does_not_mutate_note():
    note = ListNote(items=list(reversed(make_items(False, False))))
    before = [item.id for item in note.items]

    preview(note, max_items=1)

    assert [item.id for item in note.items] == before
