"""
Tests for the in-memory note editor.
"""

import pytest

from tasknote.core.editing import NoteEditor
from tasknote.core.exceptions import InvalidInputError
from tasknote.core.models import ChecklistItem, CombinedNote, ListNote, NoteFormat, TextNote


def list_editor(*texts):
    editor = NoteEditor(ListNote())
    for text in texts:
        editor.add_item(text)
    editor.dirty = False
    return editor


def texts(editor):
    return [item.text for item in editor.items]


def test_new_editor_is_clean():
    editor = NoteEditor(TextNote(content="x"))
    assert editor.dirty is False
    assert editor.format is NoteFormat.TEXT


def test_set_text_on_text_note():
    editor = NoteEditor(TextNote(content="old"))

    editor.set_text("new")

    assert editor.note == TextNote(content="new")
    assert editor.dirty is True


def test_set_text_on_combined_keeps_items():
    items = [ChecklistItem(id="a", text="milk")]
    editor = NoteEditor(CombinedNote(content="old", items=items))

    editor.set_text("new")

    assert editor.note.content == "new"
    assert editor.note.items == items


def test_set_text_on_list_raises():
    editor = list_editor("milk")
    with pytest.raises(InvalidInputError, match="checklist"):
        editor.set_text("hello")
    assert editor.dirty is False


def test_item_commands_on_text_raise():
    editor = NoteEditor(TextNote(content="x"))
    with pytest.raises(InvalidInputError, match="plain text"):
        editor.add_item("milk")
    with pytest.raises(InvalidInputError):
        editor.item_at(1)


def test_add_item():
    editor = list_editor("milk")

    item = editor.add_item("eggs")

    assert item.text == "eggs"
    assert item.order == 1
    assert texts(editor) == ["milk", "eggs"]
    assert editor.dirty is True


def test_add_blank_item_changes_nothing():
    editor = list_editor("milk")
    assert editor.add_item("  ") is None
    assert editor.dirty is False


def test_item_at_is_one_based():
    editor = list_editor("a", "b", "c")

    assert editor.item_at(1).text == "a"
    assert editor.item_at(3).text == "c"

    with pytest.raises(InvalidInputError, match="No checklist item #4"):
        editor.item_at(4)
    with pytest.raises(InvalidInputError):
        editor.item_at(0)


def test_remove_toggle_edit():
    editor = list_editor("a", "b", "c")

    editor.toggle_item(editor.item_at(1).id)
    editor.edit_item(editor.item_at(2).id, "B")
    editor.remove_item(editor.item_at(3).id)

    assert texts(editor) == ["a", "B"]
    assert editor.item_at(1).completed is True
    assert [item.order for item in editor.items] == [0, 1]


def test_move_item():
    editor = list_editor("a", "b", "c")

    editor.move_item(editor.item_at(3).id, 0)

    assert texts(editor) == ["c", "a", "b"]
    assert [item.order for item in editor.note.items] == [0, 1, 2]


def test_checklist_edits_on_combined_keep_text():
    editor = NoteEditor(CombinedNote(content="trip"))

    editor.add_item("passport")

    assert isinstance(editor.note, CombinedNote)
    assert editor.note.content == "trip"
    assert texts(editor) == ["passport"]


def test_switch_format():
    editor = NoteEditor(TextNote(content="trip"))

    editor.switch_format("both", preserve_content=True)

    assert editor.note == CombinedNote(content="trip", items=[])
    assert editor.dirty is True


def test_switch_to_same_format_is_clean():
    editor = NoteEditor(TextNote(content="trip"))
    editor.switch_format(NoteFormat.TEXT, preserve_content=False)
    assert editor.note == TextNote(content="trip")
    assert editor.dirty is False


def test_would_lose_content():
    editor = NoteEditor(CombinedNote(content="trip", items=[ChecklistItem(id="a", text="x")]))
    assert editor.would_lose_content("list", True) is True
    assert editor.would_lose_content("both", True) is False
