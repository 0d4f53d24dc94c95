"""
FILE: tasknote/core/editing.py
PURPOSE: In-memory editing session for one task's notes
EXPORTS:
  - NoteEditor (holds a note and applies edits to it)
DEPENDENCIES:
  - dataclasses (stdlib)
  - tasknote.core.models (note variants)
  - tasknote.core.checklist (ChecklistStore)
  - tasknote.core.converter (convert_notes, is_lossy)
  - tasknote.core.exceptions (InvalidInputError)
NOTES:
  - Every checklist edit goes through a ChecklistStore, so the ordering
    invariant holds after each one
  - Positions are 1-based, as shown to users; ids are what the store uses
  - Editing text of a checklist-only note (or items of a text-only note)
    is a user error, raised as InvalidInputError
  - No I/O: the service and REPL decide when to save
"""

from dataclasses import replace
from typing import Callable, List, Optional, Union

from .checklist import ChecklistStore
from .converter import convert_notes, is_lossy, resolve_format
from .exceptions import InvalidInputError
from .models import (
    ChecklistItem,
    CombinedNote,
    ListNote,
    NoteFormat,
    NoteVariant,
    TextNote,
    unreachable_variant,
)


class NoteEditor:
    """Editing session holding one note variant."""

    def __init__(self, note: NoteVariant):
        self.note = note
        self.dirty = False

    @property
    def format(self) -> NoteFormat:
        return self.note.format

    @property
    def items(self) -> List[ChecklistItem]:
        """Checklist items in order (empty for text notes)."""
        if isinstance(self.note, (ListNote, CombinedNote)):
            return sorted(self.note.items, key=lambda item: item.order)
        return []

    def item_at(self, position: int) -> ChecklistItem:
        """
        Look up an item by its 1-based display position.

        Raises:
            InvalidInputError: If the note has no item at that position
        """
        items = self._require_items()
        if position < 1 or position > len(items):
            raise InvalidInputError(
                f"No checklist item #{position} (checklist has {len(items)} item(s))"
            )
        return items[position - 1]

    def set_text(self, content: str) -> None:
        if isinstance(self.note, TextNote):
            self.note = TextNote(content=content)
        elif isinstance(self.note, CombinedNote):
            self.note = replace(self.note, content=content)
        elif isinstance(self.note, ListNote):
            raise InvalidInputError("Notes are a checklist; switch to 'text' or 'both' to add text")
        else:
            unreachable_variant(self.note)
        self.dirty = True

    def _require_items(self) -> List[ChecklistItem]:
        if isinstance(self.note, TextNote):
            raise InvalidInputError("Notes are plain text; switch to 'list' or 'both' to use a checklist")
        return self.items

    def _edit_checklist(self, edit: Callable[[ChecklistStore], object]):
        self._require_items()
        store = ChecklistStore(self.note.items)
        result = edit(store)
        self.note = replace(self.note, items=store.sorted_items())
        self.dirty = True
        return result

    def add_item(self, text: str) -> Optional[ChecklistItem]:
        """Append an item; returns None (and changes nothing) for blank text."""
        self._require_items()
        if not text or not text.strip():
            return None
        return self._edit_checklist(lambda store: store.add(text))

    def remove_item(self, item_id: str) -> None:
        self._edit_checklist(lambda store: store.remove(item_id))

    def toggle_item(self, item_id: str) -> None:
        self._edit_checklist(lambda store: store.toggle_completed(item_id))

    def edit_item(self, item_id: str, text: str) -> None:
        self._edit_checklist(lambda store: store.update_text(item_id, text))

    def move_item(self, item_id: str, to_index: int) -> None:
        """Move an item to a 0-based index (clamped)."""
        self._edit_checklist(lambda store: store.move(item_id, to_index))

    def would_lose_content(self, target: Union[NoteFormat, str], preserve_content: bool) -> bool:
        return is_lossy(self.note, target, preserve_content)

    def switch_format(self, target: Union[NoteFormat, str], preserve_content: bool) -> NoteVariant:
        """Convert the held note; switching to the current format changes nothing."""
        target = resolve_format(target)
        if target is self.note.format:
            return self.note
        self.note = convert_notes(self.note, target, preserve_content)
        self.dirty = True
        return self.note
