"""
FILE: tasknote/core/mapper.py
PURPOSE: Map note variants to and from the normalized storage record
EXPORTS:
  - NoteRecord (dataclass: note_type, notes, checklist_items)
  - to_record(note) -> NoteRecord
  - from_record(record) -> NoteVariant
  - record_to_columns(record) -> (note_type, notes_json, items_json)
  - record_from_columns(note_type, notes_json, items_json) -> NoteRecord
DEPENDENCIES:
  - json (stdlib)
  - dataclasses (stdlib)
  - tasknote.core.models (note variants)
  - tasknote.core.parser (decode_items)
  - tasknote.core.checklist (normalize_items)
  - tasknote.core.constants (NOTE_TYPE_*)
NOTES:
  - text -> notes set, no items; checklist -> notes None, items set;
    both -> both set
  - from_record() never raises: a missing or unknown note_type is empty text
  - Stored items are lenient: malformed entries are dropped and the rest
    are reindexed densely
"""

import json
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

from .checklist import normalize_items
from .constants import NOTE_TYPE_BOTH, NOTE_TYPE_CHECKLIST, NOTE_TYPE_TEXT
from .models import (
    ChecklistItem,
    CombinedNote,
    ListNote,
    NoteVariant,
    TextNote,
    create_empty_text_notes,
    unreachable_variant,
)
from .parser import decode_items


@dataclass
class NoteRecord:
    """Storage-facing projection of a note: separate text, items and type columns."""

    note_type: Optional[str]
    notes: Optional[Dict[str, str]] = None
    checklist_items: List[ChecklistItem] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        """camelCase wire shape used by the backing store."""
        return {
            "noteType": self.note_type,
            "notes": self.notes,
            "checklistItems": [item.to_dict() for item in self.checklist_items],
        }

    @classmethod
    def from_dict(cls, data: Any) -> "NoteRecord":
        """Build a record from its wire shape, tolerating missing or mis-typed fields."""
        if not isinstance(data, dict):
            return cls(note_type=None)

        note_type = data.get("noteType")
        return cls(
            note_type=note_type if isinstance(note_type, str) else None,
            notes=_decode_notes_field(data.get("notes")),
            checklist_items=_decode_items_lenient(data.get("checklistItems")),
        )


def _decode_notes_field(data: Any) -> Optional[Dict[str, str]]:
    if isinstance(data, dict) and isinstance(data.get("content"), str):
        return {"content": data["content"]}
    return None


def _decode_items_lenient(data: Any) -> List[ChecklistItem]:
    return normalize_items(decode_items(data) or [])


def to_record(note: NoteVariant) -> NoteRecord:
    """Project a note onto the normalized storage record."""
    if isinstance(note, TextNote):
        return NoteRecord(
            note_type=NOTE_TYPE_TEXT,
            notes={"content": note.content},
            checklist_items=[],
        )
    if isinstance(note, ListNote):
        return NoteRecord(
            note_type=NOTE_TYPE_CHECKLIST,
            notes=None,
            checklist_items=list(note.items),
        )
    if isinstance(note, CombinedNote):
        return NoteRecord(
            note_type=NOTE_TYPE_BOTH,
            notes={"content": note.content},
            checklist_items=list(note.items),
        )
    unreachable_variant(note)


def from_record(record: NoteRecord) -> NoteVariant:
    """
    Rebuild a note from its storage record.

    Returns:
        The note for the record's note_type, or empty text when note_type
        is absent or unrecognized
    """
    content = (record.notes or {}).get("content") or ""
    items = normalize_items(record.checklist_items or [])

    if record.note_type == NOTE_TYPE_TEXT:
        return TextNote(content=content)
    if record.note_type == NOTE_TYPE_CHECKLIST:
        return ListNote(items=items)
    if record.note_type == NOTE_TYPE_BOTH:
        return CombinedNote(content=content, items=items)

    return create_empty_text_notes()


def record_to_columns(record: NoteRecord) -> Tuple[Optional[str], Optional[str], str]:
    """
    Encode a record as SQLite column values.

    Returns:
        (note_type, notes JSON or None, checklist_items JSON array)
    """
    notes_json = json.dumps(record.notes, ensure_ascii=False) if record.notes is not None else None
    items_json = json.dumps(
        [item.to_dict() for item in record.checklist_items], ensure_ascii=False
    )
    return record.note_type, notes_json, items_json


def record_from_columns(
    note_type: Optional[str],
    notes_json: Optional[str],
    items_json: Optional[str],
) -> NoteRecord:
    """Decode SQLite column values into a record; unreadable JSON counts as absent."""
    return NoteRecord.from_dict({
        "noteType": note_type,
        "notes": _load_column(notes_json),
        "checklistItems": _load_column(items_json),
    })


def _load_column(raw: Optional[str]) -> Any:
    if not raw:
        return None
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None
