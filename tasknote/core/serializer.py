"""
FILE: tasknote/core/serializer.py
PURPOSE: Encode note variants into the canonical persisted string
EXPORTS:
  - notes_to_dict(note) -> dict
  - stringify_notes(note) -> str
DEPENDENCIES:
  - json (stdlib)
  - tasknote.core.models (note variants)
NOTES:
  - Only the fields relevant to the format tag are written
  - parse_notes(stringify_notes(v)) == v for every v the parser can produce
"""

import json
from typing import Any, Dict

from .models import CombinedNote, ListNote, NoteVariant, TextNote, unreachable_variant


def notes_to_dict(note: NoteVariant) -> Dict[str, Any]:
    """Structured encoding of a note as a plain dict."""
    if isinstance(note, TextNote):
        return {"format": note.format.value, "content": note.content}
    if isinstance(note, ListNote):
        return {
            "format": note.format.value,
            "items": [item.to_dict() for item in note.items],
        }
    if isinstance(note, CombinedNote):
        return {
            "format": note.format.value,
            "content": note.content,
            "items": [item.to_dict() for item in note.items],
        }
    unreachable_variant(note)


def stringify_notes(note: NoteVariant) -> str:
    """Serialize a note for storage."""
    return json.dumps(notes_to_dict(note), ensure_ascii=False)
