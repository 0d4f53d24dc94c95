"""
FILE: tasknote/core/parser.py
PURPOSE: Decode persisted note strings into note variants
EXPORTS:
  - parse_notes(raw) -> NoteVariant
  - decode_item(data, position) -> ChecklistItem | None
  - decode_items(data) -> List[ChecklistItem] | None
DEPENDENCIES:
  - json (stdlib)
  - logging (stdlib)
  - tasknote.core.models (note variants, ChecklistItem)
NOTES:
  - parse_notes() never raises: anything that isn't the structured
    format is a legacy plain-text note
  - Decoding is decode-then-validate; helpers return None on mismatch and
    parse_notes() collapses that to the legacy fallback in one place
  - None/empty input decodes to empty text, not the new-task checklist
  - Items are read leniently: once items is an array the note is
    structured, and only entries without a string id or text are dropped
"""

import json
import logging
from typing import Any, List, Optional

from .models import (
    ChecklistItem,
    CombinedNote,
    ListNote,
    NoteFormat,
    NoteVariant,
    TextNote,
    create_empty_text_notes,
)

logger = logging.getLogger(__name__)


def parse_notes(raw: Optional[str]) -> NoteVariant:
    """
    Turn a persisted note string into a note variant.

    Args:
        raw: Stored note string, or None if the task has no notes

    Returns:
        The structured note if raw is a recognized structured encoding,
        otherwise Text with raw as its content

    Examples:
        >>> parse_notes(None)
        TextNote(content='')
        >>> parse_notes("Just some old plain note")
        TextNote(content='Just some old plain note')
        >>> parse_notes('{"format": "list", "items": []}')
        ListNote(items=[])
    """
    if not raw:
        return create_empty_text_notes()

    notes = _decode_structured(raw)
    if notes is None:
        logger.debug("Note is not in structured format, reading %d chars as legacy text", len(raw))
        return TextNote(content=raw)

    return notes


def _load_json(raw: str) -> Any:
    try:
        return json.loads(raw)
    except (TypeError, ValueError, RecursionError):
        return None


def _decode_structured(raw: str) -> Optional[NoteVariant]:
    data = _load_json(raw)
    if not isinstance(data, dict):
        return None

    note_format = NoteFormat.from_tag(data.get("format"))
    if note_format is None:
        return None

    content = data.get("content")

    if note_format is NoteFormat.TEXT:
        if not isinstance(content, str):
            return None
        return TextNote(content=content)

    items = decode_items(data.get("items"))
    if items is None:
        return None

    if note_format is NoteFormat.LIST:
        return ListNote(items=items)

    if note_format is NoteFormat.BOTH:
        if not isinstance(content, str):
            return None
        return CombinedNote(content=content, items=items)

    return None


def decode_items(data: Any) -> Optional[List[ChecklistItem]]:
    """
    Decode a list of item dicts.

    Returns:
        None if data isn't a list. Otherwise the decodable items, with
        entries lacking a string id or text dropped
    """
    if not isinstance(data, list):
        return None

    items = []
    for position, entry in enumerate(data):
        item = decode_item(entry, position)
        if item is None:
            logger.debug("Dropping unreadable checklist item at index %d", position)
            continue
        items.append(item)
    return items


def _decode_order(order: Any, default: int) -> int:
    # bool is an int subclass; True is not a position
    if isinstance(order, bool):
        return default
    if isinstance(order, int):
        return order
    # JSON written by other tools may carry 0.0 for 0
    if isinstance(order, float) and order.is_integer():
        return int(order)
    return default


def decode_item(data: Any, position: int = 0) -> Optional[ChecklistItem]:
    """
    Decode one item dict in the wire shape.

    Requires string id and text. A missing or non-boolean completed reads
    as False, a missing or non-integer order falls back to position, and a
    non-string createdAt is left out.

    Args:
        data: Decoded JSON value for the item
        position: Index of the item in its array

    Returns:
        ChecklistItem, or None if data has no usable id or text
    """
    if not isinstance(data, dict):
        return None

    item_id = data.get("id")
    text = data.get("text")
    if not isinstance(item_id, str) or not isinstance(text, str):
        return None

    completed = data.get("completed")
    created_at = data.get("createdAt")

    return ChecklistItem(
        id=item_id,
        text=text,
        completed=completed if isinstance(completed, bool) else False,
        order=_decode_order(data.get("order"), position),
        created_at=created_at if isinstance(created_at, str) else None,
    )
