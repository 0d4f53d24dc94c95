"""
FILE: tasknote/core/converter.py
PURPOSE: Switch notes between text, list and combined formats
EXPORTS:
  - resolve_format(target) -> NoteFormat
  - convert_notes(note, target, preserve_content) -> NoteVariant
  - is_lossy(note, target, preserve_content) -> bool
DEPENDENCIES:
  - dataclasses (stdlib, copying items)
  - tasknote.core.models (note variants, NoteFormat)
  - tasknote.core.exceptions (InvalidInputError)
NOTES:
  - Pure functions: the preserve-content policy is always an argument
  - Combined is the only shape that holds text and items together, so
    switching into it keeps everything and switching out of it drops a side
  - Text is never split into checklist items
  - With preserve_content=False every switch starts from an empty note
"""

from dataclasses import replace
from typing import List, Union

from .exceptions import InvalidInputError
from .models import (
    ChecklistItem,
    CombinedNote,
    ListNote,
    NoteFormat,
    NoteVariant,
    TextNote,
    create_empty_notes,
    unreachable_variant,
)


def resolve_format(target: Union[NoteFormat, str]) -> NoteFormat:
    """
    Resolve a format tag.

    Raises:
        InvalidInputError: If target isn't one of text, list, both
    """
    note_format = NoteFormat.from_tag(target)
    if note_format is None:
        valid = ", ".join(member.value for member in NoteFormat)
        raise InvalidInputError(f"Invalid note format '{target}'. Must be one of: {valid}")
    return note_format


def _copy_items(items: List[ChecklistItem]) -> List[ChecklistItem]:
    return [replace(item) for item in items]


def convert_notes(
    note: NoteVariant,
    target: Union[NoteFormat, str],
    preserve_content: bool = True,
) -> NoteVariant:
    """
    Convert a note to another format.

    Args:
        note: Note to convert
        target: Format to switch to
        preserve_content: Carry content across where the target can hold it

    Returns:
        The original note if it already has the target format, otherwise
        a new note of the target format

    Raises:
        InvalidInputError: If target isn't a known format tag

    Conversion (preserve_content=True):
        text -> list      empty list
        text -> both      text content, no items
        list -> text      empty text
        list -> both      no text, list items
        both -> text      text content only
        both -> list      items only
    """
    target = resolve_format(target)

    if note.format is target:
        return note

    if not preserve_content:
        return create_empty_notes(target)

    if isinstance(note, TextNote):
        if target is NoteFormat.BOTH:
            return CombinedNote(content=note.content, items=[])
        return create_empty_notes(target)

    if isinstance(note, ListNote):
        if target is NoteFormat.BOTH:
            return CombinedNote(content="", items=_copy_items(note.items))
        return create_empty_notes(target)

    if isinstance(note, CombinedNote):
        if target is NoteFormat.TEXT:
            return TextNote(content=note.content)
        return ListNote(items=_copy_items(note.items))

    unreachable_variant(note)


def _text_of(note: NoteVariant) -> str:
    return note.content if isinstance(note, (TextNote, CombinedNote)) else ""


def _items_of(note: NoteVariant) -> List[ChecklistItem]:
    return note.items if isinstance(note, (ListNote, CombinedNote)) else []


def is_lossy(
    note: NoteVariant,
    target: Union[NoteFormat, str],
    preserve_content: bool = True,
) -> bool:
    """
    Whether converting would discard text or checklist items the note has.

    Consumers use this to ask for confirmation before a switch.
    """
    converted = convert_notes(note, target, preserve_content)
    loses_text = bool(_text_of(note)) and not _text_of(converted)
    loses_items = bool(_items_of(note)) and not _items_of(converted)
    return loses_text or loses_items
