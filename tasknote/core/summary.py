"""
FILE: tasknote/core/summary.py
PURPOSE: Read-only summaries of notes for list views and previews
EXPORTS:
  - ChecklistProgress (dataclass)
  - NotePreview (dataclass)
  - is_empty(note) -> bool
  - checklist_progress(items) -> ChecklistProgress
  - preview(note, max_length, max_items) -> NotePreview
  - describe_checklist(items) -> str
DEPENDENCIES:
  - dataclasses, math (stdlib)
  - tasknote.core.models (note variants)
  - tasknote.core.constants (preview defaults)
NOTES:
  - Never mutates the note
  - Items are always read in order, never in stored array order
"""

import math
from dataclasses import dataclass, field
from typing import List, Sequence

from .constants import DEFAULT_PREVIEW_ITEMS, DEFAULT_PREVIEW_LENGTH
from .models import (
    ChecklistItem,
    CombinedNote,
    ListNote,
    NoteFormat,
    NoteVariant,
    TextNote,
    unreachable_variant,
)


@dataclass
class ChecklistProgress:
    total: int = 0
    completed: int = 0
    percent: int = 0


@dataclass
class NotePreview:
    """Truncated view of a note for compact display."""

    format: NoteFormat
    text: str = ""
    text_truncated: bool = False
    items: List[ChecklistItem] = field(default_factory=list)
    hidden_items: int = 0
    progress: ChecklistProgress = field(default_factory=ChecklistProgress)


def is_empty(note: NoteVariant) -> bool:
    """True when the note has no text and no checklist items."""
    if isinstance(note, TextNote):
        return not note.content
    if isinstance(note, ListNote):
        return not note.items
    if isinstance(note, CombinedNote):
        return not note.content and not note.items
    unreachable_variant(note)


def checklist_progress(items: Sequence[ChecklistItem]) -> ChecklistProgress:
    total = len(items)
    completed = sum(1 for item in items if item.completed)
    # Half rounds up (12.5% shows as 13%)
    percent = math.floor(completed / total * 100 + 0.5) if total else 0
    return ChecklistProgress(total=total, completed=completed, percent=percent)


def describe_checklist(items: Sequence[ChecklistItem]) -> str:
    """
    One-line description of a checklist.

    Examples:
        "1 item in checklist"
        "4 items in checklist • 2 completed"
    """
    progress = checklist_progress(items)
    plural = "" if progress.total == 1 else "s"
    description = f"{progress.total} item{plural} in checklist"
    if progress.completed:
        description += f" • {progress.completed} completed"
    return description


def preview(
    note: NoteVariant,
    max_length: int = DEFAULT_PREVIEW_LENGTH,
    max_items: int = DEFAULT_PREVIEW_ITEMS,
) -> NotePreview:
    """
    Build a compact preview of a note.

    Args:
        note: Note to preview
        max_length: Maximum characters of text to keep
        max_items: Maximum checklist items to keep

    Returns:
        NotePreview with the text excerpt, first items by order,
        the number of items left out and checklist progress
    """
    text = note.content if isinstance(note, (TextNote, CombinedNote)) else ""
    items = note.items if isinstance(note, (ListNote, CombinedNote)) else []

    ordered = sorted(items, key=lambda item: item.order)
    shown = ordered[:max(max_items, 0)]

    return NotePreview(
        format=note.format,
        text=text[:max_length],
        text_truncated=len(text) > max_length,
        items=shown,
        hidden_items=len(ordered) - len(shown),
        progress=checklist_progress(ordered),
    )
