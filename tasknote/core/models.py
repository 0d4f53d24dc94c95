"""
FILE: tasknote/core/models.py
PURPOSE: Domain models for tasks and their notes
EXPORTS:
  - NoteFormat (enum of format tags: text, list, both)
  - ChecklistItem (dataclass)
  - TextNote / ListNote / CombinedNote (dataclasses, the note variants)
  - NoteVariant (Union of the three variants)
  - create_empty_text_notes() / create_empty_list_notes() / create_empty_combined_notes()
  - create_empty_notes(note_format) -> NoteVariant
  - create_new_task_notes() -> ListNote
  - Task (dataclass)
DEPENDENCIES:
  - dataclasses (stdlib)
  - enum (stdlib)
  - typing (stdlib)
NOTES:
  - The three variants form a closed set; consumers dispatch with isinstance
    and finish with unreachable_variant() so a new variant fails loudly
  - content is never None, empty string means "no text"
  - Task.from_row() keeps the note columns as raw stored text; the
    persistence mapper decodes them
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import ClassVar, List, NoReturn, Optional, Union


class NoteFormat(str, Enum):
    """Discriminator selecting which note shape is active."""

    TEXT = "text"
    LIST = "list"
    BOTH = "both"

    @classmethod
    def from_tag(cls, tag) -> Optional["NoteFormat"]:
        """Look up a format by its tag, returning None for anything unrecognized."""
        if isinstance(tag, cls):
            return tag
        if not isinstance(tag, str):
            return None
        for member in cls:
            if member.value == tag:
                return member
        return None


@dataclass
class ChecklistItem:
    """One line of a checklist note, with completion state and explicit position."""

    id: str
    text: str
    completed: bool = False
    order: int = 0
    created_at: Optional[str] = None

    def to_dict(self) -> dict:
        """Wire shape of the item (camelCase, createdAt only when set)."""
        data = {
            "id": self.id,
            "text": self.text,
            "completed": self.completed,
            "order": self.order,
        }
        if self.created_at is not None:
            data["createdAt"] = self.created_at
        return data


@dataclass
class TextNote:
    """Free-text notes."""

    content: str = ""

    format: ClassVar[NoteFormat] = NoteFormat.TEXT


@dataclass
class ListNote:
    """Checklist-only notes."""

    items: List[ChecklistItem] = field(default_factory=list)

    format: ClassVar[NoteFormat] = NoteFormat.LIST


@dataclass
class CombinedNote:
    """Free text and a checklist held side by side."""

    content: str = ""
    items: List[ChecklistItem] = field(default_factory=list)

    format: ClassVar[NoteFormat] = NoteFormat.BOTH


NoteVariant = Union[TextNote, ListNote, CombinedNote]


def unreachable_variant(note: object) -> NoReturn:
    """Raise for a value outside the closed set of note variants."""
    raise TypeError(f"Unknown note variant: {type(note).__name__}")


def create_empty_text_notes() -> TextNote:
    return TextNote(content="")


def create_empty_list_notes() -> ListNote:
    return ListNote(items=[])


def create_empty_combined_notes() -> CombinedNote:
    return CombinedNote(content="", items=[])


def create_empty_notes(note_format: NoteFormat) -> NoteVariant:
    """Brand-new empty instance of the given format."""
    if note_format is NoteFormat.TEXT:
        return create_empty_text_notes()
    if note_format is NoteFormat.LIST:
        return create_empty_list_notes()
    if note_format is NoteFormat.BOTH:
        return create_empty_combined_notes()
    unreachable_variant(note_format)


def create_new_task_notes() -> ListNote:
    """
    Notes for a task that has never been saved.

    New tasks start in checklist mode. This is deliberately different from
    the loading default (an absent note string decodes to empty text).
    """
    return create_empty_list_notes()


@dataclass
class Task:
    """A task with a title and its notes as stored."""

    id: int
    title: str
    description: Optional[str] = None
    note_type: Optional[str] = None
    notes: Optional[str] = None
    checklist_items: Optional[str] = None
    created_at: Optional[str] = None
    updated_at: Optional[str] = None

    @classmethod
    def from_row(cls, row) -> "Task":
        """Convert SQLite row to Task object."""
        # Databases created before the notes migration lack the note columns
        try:
            note_type = row["note_type"]
            notes = row["notes"]
            checklist_items = row["checklist_items"]
        except (KeyError, IndexError):
            note_type, notes, checklist_items = None, None, None

        return cls(
            id=row["id"],
            title=row["title"],
            description=row["description"],
            note_type=note_type,
            notes=notes,
            checklist_items=checklist_items,
            created_at=row["created_at"],
            updated_at=row["updated_at"],
        )
