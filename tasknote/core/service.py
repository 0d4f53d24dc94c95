"""
FILE: tasknote/core/service.py
PURPOSE: Business logic layer for tasks and their notes
EXPORTS:
  - create_task(title) -> Task
  - get_task(task_id) -> Task
  - list_tasks() -> List[Task]
  - rename_task(task_id, title) -> Task
  - delete_task(task_id) -> None
  - notes_for_task(task) -> NoteVariant
  - load_notes(task_id) -> NoteVariant
  - save_notes(task_id, note) -> Task
  - set_text(task_id, content) -> NoteVariant
  - add_item(task_id, text) -> ChecklistItem
  - remove_item / toggle_item / edit_item / move_item(task_id, position, ...) -> NoteVariant
  - switch_format(task_id, target, preserve_content) -> NoteVariant
  - export_notes(task_id) -> str
  - import_notes(task_id, raw) -> NoteVariant
  - migrate_legacy_notes() -> int
DEPENDENCIES:
  - logging (stdlib)
  - tasknote.core.repository (all CRUD functions)
  - tasknote.core.parser / serializer / mapper (note encodings)
  - tasknote.core.editing (NoteEditor)
  - tasknote.core.config (preserve-content setting)
  - tasknote.core.exceptions (TaskNotFoundError, InvalidInputError)
NOTES:
  - All functions validate input and raise descriptive errors
  - No direct database access (use repository layer)
  - Notes are stored twice: as the normalized record columns and as the
    serialized string in description, for string-based readers
  - Loading prefers the record columns and falls back to parsing description
  - Item positions are 1-based, as displayed
"""

import logging
from typing import List, Optional, Union

from . import repository
from .config import load_settings
from .editing import NoteEditor
from .exceptions import InvalidInputError, TaskNotFoundError
from .mapper import from_record, record_from_columns, record_to_columns, to_record
from .models import ChecklistItem, NoteFormat, NoteVariant, Task, create_new_task_notes
from .parser import parse_notes
from .serializer import stringify_notes

logger = logging.getLogger(__name__)


def _note_columns(note: NoteVariant):
    return record_to_columns(to_record(note))


def create_task(title: str) -> Task:
    """
    Create a new task with empty checklist notes.

    Raises:
        InvalidInputError: If title is empty or whitespace-only
    """
    title = title.strip()
    if not title:
        raise InvalidInputError("Task title cannot be empty")

    note = create_new_task_notes()
    task = repository.create_task(
        title=title,
        note_columns=_note_columns(note),
        description=stringify_notes(note),
    )
    logger.info("Created task %s", task.id)
    return task


def get_task(task_id: int) -> Task:
    """
    Fetch a task.

    Raises:
        TaskNotFoundError: If task_id doesn't exist
    """
    task = repository.get_task(task_id)
    if not task:
        raise TaskNotFoundError(task_id)
    return task


def list_tasks() -> List[Task]:
    return repository.list_tasks()


def rename_task(task_id: int, title: str) -> Task:
    title = title.strip()
    if not title:
        raise InvalidInputError("Task title cannot be empty")
    return repository.update_task_title(task_id, title)


def delete_task(task_id: int) -> None:
    repository.delete_task(task_id)


def notes_for_task(task: Task) -> NoteVariant:
    """
    Decode a task's stored notes.

    Uses the normalized record when the task has one, otherwise parses
    the description string (which may be a legacy plain-text note).
    """
    if task.note_type is not None:
        record = record_from_columns(task.note_type, task.notes, task.checklist_items)
        return from_record(record)
    return parse_notes(task.description)


def load_notes(task_id: int) -> NoteVariant:
    return notes_for_task(get_task(task_id))


def save_notes(task_id: int, note: NoteVariant) -> Task:
    """Store a task's notes in both the record columns and description."""
    task = repository.update_task_notes(
        task_id,
        note_columns=_note_columns(note),
        description=stringify_notes(note),
    )
    logger.info("Saved %s notes for task %s", note.format.value, task_id)
    return task


def _edit(task_id: int) -> NoteEditor:
    return NoteEditor(load_notes(task_id))


def set_text(task_id: int, content: str) -> NoteVariant:
    """
    Replace the text of a task's notes.

    Raises:
        InvalidInputError: If the notes are checklist-only
    """
    editor = _edit(task_id)
    editor.set_text(content)
    save_notes(task_id, editor.note)
    return editor.note


def add_item(task_id: int, text: str) -> ChecklistItem:
    """
    Append a checklist item.

    Raises:
        InvalidInputError: If text is blank or the notes are text-only
    """
    editor = _edit(task_id)
    item = editor.add_item(text)
    if item is None:
        raise InvalidInputError("Checklist item text cannot be empty")
    save_notes(task_id, editor.note)
    return item


def remove_item(task_id: int, position: int) -> NoteVariant:
    editor = _edit(task_id)
    editor.remove_item(editor.item_at(position).id)
    save_notes(task_id, editor.note)
    return editor.note


def toggle_item(task_id: int, position: int) -> NoteVariant:
    editor = _edit(task_id)
    editor.toggle_item(editor.item_at(position).id)
    save_notes(task_id, editor.note)
    return editor.note


def edit_item(task_id: int, position: int, text: str) -> NoteVariant:
    editor = _edit(task_id)
    editor.edit_item(editor.item_at(position).id, text)
    save_notes(task_id, editor.note)
    return editor.note


def move_item(task_id: int, position: int, to_position: int) -> NoteVariant:
    """Move the item at position to to_position (both 1-based; target is clamped)."""
    editor = _edit(task_id)
    editor.move_item(editor.item_at(position).id, to_position - 1)
    save_notes(task_id, editor.note)
    return editor.note


def switch_format(
    task_id: int,
    target: Union[NoteFormat, str],
    preserve_content: Optional[bool] = None,
) -> NoteVariant:
    """
    Switch a task's notes to another format.

    Args:
        task_id: Task to update
        target: Format tag (text, list, both)
        preserve_content: Policy override; None uses TASKNOTE_PRESERVE_CONTENT

    Raises:
        InvalidInputError: If target isn't a known format
    """
    if preserve_content is None:
        preserve_content = load_settings().preserve_content

    editor = _edit(task_id)
    previous = editor.format
    editor.switch_format(target, preserve_content)
    if editor.dirty:
        save_notes(task_id, editor.note)
        logger.info(
            "Switched task %s notes from %s to %s (preserve_content=%s)",
            task_id, previous.value, editor.format.value, preserve_content,
        )
    return editor.note


def export_notes(task_id: int) -> str:
    """Serialized note string for a task."""
    return stringify_notes(load_notes(task_id))


def import_notes(task_id: int, raw: Optional[str]) -> NoteVariant:
    """Replace a task's notes with a persisted note string (structured or legacy)."""
    get_task(task_id)
    note = parse_notes(raw)
    save_notes(task_id, note)
    return note


def migrate_legacy_notes() -> int:
    """
    Backfill the normalized note columns for tasks that only have a description.

    Adds the note columns first when the database predates them.

    Returns:
        Number of tasks migrated
    """
    added = repository.add_note_columns(repository.get_connection())
    if added:
        logger.info("Added note columns: %s", ", ".join(added))

    tasks = repository.list_legacy_tasks()
    for task in tasks:
        note = parse_notes(task.description)
        repository.update_task_notes(
            task.id,
            note_columns=_note_columns(note),
            description=task.description,
        )
        logger.debug("Migrated task %s notes as %s", task.id, note.format.value)

    if tasks:
        logger.info("Migrated notes for %d task(s)", len(tasks))
    return len(tasks)
