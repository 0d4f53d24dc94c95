"""
FILE: tasknote/repl/session.py
PURPOSE: State for one interactive note editing session
EXPORTS:
  - EditSession (dataclass)
  - open_session(task_id, preserve_content) -> EditSession
DEPENDENCIES:
  - tasknote.core.service (load/save)
  - tasknote.core.editing (NoteEditor)
  - tasknote.core.config (preserve-content setting)
NOTES:
  - The note lives in memory until save() (or exit) writes it back
  - One session per task; nothing is shared between sessions
"""

from dataclasses import dataclass
from typing import Optional

from ..core import service
from ..core.config import load_settings
from ..core.editing import NoteEditor
from ..core.models import Task


@dataclass
class EditSession:
    """
    Persistent state for the editor.

    Attributes:
        task: Task being edited
        editor: Note editor holding the in-memory note
        preserve_content: Default policy for format switches
    """
    task: Task
    editor: NoteEditor
    preserve_content: bool = True

    @property
    def note(self):
        return self.editor.note

    @property
    def dirty(self) -> bool:
        return self.editor.dirty

    def get_prompt(self) -> str:
        """
        Prompt string for plain input() mode.

        Returns:
            Prompt like "#3 list> " or "#3 both*> " when there are unsaved changes
        """
        marker = "*" if self.dirty else ""
        return f"#{self.task.id} {self.editor.format.value}{marker}> "

    def save(self) -> None:
        """Write the note back to storage."""
        self.task = service.save_notes(self.task.id, self.editor.note)
        self.editor.dirty = False


def open_session(task_id: int, preserve_content: Optional[bool] = None) -> EditSession:
    """
    Load a task's notes into a new editing session.

    Raises:
        TaskNotFoundError: If task_id doesn't exist
    """
    if preserve_content is None:
        preserve_content = load_settings().preserve_content
    task = service.get_task(task_id)
    return EditSession(
        task=task,
        editor=NoteEditor(service.notes_for_task(task)),
        preserve_content=preserve_content,
    )
