"""
FILE: tasknote/repl/display.py
PURPOSE: Shared console and note display for the editor
EXPORTS:
  - console (rich Console)
  - display_notes(session) - Render the session's note
DEPENDENCIES:
  - rich (formatted output)
  - tasknote.formatting (NoteFormatter)
NOTES:
  - Console lives here so command modules and main.py share it
    without importing each other
"""

from rich.console import Console

from ..formatting import NoteFormatter

console = Console()


def display_notes(session, console_instance: Console = None) -> None:
    """
    Render the note held by an editing session.

    Args:
        session: EditSession to display
        console_instance: Optional Rich console instance (defaults to module console)
    """
    if console_instance is None:
        console_instance = console

    title = f"#{session.task.id} {session.task.title}"
    if session.dirty:
        title += " (unsaved)"
    console_instance.print(NoteFormatter.render(session.note, title=title))
