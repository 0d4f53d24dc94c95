"""
FILE: tasknote/formatting.py
PURPOSE: Shared formatting utilities for CLI and REPL output
EXPORTS:
  - NoteFormatter: Class for rendering notes and task lists
DEPENDENCIES:
  - rich (tables, panels, progress text)
  - tasknote.core.models (Task, note variants)
  - tasknote.core.summary (preview, progress)
  - tasknote.core.serializer (notes_to_dict)
NOTES:
  - Centralized formatting logic for consistency
  - Used by both CLI and REPL
  - Checklist positions are shown 1-based; commands take the same numbers
"""

from typing import Any, Dict, List

from rich.console import Group
from rich.markup import escape
from rich.panel import Panel
from rich.table import Table
from rich.text import Text

from .core.models import ChecklistItem, NoteFormat, NoteVariant, Task
from .core.serializer import notes_to_dict
from .core.summary import checklist_progress, describe_checklist, is_empty, preview

FORMAT_LABELS = {
    NoteFormat.TEXT: "Notes",
    NoteFormat.LIST: "Checklist",
    NoteFormat.BOTH: "Notes + Checklist",
}

FORMAT_STYLES = {
    NoteFormat.TEXT: "blue",
    NoteFormat.LIST: "magenta",
    NoteFormat.BOTH: "cyan",
}


class NoteFormatter:
    """Centralized note display formatting."""

    @staticmethod
    def format_label(note: NoteVariant) -> str:
        style = FORMAT_STYLES[note.format]
        return f"[{style}]{FORMAT_LABELS[note.format]}[/{style}]"

    @staticmethod
    def summary_line(note: NoteVariant) -> str:
        """
        One-line summary for task lists.

        Returns:
            Text excerpt and/or checklist description, or "-" for empty notes
        """
        if is_empty(note):
            return "[dim]-[/dim]"

        short = preview(note, max_length=40, max_items=0)
        parts = []
        if short.text:
            lines = short.text.splitlines()
            excerpt = lines[0] if lines else ""
            if short.text_truncated or len(lines) > 1:
                excerpt += "..."
            parts.append(escape(excerpt))
        if note.format is not NoteFormat.TEXT:
            parts.append(f"[dim]{describe_checklist(note.items)}[/dim]")
        return " | ".join(parts)

    @staticmethod
    def create_tasks_table(tasks: List[Task], summaries: Dict[int, NoteVariant], title: str = "Tasks") -> Table:
        """
        Create Rich table for tasks.

        Args:
            tasks: Tasks to display
            summaries: Decoded notes keyed by task id
            title: Table title

        Returns:
            Rich Table object ready for display
        """
        table = Table(title=title, show_header=True, header_style="bold cyan")
        table.add_column("ID", style="cyan", width=6, no_wrap=True)
        table.add_column("Title", style="white")
        table.add_column("Format", width=18)
        table.add_column("Notes")

        for task in tasks:
            note = summaries[task.id]
            table.add_row(
                str(task.id),
                escape(task.title),
                NoteFormatter.format_label(note),
                NoteFormatter.summary_line(note),
            )

        return table

    @staticmethod
    def checklist_table(items: List[ChecklistItem]) -> Table:
        """Checklist items with their 1-based positions."""
        table = Table(show_header=False, box=None, padding=(0, 1))
        table.add_column("#", style="dim", width=4, justify="right")
        table.add_column("Done", width=3)
        table.add_column("Item")

        for position, item in enumerate(sorted(items, key=lambda i: i.order), start=1):
            if item.completed:
                mark = "[green]✓[/green]"
                text = f"[dim strike]{escape(item.text)}[/dim strike]"
            else:
                mark = "[dim]○[/dim]"
                text = escape(item.text) if item.text else "[dim](empty)[/dim]"
            table.add_row(str(position), mark, text)

        return table

    @staticmethod
    def progress_line(items: List[ChecklistItem]) -> str:
        progress = checklist_progress(items)
        filled = progress.percent // 10
        bar = "█" * filled + "░" * (10 - filled)
        return f"{progress.completed} of {progress.total} completed [blue]{bar}[/blue] {progress.percent}%"

    @staticmethod
    def render(note: NoteVariant, title: str = "") -> Panel:
        """
        Full view of a note.

        Args:
            note: Note to display
            title: Panel title (usually the task title)

        Returns:
            Rich Panel with the text and/or checklist
        """
        parts: List[Any] = []
        text = note.content if note.format is not NoteFormat.LIST else ""
        items = note.items if note.format is not NoteFormat.TEXT else []

        if note.format is not NoteFormat.LIST:
            parts.append(Text(text) if text else Text("No notes", style="dim italic"))

        if note.format is not NoteFormat.TEXT:
            if parts:
                parts.append(Text(""))
            if items:
                parts.append(Text.from_markup(NoteFormatter.progress_line(items)))
                parts.append(NoteFormatter.checklist_table(items))
            else:
                parts.append(Text("No items in list", style="dim italic"))

        return Panel(
            Group(*parts),
            title=escape(title) if title else None,
            subtitle=NoteFormatter.format_label(note),
            border_style=FORMAT_STYLES[note.format],
        )

    @staticmethod
    def to_json_dict(task: Task, note: NoteVariant) -> Dict[str, Any]:
        """
        Convert a task and its notes to a JSON-serializable dict.

        Returns:
            Dictionary with task fields and the structured note
        """
        return {
            "id": task.id,
            "title": task.title,
            "created_at": task.created_at,
            "updated_at": task.updated_at,
            "notes": notes_to_dict(note),
        }

    @staticmethod
    def to_raw_lines(note: NoteVariant) -> List[str]:
        """
        Plain text lines for a note (no markup).

        Returns:
            Text lines followed by "[x] item" / "[ ] item" lines
        """
        lines = []
        if note.format is not NoteFormat.LIST and note.content:
            lines.extend(note.content.splitlines())
        if note.format is not NoteFormat.TEXT:
            for position, item in enumerate(sorted(note.items, key=lambda i: i.order), start=1):
                marker = "x" if item.completed else " "
                lines.append(f"{position}. [{marker}] {item.text}")
        return lines
