"""
FILE: tasknote/repl/commands/checklist.py
PURPOSE: Checklist item handlers for the editor (add, done, rm, edit, mv)
"""

from typing import Optional

from ..display import console, display_notes
from ..parser import ParseResult
from ..session import EditSession
from ...core.exceptions import InvalidInputError
from ...core.models import ChecklistItem


def _item_from_args(session: EditSession, result: ParseResult, usage: str) -> Optional[ChecklistItem]:
    """Resolve the first argument to an item, printing the problem if it can't."""
    position = result.int_arg(0)
    if position is None:
        console.print("[red]Error:[/red] Item number required")
        console.print(f"[dim]Usage: {usage}[/dim]")
        return None
    try:
        return session.editor.item_at(position)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return None


def handle_add_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'add' command - append a checklist item.

    Usage:
        add Buy milk
        add "Buy milk"
        add Try --force first
    """
    text = result.text_after()
    if not text.strip():
        console.print("[red]Error:[/red] Item text required")
        console.print("[dim]Usage: add <text>[/dim]")
        return

    try:
        item = session.editor.add_item(text)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    console.print(f"[green]✓ Added item {item.order + 1}:[/green] {item.text}")


def handle_done_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'done' command - toggle an item's completion.

    Usage:
        done 2
    """
    item = _item_from_args(session, result, "done <n>")
    if item is None:
        return
    session.editor.toggle_item(item.id)
    # Stored orders may be sparse until the first edit; positions are not
    state = "done" if session.editor.item_at(result.int_arg(0)).completed else "not done"
    console.print(f"[green]✓ Marked {state}:[/green] {item.text}")


def handle_rm_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'rm' command - remove an item.

    Usage:
        rm 2
    """
    item = _item_from_args(session, result, "rm <n>")
    if item is None:
        return
    session.editor.remove_item(item.id)
    console.print(f"[green]✓ Removed:[/green] {item.text}")


def handle_edit_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'edit' command - change an item's text (may be empty).

    Usage:
        edit 2 Buy oat milk
        edit 2 ""
    """
    item = _item_from_args(session, result, "edit <n> <text>")
    if item is None:
        return
    session.editor.edit_item(item.id, result.text_after(skip=1))
    console.print(f"[green]✓ Item {result.int_arg(0)} updated[/green]")


def handle_mv_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'mv' command - move an item to a new position.

    Usage:
        mv 3 1      # move item 3 to the top
    """
    item = _item_from_args(session, result, "mv <n> <to>")
    if item is None:
        return
    to_position = result.int_arg(1)
    if to_position is None:
        console.print("[red]Error:[/red] Target position required")
        console.print("[dim]Usage: mv <n> <to>[/dim]")
        return
    session.editor.move_item(item.id, to_position - 1)
    display_notes(session)
