"""
FILE: tasknote/cli/commands/notes.py
PURPOSE: Note commands (text, switch, export, import) and checklist item commands (check ...)
"""

import json
import sys
from typing import Optional

import typer

from ..app import app, check_app, console, error_console
from ...core import service
from ...core.config import load_settings
from ...core.converter import is_lossy, resolve_format
from ...core.exceptions import TasknoteError
from ...core.models import NoteVariant
from ...core.serializer import notes_to_dict
from ...formatting import NoteFormatter


def _print_notes(task_id: int, note: NoteVariant, json_output: bool) -> None:
    if json_output:
        typer.echo(json.dumps(notes_to_dict(note), indent=2))
        return
    task = service.get_task(task_id)
    console.print(NoteFormatter.render(note, title=f"#{task.id} {task.title}"))


@app.command()
def text(
    task_id: int = typer.Argument(..., help="Task ID"),
    content: str = typer.Argument(..., help="New note text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replace the text of a task's notes (text or both format).

    Example:
        tasknote text 3 "Call before noon"
    """
    try:
        note = service.set_text(task_id, content)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def switch(
    task_id: int = typer.Argument(..., help="Task ID"),
    target: str = typer.Argument(..., help="Format to switch to: text, list or both"),
    preserve: Optional[bool] = typer.Option(
        None,
        "--preserve/--discard",
        help="Keep content where the new format can hold it (default: TASKNOTE_PRESERVE_CONTENT)",
    ),
    yes: bool = typer.Option(False, "-y", "--yes", help="Don't ask before dropping content"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Switch a task's notes between text, list and both.

    Switching into "both" keeps everything. Switching out of "both" drops
    the side the new format can't hold, so you are asked first.

    Example:
        tasknote switch 3 both
        tasknote switch 3 list --discard --yes
    """
    try:
        note_format = resolve_format(target.strip().lower())
        if preserve is None:
            preserve = load_settings().preserve_content

        current = service.load_notes(task_id)
        if not yes and is_lossy(current, note_format, preserve):
            response = typer.confirm(
                f"Switching to '{note_format.value}' will discard some of this task's notes. Continue?",
                default=False,
            )
            if not response:
                console.print("[yellow]Cancelled[/yellow]")
                raise typer.Exit(0)

        note = service.switch_format(task_id, note_format, preserve_content=preserve)
        _print_notes(task_id, note, json_output)

    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def export(
    task_id: int = typer.Argument(..., help="Task ID"),
):
    """
    Print a task's notes as the persisted note string.

    Example:
        tasknote export 3 > notes.json
    """
    try:
        typer.echo(service.export_notes(task_id))
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command("import")
def import_notes(
    task_id: int = typer.Argument(..., help="Task ID"),
    raw: Optional[str] = typer.Argument(None, help="Note string (reads stdin when omitted)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Replace a task's notes from a persisted note string.

    Anything that isn't a structured note string is imported as plain text.

    Example:
        tasknote import 3 '{"format": "text", "content": "hello"}'
        tasknote import 3 "an old plain note"
        tasknote export 3 | tasknote import 4
    """
    try:
        if raw is None:
            raw = sys.stdin.read().rstrip("\n")
        note = service.import_notes(task_id, raw)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@check_app.command("add")
def check_add(
    task_id: int = typer.Argument(..., help="Task ID"),
    item_text: str = typer.Argument(..., help="Checklist item text"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Append a checklist item.

    Example:
        tasknote check add 3 "Buy milk"
    """
    try:
        item = service.add_item(task_id, item_text)
        if json_output:
            typer.echo(json.dumps(item.to_dict(), indent=2))
        else:
            console.print(f"[green]✓ Added item {item.order + 1}:[/green] {item.text}")
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@check_app.command("done")
def check_done(
    task_id: int = typer.Argument(..., help="Task ID"),
    position: int = typer.Argument(..., help="Item number as shown by `show`"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Toggle a checklist item between done and not done.

    Example:
        tasknote check done 3 2
    """
    try:
        note = service.toggle_item(task_id, position)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@check_app.command("rm")
def check_rm(
    task_id: int = typer.Argument(..., help="Task ID"),
    position: int = typer.Argument(..., help="Item number as shown by `show`"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Remove a checklist item. Later items move up.

    Example:
        tasknote check rm 3 1
    """
    try:
        note = service.remove_item(task_id, position)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@check_app.command("edit")
def check_edit(
    task_id: int = typer.Argument(..., help="Task ID"),
    position: int = typer.Argument(..., help="Item number as shown by `show`"),
    item_text: str = typer.Argument(..., help="New item text (may be empty)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Change the text of a checklist item.

    Example:
        tasknote check edit 3 2 "Buy oat milk"
    """
    try:
        note = service.edit_item(task_id, position, item_text)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@check_app.command("mv")
def check_mv(
    task_id: int = typer.Argument(..., help="Task ID"),
    position: int = typer.Argument(..., help="Item number to move"),
    to_position: int = typer.Argument(..., help="New item number (clamped to the list)"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Move a checklist item to a new position.

    Example:
        tasknote check mv 3 4 1    # move item 4 to the top
    """
    try:
        note = service.move_item(task_id, position, to_position)
        _print_notes(task_id, note, json_output)
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
