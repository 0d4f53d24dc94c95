"""
FILE: tasknote/cli/commands/system.py
PURPOSE: System commands (version, migrate, edit)
"""

import typer

from ..app import app, console, error_console, __version__
from ...core import service
from ...core.exceptions import TaskNotFoundError


@app.command()
def version():
    """Show tasknote version."""
    console.print(f"tasknote v{__version__}")


@app.command()
def migrate():
    """
    Convert notes stored only as description strings to the normalized
    note record. Plain-text descriptions become text notes.

    Example:
        tasknote migrate
    """
    count = service.migrate_legacy_notes()
    if count:
        console.print(f"[green]✓ Migrated notes for {count} task(s)[/green]")
    else:
        console.print("[dim]No legacy notes to migrate[/dim]")


@app.command()
def edit(
    task_id: int = typer.Argument(..., help="Task ID"),
):
    """
    Open the interactive note editor for a task.

    The editor provides:
    - Command history (up/down arrows)
    - Autocomplete (Tab key)
    - Text, checklist and format-switch commands
    - Exit with Ctrl+D or type 'exit' (changes are saved)

    Example:
        tasknote edit 3
    """
    # Import here to avoid loading REPL dependencies for one-shot commands
    from ...repl import main as repl_main

    try:
        service.get_task(task_id)
    except TaskNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)

    try:
        repl_main(task_id)
    except Exception as e:
        error_console.print(f"[red]Error starting editor:[/red] {e}")
        raise typer.Exit(1)
