"""
FILE: tasknote/cli/commands/tasks.py
PURPOSE: Task commands (add, ls, show, rename, rm)
"""

import json

import typer

from ..app import app, console, error_console
from ...core import service
from ...core.exceptions import TasknoteError, TaskNotFoundError, InvalidInputError
from ...core.summary import is_empty
from ...formatting import NoteFormatter


@app.command()
def add(
    title: str = typer.Argument(..., help="Task title"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    Create a new task. New tasks start with an empty checklist.

    Example:
        tasknote add "Pack for trip"
    """
    try:
        task = service.create_task(title)

        if json_output:
            note = service.notes_for_task(task)
            typer.echo(json.dumps(NoteFormatter.to_json_dict(task, note), indent=2))
        else:
            console.print(f"[green]✓ Created task [bold]#{task.id}[/bold]:[/green] {task.title}")

    except InvalidInputError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
    except TasknoteError as e:
        error_console.print(f"[red]Unexpected error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def ls(
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
):
    """
    List tasks with a one-line summary of their notes.

    Example:
        tasknote ls
        tasknote ls --json
    """
    tasks = service.list_tasks()
    notes = {task.id: service.notes_for_task(task) for task in tasks}

    if json_output:
        tasks_data = [NoteFormatter.to_json_dict(task, notes[task.id]) for task in tasks]
        typer.echo(json.dumps(tasks_data, indent=2))
        return

    if not tasks:
        console.print("[dim]No tasks found[/dim]")
        return

    console.print(NoteFormatter.create_tasks_table(tasks, notes))
    console.print(f"\n[dim]Total: {len(tasks)} task(s)[/dim]")


@app.command()
def show(
    task_id: int = typer.Argument(..., help="Task ID"),
    json_output: bool = typer.Option(False, "--json", help="Output as JSON"),
    raw: bool = typer.Option(False, "--raw", help="Plain text output (no colors)"),
):
    """
    Show a task's notes.

    Example:
        tasknote show 3
        tasknote show 3 --raw
    """
    try:
        task = service.get_task(task_id)
        note = service.notes_for_task(task)

        if json_output:
            typer.echo(json.dumps(NoteFormatter.to_json_dict(task, note), indent=2))
        elif raw:
            typer.echo(f"{task.id}: {task.title}")
            for line in NoteFormatter.to_raw_lines(note):
                typer.echo(line)
        else:
            console.print(NoteFormatter.render(note, title=f"#{task.id} {task.title}"))

    except TaskNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def rename(
    task_id: int = typer.Argument(..., help="Task ID"),
    title: str = typer.Argument(..., help="New title"),
):
    """
    Change a task's title. Notes are left as they are.

    Example:
        tasknote rename 3 "Pack for the beach"
    """
    try:
        task = service.rename_task(task_id, title)
        console.print(f"[green]✓ Renamed task [bold]#{task.id}[/bold]:[/green] {task.title}")
    except TasknoteError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)


@app.command()
def rm(
    task_id: int = typer.Argument(..., help="Task ID to delete"),
    yes: bool = typer.Option(False, "-y", "--yes", help="Skip confirmation prompt"),
):
    """
    Delete a task and its notes permanently.

    Example:
        tasknote rm 5
        tasknote rm 5 --yes
    """
    try:
        task = service.get_task(task_id)

        if not yes and not is_empty(service.notes_for_task(task)):
            response = typer.confirm(f"Task #{task.id} has notes. Delete it?", default=False)
            if not response:
                console.print("[yellow]Cancelled[/yellow]")
                raise typer.Exit(0)

        service.delete_task(task.id)
        console.print(f"[green]✓ Deleted task #{task.id}:[/green] {task.title}")

    except TaskNotFoundError as e:
        error_console.print(f"[red]Error:[/red] {e}")
        raise typer.Exit(1)
