"""
FILE: tasknote/repl/commands/notes.py
PURPOSE: Note command handlers for the editor (show, text, switch, save)
"""

from ..display import console, display_notes
from ..parser import ParseResult
from ..session import EditSession
from ...core.converter import resolve_format
from ...core.exceptions import InvalidInputError


def ask_confirmation(message: str) -> bool:
    """Ask user for confirmation (y/n)."""
    response = input(f"{message} (y/n): ").strip().lower()
    return response in ('y', 'yes')


def handle_show_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'show' command - render the note.

    Usage:
        show
    """
    display_notes(session)


def handle_text_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'text' command - replace the note text.

    Usage:
        text Call the landlord before noon
        text            # clears the text
    """
    try:
        session.editor.set_text(result.rest)
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return
    console.print("[green]✓ Text updated[/green]")


def handle_switch_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'switch' command - change note format.

    Usage:
        switch both
        switch text --discard
        switch list --yes       # don't ask before dropping content
    """
    if not result.args:
        console.print("[red]Error:[/red] Format required")
        console.print("[dim]Usage: switch <text|list|both> [--preserve|--discard] [--yes][/dim]")
        return

    try:
        target = resolve_format(result.args[0].lower())
    except InvalidInputError as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    preserve = session.preserve_content
    if result.flags.get("discard"):
        preserve = False
    if result.flags.get("preserve"):
        preserve = True

    if target is session.editor.format:
        console.print(f"[dim]Notes are already '{target.value}'[/dim]")
        return

    if not result.flags.get("yes") and session.editor.would_lose_content(target, preserve):
        if not ask_confirmation(f"Switching to '{target.value}' will discard some content. Continue?"):
            console.print("[yellow]Cancelled[/yellow]")
            return

    session.editor.switch_format(target, preserve)
    console.print(f"[green]✓ Switched to '{target.value}'[/green]")
    display_notes(session)


def handle_save_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'save' command - write the note to storage now.

    Usage:
        save
    """
    if not session.dirty:
        console.print("[dim]No changes to save[/dim]")
        return
    session.save()
    console.print("[green]✓ Saved[/green]")
