"""
FILE: tasknote/repl/main.py
PURPOSE: Interactive note editor for one task, built on prompt-toolkit
EXPORTS:
  - main(task_id) - Entry point for the editor
  - run_repl(task_id) - Main editor loop
  - execute_command(session, result) - Dispatch one parsed command
DEPENDENCIES:
  - prompt_toolkit (prompt, history, completion)
  - rich (formatted output)
  - tasknote.repl.session (EditSession)
  - tasknote.repl.parser (command parsing)
  - tasknote.repl.completer (autocomplete)
NOTES:
  - Command history automatic with PromptSession
  - Right prompt shows the note format and unsaved state
  - Ctrl+D or "exit"/"quit" saves and exits; Ctrl+C only cancels the line
  - Falls back to input() when there's no TTY (pipes, tests)
"""

import logging
import sys

# Fix Windows console encoding for Unicode characters
# Only wrap if not already wrapped to prevent issues
if sys.platform == "win32":
    import io
    if not isinstance(sys.stdout, io.TextIOWrapper) or sys.stdout.encoding != 'utf-8':
        try:
            sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
        except (AttributeError, ValueError):
            pass  # Already wrapped or unavailable

from prompt_toolkit import PromptSession
from prompt_toolkit.formatted_text import HTML
from prompt_toolkit.history import InMemoryHistory

from ..core.exceptions import TasknoteError
from .commands import (
    handle_show_command,
    handle_text_command,
    handle_switch_command,
    handle_save_command,
    handle_add_command,
    handle_done_command,
    handle_rm_command,
    handle_edit_command,
    handle_mv_command,
    handle_help_command,
    handle_clear_command,
)
from .completer import create_completer
from .display import console, display_notes
from .parser import ParseResult, parse_command
from .session import EditSession, open_session

logger = logging.getLogger(__name__)

FORMAT_COLORS = {
    "text": "ansiblue",
    "list": "ansimagenta",
    "both": "ansicyan",
}

HANDLERS = {
    "show": handle_show_command,
    "view": handle_show_command,
    "text": handle_text_command,
    "switch": handle_switch_command,
    "save": handle_save_command,
    "add": handle_add_command,
    "done": handle_done_command,
    "rm": handle_rm_command,
    "edit": handle_edit_command,
    "mv": handle_mv_command,
    "help": handle_help_command,
    "clear": handle_clear_command,
}


def format_prompt(session: EditSession) -> HTML:
    """
    Prompt with the task id and a colored format tag.

    Returns:
        HTML formatted prompt like "#3 list> "
    """
    fmt = session.editor.format.value
    color = FORMAT_COLORS.get(fmt, "white")
    marker = "*" if session.dirty else ""
    return HTML(f"<b>#{session.task.id} <{color}>{fmt}</{color}>{marker}&gt; </b>")


def get_right_prompt(session: EditSession) -> HTML:
    if session.dirty:
        return HTML("<style fg='#cc8800'>[unsaved]</style>")
    return HTML("<style fg='#888888'>[saved]</style>")


def save_and_exit(session: EditSession) -> None:
    if session.dirty:
        session.save()
        console.print("[green]✓ Saved[/green]")
    console.print("[dim]Goodbye![/dim]")


def execute_command(session: EditSession, result: ParseResult) -> bool:
    """
    Execute a parsed command.

    Args:
        session: Editing session the command applies to
        result: Parsed command from parser

    Returns:
        True to continue the editor loop, False to exit
    """
    command = result.command.lower()

    # Exit commands
    if command in ("exit", "quit"):
        save_and_exit(session)
        return False

    # Empty command (just Enter pressed)
    if not command:
        return True

    handler = HANDLERS.get(command)
    if handler:
        try:
            handler(session, result)
        except TasknoteError as e:
            console.print(f"[red]Error:[/red] {e}")
        # Add whitespace after command output for readability
        console.print()
    else:
        console.print(f"[red]Unknown command:[/red] {command}")
        console.print("[dim]Type 'help' for available commands[/dim]")
        console.print()

    return True


def run_repl(task_id: int) -> None:
    """
    Main editor loop.

    Sets up prompt_toolkit session with:
    - Command history (in-memory, not persisted)
    - Autocomplete (commands, formats, item numbers)
    - Custom prompt formatting

    Exits on:
    - Ctrl+D (EOFError), saving first
    - "exit" or "quit" commands, saving first

    Raises:
        TaskNotFoundError: If task_id doesn't exist
    """
    session = open_session(task_id)
    has_tty = sys.stdin.isatty() and sys.stdout.isatty()

    prompt_session = None
    use_simple_input = not has_tty

    if has_tty:
        try:
            prompt_session = PromptSession(
                history=InMemoryHistory(),
                completer=create_completer(session),
                complete_while_typing=True,
                rprompt=lambda: get_right_prompt(session),
            )
        except Exception as e:
            # Fallback to simple input if prompt_toolkit fails
            console.print(f"[yellow]Warning:[/yellow] Running in simple input mode: {e}")
            use_simple_input = True

    console.print(
        f"[bold cyan]Editing notes for #{session.task.id}[/bold cyan] "
        "- Type 'help' for commands, 'exit' to save and quit"
    )
    if use_simple_input:
        console.print("[dim](Running in simple mode - no autocomplete)[/dim]")
    console.print()
    display_notes(session)

    while True:
        try:
            if use_simple_input or prompt_session is None:
                user_input = input(session.get_prompt())
            else:
                user_input = prompt_session.prompt(format_prompt(session))

            if not execute_command(session, parse_command(user_input)):
                break

        except KeyboardInterrupt:
            console.print("[dim]^C (Press Ctrl+D or type 'exit' to save and quit)[/dim]")
            continue
        except EOFError:
            console.print()
            save_and_exit(session)
            break


def main(task_id: int) -> None:
    """
    Entry point for the editor.

    Called when user runs: tasknote edit <id>
    """
    logger.debug("Opening note editor for task %s", task_id)
    run_repl(task_id)
