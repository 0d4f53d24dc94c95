"""
FILE: tasknote/repl/commands/system.py
PURPOSE: System command handlers for the editor (help, clear)
"""

from rich.panel import Panel

from ..display import console
from ..parser import ParseResult
from ..session import EditSession


def handle_help_command(session: EditSession, result: ParseResult) -> None:
    """
    Handle 'help' command - show available commands.
    """
    help_text = """
[bold cyan]Available Commands:[/bold cyan]

  [cyan]show[/cyan]                       Show the notes
  [cyan]text <content>[/cyan]             Replace the note text (text/both)
  [cyan]add <text>[/cyan]                 Add a checklist item (list/both)
  [cyan]done <n>[/cyan]                   Toggle item n done / not done
  [cyan]rm <n>[/cyan]                     Remove item n
  [cyan]edit <n> <text>[/cyan]            Change the text of item n
  [cyan]mv <n> <to>[/cyan]                Move item n to position <to>
  [cyan]switch <text|list|both>[/cyan]    Change note format
  [cyan]save[/cyan]                       Save now
  [cyan]help[/cyan]                       Show this help
  [cyan]clear[/cyan]                      Clear the screen
  [cyan]exit[/cyan] or [cyan]quit[/cyan]              Save and leave the editor

[bold cyan]Switch flags:[/bold cyan]

  [cyan]--preserve[/cyan]                 Keep content the new format can hold
  [cyan]--discard[/cyan]                  Start the new format empty
  [cyan]--yes[/cyan]                      Don't ask before dropping content

[bold cyan]Examples:[/bold cyan]

  [dim]switch both                 # keep text, add a checklist below it
  add Buy milk
  add "Walk the dog"
  mv 2 1                      # move item 2 to the top
  done 1
  switch list                 # asks first: the text will be dropped[/dim]
"""
    console.print(Panel(help_text, title="Note Editor Help", border_style="cyan"))


def handle_clear_command(session: EditSession, result: ParseResult) -> None:
    """
    Clear the screen.
    """
    console.clear()
