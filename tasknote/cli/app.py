"""
FILE: tasknote/cli/app.py
PURPOSE: Shared Typer applications and consoles for CLI command modules
EXPORTS:
  - app (Typer application)
  - check_app (Typer sub-application for checklist items)
  - console / error_console (rich consoles)
  - __version__
DEPENDENCIES:
  - typer (CLI framework)
  - rich (formatted output)
NOTES:
  - Lives apart from main.py so `python -m tasknote.cli.main` and the
    command modules register on the same app object
"""

import typer
from rich.console import Console

# Typer app setup
app = typer.Typer(
    name="tasknote",
    help="Task notes as text, checklists, or both",
    add_completion=False,
    no_args_is_help=True,
)

# Checklist sub-command group
check_app = typer.Typer(
    name="check",
    help="Checklist item commands",
    no_args_is_help=True,
)
app.add_typer(check_app, name="check")

# Rich console for formatted output
console = Console()
error_console = Console(stderr=True)

# Version
__version__ = "0.1.0"
