"""
FILE: tasknote/cli/main.py
PURPOSE: Typer-based CLI for one-shot task and note commands
EXPORTS:
  - app (Typer application)
  - main() (entry point)
  - version() - Show version
  - add() / ls() / show() / rename() / rm() - Task commands
  - text() / switch() / export() / import_notes() - Note commands
  - check add/done/rm/edit/mv - Checklist item commands
  - migrate() - Backfill normalized notes for legacy tasks
  - edit() - Launch the interactive note editor
DEPENDENCIES:
  - typer (CLI framework)
  - tasknote.core.config (settings for logging)
  - tasknote.logging_setup (logging configuration)
  - tasknote.cli.app (shared app and consoles)
NOTES:
  - Display commands support --json
  - Error messages go to stderr
  - Exit codes: 0=success, 1=error
  - Checklist positions are 1-based, matching what `show` prints
"""

import sys

# Fix Windows console encoding for Unicode characters
if sys.platform == "win32":
    import io
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

from ..core.config import load_settings
from ..logging_setup import setup_logging
from .app import app, check_app, console, error_console, __version__


@app.callback()
def configure():
    """Task notes as text, checklists, or both."""
    settings = load_settings()
    setup_logging(console_level=settings.log_level, log_dir=settings.data_dir)


# Import command modules to register commands with app
# Commands are decorated with @app.command() in their modules
from .commands import (
    # System commands
    version,
    migrate,
    edit,
    # Task commands
    add,
    ls,
    show,
    rename,
    rm,
    # Note commands
    text,
    switch,
    export,
    import_notes,
    check_add,
    check_done,
    check_rm,
    check_edit,
    check_mv,
)


def main():
    """Main entry point for CLI."""
    app()


if __name__ == "__main__":
    main()
