"""
FILE: tasknote/repl/__init__.py
PURPOSE: Interactive note editor package
EXPORTS:
  - main(task_id) (from repl.main)
DEPENDENCIES:
  - prompt_toolkit (editor interface)
  - rich (formatted output)
  - tasknote.core.service (load/save)
NOTES:
  - Entry point for `tasknote edit <id>`
  - Provides autocomplete and command history
"""

from .main import main

__all__ = ["main"]
