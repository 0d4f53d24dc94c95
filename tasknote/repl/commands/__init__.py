"""
FILE: tasknote/repl/commands/__init__.py
PURPOSE: Editor command handler modules
"""

# Export all command handlers for easy importing
from .notes import (
    handle_show_command,
    handle_text_command,
    handle_switch_command,
    handle_save_command,
)
from .checklist import (
    handle_add_command,
    handle_done_command,
    handle_rm_command,
    handle_edit_command,
    handle_mv_command,
)
from .system import (
    handle_help_command,
    handle_clear_command,
)

__all__ = [
    "handle_show_command",
    "handle_text_command",
    "handle_switch_command",
    "handle_save_command",
    "handle_add_command",
    "handle_done_command",
    "handle_rm_command",
    "handle_edit_command",
    "handle_mv_command",
    "handle_help_command",
    "handle_clear_command",
]
