"""
FILE: tasknote/cli/commands/__init__.py
PURPOSE: CLI command modules
"""

# Export all command handlers for easy importing
from .tasks import (
    add,
    ls,
    show,
    rename,
    rm,
)
from .notes import (
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
from .system import (
    version,
    migrate,
    edit,
)

__all__ = [
    "add",
    "ls",
    "show",
    "rename",
    "rm",
    "text",
    "switch",
    "export",
    "import_notes",
    "check_add",
    "check_done",
    "check_rm",
    "check_edit",
    "check_mv",
    "version",
    "migrate",
    "edit",
]
