"""
FILE: tasknote/core/exceptions.py
PURPOSE: Custom exception classes for error handling
EXPORTS:
  - TasknoteError (base exception)
  - TaskNotFoundError
  - InvalidInputError
DEPENDENCIES:
  - None (stdlib only)
NOTES:
  - All exceptions inherit from TasknoteError for easy catching
  - The note content model itself never raises for malformed notes;
    these are for task lookup and user input at the service/CLI layers
  - Service layer raises these, UI layers catch and display
"""


class TasknoteError(Exception):
    """Base exception for all tasknote errors."""
    pass


class TaskNotFoundError(TasknoteError):
    """Task with given ID doesn't exist."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task {task_id} not found")


class InvalidInputError(TasknoteError):
    """Input validation failed."""

    def __init__(self, message: str):
        super().__init__(message)
