"""
FILE: tasknote/repl/completer.py
PURPOSE: Autocomplete logic for editor commands and arguments
EXPORTS:
  - NoteCompleter (Completer for command/arg completion)
  - create_completer(session) -> NoteCompleter
DEPENDENCIES:
  - prompt_toolkit.completion (Completer, Completion)
  - typing (type hints)
  - tasknote.core.models (NoteFormat)
NOTES:
  - Suggests command names when at start of line
  - Suggests format tags after "switch", then its flags
  - Suggests item numbers for item commands when a session is given
  - Case-insensitive matching
"""

from typing import Iterable, List, Optional
from prompt_toolkit.completion import Completer, Completion
from prompt_toolkit.document import Document

from ..core.models import NoteFormat


class NoteCompleter(Completer):
    """
    Custom completer for the note editor.

    Provides context-aware autocomplete:
    - Command names at start of input
    - Format tags and flags after "switch"
    - Item numbers after item commands
    """

    COMMANDS = [
        "show", "text", "add", "done", "rm", "edit", "mv",
        "switch", "save", "help", "clear", "exit", "quit",
    ]

    # Commands whose first argument is an item number
    ITEM_COMMANDS = {"done", "rm", "edit", "mv"}

    SWITCH_FLAGS = ["--preserve", "--discard", "--yes"]

    def __init__(self, session=None):
        self.session = session

    def get_completions(
        self, document: Document, complete_event
    ) -> Iterable[Completion]:
        """
        Generate completions based on current input.

        Args:
            document: Current document with cursor position
            complete_event: Event that triggered completion

        Yields:
            Completion objects for matching suggestions
        """
        text_before_cursor = document.text_before_cursor
        words = text_before_cursor.split()
        at_new_word = text_before_cursor.endswith(" ")

        # Empty input or typing the first word -> suggest commands
        if not words or (not at_new_word and len(words) == 1):
            word = words[0] if words else ""
            yield from self._complete_from(self.COMMANDS, word)
            return

        command = words[0].lower()
        current = "" if at_new_word else words[-1]

        if command == "switch":
            if current.startswith("--"):
                yield from self._complete_from(self.SWITCH_FLAGS, current)
                return
            # First argument after "switch" is the format
            if (at_new_word and len(words) == 1) or (not at_new_word and len(words) == 2):
                yield from self._complete_from([f.value for f in NoteFormat], current)
                return
            if at_new_word:
                yield from self._complete_from(self.SWITCH_FLAGS, "")
            return

        if command in self.ITEM_COMMANDS:
            if (at_new_word and len(words) == 1) or (not at_new_word and len(words) == 2):
                yield from self._complete_from(self._item_numbers(), current)
            return

    def _item_numbers(self) -> List[str]:
        if self.session is None:
            return []
        return [str(position) for position in range(1, len(self.session.editor.items) + 1)]

    def _complete_from(self, options: List[str], word: str) -> Iterable[Completion]:
        """
        Complete word against a list of options.

        Args:
            options: Candidate values
            word: Partial word to complete

        Yields:
            Completions for options starting with word (case-insensitive)
        """
        word_lower = word.lower()
        for option in options:
            if option.lower().startswith(word_lower):
                yield Completion(option, start_position=-len(word))


def create_completer(session: Optional[object] = None) -> NoteCompleter:
    """
    Create editor completer instance.

    Args:
        session: EditSession used for item-number suggestions

    Returns:
        Configured NoteCompleter
    """
    return NoteCompleter(session)
