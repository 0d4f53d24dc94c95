"""
FILE: tasknote/repl/parser.py
PURPOSE: Parse editor input into commands and arguments
EXPORTS:
  - ParseResult (dataclass for parsed commands)
  - parse_command(input_str) -> ParseResult
DEPENDENCIES:
  - shlex (for shell-like parsing with quotes)
  - dataclasses (for ParseResult)
NOTES:
  - Handles quoted strings: add "Buy oat milk"
  - Flags are boolean only (--yes, --discard, --preserve)
  - Item text comes from text_after(), so "--" words in it are kept
  - text keeps everything after the command word verbatim in `rest`,
    so note text doesn't need quoting and keeps its spacing
  - Case-insensitive command names
"""

import shlex
from dataclasses import dataclass, field
from typing import Dict, List


@dataclass
class ParseResult:
    """
    Result of parsing an editor command.

    Attributes:
        command: The command name (e.g., "add", "done", "switch")
        args: Positional arguments (e.g., ["2", "Buy milk"])
        flags: Boolean flags that were given (e.g., {"yes": True})
        rest: Raw text after the command word
        raw_input: Original input string
    """
    command: str
    args: List[str] = field(default_factory=list)
    flags: Dict[str, bool] = field(default_factory=dict)
    rest: str = ""
    raw_input: str = ""

    def int_arg(self, index: int):
        """Positional argument as int, or None if missing or not a number."""
        try:
            return int(self.args[index])
        except (IndexError, ValueError):
            return None

    def text_after(self, skip: int = 0) -> str:
        """
        Free text following the first `skip` words, with --words kept.

        A single quoted token is unquoted (add "Buy milk", edit 2 ""),
        anything else is returned as typed.
        """
        text = self.rest
        for _ in range(skip):
            parts = text.split(None, 1)
            text = parts[1] if len(parts) > 1 else ""

        try:
            tokens = shlex.split(text)
        except ValueError:
            return text
        if len(tokens) == 1:
            return tokens[0]
        return text


def parse_command(input_str: str) -> ParseResult:
    """
    Parse editor input into command, args, and flags.

    Examples:
        >>> parse_command("add Buy milk")
        ParseResult(command='add', args=['Buy', 'milk'], flags={}, rest='Buy milk', raw_input='add Buy milk')

        >>> parse_command('edit 2 "Buy oat milk"')
        ParseResult(command='edit', args=['2', 'Buy oat milk'], flags={}, rest='2 "Buy oat milk"', raw_input='edit 2 "Buy oat milk"')

        >>> parse_command("switch list --discard --yes")
        ParseResult(command='switch', args=['list'], flags={'discard': True, 'yes': True}, rest='list --discard --yes', raw_input='switch list --discard --yes')

    Args:
        input_str: Raw user input from the editor prompt

    Returns:
        ParseResult with command, args, and flags extracted

    Notes:
        - Command is always the first token (case-insensitive)
        - Tokens starting with -- are flags
        - Empty input returns command="" with no args/flags
    """
    input_str = input_str.strip()
    if not input_str:
        return ParseResult(command="", raw_input=input_str)

    head, _, rest = input_str.partition(" ")
    rest = rest.strip()

    try:
        tokens = shlex.split(rest)
    except ValueError:
        # Unclosed quote: fall back to plain whitespace split
        tokens = rest.split()

    args = []
    flags = {}
    for token in tokens:
        if token.startswith("--") and len(token) > 2:
            flags[token[2:].lower()] = True
        else:
            args.append(token)

    return ParseResult(
        command=head.lower(),
        args=args,
        flags=flags,
        rest=rest,
        raw_input=input_str,
    )
