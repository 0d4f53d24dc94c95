"""
FILE: tasknote/logging_setup.py
PURPOSE: One-time logging configuration for the CLI and REPL
EXPORTS:
  - setup_logging(console_level, log_dir) -> None
DEPENDENCIES:
  - logging, sys, pathlib (stdlib)
NOTES:
  - Console handler on stderr so stdout stays clean for --json output
  - File handler keeps DEBUG detail in <log_dir>/tasknote.log
  - Third-party loggers only reach the console at ERROR
"""

import logging
import sys
from pathlib import Path
from typing import Union


class _ConsoleNoiseFilter(logging.Filter):
    """Let tasknote logs through at the configured level, others only at ERROR+."""

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith("tasknote."):
            return True
        return record.levelno >= logging.ERROR


def setup_logging(
    console_level: Union[int, str] = logging.WARNING,
    log_dir: Union[str, Path, None] = None,
    file_level: int = logging.DEBUG,
) -> None:
    """
    Configure root logging.

    Call this once, before the first log call. Safe to call again: existing
    handlers are replaced, not duplicated.
    """
    if isinstance(console_level, str):
        console_level = logging.getLevelName(console_level.upper())
        if not isinstance(console_level, int):
            console_level = logging.WARNING

    root = logging.getLogger()
    root.setLevel(logging.DEBUG)

    for handler in list(root.handlers):
        root.removeHandler(handler)

    fmt = logging.Formatter(
        fmt="%(asctime)s.%(msecs)03d %(levelname)s %(name)s: %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    console_handler = logging.StreamHandler(sys.stderr)
    console_handler.setLevel(console_level)
    console_handler.setFormatter(fmt)
    console_handler.addFilter(_ConsoleNoiseFilter())
    root.addHandler(console_handler)

    if log_dir is not None:
        log_dir = Path(log_dir)
        try:
            log_dir.mkdir(parents=True, exist_ok=True)
            file_handler = logging.FileHandler(str(log_dir / "tasknote.log"), encoding="utf-8")
        except OSError as e:
            root.warning("File logging disabled: %s", e)
        else:
            file_handler.setLevel(file_level)
            file_handler.setFormatter(fmt)
            root.addHandler(file_handler)

    logging.captureWarnings(True)
