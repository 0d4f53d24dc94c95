"""
FILE: tasknote/core/config.py
PURPOSE: Settings loaded from environment variables
EXPORTS:
  - Settings (frozen dataclass)
  - load_settings() -> Settings
DEPENDENCIES:
  - os, pathlib, dataclasses (stdlib)
  - tasknote.core.constants (DEFAULT_PRESERVE_CONTENT)
NOTES:
  - Read on demand, never cached, so tests can monkeypatch the environment
  - Only the service and CLI layers read settings; the note content model
    takes the preserve-content policy as an explicit argument
"""

import os
from dataclasses import dataclass
from pathlib import Path

from .constants import DEFAULT_PRESERVE_CONTENT

ENV_PREFIX = "TASKNOTE"


def _k(suffix: str) -> str:
    """Build env var name with the project prefix."""
    return f"{ENV_PREFIX}_{suffix}"


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return raw.strip().lower() in {"1", "true", "yes", "y", "on"}


def _env_path(name: str, default: Path) -> Path:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    return Path(raw).expanduser()


@dataclass(frozen=True)
class Settings:
    data_dir: Path
    db_path: Path
    preserve_content: bool
    log_level: str


def load_settings() -> Settings:
    """Build Settings from the current environment."""
    data_dir = _env_path(_k("DATA_DIR"), Path.home() / ".tasknote")
    return Settings(
        data_dir=data_dir,
        db_path=_env_path(_k("DB_PATH"), data_dir / "tasknote.db"),
        preserve_content=_env_bool(_k("PRESERVE_CONTENT"), DEFAULT_PRESERVE_CONTENT),
        log_level=(os.getenv(_k("LOG_LEVEL")) or "WARNING").strip().upper(),
    )
