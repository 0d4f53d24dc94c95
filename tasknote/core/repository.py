"""
FILE: tasknote/core/repository.py
PURPOSE: Database operations and SQLite connection management
EXPORTS:
  - get_connection() -> Connection
  - init_database() -> None
  - create_task(title, note_columns, description) -> Task
  - get_task(task_id) -> Task | None
  - list_tasks() -> List[Task]
  - list_legacy_tasks() -> List[Task]
  - update_task_title(task_id, title) -> Task
  - update_task_notes(task_id, note_type, notes, checklist_items, description) -> Task
  - delete_task(task_id) -> None
  - has_note_columns(conn) -> bool
  - add_note_columns(conn) -> List[str]
DEPENDENCIES:
  - sqlite3 (stdlib)
  - pathlib (stdlib)
  - datetime (stdlib)
  - tasknote.core.config (database location)
  - tasknote.core.models (Task)
  - tasknote.core.exceptions (TaskNotFoundError)
NOTES:
  - Database location comes from TASKNOTE_DB_PATH / TASKNOTE_DATA_DIR,
    defaulting to ~/.tasknote/tasknote.db
  - Auto-creates directory and initializes schema on first run
  - Returns domain objects (Task), never raw dicts
  - Note columns are stored as given; encoding them is the mapper's job
"""

import sqlite3
from datetime import datetime
from pathlib import Path
from typing import List, Optional, Tuple

from .config import load_settings
from .exceptions import TaskNotFoundError
from .models import Task


_settings = load_settings()

# Database file location
DB_PATH = _settings.db_path
DB_DIR = DB_PATH.parent

# Schema file location (shipped alongside this module)
SCHEMA_PATH = Path(__file__).parent / "schema.sql"

NOTE_COLUMNS = ("note_type", "notes", "checklist_items")

NoteColumns = Tuple[Optional[str], Optional[str], Optional[str]]


def get_connection() -> sqlite3.Connection:
    """
    Get SQLite connection to the tasknote database.

    Creates the data directory if it doesn't exist.
    Enables row_factory for dict-like row access.
    Initializes database schema on first connection.
    """
    DB_DIR.mkdir(parents=True, exist_ok=True)

    conn = sqlite3.connect(DB_PATH)
    conn.row_factory = sqlite3.Row

    init_database(conn)

    return conn


def init_database(conn: sqlite3.Connection) -> None:
    """
    Initialize database schema if tables don't exist.

    Safe to call multiple times (uses CREATE TABLE IF NOT EXISTS).
    Databases from before the notes migration keep their old shape
    until run_migration.py adds the note columns.
    """
    cursor = conn.execute(
        "SELECT name FROM sqlite_master WHERE type='table' AND name='tasks'"
    )
    tables_exist = cursor.fetchone() is not None

    if not tables_exist:
        with open(SCHEMA_PATH, "r", encoding="utf-8") as f:
            schema_sql = f.read()

        conn.executescript(schema_sql)
        conn.commit()


def has_note_columns(conn: sqlite3.Connection) -> bool:
    """True if the tasks table has the normalized note columns."""
    columns = {row[1] for row in conn.execute("PRAGMA table_info(tasks)").fetchall()}
    return all(name in columns for name in NOTE_COLUMNS)


def add_note_columns(conn: sqlite3.Connection) -> List[str]:
    """
    Add any missing note columns to an older tasks table.

    Returns:
        Names of the columns that were added (empty if none were missing)
    """
    existing = {row[1] for row in conn.execute("PRAGMA table_info(tasks)").fetchall()}
    definitions = {
        "note_type": "TEXT CHECK(note_type IN ('text', 'checklist', 'both'))",
        "notes": "TEXT",
        "checklist_items": "TEXT",
    }

    added = []
    for name in NOTE_COLUMNS:
        if name not in existing:
            conn.execute(f"ALTER TABLE tasks ADD COLUMN {name} {definitions[name]}")
            added.append(name)

    if added:
        conn.execute("CREATE INDEX IF NOT EXISTS idx_tasks_note_type ON tasks(note_type)")
        conn.commit()
    return added


def create_task(
    title: str,
    note_columns: NoteColumns = (None, None, None),
    description: Optional[str] = None,
) -> Task:
    """
    Create a new task.

    Args:
        title: Task title (required)
        note_columns: (note_type, notes, checklist_items) as stored text
        description: Serialized note string

    Returns:
        Newly created Task object
    """
    conn = get_connection()
    now = datetime.now().isoformat()
    note_type, notes, checklist_items = note_columns

    cursor = conn.execute(
        """
        INSERT INTO tasks (title, description, note_type, notes, checklist_items, created_at, updated_at)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (title, description, note_type, notes, checklist_items, now, now),
    )
    conn.commit()

    task_id = cursor.lastrowid
    task = get_task(task_id)

    if not task:
        # This should never happen, but handle gracefully
        raise TaskNotFoundError(task_id)

    return task


def get_task(task_id: int) -> Optional[Task]:
    """
    Fetch single task by ID.

    Returns:
        Task object if found, None otherwise
    """
    conn = get_connection()
    row = conn.execute("SELECT * FROM tasks WHERE id = ?", (task_id,)).fetchone()

    return Task.from_row(row) if row else None


def list_tasks() -> List[Task]:
    """
    List all tasks.

    Returns:
        List of all tasks, oldest first
    """
    conn = get_connection()
    rows = conn.execute("SELECT * FROM tasks ORDER BY id ASC").fetchall()

    return [Task.from_row(row) for row in rows]


def list_legacy_tasks() -> List[Task]:
    """
    List tasks whose notes only exist as a description string.

    Returns:
        Tasks with a description but no normalized note record
    """
    conn = get_connection()
    rows = conn.execute(
        """
        SELECT * FROM tasks
        WHERE note_type IS NULL AND description IS NOT NULL AND description != ''
        ORDER BY id ASC
        """
    ).fetchall()

    return [Task.from_row(row) for row in rows]


def update_task_title(task_id: int, title: str) -> Task:
    """
    Rename a task.

    Raises:
        TaskNotFoundError: If task doesn't exist
    """
    conn = get_connection()
    now = datetime.now().isoformat()

    cursor = conn.execute(
        "UPDATE tasks SET title = ?, updated_at = ? WHERE id = ?",
        (title, now, task_id),
    )
    conn.commit()

    if cursor.rowcount == 0:
        raise TaskNotFoundError(task_id)

    return get_task(task_id)


def update_task_notes(
    task_id: int,
    note_columns: NoteColumns,
    description: Optional[str],
) -> Task:
    """
    Store a task's notes.

    Args:
        task_id: ID of task to update
        note_columns: (note_type, notes, checklist_items) as stored text
        description: Serialized note string kept for string-based readers

    Returns:
        Updated Task object

    Raises:
        TaskNotFoundError: If task doesn't exist
    """
    conn = get_connection()
    now = datetime.now().isoformat()
    note_type, notes, checklist_items = note_columns

    cursor = conn.execute(
        """
        UPDATE tasks
        SET description = ?,
            note_type = ?,
            notes = ?,
            checklist_items = ?,
            updated_at = ?
        WHERE id = ?
        """,
        (description, note_type, notes, checklist_items, now, task_id),
    )
    conn.commit()

    if cursor.rowcount == 0:
        raise TaskNotFoundError(task_id)

    return get_task(task_id)


def delete_task(task_id: int) -> None:
    """
    Delete task by ID.

    Raises:
        TaskNotFoundError: If task doesn't exist
    """
    conn = get_connection()

    task = get_task(task_id)
    if not task:
        raise TaskNotFoundError(task_id)

    conn.execute("DELETE FROM tasks WHERE id = ?", (task_id,))
    conn.commit()
