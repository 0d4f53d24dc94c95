"""
Apply the notes migration to an existing database.

Adds the note_type / notes / checklist_items columns when they are
missing, then decodes every description-only task into them. Plain-text
descriptions become text notes; the description itself is left alone.
"""

import sqlite3
import sys
import io

# Fix Windows console encoding
if sys.platform == "win32":
    sys.stdout = io.TextIOWrapper(sys.stdout.buffer, encoding='utf-8')
    sys.stderr = io.TextIOWrapper(sys.stderr.buffer, encoding='utf-8')

from tasknote.core import repository, service


def run_migration():
    """Apply the notes migration to the database."""

    # Check if database exists
    if not repository.DB_PATH.exists():
        print(f"Database not found at {repository.DB_PATH}")
        print("No migration needed - new database will be created with note columns.")
        return

    print(f"Applying migration to database: {repository.DB_PATH}")

    try:
        conn = repository.get_connection()
        if repository.has_note_columns(conn):
            print("✓ Note columns already exist")
        else:
            print("Adding note columns...")

        count = service.migrate_legacy_notes()
        print("✓ Migration completed successfully!")
        print(f"✓ {count} task(s) had their notes converted")

    except sqlite3.Error as e:
        print(f"✗ Migration failed: {e}")
        raise


if __name__ == "__main__":
    run_migration()
