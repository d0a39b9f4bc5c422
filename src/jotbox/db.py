"""
Database module for Jotbox.

SQLite storage for notes. Every mutation runs in its own transaction and is
committed before the call returns.
"""

import logging
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator

from jotbox.classifier import categorize
from jotbox.config import get_db_path
from jotbox.errors import InitializationError, PersistenceError
from jotbox.models import Note

logger = logging.getLogger(__name__)

# Schema version for migrations
# 1: notes without category
# 2: category column, backfilled by the classifier
SCHEMA_VERSION = 2

SCHEMA = """
-- Schema version tracking
CREATE TABLE IF NOT EXISTS schema_version (
    version INTEGER PRIMARY KEY
);

-- Notes
CREATE TABLE IF NOT EXISTS notes (
    id TEXT PRIMARY KEY,                    -- uuid4 hex
    title TEXT NOT NULL,
    content TEXT NOT NULL,
    category TEXT NOT NULL DEFAULT 'General',
    created_at TEXT NOT NULL,               -- ISO 8601, UTC
    updated_at TEXT NOT NULL
);

-- Indexes
CREATE INDEX IF NOT EXISTS idx_notes_created ON notes(created_at);
CREATE INDEX IF NOT EXISTS idx_notes_category ON notes(category);
"""

# Newest first; rowid breaks ties in insertion order
ORDER_BY_RECENT = "ORDER BY created_at DESC, rowid DESC"


def _casefold(value: str | None) -> str | None:
    """SQL function: Unicode-aware lower-casing for substring search."""
    return value.casefold() if value is not None else None


class Database:
    """SQLite database wrapper for Jotbox."""

    def __init__(
        self,
        db_path: Path | None = None,
        categorizer: Callable[[str, str], str] = categorize,
    ):
        self.db_path = db_path or get_db_path()
        self.categorizer = categorizer
        self._ensure_db()

    def _ensure_db(self) -> None:
        """Ensure database exists and schema is current."""
        try:
            self.db_path.parent.mkdir(parents=True, exist_ok=True)
            with self._connect() as conn:
                self._migrate_legacy_notes(conn)
                conn.executescript(SCHEMA)
                # Set schema version
                conn.execute(
                    "INSERT OR REPLACE INTO schema_version (version) VALUES (?)",
                    (SCHEMA_VERSION,)
                )
        except (OSError, PersistenceError) as e:
            raise InitializationError(
                f"Cannot open notes database at {self.db_path}: {e}"
            ) from e

    def _migrate_legacy_notes(self, conn: sqlite3.Connection) -> int:
        """
        Add the category column to a notes table created before it existed.

        Each existing note is categorized from its stored title and content.
        Runs once: afterwards the column exists and this is a no-op.
        The column and the backfill commit together or not at all.
        Returns the number of notes backfilled.
        """
        columns = conn.execute("PRAGMA table_info(notes)").fetchall()
        if not columns:
            return 0  # fresh database
        if any(col["name"] == "category" for col in columns):
            return 0

        # sqlite3 would autocommit the ALTER on its own
        conn.execute("BEGIN")
        conn.execute(
            "ALTER TABLE notes ADD COLUMN category TEXT NOT NULL DEFAULT 'General'"
        )
        rows = conn.execute("SELECT id, title, content FROM notes").fetchall()
        for row in rows:
            conn.execute(
                "UPDATE notes SET category = ? WHERE id = ?",
                (self.categorizer(row["title"], row["content"]), row["id"])
            )
        conn.commit()

        logger.info("Migrated %d existing notes with categories", len(rows))
        return len(rows)

    @contextmanager
    def _connect(self) -> Iterator[sqlite3.Connection]:
        """Context manager for database connections. Commits or rolls back."""
        try:
            conn = sqlite3.connect(self.db_path)
        except sqlite3.Error as e:
            raise PersistenceError(f"Cannot connect to {self.db_path}: {e}") from e

        conn.row_factory = sqlite3.Row
        conn.create_function("casefold", 1, _casefold, deterministic=True)
        try:
            yield conn
            conn.commit()
        except sqlite3.Error as e:
            conn.rollback()
            logger.error("Database operation failed: %s", e)
            raise PersistenceError(str(e)) from e
        except Exception:
            conn.rollback()
            raise
        finally:
            conn.close()

    def insert_note(self, note: Note) -> str:
        """Insert a note. Returns note ID."""
        row = note.to_row()

        with self._connect() as conn:
            conn.execute("""
                INSERT INTO notes (
                    id, title, content, category, created_at, updated_at
                ) VALUES (?, ?, ?, ?, ?, ?)
            """, (
                row["id"],
                row["title"],
                row["content"],
                row["category"],
                row["created_at"],
                row["updated_at"],
            ))

        return note.id

    def update_note(self, note: Note) -> bool:
        """Rewrite a note's mutable fields. Returns True if the note existed."""
        row = note.to_row()

        with self._connect() as conn:
            cursor = conn.execute("""
                UPDATE notes
                SET title = ?, content = ?, category = ?, updated_at = ?
                WHERE id = ?
            """, (
                row["title"],
                row["content"],
                row["category"],
                row["updated_at"],
                row["id"],
            ))
            return cursor.rowcount > 0

    def delete_note(self, note_id: str) -> bool:
        """Delete a note. Returns True if the note existed."""
        with self._connect() as conn:
            cursor = conn.execute("DELETE FROM notes WHERE id = ?", (note_id,))
            return cursor.rowcount > 0

    def set_categories(self, assignments: dict[str, str]) -> int:
        """Set the category of many notes in one transaction. Returns rows changed."""
        with self._connect() as conn:
            changed = 0
            for note_id, category in assignments.items():
                cursor = conn.execute(
                    "UPDATE notes SET category = ? WHERE id = ? AND category != ?",
                    (category, note_id, category)
                )
                changed += cursor.rowcount
            return changed

    def get_note(self, note_id: str) -> Note | None:
        """Get a single note by ID."""
        with self._connect() as conn:
            row = conn.execute(
                "SELECT * FROM notes WHERE id = ?", (note_id,)
            ).fetchone()
            if row:
                return Note.from_row(row)
        return None

    def get_notes(self, category: str | None = None) -> list[Note]:
        """Get all notes, newest first, optionally in one category."""
        query = "SELECT * FROM notes WHERE 1=1"
        params: list[Any] = []

        if category:
            query += " AND category = ?"
            params.append(category)

        query += f" {ORDER_BY_RECENT}"

        with self._connect() as conn:
            rows = conn.execute(query, params).fetchall()
            return [Note.from_row(row) for row in rows]

    def search(self, keyword: str) -> list[Note]:
        """Case-insensitive substring search over title and content, newest first."""
        if not keyword:
            return self.get_notes()

        needle = keyword.casefold()
        with self._connect() as conn:
            rows = conn.execute(f"""
                SELECT * FROM notes
                WHERE instr(casefold(title), ?) > 0
                   OR instr(casefold(content), ?) > 0
                {ORDER_BY_RECENT}
            """, (needle, needle)).fetchall()
            return [Note.from_row(row) for row in rows]

    def get_categories_in_use(self) -> list[str]:
        """Distinct categories across all notes, ascending."""
        with self._connect() as conn:
            rows = conn.execute(
                "SELECT DISTINCT category FROM notes ORDER BY category"
            ).fetchall()
            return [row[0] for row in rows]

    def get_schema_version(self) -> int:
        """Highest schema version recorded."""
        with self._connect() as conn:
            version = conn.execute(
                "SELECT MAX(version) FROM schema_version"
            ).fetchone()[0]
            return version or 0

    def get_stats(self) -> dict[str, Any]:
        """Get database statistics."""
        with self._connect() as conn:
            total = conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0]
            by_category = dict(conn.execute("""
                SELECT category, COUNT(*) FROM notes
                GROUP BY category ORDER BY category
            """).fetchall())

            return {
                "total_notes": total,
                "by_category": by_category,
            }
