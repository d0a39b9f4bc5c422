"""
Note store for Jotbox.

The operations callers use: validates input, resolves the category (manual or
classifier), stamps ids and times, and hands the record to the database.
Writes are serialized; each one is committed before it returns.
"""

import logging
import threading
import uuid
from datetime import datetime, timezone
from typing import Any, Callable

from jotbox.classifier import categorize
from jotbox.config import load_config
from jotbox.db import Database
from jotbox.errors import NotFoundError, ValidationError
from jotbox.models import Note
from jotbox.taxonomy import is_auto, is_known_category

logger = logging.getLogger(__name__)


def utc_now() -> datetime:
    """Current time, timezone-aware UTC."""
    return datetime.now(timezone.utc)


def generate_id() -> str:
    """Generate a unique note ID."""
    return uuid.uuid4().hex


def clean_text(value: str | None, field: str) -> str:
    """Trim a title or content value. Raises ValidationError if nothing is left."""
    text = (value or "").strip()
    if not text:
        raise ValidationError(f"{field.capitalize()} is required")
    return text


class NoteStore:
    """Create, update, delete and query notes."""

    def __init__(
        self,
        config: dict[str, Any] | None = None,
        db: Database | None = None,
        clock: Callable[[], datetime] = utc_now,
        id_factory: Callable[[], str] = generate_id,
    ):
        self.config = config or load_config()
        self.db = db or Database()
        self.clock = clock
        self.id_factory = id_factory
        self.strict_categories = bool(
            self.config.get("categories", {}).get("strict", False)
        )
        self._lock = threading.Lock()

    def resolve_category(self, title: str, content: str, choice: str | None) -> str:
        """
        Decide a note's category.

        No choice (or "Auto") runs the classifier on the given text; anything
        else is taken as-is, unless strict categories are configured.
        """
        if is_auto(choice):
            return categorize(title, content)

        if self.strict_categories and not is_known_category(choice):
            raise ValidationError(f"Unknown category: {choice}")

        return choice

    def create(self, title: str, content: str, category: str | None = None) -> Note:
        """Create and persist a note. Returns the stored snapshot."""
        title = clean_text(title, "title")
        content = clean_text(content, "content")
        resolved = self.resolve_category(title, content, category)

        with self._lock:
            now = self.clock()
            note = Note(
                id=self.id_factory(),
                title=title,
                content=content,
                category=resolved,
                created_at=now,
                updated_at=now,
            )
            self.db.insert_note(note)

        logger.info("Created note %s [%s]", note.id, note.category)
        return note.model_copy()

    def update(
        self,
        note_id: str,
        title: str,
        content: str,
        category: str | None = None,
    ) -> Note:
        """
        Replace a note's title, content and category.

        "Auto" always re-runs the classifier on the new text, changed or not.
        created_at is kept; updated_at moves to now.
        """
        with self._lock:
            existing = self.db.get_note(note_id)
            if existing is None:
                raise NotFoundError(note_id)

            title = clean_text(title, "title")
            content = clean_text(content, "content")
            resolved = self.resolve_category(title, content, category)

            # never earlier than creation, even if the clock steps back
            now = max(self.clock(), existing.created_at)
            note = existing.model_copy(update={
                "title": title,
                "content": content,
                "category": resolved,
                "updated_at": now,
            })
            if not self.db.update_note(note):
                raise NotFoundError(note_id)

        logger.info("Updated note %s [%s]", note.id, note.category)
        return note.model_copy()

    def delete(self, note_id: str) -> None:
        """Delete a note permanently."""
        with self._lock:
            if not self.db.delete_note(note_id):
                raise NotFoundError(note_id)

        logger.info("Deleted note %s", note_id)

    def get(self, note_id: str) -> Note:
        """Get one note by ID."""
        note = self.db.get_note(note_id)
        if note is None:
            raise NotFoundError(note_id)
        return note

    def list_all(self, category: str | None = None) -> list[Note]:
        """All notes, newest first. Optionally only one category."""
        return self.db.get_notes(category=category)

    def search(self, keyword: str | None) -> list[Note]:
        """Notes whose title or content contains keyword, any case, newest first."""
        return self.db.search(keyword or "")

    def list_categories_in_use(self) -> list[str]:
        """Distinct categories of stored notes, ascending."""
        return self.db.get_categories_in_use()

    def recategorize_all(self) -> int:
        """
        Re-run the classifier over every stored note.

        Used after the taxonomy changes. Does not touch updated_at.
        Returns the number of notes whose category changed.
        """
        with self._lock:
            assignments = {
                note.id: categorize(note.title, note.content)
                for note in self.db.get_notes()
            }
            changed = self.db.set_categories(assignments)

        logger.info("Recategorized %d of %d notes", changed, len(assignments))
        return changed

    def stats(self) -> dict[str, Any]:
        """Note counts, total and per category."""
        return self.db.get_stats()
