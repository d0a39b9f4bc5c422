"""
Pydantic models for Jotbox.
"""

import sqlite3
from datetime import datetime
from typing import Any

from pydantic import BaseModel, Field

from jotbox.taxonomy import GENERAL


class Note(BaseModel):
    """Snapshot of a stored note. Mutating it never touches the database."""

    id: str = Field(description="Opaque unique identifier")
    title: str = Field(min_length=1)
    content: str = Field(min_length=1)
    category: str = Field(default=GENERAL)
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_row(cls, row: sqlite3.Row | dict[str, Any]) -> "Note":
        """Build a snapshot from a notes table row."""
        data = dict(row)
        return cls(
            id=data["id"],
            title=data["title"],
            content=data["content"],
            category=data.get("category") or GENERAL,
            created_at=datetime.fromisoformat(data["created_at"]),
            updated_at=datetime.fromisoformat(data["updated_at"]),
        )

    def to_row(self) -> dict[str, Any]:
        """Column values for the notes table."""
        return {
            "id": self.id,
            "title": self.title,
            "content": self.content,
            "category": self.category,
            "created_at": self.created_at.isoformat(timespec="microseconds"),
            "updated_at": self.updated_at.isoformat(timespec="microseconds"),
        }
