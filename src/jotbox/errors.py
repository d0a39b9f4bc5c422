"""
Exceptions raised by the Jotbox note store.
"""


class JotboxError(Exception):
    """Base class for all Jotbox errors."""
    pass


class ValidationError(JotboxError):
    """Raised when a note is rejected before any state change (e.g. empty title)."""
    pass


class NotFoundError(JotboxError):
    """Raised when an update or delete references an unknown note id."""

    def __init__(self, note_id: str):
        super().__init__(f"Note not found: {note_id}")
        self.note_id = note_id


class PersistenceError(JotboxError):
    """Raised when a durable write or read fails. The operation did not happen."""
    pass


class InitializationError(JotboxError):
    """Raised when the database cannot be opened, created or migrated."""
    pass
