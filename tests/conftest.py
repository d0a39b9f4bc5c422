"""
Pytest configuration and fixtures for jotbox tests.
"""

from datetime import datetime, timedelta, timezone
from pathlib import Path

import pytest


class FakeClock:
    """Deterministic clock: each call is one second after the previous one."""

    def __init__(self, start: datetime | None = None):
        self.now = start or datetime(2024, 3, 1, 9, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        current = self.now
        self.now = self.now + timedelta(seconds=1)
        return current


@pytest.fixture(autouse=True)
def isolated_home(tmp_path: Path, monkeypatch):
    """Point data and config directories at a temp dir, and disable colors."""
    home = tmp_path / "home"
    monkeypatch.setenv("JOTBOX_HOME", str(home))
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "config"))
    monkeypatch.setenv("NO_COLOR", "1")
    monkeypatch.delenv("JOTBOX_LOG_LEVEL", raising=False)
    return home


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Path for a fresh notes database."""
    return tmp_path / "notes.db"


@pytest.fixture
def db(db_path: Path):
    """A Database on a temp file."""
    from jotbox.db import Database
    return Database(db_path)


@pytest.fixture
def clock() -> FakeClock:
    return FakeClock()


@pytest.fixture
def store(db, clock):
    """A NoteStore with permissive categories and a ticking fake clock."""
    from jotbox.store import NoteStore
    return NoteStore(config={"categories": {"strict": False}}, db=db, clock=clock)


@pytest.fixture
def strict_store(db, clock):
    """A NoteStore that rejects categories outside the taxonomy."""
    from jotbox.store import NoteStore
    return NoteStore(config={"categories": {"strict": True}}, db=db, clock=clock)


@pytest.fixture
def sample_notes(store):
    """Three notes created in order: business, travel, general."""
    business = store.create(
        "Quarterly budget meeting with client",
        "Discuss revenue targets and project deadline",
    )
    travel = store.create(
        "Trip to the mountains",
        "Booking flights and hotel for the hiking adventure",
    )
    general = store.create(
        "Random thoughts",
        "Just writing down whatever comes to mind",
    )
    return business, travel, general
