"""
Surfacing module for Jotbox.

Terminal rendering of notes, categories and statistics.
"""

import os

from jotbox.models import Note
from jotbox.store import NoteStore
from jotbox.taxonomy import GENERAL


# ANSI color codes
class Colors:
    """ANSI color codes for terminal output."""
    RESET = "\033[0m"
    BOLD = "\033[1m"
    DIM = "\033[2m"

    # Foreground colors
    RED = "\033[31m"
    GREEN = "\033[32m"
    YELLOW = "\033[33m"
    BLUE = "\033[34m"
    WHITE = "\033[37m"

    # Bright foreground colors
    BRIGHT_BLACK = "\033[90m"  # Gray
    BRIGHT_RED = "\033[91m"
    BRIGHT_GREEN = "\033[92m"
    BRIGHT_YELLOW = "\033[93m"
    BRIGHT_BLUE = "\033[94m"
    BRIGHT_MAGENTA = "\033[95m"
    BRIGHT_CYAN = "\033[96m"

    @classmethod
    def enabled(cls) -> bool:
        """Check if colors should be enabled."""
        # Disable if NO_COLOR is set
        if os.environ.get("NO_COLOR"):
            return False
        return True


def c(text: str, *codes: str) -> str:
    """Apply color codes to text if colors are enabled."""
    if not Colors.enabled():
        return text
    return "".join(codes) + text + Colors.RESET


# Category colors
CATEGORY_COLORS = {
    "Business": Colors.BRIGHT_BLUE,
    "Educational": Colors.BRIGHT_YELLOW,
    "Personal": Colors.BRIGHT_MAGENTA,
    "Technology": Colors.BRIGHT_CYAN,
    "Finance": Colors.BRIGHT_GREEN,
    "Health": Colors.BRIGHT_RED,
    "Travel": Colors.YELLOW,
    GENERAL: Colors.BRIGHT_BLACK,
}

SHORT_ID_LENGTH = 8


def format_id(note_id: str) -> str:
    """Short form of a note ID for listings."""
    return note_id[:SHORT_ID_LENGTH]


def format_timestamp(note: Note) -> str:
    """Creation time as 'YYYY-MM-DD HH:MM'."""
    return note.created_at.strftime("%Y-%m-%d %H:%M")


def format_notes(notes: list[Note], header: str) -> str:
    """Render a note table under a header."""
    lines = []

    lines.append(c(f"━━━ {header} ━━━", Colors.BOLD, Colors.BLUE))
    lines.append("")

    # Column header
    lines.append(c(f"{'ID':8}  {'CREATED':16}  {'CATEGORY':11}  TITLE", Colors.DIM))
    lines.append(c("─" * 70, Colors.DIM))

    for note in notes:
        id_str = c(format_id(note.id), Colors.DIM)
        created = format_timestamp(note)
        category_str = c(f"{note.category:11}", CATEGORY_COLORS.get(note.category, ""))
        title = note.title[:40]

        lines.append(f"{id_str}  {created}  {category_str}  {title}")

    return "\n".join(lines)


def get_notes_formatted(store: NoteStore | None = None, category: str | None = None) -> str:
    """List notes as a formatted string with colors."""
    store = store or NoteStore()
    notes = store.list_all(category=category)

    if not notes:
        if category:
            return c(f"No notes in {category}.", Colors.DIM)
        return c("No notes found.", Colors.DIM)

    header = category.upper() if category else "NOTES"
    return format_notes(notes, header)


def search_notes_formatted(query: str, store: NoteStore | None = None) -> str:
    """Search notes and return formatted string with colors."""
    store = store or NoteStore()
    notes = store.search(query)

    if not notes:
        return c(f"No notes matching '{query}'.", Colors.DIM)

    return format_notes(notes, f"SEARCH: {query}")


def format_note_detail(note: Note) -> str:
    """Render one note in full."""
    color = CATEGORY_COLORS.get(note.category, "")
    lines = [
        c(note.title, Colors.BOLD),
        f"{c(note.category, color)}  {c(note.id, Colors.DIM)}",
        c(
            f"created {note.created_at.isoformat(timespec='seconds')}"
            f"  updated {note.updated_at.isoformat(timespec='seconds')}",
            Colors.DIM,
        ),
        "",
        note.content,
    ]
    return "\n".join(lines)


def format_categories(categories: list[str], header: str = "CATEGORIES") -> str:
    """Render a list of category labels."""
    if not categories:
        return c("No categories in use.", Colors.DIM)

    lines = [c(f"━━━ {header} ━━━", Colors.BOLD, Colors.BLUE), ""]
    for category in categories:
        lines.append(c(category, CATEGORY_COLORS.get(category, "")))
    return "\n".join(lines)


def format_scores(scores: dict[str, int], winner: str) -> str:
    """Render classifier scores, highest first, marking the chosen category."""
    lines = [c(f"━━━ CATEGORY: {winner} ━━━", Colors.BOLD, Colors.BLUE), ""]

    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    for category, score in ranked:
        marker = "→" if category == winner else " "
        line = f"{marker} {category:11}  {score:>3}"
        lines.append(c(line, Colors.BOLD) if category == winner else c(line, Colors.DIM))

    if all(score == 0 for score in scores.values()):
        lines.append("")
        lines.append(c(f"No keyword matched; falls back to {GENERAL}.", Colors.DIM))

    return "\n".join(lines)


def format_stats(stats: dict) -> str:
    """Render note statistics."""
    lines = ["Jotbox Statistics", "-" * 30, f"Total notes: {stats['total_notes']}"]

    by_category = stats.get("by_category", {})
    if by_category:
        lines.append("\nBy category:")
        for category, count in by_category.items():
            lines.append(f"  {category}: {count}")

    return "\n".join(lines)
