"""
CLI for Jotbox.

Minimal CLI using stdlib argument handling for fast startup.
Subcommands are imported lazily to avoid startup overhead.

Usage:
    jotbox add "title" "content"     # Create a note (category auto-detected)
    jotbox list                      # Newest notes first
    jotbox --help                    # Show help
"""

import sys


def print_help() -> None:
    """Print help message."""
    print("""jotbox - personal notes that file themselves

Usage:
    jotbox add <title> <content> [--category C]   Create a note

Commands:
    jotbox list [--category C]    List notes, newest first
    jotbox find <query>           Substring search in title and content
    jotbox show <id>              Show one note in full
    jotbox edit <id> [--title T] [--content C] [--category C]
                                  Edit a note (--category Auto re-detects)
    jotbox rm <id>                Delete a note
    jotbox categories [--all]     Categories in use (--all: every category)
    jotbox classify <title> [content]
                                  Show how a text would be categorized
    jotbox recategorize           Re-run categorization over all notes
    jotbox stats                  Show database statistics
    jotbox health                 Check database, config and taxonomy

Options:
    jotbox --help, -h             Show this help
    jotbox --version, -v          Show version

Examples:
    jotbox add "Quarterly budget meeting" "Discuss revenue targets"
    jotbox add "Gym plan" "Three workouts a week" --category Health
    jotbox list --category Travel
    jotbox find budget
    jotbox edit 3f2a9c1e --category Auto

Content can also be piped: echo "body" | jotbox add "title"
Note IDs may be abbreviated to any unique prefix.""")


def print_version() -> None:
    """Print version."""
    from jotbox import __version__
    print(f"jotbox {__version__}")


def parse_options(args: list[str], options: dict[str, str]) -> tuple[dict[str, str], list[str]]:
    """
    Split --option value pairs from positional arguments.

    options maps every accepted spelling (e.g. "-c", "--category") to its key.
    """
    found: dict[str, str] = {}
    positional: list[str] = []

    i = 0
    while i < len(args):
        arg = args[i]
        if arg in options and i + 1 < len(args):
            found[options[arg]] = args[i + 1]
            i += 2
        else:
            positional.append(arg)
            i += 1

    return found, positional


def get_store():
    """Open the note store, configuring logging first."""
    from jotbox.config import load_config
    from jotbox.logs import configure_logging
    from jotbox.store import NoteStore

    config = load_config()
    configure_logging(config)
    return NoteStore(config=config)


def resolve_id(store, prefix: str) -> str:
    """Expand a unique ID prefix to a full note ID. Unknown prefixes pass through."""
    matches = [note.id for note in store.list_all() if note.id.startswith(prefix)]
    if len(matches) == 1:
        return matches[0]
    return prefix


def cmd_add(args: list[str]) -> int:
    """Create a note."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import format_id

    options, positional = parse_options(args, {"--category": "category", "-c": "category"})

    if not positional:
        print("Usage: jotbox add <title> <content> [--category C]", file=sys.stderr)
        return 1

    title = positional[0]
    content = " ".join(positional[1:])
    if not content and not sys.stdin.isatty():
        content = sys.stdin.read()

    try:
        store = get_store()
        note = store.create(title, content, options.get("category"))
        print(f"{format_id(note.id)} [{note.category}] {note.title}")
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_list(args: list[str]) -> int:
    """List notes with optional category filter."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import get_notes_formatted

    options, _ = parse_options(args, {"--category": "category", "-c": "category"})

    try:
        print(get_notes_formatted(get_store(), category=options.get("category")))
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_find(args: list[str]) -> int:
    """Substring search over notes."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import search_notes_formatted

    if not args:
        print("Usage: jotbox find <query>", file=sys.stderr)
        return 1

    query = " ".join(args)

    try:
        print(search_notes_formatted(query, get_store()))
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_show(args: list[str]) -> int:
    """Show one note."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import format_note_detail

    if not args:
        print("Usage: jotbox show <id>", file=sys.stderr)
        return 1

    try:
        store = get_store()
        note = store.get(resolve_id(store, args[0]))
        print(format_note_detail(note))
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_edit(args: list[str]) -> int:
    """Edit a note. Fields not given keep their current value."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import format_id

    options, positional = parse_options(args, {
        "--title": "title", "-t": "title",
        "--content": "content",
        "--category": "category", "-c": "category",
    })

    if not positional:
        print("Usage: jotbox edit <id> [--title T] [--content C] [--category C]", file=sys.stderr)
        return 1

    try:
        store = get_store()
        current = store.get(resolve_id(store, positional[0]))
        note = store.update(
            current.id,
            options.get("title", current.title),
            options.get("content", current.content),
            options.get("category", current.category),
        )
        print(f"Updated: {format_id(note.id)} [{note.category}] {note.title}")
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_rm(args: list[str]) -> int:
    """Delete a note."""
    from jotbox.errors import JotboxError

    if not args:
        print("Usage: jotbox rm <id>", file=sys.stderr)
        return 1

    try:
        store = get_store()
        note_id = resolve_id(store, args[0])
        store.delete(note_id)
        print(f"Deleted: {note_id}")
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_categories(args: list[str]) -> int:
    """List categories in use, or every category with --all."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import format_categories
    from jotbox.taxonomy import category_names

    if args and args[0] in ("--all", "-a"):
        print(format_categories(category_names(), "ALL CATEGORIES"))
        return 0

    try:
        print(format_categories(get_store().list_categories_in_use()))
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_classify(args: list[str]) -> int:
    """Dry-run the classifier and show per-category scores."""
    from jotbox.classifier import categorize, score_categories
    from jotbox.surfacing import format_scores

    if not args:
        print("Usage: jotbox classify <title> [content]", file=sys.stderr)
        return 1

    title = args[0]
    content = " ".join(args[1:])

    print(format_scores(score_categories(title, content), categorize(title, content)))
    return 0


def cmd_recategorize() -> int:
    """Re-run categorization over every note."""
    from jotbox.errors import JotboxError

    try:
        changed = get_store().recategorize_all()
        print(f"Recategorized {changed} notes.")
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_stats() -> int:
    """Show database statistics."""
    from jotbox.errors import JotboxError
    from jotbox.surfacing import format_stats

    try:
        print(format_stats(get_store().stats()))
        return 0
    except JotboxError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def cmd_health() -> int:
    """Run health checks. Exit 1 if any check failed."""
    from jotbox.health import format_health_report, run_health_check

    checks = run_health_check()
    print(format_health_report(checks))
    return 1 if any(status == "✗" for status, _ in checks.values()) else 0


def main() -> int:
    """
    Main entry point.
    """
    args = sys.argv[1:]

    if not args:
        print_help()
        return 0

    # Handle flags and commands
    first_arg = args[0]
    rest = args[1:]

    if first_arg in ("--help", "-h", "help"):
        print_help()
        return 0

    if first_arg in ("--version", "-v", "version"):
        print_version()
        return 0

    # Subcommands (lazy import to keep startup fast)
    if first_arg == "add":
        return cmd_add(rest)

    if first_arg in ("list", "ls"):
        return cmd_list(rest)

    if first_arg == "find":
        return cmd_find(rest)

    if first_arg == "show":
        return cmd_show(rest)

    if first_arg == "edit":
        return cmd_edit(rest)

    if first_arg in ("rm", "delete"):
        return cmd_rm(rest)

    if first_arg == "categories":
        return cmd_categories(rest)

    if first_arg == "classify":
        return cmd_classify(rest)

    if first_arg == "recategorize":
        return cmd_recategorize()

    if first_arg == "stats":
        return cmd_stats()

    if first_arg == "health":
        return cmd_health()

    print(f"Unknown command: {first_arg}", file=sys.stderr)
    print("Run 'jotbox --help' for usage.", file=sys.stderr)
    return 1


if __name__ == "__main__":
    sys.exit(main())
