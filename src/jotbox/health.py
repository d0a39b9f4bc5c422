"""
Health check module for Jotbox.

Reports system status across all components.
"""

import sqlite3
from pathlib import Path

from jotbox.config import get_config_path, get_db_path, load_config
from jotbox.taxonomy import CATEGORIES


def read_database_status(db_path: Path) -> tuple[int, int]:
    """
    Read (schema version, note count) without modifying the database.

    A database from before version tracking reports version 0.
    """
    conn = sqlite3.connect(f"{db_path.resolve().as_uri()}?mode=ro", uri=True)
    try:
        tables = {
            row[0] for row in conn.execute(
                "SELECT name FROM sqlite_master WHERE type = 'table'"
            )
        }
        version = 0
        if "schema_version" in tables:
            version = conn.execute(
                "SELECT MAX(version) FROM schema_version"
            ).fetchone()[0] or 0
        total = 0
        if "notes" in tables:
            total = conn.execute("SELECT COUNT(*) FROM notes").fetchone()[0]
        return version, total
    finally:
        conn.close()


def check_database() -> tuple[str, str]:
    """Check database status. Read-only: never creates or migrates."""
    from jotbox.db import SCHEMA_VERSION

    db_path = get_db_path()
    if not db_path.exists():
        return "!", "Not created yet (first write creates it)"

    try:
        version, total = read_database_status(db_path)
    except sqlite3.Error as e:
        return "✗", f"Error: {e}"

    if version < SCHEMA_VERSION:
        return "!", f"Schema v{version}, expected v{SCHEMA_VERSION} (migrates on next open)"
    return "✓", f"OK ({total} notes, schema v{version})"


def check_config() -> tuple[str, str]:
    """Check config file status."""
    config_path = get_config_path()
    if not config_path.exists():
        return "✓", "Defaults (no config.toml)"

    try:
        config = load_config()
    except (OSError, ValueError) as e:  # tomli.TOMLDecodeError is a ValueError
        return "✗", f"Unreadable: {e}"

    mode = "strict" if config.get("categories", {}).get("strict") else "permissive"
    return "✓", f"OK ({mode} categories)"


def check_taxonomy() -> tuple[str, str]:
    """Check the keyword taxonomy for empty or duplicate keywords."""
    problems = []
    for category, keywords in CATEGORIES.items():
        if any(not keyword.strip() for keyword in keywords):
            problems.append(f"{category}: empty keyword")
        if len(set(keywords)) != len(keywords):
            problems.append(f"{category}: duplicate keyword")

    if problems:
        return "✗", "; ".join(problems)

    total = sum(len(keywords) for keywords in CATEGORIES.values())
    return "✓", f"OK ({len(CATEGORIES)} categories, {total} keywords)"


def run_health_check() -> dict[str, tuple[str, str]]:
    """Run all health checks."""
    return {
        "Database": check_database(),
        "Config": check_config(),
        "Taxonomy": check_taxonomy(),
    }


def format_health_report(checks: dict[str, tuple[str, str]]) -> str:
    """Format health check results."""
    lines = ["Jotbox Health Check", "-" * 40]

    for name, (status, message) in checks.items():
        lines.append(f"{status} {name}: {message}")

    return "\n".join(lines)
