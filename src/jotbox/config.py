"""
Configuration management for Jotbox.

Uses XDG base directories:
- Config: ~/.config/jotbox/config.toml
- Data: ~/jotbox/ (the notes database lives here)
"""

from pathlib import Path
from typing import Any
import os

# XDG defaults
DEFAULT_CONFIG_HOME = Path.home() / ".config"
DEFAULT_DATA_HOME = Path.home() / "jotbox"


def get_config_dir() -> Path:
    """Get the config directory (XDG_CONFIG_HOME/jotbox)."""
    base = Path(os.environ.get("XDG_CONFIG_HOME", DEFAULT_CONFIG_HOME))
    return base / "jotbox"


def get_jotbox_home() -> Path:
    """Get the jotbox data directory (~/jotbox or JOTBOX_HOME)."""
    if env_home := os.environ.get("JOTBOX_HOME"):
        return Path(env_home)
    return DEFAULT_DATA_HOME


def get_config_path() -> Path:
    """Get the path to config.toml."""
    return get_config_dir() / "config.toml"


def get_db_path() -> Path:
    """Get the path to notes.db."""
    return get_jotbox_home() / "notes.db"


def load_config() -> dict[str, Any]:
    """
    Load configuration from config.toml.

    Returns default config if file doesn't exist. Sections missing from the
    file fall back to their defaults.
    """
    config_path = get_config_path()
    config = get_default_config()

    if not config_path.exists():
        return config

    # Lazy import tomli only when needed
    import tomli

    with open(config_path, "rb") as f:
        loaded = tomli.load(f)

    for section, values in loaded.items():
        if isinstance(values, dict) and isinstance(config.get(section), dict):
            config[section].update(values)
        else:
            config[section] = values

    return config


def get_default_config() -> dict[str, Any]:
    """Return default configuration."""
    return {
        "jotbox": {
            "home": str(get_jotbox_home()),
        },
        "categories": {
            "strict": False,  # reject manual categories outside the taxonomy
        },
        "logging": {
            "level": os.environ.get("JOTBOX_LOG_LEVEL", "WARNING"),
        },
    }
