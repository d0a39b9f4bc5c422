"""
Logging setup for Jotbox.

Plain stdlib logging. Modules log through logging.getLogger(__name__);
front ends call configure_logging() once at startup.
"""

import logging
import os
from typing import Any

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(config: dict[str, Any] | None = None, level: str | None = None) -> None:
    """
    Configure root logging to stderr.

    Level precedence: explicit argument, JOTBOX_LOG_LEVEL, config [logging] level.
    """
    configured = (config or {}).get("logging", {}).get("level", "WARNING")
    name = (level or os.environ.get("JOTBOX_LOG_LEVEL") or configured).upper()

    logging.basicConfig(
        format=LOG_FORMAT,
        level=getattr(logging, name, logging.WARNING),
    )
