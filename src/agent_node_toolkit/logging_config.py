# Logging setup
# The library only emits records; applications opt in to handlers here

import logging

from .config import settings


def configure_logging(level: str | int | None = None, fmt: str | None = None) -> None:
    """Configure root logging with the toolkit format.

    Intended for applications and scripts embedding the toolkit. Importing the
    package never calls this.
    """
    resolved = level if level is not None else settings.log_level
    if isinstance(resolved, str):
        resolved = logging.getLevelName(resolved.upper())
        if not isinstance(resolved, int):
            raise ValueError(f"Unknown log level: {level or settings.log_level}")

    logging.basicConfig(level=resolved, format=fmt or settings.log_format)
    logging.getLogger("agent_node_toolkit").setLevel(resolved)
