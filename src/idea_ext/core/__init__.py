"""Core infrastructure: rendering, logging, and configuration loading."""

from idea_ext.core.canonical import (
    forward_slashes,
    stable_hash,
    to_json,
)
from idea_ext.core.logging import configure_logging, get_logger

__all__ = [
    "configure_logging",
    "forward_slashes",
    "get_logger",
    "stable_hash",
    "to_json",
]
