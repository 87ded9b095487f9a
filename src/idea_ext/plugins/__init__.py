# src/idea_ext/plugins/__init__.py
"""Collaborator plugin system via pluggy.

- Hookspecs: kind contribution and settings configuration hooks
- Manager: registration and kind lookup
- Builtin: the run configuration and facet kinds shipped with idea-ext
"""

from idea_ext.plugins.hookspecs import hookimpl, hookspec
from idea_ext.plugins.manager import PluginManager, default_plugin_manager

__all__ = [
    "PluginManager",
    "default_plugin_manager",
    "hookimpl",
    "hookspec",
]
