"""Plugin manager for collaborator registration and kind lookup.

Uses pluggy for hook-based registration.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

import pluggy

from idea_ext.core.logging import get_logger
from idea_ext.plugins.hookspecs import (
    PROJECT_NAME,
    IdeaExtConfigureSpec,
    IdeaExtKindSpec,
)

if TYPE_CHECKING:
    from idea_ext.host.project import Project
    from idea_ext.settings.module import ModuleSettings
    from idea_ext.settings.project import ProjectSettings
    from idea_ext.settings.sections import Facet, RunConfiguration

logger = get_logger(__name__)


class PluginManager:
    """Manages collaborator registration and kind lookup.

    Usage:
        manager = PluginManager()
        manager.register_builtin_plugins()
        manager.register(MyCollaborator())

        kinds = manager.get_run_configurations()
        application = manager.get_run_configuration_by_kind("application")
    """

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)

        self._pm.add_hookspecs(IdeaExtKindSpec)
        self._pm.add_hookspecs(IdeaExtConfigureSpec)

        # Caches - map kind tag to class for duplicate detection
        self._run_configurations: dict[str, type[RunConfiguration]] = {}
        self._facets: dict[str, type[Facet]] = {}

    def register_builtin_plugins(self) -> None:
        """Register the built-in run configuration and facet kinds.

        Call this once at startup.
        """
        from idea_ext.plugins.builtin import BuiltinKinds

        self.register(BuiltinKinds())

    def register(self, plugin: Any) -> None:
        """Register a collaborator.

        Args:
            plugin: Object implementing one or more hooks
        """
        self._pm.register(plugin)
        self._refresh_caches()
        logger.debug("plugin_registered", plugin=type(plugin).__name__)

    def _refresh_caches(self) -> None:
        """Refresh kind caches from hooks.

        Raises:
            ValueError: If two classes declare the same kind tag
        """
        new_run_configurations: dict[str, type[RunConfiguration]] = {}
        new_facets: dict[str, type[Facet]] = {}

        for run_configurations in self._pm.hook.idea_ext_get_run_configurations():
            for cls in run_configurations:
                kind = cls.kind
                if kind in new_run_configurations:
                    raise ValueError(
                        f"Duplicate run configuration kind: '{kind}'. Already registered by {new_run_configurations[kind].__name__}"
                    )
                new_run_configurations[kind] = cls

        for facets in self._pm.hook.idea_ext_get_facets():
            for cls in facets:
                kind = cls.kind
                if kind in new_facets:
                    raise ValueError(f"Duplicate facet kind: '{kind}'. Already registered by {new_facets[kind].__name__}")
                new_facets[kind] = cls

        # All validated, update caches
        self._run_configurations = new_run_configurations
        self._facets = new_facets

    # === Getters ===

    def get_run_configurations(self) -> list[type[RunConfiguration]]:
        """Get all registered run configuration kinds."""
        return list(self._run_configurations.values())

    def get_facets(self) -> list[type[Facet]]:
        """Get all registered facet kinds."""
        return list(self._facets.values())

    def get_run_configuration_by_kind(self, kind: str) -> type[RunConfiguration] | None:
        return self._run_configurations.get(kind)

    def get_facet_by_kind(self, kind: str) -> type[Facet] | None:
        return self._facets.get(kind)

    # === Configuration hooks ===

    def configure_project(self, settings: ProjectSettings, project: Project) -> None:
        self._pm.hook.idea_ext_configure_project(settings=settings, project=project)

    def configure_module(self, settings: ModuleSettings, project: Project) -> None:
        self._pm.hook.idea_ext_configure_module(settings=settings, project=project)


# Module-level singleton for the default plugin manager
_default_manager: PluginManager | None = None


def default_plugin_manager() -> PluginManager:
    """Get the shared plugin manager with built-in kinds registered."""
    global _default_manager

    if _default_manager is None:
        manager = PluginManager()
        manager.register_builtin_plugins()
        _default_manager = manager
    return _default_manager
