"""Module-level IDE settings: extensions plus facets."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from idea_ext.plugins.manager import PluginManager, default_plugin_manager
from idea_ext.settings.base import ExtensibleSettings, entry_factory
from idea_ext.settings.sections import Facet

if TYPE_CHECKING:
    from idea_ext.host.containers import PolymorphicContainer
    from idea_ext.host.project import Project


class ModuleSettings(ExtensibleSettings):
    """Settings rendered into the IDE's module-level import document."""

    def __init__(self, project: Project, manager: PluginManager | None = None) -> None:
        super().__init__(project)
        plugins = manager if manager is not None else default_plugin_manager()

        facets: PolymorphicContainer[Facet] = project.polymorphic_container(Facet)
        for kind in plugins.get_facets():
            facets.register_factory(kind, entry_factory(project, kind))
        self._facets = facets

    @property
    def facets(self) -> PolymorphicContainer[Facet]:
        return self._facets

    def configure_facets(self, action: Callable[[PolymorphicContainer[Facet]], Any]) -> PolymorphicContainer[Facet]:
        action(self._facets)
        return self._facets

    def to_map(self) -> dict[str, Any]:
        result = self.collect_extensions()
        if not self._facets.is_empty():
            result["facets"] = [facet.to_map() for facet in self._facets]
        return result
