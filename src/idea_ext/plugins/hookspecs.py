"""pluggy hook specifications for idea-ext collaborators.

Collaborators implement these hooks to contribute run configuration and
facet kinds, and to attach extensions or configure sections when settings
objects are created.

Usage (implementing a collaborator):
    from idea_ext.plugins.hookspecs import hookimpl

    class MyCollaborator:
        @hookimpl
        def idea_ext_configure_project(self, settings, project):
            settings.extensions.add("myTool", MyToolSettings())

Note: @hookspec defines the hook interface (done here).
      @hookimpl marks collaborator implementations of those hooks.
"""

from typing import TYPE_CHECKING

import pluggy

if TYPE_CHECKING:
    from idea_ext.host.project import Project
    from idea_ext.settings.module import ModuleSettings
    from idea_ext.settings.project import ProjectSettings
    from idea_ext.settings.sections import Facet, RunConfiguration

PROJECT_NAME = "idea_ext"

hookspec = pluggy.HookspecMarker(PROJECT_NAME)

hookimpl = pluggy.HookimplMarker(PROJECT_NAME)


class IdeaExtKindSpec:
    """Hook specifications for polymorphic entry kinds."""

    @hookspec
    def idea_ext_get_run_configurations(self) -> list[type["RunConfiguration"]]:  # type: ignore[empty-body]
        """Return run configuration classes.

        Each class must declare a unique ``kind`` tag.
        """

    @hookspec
    def idea_ext_get_facets(self) -> list[type["Facet"]]:  # type: ignore[empty-body]
        """Return facet classes.

        Each class must declare a unique ``kind`` tag.
        """


class IdeaExtConfigureSpec:
    """Hook specifications called when settings objects are attached."""

    @hookspec
    def idea_ext_configure_project(self, settings: "ProjectSettings", project: "Project") -> None:
        """Configure project-level settings of the root project."""

    @hookspec
    def idea_ext_configure_module(self, settings: "ModuleSettings", project: "Project") -> None:
        """Configure module-level settings of a project."""
