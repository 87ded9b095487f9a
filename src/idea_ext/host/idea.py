"""The IDE model attached to host projects under the ``idea`` extension.

Only the root project has a project-level part; every project has a
module-level part. Both are ExtensionAware so that idea-ext (and anything
else) can hang settings off them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from idea_ext.host.extensions import ExtensionAware

if TYPE_CHECKING:
    from idea_ext.host.project import Project

IDEA_EXTENSION_NAME = "idea"


class IdeaProject(ExtensionAware):
    """Project-level IDE model (root project only)."""


class IdeaModule(ExtensionAware):
    """Module-level IDE model."""


class IdeaModel:
    def __init__(self, project: IdeaProject | None, module: IdeaModule) -> None:
        self.project = project
        self.module = module

    @classmethod
    def for_project(cls, project: Project) -> IdeaModel:
        objects = project.objects
        idea_project = IdeaProject(objects.new_extension_container()) if project.parent is None else None
        return cls(project=idea_project, module=IdeaModule(objects.new_extension_container()))
