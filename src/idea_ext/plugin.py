"""Entry point that attaches idea-ext settings to host projects.

apply() is called once per project. The root project gets project-level
and module-level settings; subprojects only get module-level settings.
Registered collaborators are then asked to configure them.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from idea_ext.core.logging import get_logger
from idea_ext.host.idea import IDEA_EXTENSION_NAME, IdeaModel
from idea_ext.plugins.manager import PluginManager, default_plugin_manager
from idea_ext.settings.module import ModuleSettings
from idea_ext.settings.project import ProjectSettings

if TYPE_CHECKING:
    from idea_ext.host.project import Project

SETTINGS_EXTENSION_NAME = "settings"

logger = get_logger(__name__)


class IdeaExtPlugin:
    """Adds ``settings`` to the ``idea.project`` and ``idea.module`` models."""

    def __init__(self, manager: PluginManager | None = None) -> None:
        self._manager = manager if manager is not None else default_plugin_manager()

    def apply(self, project: Project) -> None:
        if project.extensions.find_by_name(IDEA_EXTENSION_NAME) is None:
            project.extensions.add(IDEA_EXTENSION_NAME, IdeaModel.for_project(project))
        self.extend(project)

    def extend(self, project: Project) -> None:
        """Attach settings to an existing IDE model; no-op without one."""
        idea = project.extensions.find_by_name(IDEA_EXTENSION_NAME)
        if not isinstance(idea, IdeaModel):
            return

        if idea.project is not None:
            project_settings = idea.project.extensions.create(SETTINGS_EXTENSION_NAME, ProjectSettings, project, self._manager)
            self._manager.configure_project(project_settings, project)

        module_settings = idea.module.extensions.create(SETTINGS_EXTENSION_NAME, ModuleSettings, project, self._manager)
        self._manager.configure_module(module_settings, project)
        logger.debug("settings_attached", project=project.path, project_level=idea.project is not None)


def project_settings(project: Project) -> ProjectSettings:
    """Project-level settings of the build that project belongs to.

    Raises:
        KeyError: If the plugin was not applied to the root project
    """
    idea: IdeaModel = project.root_project.extensions.get_by_name(IDEA_EXTENSION_NAME)
    if idea.project is None:
        raise KeyError(f"Project {project.root_project.path} has no project-level IDE model")
    settings: ProjectSettings = idea.project.extensions.get_by_name(SETTINGS_EXTENSION_NAME)
    return settings


def module_settings(project: Project) -> ModuleSettings:
    """Module-level settings of a project.

    Raises:
        KeyError: If the plugin was not applied to the project
    """
    idea: IdeaModel = project.extensions.get_by_name(IDEA_EXTENSION_NAME)
    settings: ModuleSettings = idea.module.extensions.get_by_name(SETTINGS_EXTENSION_NAME)
    return settings
