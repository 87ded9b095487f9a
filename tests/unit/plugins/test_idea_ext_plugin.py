"""Tests for attaching settings to host projects."""

from __future__ import annotations

import json

import pytest

from idea_ext.host.idea import IDEA_EXTENSION_NAME, IdeaModel
from idea_ext.host.project import Project
from idea_ext.plugin import SETTINGS_EXTENSION_NAME, IdeaExtPlugin, module_settings, project_settings
from idea_ext.plugins.hookspecs import hookimpl
from idea_ext.plugins.manager import PluginManager
from idea_ext.settings.module import ModuleSettings
from idea_ext.settings.project import ProjectSettings
from tests.conftest import _TestSection


class RecordingCollaborator:
    """Attaches an extension and records which projects it configured."""

    def __init__(self) -> None:
        self.projects: list[str] = []
        self.modules: list[str] = []

    @hookimpl
    def idea_ext_configure_project(self, settings: ProjectSettings, project: Project) -> None:
        self.projects.append(project.path)
        settings.extensions.add("recorder", _TestSection(scope="project"))

    @hookimpl
    def idea_ext_configure_module(self, settings: ModuleSettings, project: Project) -> None:
        self.modules.append(project.path)
        settings.extensions.add("recorder", _TestSection(scope=project.path))


class TestIdeaExtPlugin:
    def test_root_gets_project_and_module_settings(self, root_project: Project, plugin_manager: PluginManager) -> None:
        IdeaExtPlugin(plugin_manager).apply(root_project)

        idea = root_project.extensions.get_by_name(IDEA_EXTENSION_NAME)
        assert isinstance(idea, IdeaModel)
        assert isinstance(idea.project.extensions.get_by_name(SETTINGS_EXTENSION_NAME), ProjectSettings)  # type: ignore[union-attr]
        assert isinstance(idea.module.extensions.get_by_name(SETTINGS_EXTENSION_NAME), ModuleSettings)

    def test_subproject_gets_module_settings_only(self, root_project: Project, plugin_manager: PluginManager) -> None:
        app = root_project.find_project(":app")
        assert app is not None

        IdeaExtPlugin(plugin_manager).apply(app)

        idea = app.extensions.get_by_name(IDEA_EXTENSION_NAME)
        assert idea.project is None
        assert isinstance(module_settings(app), ModuleSettings)

    def test_existing_idea_model_is_reused(self, root_project: Project, plugin_manager: PluginManager) -> None:
        model = IdeaModel.for_project(root_project)
        root_project.extensions.add(IDEA_EXTENSION_NAME, model)

        IdeaExtPlugin(plugin_manager).apply(root_project)

        assert root_project.extensions.get_by_name(IDEA_EXTENSION_NAME) is model
        assert project_settings(root_project) is model.project.extensions.get_by_name(SETTINGS_EXTENSION_NAME)  # type: ignore[union-attr]

    def test_extend_without_idea_model_is_noop(self, root_project: Project, plugin_manager: PluginManager) -> None:
        IdeaExtPlugin(plugin_manager).extend(root_project)

        assert IDEA_EXTENSION_NAME not in root_project.extensions

    def test_collaborators_configure_every_project(self, root_project: Project, plugin_manager: PluginManager) -> None:
        collaborator = RecordingCollaborator()
        plugin_manager.register(collaborator)
        plugin = IdeaExtPlugin(plugin_manager)

        for project in root_project.all_projects():
            plugin.apply(project)

        assert collaborator.projects == [":"]
        assert collaborator.modules == [":", ":app"]
        assert json.loads(project_settings(root_project).render()) == {"recorder": {"scope": "project"}}
        assert json.loads(module_settings(root_project.find_project(":app")).render()) == {"recorder": {"scope": ":app"}}  # type: ignore[arg-type]

    def test_project_settings_reachable_from_subproject(self, root_project: Project, plugin_manager: PluginManager) -> None:
        plugin = IdeaExtPlugin(plugin_manager)
        for project in root_project.all_projects():
            plugin.apply(project)

        assert project_settings(root_project.find_project(":app")) is project_settings(root_project)  # type: ignore[arg-type]

    def test_accessors_require_applied_plugin(self, root_project: Project) -> None:
        with pytest.raises(KeyError):
            module_settings(root_project)
