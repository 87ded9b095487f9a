"""Tests for the project-level settings facade."""

from __future__ import annotations

import json
from typing import Any

import pytest

from idea_ext.contracts.enums import TestRunner
from idea_ext.contracts.errors import SectionConfigError, UnknownKindError
from idea_ext.host.project import Project
from idea_ext.settings.project import ProjectSettings
from idea_ext.settings.sections import Application, Remote
from tests.conftest import _TestSection


class TestLazySections:
    @pytest.mark.parametrize(
        "accessor",
        [
            "compiler",
            "groovy_compiler",
            "code_style",
            "inspections",
            "copyright",
            "task_triggers",
            "delegate_actions",
            "ide_artifacts",
        ],
    )
    def test_accessor_returns_same_instance(self, project_settings: ProjectSettings, accessor: str) -> None:
        assert getattr(project_settings, accessor) is getattr(project_settings, accessor)

    @pytest.mark.parametrize(
        ("configurator", "accessor"),
        [
            ("configure_compiler", "compiler"),
            ("configure_groovy_compiler", "groovy_compiler"),
            ("configure_code_style", "code_style"),
            ("configure_inspections", "inspections"),
            ("configure_copyright", "copyright"),
            ("configure_task_triggers", "task_triggers"),
            ("configure_delegate_actions", "delegate_actions"),
            ("configure_ide_artifacts", "ide_artifacts"),
        ],
    )
    def test_configurator_applies_action_to_lazy_section(
        self, project_settings: ProjectSettings, configurator: str, accessor: str
    ) -> None:
        seen: list[Any] = []

        returned = getattr(project_settings, configurator)(seen.append)

        assert seen == [getattr(project_settings, accessor)]
        assert returned is seen[0]

    def test_configure_twice_reuses_section(self, project_settings: ProjectSettings) -> None:
        project_settings.configure_delegate_actions(lambda d: setattr(d, "delegate_build_run_to_gradle", True))
        project_settings.configure_delegate_actions(lambda d: setattr(d, "test_runner", TestRunner.GRADLE))

        assert project_settings.delegate_actions.to_map() == {"delegateBuildRunToGradle": True, "testRunner": "GRADLE"}


class TestRender:
    def test_untouched_settings_render_empty_object(self, project_settings: ProjectSettings) -> None:
        assert project_settings.render() == "{}"

    def test_accessed_section_renders_with_defaults(self, project_settings: ProjectSettings) -> None:
        _ = project_settings.delegate_actions

        assert json.loads(project_settings.render()) == {
            "actionDelegationConfig": {"delegateBuildRunToGradle": False, "testRunner": "PLATFORM"}
        }

    def test_section_keys(self, project_settings: ProjectSettings, root_project: Project) -> None:
        project_settings.compiler.process_heap_size = 1024
        project_settings.groovy_compiler.heap_size = 512
        project_settings.code_style.hard_wrap_at = 100
        project_settings.inspections.create("unused", lambda i: setattr(i, "enabled", False))
        project_settings.copyright.use_default = "apache"
        project_settings.task_triggers.after_sync(root_project.task("generate"))
        project_settings.do_not_detect_frameworks("web")
        project_settings.ide_artifacts.artifact("dist")

        document = json.loads(project_settings.render())

        assert document["compiler"] == {"processHeapSize": 1024}
        assert document["groovyCompiler"] == {"heapSize": 512, "excludes": []}
        assert document["codeStyle"] == {"hardWrapAt": 100, "languages": {}}
        assert document["inspections"] == [{"name": "unused", "enabled": False, "options": {}}]
        assert document["copyright"] == {"useDefault": "apache", "scopes": {}, "profiles": {}}
        assert document["taskTriggersConfig"] == {"afterSync": [{"taskPath": ":generate", "projectPath": "/work/demo"}]}
        assert document["frameworkDetectionExcludes"] == ["web"]
        # Artifacts merge at top level
        assert document["artifacts"] == [{"type": "ARTIFACT", "name": "dist", "children": []}]

    def test_extensions_and_sections_merge(self, project_settings: ProjectSettings) -> None:
        project_settings.extensions.add("myTool", _TestSection(level=3))
        _ = project_settings.code_style

        assert json.loads(project_settings.render()) == {"myTool": {"level": 3}, "codeStyle": {"languages": {}}}

    def test_rendering_reflects_later_mutation(self, project_settings: ProjectSettings, root_project: Project) -> None:
        triggers = project_settings.task_triggers
        triggers.before_build(root_project.task("generate"))
        first = json.loads(project_settings.render())

        triggers.before_build(root_project.find_task(":app:build"))  # type: ignore[arg-type]
        second = json.loads(project_settings.render())

        assert [e["taskPath"] for e in first["taskTriggersConfig"]["beforeBuild"]] == [":generate"]
        assert [e["taskPath"] for e in second["taskTriggersConfig"]["beforeBuild"]] == [":generate", ":app:build"]

    def test_to_map_matches_render(self, project_settings: ProjectSettings) -> None:
        project_settings.do_not_detect_frameworks("web")

        assert json.loads(project_settings.render()) == project_settings.to_map()


class TestFrameworkDetection:
    def test_exclusions_accumulate_in_order(self, project_settings: ProjectSettings) -> None:
        project_settings.do_not_detect_frameworks("X")
        project_settings.do_not_detect_frameworks("Y", "Z")

        assert project_settings.framework_detection_excludes == ["X", "Y", "Z"]
        assert json.loads(project_settings.render()) == {"frameworkDetectionExcludes": ["X", "Y", "Z"]}

    def test_no_exclusions_before_first_call(self, project_settings: ProjectSettings) -> None:
        assert project_settings.framework_detection_excludes == []
        assert project_settings.render() == "{}"

    def test_non_string_id_rejected_and_earlier_ids_kept(self, project_settings: ProjectSettings) -> None:
        project_settings.do_not_detect_frameworks("web")

        with pytest.raises(SectionConfigError, match="FrameworkDetectionExclusionSettings"):
            project_settings.do_not_detect_frameworks("spring", 5)  # type: ignore[arg-type]

        assert json.loads(project_settings.render()) == {"frameworkDetectionExcludes": ["web"]}


class TestRunConfigurations:
    def test_builtin_kinds_registered(self, project_settings: ProjectSettings) -> None:
        assert project_settings.run_configurations.kinds() == ["application", "junit", "remote", "testng"]

    def test_empty_container_not_rendered(self, project_settings: ProjectSettings) -> None:
        _ = project_settings.run_configurations

        assert project_settings.render() == "{}"

    def test_created_entries_rendered_in_order(self, project_settings: ProjectSettings) -> None:
        def declare(container: Any) -> None:
            container.create("App", "application", lambda a: setattr(a, "main_class", "demo.Main"))
            container.create("Debug", Remote)

        project_settings.configure_run_configurations(declare)

        document = json.loads(project_settings.render())
        assert document["runConfigurations"] == [
            {"type": "application", "name": "App", "defaults": False, "mainClass": "demo.Main", "envs": {}},
            {
                "type": "remote",
                "name": "Debug",
                "defaults": False,
                "host": "localhost",
                "port": 5005,
                "transport": "SOCKET",
                "mode": "ATTACH",
            },
        ]

    def test_application_gets_owning_project(self, project_settings: ProjectSettings, root_project: Project) -> None:
        app = project_settings.run_configurations.create("App", "application")

        assert isinstance(app, Application)
        assert app.project is root_project

    def test_unknown_kind_rejected(self, project_settings: ProjectSettings) -> None:
        with pytest.raises(UnknownKindError, match="docker"):
            project_settings.run_configurations.create("x", "docker")
