"""Tests for the task trigger registry."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import PurePath, PureWindowsPath

import pytest

from idea_ext.contracts.enums import TriggerPhase
from idea_ext.host.project import Project
from idea_ext.settings.sections import TaskTriggersConfig


@dataclass
class _Root:
    project_dir: PurePath


@dataclass
class _Owner:
    root_project: _Root


@dataclass
class _Action:
    """Anything with a path and an owning project can be triggered."""

    path: str
    project: _Owner


class TestTaskTriggers:
    def test_untouched_registry_renders_empty(self) -> None:
        assert TaskTriggersConfig().to_map() == {}

    def test_registrations_keep_call_order(self, root_project: Project) -> None:
        generate = root_project.task("generate")
        build = root_project.find_task(":app:build")
        triggers = TaskTriggersConfig()

        triggers.before_build(generate)
        triggers.before_build(build)  # type: ignore[arg-type]

        assert triggers.to_map() == {
            "beforeBuild": [
                {"taskPath": ":generate", "projectPath": "/work/demo"},
                {"taskPath": ":app:build", "projectPath": "/work/demo"},
            ]
        }

    def test_variadic_registration(self, root_project: Project) -> None:
        triggers = TaskTriggersConfig()
        first, second = root_project.task("a"), root_project.task("b")

        triggers.after_rebuild(first, second)

        assert triggers.tasks_for(TriggerPhase.AFTER_REBUILD) == [first, second]

    def test_each_phase_method_targets_its_phase(self, root_project: Project) -> None:
        task = root_project.task("generate")
        triggers = TaskTriggersConfig()

        triggers.before_sync(task)
        triggers.after_sync(task)
        triggers.before_build(task)
        triggers.after_build(task)
        triggers.before_rebuild(task)
        triggers.after_rebuild(task)

        assert list(triggers.to_map()) == [phase.value for phase in TriggerPhase]

    def test_only_phases_with_actions_rendered(self, root_project: Project) -> None:
        triggers = TaskTriggersConfig()
        triggers.after_sync(root_project.task("generate"))
        triggers.before_build()

        assert list(triggers.to_map()) == ["afterSync"]

    def test_subproject_task_uses_root_project_dir(self, root_project: Project) -> None:
        triggers = TaskTriggersConfig()
        triggers.after_build(root_project.find_task(":app:build"))  # type: ignore[arg-type]

        assert triggers.to_map()["afterBuild"][0]["projectPath"] == "/work/demo"

    def test_backslash_project_dir_rendered_with_forward_slashes(self) -> None:
        root = Project("demo", PureWindowsPath(r"C:\Users\dev\demo"))
        triggers = TaskTriggersConfig()

        triggers.before_sync(root.task("generate"))

        assert triggers.to_map() == {"beforeSync": [{"taskPath": ":generate", "projectPath": "C:/Users/dev/demo"}]}

    def test_any_action_reference_accepted(self) -> None:
        triggers = TaskTriggersConfig()

        triggers.after_sync(_Action(":external:task", _Owner(_Root(PureWindowsPath(r"D:\x")))))

        assert triggers.to_map() == {"afterSync": [{"taskPath": ":external:task", "projectPath": "D:/x"}]}

    def test_register_by_phase_name(self, root_project: Project) -> None:
        triggers = TaskTriggersConfig()

        triggers.register("afterBuild", root_project.task("generate"))

        assert list(triggers.to_map()) == ["afterBuild"]

    def test_unknown_phase_rejected(self, root_project: Project) -> None:
        with pytest.raises(ValueError):
            TaskTriggersConfig().register("duringBuild", root_project.task("generate"))
