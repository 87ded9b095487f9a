"""Task triggers: build tasks the IDE runs at lifecycle phases.

Each phase holds an ordered, append-only list of task references. Only the
stable identifiers of a task are rendered: its path and the location of the
root project that owns it, with '/' separators on every OS. Whether a task
exists or can run is for the IDE to find out.
"""

from __future__ import annotations

from typing import Any

from idea_ext.contracts.enums import TriggerPhase
from idea_ext.contracts.protocols import ActionReference
from idea_ext.core.canonical import forward_slashes


class TaskTriggersConfig:
    """Mapping of lifecycle phase to registered tasks (``taskTriggersConfig``)."""

    def __init__(self) -> None:
        # Insertion-ordered by first registration of each phase
        self._phases: dict[TriggerPhase, list[ActionReference]] = {}

    def register(self, phase: TriggerPhase | str, *tasks: ActionReference) -> None:
        """Append tasks to a phase, preserving call order.

        Raises:
            ValueError: If phase is not a known lifecycle phase
        """
        key = TriggerPhase(phase)
        self._phases.setdefault(key, []).extend(tasks)

    def before_sync(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.BEFORE_SYNC, *tasks)

    def after_sync(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.AFTER_SYNC, *tasks)

    def before_build(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.BEFORE_BUILD, *tasks)

    def after_build(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.AFTER_BUILD, *tasks)

    def before_rebuild(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.BEFORE_REBUILD, *tasks)

    def after_rebuild(self, *tasks: ActionReference) -> None:
        self.register(TriggerPhase.AFTER_REBUILD, *tasks)

    def tasks_for(self, phase: TriggerPhase | str) -> list[ActionReference]:
        return list(self._phases.get(TriggerPhase(phase), []))

    def to_map(self) -> dict[str, Any]:
        result: dict[str, Any] = {}
        for phase, tasks in self._phases.items():
            if not tasks:
                continue
            result[phase.value] = [
                {
                    "taskPath": task.path,
                    "projectPath": forward_slashes(task.project.root_project.project_dir),
                }
                for task in tasks
            ]
        return result
