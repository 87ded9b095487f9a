"""IDE artifacts: trees of directories, archives, files and module outputs.

Artifacts are rendered at the top level of the project document under
``artifacts``. File paths are resolved against the project directory and
rendered with '/' separators.
"""

from __future__ import annotations

from collections.abc import Callable
from pathlib import PurePath
from typing import TYPE_CHECKING, Any

from idea_ext.contracts.enums import ArtifactType
from idea_ext.core.canonical import forward_slashes
from idea_ext.settings.sections.base import module_ref

if TYPE_CHECKING:
    from idea_ext.host.containers import NamedContainer
    from idea_ext.host.project import Project


class RecursiveArtifact:
    """One node of an artifact tree.

    Container nodes (ARTIFACT, DIR, ARCHIVE) have a name and children.
    FILE nodes carry source files; module nodes carry a module name.
    """

    def __init__(self, project: Project, name: str | None, artifact_type: ArtifactType) -> None:
        self.project = project
        self.name = name
        self.type = artifact_type
        self.children: list[RecursiveArtifact] = []
        self.source_files: list[str] = []
        self.module_name: str | None = None

    def _add_child(self, child: RecursiveArtifact, action: Callable[[RecursiveArtifact], Any] | None) -> RecursiveArtifact:
        self.children.append(child)
        if action is not None:
            action(child)
        return child

    def directory(self, name: str, action: Callable[[RecursiveArtifact], Any] | None = None) -> RecursiveArtifact:
        return self._add_child(RecursiveArtifact(self.project, name, ArtifactType.DIR), action)

    def archive(self, name: str, action: Callable[[RecursiveArtifact], Any] | None = None) -> RecursiveArtifact:
        return self._add_child(RecursiveArtifact(self.project, name, ArtifactType.ARCHIVE), action)

    def file(self, *paths: str | PurePath) -> RecursiveArtifact:
        node = RecursiveArtifact(self.project, None, ArtifactType.FILE)
        node.source_files = [forward_slashes(self.project.file(p)) for p in paths]
        return self._add_child(node, None)

    def _module_node(self, artifact_type: ArtifactType, module: Project | str, source_set: str) -> RecursiveArtifact:
        node = RecursiveArtifact(self.project, None, artifact_type)
        node.module_name = module if isinstance(module, str) else module_ref(module, source_set)
        return self._add_child(node, None)

    def module_output(self, module: Project | str) -> RecursiveArtifact:
        return self._module_node(ArtifactType.MODULE_OUTPUT, module, "main")

    def module_test_output(self, module: Project | str) -> RecursiveArtifact:
        return self._module_node(ArtifactType.MODULE_TEST_OUTPUT, module, "test")

    def module_src(self, module: Project | str) -> RecursiveArtifact:
        return self._module_node(ArtifactType.MODULE_SRC, module, "main")

    def to_map(self) -> dict[str, Any]:
        result: dict[str, Any] = {"type": self.type.value}
        if self.name is not None:
            result["name"] = self.name
        if self.type is ArtifactType.FILE:
            result["sourceFiles"] = list(self.source_files)
        elif self.module_name is not None:
            result["moduleName"] = self.module_name
        else:
            result["children"] = [child.to_map() for child in self.children]
        return result


class IdeArtifacts:
    """Named top-level artifacts of a project."""

    def __init__(self, project: Project) -> None:
        self._artifacts: NamedContainer[RecursiveArtifact] = project.container(
            RecursiveArtifact,
            lambda name: RecursiveArtifact(project, name, ArtifactType.ARTIFACT),
        )

    @property
    def artifacts(self) -> NamedContainer[RecursiveArtifact]:
        return self._artifacts

    def artifact(self, name: str, action: Callable[[RecursiveArtifact], Any] | None = None) -> RecursiveArtifact:
        """Declare a top-level artifact, or configure the existing one."""
        return self._artifacts.maybe_create(name, action)

    def to_map(self) -> dict[str, Any]:
        return {"artifacts": [artifact.to_map() for artifact in self._artifacts]}
