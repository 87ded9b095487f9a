"""Minimal host project model.

A Project is a node in a tree of build scopes. The root project's directory
identifies the whole build; task paths and project paths are ':'-separated
from the root (":" is the root itself, ":app:build" is task "build" in
subproject "app").

project_dir may be any PurePath flavour, so a Windows layout can be
modelled on any OS.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from pathlib import Path, PurePath
from typing import Any, TypeVar

from idea_ext.contracts.errors import DuplicateNameError
from idea_ext.core.logging import get_logger
from idea_ext.host.containers import NamedContainer, PolymorphicContainer
from idea_ext.host.extensions import (
    ExtensionContainer,
    HostVersion,
    extension_container_for,
    parse_version,
)

T = TypeVar("T")

DEFAULT_API_VERSION = "8.4"

logger = get_logger(__name__)


class ObjectFactory:
    """Instantiates managed objects for a project.

    new_instance() is the single construction seam used by settings facades,
    so that hosts can substitute their own injection mechanism.
    """

    def __init__(self, api_version: HostVersion) -> None:
        self._api_version = api_version

    def new_instance(self, cls: Callable[..., T], *args: Any, **kwargs: Any) -> T:
        logger.debug("object_created", type=getattr(cls, "__name__", repr(cls)))
        return cls(*args, **kwargs)

    def new_extension_container(self) -> ExtensionContainer:
        return extension_container_for(self._api_version)


class Task:
    """A named build action owned by a project."""

    def __init__(self, name: str, project: Project) -> None:
        self.name = name
        self.project = project

    @property
    def path(self) -> str:
        if self.project.parent is None:
            return f":{self.name}"
        return f"{self.project.path}:{self.name}"

    def __repr__(self) -> str:
        return f"Task({self.path!r})"


class Project:
    """A build scope: the root project or one of its subprojects."""

    def __init__(
        self,
        name: str,
        project_dir: str | PurePath,
        *,
        parent: Project | None = None,
        api_version: str | HostVersion = DEFAULT_API_VERSION,
    ) -> None:
        self.name = name
        self.project_dir: PurePath = Path(project_dir) if isinstance(project_dir, str) else project_dir
        self.parent = parent
        self.api_version: HostVersion = parse_version(api_version)
        self.objects = ObjectFactory(self.api_version)
        self.extensions = self.objects.new_extension_container()
        self._children: dict[str, Project] = {}
        self._tasks: dict[str, Task] = {}

    # === Tree ===

    @property
    def root_project(self) -> Project:
        project = self
        while project.parent is not None:
            project = project.parent
        return project

    @property
    def path(self) -> str:
        if self.parent is None:
            return ":"
        if self.parent.parent is None:
            return f":{self.name}"
        return f"{self.parent.path}:{self.name}"

    def child(self, name: str, project_dir: str | PurePath | None = None) -> Project:
        """Create a subproject. Its directory defaults to <project_dir>/<name>.

        Raises:
            DuplicateNameError: If a subproject with this name exists
        """
        if name in self._children:
            raise DuplicateNameError(f"Project '{self.path}' already has a subproject named '{name}'")
        directory = self.file(project_dir if project_dir is not None else name)
        child = Project(name, directory, parent=self, api_version=self.api_version)
        self._children[name] = child
        return child

    @property
    def children(self) -> list[Project]:
        return list(self._children.values())

    def all_projects(self) -> Iterator[Project]:
        """This project followed by all descendants, depth first."""
        yield self
        for child in self._children.values():
            yield from child.all_projects()

    def find_project(self, path: str) -> Project | None:
        """Resolve an absolute project path such as ":app:core"."""
        project: Project | None = self.root_project
        for segment in (s for s in path.split(":") if s):
            project = project._children.get(segment) if project is not None else None
        return project

    # === Tasks ===

    def task(self, name: str) -> Task:
        """Register a task, or return the existing one with this name."""
        existing = self._tasks.get(name)
        if existing is not None:
            return existing
        task = Task(name, self)
        self._tasks[name] = task
        return task

    def find_task(self, path: str) -> Task | None:
        """Resolve a task by name (relative) or by absolute path (":app:build")."""
        if not path.startswith(":"):
            return self._tasks.get(path)
        project_path, _, task_name = path.rpartition(":")
        project = self.find_project(project_path)
        return project._tasks.get(task_name) if project is not None else None

    # === Files and containers ===

    def file(self, path: str | PurePath) -> PurePath:
        """Resolve a path against this project's directory."""
        candidate = type(self.project_dir)(path)
        if candidate.is_absolute():
            return candidate
        return self.project_dir / candidate

    def container(self, entry_type: type[T], factory: Callable[[str], T] | None = None) -> NamedContainer[T]:
        return NamedContainer(entry_type, factory)

    def polymorphic_container(self, base_type: type[T]) -> PolymorphicContainer[T]:
        return PolymorphicContainer(base_type)

    def __repr__(self) -> str:
        return f"Project({self.path!r}, dir={str(self.project_dir)!r})"
