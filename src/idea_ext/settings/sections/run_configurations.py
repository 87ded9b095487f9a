"""Run configuration kinds.

Each kind declares a ``kind`` tag; the project settings' polymorphic
container registers one factory per tag. Every run configuration renders
its ``type``, ``name`` and ``defaults`` flag along with its own fields.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, ClassVar

from pydantic import Field

from idea_ext.contracts.enums import RemoteMode, RemoteTransport
from idea_ext.settings.sections.base import ProjectBoundEntry
from idea_ext.settings.sections.base import module_ref as ide_module_name

if TYPE_CHECKING:
    from idea_ext.host.project import Project


class RunConfiguration(ProjectBoundEntry):
    """Base of all run configuration kinds."""

    defaults: bool = False


class Application(RunConfiguration):
    """Runs a main class."""

    kind: ClassVar[str] = "application"
    requires_project: ClassVar[bool] = True

    main_class: str | None = None
    module_name: str | None = None
    working_directory: str | None = None
    jvm_args: str | None = None
    program_parameters: str | None = None
    envs: dict[str, str] = Field(default_factory=dict)
    include_provided_dependencies: bool | None = None

    def module_ref(self, module: Project | None = None, source_set: str = "main") -> None:
        """Point module_name at a project's source set (default: this configuration's project)."""
        self.module_name = ide_module_name(module if module is not None else self.project, source_set)


class JUnit(RunConfiguration):
    """Runs JUnit tests selected by class, method, package, pattern or category."""

    kind: ClassVar[str] = "junit"

    class_name: str | None = None
    method_name: str | None = None
    package_name: str | None = None
    pattern: str | None = None
    category: str | None = None
    repeat: str | None = None
    working_directory: str | None = None
    vm_parameters: str | None = None
    program_parameters: str | None = None
    module_name: str | None = None
    envs: dict[str, str] = Field(default_factory=dict)
    shorten_command_line: str | None = None


class Remote(RunConfiguration):
    """Attaches the debugger to a remote JVM."""

    kind: ClassVar[str] = "remote"

    host: str = "localhost"
    port: int = Field(default=5005, ge=1, le=65535)
    transport: RemoteTransport = RemoteTransport.SOCKET
    mode: RemoteMode = RemoteMode.ATTACH
    shared_memory_address: str | None = None


class TestNG(RunConfiguration):
    """Runs TestNG tests."""

    __test__ = False  # Not a pytest test class despite the name

    kind: ClassVar[str] = "testng"

    package_name: str | None = None
    class_name: str | None = None
    method: str | None = None
    group: str | None = None
    suite: str | None = None
    pattern: str | None = None
    working_directory: str | None = None
    vm_parameters: str | None = None
    program_parameters: str | None = None
    module_name: str | None = None
    envs: dict[str, str] = Field(default_factory=dict)
