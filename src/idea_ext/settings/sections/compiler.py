"""Java and Groovy compiler settings sections."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from pydantic import Field, PrivateAttr, field_validator

from idea_ext.contracts.errors import SectionConfigError
from idea_ext.core.canonical import forward_slashes
from idea_ext.settings.sections.base import SectionConfig, module_ref

if TYPE_CHECKING:
    from idea_ext.host.project import Project


class JavacConfiguration(SectionConfig):
    """javac-specific options.

    module_javac_additional_options is keyed by IDE module name (see module_ref()).
    """

    prefer_target_jdk_compiler: bool | None = None
    javac_additional_options: str | None = None
    module_javac_additional_options: dict[str, str] = Field(default_factory=dict)
    generate_debug_info: bool | None = None
    generate_deprecation_warnings: bool | None = None
    generate_no_warnings: bool | None = None


class IdeaCompilerConfiguration(SectionConfig):
    """Project-wide compiler settings (rendered under ``compiler``)."""

    resource_patterns: str | None = None
    process_heap_size: int | None = Field(default=None, ge=1)
    auto_show_first_error_in_editor: bool | None = None
    display_notification_popup: bool | None = None
    clear_output_directory: bool | None = None
    add_not_null_assertions: bool | None = None
    enable_automake: bool | None = None
    parallel_compilation: bool | None = None
    rebuild_module_on_dependency_change: bool | None = None
    additional_vm_options: str | None = None
    use_release_option: bool | None = None
    javac: JavacConfiguration | None = None

    _project: Any = PrivateAttr(default=None)

    def __init__(self, project: Project | None = None, /, **data: Any) -> None:
        super().__init__(**data)
        self._project = project

    def _javac_block(self) -> JavacConfiguration:
        if self.javac is None:
            self.javac = JavacConfiguration()
        return self.javac

    def configure_javac(self, action: Callable[[JavacConfiguration], Any]) -> JavacConfiguration:
        javac = self._javac_block()
        action(javac)
        return javac

    def module_javac_options(self, module: Project | str, options: str, source_set: str | None = None) -> None:
        """Set additional javac options for one module of the build.

        Args:
            module: Project, or its path (":app") resolved from this build's root
            options: Extra javac command-line options
            source_set: Optional source set, e.g. "test"

        Raises:
            SectionConfigError: If a module path does not resolve to a project
        """
        if isinstance(module, str):
            resolved = self._project.find_project(module) if self._project is not None else None
            if resolved is None:
                raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: unknown module '{module}'.")
            module = resolved
        self._javac_block().module_javac_additional_options[module_ref(module, source_set)] = options


class GroovyCompilerConfiguration(SectionConfig):
    """Groovy compiler settings (rendered under ``groovyCompiler``).

    Excluded paths are kept as given, with '/' separators.
    """

    heap_size: int | None = Field(default=None, ge=1)
    excludes: list[dict[str, Any]] = Field(default_factory=list)

    @field_validator("excludes")
    @classmethod
    def _validate_excludes(cls, v: list[dict[str, Any]]) -> list[dict[str, Any]]:
        for i, entry in enumerate(v):
            if "url" not in entry:
                raise ValueError(f"excludes[{i}] must have a 'url'")
        return v

    def exclude_file(self, path: str) -> None:
        self.excludes = [*self.excludes, {"url": forward_slashes(path), "isFile": True, "includeSubdirectories": False}]

    def exclude_dir(self, path: str, include_subdirectories: bool = True) -> None:
        self.excludes = [*self.excludes, {"url": forward_slashes(path), "isFile": False, "includeSubdirectories": include_subdirectories}]
