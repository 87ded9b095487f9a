"""Base classes for built-in settings sections.

Sections are pydantic models, so values assigned by build scripts are
validated at assignment time instead of surfacing later as a broken IDE
import. They provide:
- Strict fields (unknown keys rejected)
- camelCase aliases matching the rendered document
- to_map() for the MapConvertible contract
- apply() for bulk configuration from a mapping with clear errors

Example usage:
    class DelegationConfig(SectionConfig):
        delegate_build_run_to_gradle: bool = False

    cfg = DelegationConfig()
    cfg.apply({"delegateBuildRunToGradle": True})
    cfg.to_map()  # {"delegateBuildRunToGradle": True}
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import TYPE_CHECKING, Any, ClassVar, Self

from pydantic import BaseModel, ConfigDict, PrivateAttr, ValidationError
from pydantic.alias_generators import to_camel

from idea_ext.contracts.errors import SectionConfigError
from idea_ext.core.canonical import forward_slashes

if TYPE_CHECKING:
    from pathlib import PurePath

    from idea_ext.host.project import Project


def module_ref(project: Project, source_set: str | None = None) -> str:
    """IDE module name for a project, optionally for one of its source sets.

    The IDE names modules after the root project followed by the subproject
    path segments, e.g. ``demo.app.core.main``.
    """
    segments = [project.root_project.name, *(s for s in project.path.split(":") if s)]
    if source_set:
        segments.append(source_set)
    return ".".join(segments)


class SectionConfig(BaseModel):
    """Base class for mutable, validated settings sections."""

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_map(self) -> dict[str, Any]:
        """Dump fields under their camelCase names, omitting unset optionals."""
        return self.model_dump(mode="json", by_alias=True, exclude_none=True)

    @classmethod
    def _field_name(cls, key: str) -> str | None:
        for name, field in cls.model_fields.items():
            if key == name or key == field.alias:
                return name
        return None

    def apply(self, values: Mapping[str, Any]) -> Self:
        """Assign fields from a mapping keyed by field name or camelCase alias.

        Raises:
            SectionConfigError: If a key is unknown or a value is invalid
        """
        if not isinstance(values, Mapping):
            raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: expected a mapping, got {type(values).__name__}.")
        for key, value in values.items():
            name = self._field_name(key)
            if name is None:
                raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: unknown setting '{key}'.")
            try:
                setattr(self, name, value)
            except ValidationError as e:
                raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: {e}") from e
        return self


class NamedSection(SectionConfig):
    """Section that lives in a named container; the name is rendered too."""

    name: str

    def __init__(self, name: str, /, **data: Any) -> None:
        super().__init__(name=name, **data)


class ProjectBoundEntry(NamedSection):
    """Named section that resolves paths or module names against its project.

    Subclasses declare ``kind`` (the tag their container registers a
    factory under) and ``requires_project``, which tells factories whether
    to pass the owning project to the constructor.
    """

    kind: ClassVar[str]
    requires_project: ClassVar[bool] = False

    _project: Any = PrivateAttr(default=None)

    def __init__(self, name: str, project: Project | None = None, /, **data: Any) -> None:
        super().__init__(name, **data)
        self._project = project

    @property
    def project(self) -> Project:
        if self._project is None:
            raise SectionConfigError(f"{type(self).__name__} '{self.name}' is not bound to a project")
        return self._project

    def resolve_path(self, path: str | PurePath) -> str:
        """Project-relative path resolved against the project dir, '/'-separated."""
        return forward_slashes(self.project.file(path))

    def to_map(self) -> dict[str, Any]:
        return {"type": self.kind, **super().to_map()}
