"""Module facet kinds."""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from pydantic import PrivateAttr

from idea_ext.settings.sections.base import NamedSection, ProjectBoundEntry

if TYPE_CHECKING:
    from idea_ext.host.containers import NamedContainer
    from idea_ext.host.project import Project


class Facet(ProjectBoundEntry):
    """Base of all facet kinds."""


class SpringContext(NamedSection):
    """A Spring application context file, optionally inheriting from a parent context."""

    file: str | None = None
    parent: str | None = None


class SpringFacet(Facet):
    """Spring facet: a set of named application contexts.

    Context files are resolved against the module's project directory.
    """

    kind: ClassVar[str] = "spring"
    requires_project: ClassVar[bool] = True

    _contexts: Any = PrivateAttr(default=None)

    def __init__(self, name: str, project: Project | None = None, /, **data: Any) -> None:
        super().__init__(name, project, **data)
        self._contexts = self.project.container(SpringContext)

    @property
    def contexts(self) -> NamedContainer[SpringContext]:
        contexts: NamedContainer[SpringContext] = self._contexts
        return contexts

    def context(self, name: str, action: Callable[[SpringContext], Any] | None = None) -> SpringContext:
        return self.contexts.maybe_create(name, action)

    def to_map(self) -> dict[str, Any]:
        result = super().to_map()
        contexts = []
        for context in self.contexts:
            entry = context.to_map()
            if context.file is not None:
                entry["file"] = self.resolve_path(context.file)
            contexts.append(entry)
        result["contexts"] = contexts
        return result
