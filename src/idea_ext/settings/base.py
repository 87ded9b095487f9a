"""Extensible settings: the shared base of project and module settings.

Collaborators attach extensions to ``settings.extensions``; at render time
every extension whose declared type converts to a map (or to a list of
maps) becomes a top-level key of the document, under its extension name.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any, TypeVar

from idea_ext.core.canonical import to_json
from idea_ext.core.logging import get_logger
from idea_ext.host.extensions import ExtensionAware
from idea_ext.settings.conversion import NotConvertible, convert
from idea_ext.settings.schema import read_schema, select_schema_source

if TYPE_CHECKING:
    from idea_ext.host.project import Project

S = TypeVar("S")

logger = get_logger(__name__)


def entry_factory(project: Project, entry_type: Any) -> Callable[[str], Any]:
    """Factory creating named entries of entry_type through the project's object factory.

    Kinds with ``requires_project`` receive the owning project as second argument.
    """

    def factory(name: str) -> Any:
        if entry_type.requires_project:
            return project.objects.new_instance(entry_type, name, project)
        return project.objects.new_instance(entry_type, name)

    return factory


class ExtensibleSettings(ExtensionAware):
    """Settings object that collaborators can attach named extensions to.

    The schema source for the extension container is selected once, here;
    a host without any schema accessor only fails when rendering.
    """

    def __init__(self, project: Project) -> None:
        super().__init__(project.objects.new_extension_container())
        self._project = project
        self._schema_source = select_schema_source(self.extensions)

    @property
    def project(self) -> Project:
        return self._project

    def collect_extensions(self) -> dict[str, Any]:
        """Convert every attached extension that has a map representation.

        Raises:
            SchemaUnavailableError: If the host exposes no extension schema
        """
        result: dict[str, Any] = {}
        # Only declared-type mismatches are skipped. An error raised inside a
        # collaborator's to_map() is a bug in that collaborator and aborts the render.
        for entry in read_schema(self.extensions, self._schema_source):
            converted = convert(entry.declared_type, entry.value)
            if isinstance(converted, NotConvertible):
                logger.debug("extension_skipped", extension=entry.name, declared_type=repr(entry.declared_type))
                continue
            result[entry.name] = converted.payload()
        return result

    def _materialized(self, key: str, section: S) -> S:
        logger.debug("section_materialized", section=key, project=self._project.path)
        return section

    def to_map(self) -> dict[str, Any]:
        return self.collect_extensions()

    def render(self) -> str:
        """Render the current state as a JSON document.

        Never cached: each call reflects mutations made since the last one.

        Raises:
            SchemaUnavailableError: If the host exposes no extension schema
        """
        document = self.to_map()
        logger.debug("settings_rendered", settings=type(self).__name__, project=self._project.path, keys=sorted(document))
        return to_json(document)
