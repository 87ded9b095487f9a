"""Extension schema discovery across host API versions.

Hosts expose the (name, declared type) pairs of attached extensions in two
incompatible shapes. A SchemaSource hides which one is in use; the right
source is chosen once per container by probing for the accessor, so
reading the schema never branches on the host version.

Selection:
1. ``extensions_schema`` present  -> ModernSchemaSource
2. ``get_schema`` present         -> LegacySchemaSource
3. neither                        -> UnavailableSchemaSource (raises on read)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Protocol

from idea_ext.contracts.errors import SchemaUnavailableError
from idea_ext.core.logging import get_logger
from idea_ext.host.extensions import LEGACY_SCHEMA_VERSION, format_version

logger = get_logger(__name__)

_MODERN_ACCESSOR = "extensions_schema"
_LEGACY_ACCESSOR = "get_schema"


@dataclass(frozen=True)
class ExtensionEntry:
    """One attached extension: its name, declared type, and current value."""

    name: str
    declared_type: Any
    value: Any


class SchemaSource(Protocol):
    """Enumerates the (name, declared type) pairs of a container."""

    def read(self) -> list[tuple[str, Any]]: ...


class ModernSchemaSource:
    """Reads the ``extensions_schema`` property (host API 4.5+)."""

    def __init__(self, container: Any) -> None:
        self._container = container

    def read(self) -> list[tuple[str, Any]]:
        return [(schema.name, schema.public_type) for schema in self._container.extensions_schema]


class LegacySchemaSource:
    """Calls the ``get_schema()`` accessor of older hosts (4.2 to 4.4).

    The accessor is looked up by name: it is not part of the modern API
    that the rest of this package is written against.
    """

    def __init__(self, container: Any) -> None:
        self._accessor = getattr(container, _LEGACY_ACCESSOR)

    def read(self) -> list[tuple[str, Any]]:
        schema: dict[str, Any] = self._accessor()
        return list(schema.items())


class UnavailableSchemaSource:
    """Stands in for hosts without any schema accessor."""

    def __init__(self, container: Any) -> None:
        self._container_type = type(container).__name__

    def read(self) -> list[tuple[str, Any]]:
        logger.debug("schema_unavailable", container=self._container_type)
        raise SchemaUnavailableError(format_version(LEGACY_SCHEMA_VERSION))


def select_schema_source(container: Any) -> SchemaSource:
    """Pick the schema source for a container by probing its accessors."""
    source: SchemaSource
    if hasattr(container, _MODERN_ACCESSOR):
        source = ModernSchemaSource(container)
    elif callable(getattr(container, _LEGACY_ACCESSOR, None)):
        source = LegacySchemaSource(container)
    else:
        source = UnavailableSchemaSource(container)
    logger.debug("schema_source_selected", source=type(source).__name__, container=type(container).__name__)
    return source


def read_schema(container: Any, source: SchemaSource | None = None) -> list[ExtensionEntry]:
    """Enumerate the extensions attached to a container.

    Args:
        container: Extension container (anything with find_by_name())
        source: Previously selected source; probed now if not given

    Returns:
        Entries in attachment order

    Raises:
        SchemaUnavailableError: If the container has no schema accessor
    """
    if source is None:
        source = select_schema_source(container)
    return [
        ExtensionEntry(name=name, declared_type=declared_type, value=container.find_by_name(name))
        for name, declared_type in source.read()
    ]
