"""Structural contracts consumed by the settings core.

MapConvertible is the only obligation a settings section has towards this
package. It is runtime-checkable so the converter can test both declared
types (issubclass) and collection elements (isinstance) against it.
"""

from pathlib import PurePath
from typing import Any, Protocol, runtime_checkable


@runtime_checkable
class MapConvertible(Protocol):
    """Anything that can describe its state as a JSON-ready mapping."""

    def to_map(self) -> dict[str, Any]:
        """Return a mapping of string keys to serializable values."""
        ...


class RootProjectLike(Protocol):
    """Top-level project scope, identified by its on-disk location."""

    @property
    def project_dir(self) -> PurePath: ...


class OwningProjectLike(Protocol):
    """Project scope that owns a task."""

    @property
    def root_project(self) -> RootProjectLike: ...


class ActionReference(Protocol):
    """Build action the IDE can trigger, e.g. a host task.

    Only the stable identifiers are used: the action path and the
    location of the top-level project owning it.
    """

    @property
    def path(self) -> str: ...

    @property
    def project(self) -> OwningProjectLike: ...
