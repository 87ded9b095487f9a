"""Shared contracts: capability protocols, enums, and errors."""

from idea_ext.contracts.enums import (
    ArtifactType,
    RemoteMode,
    RemoteTransport,
    TestRunner,
    TriggerPhase,
)
from idea_ext.contracts.errors import (
    DuplicateNameError,
    IdeaExtError,
    SchemaUnavailableError,
    SectionConfigError,
    UnknownKindError,
)
from idea_ext.contracts.protocols import ActionReference, MapConvertible

__all__ = [  # Grouped by category for readability
    # Protocols
    "ActionReference",
    "MapConvertible",
    # Enums
    "ArtifactType",
    "RemoteMode",
    "RemoteTransport",
    "TestRunner",
    "TriggerPhase",
    # Errors
    "DuplicateNameError",
    "IdeaExtError",
    "SchemaUnavailableError",
    "SectionConfigError",
    "UnknownKindError",
]
