"""Extensible IDE settings: schema discovery, conversion, and the settings facades."""

from idea_ext.settings.base import ExtensibleSettings
from idea_ext.settings.conversion import (
    CapabilityFlags,
    ConversionResult,
    MapSequence,
    NotConvertible,
    SingleMap,
    capability_flags,
    convert,
)
from idea_ext.settings.module import ModuleSettings
from idea_ext.settings.project import ProjectSettings
from idea_ext.settings.schema import (
    ExtensionEntry,
    LegacySchemaSource,
    ModernSchemaSource,
    SchemaSource,
    UnavailableSchemaSource,
    read_schema,
    select_schema_source,
)

__all__ = [
    # Conversion
    "CapabilityFlags",
    "ConversionResult",
    "MapSequence",
    "NotConvertible",
    "SingleMap",
    "capability_flags",
    "convert",
    # Schema
    "ExtensionEntry",
    "LegacySchemaSource",
    "ModernSchemaSource",
    "SchemaSource",
    "UnavailableSchemaSource",
    "read_schema",
    "select_schema_source",
    # Settings
    "ExtensibleSettings",
    "ModuleSettings",
    "ProjectSettings",
]
