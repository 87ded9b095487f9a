"""In-process host model: projects, tasks, extension and entry containers.

The settings core depends only on the shapes modelled here; a real host
integration provides objects with the same attributes.
"""

from idea_ext.host.containers import NamedContainer, PolymorphicContainer
from idea_ext.host.extensions import (
    LEGACY_SCHEMA_VERSION,
    MODERN_SCHEMA_VERSION,
    ExtensionAware,
    ExtensionContainer,
    ExtensionSchema,
    LegacyExtensionContainer,
    ModernExtensionContainer,
    extension_container_for,
    format_version,
    parse_version,
)
from idea_ext.host.idea import IDEA_EXTENSION_NAME, IdeaModel, IdeaModule, IdeaProject
from idea_ext.host.project import DEFAULT_API_VERSION, ObjectFactory, Project, Task

__all__ = [
    "DEFAULT_API_VERSION",
    "IDEA_EXTENSION_NAME",
    "LEGACY_SCHEMA_VERSION",
    "MODERN_SCHEMA_VERSION",
    "ExtensionAware",
    "ExtensionContainer",
    "ExtensionSchema",
    "IdeaModel",
    "IdeaModule",
    "IdeaProject",
    "LegacyExtensionContainer",
    "ModernExtensionContainer",
    "NamedContainer",
    "ObjectFactory",
    "PolymorphicContainer",
    "Project",
    "Task",
    "extension_container_for",
    "format_version",
    "parse_version",
]
