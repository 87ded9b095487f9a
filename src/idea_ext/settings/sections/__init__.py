"""Built-in settings sections.

Every section implements MapConvertible. Named-entry sections live in host
containers; run configurations and facets declare a ``kind`` tag used by
polymorphic containers.
"""

from idea_ext.settings.sections.artifacts import IdeArtifacts, RecursiveArtifact
from idea_ext.settings.sections.base import (
    NamedSection,
    ProjectBoundEntry,
    SectionConfig,
    module_ref,
)
from idea_ext.settings.sections.code_style import CodeStyleConfig, LanguageCodeStyle
from idea_ext.settings.sections.compiler import (
    GroovyCompilerConfiguration,
    IdeaCompilerConfiguration,
    JavacConfiguration,
)
from idea_ext.settings.sections.copyright import CopyrightConfiguration, CopyrightProfile
from idea_ext.settings.sections.delegation import ActionDelegationConfig
from idea_ext.settings.sections.facets import Facet, SpringContext, SpringFacet
from idea_ext.settings.sections.frameworks import FrameworkDetectionExclusionSettings
from idea_ext.settings.sections.inspections import Inspection
from idea_ext.settings.sections.run_configurations import (
    Application,
    JUnit,
    Remote,
    RunConfiguration,
    TestNG,
)
from idea_ext.settings.sections.triggers import TaskTriggersConfig

__all__ = [
    # Base classes
    "NamedSection",
    "ProjectBoundEntry",
    "SectionConfig",
    "module_ref",
    # Project sections
    "ActionDelegationConfig",
    "CodeStyleConfig",
    "CopyrightConfiguration",
    "CopyrightProfile",
    "FrameworkDetectionExclusionSettings",
    "GroovyCompilerConfiguration",
    "IdeArtifacts",
    "IdeaCompilerConfiguration",
    "Inspection",
    "JavacConfiguration",
    "LanguageCodeStyle",
    "RecursiveArtifact",
    "TaskTriggersConfig",
    # Run configurations
    "Application",
    "JUnit",
    "Remote",
    "RunConfiguration",
    "TestNG",
    # Facets
    "Facet",
    "SpringContext",
    "SpringFacet",
]
