"""Framework detection exclusions."""

from pydantic import Field

from idea_ext.settings.sections.base import SectionConfig


class FrameworkDetectionExclusionSettings(SectionConfig):
    """Framework ids the IDE must not auto-detect. Insertion order, append-only."""

    excludes: list[str] = Field(default_factory=list)
