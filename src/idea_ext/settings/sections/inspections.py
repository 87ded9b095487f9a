"""Inspection profile entries."""

from typing import Any

from pydantic import Field

from idea_ext.settings.sections.base import NamedSection


class Inspection(NamedSection):
    """One inspection, identified by the IDE's inspection short name."""

    enabled: bool | None = None
    severity: str | None = None
    options: dict[str, Any] = Field(default_factory=dict)
