"""Copyright profiles section."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from typing import TYPE_CHECKING, Any, Self

from pydantic import Field, PrivateAttr

from idea_ext.contracts.errors import SectionConfigError
from idea_ext.settings.sections.base import NamedSection, SectionConfig

if TYPE_CHECKING:
    from idea_ext.host.containers import NamedContainer
    from idea_ext.host.project import Project


class CopyrightProfile(NamedSection):
    """A named copyright notice template."""

    notice: str | None = None
    keyword: str | None = None
    allow_replace_regexp: str | None = None


class CopyrightConfiguration(SectionConfig):
    """Copyright settings (rendered under ``copyright``).

    use_default names the profile applied to files outside any scope;
    scopes map IDE scope names to profile names.
    """

    use_default: str | None = None
    scopes: dict[str, str] = Field(default_factory=dict)

    _profiles: Any = PrivateAttr(default=None)

    def __init__(self, project: Project, /, **data: Any) -> None:
        super().__init__(**data)
        self._profiles = project.container(CopyrightProfile)

    @property
    def profiles(self) -> NamedContainer[CopyrightProfile]:
        profiles: NamedContainer[CopyrightProfile] = self._profiles
        return profiles

    def configure_profiles(self, action: Callable[[NamedContainer[CopyrightProfile]], Any]) -> None:
        action(self.profiles)

    def apply(self, values: Mapping[str, Any]) -> Self:
        """Like SectionConfig.apply(), plus ``profiles: {name: {...}}``."""
        if not isinstance(values, Mapping):
            raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: expected a mapping, got {type(values).__name__}.")
        remaining = dict(values)
        profiles = remaining.pop("profiles", None)
        super().apply(remaining)
        if profiles is not None:
            if not isinstance(profiles, Mapping):
                raise SectionConfigError(f"Invalid configuration for {type(self).__name__}: 'profiles' must be a mapping of name to settings.")
            for name, profile_values in profiles.items():
                self.profiles.maybe_create(name).apply(profile_values)
        return self

    def to_map(self) -> dict[str, Any]:
        result = super().to_map()
        result["profiles"] = {profile.name: profile.to_map() for profile in self.profiles}
        return result
