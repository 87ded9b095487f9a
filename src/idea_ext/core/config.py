"""
Declarative project descriptions and their loading.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Descriptions are frozen (immutable) after construction; build_project()
turns one into a host project tree with idea-ext settings applied.

Example YAML:
    project:
      name: demo
      apiVersion: "8.4"
      tasks: [generate, clean]
      settings:
        delegateActions:
          delegateBuildRunToGradle: true
          testRunner: GRADLE
        taskTriggers:
          afterSync: [":generate"]
        doNotDetectFrameworks: [web, android]
        runConfigurations:
          - name: App
            type: application
            mainClass: demo.Main
      modules:
        - name: app
          facets:
            - name: spring
              type: spring
              contexts:
                main: {file: src/main/resources/context.xml}
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

from idea_ext.contracts.enums import TriggerPhase
from idea_ext.contracts.errors import (
    DuplicateNameError,
    IdeaExtError,
    SectionConfigError,
    UnknownKindError,
)
from idea_ext.core.logging import get_logger
from idea_ext.host.extensions import parse_version
from idea_ext.host.project import DEFAULT_API_VERSION, Project, Task
from idea_ext.plugin import IdeaExtPlugin, module_settings, project_settings
from idea_ext.plugins.manager import PluginManager
from idea_ext.settings.module import ModuleSettings
from idea_ext.settings.project import ProjectSettings
from idea_ext.settings.sections import CodeStyleConfig, SpringFacet

logger = get_logger(__name__)

_DESCRIPTION_CONFIG = ConfigDict(
    frozen=True,
    extra="forbid",
    alias_generator=to_camel,
    populate_by_name=True,
)


class ProjectDescriptionError(IdeaExtError):
    """Raised when a project description cannot be applied to the settings."""


class EntryDescription(BaseModel):
    """A named polymorphic entry (run configuration or facet).

    Besides ``name`` and ``type`` it carries the entry's own settings as
    extra keys, which are validated by the entry class itself.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    name: str = Field(min_length=1)
    type: str = Field(min_length=1)

    def options(self) -> dict[str, Any]:
        return dict(self.model_extra or {})


class ProjectSettingsDescription(BaseModel):
    """Project-level settings blocks, one key per built-in section."""

    model_config = _DESCRIPTION_CONFIG

    compiler: dict[str, Any] | None = None
    groovy_compiler: dict[str, Any] | None = None
    code_style: dict[str, Any] | None = None
    inspections: dict[str, dict[str, Any]] | None = None
    copyright: dict[str, Any] | None = None
    delegate_actions: dict[str, Any] | None = None
    task_triggers: dict[TriggerPhase, list[str]] | None = None
    do_not_detect_frameworks: list[str] = Field(default_factory=list)
    run_configurations: list[EntryDescription] = Field(default_factory=list)


class ModuleDescription(BaseModel):
    """A subproject: its tasks, facets, and nested subprojects."""

    model_config = _DESCRIPTION_CONFIG

    name: str = Field(min_length=1)
    dir: str | None = None
    tasks: list[str] = Field(default_factory=list)
    facets: list[EntryDescription] = Field(default_factory=list)
    modules: list[ModuleDescription] = Field(default_factory=list)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        if ":" in v:
            raise ValueError(f"project name '{v}' must not contain ':'")
        return v


class ProjectDescription(ModuleDescription):
    """Root project of a build, plus its project-level settings."""

    api_version: str = DEFAULT_API_VERSION
    settings: ProjectSettingsDescription = Field(default_factory=ProjectSettingsDescription)

    @field_validator("api_version", mode="before")
    @classmethod
    def validate_api_version(cls, v: Any) -> str:
        # YAML reads 8.4 as a float
        text = str(v)
        parse_version(text)
        return text


def load_description(config_path: Path) -> ProjectDescription:
    """Load a project description from YAML with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (IDEA_EXT_*) - highest priority
    2. Description file
    3. Defaults from Pydantic schema - lowest priority

    Environment variable format: IDEA_EXT_PROJECT__apiVersion for nested keys.

    Args:
        config_path: Path to YAML description file

    Returns:
        Validated ProjectDescription instance

    Raises:
        ValidationError: If the description fails Pydantic validation
        FileNotFoundError: If the file doesn't exist
        ProjectDescriptionError: If the file has no top-level ``project`` key
    """
    from dynaconf import Dynaconf

    # Dynaconf silently accepts missing files
    if not config_path.exists():
        raise FileNotFoundError(f"Description file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="IDEA_EXT",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
        merge_enabled=True,
    )

    # Dynaconf returns uppercase top-level keys and adds its own
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    if "project" not in raw_config:
        raise ProjectDescriptionError(f"{config_path}: missing top-level 'project' key")

    return ProjectDescription.model_validate(raw_config["project"])


def _resolve_task(root: Project, path: str) -> Task:
    task = root.find_task(path)
    if task is None:
        raise ProjectDescriptionError(f"Task '{path}' is not declared by any project")
    return task


def _configure_code_style(style: CodeStyleConfig, values: dict[str, Any]) -> None:
    remaining = dict(values)
    languages = remaining.pop("languages", None) or {}
    style.apply(remaining)
    for language, language_values in languages.items():
        style.language(language).apply(language_values)


def _configure_project(settings: ProjectSettings, block: ProjectSettingsDescription, root: Project) -> None:
    if block.compiler is not None:
        settings.compiler.apply(block.compiler)
    if block.groovy_compiler is not None:
        settings.groovy_compiler.apply(block.groovy_compiler)
    if block.code_style is not None:
        _configure_code_style(settings.code_style, block.code_style)
    if block.inspections is not None:
        for name, values in block.inspections.items():
            settings.inspections.maybe_create(name).apply(values)
    if block.copyright is not None:
        settings.copyright.apply(block.copyright)
    if block.delegate_actions is not None:
        settings.delegate_actions.apply(block.delegate_actions)
    if block.task_triggers is not None:
        for phase, paths in block.task_triggers.items():
            settings.task_triggers.register(phase, *(_resolve_task(root, path) for path in paths))
    if block.do_not_detect_frameworks:
        settings.do_not_detect_frameworks(*block.do_not_detect_frameworks)
    for entry in block.run_configurations:
        settings.run_configurations.create(entry.name, entry.type).apply(entry.options())


def _configure_module(settings: ModuleSettings, block: ModuleDescription) -> None:
    for entry in block.facets:
        options = entry.options()
        contexts = options.pop("contexts", None) or {}
        facet = settings.facets.create(entry.name, entry.type)
        facet.apply(options)
        if not contexts:
            continue
        if not isinstance(facet, SpringFacet):
            raise ProjectDescriptionError(f"Facet '{entry.name}' of type '{entry.type}' does not support contexts")
        for context_name, context_values in contexts.items():
            facet.context(context_name).apply(context_values)


def _add_modules(parent: Project, block: ModuleDescription) -> list[tuple[Project, ModuleDescription]]:
    pairs: list[tuple[Project, ModuleDescription]] = []
    for task_name in block.tasks:
        parent.task(task_name)
    for child_block in block.modules:
        child = parent.child(child_block.name, child_block.dir)
        pairs.append((child, child_block))
        pairs.extend(_add_modules(child, child_block))
    return pairs


def build_project(
    description: ProjectDescription,
    base_dir: Path,
    manager: PluginManager | None = None,
) -> Project:
    """Create the host project tree for a description and configure its settings.

    Args:
        description: Validated project description
        base_dir: Directory that relative project directories resolve against
        manager: Plugin manager supplying kinds and collaborator hooks

    Returns:
        Root project with idea-ext settings applied to every project

    Raises:
        ProjectDescriptionError: If a settings block cannot be applied
    """
    root = Project(
        description.name,
        base_dir / (description.dir or "."),
        api_version=description.api_version,
    )
    modules = [(root, description), *_add_modules(root, description)]

    plugin = IdeaExtPlugin(manager)
    for project, _ in modules:
        plugin.apply(project)

    try:
        _configure_project(project_settings(root), description.settings, root)
        for project, block in modules:
            _configure_module(module_settings(project), block)
    except (SectionConfigError, UnknownKindError, DuplicateNameError) as e:
        raise ProjectDescriptionError(str(e)) from e

    logger.debug("project_built", project=root.name, modules=len(modules))
    return root
