"""Project-level IDE settings.

Each built-in section is created on first access and the same instance is
returned afterwards. Only sections that were accessed appear in the
rendered document, so an untouched settings object renders as ``{}``.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from idea_ext.plugins.manager import PluginManager, default_plugin_manager
from idea_ext.settings.base import ExtensibleSettings, entry_factory
from idea_ext.settings.sections import (
    ActionDelegationConfig,
    CodeStyleConfig,
    CopyrightConfiguration,
    FrameworkDetectionExclusionSettings,
    GroovyCompilerConfiguration,
    IdeaCompilerConfiguration,
    IdeArtifacts,
    Inspection,
    RunConfiguration,
    TaskTriggersConfig,
)

if TYPE_CHECKING:
    from idea_ext.host.containers import NamedContainer, PolymorphicContainer
    from idea_ext.host.project import Project


class ProjectSettings(ExtensibleSettings):
    """Settings rendered into the IDE's project-level import document."""

    def __init__(self, project: Project, manager: PluginManager | None = None) -> None:
        super().__init__(project)
        plugins = manager if manager is not None else default_plugin_manager()

        run_configurations: PolymorphicContainer[RunConfiguration] = project.polymorphic_container(RunConfiguration)
        for kind in plugins.get_run_configurations():
            run_configurations.register_factory(kind, entry_factory(project, kind))
        self._run_configurations = run_configurations

        self._compiler: IdeaCompilerConfiguration | None = None
        self._groovy_compiler: GroovyCompilerConfiguration | None = None
        self._code_style: CodeStyleConfig | None = None
        self._inspections: NamedContainer[Inspection] | None = None
        self._copyright: CopyrightConfiguration | None = None
        self._detect_exclusions: FrameworkDetectionExclusionSettings | None = None
        self._task_triggers: TaskTriggersConfig | None = None
        self._delegate_actions: ActionDelegationConfig | None = None
        self._artifacts: IdeArtifacts | None = None

    # === Sections ===

    @property
    def delegate_actions(self) -> ActionDelegationConfig:
        if self._delegate_actions is None:
            self._delegate_actions = self._materialized("actionDelegationConfig", self._project.objects.new_instance(ActionDelegationConfig))
        return self._delegate_actions

    def configure_delegate_actions(self, action: Callable[[ActionDelegationConfig], Any]) -> ActionDelegationConfig:
        action(self.delegate_actions)
        return self.delegate_actions

    @property
    def task_triggers(self) -> TaskTriggersConfig:
        if self._task_triggers is None:
            self._task_triggers = self._materialized("taskTriggersConfig", self._project.objects.new_instance(TaskTriggersConfig))
        return self._task_triggers

    def configure_task_triggers(self, action: Callable[[TaskTriggersConfig], Any]) -> TaskTriggersConfig:
        action(self.task_triggers)
        return self.task_triggers

    @property
    def compiler(self) -> IdeaCompilerConfiguration:
        if self._compiler is None:
            self._compiler = self._materialized("compiler", self._project.objects.new_instance(IdeaCompilerConfiguration, self._project))
        return self._compiler

    def configure_compiler(self, action: Callable[[IdeaCompilerConfiguration], Any]) -> IdeaCompilerConfiguration:
        action(self.compiler)
        return self.compiler

    @property
    def groovy_compiler(self) -> GroovyCompilerConfiguration:
        if self._groovy_compiler is None:
            self._groovy_compiler = self._materialized("groovyCompiler", self._project.objects.new_instance(GroovyCompilerConfiguration))
        return self._groovy_compiler

    def configure_groovy_compiler(self, action: Callable[[GroovyCompilerConfiguration], Any]) -> GroovyCompilerConfiguration:
        action(self.groovy_compiler)
        return self.groovy_compiler

    @property
    def code_style(self) -> CodeStyleConfig:
        if self._code_style is None:
            self._code_style = self._materialized("codeStyle", self._project.objects.new_instance(CodeStyleConfig))
        return self._code_style

    def configure_code_style(self, action: Callable[[CodeStyleConfig], Any]) -> CodeStyleConfig:
        action(self.code_style)
        return self.code_style

    @property
    def inspections(self) -> NamedContainer[Inspection]:
        if self._inspections is None:
            self._inspections = self._materialized("inspections", self._project.container(Inspection))
        return self._inspections

    def configure_inspections(self, action: Callable[[NamedContainer[Inspection]], Any]) -> NamedContainer[Inspection]:
        action(self.inspections)
        return self.inspections

    @property
    def copyright(self) -> CopyrightConfiguration:
        if self._copyright is None:
            self._copyright = self._materialized("copyright", self._project.objects.new_instance(CopyrightConfiguration, self._project))
        return self._copyright

    def configure_copyright(self, action: Callable[[CopyrightConfiguration], Any]) -> CopyrightConfiguration:
        action(self.copyright)
        return self.copyright

    @property
    def run_configurations(self) -> PolymorphicContainer[RunConfiguration]:
        return self._run_configurations

    def configure_run_configurations(
        self, action: Callable[[PolymorphicContainer[RunConfiguration]], Any]
    ) -> PolymorphicContainer[RunConfiguration]:
        action(self._run_configurations)
        return self._run_configurations

    def do_not_detect_frameworks(self, *ids: str) -> None:
        """Exclude framework ids from IDE auto-detection. Repeated calls accumulate.

        Raises:
            SectionConfigError: If an id is not a string; earlier ids are kept
        """
        if self._detect_exclusions is None:
            self._detect_exclusions = self._materialized(
                "frameworkDetectionExcludes", self._project.objects.new_instance(FrameworkDetectionExclusionSettings)
            )
        self._detect_exclusions.apply({"excludes": [*self._detect_exclusions.excludes, *ids]})

    @property
    def framework_detection_excludes(self) -> list[str]:
        if self._detect_exclusions is None:
            return []
        return list(self._detect_exclusions.excludes)

    @property
    def ide_artifacts(self) -> IdeArtifacts:
        if self._artifacts is None:
            self._artifacts = self._materialized("artifacts", self._project.objects.new_instance(IdeArtifacts, self._project))
        return self._artifacts

    def configure_ide_artifacts(self, action: Callable[[IdeArtifacts], Any]) -> IdeArtifacts:
        action(self.ide_artifacts)
        return self.ide_artifacts

    # === Rendering ===

    def to_map(self) -> dict[str, Any]:
        result = self.collect_extensions()

        if self._compiler is not None:
            result["compiler"] = self._compiler.to_map()

        if self._groovy_compiler is not None:
            result["groovyCompiler"] = self._groovy_compiler.to_map()

        if self._code_style is not None:
            result["codeStyle"] = self._code_style.to_map()

        if self._inspections is not None:
            result["inspections"] = [inspection.to_map() for inspection in self._inspections]

        if self._copyright is not None:
            result["copyright"] = self._copyright.to_map()

        if not self._run_configurations.is_empty():
            result["runConfigurations"] = [run_configuration.to_map() for run_configuration in self._run_configurations]

        if self._detect_exclusions is not None:
            result["frameworkDetectionExcludes"] = list(self._detect_exclusions.excludes)

        if self._task_triggers is not None:
            result["taskTriggersConfig"] = self._task_triggers.to_map()

        if self._delegate_actions is not None:
            result["actionDelegationConfig"] = self._delegate_actions.to_map()

        if self._artifacts is not None:
            result.update(self._artifacts.to_map())

        return result
