"""Build/run action delegation section."""

from idea_ext.contracts.enums import TestRunner
from idea_ext.settings.sections.base import SectionConfig


class ActionDelegationConfig(SectionConfig):
    """Whether the IDE delegates build/run and tests to the build tool."""

    delegate_build_run_to_gradle: bool = False
    test_runner: TestRunner = TestRunner.PLATFORM
