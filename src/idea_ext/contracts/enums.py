"""Phases, modes, and kinds shared across the settings sections.

Values are the literal strings the IDE expects in the rendered document,
so renaming a member is a wire-format change.
"""

from enum import StrEnum


class TriggerPhase(StrEnum):
    """Lifecycle point at which the IDE runs registered build tasks."""

    BEFORE_SYNC = "beforeSync"
    AFTER_SYNC = "afterSync"
    BEFORE_BUILD = "beforeBuild"
    AFTER_BUILD = "afterBuild"
    BEFORE_REBUILD = "beforeRebuild"
    AFTER_REBUILD = "afterRebuild"


class TestRunner(StrEnum):
    """Which runner the IDE uses for tests when actions are delegated.

    Values:
        PLATFORM: IDE's own test runner
        GRADLE: Delegate test runs to the build tool
        CHOOSE_PER_TEST: Ask for each test run
    """

    __test__ = False  # Not a pytest test class despite the name

    PLATFORM = "PLATFORM"
    GRADLE = "GRADLE"
    CHOOSE_PER_TEST = "CHOOSE_PER_TEST"


class ArtifactType(StrEnum):
    """Node kind inside an IDE artifact tree."""

    ARTIFACT = "ARTIFACT"
    DIR = "DIR"
    ARCHIVE = "ARCHIVE"
    FILE = "FILE"
    MODULE_OUTPUT = "MODULE_OUTPUT"
    MODULE_TEST_OUTPUT = "MODULE_TEST_OUTPUT"
    MODULE_SRC = "MODULE_SRC"


class RemoteTransport(StrEnum):
    """Debugger transport for remote run configurations."""

    SOCKET = "SOCKET"
    SHARED_MEM = "SHARED_MEM"


class RemoteMode(StrEnum):
    """Whether the IDE attaches to or listens for a remote debuggee."""

    ATTACH = "ATTACH"
    LISTEN = "LISTEN"
