# tests/conftest.py
"""Shared test fixtures and helpers.

Host Fixtures:
- root_project: Root project at a POSIX path with a few subprojects and tasks
- plugin_manager: Fresh PluginManager with the built-in kinds registered
- project_settings / module_settings: Settings facades for root_project

Test Sections:
- _TestSection: Minimal MapConvertible object for extension tests
- _NotASection: Object without to_map(), never converted

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

from __future__ import annotations

import os
from pathlib import PurePosixPath
from typing import Any

import pytest
from hypothesis import Phase, Verbosity, settings

from idea_ext.host.project import Project
from idea_ext.plugins.manager import PluginManager
from idea_ext.settings.module import ModuleSettings
from idea_ext.settings.project import ProjectSettings

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Shared Test Sections
# =============================================================================


class _TestSection:
    """Map-convertible object with a fixed payload."""

    def __init__(self, **values: Any) -> None:
        self.values = values

    def to_map(self) -> dict[str, Any]:
        return dict(self.values)


class _NotASection:
    """Plain object with no map representation."""

    def __init__(self, label: str = "plain") -> None:
        self.label = label


# =============================================================================
# Host Fixtures
# =============================================================================


@pytest.fixture
def plugin_manager() -> PluginManager:
    """Fresh plugin manager with built-in kinds; no collaborators registered."""
    manager = PluginManager()
    manager.register_builtin_plugins()
    return manager


@pytest.fixture
def root_project() -> Project:
    """Root project "demo" at /work/demo with subproject ":app" and tasks.

    Tasks: ":generate" (root), ":app:build".
    """
    root = Project("demo", PurePosixPath("/work/demo"))
    root.task("generate")
    app = root.child("app")
    app.task("build")
    return root


@pytest.fixture
def project_settings(root_project: Project, plugin_manager: PluginManager) -> ProjectSettings:
    return ProjectSettings(root_project, plugin_manager)


@pytest.fixture
def module_settings(root_project: Project, plugin_manager: PluginManager) -> ModuleSettings:
    return ModuleSettings(root_project.find_project(":app"), plugin_manager)  # type: ignore[arg-type]
