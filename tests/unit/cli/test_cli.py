"""Tests for the idea-ext CLI."""

from __future__ import annotations

import json
from pathlib import Path

from typer.testing import CliRunner

from idea_ext import __version__
from idea_ext.cli import app

runner = CliRunner()

DESCRIPTION = """
project:
  name: demo
  tasks: [generate]
  settings:
    taskTriggers:
      beforeSync: [":generate"]
    doNotDetectFrameworks: [web]
  modules:
    - name: app
      facets:
        - name: spring
          type: spring
          contexts:
            main: {file: ctx.xml}
"""


def _description(tmp_path: Path, text: str = DESCRIPTION) -> Path:
    path = tmp_path / "project.yaml"
    path.write_text(text, encoding="utf-8")
    return path


class TestVersion:
    def test_version_flag(self) -> None:
        result = runner.invoke(app, ["--version"])

        assert result.exit_code == 0
        assert __version__ in result.stdout


class TestRenderCommand:
    def test_renders_project_document_to_stdout(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "--description", str(_description(tmp_path))])

        assert result.exit_code == 0, result.output
        document = json.loads(result.stdout)
        assert document["frameworkDetectionExcludes"] == ["web"]
        assert document["taskTriggersConfig"]["beforeSync"] == [{"taskPath": ":generate", "projectPath": tmp_path.as_posix()}]

    def test_renders_module_document(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(_description(tmp_path)), "--module", ":app"])

        assert result.exit_code == 0, result.output
        facet = json.loads(result.stdout)["facets"][0]
        assert facet["contexts"] == [{"name": "main", "file": f"{tmp_path.as_posix()}/app/ctx.xml"}]

    def test_root_module_without_facets_renders_empty_object(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(_description(tmp_path)), "-m", ":"])

        assert result.exit_code == 0, result.output
        assert result.stdout.strip() == "{}"

    def test_writes_output_file(self, tmp_path: Path) -> None:
        output = tmp_path / "out" / "settings.json"
        output.parent.mkdir()

        result = runner.invoke(app, ["render", "-d", str(_description(tmp_path)), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert json.loads(output.read_text(encoding="utf-8"))["frameworkDetectionExcludes"] == ["web"]

    def test_missing_description_file(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(tmp_path / "absent.yaml")])

        assert result.exit_code == 1
        assert "not found" in result.output

    def test_unknown_module_path(self, tmp_path: Path) -> None:
        result = runner.invoke(app, ["render", "-d", str(_description(tmp_path)), "-m", ":nope"])

        assert result.exit_code == 1
        assert "Unknown project path ':nope'" in result.output

    def test_validation_errors_listed(self, tmp_path: Path) -> None:
        path = _description(tmp_path, "project:\n  name: demo\n  settings:\n    colourScheme: dark\n")

        result = runner.invoke(app, ["render", "-d", str(path)])

        assert result.exit_code == 1
        assert "Description errors" in result.output
        assert "colourScheme" in result.output

    def test_section_errors_reported(self, tmp_path: Path) -> None:
        path = _description(tmp_path, "project:\n  name: demo\n  settings:\n    delegateActions:\n      testRunner: MAVEN\n")

        result = runner.invoke(app, ["render", "-d", str(path)])

        assert result.exit_code == 1
        assert "Error applying description" in result.output

    def test_host_without_schema_accessor(self, tmp_path: Path) -> None:
        path = _description(tmp_path, "project:\n  name: demo\n  apiVersion: '4.1'\n")

        result = runner.invoke(app, ["render", "-d", str(path)])

        assert result.exit_code == 1
        assert "4.2 or later" in result.output


class TestKindsCommand:
    def test_lists_builtin_kinds(self) -> None:
        result = runner.invoke(app, ["kinds"])

        assert result.exit_code == 0
        for kind in ("application", "junit", "remote", "testng", "spring"):
            assert kind in result.stdout
        assert "RUN CONFIGURATIONS:" in result.stdout
        assert "FACETS:" in result.stdout
