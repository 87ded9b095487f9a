# src/idea_ext/cli.py
"""idea-ext Command Line Interface.

Entry point for the idea-ext CLI tool.
"""

from __future__ import annotations

from pathlib import Path

import typer
from dynaconf.vendor.ruamel.yaml.parser import ParserError as YamlParserError
from dynaconf.vendor.ruamel.yaml.scanner import ScannerError as YamlScannerError
from pydantic import ValidationError

from idea_ext import __version__
from idea_ext.contracts.errors import SchemaUnavailableError
from idea_ext.core.config import ProjectDescriptionError, build_project, load_description
from idea_ext.core.logging import configure_logging
from idea_ext.plugin import module_settings, project_settings
from idea_ext.plugins.manager import default_plugin_manager

__all__ = [
    "app",
]

app = typer.Typer(
    name="idea-ext",
    help="idea-ext: render IDE project-import settings as JSON.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"idea-ext version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    log_level: str = typer.Option(
        "WARNING",
        "--log-level",
        help="Log level for diagnostics on stderr (DEBUG, INFO, WARNING, ERROR).",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Emit diagnostics as JSON lines.",
    ),
) -> None:
    """idea-ext: render IDE project-import settings as JSON."""
    configure_logging(json_output=json_logs, level=log_level)


@app.command()
def render(
    description: str = typer.Option(
        ...,
        "--description",
        "-d",
        help="Path to project description YAML file.",
    ),
    module: str | None = typer.Option(
        None,
        "--module",
        "-m",
        help="Render module-level settings of this project path (e.g. ':' or ':app') instead of project-level settings.",
    ),
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Write the document to this file instead of stdout.",
    ),
) -> None:
    """Render one settings document for the IDE."""
    description_path = Path(description).expanduser()

    try:
        project_description = load_description(description_path)
    except (YamlParserError, YamlScannerError) as e:
        typer.echo(f"YAML syntax error in {description}: {e.problem}", err=True)
        raise typer.Exit(1) from None
    except FileNotFoundError:
        typer.echo(f"Error: Description file not found: {description}", err=True)
        raise typer.Exit(1) from None
    except ValidationError as e:
        typer.echo("Description errors:", err=True)
        for error in e.errors():
            loc = ".".join(str(x) for x in error["loc"])
            typer.echo(f"  - {loc}: {error['msg']}", err=True)
        raise typer.Exit(1) from None
    except ProjectDescriptionError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    try:
        root = build_project(project_description, description_path.parent, default_plugin_manager())
    except ProjectDescriptionError as e:
        typer.echo(f"Error applying description: {e}", err=True)
        raise typer.Exit(1) from None

    if module is None:
        settings = project_settings(root)
    else:
        target = root.find_project(module)
        if target is None:
            typer.echo(f"Error: Unknown project path '{module}'.", err=True)
            raise typer.Exit(1)
        settings = module_settings(target)

    try:
        document = settings.render()
    except SchemaUnavailableError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1) from None

    if output is None:
        typer.echo(document)
    else:
        Path(output).expanduser().write_text(document + "\n", encoding="utf-8")
        typer.echo(f"Wrote {output}", err=True)


@app.command()
def kinds() -> None:
    """List available run configuration and facet kinds."""
    manager = default_plugin_manager()
    registry = {
        "run configuration": manager.get_run_configurations(),
        "facet": manager.get_facets(),
    }

    for label, classes in registry.items():
        typer.echo(f"\n{label.upper()}S:")
        if classes:
            for cls in classes:
                summary = (cls.__doc__ or "").strip().split("\n")[0]
                typer.echo(f"  {cls.kind:20} - {summary}")
        else:
            typer.echo("  (none available)")

    typer.echo()
