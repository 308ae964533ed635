"""CLI interface for tmplkit - Jinja helpers and template variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Tuple

import click
import jinja2

from .config import (
    TemplateManifest,
    default_context,
    find_manifest,
    get_settings,
    load_manifest,
)
from .engine import helper_names, new_engine, render_template
from .errors import ManifestError
from .utils import configure_logging, console, err_console
from .variables import SequenceSelection, StringSelection, VariableDef


@click.group()
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Diagnostic log level (default: $TMPLKIT_LOG_LEVEL or WARNING)",
)
def cli(log_level: Optional[str]) -> None:
    """Jinja template helpers and variable manifests."""
    configure_logging(log_level or get_settings().log_level)


@cli.command("helpers")
def helpers_cmd() -> None:
    """List the helpers available in templates, by category."""
    env = new_engine()
    for group, names in helper_names(env).items():
        console.print(f"{group}:", style="bold")
        for name in names:
            console.print(f"  {name}")


def _load_manifest_or_exit(path: Path) -> TemplateManifest:
    if path.is_dir():
        found = find_manifest(path)
        if found is None:
            err_console.print(f"No manifest found in {path}", style="bold red")
            raise SystemExit(1)
        path = found
    try:
        return load_manifest(path)
    except ManifestError as exc:
        err_console.print(f"Invalid manifest: {exc}", style="bold red", markup=False)
        raise SystemExit(1)


def _describe(variable: VariableDef) -> str:
    parts = [f"{variable.name}: {variable.question}"]
    if variable.default_value is not None:
        parts.append(f"default={variable.default_value!r}")
    selection = variable.select_in_values
    if isinstance(selection, SequenceSelection):
        parts.append("one of " + ", ".join(selection.values))
    elif isinstance(selection, StringSelection):
        parts.append(f"values={selection.value!r}")
    if variable.hidden:
        parts.append("(hidden)")
    return "  ".join(parts)


@cli.command("variables")
@click.argument(
    "manifest_path", type=click.Path(exists=True, path_type=Path)
)
def variables_cmd(manifest_path: Path) -> None:
    """
    Show the variables declared by a template manifest.

    MANIFEST_PATH is a manifest file or a template directory holding a
    .tmplkit.yaml manifest.
    """
    manifest = _load_manifest_or_exit(manifest_path)
    if not manifest.variables:
        console.print("No variables declared.", style="yellow")
        return
    for variable in manifest.variables:
        console.print(_describe(variable), markup=False, highlight=False)


def _parse_assignments(assignments: Tuple[str, ...]) -> Dict[str, Any]:
    values: Dict[str, Any] = {}
    for assignment in assignments:
        key, sep, value = assignment.partition("=")
        if not sep or not key:
            raise click.BadParameter(
                f"expected KEY=VALUE, got {assignment!r}", param_hint="--var"
            )
        values[key] = value
    return values


@cli.command("render")
@click.argument(
    "template_path", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)
@click.option(
    "--manifest",
    "manifest_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="Manifest providing default values (default: .tmplkit.yaml next to the template)",
)
@click.option("--var", "assignments", multiple=True, help="Set a variable, KEY=VALUE")
@click.option(
    "--output",
    "-o",
    "output_path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help="Write the result to a file instead of stdout",
)
def render_cmd(
    template_path: Path,
    manifest_path: Optional[Path],
    assignments: Tuple[str, ...],
    output_path: Optional[Path],
) -> None:
    """
    Render a template file.

    Variables come from the manifest defaults, overridden by --var values.
    Referencing a variable that is not set is an error.
    """
    context: Dict[str, Any] = {}
    manifest_path = manifest_path or find_manifest(template_path.parent)
    if manifest_path is not None:
        context.update(default_context(_load_manifest_or_exit(manifest_path)))
    context.update(_parse_assignments(assignments))

    env = new_engine()
    source = template_path.read_text(encoding="utf-8")
    try:
        rendered = render_template(env, source, context)
    except jinja2.TemplateError as exc:
        err_console.print(f"Template error: {exc}", style="bold red", markup=False)
        raise SystemExit(1)

    if output_path is None:
        click.echo(rendered, nl=False)
        return
    output_path.parent.mkdir(parents=True, exist_ok=True)
    output_path.write_text(rendered, encoding="utf-8")
    console.print(f"Written {output_path}", style="green")


if __name__ == "__main__":
    cli()
