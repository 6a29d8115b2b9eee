"""CLI commands for inspecting and staging modules."""

from __future__ import annotations

import json
from enum import Enum
from pathlib import Path
from typing import Annotated

import typer
import yaml
from result import Err, Ok

from modkit.modinfo import (
    ModuleDirectoryError,
    ModuleInfo,
    ModuleInfoError,
    ModuleParseError,
    UnknownModuleKindError,
)
from modkit.sources import InvalidSourceError, LocalSourceReader, SourceError, SourceNotFoundError
from modkit.utils.copy import CopyError


class OutputFormat(str, Enum):
    YAML = "yaml"
    JSON = "json"


FormatOption = Annotated[
    OutputFormat,
    typer.Option("--format", "-f", show_default=True, case_sensitive=False, help="Output format (yaml or json)."),
]

KindOption = Annotated[
    str,
    typer.Option("--kind", "-k", show_default=True, help="Module kind (terraform or packer)."),
]

app = typer.Typer(
    help="Inspect and stage local modules.",
    context_settings={"help_option_names": ["-h", "--help"]},
)


@app.callback(invoke_without_command=True)
def _module_root(ctx: typer.Context) -> None:
    if ctx.invoked_subcommand is None:
        typer.echo(ctx.get_help())
        raise typer.Exit()


@app.command("info")
def info(
    path: Annotated[str, typer.Argument(help="Local module path (./dir, ../dir or /abs/dir)")],
    kind: KindOption = "terraform",
    format: FormatOption = OutputFormat.YAML,
) -> None:
    """Show the inputs and outputs declared by a module.

    Examples:

        # Show a Terraform module
        modkit module info ./modules/network/vpc

        # Show a Packer template as JSON
        modkit module info ./images/custom --kind packer --format json
    """
    match LocalSourceReader().get_module_info(path, kind):
        case Ok(module_info):
            typer.echo(_format_payload(module_info, format))
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


@app.command("fetch")
def fetch(
    path: Annotated[str, typer.Argument(help="Local module path (./dir, ../dir or /abs/dir)")],
    destination: Annotated[Path, typer.Argument(help="Deployment directory to copy the module into")],
) -> None:
    """Copy a module into a deployment directory.

    Examples:

        # Stage a module into a deployment
        modkit module fetch ./modules/network/vpc ./deployment/primary/vpc
    """
    match LocalSourceReader().get_module(path, destination):
        case Ok(_):
            typer.secho(f"✓ Copied '{path}' to '{destination}'", fg=typer.colors.GREEN)
        case Err(error):
            _handle_error(error)
            raise typer.Exit(code=1)


def _format_payload(module_info: ModuleInfo, format: OutputFormat) -> str:
    payload = module_info.model_dump(mode="json")
    if format == OutputFormat.JSON:
        return json.dumps(payload, indent=2)
    return yaml.safe_dump(payload, sort_keys=False)


def _handle_error(error: SourceError | ModuleInfoError | CopyError) -> None:
    """Handle module errors with user-friendly messages."""
    match error:
        case InvalidSourceError(source=source):
            typer.secho(f"error: '{source}' is not a local path", err=True, fg=typer.colors.RED)
            typer.secho("hint: local paths start with ./, ../ or /", err=True, fg=typer.colors.CYAN)
        case SourceNotFoundError(source=source):
            typer.secho(f"error: local module doesn't exist at '{source}'", err=True, fg=typer.colors.RED)
        case UnknownModuleKindError(kind=kind, known_kinds=known_kinds):
            typer.secho(f"error: unknown module kind '{kind}'", err=True, fg=typer.colors.RED)
            typer.secho(f"hint: valid kinds are {', '.join(known_kinds)}", err=True, fg=typer.colors.CYAN)
        case ModuleDirectoryError(message=message) | ModuleParseError(message=message):
            typer.secho(f"error: {message}", err=True, fg=typer.colors.RED)
        case CopyError(message=message):
            typer.secho("error: failed to copy module", err=True, fg=typer.colors.RED)
            typer.secho(f"  {message}", err=True)
        case _:  # pragma: no cover - fallback for unexpected subclasses
            typer.secho(f"error: {error.message}", err=True, fg=typer.colors.RED)
