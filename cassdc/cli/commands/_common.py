"""Shared option handling for manifest-based commands."""

from __future__ import annotations

from pathlib import Path
from typing import NoReturn

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape

from cassdc.config import get_settings
from cassdc.manifest import load_datacenter
from cassdc.models.datacenter import CassandraDatacenter
from cassdc.models.profile import DeploymentProfile

console = Console()
err_console = Console(stderr=True)

MANIFEST_ARGUMENT = typer.Argument(
    ..., exists=True, dir_okay=False, help="Path to a CassandraDatacenter JSON manifest."
)
BASE_IMAGE_OS_OPTION = typer.Option(
    None,
    "--base-image-os",
    help="Base OS selector (e.g. ubi7). Defaults to the BASE_IMAGE_OS environment variable.",
)


def load_or_exit(manifest: Path) -> CassandraDatacenter:
    try:
        return load_datacenter(manifest)
    except ValidationError as e:
        err_console.print(f"[red]Invalid manifest {escape(str(manifest))}:[/red] {escape(str(e))}")
        raise typer.Exit(code=1)


def profile_for(base_image_os: str | None) -> DeploymentProfile:
    if base_image_os is None:
        return get_settings().deployment_profile()
    return DeploymentProfile(base_image_os=base_image_os)


def fail(message: str, error: Exception) -> NoReturn:
    err_console.print(f"[red]{escape(message)}:[/red] {escape(str(error))}")
    raise typer.Exit(code=1)
