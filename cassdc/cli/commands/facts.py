"""``cassdc image|config|ports|racks``: print one derived fact each."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer
from rich.table import Table

from cassdc.cli.commands._common import (
    BASE_IMAGE_OS_OPTION,
    MANIFEST_ARGUMENT,
    console,
    fail,
    load_or_exit,
    profile_for,
)
from cassdc.core.errors import DatacenterError


def image_cmd(
    manifest: Path = MANIFEST_ARGUMENT,
    base_image_os: Optional[str] = BASE_IMAGE_OS_OPTION,
) -> None:
    """Show the server and config-builder images."""
    dc = load_or_exit(manifest)
    profile = profile_for(base_image_os)
    try:
        server_image = dc.get_server_image(profile)
    except DatacenterError as e:
        fail("Cannot resolve server image", e)

    console.print(f"[bold]Server image:[/bold]         {server_image}")
    console.print(
        f"[bold]Config builder image:[/bold] {dc.get_config_builder_image(profile)}"
    )


def config_cmd(
    manifest: Path = MANIFEST_ARGUMENT,
    pretty: bool = typer.Option(False, "--pretty", help="Indent the document."),
) -> None:
    """Print the merged configuration document."""
    dc = load_or_exit(manifest)
    try:
        document = dc.get_config_as_json()
    except DatacenterError as e:
        fail("Cannot build configuration", e)

    if pretty:
        document = json.dumps(json.loads(document), indent=2, sort_keys=True)
    # Plain print so the document can be piped.
    typer.echo(document)


def ports_cmd(manifest: Path = MANIFEST_ARGUMENT) -> None:
    """List the server container ports."""
    dc = load_or_exit(manifest)
    try:
        ports = dc.get_container_ports()
    except DatacenterError as e:
        fail("Cannot derive container ports", e)

    table = Table(title=f"Container ports for {dc.name}")
    table.add_column("Name", style="cyan")
    table.add_column("Port", justify="right", style="green")
    for port in ports:
        table.add_row(port.name, str(port.container_port))
    console.print(table)


def racks_cmd(manifest: Path = MANIFEST_ARGUMENT) -> None:
    """Show how the requested nodes are spread over racks."""
    dc = load_or_exit(manifest)

    table = Table(title=f"Rack layout for {dc.name} (size {dc.spec.size})")
    table.add_column("Rack", style="cyan")
    table.add_column("Zone")
    table.add_column("Nodes", justify="right", style="green")
    for rack, count in dc.get_rack_node_counts():
        table.add_row(rack.name, rack.zone or "[dim]-[/dim]", str(count))
    console.print(table)
