"""``cassdc describe``: every derived fact for a datacenter in one panel."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from rich.panel import Panel

from cassdc.cli.commands._common import (
    BASE_IMAGE_OS_OPTION,
    MANIFEST_ARGUMENT,
    console,
    fail,
    load_or_exit,
    profile_for,
)
from cassdc.core.errors import DatacenterError


def describe_cmd(
    manifest: Path = MANIFEST_ARGUMENT,
    base_image_os: Optional[str] = BASE_IMAGE_OS_OPTION,
) -> None:
    """Describe images, ports, racks, services and conditions."""
    dc = load_or_exit(manifest)
    profile = profile_for(base_image_os)
    try:
        server_image = dc.get_server_image(profile)
        ports = dc.get_container_ports()
    except DatacenterError as e:
        fail(f"Cannot describe {dc.name}", e)

    racks = ", ".join(
        f"{rack.name}={count}" for rack, count in dc.get_rack_node_counts()
    )
    port_list = ", ".join(f"{p.name}/{p.container_port}" for p in ports)
    location = f"{dc.namespace}/{dc.name}" if dc.namespace else dc.name
    conditions = ", ".join(
        f"{c.type}={c.status.value}" for c in dc.status.conditions
    ) or "[dim]none[/dim]"

    console.print(
        Panel(
            "\n".join([
                f"[bold]Datacenter:[/bold]      {location}",
                f"[bold]Cluster:[/bold]         {dc.spec.cluster_name}",
                f"[bold]Server:[/bold]          {dc.spec.server_type} {dc.spec.server_version}",
                f"[bold]Server image:[/bold]    {server_image}",
                f"[bold]Config builder:[/bold]  {dc.get_config_builder_image(profile)}",
                f"[bold]Ports:[/bold]           {port_list}",
                f"[bold]Racks:[/bold]           {racks}",
                f"[bold]Seed service:[/bold]    {dc.get_seed_service_name()}",
                f"[bold]DC service:[/bold]      {dc.get_datacenter_service_name()}",
                f"[bold]Superuser secret:[/bold] {dc.get_superuser_secret_ref().name}",
                f"[bold]Conditions:[/bold]      {conditions}",
            ]),
            title="[bold]CassandraDatacenter[/bold]",
            border_style="green",
            padding=(1, 2),
        )
    )
