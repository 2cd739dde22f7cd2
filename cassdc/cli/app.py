"""Main Typer application: imports and registers all CLI commands.

Entry point: ``cassdc`` (configured via pyproject.toml project.scripts).
"""

from __future__ import annotations

import logging
from typing import Optional

import typer
from rich.logging import RichHandler

from cassdc.cli.commands._common import err_console
from cassdc.cli.commands.describe import describe_cmd
from cassdc.cli.commands.facts import config_cmd, image_cmd, ports_cmd, racks_cmd
from cassdc.config import get_settings

app = typer.Typer(
    name="cassdc",
    help="cassdc: inspect the deployment facts of a CassandraDatacenter manifest.",
    no_args_is_help=True,
    rich_markup_mode="rich",
    add_completion=False,
)

# Register subcommands
app.command(name="image", help="Show the resolved container images.")(image_cmd)
app.command(name="config", help="Print the merged configuration document.")(config_cmd)
app.command(name="ports", help="List the server container ports.")(ports_cmd)
app.command(name="racks", help="Show node counts per rack.")(racks_cmd)
app.command(name="describe", help="Show every derived fact for a datacenter.")(describe_cmd)


@app.callback()
def main_callback(
    log_level: Optional[str] = typer.Option(
        None, "--log-level", help="Logging level. Defaults to CASSDC_LOG_LEVEL or INFO."
    ),
) -> None:
    """Configure logging before any command runs."""
    level = (log_level or get_settings().log_level).upper()
    # getLevelName maps unknown names to "Level <name>" rather than a number.
    if not isinstance(logging.getLevelName(level), int):
        err_console.print(f"[red]Unknown log level:[/red] {level}")
        raise typer.Exit(code=1)

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(show_path=False)],
        force=True,
    )


def main() -> None:
    """CLI entry point."""
    app()


if __name__ == "__main__":
    main()
