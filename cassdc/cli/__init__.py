"""cassdc CLI: Typer-based command-line interface.

Provides the ``cassdc`` command for inspecting the deployment facts a
CassandraDatacenter manifest resolves to: images, configuration document,
container ports and rack layout.

All output uses Rich for formatted terminal display.
"""
