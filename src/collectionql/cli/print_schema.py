"""Schema printing CLI command."""

from __future__ import annotations

from pathlib import Path

import click
from rich.console import Console

from collectionql.cli.main import Context, pass_context

console = Console()


@click.command("print-schema")
@click.option(
    "--output",
    "-o",
    type=click.Path(path_type=Path),
    default=None,
    help="Write the schema to a file instead of stdout",
)
@click.option(
    "--node-id-field",
    default=None,
    help="Override the name of the identifier field",
)
@pass_context
def print_schema(ctx: Context, output: Path | None, node_id_field: str | None) -> None:
    """
    Print the GraphQL schema of the inventory in SDL.

    Examples:

        # Print to stdout
        collectionql -i inventory.yml print-schema

        # Write to a file
        collectionql print-schema -o schema.graphql
    """
    from graphql import print_schema as print_sdl

    from collectionql.graphql.schema import SchemaBuildError, build_schema

    inventory = ctx.inventory
    options = inventory.options
    if node_id_field:
        options = options.model_copy(update={"node_id_field_name": node_id_field})

    try:
        schema = build_schema(inventory, options)
    except SchemaBuildError as e:
        raise click.ClickException(str(e)) from e

    sdl = print_sdl(schema)
    if output is None:
        click.echo(sdl)
        return

    output.parent.mkdir(parents=True, exist_ok=True)
    output.write_text(sdl + "\n")
    console.print(f"[green]✓[/green] Schema written to {output}")
