"""Main CLI entry point for collectionql."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from collectionql import __version__

console = Console()

# Default path (can be overridden)
DEFAULT_INVENTORY = "inventory.yml"


class Context:
    """CLI context object passed to commands."""

    def __init__(self) -> None:
        self.inventory_path: Path | None = None
        self.verbose: bool = False
        self._inventory: Any = None

    @property
    def inventory(self) -> Any:
        """Lazy-load inventory."""
        if self._inventory is None:
            import yaml
            from pydantic import ValidationError

            from collectionql.core.inventory import Inventory, InventoryError

            if self.inventory_path and self.inventory_path.exists():
                try:
                    self._inventory = Inventory.load(self.inventory_path)
                except (InventoryError, ValidationError, yaml.YAMLError) as e:
                    raise click.ClickException(f"Invalid inventory {self.inventory_path}: {e}") from e
            else:
                raise click.ClickException(f"Inventory not found: {self.inventory_path}")
        return self._inventory


pass_context = click.make_pass_decorator(Context, ensure=True)


@click.group()
@click.version_option(version=__version__, prog_name="collectionql")
@click.option(
    "-i",
    "--inventory",
    type=click.Path(exists=False, path_type=Path),
    default=DEFAULT_INVENTORY,
    help="Path to inventory YAML file",
)
@click.option("-v", "--verbose", is_flag=True, help="Enable verbose output")
@pass_context
def cli(ctx: Context, inventory: Path, verbose: bool) -> None:
    """
    Collectionql - GraphQL types from collection metadata.

    Build, validate and print the GraphQL schema of a declared inventory.
    """
    ctx.inventory_path = inventory
    ctx.verbose = verbose
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=Console(stderr=True), show_path=False)],
    )


# Import and register subcommands
from collectionql.cli.print_schema import print_schema
from collectionql.cli.validate import validate

cli.add_command(print_schema)
cli.add_command(validate)


@cli.command()
@pass_context
def info(ctx: Context) -> None:
    """List collections and relations in the inventory."""
    from rich.table import Table

    from collectionql.graphql.naming import format_type_name

    try:
        inventory = ctx.inventory
    except click.ClickException as e:
        console.print(f"[red]Error:[/red] {e}")
        return

    console.print(f"\n[bold]Collectionql v{__version__}[/bold]\n")
    console.print(f"  Path: {ctx.inventory_path}")
    console.print(f"  Collections: {len(inventory)}")
    console.print(f"  Relations: {len(inventory.get_relations())}\n")

    table = Table(title="Collections")
    table.add_column("Name", style="cyan")
    table.add_column("Type")
    table.add_column("Fields", justify="right")
    table.add_column("Primary Key")
    table.add_column("Paginated")

    for collection in inventory:
        table.add_row(
            collection.name,
            format_type_name(collection.type.name),
            str(len(collection.type.fields)),
            collection.primary_key.name if collection.primary_key else "-",
            "[green]yes[/green]" if collection.paginator else "[dim]no[/dim]",
        )

    console.print(table)

    if inventory.get_relations():
        relations = Table(title="Relations")
        relations.add_column("Name", style="cyan")
        relations.add_column("Head")
        relations.add_column("Tail")
        for relation in inventory.get_relations():
            relations.add_row(relation.name, relation.head_collection.name, relation.tail_collection.name)
        console.print(relations)


if __name__ == "__main__":
    cli()
