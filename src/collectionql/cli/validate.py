"""Validation CLI command."""

from __future__ import annotations

import click
from rich.console import Console

from collectionql.cli.main import Context, pass_context

console = Console()


@click.command()
@click.option(
    "--strict",
    is_flag=True,
    help="Fail on warnings",
)
@pass_context
def validate(ctx: Context, strict: bool) -> None:
    """
    Validate the inventory and the schema built from it.

    Warns about relations that produce no fields.

    Examples:

        # Basic validation
        collectionql validate

        # Fail when a relation is not exposed
        collectionql validate --strict
    """
    from collectionql.graphql.schema import build_schema

    errors: list[str] = []
    warnings: list[str] = []
    inventory = None

    console.print("[bold]Validating inventory...[/bold]")
    try:
        inventory = ctx.inventory
        console.print(f"  [green]✓[/green] Inventory loaded: {len(inventory)} collections")
    except Exception as e:
        errors.append(f"Inventory validation failed: {e}")
        console.print(f"  [red]✗[/red] Inventory validation failed: {e}")

    if inventory is not None:
        console.print("[bold]Checking relations...[/bold]")
        for relation in inventory.get_relations():
            if relation.tail_collection.paginator is None:
                warnings.append(
                    f"Relation '{relation.name}': tail collection "
                    f"'{relation.tail_collection.name}' has no paginator"
                )
                console.print(f"  [yellow]![/yellow] Relation '{relation.name}': no head connection field")
            elif relation.get_tail_condition_from_head_value is None:
                warnings.append(f"Relation '{relation.name}': no tail condition from head value")
                console.print(f"  [yellow]![/yellow] Relation '{relation.name}': no head connection field")

        console.print("[bold]Building schema...[/bold]")
        try:
            schema = build_schema(inventory)
            console.print(f"  [green]✓[/green] Schema built: {len(schema.type_map)} types")
        except Exception as e:
            errors.append(str(e))
            console.print(f"  [red]✗[/red] {e}")

    # Summary
    console.print("\n[bold]Validation Summary[/bold]")
    console.print(f"  Errors: {len(errors)}")
    console.print(f"  Warnings: {len(warnings)}")

    if errors:
        console.print("\n[red bold]Validation failed[/red bold]")
        for err in errors:
            console.print(f"  [red]•[/red] {err}")
        raise SystemExit(1)

    if warnings and strict:
        console.print("\n[yellow bold]Validation failed (strict mode)[/yellow bold]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {warn}")
        raise SystemExit(1)

    if warnings:
        console.print("\n[yellow]Warnings:[/yellow]")
        for warn in warnings:
            console.print(f"  [yellow]•[/yellow] {warn}")

    console.print("\n[green bold]Validation passed[/green bold]")
