"""CLI command resolving source references against a type catalog."""

from __future__ import annotations

import sys

import click
from rich.markup import escape
from rich.table import Table

from mapnames.commands.names.cmd import target_option
from mapnames.helpers.console import console


@click.command()
@click.argument("catalog_path", type=click.Path(exists=True))
@click.argument("paths", nargs=-1, required=True)
@click.option("--type", "source_type", required=True, help="Source type the paths start from")
@click.option(
    "-e",
    "--existing",
    "existing",
    multiple=True,
    help="Name already in scope. Can be repeated.",
)
@target_option
def resolve(
    catalog_path: str,
    paths: tuple[str, ...],
    source_type: str,
    existing: tuple[str, ...],
    target: str,
) -> None:
    """Resolve property PATHS on a source type and name a local for each step.

    \b
    Examples:
      mapnames resolve catalog.yaml --type Customer address.city
      mapnames resolve catalog.yaml --type Customer name address.street -e name
    """
    from mapnames.commands.resolve.resolver import (
        ResolutionError,
        assign_local_names,
        resolve_source_reference,
    )
    from mapnames.formats.catalog import CatalogError, load_catalog
    from mapnames.helpers.naming import keywords_for
    from mapnames.model import PropertyEntry

    try:
        catalog = load_catalog(catalog_path)
    except CatalogError as e:
        console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    entries: list[PropertyEntry] = []
    for path in paths:
        try:
            entries.extend(resolve_source_reference(catalog, source_type, path))
        except ResolutionError as e:
            console.print(f"[red]{escape(str(e))}[/red]")
            sys.exit(1)

    local_names = assign_local_names(entries, existing, keywords=keywords_for(target))

    table = Table(title=f"Source references on {source_type}")
    table.add_column("Path", style="cyan")
    table.add_column("Type")
    table.add_column("Accessor")
    table.add_column("Presence check")
    table.add_column("Local variable", style="green")
    for entry, local_name in local_names.items():
        table.add_row(
            entry.full_name,
            str(entry.type),
            f"{entry.read_accessor}()",
            f"{entry.presence_checker}()" if entry.presence_checker else "-",
            local_name,
        )
    console.print(table)
