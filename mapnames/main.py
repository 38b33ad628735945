"""CLI entry point for mapnames."""

from __future__ import annotations

import click
from dotenv import load_dotenv

from mapnames.commands.names.cmd import safe_name, sanitize, stub, suggest
from mapnames.commands.resolve.cmd import resolve

load_dotenv()


@click.group()
@click.version_option(version="0.1.0", prog_name="mapnames")
def cli() -> None:
    """Turn property names into safe, unique identifiers for generated code."""


cli.add_command(sanitize)
cli.add_command(safe_name)
cli.add_command(suggest)
cli.add_command(stub)
cli.add_command(resolve)


if __name__ == "__main__":
    cli()
