"""CLI commands for one-off name transformations."""

from __future__ import annotations

import sys

import click

from mapnames.helpers.console import console
from mapnames.helpers.naming import TARGETS

target_option = click.option(
    "--target",
    type=click.Choice(TARGETS),
    default="java",
    show_default=True,
    envvar="MAPNAMES_TARGET",
    help="Language whose keywords are reserved",
)


@click.command()
@click.argument("identifier")
def sanitize(identifier: str) -> None:
    """Strip characters that are illegal in an identifier."""
    from mapnames.helpers.naming import sanitize_identifier_name

    click.echo(sanitize_identifier_name(identifier))


@click.command("safe-name")
@click.argument("name")
@click.option(
    "-e",
    "--existing",
    "existing",
    multiple=True,
    help="Name already in scope. Can be repeated.",
)
@target_option
def safe_name(name: str, existing: tuple[str, ...], target: str) -> None:
    """Turn NAME into a local variable name that clashes with nothing in scope."""
    from mapnames.helpers.naming import get_safe_variable_name, keywords_for

    click.echo(get_safe_variable_name(name, existing, keywords=keywords_for(target)))


@click.command()
@click.argument("word")
@click.argument("candidates", nargs=-1)
def suggest(word: str, candidates: tuple[str, ...]) -> None:
    """Print the candidate closest to WORD."""
    from mapnames.helpers.similarity import get_most_similar_word

    match = get_most_similar_word(word, candidates)
    if match is None:
        console.print(f"[red]No candidates to compare {word!r} with[/red]")
        sys.exit(1)
    click.echo(match)


@click.command()
@click.argument("fully_qualified_name")
def stub(fully_qualified_name: str) -> None:
    """Derive a property name from a qualified class name."""
    from mapnames.helpers.strings import stub_property_name

    if not fully_qualified_name or fully_qualified_name.endswith("."):
        console.print(f"[red]Not a class name: {fully_qualified_name!r}[/red]")
        sys.exit(1)
    click.echo(stub_property_name(fully_qualified_name))
