"""CLI command: tokenguard check-catalog -- validate and audit a token catalog."""

from __future__ import annotations

import sys

import click

from tokenguard.catalog import CatalogError, find_unreachable_tokens, load_catalog


@click.command("check-catalog")
@click.argument("tokens_file", type=click.Path())
def check_catalog(tokens_file: str) -> None:
    """Validate TOKENS_FILE and list token keys that can never match."""
    try:
        catalog = load_catalog(tokens_file)
    except CatalogError as exc:
        click.echo(f"Catalog error: {exc}", err=True)
        sys.exit(2)

    click.echo(f"Categories: {len(catalog)}")
    for category in catalog:
        click.echo(
            f"  {category.name}: {len(category.tokens)} token(s) for "
            f"{', '.join(category.properties)}"
        )

    unreachable = find_unreachable_tokens(catalog)
    if unreachable:
        click.echo()
        for diag in unreachable:
            click.echo(str(diag))

    click.echo()
    click.echo(f"OK: {len(unreachable)} unreachable token key(s)")
    sys.exit(0)
