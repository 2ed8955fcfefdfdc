"""tokenguard CLI entry point: Click group with subcommands."""

import logging

import click

from tokenguard import __version__


@click.group()
@click.version_option(version=__version__, prog_name="tokenguard")
@click.option("-v", "--verbose", is_flag=True, help="Log progress to stderr")
def cli(verbose: bool) -> None:
    """tokenguard - enforce design tokens in stylesheet values."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from tokenguard.cli.lint import lint  # noqa: E402
from tokenguard.cli.catalog import check_catalog  # noqa: E402

cli.add_command(lint)
cli.add_command(check_catalog)
