"""CLI command: tokenguard lint -- check stylesheets against a token catalog."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from tokenguard.catalog import CatalogError, load_catalog
from tokenguard.config import DEFAULT_TOKEN_MATCH_MARGIN, ConfigError, GuardConfig
from tokenguard.linter import lint_source
from tokenguard.model.diagnostic import Severity


@click.command()
@click.argument("files", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option("--tokens", "tokens_file", required=True, help="JSON token catalog")
@click.option(
    "--margin",
    default=DEFAULT_TOKEN_MATCH_MARGIN,
    type=float,
    show_default=True,
    help="Largest px difference reported as a close match (0 disables)",
)
@click.option("--fix", is_flag=True, help="Rewrite exact matches in place")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    help="Output format",
)
def lint(files: tuple[str, ...], tokens_file: str, margin: float, fix: bool, output_format: str) -> None:
    """Check stylesheet FILES for values that should be design tokens.

    Exits with code 1 when any error-severity diagnostic is reported and
    code 2 when the options, the token catalog or a stylesheet are unusable.
    """
    try:
        config = GuardConfig(tokens_file=tokens_file, token_match_margin=margin, fix=fix)
    except ConfigError as exc:
        click.echo(f"Configuration error: {exc}", err=True)
        sys.exit(2)

    try:
        catalog = load_catalog(config.tokens_file)
    except CatalogError as exc:
        click.echo(f"Catalog error: {exc}", err=True)
        sys.exit(2)

    report: list[dict[str, object]] = []
    errors = warnings = 0
    for name in files:
        path = Path(name)
        try:
            source = path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            click.echo(f"Cannot read {path}: {exc}", err=True)
            sys.exit(2)
        result = lint_source(source, catalog, margin=config.token_match_margin, fix=config.fix)

        if config.fix and result.output != source:
            path.write_text(result.output, encoding="utf-8")
            if output_format == "text":
                click.echo(f"Fixed {path}")

        for diag in result.diagnostics:
            if diag.severity is Severity.ERROR:
                errors += 1
            elif diag.severity is Severity.WARNING:
                warnings += 1
            if output_format == "json":
                report.append({"file": str(path), **diag.to_dict()})
            else:
                click.echo(f"{path}:{diag}")

    if output_format == "json":
        click.echo(json.dumps(report, indent=2))
    else:
        click.echo()
        click.echo(f"Summary: {errors} error(s), {warnings} warning(s) in {len(files)} file(s)")

    if errors:
        sys.exit(1)
    sys.exit(0)
