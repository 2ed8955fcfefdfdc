"""Linting pass: runs the token rule over every declaration of a document."""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import dataclass, field, replace
from pathlib import Path

from tokenguard.catalog import CatalogError, CatalogUnreadable, load_catalog
from tokenguard.config import DEFAULT_TOKEN_MATCH_MARGIN, GuardConfig
from tokenguard.matching import (
    apply_fix,
    build_diagnostic,
    match_value_node,
    messages,
    select_categories,
)
from tokenguard.model.catalog import TokenCatalog
from tokenguard.model.declaration import Declaration
from tokenguard.model.diagnostic import Diagnostic, Severity
from tokenguard.model.match import ExactMatch
from tokenguard.model.value import Word
from tokenguard.parser import ParseError, apply_declarations, parse_declarations, parse_value

__all__ = ["LintResult", "lint_declaration", "lint_declarations", "lint_source", "lint_with_config"]

log = logging.getLogger(__name__)


@dataclass
class LintResult:
    """Diagnostics from one pass plus the (possibly rewritten) document."""

    diagnostics: list[Diagnostic] = field(default_factory=list)
    output: str = ""

    @property
    def errors(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_error]

    @property
    def warnings(self) -> list[Diagnostic]:
        return [d for d in self.diagnostics if d.is_warning]


def lint_declaration(
    declaration: Declaration,
    catalog: TokenCatalog,
    margin: float = DEFAULT_TOKEN_MATCH_MARGIN,
    fix: bool = False,
) -> list[Diagnostic]:
    """Check every value node of one declaration."""
    if not declaration.prop or not declaration.value:
        return []
    prop = declaration.prop.lower()
    categories = list(select_categories(catalog, prop))
    if not categories:
        return []

    try:
        tree = parse_value(declaration.value)
    except ParseError as exc:
        log.debug("Skipping %s: %s", prop, exc)
        return []

    diagnostics: list[Diagnostic] = []
    for node in list(tree.walk()):
        if not isinstance(node, Word):
            continue
        literal = node.value
        result = match_value_node(node, categories, margin)
        diagnostic = build_diagnostic(result, node, declaration, prop)
        if diagnostic is not None:
            diagnostics.append(diagnostic)
        if fix and isinstance(result, ExactMatch):
            apply_fix(node, tree, declaration, result.token_name)
        if node.value != literal:
            log.debug("Fixed %s: %s -> %s", prop, literal, node.value)
    return diagnostics


def lint_declarations(
    declarations: Iterable[Declaration],
    catalog: TokenCatalog,
    margin: float = DEFAULT_TOKEN_MATCH_MARGIN,
    fix: bool = False,
) -> list[Diagnostic]:
    """Check declarations in document order and collect their diagnostics."""
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin!r}")
    diagnostics: list[Diagnostic] = []
    if catalog.is_empty:
        return diagnostics
    for declaration in declarations:
        diagnostics.extend(lint_declaration(declaration, catalog, margin, fix))
    return diagnostics


def _line_col(source: str, offset: int) -> tuple[int, int]:
    line = source.count("\n", 0, offset) + 1
    column = offset - (source.rfind("\n", 0, offset) + 1) + 1
    return line, column


def _locate(source: str, diagnostic: Diagnostic) -> Diagnostic:
    if diagnostic.start_offset is None:
        return diagnostic
    line, column = _line_col(source, diagnostic.start_offset)
    return replace(diagnostic, line=line, column=column)


def _catalog_warning(exc: CatalogError) -> Diagnostic:
    if isinstance(exc, CatalogUnreadable):
        message = str(exc)
    else:
        message = messages.catalog_error(str(exc))
    return Diagnostic(rule="catalog", severity=Severity.WARNING, message=message)


def lint_source(
    source: str,
    catalog: TokenCatalog | str | Path,
    margin: float = DEFAULT_TOKEN_MATCH_MARGIN,
    fix: bool = False,
) -> LintResult:
    """Run one pass over a stylesheet.

    *catalog* may be a validated catalog or the path of a tokens file. A
    catalog that cannot be loaded yields a single document-level warning and
    no other diagnostics.
    """
    if not isinstance(catalog, TokenCatalog):
        try:
            catalog = load_catalog(catalog)
        except CatalogError as exc:
            log.warning("Token catalog unavailable: %s", exc)
            return LintResult(diagnostics=[_catalog_warning(exc)], output=source)

    declarations = parse_declarations(source)
    diagnostics = lint_declarations(declarations, catalog, margin=margin, fix=fix)
    output = apply_declarations(source, declarations) if fix else source
    log.info(
        "Checked %d declaration(s) against %d categories: %d diagnostic(s)",
        len(declarations),
        len(catalog),
        len(diagnostics),
    )
    return LintResult(
        diagnostics=[_locate(source, d) for d in diagnostics],
        output=output,
    )


def lint_with_config(source: str, config: GuardConfig) -> LintResult:
    return lint_source(
        source,
        config.tokens_file,
        margin=config.token_match_margin,
        fix=config.fix,
    )
