"""Diagnostic builder: turns match results into located diagnostics."""

from __future__ import annotations

from tokenguard.matching import messages
from tokenguard.model.declaration import Declaration
from tokenguard.model.diagnostic import Diagnostic, Severity
from tokenguard.model.match import CloseMatches, ExactMatch, MatchResult
from tokenguard.model.value import Word

__all__ = ["build_diagnostic", "node_span"]


def node_span(node: Word, declaration: Declaration, literal: str | None = None) -> tuple[int, int]:
    """Return the document offsets covering *node*'s literal text.

    The span starts at ``declaration.start + len(prop) + len(between) +
    node.source_index`` and covers exactly the literal.
    """
    text = node.value if literal is None else literal
    start = (
        declaration.start
        + len(declaration.prop)
        + len(declaration.between)
        + node.source_index
    )
    return start, start + len(text)


def build_diagnostic(
    result: MatchResult, node: Word, declaration: Declaration, prop: str
) -> Diagnostic | None:
    """Build the diagnostic for *result*, or None when nothing matched.

    *prop* is the lowercased property name used in messages.
    """
    if isinstance(result, ExactMatch):
        start, end = node_span(node, declaration, result.literal)
        return Diagnostic(
            rule=messages.RULE_NAME,
            severity=Severity.ERROR,
            message=messages.exact_match(result.token_name, result.literal, prop),
            start_offset=start,
            end_offset=end,
            prop=prop,
            fix=result.token_name,
        )
    if isinstance(result, CloseMatches):
        start, end = node_span(node, declaration, result.literal)
        best = result.best
        others = ", ".join(f"{m.token_name} ('{m.raw_value}')" for m in result.others)
        return Diagnostic(
            rule=messages.RULE_NAME,
            severity=Severity.WARNING,
            message=messages.close_match(best.token_name, best.raw_value, result.literal, others),
            start_offset=start,
            end_offset=end,
            prop=prop,
            fix=best.token_name,
        )
    return None
