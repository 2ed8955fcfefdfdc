"""Match engine: compares one value node against a token category.

A node is only evaluated when it is a :class:`Word` whose text ends in
``px`` or is exactly ``"0"``. A zero is only evaluated against categories
that define a ``"0"`` token, and only ever matches exactly.
"""

from __future__ import annotations

from collections.abc import Iterable

from tokenguard.model.catalog import TokenCategory
from tokenguard.model.match import (
    NO_MATCH,
    CloseMatch,
    CloseMatches,
    ExactMatch,
    MatchResult,
    NoMatch,
)
from tokenguard.model.value import ValueNode, Word
from tokenguard.pixels import is_comparable, is_unitless_zero, read_px_value

__all__ = ["match_node", "match_value_node", "find_close_matches"]


def find_close_matches(
    magnitude: float, category: TokenCategory, margin: float
) -> list[CloseMatch]:
    """Return tokens within *margin* of *magnitude*, nearest first.

    A diff of zero never qualifies: that value is the exact match of some
    other key. Ties keep the category's key order.
    """
    candidates: list[CloseMatch] = []
    for raw_value, token_name in category.tokens.items():
        if not is_comparable(raw_value):
            continue
        token_magnitude = read_px_value(raw_value)
        if token_magnitude is None:
            continue
        diff = abs(magnitude - token_magnitude)
        if 0 < diff <= margin:
            candidates.append(CloseMatch(token_name, raw_value, diff))
    candidates.sort(key=lambda c: c.diff)
    return candidates


def match_node(node: ValueNode, category: TokenCategory, margin: float) -> MatchResult:
    """Match a single value node against *category*.

    Returns :class:`ExactMatch` when the node text is a token key,
    :class:`CloseMatches` when tokens lie within *margin* (only when
    ``margin > 0``), otherwise :data:`NO_MATCH`.
    """
    if margin < 0:
        raise ValueError(f"margin must be non-negative, got {margin!r}")
    if not isinstance(node, Word):
        return NO_MATCH

    literal = node.value
    zero = is_unitless_zero(literal)
    if not is_comparable(literal):
        return NO_MATCH
    if zero and not category.has_zero_token():
        return NO_MATCH

    magnitude = read_px_value(literal)
    if not zero and magnitude is None:
        return NO_MATCH

    if literal in category.tokens:
        return ExactMatch(category.name, category.tokens[literal], literal)

    if magnitude is None or margin == 0:
        return NO_MATCH

    candidates = find_close_matches(magnitude, category, margin)
    if not candidates:
        return NO_MATCH
    return CloseMatches(category.name, literal, tuple(candidates))


def match_value_node(
    node: ValueNode, categories: Iterable[TokenCategory], margin: float
) -> MatchResult:
    """Match *node* against *categories* in order.

    The first category that matches decides the result, exact or close;
    later categories are not consulted.
    """
    for category in categories:
        result = match_node(node, category, margin)
        if not isinstance(result, NoMatch):
            return result
    return NO_MATCH
