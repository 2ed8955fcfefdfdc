"""Token matching: category selection, matching, reporting and fixing."""

from tokenguard.matching.engine import find_close_matches, match_node, match_value_node
from tokenguard.matching.fix import apply_fix
from tokenguard.matching.report import build_diagnostic, node_span
from tokenguard.matching.selector import select_categories

__all__ = [
    "select_categories",
    "match_node",
    "match_value_node",
    "find_close_matches",
    "build_diagnostic",
    "node_span",
    "apply_fix",
]
