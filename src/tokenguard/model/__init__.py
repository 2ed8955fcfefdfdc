"""tokenguard model layer -- public type re-exports."""

from tokenguard.model.catalog import TokenCatalog, TokenCategory
from tokenguard.model.declaration import Declaration
from tokenguard.model.diagnostic import Diagnostic, Severity
from tokenguard.model.match import (
    NO_MATCH,
    CloseMatch,
    CloseMatches,
    ExactMatch,
    MatchResult,
    NoMatch,
)
from tokenguard.model.value import (
    Div,
    Function,
    QuotedString,
    Space,
    ValueNode,
    ValueTree,
    Word,
)

__all__ = [
    # catalog
    "TokenCategory",
    "TokenCatalog",
    # declaration
    "Declaration",
    # value
    "Word",
    "QuotedString",
    "Space",
    "Div",
    "Function",
    "ValueNode",
    "ValueTree",
    # match
    "NoMatch",
    "NO_MATCH",
    "ExactMatch",
    "CloseMatch",
    "CloseMatches",
    "MatchResult",
    # diagnostic
    "Severity",
    "Diagnostic",
]
