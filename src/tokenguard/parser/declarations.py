"""Hand-written extractor for ``property: value`` declarations in a stylesheet.

Only declarations are extracted; selectors, at-rule preludes and nesting are
skipped. Offsets always refer to the original source text.

Syntax example:
    .card { margin: 0 16px; padding:4px }
    @media (min-width: 600px) { .card { gap: 8px; } }
"""

from __future__ import annotations

import re

from tokenguard.model.declaration import Declaration

__all__ = ["parse_declarations", "apply_declarations"]

_COMMENT_RE = re.compile(r"/\*.*?\*/", re.DOTALL)

# Matches a single declaration terminated by `;` or the closing brace.
_DECL_RE = re.compile(
    r"""
    (?<![\w-])
    (?P<prop>-{0,2}[A-Za-z_][A-Za-z0-9_-]*)   # property name
    (?P<between>\s*:\s*)                      # colon separator
    (?P<value>[^;{}\s](?:[^;{}]*?[^;{}\s])?)  # value, trimmed on both ends
    (?P<important>\s*!\s*(?i:important))?     # kept out of the value
    \s*(?:;|(?=\}))                           # terminator
    """,
    re.VERBOSE,
)


def _mask_comments(source: str) -> str:
    """Blank out comments while keeping every offset unchanged."""
    return _COMMENT_RE.sub(lambda m: re.sub(r"[^\n]", " ", m.group(0)), source)


def parse_declarations(source: str) -> list[Declaration]:
    """Extract declarations from *source* in document order."""
    masked = _mask_comments(source)
    declarations: list[Declaration] = []
    for match in _DECL_RE.finditer(masked):
        declarations.append(
            Declaration(
                prop=match.group("prop"),
                value=source[match.start("value"):match.end("value")],
                start=match.start("prop"),
                between=match.group("between"),
                important=match.group("important") is not None,
            )
        )
    return declarations


def apply_declarations(source: str, declarations: list[Declaration]) -> str:
    """Return *source* with every modified declaration value written back."""
    output = source
    for decl in sorted(declarations, key=lambda d: d.start, reverse=True):
        if decl.is_modified:
            output = output[: decl.value_start] + decl.value + output[decl.value_end :]
    return output
