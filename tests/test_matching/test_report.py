"""Tests for diagnostic building."""

from tokenguard.matching import build_diagnostic, node_span
from tokenguard.matching.messages import RULE_NAME
from tokenguard.model.declaration import Declaration
from tokenguard.model.diagnostic import Severity
from tokenguard.model.match import NO_MATCH, CloseMatch, CloseMatches, ExactMatch
from tokenguard.model.value import Word


def _decl():
    # ".a { margin: 0 16px; }" -> the declaration starts at offset 5
    return Declaration(prop="margin", value="0 16px", start=5, between=": ")


class TestNodeSpan:
    def test_span_covers_literal(self):
        source = ".a { margin: 0 16px; }"
        start, end = node_span(Word("16px", 2), _decl())
        assert source[start:end] == "16px"

    def test_span_uses_original_property_text(self):
        source = ".a { MARGIN:16px; }"
        decl = Declaration(prop="MARGIN", value="16px", start=5, between=":")
        start, end = node_span(Word("16px", 0), decl)
        assert source[start:end] == "16px"


class TestExactDiagnostic:
    def test_exact(self):
        result = ExactMatch("spacing", "var(--s-4)", "16px")
        diag = build_diagnostic(result, Word("16px", 2), _decl(), "margin")
        assert diag.severity is Severity.ERROR
        assert diag.rule == RULE_NAME
        assert diag.message == "Design token var(--s-4) expected for property margin: 16px"
        assert (diag.start_offset, diag.end_offset) == (15, 19)
        assert diag.fix == "var(--s-4)"
        assert diag.prop == "margin"


class TestCloseDiagnostic:
    def test_single_candidate(self):
        result = CloseMatches("spacing", "16px", (CloseMatch("--a", "14px", 2.0),))
        diag = build_diagnostic(result, Word("16px", 2), _decl(), "margin")
        assert diag.severity is Severity.WARNING
        assert diag.message == "Consider token: --a ('14px') for current value \"16px\"."

    def test_other_candidates_listed(self):
        result = CloseMatches(
            "spacing",
            "16px",
            (
                CloseMatch("--a", "14px", 2.0),
                CloseMatch("--b", "18px", 2.0),
                CloseMatch("--c", "17.5px", 1.5),
            ),
        )
        diag = build_diagnostic(result, Word("16px", 2), _decl(), "margin")
        assert diag.message == (
            "Consider token: --a ('14px') for current value \"16px\"."
            " Other close matches: --b ('18px'), --c ('17.5px')."
        )
        assert diag.fix == "--a"


class TestNoMatchDiagnostic:
    def test_none(self):
        assert build_diagnostic(NO_MATCH, Word("16px", 2), _decl(), "margin") is None
