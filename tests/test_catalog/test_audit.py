"""Tests for the unreachable-token audit."""

from tokenguard.catalog import find_unreachable_tokens, validate_catalog
from tokenguard.model.diagnostic import Severity


class TestFindUnreachableTokens:
    def test_clean_catalog(self):
        catalog = validate_catalog(
            {"s": {"properties": ["margin"], "tokens": {"0": "--z", "4px": "--a"}}}
        )
        assert find_unreachable_tokens(catalog) == []

    def test_reports_non_px_keys(self):
        catalog = validate_catalog(
            {
                "s": {
                    "properties": ["margin"],
                    "tokens": {"1rem": "--r", "4px": "--a", "abcpx": "--x"},
                }
            }
        )
        diags = find_unreachable_tokens(catalog)
        assert len(diags) == 2
        assert all(d.severity is Severity.INFO for d in diags)
        assert "'1rem'" in diags[0].message
        assert "--x" in diags[1].message
        assert diags[0].rule == "unreachable_token"
