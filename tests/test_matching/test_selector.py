"""Tests for category selection."""

from tokenguard.catalog import validate_catalog
from tokenguard.matching import select_categories


def _catalog():
    return validate_catalog(
        {
            "spacing": {"properties": ["margin", "gap"], "tokens": {"4px": "--s1"}},
            "radius": {"properties": ["border-radius"], "tokens": {"4px": "--r1"}},
            "layout": {"properties": ["gap", "width"], "tokens": {"8px": "--l2"}},
        }
    )


class TestSelectCategories:
    def test_single_category(self):
        names = [c.name for c in select_categories(_catalog(), "margin")]
        assert names == ["spacing"]

    def test_catalog_order(self):
        names = [c.name for c in select_categories(_catalog(), "gap")]
        assert names == ["spacing", "layout"]

    def test_unknown_property(self):
        assert list(select_categories(_catalog(), "color")) == []

    def test_property_must_be_lowercased_by_caller(self):
        assert list(select_categories(_catalog(), "MARGIN")) == []
