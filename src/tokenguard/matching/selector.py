"""Category selection: which categories govern a property."""

from __future__ import annotations

from collections.abc import Iterator

from tokenguard.model.catalog import TokenCatalog, TokenCategory


def select_categories(catalog: TokenCatalog, prop: str) -> Iterator[TokenCategory]:
    """Yield, in catalog order, every category that applies to *prop*.

    *prop* must already be lowercased.
    """
    return (category for category in catalog if category.applies_to(prop))
