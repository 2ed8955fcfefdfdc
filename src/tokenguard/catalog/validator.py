"""Catalog validator: turns loaded JSON into a typed TokenCatalog.

Validation happens once, at the boundary. The whole catalog is rejected as
soon as one category is malformed so that a pass never runs against a
partial catalog.
"""

from __future__ import annotations

from collections.abc import Mapping

from tokenguard.catalog.errors import CatalogShapeError
from tokenguard.model.catalog import TokenCatalog, TokenCategory

__all__ = ["validate_catalog", "validate_category"]


def validate_category(name: str, raw: object) -> TokenCategory:
    """Validate one category entry and build its TokenCategory."""
    if not isinstance(raw, Mapping):
        raise CatalogShapeError(
            f"Token category '{name}' must be an object.", category_name=name
        )
    if "properties" not in raw or "tokens" not in raw:
        raise CatalogShapeError(
            f"Token category '{name}' is missing 'properties' or 'tokens' field.",
            category_name=name,
        )

    properties = raw["properties"]
    if (
        not isinstance(properties, list)
        or not properties
        or not all(isinstance(p, str) for p in properties)
    ):
        raise CatalogShapeError(
            f"Token category '{name}' must declare 'properties' as a non-empty list of strings.",
            category_name=name,
        )

    tokens = raw["tokens"]
    if not isinstance(tokens, Mapping) or not all(
        isinstance(k, str) and isinstance(v, str) for k, v in tokens.items()
    ):
        raise CatalogShapeError(
            f"Token category '{name}' must declare 'tokens' as an object of strings.",
            category_name=name,
        )

    return TokenCategory(
        name=name,
        properties=tuple(p.lower() for p in properties),
        tokens=dict(tokens),
    )


def validate_catalog(raw: object) -> TokenCatalog:
    """Validate a parsed catalog object.

    Raises :class:`CatalogShapeError` if the top level is not an object or
    any category is malformed. An empty object is a valid, empty catalog.
    """
    if not isinstance(raw, Mapping):
        raise CatalogShapeError("Tokens file must be a JSON object.")
    categories = {str(name): validate_category(str(name), entry) for name, entry in raw.items()}
    return TokenCatalog(categories=categories)
