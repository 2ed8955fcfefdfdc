"""Token catalog loading, validation and auditing."""

from tokenguard.catalog.audit import find_unreachable_tokens
from tokenguard.catalog.errors import (
    CatalogError,
    CatalogMalformed,
    CatalogShapeError,
    CatalogUnreadable,
)
from tokenguard.catalog.loader import load_catalog, parse_catalog
from tokenguard.catalog.validator import validate_catalog, validate_category

__all__ = [
    "CatalogError",
    "CatalogUnreadable",
    "CatalogMalformed",
    "CatalogShapeError",
    "load_catalog",
    "parse_catalog",
    "validate_catalog",
    "validate_category",
    "find_unreachable_tokens",
]
