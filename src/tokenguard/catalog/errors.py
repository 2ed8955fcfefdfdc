"""Catalog error types."""

from __future__ import annotations


class CatalogError(Exception):
    """Base class for failures that prevent a catalog from being used."""


class CatalogUnreadable(CatalogError):
    """Raised when the catalog file is missing or cannot be read."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)


class CatalogMalformed(CatalogError):
    """Raised when catalog content is not valid JSON or has the wrong shape."""


class CatalogShapeError(CatalogMalformed):
    """Raised when a single category is missing or misdeclares its fields."""

    def __init__(self, message: str, category_name: str | None = None):
        self.category_name = category_name
        super().__init__(message)
