"""Catalog loader: reads a JSON tokens file and validates it."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from tokenguard.catalog.errors import CatalogMalformed, CatalogUnreadable
from tokenguard.catalog.validator import validate_catalog
from tokenguard.model.catalog import TokenCatalog

__all__ = ["load_catalog", "parse_catalog"]

log = logging.getLogger(__name__)


def parse_catalog(text: str) -> TokenCatalog:
    """Parse catalog JSON text and validate its shape."""
    try:
        raw = json.loads(text)
    except json.JSONDecodeError as exc:
        raise CatalogMalformed(f"Invalid JSON in tokens file: {exc}") from exc
    return validate_catalog(raw)


def load_catalog(path: str | Path) -> TokenCatalog:
    """Load and validate the catalog stored at *path*."""
    resolved = Path(path).resolve()
    if not resolved.is_file():
        raise CatalogUnreadable(
            f"Custom tokens file not found at: {resolved}", path=str(resolved)
        )
    try:
        text = resolved.read_text(encoding="utf-8")
    except (OSError, UnicodeDecodeError) as exc:
        raise CatalogUnreadable(
            f"Could not read tokens file {resolved}: {exc}", path=str(resolved)
        ) from exc
    catalog = parse_catalog(text)
    log.debug("Loaded %d token categories from %s", len(catalog), resolved)
    return catalog
