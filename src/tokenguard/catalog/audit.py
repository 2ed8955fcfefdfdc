"""Catalog audit: token keys the matcher can never reach."""

from __future__ import annotations

from tokenguard.model.catalog import TokenCatalog
from tokenguard.model.diagnostic import Diagnostic, Severity
from tokenguard.pixels import is_unitless_zero, read_px_value

RULE = "unreachable_token"


def find_unreachable_tokens(catalog: TokenCatalog) -> list[Diagnostic]:
    """Report token keys that are neither ``"0"`` nor a readable px value.

    Such keys are accepted by validation but can never match a value.
    """
    diagnostics: list[Diagnostic] = []
    for category in catalog:
        for raw_value, token_name in category.tokens.items():
            if is_unitless_zero(raw_value) or read_px_value(raw_value) is not None:
                continue
            diagnostics.append(
                Diagnostic(
                    rule=RULE,
                    severity=Severity.INFO,
                    message=(
                        f"Token {token_name} in category '{category.name}' has key "
                        f"'{raw_value}', which is not a px value or \"0\" and will never match."
                    ),
                )
            )
    return diagnostics
