"""Message templates for token diagnostics."""

from __future__ import annotations

RULE_NAME = "design-token-guard/enforce-tokens"


def exact_match(token_name: str, original_value: str, prop: str) -> str:
    return f"Design token {token_name} expected for property {prop}: {original_value}"


def close_match(
    token_name: str, token_value: str, original_value: str, other_suggestions: str
) -> str:
    message = f"Consider token: {token_name} ('{token_value}') for current value \"{original_value}\"."
    if other_suggestions:
        message += f" Other close matches: {other_suggestions}."
    return message


def catalog_error(reason: str) -> str:
    return f"Error loading or parsing custom tokens file: {reason}"
