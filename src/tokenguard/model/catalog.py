"""Token catalog model: categories of design tokens keyed by raw value."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field


@dataclass(frozen=True)
class TokenCategory:
    """A named group of properties sharing one set of tokens.

    ``tokens`` maps a raw value (``"16px"`` or ``"0"``) to the token that
    should replace it, e.g. ``"var(--spacing-4)"``. Key order is the order
    the catalog declared them in and decides ties between close matches.
    """

    name: str
    properties: tuple[str, ...]
    tokens: Mapping[str, str] = field(default_factory=dict)

    def applies_to(self, prop: str) -> bool:
        return prop in self.properties

    def has_zero_token(self) -> bool:
        return "0" in self.tokens


@dataclass(frozen=True)
class TokenCatalog:
    """An ordered, read-only collection of token categories."""

    categories: Mapping[str, TokenCategory] = field(default_factory=dict)

    def __iter__(self) -> Iterator[TokenCategory]:
        return iter(self.categories.values())

    def __len__(self) -> int:
        return len(self.categories)

    def __getitem__(self, name: str) -> TokenCategory:
        return self.categories[name]

    def __contains__(self, name: object) -> bool:
        return name in self.categories

    @property
    def is_empty(self) -> bool:
        return not self.categories
