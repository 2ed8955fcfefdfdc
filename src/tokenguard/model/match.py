"""Match results: the outcome of checking one value node against a category."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Union


@dataclass(frozen=True)
class NoMatch:
    """The node is inapplicable or nothing in the category is near it."""


@dataclass(frozen=True)
class ExactMatch:
    category: str
    token_name: str
    literal: str


@dataclass(frozen=True)
class CloseMatch:
    """One candidate token within the margin of the inspected value."""

    token_name: str
    raw_value: str
    diff: float


@dataclass(frozen=True)
class CloseMatches:
    """Candidates sorted by ascending ``diff``; the first is the suggestion."""

    category: str
    literal: str
    candidates: tuple[CloseMatch, ...]

    @property
    def best(self) -> CloseMatch:
        return self.candidates[0]

    @property
    def others(self) -> tuple[CloseMatch, ...]:
        return self.candidates[1:]


MatchResult = Union[NoMatch, ExactMatch, CloseMatches]

NO_MATCH = NoMatch()
