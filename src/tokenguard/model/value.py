"""Value tree model: the nodes a single declaration value is made of.

The node kinds form a closed set. Only :class:`Word` nodes are ever
candidates for token matching; everything else is structure that must
survive re-serialization untouched.
"""

from __future__ import annotations

from collections.abc import Iterator
from dataclasses import dataclass, field
from typing import Union


@dataclass
class Word:
    """A plain literal such as ``16px``, ``0``, ``auto`` or ``+``."""

    value: str
    source_index: int

    def __str__(self) -> str:
        return self.value


@dataclass
class QuotedString:
    """A quoted string; ``value`` keeps its quotes."""

    value: str
    source_index: int

    @property
    def quote(self) -> str:
        return self.value[:1]

    def __str__(self) -> str:
        return self.value


@dataclass
class Space:
    """A run of whitespace between other nodes."""

    value: str
    source_index: int

    def __str__(self) -> str:
        return self.value


@dataclass
class Div:
    """A ``,`` or ``/`` divider."""

    value: str
    source_index: int

    def __str__(self) -> str:
        return self.value


@dataclass
class Function:
    """A function call like ``var(--x)``; an empty name is a bare group.

    ``closed`` is False when the value ended before the closing parenthesis.
    """

    value: str
    source_index: int
    nodes: list[ValueNode] = field(default_factory=list)
    closed: bool = True

    def __str__(self) -> str:
        inner = "".join(str(n) for n in self.nodes)
        return f"{self.value}({inner}" + (")" if self.closed else "")


ValueNode = Union[Word, QuotedString, Space, Div, Function]


def _walk(nodes: list[ValueNode]) -> Iterator[ValueNode]:
    for node in nodes:
        yield node
        if isinstance(node, Function):
            yield from _walk(node.nodes)


@dataclass
class ValueTree:
    """Top-level nodes of a parsed value, in source order."""

    nodes: list[ValueNode] = field(default_factory=list)

    def walk(self) -> Iterator[ValueNode]:
        """Yield every node depth first, in parse order."""
        return _walk(self.nodes)

    def words(self) -> Iterator[Word]:
        return (n for n in self.walk() if isinstance(n, Word))

    def __str__(self) -> str:
        return "".join(str(n) for n in self.nodes)
