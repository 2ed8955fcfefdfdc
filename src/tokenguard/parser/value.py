"""Lark Transformer that converts a value parse tree into a ValueTree."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import cast

from lark import Lark, Token, Transformer
from lark.exceptions import LarkError

from tokenguard.model.value import (
    Div,
    Function,
    QuotedString,
    Space,
    ValueNode,
    ValueTree,
    Word,
)
from tokenguard.parser.errors import ParseError

GRAMMAR_PATH = Path(__file__).parent / "value.lark"


class ValueTransformer(Transformer):  # type: ignore[type-arg]
    """Transform a Lark parse tree into value nodes carrying source offsets."""

    def word(self, items: list[Token]) -> Word:
        return Word(str(items[0]), items[0].start_pos)

    def string(self, items: list[Token]) -> QuotedString:
        return QuotedString(str(items[0]), items[0].start_pos)

    def space(self, items: list[Token]) -> Space:
        return Space(str(items[0]), items[0].start_pos)

    def div(self, items: list[Token]) -> Div:
        return Div(str(items[0]), items[0].start_pos)

    def function(self, items: list[object]) -> Function:
        opener = cast(Token, items[0])
        rest = items[1:]
        last = rest[-1] if rest else None
        closed = isinstance(last, Token) and last.type == "RPAR"
        nodes = cast("list[ValueNode]", rest[:-1] if closed else rest)
        return Function(str(opener)[:-1], opener.start_pos, list(nodes), closed=closed)

    def start(self, items: list[ValueNode]) -> ValueTree:
        return ValueTree(list(items))


@lru_cache(maxsize=1)
def _parser() -> Lark:
    return Lark(GRAMMAR_PATH.read_text(), parser="lalr", start="start")


def parse_value(source: str) -> ValueTree:
    """Parse a declaration value into a ValueTree.

    ``str(parse_value(s)) == s`` for every input that parses.
    """
    try:
        tree = _parser().parse(source)
    except LarkError as e:
        offset = getattr(e, "pos_in_stream", None)
        raise ParseError(f"Cannot parse value {source!r}: {e}", offset=offset) from e
    return ValueTransformer().transform(tree)
