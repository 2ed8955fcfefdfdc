"""Tests for the value tokenizer."""

import pytest

from tokenguard.model.value import Div, Function, QuotedString, Space, ValueTree, Word
from tokenguard.parser import ParseError, parse_value


# ---------------------------------------------------------------------------
# Node kinds and offsets
# ---------------------------------------------------------------------------


class TestWords:
    def test_single_word(self):
        tree = parse_value("16px")
        assert tree.nodes == [Word("16px", 0)]

    def test_shorthand(self):
        tree = parse_value("0 16px")
        assert tree.nodes == [Word("0", 0), Space(" ", 1), Word("16px", 2)]

    def test_empty_value(self):
        assert parse_value("") == ValueTree([])


class TestFunctions:
    def test_var(self):
        tree = parse_value("var(--space-4)")
        assert tree.nodes == [Function("var", 0, [Word("--space-4", 4)])]

    def test_nested_words_keep_value_offsets(self):
        tree = parse_value("4px calc(100% - 8px)")
        fn = tree.nodes[2]
        assert isinstance(fn, Function)
        assert fn.value == "calc"
        assert fn.source_index == 4
        words = [n for n in fn.nodes if isinstance(n, Word)]
        assert [(w.value, w.source_index) for w in words] == [
            ("100%", 9),
            ("-", 14),
            ("8px", 16),
        ]

    def test_bare_parentheses(self):
        tree = parse_value("(4px)")
        assert tree.nodes == [Function("", 0, [Word("4px", 1)])]


class TestSeparators:
    def test_comma_and_slash(self):
        tree = parse_value("4px/8px,2px")
        assert tree.nodes == [
            Word("4px", 0),
            Div("/", 3),
            Word("8px", 4),
            Div(",", 7),
            Word("2px", 8),
        ]

    def test_quoted_string(self):
        tree = parse_value('"a b" 4px')
        assert isinstance(tree.nodes[0], QuotedString)
        assert tree.nodes[0].value == '"a b"'
        assert tree.nodes[0].quote == '"'
        assert tree.nodes[2] == Word("4px", 6)


# ---------------------------------------------------------------------------
# Walking and serialization
# ---------------------------------------------------------------------------


class TestWalk:
    def test_depth_first_parse_order(self):
        tree = parse_value("1px f(2px g(3px)) 4px")
        assert [w.value for w in tree.words()] == ["1px", "2px", "3px", "4px"]


class TestSerialization:
    @pytest.mark.parametrize(
        "source",
        [
            "0 16px",
            "  4px   8px ",
            "calc( 100% - 8px )",
            "rgba(0, 0, 0, 0.5) 0 2px 4px",
            "url('a b.png') no-repeat",
            "1px solid var(--c, #fff)",
        ],
    )
    def test_round_trip(self, source):
        assert str(parse_value(source)) == source

    def test_modified_word_serializes(self):
        tree = parse_value("0 16px")
        tree.nodes[2].value = "var(--s)"
        assert str(tree) == "0 var(--s)"


class TestUnclosedFunctions:
    def test_unclosed_at_end(self):
        tree = parse_value("8px calc(16px")
        fn = tree.nodes[2]
        assert fn == Function("calc", 4, [Word("16px", 9)], closed=False)
        assert [w.value for w in tree.words()] == ["8px", "16px"]

    def test_nested_unclosed(self):
        tree = parse_value("calc(4px + min(2px")
        assert [w.value for w in tree.words()] == ["4px", "+", "2px"]

    @pytest.mark.parametrize("source", ["calc(4px", "8px calc(16px", "a(b(c", "f(1px) g(2px"])
    def test_round_trip(self, source):
        assert str(parse_value(source)) == source

    def test_closed_function_flag(self):
        fn = parse_value("var(--x)").nodes[0]
        assert fn.closed is True


class TestParseErrors:
    def test_stray_closing_paren(self):
        with pytest.raises(ParseError):
            parse_value("4px)")
