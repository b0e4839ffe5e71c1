"""
Tests for the query token parser.

Covers both grammars and the silent dropping of empty segments.
"""

import dataclasses

import pytest

from creator.search.tokens import SearchMode, SearchToken, TokenMode, parse_tokens


class TestSimpleParsing:
    """Every segment becomes an AND token verbatim."""

    def test_none_yields_no_tokens(self):
        assert parse_tokens(None, SearchMode.SIMPLE) == []

    def test_whitespace_only_yields_no_tokens(self):
        assert parse_tokens("   ", SearchMode.SIMPLE) == []

    def test_splits_on_spaces(self):
        tokens = parse_tokens("Foo Bar", SearchMode.SIMPLE)
        assert tokens == [SearchToken("Foo"), SearchToken("Bar")]

    def test_consecutive_spaces_are_dropped(self):
        tokens = parse_tokens("  Foo    Bar ", SearchMode.SIMPLE)
        assert [t.text for t in tokens] == ["Foo", "Bar"]

    def test_prefixes_are_literal(self):
        tokens = parse_tokens("|Enemy &Config", SearchMode.SIMPLE)
        assert [t.text for t in tokens] == ["|Enemy", "&Config"]
        assert all(t.mode is TokenMode.AND for t in tokens)

    def test_tab_inside_segment_is_trimmed(self):
        tokens = parse_tokens("Foo\t Bar", SearchMode.SIMPLE)
        assert [t.text for t in tokens] == ["Foo", "Bar"]


class TestExtendedParsing:
    """Prefix-aware grammar (the default)."""

    def test_default_mode_is_extended(self):
        tokens = parse_tokens("|Enemy")
        assert tokens == [SearchToken("Enemy", TokenMode.OR)]

    def test_or_and_and_prefixes(self):
        tokens = parse_tokens("|Enemy &Config Data")
        assert tokens == [
            SearchToken("Enemy", TokenMode.OR),
            SearchToken("Config", TokenMode.AND),
            SearchToken("Data", TokenMode.AND),
        ]

    def test_bare_prefix_is_discarded(self):
        assert parse_tokens("| & |") == []

    def test_only_first_character_is_a_prefix(self):
        tokens = parse_tokens("||Enemy")
        assert tokens == [SearchToken("|Enemy", TokenMode.OR)]

    def test_prefix_in_middle_is_literal(self):
        tokens = parse_tokens("Foo|Bar")
        assert tokens == [SearchToken("Foo|Bar", TokenMode.AND)]

    def test_order_is_preserved(self):
        tokens = parse_tokens("c |b a")
        assert [t.text for t in tokens] == ["c", "b", "a"]


class TestSearchToken:

    def test_empty_text_is_invalid(self):
        assert SearchToken("").is_valid is False

    def test_tokens_are_immutable(self):
        token = SearchToken("Foo")
        with pytest.raises(dataclasses.FrozenInstanceError):
            token.text = "Bar"
