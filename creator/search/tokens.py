"""
Token Parser - Split a free-text query into typed search tokens.

Two grammars are supported:

  simple    "Foo Bar"        → AND(Foo), AND(Bar)
  extended  "|Enemy &Config" → OR(Enemy), AND(Config)

In extended mode a leading "|" marks an OR-clause and a leading "&" an
explicit AND-clause; unprefixed segments are AND-clauses. Segments that are
empty after trimming (or after stripping the prefix) are dropped, since
half-typed queries are the normal case while the user is typing.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

SEGMENT_SEPARATOR = " "
OR_PREFIX = "|"
AND_PREFIX = "&"


class TokenMode(Enum):
    AND = "and"
    OR = "or"


class SearchMode(Enum):
    """Which query grammar parse_tokens() applies."""
    SIMPLE = "simple"
    EXTENDED = "extended"


@dataclass(frozen=True)
class SearchToken:
    """One atomic query unit."""
    text: str
    mode: TokenMode = TokenMode.AND

    @property
    def is_valid(self) -> bool:
        return len(self.text) > 0


def parse_tokens(text: Optional[str], mode: SearchMode = SearchMode.EXTENDED) -> list[SearchToken]:
    """
    Parse raw query text into an ordered list of tokens.

    Args:
        text: Raw query text (None and "" are both accepted)
        mode: Query grammar to apply

    Returns:
        List of valid tokens in query order. An empty list means
        "no filter" and matches every entry.
    """
    if not text:
        return []

    tokens = []
    for segment in text.split(SEGMENT_SEPARATOR):
        segment = segment.strip()
        if not segment:
            continue

        if mode is SearchMode.EXTENDED:
            token = _parse_extended_segment(segment)
        else:
            token = SearchToken(text=segment)

        if token.is_valid:
            tokens.append(token)

    return tokens


def _parse_extended_segment(segment: str) -> SearchToken:
    """Read the optional "|" / "&" prefix of a trimmed segment."""
    if segment.startswith(OR_PREFIX):
        return SearchToken(text=segment[1:], mode=TokenMode.OR)
    if segment.startswith(AND_PREFIX):
        return SearchToken(text=segment[1:], mode=TokenMode.AND)
    return SearchToken(text=segment, mode=TokenMode.AND)
