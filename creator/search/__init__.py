"""
Search package - Query tokenization and catalog filtering.

Queries are split into AND/OR tokens and evaluated against catalog entries
by case-insensitive substring containment. FilterSession keeps the
interactive state (query text, match list, focus request).
"""

from .matcher import filter_entries, is_match
from .session import FilterSession
from .tokens import SearchMode, SearchToken, TokenMode, parse_tokens

__all__ = [
    "FilterSession",
    "SearchMode",
    "SearchToken",
    "TokenMode",
    "filter_entries",
    "is_match",
    "parse_tokens",
]
