"""
Match Evaluator - Decide whether a catalog entry satisfies a token list.

Matching is case-insensitive substring containment against the entry's
full name. OR-clauses are checked first: any hit is an immediate match.
Otherwise every AND-clause must be contained. There is no scoring; callers
get a strict match / no-match partition in catalog order.
"""

from typing import Iterable, Sequence

from .tokens import SearchToken, TokenMode


def _contains(haystack: str | None, needle: str) -> bool:
    if not haystack:
        return False
    return needle.lower() in haystack.lower()


def _token_hit(entry, token: SearchToken, match_display_label: bool) -> bool:
    if _contains(entry.full_name, token.text):
        return True
    return match_display_label and _contains(entry.display_label, token.text)


def is_match(entry, tokens: Sequence[SearchToken], match_display_label: bool = False) -> bool:
    """
    Evaluate one entry against the parsed query.

    Args:
        entry: CatalogEntry (only full_name and display_label are read)
        tokens: Output of parse_tokens()
        match_display_label: Also accept hits on the entry's display label

    Returns:
        True if the entry belongs in the match list
    """
    if not tokens:
        return True

    if not entry.full_name:
        return False

    or_tokens = [t for t in tokens if t.mode is TokenMode.OR]
    and_tokens = [t for t in tokens if t.mode is TokenMode.AND]

    for token in or_tokens:
        if _token_hit(entry, token, match_display_label):
            return True

    # OR-only query with no hit: nothing left to satisfy
    if not and_tokens:
        return False

    return all(_token_hit(entry, token, match_display_label) for token in and_tokens)


def filter_entries(entries: Iterable, tokens: Sequence[SearchToken], match_display_label: bool = False) -> list:
    """Return the entries matching tokens, preserving their order."""
    if not tokens:
        return list(entries)
    return [entry for entry in entries if is_match(entry, tokens, match_display_label)]
