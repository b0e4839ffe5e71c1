"""
Filter Session - Interactive search state for one creator window.

Owns the query text, the derived match list and a pending focus request.
The match list is always recomputed in full from (catalog, query); it is
never patched incrementally.
"""

from typing import Optional, Sequence

from loguru import logger

from .matcher import filter_entries
from .tokens import SearchMode, parse_tokens


class FilterSession:
    """
    Query state over a fixed, pre-sorted catalog.

    Methods:
        set_query(text): Replace the query and re-filter if it changed
        clear(): Reset the query and request focus on the query field
        current_matches(): Snapshot of the matching entries
    """

    def __init__(
        self,
        catalog: Sequence,
        mode: SearchMode = SearchMode.EXTENDED,
        match_display_label: bool = False,
    ):
        self._catalog = tuple(catalog)
        self.mode = mode
        self.match_display_label = match_display_label

        self._query: Optional[str] = None
        self._matches: tuple = self._catalog
        self._focus_pending = False

    @property
    def query(self) -> Optional[str]:
        return self._query

    @property
    def catalog(self) -> tuple:
        return self._catalog

    @property
    def has_matches(self) -> bool:
        return len(self._matches) > 0

    @property
    def focus_pending(self) -> bool:
        return self._focus_pending

    def set_query(self, text: Optional[str]) -> None:
        """
        Replace the query text.

        Re-runs the parser and evaluator over the whole catalog when the
        text differs from the current query; identical text is a no-op.
        """
        if text == self._query:
            return

        self._query = text
        self._apply_search()

    def clear(self) -> None:
        """Empty the query and ask for focus to return to the query field."""
        self.set_query("")
        self.request_focus()

    def current_matches(self) -> tuple:
        """
        Get the current match list.

        Returns:
            Tuple of entries in catalog order, valid until the next
            set_query() / clear() call
        """
        return self._matches

    def request_focus(self) -> None:
        self._focus_pending = True

    def consume_focus_request(self) -> bool:
        """Return True once per focus request, then False."""
        pending = self._focus_pending
        self._focus_pending = False
        return pending

    def _apply_search(self):
        tokens = parse_tokens(self._query, self.mode)
        self._matches = tuple(filter_entries(self._catalog, tokens, self.match_display_label))
        logger.debug(
            f"Query {self._query!r} parsed into {len(tokens)} token(s), "
            f"{len(self._matches)}/{len(self._catalog)} entries match"
        )
