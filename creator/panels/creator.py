"""
Creator Panel - Headless controller behind the creator window.

A presentation layer (editor window, terminal UI, test) renders the query
field, a clear control and the match list, and translates user input into:

- set_query(text) when the query field changes
- clear() when the clear control is used
- commit(entry) when an entry in the match list is chosen

After each render pass it calls consume_focus_request() and moves focus to
the query field when that returns True.
"""

from typing import Optional, Sequence

from loguru import logger

from creator.search.session import FilterSession
from creator.search.tokens import SearchMode
from creator.services.catalog import CatalogEntry
from creator.services.sink import AssetSink, CommitResult

NOT_FOUND_LABEL = "Not found."


class CreatorPanel:
    """
    One open creator window.

    Opening the panel starts a FilterSession over the catalog and asks for
    focus on the query field. Committing an entry closes the panel and hands
    the entry to the sink.
    """

    def __init__(
        self,
        catalog: Sequence[CatalogEntry],
        sink: AssetSink,
        destination_directory: Optional[str] = None,
        mode: SearchMode = SearchMode.EXTENDED,
        match_display_label: bool = False,
    ):
        self.sink = sink
        self.destination_directory = destination_directory
        self.session = FilterSession(catalog, mode=mode, match_display_label=match_display_label)
        self.is_open = True

        self.session.request_focus()
        logger.debug(f"Creator panel opened with {len(self.session.catalog)} entries")

    def set_query(self, text: Optional[str]) -> None:
        self.session.set_query(text)

    def clear(self) -> None:
        self.session.clear()

    def current_matches(self) -> tuple:
        return self.session.current_matches()

    def consume_focus_request(self) -> bool:
        return self.session.consume_focus_request()

    @property
    def empty_label(self) -> Optional[str]:
        """Label to show in place of the match list, if it is empty."""
        return None if self.session.has_matches else NOT_FOUND_LABEL

    def commit(self, entry: CatalogEntry) -> CommitResult:
        """
        Create the selected entry and close the panel.

        Args:
            entry: Catalog entry chosen by the user

        Returns:
            The sink's CommitResult, unchanged

        Raises:
            RuntimeError: If the panel was already closed
            ValueError: If entry is not part of this panel's catalog
        """
        if not self.is_open:
            raise RuntimeError("Creator panel is closed")
        if entry not in self.session.catalog:
            raise ValueError(f"{entry.full_name} is not in the catalog")

        self.close()
        result = self.sink.create_and_persist(entry, self.destination_directory)
        if not result.success:
            logger.warning(f"Creating {entry.full_name} failed: {result.error}")
        return result

    def close(self) -> None:
        """End the session without creating anything."""
        if self.is_open:
            self.is_open = False
            logger.debug("Creator panel closed")
