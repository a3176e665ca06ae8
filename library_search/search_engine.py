# search_engine.py
"""
SearchEngine - composition point for the presentation layers.

Purpose:
 - Own one explicitly built LibraryIndex (no module-level catalog)
 - Load the catalog once, in the constructor, before any query is served
 - Two entry points for a UI:
     on_text_changed(text)    -> suggestion strings (every keystroke)
     on_query_submitted(text) -> SearchOutcome (enter / picked suggestion)
 - Track suggest/search latency in Metrics
"""

from __future__ import annotations

import time
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple

from .catalog import load_catalog_file, load_sample_catalog
from .core.book import Book
from .core.library_index import LibraryIndex
from .utils.config_manager import Config
from .utils.logger_utils import get_logger
from .utils.metrics_tracker import Metrics

log = get_logger("engine")


@dataclass(frozen=True)
class SearchOutcome:
    """
    Result of one submitted query.
    A UI holds Optional[SearchOutcome]: None means nothing was searched yet,
    an outcome with no books means "no results".
    """
    query: str
    books: Tuple[Book, ...] = ()

    @property
    def is_empty(self) -> bool:
        return not self.books

    def __len__(self) -> int:
        return len(self.books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self.books)


class SearchEngine:
    def __init__(
        self,
        index: Optional[LibraryIndex] = None,
        config: Optional[Config] = None,
        metrics: Optional[Metrics] = None,
        load_sample: bool = True,
    ):
        self.config = config or Config()
        self.metrics = metrics or Metrics()
        if index is None:
            index = LibraryIndex()
            self._load(index, load_sample)
        self.index = index

    def _load(self, index: LibraryIndex, load_sample: bool) -> None:
        path = self.config.catalog_path
        if path:
            load_catalog_file(index, path)
        elif load_sample:
            load_sample_catalog(index)
        else:
            log.info("starting with an empty catalog")

    # entry points -------------------------------------------------------
    def on_text_changed(self, text: str) -> list:
        """Suggestions for the text currently in the input box."""
        text = (text or "").strip()
        if not text:
            return []
        t0 = time.perf_counter()
        out = self.index.suggest_queries(text, self.config.suggest_limit)
        self.metrics.record("suggest_time", time.perf_counter() - t0)
        log.debug("suggest %r -> %d", text, len(out))
        return out

    def on_query_submitted(self, text: str) -> SearchOutcome:
        """Run a search; always returns an outcome, possibly empty."""
        query = (text or "").strip()
        t0 = time.perf_counter()
        books = self.index.search(query, self.config.search_limit)
        self.metrics.record("search_time", time.perf_counter() - t0)
        log.debug("search %r -> %d", query, len(books))
        return SearchOutcome(query, tuple(books))

    def get_book(self, book_id: str) -> Optional[Book]:
        return self.index.get_by_id(book_id)
