# library_search/core/protocols.py
"""
Protocol interfaces for the seams between the core and its callers.

The CLI, the TUI and the tests depend on these small Protocols rather than on
LibraryIndex/SearchEngine directly, so a presentation layer can be driven by a
stub in tests.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Protocol, runtime_checkable
from typing_extensions import NotRequired, TypedDict

if TYPE_CHECKING:
    from .book import Book


# Typed structures used across components ------------------------------------

class BookRecord(TypedDict):
    """
    One catalog entry as stored in a JSON catalog file.

    Example:
      {"id": "b4", "title": "Effective Java", "author": "Joshua Bloch",
       "tags": ["java", "programming"]}
    """
    id: str
    title: str
    author: str
    tags: NotRequired[List[str]]


# Protocols ------------------------------------------------------------------

@runtime_checkable
class PrefixIndexProtocol(Protocol):
    """Anything that maps a prefix to record ids (a Trie)."""

    def insert(self, key: str, value: str) -> None:
        ...

    def suggest(self, prefix: str, limit: int = 8) -> List[str]:
        """Deduplicated ids for keys starting with `prefix`, at most `limit`."""
        ...


@runtime_checkable
class CatalogIndexProtocol(Protocol):
    """Interface of the book index used by the engine and the loaders."""

    def add_book(self, book: "Book") -> None:
        ...

    def get_by_id(self, book_id: str) -> Optional["Book"]:
        ...

    def suggest_queries(self, prefix: str, limit: int = 8) -> List[str]:
        ...

    def search(self, query: str, limit: int = 50) -> List["Book"]:
        ...
