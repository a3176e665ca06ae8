# library_index.py
"""
LibraryIndex - keeps the books and three prefix tries for fast suggestions.

Public API:
  - add_book(book) -> None
  - get_by_id(book_id) -> Optional[Book]
  - suggest_queries(prefix, limit) -> List[str]   (whole titles/authors/tags)
  - search(query, limit) -> List[Book]            (substring match)
  - books(), stats(), len(index), book_id in index

Tries only hold ids; the id -> Book dict is the single owner of the records.
No locking: load everything first, then query from as many readers as needed.
"""

from __future__ import annotations

from typing import Dict, List, Optional

from .book import Book
from .normalizer import normalize_key, normalize_query
from .trie import Trie
from ..utils.logger_utils import get_logger

log = get_logger("index")


class LibraryIndex:
    def __init__(self) -> None:
        # dict keeps insertion order, which is the order search() reports in
        self._books: Dict[str, Book] = {}
        self._title_trie = Trie()
        self._author_trie = Trie()
        self._tag_trie = Trie()

    # loading ---------------------------------------------------------
    def add_book(self, book: Book) -> None:
        """
        Store `book` and fan it out into the title, author and tag tries.
        A repeated id replaces the stored record (last write wins); the old
        trie entries stay and now resolve to the new record.
        """
        if book.id in self._books:
            log.warning("book id %r re-added, replacing stored record", book.id)
        self._books[book.id] = book
        self._title_trie.insert(book.title, book.id)
        self._author_trie.insert(book.author, book.id)
        for tag in book.tags:
            self._tag_trie.insert(tag, book.id)
        log.debug("indexed %s (%d tags)", book.id, len(book.tags))

    def get_by_id(self, book_id: str) -> Optional[Book]:
        return self._books.get(book_id)

    # suggestions -----------------------------------------------------
    def suggest_queries(self, prefix: str, limit: int = 8) -> List[str]:
        """
        Whole field values completing `prefix`, title > author > tag.
        Stops as soon as `limit` distinct strings are collected.
        """
        if limit <= 0:
            return []
        out: Dict[str, None] = {}  # ordered set

        for book_id in self._title_trie.suggest(prefix, limit):
            book = self._books.get(book_id)
            if book is not None:
                out[book.title] = None
            if len(out) >= limit:
                return list(out)

        for book_id in self._author_trie.suggest(prefix, limit):
            book = self._books.get(book_id)
            if book is not None:
                out[book.author] = None
            if len(out) >= limit:
                return list(out)

        lowered = normalize_key(prefix)
        for book_id in self._tag_trie.suggest(prefix, limit):
            book = self._books.get(book_id)
            if book is not None:
                tag = self._first_tag_with_prefix(book, lowered)
                if tag is not None:
                    out[tag] = None
            if len(out) >= limit:
                return list(out)

        return list(out)[:limit]

    @staticmethod
    def _first_tag_with_prefix(book: Book, lowered_prefix: str) -> Optional[str]:
        for tag in book.tags:
            if normalize_key(tag).startswith(lowered_prefix):
                return tag
        return None

    # search ----------------------------------------------------------
    def search(self, query: str, limit: int = 50) -> List[Book]:
        """
        Books whose title, author or any tag contains `query`
        (trimmed, case-insensitive). Catalog order, no ranking.
        """
        q = normalize_query(query)
        if not q or limit <= 0:
            return []

        results: List[Book] = []
        for book in self._books.values():
            if self._matches(book, q):
                results.append(book)
                if len(results) >= limit:
                    break
        return results

    @staticmethod
    def _matches(book: Book, q: str) -> bool:
        if q in normalize_key(book.title) or q in normalize_key(book.author):
            return True
        return any(q in normalize_key(tag) for tag in book.tags)

    # inspection ------------------------------------------------------
    def books(self) -> List[Book]:
        """All books in catalog order (a new list each call)."""
        return list(self._books.values())

    def stats(self) -> Dict[str, int]:
        return {
            "books": len(self._books),
            "titles": self._title_trie.size(),
            "authors": self._author_trie.size(),
            "tags": self._tag_trie.size(),
        }

    def __len__(self) -> int:
        return len(self._books)

    def __contains__(self, book_id: str) -> bool:
        return book_id in self._books
