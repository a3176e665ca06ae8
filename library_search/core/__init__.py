"""
library_search.core

The indexing and query engine.
Contains:
 - the prefix trie (Trie)
 - the catalog record (Book)
 - the title/author/tag index with suggestion merge and substring search (LibraryIndex)
"""

from .book import Book
from .trie import Trie, TrieNode
from .library_index import LibraryIndex
from .normalizer import normalize_key, normalize_query

__all__ = [
    "Book",
    "Trie",
    "TrieNode",
    "LibraryIndex",
    "normalize_key",
    "normalize_query",
]
