"""
library_search

Prefix autocomplete and substring search over an in-memory book catalog.
"""

from .core import Book, LibraryIndex, Trie
from .catalog import CatalogError, SAMPLE_BOOKS, load_catalog_file, load_sample_catalog
from .search_engine import SearchEngine, SearchOutcome

__all__ = [
    "Book",
    "LibraryIndex",
    "Trie",
    "CatalogError",
    "SAMPLE_BOOKS",
    "load_catalog_file",
    "load_sample_catalog",
    "SearchEngine",
    "SearchOutcome",
]

__version__ = "0.1.0"
