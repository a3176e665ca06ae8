# catalog.py - loads books into a LibraryIndex

# Two sources:
# - the built-in sample set (five reference books, used by the CLI/TUI when no file is configured)
# - a JSON catalog file: an array of {"id", "title", "author", "tags"?} objects

import json
from pathlib import Path
from typing import Iterable, List, Union

from .core.book import Book
from .core.protocols import CatalogIndexProtocol
from .utils.logger_utils import Log, get_logger

log = get_logger("catalog")

SAMPLE_BOOKS = (
    Book("b1", "Introduction to Algorithms", "Thomas H. Cormen", ("algorithms", "cs", "textbook")),
    Book("b2", "Clean Code", "Robert C. Martin", ("programming", "software", "best practices")),
    Book("b3", "Design Patterns", "Erich Gamma", ("design", "patterns", "oop")),
    Book("b4", "Effective Java", "Joshua Bloch", ("java", "programming")),
    Book("b5", "The Pragmatic Programmer", "Andrew Hunt", ("programming", "software")),
)


class CatalogError(ValueError):
    """Raised when a catalog file cannot be turned into books."""


def add_books(index: CatalogIndexProtocol, books: Iterable[Book]) -> int:
    n = 0
    for book in books:
        index.add_book(book)
        n += 1
    return n


def load_sample_catalog(index: CatalogIndexProtocol) -> int:
    n = add_books(index, SAMPLE_BOOKS)
    log.info("loaded %d sample books", n)
    return n


def read_catalog_file(path: Union[str, Path]) -> List[Book]:
    """
    Parse a JSON catalog file into Books.
    Raises:
        FileNotFoundError: path does not exist
        CatalogError: not JSON, not a list, or an entry is malformed
    """
    path = Path(path)
    try:
        raw = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as e:
        raise CatalogError(f"{path}: invalid JSON ({e})") from e
    if not isinstance(raw, list):
        raise CatalogError(f"{path}: expected a JSON array of books")

    books = []
    for pos, entry in enumerate(raw):
        books.append(_parse_entry(path, pos, entry))
    return books


def _parse_entry(path: Path, pos: int, entry) -> Book:
    if not isinstance(entry, dict):
        raise CatalogError(f"{path}: entry {pos} is not an object")
    for field in ("id", "title", "author"):
        if not isinstance(entry.get(field), str):
            raise CatalogError(f"{path}: entry {pos} needs a string '{field}'")
    tags = entry.get("tags", [])
    if not isinstance(tags, list) or not all(isinstance(t, str) for t in tags):
        raise CatalogError(f"{path}: entry {pos} 'tags' must be a list of strings")
    return Book.from_dict(entry)


def load_catalog_file(index: CatalogIndexProtocol, path: Union[str, Path]) -> int:
    with Log.time_block(f"load catalog {path}"):
        books = read_catalog_file(path)
        n = add_books(index, books)
    log.info("loaded %d books from %s", n, path)
    return n
