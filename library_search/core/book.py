# library_search/core/book.py
"""
Book - the catalog record.

Immutable value object: id, title, author and an ordered tuple of tags.
Tags passed as any iterable are copied into a tuple, so nothing handed out by
the index aliases storage someone else can mutate.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Mapping, Tuple

from .protocols import BookRecord


@dataclass(frozen=True)
class Book:
    id: str
    title: str
    author: str
    tags: Tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # accept any iterable of tags, store a tuple
        object.__setattr__(self, "tags", tuple(self.tags))

    def __str__(self) -> str:
        return f"{self.title} - {self.author} ({', '.join(self.tags)})"

    @classmethod
    def from_dict(cls, d: Mapping) -> "Book":
        """Build a Book from a BookRecord-shaped mapping (tags optional)."""
        return cls(d["id"], d["title"], d["author"], d.get("tags") or ())

    def to_dict(self) -> BookRecord:
        return {
            "id": self.id,
            "title": self.title,
            "author": self.author,
            "tags": list(self.tags),
        }
