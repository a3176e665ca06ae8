# trie.py
# Prefix tree keyed by lowercase characters.
# Every node keeps the ids of all keys that pass through it, so a prefix
# lookup is one walk down the tree with no subtree collection.

from __future__ import annotations
from typing import Dict, List, Optional

from .normalizer import normalize_key

BookId = str


class TrieNode:
    """
    A single node in the Trie.
    children: char -> TrieNode
    is_word: True if an inserted key ends here
    values: ids of every insertion that passed through this node,
            in insertion order (duplicates kept)
    """

    __slots__ = ("children", "is_word", "values")

    def __init__(self) -> None:
        self.children: Dict[str, TrieNode] = {}
        self.is_word = False
        self.values: List[BookId] = []


class Trie:
    """
    Trie mapping key prefixes to record ids, used by the LibraryIndex for:
     - title/author/tag prefix suggestions
    """

    def __init__(self) -> None:
        self._root = TrieNode()

    # insertion -----------------------------------------------------
    def insert(self, key: str, value: BookId) -> None:
        """
        Insert `key` and attach `value` to the root and to every node on its path.
        Lowercases the key first. An empty key only touches the root.
        """
        node = self._root
        node.values.append(value)
        for ch in normalize_key(key):
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = TrieNode()
            node = nxt
            node.values.append(value)
        node.is_word = True

    # lookup ---------------------------------------------------------
    def suggest(self, prefix: str, limit: int = 8) -> List[BookId]:
        """
        Return ids of keys starting with `prefix`.
        Empty prefix gives [] so an empty search box never dumps the catalog.
        Duplicates collapse to their first occurrence; at most `limit` ids.
        """
        if not prefix or limit <= 0:
            return []

        node = self._find_node(prefix)
        if node is None:
            return []
        return list(dict.fromkeys(node.values))[:limit]

    def _find_node(self, prefix: str) -> Optional[TrieNode]:
        node = self._root
        for ch in normalize_key(prefix):
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    # convenience/debugging -----------------------------------------------------
    def size(self) -> int:
        """
        Count distinct keys in the Trie.
        (O(N) walk. For stats, not the query path.)
        """
        count = 0
        stack = [self._root]
        while stack:
            node = stack.pop()
            if node.is_word:
                count += 1
            stack.extend(node.children.values())
        return count

    def __contains__(self, key: str) -> bool:
        """Full-key membership check."""
        node = self._find_node(key)
        return node is not None and node.is_word
