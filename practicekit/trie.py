"""A prefix tree over strings."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Iterator, Optional


@dataclass
class _TrieNode:
    children: dict[str, "_TrieNode"] = field(default_factory=dict)
    is_end: bool = False


class Trie:
    """Set of words supporting prefix queries."""

    def __init__(self) -> None:
        self._root = _TrieNode()
        self._size = 0

    def _find(self, prefix: str) -> Optional[_TrieNode]:
        node = self._root
        for ch in prefix:
            node = node.children.get(ch)
            if node is None:
                return None
        return node

    def insert(self, word: str) -> None:
        """Add a word; adding it again changes nothing."""
        node = self._root
        for ch in word:
            node = node.children.setdefault(ch, _TrieNode())
        if not node.is_end:
            node.is_end = True
            self._size += 1

    def search(self, word: str) -> bool:
        """True if the exact word was inserted."""
        node = self._find(word)
        return node is not None and node.is_end

    def starts_with(self, prefix: str) -> bool:
        """True if any stored word begins with prefix."""
        return self._find(prefix) is not None

    def delete(self, word: str) -> bool:
        """Remove a word, pruning empty branches; True if it was present."""
        return self._delete(self._root, word, 0)

    def _delete(self, node: _TrieNode, word: str, depth: int) -> bool:
        if depth == len(word):
            if not node.is_end:
                return False
            node.is_end = False
            self._size -= 1
            return True
        ch = word[depth]
        child = node.children.get(ch)
        if child is None:
            return False
        deleted = self._delete(child, word, depth + 1)
        if deleted and not child.children and not child.is_end:
            del node.children[ch]
        return deleted

    def __len__(self) -> int:
        return self._size

    def words_with_prefix(self, prefix: str) -> list[str]:
        """All stored words beginning with prefix; empty if there are none."""
        node = self._find(prefix)
        if node is None:
            return []
        return list(self._collect(node, prefix))

    def _collect(self, node: _TrieNode, prefix: str) -> Iterator[str]:
        if node.is_end:
            yield prefix
        for ch, child in node.children.items():
            yield from self._collect(child, prefix + ch)