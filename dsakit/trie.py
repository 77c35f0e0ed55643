"""A prefix tree of words."""

from __future__ import annotations


class Trie:
    """A trie; a node whose path spells a stored word holds it in ``value``."""

    def __init__(self) -> None:
        self.value = ""
        self._children: dict[str, Trie] = {}

    def insert(self, word: str) -> None:
        """Add a word to the trie."""
        node = self
        for ch in word:
            node = node._children.setdefault(ch, Trie())
        node.value = word

    def search(self, word: str) -> bool:
        """Return True if the word has been stored."""
        node = self
        for ch in word:
            if node.value == word:
                return True
            child = node._children.get(ch)
            if child is None:
                return False
            node = child
        return node.value == word

    def starts_with(self, word: str) -> bool:
        """Return True if the given prefix is a path in the trie."""
        node = self
        for ch in word:
            child = node._children.get(ch)
            if child is None:
                return False
            node = child
        return True

    def delete(self, word: str) -> None:
        """Remove a word, pruning the branch up to the nearest other word."""
        self._prune(word, word)

    def _prune(self, rest: str, original: str) -> bool:
        if not rest:
            return True
        first = rest[0]
        child = self._children.get(first)
        if child is None:
            return False
        prune = child._prune(rest[1:], original) and child.value in ("", original)
        if prune:
            del self._children[first]
        return prune