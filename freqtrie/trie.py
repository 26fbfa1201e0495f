"""Frequency-annotated prefix trie for word and prefix-count lookups."""

from __future__ import annotations

import logging
from contextlib import closing
from typing import Iterable

from freqtrie.constants import ALPHABET_STARTS, DEFAULT_START_CHAR, NUM_LETTERS, ROOT_CHAR

log = logging.getLogger("freqtrie.trie")


class InvalidCharacterError(ValueError):
    """Raised when a word contains a letter outside the trie's alphabet."""

    def __init__(self, word: str, char: str, position: int, start_char: str, end_char: str):
        super().__init__(
            f"invalid character {char!r} at position {position} in {word!r} "
            f"(alphabet is {start_char!r}-{end_char!r})"
        )
        self.word = word
        self.char = char
        self.position = position
        self.start_char = start_char
        self.end_char = end_char


class TrieNode:
    """Single node in the trie; stands for the prefix spelled from the root."""

    __slots__ = ("letter", "count", "is_terminal", "children")

    def __init__(self, letter: str):
        self.letter: str = letter
        self.count: int = 0  # words having this node's prefix
        self.is_terminal: bool = False
        self.children: dict[str, TrieNode] = {}

    def __repr__(self) -> str:
        end = "*" if self.is_terminal else ""
        return f"TrieNode({self.letter!r}{end}, count={self.count}, children={len(self.children)})"


class FrequencyTrie:
    """Prefix trie that also counts how many words share each prefix.

    The trie is case-sensitive and accepts a single contiguous alphabet of
    26 letters starting at ``start_char`` (``"a"`` for a lower-case
    dictionary, ``"A"`` for an upper-case one).  Mixing cases within one
    dictionary is not supported.

    >>> t = FrequencyTrie(["cat", "car", "cart", "dog"])
    >>> t.get_count("ca"), t.get_count("car"), t.is_word("ca")
    (3, 2, False)
    """

    def __init__(self, words: Iterable[str] = (), start_char: str = DEFAULT_START_CHAR):
        if start_char not in ALPHABET_STARTS:
            raise ValueError(f"start_char must be 'a' or 'A', got {start_char!r}")
        self._start = start_char
        self._end = chr(ord(start_char) + NUM_LETTERS - 1)
        self.root = TrieNode(ROOT_CHAR)
        for word in words:
            self.insert_word(word)
        log.debug("Built trie with %d words", self.root.count)

    @classmethod
    def from_file(cls, path: str, start_char: str = DEFAULT_START_CHAR,
                  encoding: str = "utf-8") -> FrequencyTrie:
        """Build a trie from a word list with one word per line."""
        from freqtrie.dictionary import read_words

        with closing(read_words(path, encoding=encoding)) as words:
            return cls(words, start_char=start_char)

    @property
    def start_char(self) -> str:
        return self._start

    @property
    def end_char(self) -> str:
        return self._end

    # mutation

    def insert_word(self, word: str) -> None:
        """Insert *word*, bumping the count of every prefix along its path."""
        self._check_alphabet(word)
        node = self.root
        for ch in word:
            node.count += 1
            child = node.children.get(ch)
            if child is None:
                child = node.children[ch] = TrieNode(ch)
            node = child
        node.count += 1
        node.is_terminal = True

    # queries

    def get_count(self, prefix: str) -> int:
        """Number of inserted words that start with *prefix*."""
        node = self._walk(prefix)
        return 0 if node is None else node.count

    def is_word(self, word: str) -> bool:
        node = self._walk(word)
        return node is not None and node.is_terminal

    def is_prefix(self, prefix: str) -> bool:
        return self._walk(prefix) is not None

    def __len__(self) -> int:
        return self.root.count

    def __contains__(self, word: str) -> bool:
        return self.is_word(word)

    # helpers

    def _check_alphabet(self, word: str) -> None:
        # Validate up front so a rejected word leaves no partial counts behind.
        for i, ch in enumerate(word):
            if not self._start <= ch <= self._end:
                raise InvalidCharacterError(word, ch, i, self._start, self._end)

    def _walk(self, s: str) -> TrieNode | None:
        node = self.root
        for ch in s:
            node = node.children.get(ch)
            if node is None:
                return None
        return node
