"""Frequency trie -- prefix tree with per-prefix word counts."""

from freqtrie.constants import DEFAULT_START_CHAR, NUM_LETTERS, ROOT_CHAR
from freqtrie.trie import FrequencyTrie, InvalidCharacterError, TrieNode
from freqtrie.dictionary import find_dictionary, load_trie, read_words

__all__ = [
    "DEFAULT_START_CHAR",
    "NUM_LETTERS",
    "ROOT_CHAR",
    "FrequencyTrie",
    "InvalidCharacterError",
    "TrieNode",
    "find_dictionary",
    "load_trie",
    "read_words",
]
