"""Word-list loading: turns a dictionary file into a sequence of words."""

from __future__ import annotations

import logging
import os
from typing import Iterator

from freqtrie.constants import DEFAULT_START_CHAR
from freqtrie.trie import FrequencyTrie

log = logging.getLogger("freqtrie")

DEFAULT_SEARCH_PATHS = (
    "dictionary.txt",
    "words.txt",
    "/usr/share/dict/words",
)


def read_words(path: str, encoding: str = "utf-8") -> Iterator[str]:
    """Yield each line of *path* with its line terminator removed.

    Blank lines come through as empty strings; no other filtering is done.
    """
    with open(path, "r", encoding=encoding, newline="") as f:
        for line in f:
            yield line.rstrip("\r\n")


def find_dictionary(dict_path: str | None = None) -> str:
    """*dict_path* if given, else the first existing default location."""
    if dict_path:
        if not os.path.isfile(dict_path):
            raise FileNotFoundError(f"Dictionary file not found: {dict_path}")
        return dict_path

    search_paths = list(DEFAULT_SEARCH_PATHS)

    for path in search_paths:
        if os.path.isfile(path):
            return path
    raise FileNotFoundError(f"No dictionary file found (searched: {', '.join(search_paths)})")


def load_trie(dict_path: str | None = None, start_char: str = DEFAULT_START_CHAR) -> FrequencyTrie:
    """Locate a word list and build a trie from it."""
    path = find_dictionary(dict_path)
    trie = FrequencyTrie.from_file(path, start_char=start_char)
    log.info("Loaded %s words from %s", f"{len(trie):,}", path)
    return trie
