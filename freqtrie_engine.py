#!/usr/bin/env python3
"""
Frequency Trie

Loads a word list (one word per line, a single letter case) into a
prefix trie and answers two questions: is a string a word, and how many
words start with a given prefix.
"""

from __future__ import annotations

import argparse
import logging
import sys

from freqtrie.cli import run_cli, run_queries
from freqtrie.constants import DEFAULT_START_CHAR
from freqtrie.dictionary import load_trie
from freqtrie.trie import InvalidCharacterError


log = logging.getLogger("freqtrie")


# Entry point

def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(
        description="Frequency Trie -- word and prefix-count lookups over a word list",
    )
    parser.add_argument("--dict", type=str, default=None,
                        help="Path to dictionary / word list file")
    parser.add_argument("--start-char", type=str, default=DEFAULT_START_CHAR,
                        help="First letter of the alphabet: 'a' for lower-case, 'A' for upper-case words")
    parser.add_argument("--count", action="append", default=[], metavar="PREFIX",
                        help="Print how many words start with PREFIX (repeatable)")
    parser.add_argument("--word", action="append", default=[], metavar="WORD",
                        help="Print whether WORD is in the dictionary (repeatable)")
    parser.add_argument("--verbose", "-v", action="store_true",
                        help="Enable debug-level logging")
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="[%(levelname)s] %(message)s",
    )
    if args.verbose:
        logging.getLogger().setLevel(logging.DEBUG)

    try:
        trie = load_trie(args.dict, start_char=args.start_char)
    except InvalidCharacterError as exc:
        log.error("Bad word in dictionary: %s", exc)
        return 1
    except (OSError, ValueError) as exc:
        log.error("Could not load dictionary: %s", exc)
        return 1

    if args.count or args.word:
        run_queries(trie, args.count, args.word)
    else:
        run_cli(trie)
    return 0


if __name__ == "__main__":
    sys.exit(main())
