"""CLI / terminal mode for querying a frequency trie."""

from __future__ import annotations

from freqtrie.trie import FrequencyTrie

HELP = """Commands:
  count PREFIX   -- number of words starting with PREFIX  (e.g. count ca)
  word WORD      -- is WORD in the dictionary?            (e.g. word cart)
  total          -- total number of words
  help           -- show this message
  quit           -- leave"""


def format_count(trie: FrequencyTrie, prefix: str) -> str:
    return f"count({prefix!r}) = {trie.get_count(prefix)}"


def format_word(trie: FrequencyTrie, word: str) -> str:
    verdict = "yes" if trie.is_word(word) else "no"
    return f"word({word!r}) = {verdict}"


def run_queries(trie: FrequencyTrie, counts: list[str], words: list[str]) -> None:
    """Answer one-shot queries given on the command line."""
    for prefix in counts:
        print(format_count(trie, prefix))
    for word in words:
        print(format_word(trie, word))


def run_cli(trie: FrequencyTrie) -> None:
    """Interactive prompt; ends on quit, EOF or Ctrl-C."""
    print("\n" + "=" * 60)
    print(f"  FREQUENCY TRIE -- {len(trie):,} words ({trie.start_char}-{trie.end_char})")
    print("=" * 60)
    print()
    print(HELP)
    print()

    while True:
        try:
            inp = input("  query> ").strip()
        except (EOFError, KeyboardInterrupt):
            print()
            break

        if not inp:
            continue
        cmd, _, arg = inp.partition(" ")
        cmd = cmd.lower()
        arg = arg.strip()

        if cmd in ("quit", "exit", "q"):
            break
        if cmd == "help":
            print(HELP)
        elif cmd == "total":
            print(f"  {len(trie)} words")
        elif cmd == "count":
            # An empty argument asks for the empty prefix.
            print(f"  {format_count(trie, arg)}")
        elif cmd == "word" and arg:
            print(f"  {format_word(trie, arg)}")
        else:
            print("  Format: count PREFIX  or  word WORD  (type help)")
