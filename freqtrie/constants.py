"""Alphabet constants for the frequency trie."""

# Letters per alphabet case (a-z or A-Z).
NUM_LETTERS = 26

# Sentinel letter carried by the root node; never a valid alphabet letter.
ROOT_CHAR = "_"

DEFAULT_START_CHAR = "a"

# First letter of each supported alphabet: lower-case or upper-case English.
ALPHABET_STARTS = ("a", "A")
