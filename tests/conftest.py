import pytest

from freqtrie.trie import FrequencyTrie


@pytest.fixture
def small_trie() -> FrequencyTrie:
    return FrequencyTrie(["cat", "car", "cart", "dog"])


@pytest.fixture
def word_file(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("cat\ncar\ncart\ndog\n", encoding="utf-8")
    return path
