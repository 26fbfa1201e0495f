import pytest

import freqtrie_engine
from freqtrie import dictionary
from freqtrie.cli import run_cli, run_queries


@pytest.fixture(autouse=True)
def no_default_dictionaries(monkeypatch):
    monkeypatch.setattr(dictionary, "DEFAULT_SEARCH_PATHS", ())


def _feed(monkeypatch, lines):
    it = iter(lines)

    def fake_input(prompt=""):
        try:
            return next(it)
        except StopIteration:
            raise EOFError

    monkeypatch.setattr("builtins.input", fake_input)


def test_run_queries(small_trie, capsys):
    run_queries(small_trie, ["ca", ""], ["car", "ca"])
    out = capsys.readouterr().out.splitlines()
    assert out == [
        "count('ca') = 3",
        "count('') = 4",
        "word('car') = yes",
        "word('ca') = no",
    ]


def test_interactive_session(small_trie, monkeypatch, capsys):
    _feed(monkeypatch, ["count car", "word cart", "total", "", "bogus", "quit", "count c"])
    run_cli(small_trie)
    out = capsys.readouterr().out
    assert "count('car') = 2" in out
    assert "word('cart') = yes" in out
    assert "4 words" in out
    assert "Format:" in out
    assert "count('c')" not in out


def test_interactive_ends_on_eof(small_trie, monkeypatch, capsys):
    _feed(monkeypatch, ["word dog"])
    run_cli(small_trie)
    assert "word('dog') = yes" in capsys.readouterr().out


def test_main_one_shot(word_file, capsys):
    rc = freqtrie_engine.main(["--dict", str(word_file), "--count", "ca", "--word", "cart"])
    assert rc == 0
    out = capsys.readouterr().out.splitlines()
    assert out == ["count('ca') = 3", "word('cart') = yes"]


def test_main_missing_dictionary(tmp_path, caplog):
    rc = freqtrie_engine.main(["--dict", str(tmp_path / "missing.txt"), "--count", "a"])
    assert rc == 1
    assert "Dictionary file not found" in caplog.text


def test_main_bad_word(tmp_path, caplog):
    path = tmp_path / "mixed.txt"
    path.write_text("cat\nDog\n", encoding="utf-8")
    rc = freqtrie_engine.main(["--dict", str(path), "--word", "cat"])
    assert rc == 1
    assert "Bad word in dictionary" in caplog.text
