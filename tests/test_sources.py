import logging

from spellbloom.sources import read_corpus, read_dictionary_words, read_input_lines


def test_dictionary_words_split_on_whitespace(tmp_path):
    path = tmp_path / "dictionary.txt"
    path.write_text("apple banana\ncherry\n\n  date\telder  \n", encoding="utf-8")
    assert list(read_dictionary_words(path)) == ["apple", "banana", "cherry", "date", "elder"]


def test_missing_dictionary_is_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="sources"):
        words = list(read_dictionary_words(tmp_path / "nope.txt"))
    assert words == []
    assert "not found" in caplog.text


def test_empty_dictionary_warns(tmp_path, caplog):
    path = tmp_path / "dictionary.txt"
    path.write_text("\n\n", encoding="utf-8")
    with caplog.at_level(logging.WARNING, logger="sources"):
        assert list(read_dictionary_words(path)) == []
    assert "empty" in caplog.text


def test_corpus(tmp_path):
    path = tmp_path / "corpus.txt"
    path.write_text("The quick brown fox.\n", encoding="utf-8")
    assert read_corpus(path) == "The quick brown fox.\n"


def test_missing_corpus_is_empty(tmp_path, caplog):
    with caplog.at_level(logging.WARNING, logger="sources"):
        assert read_corpus(tmp_path / "nope.txt") == ""
    assert "not found" in caplog.text


def test_input_lines_strip_newlines(tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("first line\nsecond\n", encoding="utf-8")
    assert list(read_input_lines(path)) == ["first line", "second"]


def test_missing_input_yields_nothing(tmp_path):
    assert list(read_input_lines(tmp_path / "nope.txt")) == []
