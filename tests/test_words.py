import random

import pytest

from terminal_wordle.words import WordListError, choose_random_word, load_words


def test_load_words_groups_by_length(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("\ufeffarise\n\nTests\ncat\n  quiz \n", encoding="utf-8")

    words = load_words(path)

    assert words == {5: ["ARISE", "TESTS"], 3: ["CAT"], 4: ["QUIZ"]}


def test_load_words_rejects_non_alphabetic(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("arise\nab1de\n", encoding="utf-8")

    with pytest.raises(WordListError, match="line 2"):
        load_words(path)


def test_load_words_rejects_bom_inside_a_line(tmp_path):
    path = tmp_path / "words.txt"
    path.write_text("arise\nte\ufeffsts\n", encoding="utf-8")

    with pytest.raises(WordListError, match="line 2"):
        load_words(path)


def test_load_words_not_utf8(tmp_path):
    path = tmp_path / "words.txt"
    path.write_bytes(b"arise\n\xff\xfeabcde\n")

    with pytest.raises(WordListError, match="not valid UTF-8"):
        load_words(path)


def test_load_words_missing_file(tmp_path):
    with pytest.raises(OSError):
        load_words(tmp_path / "nope.txt")


def test_choose_random_word_picks_requested_length():
    words = {5: ["ARISE", "TESTS"], 3: ["CAT"]}
    rng = random.Random(7)
    for _ in range(10):
        assert choose_random_word(words, 5, rng) in ("ARISE", "TESTS")
    assert choose_random_word(words, 3) == "CAT"


def test_choose_random_word_no_word_of_length():
    with pytest.raises(WordListError, match="length 6"):
        choose_random_word({5: ["ARISE"]}, 6)
    with pytest.raises(WordListError):
        choose_random_word({6: []}, 6)
