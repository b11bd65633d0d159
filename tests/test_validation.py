import dataclasses

import pytest

from app.validation import Word, WordCategory, sanitize_input


@pytest.mark.parametrize("text,valid", [("", False), ("a", True), ("abcdef", True), ("abcdefg", False)])
def test_general_word_length(text, valid):
    assert Word(text).is_valid() is valid


@pytest.mark.parametrize("length,valid", [(0, False), (1, True), (200, True), (201, False)])
def test_sentence_length(length, valid):
    assert Word("x" * length, WordCategory.SENTENCE).is_valid() is valid


def test_word_is_immutable():
    w = Word("cat")
    assert w.length == 3
    assert w.category is WordCategory.GENERAL
    with pytest.raises(dataclasses.FrozenInstanceError):
        w.text = "dog"


def test_sanitize_input():
    assert sanitize_input("he\x00llo\x7f wor\x9fld") == "hello world"
    assert sanitize_input("tab\there") == "tabhere"
    assert sanitize_input("") == ""
    assert sanitize_input(None) == ""
