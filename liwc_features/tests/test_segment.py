# liwc_features/tests/test_segment.py
import pytest

from liwc_features.segment import tokenize, split_sentences


def test_tokenize_keeps_case_and_order():
    assert tokenize("Hello, World! hello again.") == ["Hello", "World", "hello", "again"]


def test_tokenize_splits_on_apostrophes_and_hyphens():
    assert tokenize("don't over-think") == ["don", "t", "over", "think"]


def test_tokenize_keeps_underscores_and_digits():
    assert tokenize("snake_case 3.5 -7") == ["snake_case", "3", "5", "7"]


@pytest.mark.parametrize("text", ["", "   ", "\n\t", "?!...", " -- "])
def test_tokenize_empty(text):
    assert tokenize(text) == []


def test_split_sentences_strips_terminal_marks():
    assert split_sentences("Wow! Is this real? Yes.") == ["Wow", "Is this real", "Yes"]


def test_split_sentences_runs_of_marks():
    assert split_sentences("Wait... what?!  Really") == ["Wait", "what", "Really"]


def test_split_sentences_needs_whitespace_after_mark():
    # decimal points and abbreviations inside a sentence do not split it
    assert split_sentences("It costs 3.5 dollars") == ["It costs 3.5 dollars"]


def test_split_sentences_without_terminal_mark():
    assert split_sentences("no terminal mark here") == ["no terminal mark here"]


def test_split_sentences_trailing_whitespace():
    assert split_sentences("One. Two.\n") == ["One", "Two"]


@pytest.mark.parametrize("text", ["a", "a.", "? a", "Hi!!! there", "x y z"])
def test_at_least_one_sentence_when_words_exist(text):
    assert tokenize(text)
    assert len(split_sentences(text)) >= 1


def test_tokenize_splits_on_non_ascii_letters():
    assert tokenize("café naïve") == ["caf", "na", "ve"]
