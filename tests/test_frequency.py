"""
Unit tests for chi-squared column scoring and IC.
"""

import math

import pytest

from cryptanalysis.frequency import (
    EN_FREQ,
    chi_squared,
    find_most_likely_key_char,
    index_of_coincidence,
    letter_counts,
    score_column,
)
from cryptanalysis.vigenere import encrypt, normalize


def test_reference_table_complete():
    assert len(EN_FREQ) == 26
    assert all(v > 0 for v in EN_FREQ.values())
    assert sum(EN_FREQ.values()) == pytest.approx(1.0, abs=0.01)


def test_caesar_column_key_f():
    result = score_column("YMNXNXFNXNRUQJXYJSYJSFHQJSYJXYNSLTZWUTXJX")
    assert result.best_key_char == "F"
    assert find_most_likely_key_char("YMNXNXFNXNRUQJXYJSYJSFHQJSYJXYNSLTZWUTXJX") == "F"


def test_scores_cover_alphabet_sorted_ascending():
    result = score_column("YMNXNXFNXNRUQJXYJSYJSFHQJSYJXYNSLTZWUTXJX")
    scores = [s for _, s in result.chi_squared_scores]
    assert len(scores) == 26
    assert scores == sorted(scores)
    assert result.chi_squared_scores[0][0] == result.best_key_char
    assert result.top(3)[0][0] == "F"
    assert len(result.top(3)) == 3


def test_empty_column_scores_infinite():
    result = score_column("")
    assert result.best_key_char == "A"
    assert all(math.isinf(s) for _, s in result.chi_squared_scores)
    assert list(result.scores_by_letter()) == list("ABCDEFGHIJKLMNOPQRSTUVWXYZ")


def test_chi_squared_prefers_english(english_sample):
    plain = normalize(english_sample)
    assert chi_squared(plain) < chi_squared(encrypt(plain, "K"))


def test_long_caesar_recovers_every_shift(english_sample):
    plain = normalize(english_sample)[:500]
    for key_char in "AGMSZ":
        assert score_column(encrypt(plain, key_char)).best_key_char == key_char


def test_letter_counts_zero_filled():
    counts = letter_counts("AAB")
    assert counts["A"] == 2 and counts["B"] == 1 and counts["Z"] == 0
    assert len(counts) == 26


def test_index_of_coincidence():
    assert index_of_coincidence("") == 0.0
    assert index_of_coincidence("A") == 0.0
    assert index_of_coincidence("AABB") == pytest.approx(4 / 12)
    assert index_of_coincidence("ABCD") == 0.0


def test_english_ic_near_reference(english_sample):
    assert index_of_coincidence(normalize(english_sample)) == pytest.approx(0.065, abs=0.008)


def test_score_column_normalizes_input():
    result = score_column("ymnx nx f nxnruqjxy, jsyjsfhqjsy jxynsl tzwutxjx!")
    assert result.best_key_char == "F"
    assert score_column("ymnxnxfnxnruqjxyjsyjsfhqjsyjxynsltzwutxjx") == score_column(
        "YMNXNXFNXNRUQJXYJSYJSFHQJSYJXYNSLTZWUTXJX"
    )
