"""
Vigenere Breaker - Frequency analysis for single-shift (Caesar) columns.
"""

from collections import Counter
from typing import Dict

from core.models import AnalysisResult
from cryptanalysis.vigenere import ALPHABET, caesar_decrypt, normalize

# Reference letter frequencies (relative) for English prose
EN_FREQ = {
    "A": 0.08167, "B": 0.01492, "C": 0.02782, "D": 0.04253, "E": 0.12702,
    "F": 0.02228, "G": 0.02015, "H": 0.06094, "I": 0.06966, "J": 0.00153,
    "K": 0.00772, "L": 0.04025, "M": 0.02406, "N": 0.06749, "O": 0.07507,
    "P": 0.01929, "Q": 0.00095, "R": 0.05987, "S": 0.06327, "T": 0.09056,
    "U": 0.02758, "V": 0.00978, "W": 0.02360, "X": 0.00150, "Y": 0.01974,
    "Z": 0.00074,
}


def letter_counts(text: str) -> Dict[str, int]:
    """Count of every alphabet letter in text (zero-filled)."""
    c = Counter(text)
    return {letter: c.get(letter, 0) for letter in ALPHABET}


def chi_squared(text: str) -> float:
    """Chi-squared distance between text's letter counts and English. Lower is more English-like."""
    if not text:
        return float("inf")
    n = len(text)
    total = 0.0
    for letter, observed in letter_counts(text).items():
        expected = n * EN_FREQ[letter]
        total += (observed - expected) ** 2 / expected
    return total


def index_of_coincidence(text: str) -> float:
    """Probability that two letters drawn from text are equal; 0.0 below 2 letters."""
    n = len(text)
    if n < 2:
        return 0.0
    num = sum(k * (k - 1) for k in Counter(text).values())
    return num / (n * (n - 1))


def score_column(column: str) -> AnalysisResult:
    """Try all 26 shifts on a column; keep the one with minimal chi-squared.

    The column is normalized first, so lowercase or punctuated input is accepted.
    """
    column = normalize(column)
    scores: Dict[str, float] = {}
    best_char, best_score = "A", float("inf")
    for key_char in ALPHABET:
        score = chi_squared(caesar_decrypt(column, key_char))
        scores[key_char] = score
        if score < best_score:
            best_score = score
            best_char = key_char
    ranked = tuple(sorted(scores.items(), key=lambda kv: kv[1]))
    return AnalysisResult(best_key_char=best_char, chi_squared_scores=ranked)


def find_most_likely_key_char(column: str) -> str:
    return score_column(column).best_key_char
