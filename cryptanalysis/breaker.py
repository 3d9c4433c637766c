"""
Vigenere Breaker - Key recovery for repeating-key ciphers.
Estimates key length from the average Index of Coincidence of column streams,
recovers each key letter by chi-squared matching and decrypts the whole text.
"""

import warnings
from typing import Dict, List, Optional, Tuple

from loguru import logger

from core.config import settings
from core.models import AnalysisResult, BreakResult
from cryptanalysis.errors import EmptyInputError, UnreliableAnalysisWarning
from cryptanalysis.frequency import index_of_coincidence, score_column
from cryptanalysis.vigenere import decrypt, normalize


def split_columns(text: str, key_length: int) -> List[str]:
    """Column i holds the letters at positions i, i + key_length, i + 2 * key_length, ..."""
    return [text[i::key_length] for i in range(key_length)]


def average_ic(text: str, key_length: int) -> float:
    columns = split_columns(text, key_length)
    return sum(index_of_coincidence(col) for col in columns) / key_length


def calculate_max_key_length(
    text_length: int,
    min_column_length: Optional[int] = None,
    absolute_max: Optional[int] = None,
) -> int:
    """Longest key length whose columns still hold min_column_length letters, capped at absolute_max."""
    if min_column_length is None:
        min_column_length = settings.MIN_COLUMN_LENGTH
    if absolute_max is None:
        absolute_max = settings.ABSOLUTE_MAX_KEY_LENGTH
    return min(text_length // min_column_length, absolute_max)


def score_key_lengths(text: str, max_key_length: int) -> Dict[int, float]:
    """Average IC for every candidate length 1..max_key_length."""
    return {length: average_ic(text, length) for length in range(1, max_key_length + 1)}


def proper_divisors(number: int) -> List[int]:
    """Divisors d of number with 2 <= d < number, ascending."""
    factors = []
    i = 2
    while i * i <= number:
        if number % i == 0:
            factors.append(i)
            if i * i != number:
                factors.append(number // i)
        i += 1
    return sorted(factors)


def _estimate(
    text: str,
    min_column_length: Optional[int] = None,
    absolute_max: Optional[int] = None,
) -> Tuple[int, Dict[int, float], bool]:
    """Return (key_length, scores per candidate, caesar_fallback)."""
    english_ic = settings.ENGLISH_IC
    max_key = calculate_max_key_length(len(text), min_column_length, absolute_max)
    fallback = max_key < 1
    if fallback:
        msg = (
            "Ciphertext is too short for a reliable analysis. "
            "Defaulting to Caesar cipher check (key length 1)."
        )
        logger.warning(msg)
        warnings.warn(msg, UnreliableAnalysisWarning, stacklevel=3)
        max_key = 1

    scores = score_key_lengths(text, max_key)

    best_length, best_distance = 1, float("inf")
    for length, ic in scores.items():
        distance = abs(ic - english_ic)
        if distance < best_distance:
            best_distance = distance
            best_length = length
    logger.debug(f"Closest average IC to English: length {best_length} ({scores[best_length]:.4f})")

    # Multiples of the true length also look English; prefer the smallest divisor that does too.
    if best_length > 1:
        threshold = english_ic - settings.DIVISOR_IC_TOLERANCE
        for factor in proper_divisors(best_length):
            if scores.get(factor, 0.0) > threshold:
                logger.debug(f"Divisor {factor} of {best_length} passes IC threshold {threshold:.3f}")
                return factor, scores, fallback
    return best_length, scores, fallback


def estimate_key_length(
    text: str,
    min_column_length: Optional[int] = None,
    absolute_max: Optional[int] = None,
) -> int:
    """Most likely key length of a Vigenere ciphertext. Emits UnreliableAnalysisWarning on short input."""
    key_length, _, _ = _estimate(normalize(text), min_column_length, absolute_max)
    return key_length


def analyze_columns(text: str, key_length: int) -> List[AnalysisResult]:
    return [score_column(col) for col in split_columns(text, key_length)]


def recover_key(text: str, key_length: int) -> str:
    """Best chi-squared letter per column, in column order."""
    return "".join(r.best_key_char for r in analyze_columns(normalize(text), key_length))


def break_cipher(
    cipher_text: str,
    min_column_length: Optional[int] = None,
    absolute_max: Optional[int] = None,
) -> BreakResult:
    """Recover key and plaintext from Vigenere ciphertext without the key."""
    text = normalize(cipher_text)
    if not text:
        raise EmptyInputError("Ciphertext contains no letters to analyze.")

    logger.info("Analyzing key length...")
    key_length, scores, fallback = _estimate(text, min_column_length, absolute_max)
    logger.info(f"Most likely key length found: {key_length}")

    logger.info("Finding the key...")
    column_results = analyze_columns(text, key_length)
    key = "".join(r.best_key_char for r in column_results)
    logger.info(f"Key found: {key}")

    logger.info("Final decryption...")
    return BreakResult(
        key=key,
        key_length=key_length,
        plaintext=decrypt(text, key),
        key_length_scores=tuple(scores.items()),
        column_results=column_results,
        caesar_fallback=fallback,
    )
