"""
Vigenere Breaker - Vigenere and Caesar primitives over the A-Z alphabet.
"""

from cryptanalysis.errors import InvalidKeyError

ALPHABET = "ABCDEFGHIJKLMNOPQRSTUVWXYZ"
ALPHABET_SIZE = len(ALPHABET)
_INDEX = {c: i for i, c in enumerate(ALPHABET)}


def normalize(text: str) -> str:
    """Uppercase and keep A-Z only. Idempotent."""
    return "".join(c for c in text.upper() if c in _INDEX)


def _key_shifts(key: str) -> list:
    prepared = normalize(key)
    if not prepared:
        raise InvalidKeyError("Key must contain at least one letter.")
    return [_INDEX[c] for c in prepared]


def encrypt(plain_text: str, key: str) -> str:
    """Encrypt with a repeating key. Non-letters are dropped, output is uppercase."""
    shifts = _key_shifts(key)
    text = normalize(plain_text)
    n = len(shifts)
    return "".join(
        ALPHABET[(_INDEX[c] + shifts[i % n]) % ALPHABET_SIZE] for i, c in enumerate(text)
    )


def decrypt(cipher_text: str, key: str) -> str:
    """Decrypt with a repeating key. Mirror of encrypt."""
    shifts = _key_shifts(key)
    text = normalize(cipher_text)
    n = len(shifts)
    return "".join(
        ALPHABET[(_INDEX[c] - shifts[i % n] + ALPHABET_SIZE) % ALPHABET_SIZE] for i, c in enumerate(text)
    )


def caesar_decrypt(text: str, key_char: str) -> str:
    """Shift an already-normalized text back by a single key letter."""
    shift = _INDEX[key_char]
    return "".join(ALPHABET[(_INDEX[c] - shift) % ALPHABET_SIZE] for c in text)
