"""
Vigenere Breaker - Cipher and analysis errors.
"""


class CipherError(ValueError):
    """Base class for cipher and cryptanalysis failures."""


class InvalidKeyError(CipherError):
    """Key contains no alphabet letters after normalization."""


class EmptyInputError(CipherError):
    """Ciphertext contains no alphabet letters after normalization."""


class UnreliableAnalysisWarning(UserWarning):
    """Ciphertext too short to test key lengths >= 2; analysis falls back to a Caesar check."""
