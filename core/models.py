"""
Vigenere Breaker - Result models for frequency analysis and key recovery.
"""

from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict

from core.config import settings


class AnalysisResult(BaseModel):
    """Outcome of one column scan: best key letter plus all 26 (letter, chi-squared) pairs, ascending."""
    model_config = ConfigDict(frozen=True)

    best_key_char: str
    chi_squared_scores: Tuple[Tuple[str, float], ...] = ()

    def top(self, n: int = 3) -> List[Tuple[str, float]]:
        """First n (letter, score) pairs, best first."""
        return list(self.chi_squared_scores[:max(0, n)])

    def scores_by_letter(self) -> Dict[str, float]:
        """Fresh letter -> score dict, in ranking order."""
        return dict(self.chi_squared_scores)


class BreakResult(BaseModel):
    """Recovered key, plaintext and the diagnostics that produced them."""
    model_config = ConfigDict(frozen=True)

    key: str
    key_length: int
    plaintext: str
    key_length_scores: Tuple[Tuple[int, float], ...] = ()
    column_results: Tuple[AnalysisResult, ...] = ()
    caesar_fallback: bool = False

    def best_key_lengths(self, n: int = 3, english_ic: Optional[float] = None) -> List[Tuple[int, float]]:
        """Candidate lengths ordered by distance of their average IC to English IC."""
        if english_ic is None:
            english_ic = settings.ENGLISH_IC
        ranked = sorted(self.key_length_scores, key=lambda kv: abs(kv[1] - english_ic))
        return ranked[:max(0, n)]
