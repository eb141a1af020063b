"""
Positional Letter Frequency.

Idea:
  Build per-position letter counts over the CURRENT dictionary (already
  filtered by past feedback). Score each word by the sum, over positions, of
  how often its letter appears at that position, as a frequency in [0, 1].

Counts live in a (positions x alphabet) numpy array; ranking uses the integer
counts so equal sums tie exactly and fall back to string order.
"""

from __future__ import annotations

from typing import Dict, List, Sequence, Tuple

import numpy as np

from wordl.engine.constraints import Constraints
from wordl.engine.feedback import WORD_LENGTH
from .base import BaseRanker, register


def build_pos_counts(words: Sequence[str]) -> Tuple[np.ndarray, Dict[str, int]]:
    """
    Return (counts, alphabet) where counts[i, alphabet[ch]] is how many words
    have `ch` at position i.
    """
    alphabet = {ch: k for k, ch in enumerate(sorted(set("".join(words))))}
    counts = np.zeros((WORD_LENGTH, max(len(alphabet), 1)), dtype=np.int64)
    if not words:
        return counts, alphabet
    idx = np.array([[alphabet[ch] for ch in w] for w in words], dtype=np.int64)
    for pos in range(WORD_LENGTH):
        counts[pos] = np.bincount(idx[:, pos], minlength=counts.shape[1])
    return counts, alphabet


@register
class PositionalFreqRanker(BaseRanker):
    id = "positional_freq"
    name = "Positional Letter Frequency"
    version = "1.0.0"

    def _raw_scores(self, candidates: Sequence[str]) -> np.ndarray:
        counts, alphabet = build_pos_counts(candidates)
        idx = np.array([[alphabet[ch] for ch in w] for w in candidates], dtype=np.int64)
        return counts[np.arange(WORD_LENGTH), idx].sum(axis=1)

    def scores(self, candidates: Sequence[str], constraints: Constraints) -> List[Tuple[str, float]]:
        if not candidates:
            return []
        raw = self._raw_scores(candidates)
        n = float(len(candidates))
        return [(w, s / n) for w, s in zip(candidates, raw.tolist())]

    def rank(self, candidates: Sequence[str], constraints: Constraints, n: int = 1) -> List[str]:
        if n >= 1 and candidates:
            # integer sums: exact ties, then string order
            raw = self._raw_scores(candidates).tolist()
            order = sorted(zip(candidates, raw), key=lambda ws: (-ws[1], ws[0]))
            return [w for w, _ in order[:n]]
        return super().rank(candidates, constraints, n)
