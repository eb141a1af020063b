"""
Dictionary Order ranker.

Baseline: suggest the first `n` words of the current dictionary as they are
stored (natural string order). Handy for checking the filtering pipeline on
its own, since it adds no opinion of its own.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from wordl.engine.constraints import Constraints
from .base import BaseRanker, register


@register
class DictionaryOrderRanker(BaseRanker):
    id = "dictionary_order"
    name = "Dictionary Order"
    version = "1.0.0"

    def scores(self, candidates: Sequence[str], constraints: Constraints) -> List[Tuple[str, float]]:
        return [(w, 0.0) for w in candidates]

    def rank(self, candidates: Sequence[str], constraints: Constraints, n: int = 1) -> List[str]:
        if n >= 1 and candidates:
            return list(candidates[:n])
        return super().rank(candidates, constraints, n)
