"""
Overlap / uniqueness ranker (the interactive assistant's heuristic).

Idea:
  Prefer words that try many letters we know nothing about yet, and that
  agree with the hits we already have:

      score = 5 * |distinct letters not yet known present and not excluded|
              + |positions matching a confirmed hit|

  Words that disagree with a confirmed hit are dropped before scoring.
  Ties go to natural string order.
"""

from __future__ import annotations

from typing import List, Sequence, Tuple

from wordl.engine.constraints import Constraints
from .base import BaseRanker, register


@register
class OverlapRanker(BaseRanker):
    id = "overlap"
    name = "Overlap + Unseen Letters"
    version = "1.0.0"

    UNSEEN_WEIGHT = 5

    def _matches_hits(self, w: str, hits) -> bool:
        return all(h is None or h == ch for h, ch in zip(hits, w))

    def score_word(self, w: str, constraints: Constraints) -> int:
        seen = constraints.known_letters | constraints.excludes
        unseen = len(set(w) - seen)
        overlap = sum(1 for h, ch in zip(constraints.hits, w) if h == ch)
        return self.UNSEEN_WEIGHT * unseen + overlap

    def scores(self, candidates: Sequence[str], constraints: Constraints) -> List[Tuple[str, float]]:
        pool = [w for w in candidates if self._matches_hits(w, constraints.hits)]
        return [(w, float(self.score_word(w, constraints))) for w in pool]
