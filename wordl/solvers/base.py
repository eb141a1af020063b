from __future__ import annotations

from typing import Dict, List, Sequence, Tuple, Type

from wordl.engine.constraints import Constraints
from wordl.errors import ExhaustedCandidates

# ---- Global ranker registry ----
REGISTRY: Dict[str, Type["BaseRanker"]] = {}


def register(cls: Type["BaseRanker"]) -> Type["BaseRanker"]:
    """
    Decorator: @register on a ranker class adds it to REGISTRY by its `id`.
    """
    rid = getattr(cls, "id", None)
    if not rid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if rid in REGISTRY:
        raise ValueError(f"Duplicate ranker id: {rid}")
    REGISTRY[rid] = cls
    return cls


# ---- Base class that rankers inherit ----
class BaseRanker:
    id = "base"
    name = "Base"
    version = "0.0.0"

    def scores(self, candidates: Sequence[str], constraints: Constraints) -> List[Tuple[str, float]]:
        """(word, score) for every word this ranker is willing to suggest."""
        raise NotImplementedError("Override in subclass")

    def rank(self, candidates: Sequence[str], constraints: Constraints, n: int = 1) -> List[str]:
        """
        Top-`n` words, best first; equal scores fall back to string order.

        Raises ExhaustedCandidates when there is nothing to rank.
        """
        if n < 1:
            raise ValueError(f"n must be >= 1, got {n}")
        if not candidates:
            raise ExhaustedCandidates()
        scored = self.scores(candidates, constraints)
        if not scored:
            raise ExhaustedCandidates()
        scored.sort(key=lambda ws: (-ws[1], ws[0]))
        return [w for w, _ in scored[:n]]
