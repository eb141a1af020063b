from __future__ import annotations
from typing import List
from .base import BaseRanker, REGISTRY, register

from . import positional_freq  # noqa: F401
from . import overlap  # noqa: F401
from . import dictionary_order  # noqa: F401


def create_ranker(ranker_id: str) -> BaseRanker:
    """
    Factory: instantiate a registered ranker by id.
    """
    try:
        cls = REGISTRY[ranker_id]
    except KeyError as e:
        raise ValueError(
            f"Unknown ranker id: {ranker_id}. Available: {sorted(REGISTRY.keys())}") from e
    return cls()


def get_ranker_ids() -> List[str]:
    """
    Return all registered ranker ids (sorted for stable CLI help).
    """
    return sorted(REGISTRY.keys())
