"""
Input checks that sit in front of the engine.

- validate_guess:     is this word acceptable as a guess (dictionary membership)?
- check_consistency:  could one solution word have produced this history?

The aggregator itself tolerates contradictions (last-write-wins); a strict
session calls check_consistency before recording a round so that a mistyped
round is rejected instead of silently emptying the dictionary.
"""

from __future__ import annotations

from collections import defaultdict
from typing import Dict, Iterable, Set

from wordl.errors import ContradictoryFeedback
from .constraints import History
from .feedback import WORD_LENGTH, Contains, Miss


def validate_guess(word: str, allowed: Iterable[str]) -> bool:
    """
    True if `word` is WORD_LENGTH alphabetic letters and in `allowed`.

    Membership is the only "is it a word" check we make.
    """
    if not isinstance(word, str):
        return False

    w = word.strip().lower()
    if len(w) != WORD_LENGTH or not w.isalpha():
        return False

    allowed_set: Set[str] = allowed if isinstance(allowed, (set, frozenset)) else set(allowed)
    return w in allowed_set


def check_consistency(history: History) -> None:
    """
    Raise ContradictoryFeedback when rounds disagree with each other:
      - a letter marked Miss in one round but Hit/Contains in another
      - two different hits confirmed at the same position
      - a letter marked Contains at a position where another round hit it

    Within a single round a Miss next to a Hit/Contains of the same letter is
    accepted as-is.
    """
    missed_in: Dict[str, Set[int]] = defaultdict(set)
    present_in: Dict[str, Set[int]] = defaultdict(set)
    hit_at: Dict[int, str] = {}
    contains_at: Dict[int, Set[str]] = defaultdict(set)

    for rnd, record in enumerate(history, start=1):
        for idx, o in enumerate(record):
            if isinstance(o, Miss):
                missed_in[o.char].add(rnd)
                continue
            present_in[o.char].add(rnd)
            if isinstance(o, Contains):
                contains_at[idx].add(o.char)
                continue
            prev = hit_at.setdefault(idx, o.char)
            if prev != o.char:
                raise ContradictoryFeedback(
                    f"position {idx + 1} confirmed as {prev!r} and later as {o.char!r}")

    for idx, c in sorted(hit_at.items()):
        if c in contains_at[idx]:
            raise ContradictoryFeedback(
                f"letter {c!r} confirmed at position {idx + 1} but also marked misplaced there")

    for c, missed in missed_in.items():
        for m in sorted(missed):
            others = present_in.get(c, set()) - {m}
            if others:
                raise ContradictoryFeedback(
                    f"letter {c!r} marked absent in round {m} but present in round {min(others)}")
