"""
Validity predicate: compile constraints into one reusable test over words.

make_is_valid() captures an immutable Constraints snapshot and returns a
closure. Each call works on its own copy of the required multiset, so the
same predicate can be shared freely (e.g. across a parallel filter pass).

Per candidate, scanning left to right:
  1) consume one pending required instance of the letter, if any
     (before the rejects: a letter can be required somewhere yet banned here)
  2) reject if the letter is globally excluded
  3) reject if the position has a different confirmed hit
  4) reject if the letter is excluded at this position
Finally reject if any required letter was never consumed.
"""

from __future__ import annotations

from typing import Callable, Iterable, List, Union

from wordl.errors import MalformedRecord
from .constraints import Constraints, History, aggregate
from .feedback import WORD_LENGTH

Predicate = Callable[[str], bool]


def make_is_valid(source: Union[History, Constraints], *, include_hits: bool = False) -> Predicate:
    """
    Build the predicate from a history (aggregated here) or from Constraints.

    The predicate raises MalformedRecord for a word that is not WORD_LENGTH
    long; it never truncates or pads.
    """
    c = source if isinstance(source, Constraints) else aggregate(source, include_hits=include_hits)

    required = c.required
    hits = c.hits
    excludes = c.excludes
    excludes_at = c.excludes_at

    def is_valid(word: str) -> bool:
        if len(word) != WORD_LENGTH:
            raise MalformedRecord(f"candidate must have {WORD_LENGTH} letters: {word!r}")

        pending = list(required)
        for idx, ch in enumerate(word):
            # must run first so bookkeeping happens even when we reject below
            if ch in pending:
                pending.remove(ch)
            if ch in excludes:
                return False
            h = hits[idx]
            if h is not None and h != ch:
                return False
            if ch in excludes_at[idx]:
                return False
        return not pending

    return is_valid


def filter_candidates(words: Iterable[str], history: Union[History, Constraints], *,
                      include_hits: bool = False) -> List[str]:
    """
    Keep the words consistent with ALL feedback so far (input order preserved).
    """
    is_valid = make_is_valid(history, include_hits=include_hits)
    return [w for w in words if is_valid(w)]
