"""
Constraint aggregation: fold a guess history into what a candidate must obey.

Given the full history (oldest round first), derive four constraint sets:

  hits        : per position, the confirmed letter (or None)
  excludes_at : per position, letters known present but wrong here (Contains)
  excludes    : letters absent from the solution (Miss, any round)
  required    : letters a candidate must still contain, with multiplicity

Constraints are recomputed from the whole history every round; nothing is
mutated incrementally. Contradictory feedback never raises here: hits are
last-write-wins and excludes are a plain union. engine.validation is where
contradictions get reported.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import FrozenSet, List, Optional, Sequence, Tuple

from .feedback import WORD_LENGTH, Contains, GuessRecord, Hit, Miss

log = logging.getLogger(__name__)

# History is the chronological sequence of records for one session.
History = Sequence[GuessRecord]


@dataclass(frozen=True)
class Constraints:
    hits: Tuple[Optional[str], ...]
    excludes_at: Tuple[FrozenSet[str], ...]
    excludes: FrozenSet[str]
    required: Tuple[str, ...]

    @classmethod
    def empty(cls) -> "Constraints":
        return cls(
            hits=(None,) * WORD_LENGTH,
            excludes_at=(frozenset(),) * WORD_LENGTH,
            excludes=frozenset(),
            required=(),
        )

    @property
    def is_solved(self) -> bool:
        """Every position has a confirmed letter."""
        return all(h is not None for h in self.hits)

    @property
    def solution(self) -> Optional[str]:
        return "".join(self.hits) if self.is_solved else None

    @property
    def known_letters(self) -> FrozenSet[str]:
        """Letters confirmed present somewhere (as a hit or a contains)."""
        known = {h for h in self.hits if h is not None}
        known.update(self.required)
        for s in self.excludes_at:
            known.update(s)
        return frozenset(known)


def make_required(history: History, include_hits: bool = False) -> List[str]:
    """
    Fold per-round "contains" letters into one required multiset.

    Each round contributes the letters it marked Contains (and Hit, with
    include_hits), in position order. A round's letter first cancels one
    instance already required by earlier rounds; only the excess is added.
    So the requirement for a letter is the largest count any single round
    showed for it.

    Example (Contains letters per round):
      [e] , [e, g] , [e, g, g] , [y]   ->   ['e', 'g', 'g', 'y']
    """
    acc: List[str] = []
    for record in history:
        instance = [
            o.char for o in record
            if isinstance(o, Contains) or (include_hits and isinstance(o, Hit))
        ]
        # pending is what earlier rounds already require; cancel against it
        pending = list(acc)
        for c in instance:
            if c in pending:
                pending.remove(c)
            else:
                acc.append(c)
    return acc


def make_hits(history: History) -> Tuple[Optional[str], ...]:
    result: List[Optional[str]] = [None] * WORD_LENGTH
    for record in history:
        for idx, o in enumerate(record):
            if isinstance(o, Hit):
                result[idx] = o.char
    return tuple(result)


def make_excludes_at(history: History) -> Tuple[FrozenSet[str], ...]:
    result = [set() for _ in range(WORD_LENGTH)]
    for record in history:
        for idx, o in enumerate(record):
            if isinstance(o, Contains):
                result[idx].add(o.char)
    return tuple(frozenset(s) for s in result)


def make_excludes(history: History) -> FrozenSet[str]:
    return frozenset(o.char for record in history for o in record if isinstance(o, Miss))


def aggregate(history: History, *, include_hits: bool = False) -> Constraints:
    """
    Derive the full constraint set from a history.

    An empty history gives Constraints.empty(), which every word of the right
    length satisfies.
    """
    c = Constraints(
        hits=make_hits(history),
        excludes_at=make_excludes_at(history),
        excludes=make_excludes(history),
        required=tuple(make_required(history, include_hits=include_hits)),
    )
    log.debug("aggregated %d round(s): hits=%s excludes=%s required=%s",
              len(history), c.hits, sorted(c.excludes), list(c.required))
    return c
