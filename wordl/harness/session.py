"""
One assistant session: a dictionary store plus the guess history behind it.

Each round:
  guess(record) -> history grows -> constraints re-derived from the full
  history -> predicate rebuilt -> store retains survivors -> status reported.

The session is the only owner of mutable state; nothing is process-wide.
"""

from __future__ import annotations

import enum
import logging
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from wordl.engine.constraints import Constraints, aggregate
from wordl.engine.dictionary import DictionaryStore
from wordl.engine.feedback import GuessRecord
from wordl.engine.validation import check_consistency
from wordl.engine.validity import make_is_valid
from wordl.solvers import BaseRanker, create_ranker

log = logging.getLogger(__name__)


class Status(enum.Enum):
    IN_PROGRESS = "in_progress"
    SOLVED = "solved"
    EXHAUSTED = "exhausted"


class Session:

    def __init__(self, words: Iterable[str], *, ranker: Union[str, BaseRanker] = "positional_freq",
                 strict: bool = True, include_hits: bool = False):
        self._seed: Tuple[str, ...] = tuple(words)
        self.vocabulary: FrozenSet[str] = frozenset(self._seed)
        self.store = DictionaryStore(self._seed)
        self.ranker = create_ranker(ranker) if isinstance(ranker, str) else ranker
        self.strict = strict
        self.include_hits = include_hits
        self._history: List[GuessRecord] = []
        self._constraints = Constraints.empty()

    @property
    def history(self) -> Tuple[GuessRecord, ...]:
        return tuple(self._history)

    @property
    def last_guess(self) -> Optional[GuessRecord]:
        return self._history[-1] if self._history else None

    @property
    def constraints(self) -> Constraints:
        return self._constraints

    @property
    def candidates(self) -> List[str]:
        return self.store.words()

    @property
    def status(self) -> Status:
        if self._constraints.is_solved:
            return Status.SOLVED
        if not len(self.store):
            return Status.EXHAUSTED
        return Status.IN_PROGRESS

    def _apply(self, history: List[GuessRecord]) -> None:
        if self.strict:
            check_consistency(history)
        self._constraints = aggregate(history, include_hits=self.include_hits)
        self.store.retain(make_is_valid(self._constraints))
        self._history = history

    def guess(self, record: GuessRecord) -> Status:
        """Record feedback for one round and narrow the dictionary."""
        if not isinstance(record, GuessRecord):
            record = GuessRecord(tuple(record))
        self._apply(self._history + [record])
        status = self.status
        log.info("round %d: %s -> %d candidate(s), %s",
                 len(self._history), record, len(self.store), status.value)
        return status

    def replace_last(self, record: GuessRecord) -> Status:
        """
        Revise the most recent round (e.g. feedback was mistyped).

        The store is rebuilt from the original seed and refiltered, since
        filtering alone can never bring words back.
        """
        if not self._history:
            raise IndexError("no round to replace")
        if not isinstance(record, GuessRecord):
            record = GuessRecord(tuple(record))
        history = self._history[:-1] + [record]
        if self.strict:
            check_consistency(history)
        self.store = DictionaryStore(self._seed)
        self._apply(history)
        log.info("round %d revised: %s -> %d candidate(s)",
                 len(self._history), record, len(self.store))
        return self.status

    def suggest(self, n: int = 1) -> List[str]:
        """
        Best `n` next guesses. Raises ExhaustedCandidates when nothing is left.
        """
        return self.ranker.rank(self.store.words(), self._constraints, n)
