"""
Dictionary store: the candidate words still in play for one session.

Seeded once; afterwards the only mutation is retain(predicate), so the store
shrinks monotonically round over round. Words are kept unique and in natural
string order.
"""

from __future__ import annotations

import logging
from typing import Callable, Iterable, Iterator, List

from wordl.errors import MalformedRecord
from .feedback import WORD_LENGTH

log = logging.getLogger(__name__)


class DictionaryStore:

    def __init__(self, words: Iterable[str]):
        unique = set()
        for w in words:
            if len(w) != WORD_LENGTH:
                raise MalformedRecord(f"dictionary word must have {WORD_LENGTH} letters: {w!r}")
            unique.add(w)
        self._words: List[str] = sorted(unique)
        log.debug("dictionary seeded with %d word(s)", len(self._words))

    def retain(self, predicate: Callable[[str], bool]) -> int:
        """
        Drop every word the predicate rejects, keeping survivors in order.
        Returns how many words were removed.
        """
        before = len(self._words)
        self._words = [w for w in self._words if predicate(w)]
        removed = before - len(self._words)
        log.debug("retain: %d -> %d (removed %d)", before, len(self._words), removed)
        return removed

    def words(self) -> List[str]:
        """Snapshot copy of the current words."""
        return list(self._words)

    def __len__(self) -> int:
        return len(self._words)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._words))

    def __contains__(self, word: object) -> bool:
        return word in self._words

    def __repr__(self) -> str:
        return f"DictionaryStore({len(self._words)} words)"
