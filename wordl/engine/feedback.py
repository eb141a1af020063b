"""
Feedback model: what one guess told us, letter by letter.

Each position of a guess yields exactly one outcome:
  - Hit(c)      : `c` is correct at this exact position      (green)
  - Contains(c) : `c` is in the solution, but not here       (yellow)
  - Miss(c)     : `c` is not in the solution at all          (gray)

A GuessRecord is the fixed-width sequence of WORD_LENGTH outcomes for one
submitted word. Records are plain values: nothing checks that the outcomes
inside one record are consistent with a real solution.

Two converters build records from what a person (or the simulator) types:
  - record_from_pattern("crane", "GY--G")
  - record_from_marks("crane", hits="15", contains="r")
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, Union

from wordl.errors import MalformedRecord

WORD_LENGTH = 5

# Pattern symbols, same convention as engine.scoring
HIT_SYMBOL = "G"
CONTAINS_SYMBOL = "Y"
MISS_SYMBOLS = ("-", ".")


def _check_char(char: str) -> None:
    if not isinstance(char, str) or len(char) != 1:
        raise MalformedRecord(f"letter outcome needs exactly one character, got {char!r}")


@dataclass(frozen=True)
class Hit:
    char: str

    def __post_init__(self):
        _check_char(self.char)


@dataclass(frozen=True)
class Miss:
    char: str

    def __post_init__(self):
        _check_char(self.char)


@dataclass(frozen=True)
class Contains:
    char: str

    def __post_init__(self):
        _check_char(self.char)


Letter = Union[Hit, Miss, Contains]

_SYMBOL_OF = {Hit: HIT_SYMBOL, Contains: CONTAINS_SYMBOL, Miss: MISS_SYMBOLS[0]}


@dataclass(frozen=True)
class GuessRecord:
    """Feedback for one guess: exactly WORD_LENGTH letter outcomes."""
    letters: Tuple[Letter, ...]

    def __post_init__(self):
        letters = tuple(self.letters)
        if len(letters) != WORD_LENGTH:
            raise MalformedRecord(
                f"guess record needs {WORD_LENGTH} outcomes, got {len(letters)}")
        for o in letters:
            if not isinstance(o, (Hit, Miss, Contains)):
                raise MalformedRecord(f"not a letter outcome: {o!r}")
        object.__setattr__(self, "letters", letters)

    def __iter__(self) -> Iterator[Letter]:
        return iter(self.letters)

    def __len__(self) -> int:
        return len(self.letters)

    def __getitem__(self, idx: int) -> Letter:
        return self.letters[idx]

    @property
    def word(self) -> str:
        """The guessed word this feedback belongs to."""
        return "".join(o.char for o in self.letters)

    @property
    def pattern(self) -> str:
        """Render as a G/Y/- string, e.g. 'GY--G'."""
        return "".join(_SYMBOL_OF[type(o)] for o in self.letters)

    def __str__(self) -> str:
        return f"{self.word} {self.pattern}"


def record_from_pattern(word: str, pattern: str) -> GuessRecord:
    """
    Build a record from a guessed word and its feedback pattern.

    Pattern symbols (case-insensitive):
      G     -> Hit
      Y     -> Contains
      - or .-> Miss

    Raises MalformedRecord on a length mismatch or an unknown symbol.
    """
    word = word.strip().lower()
    pattern = pattern.strip().upper()
    if len(word) != WORD_LENGTH or len(pattern) != WORD_LENGTH:
        raise MalformedRecord(
            f"word and pattern must both have {WORD_LENGTH} characters: {word!r} {pattern!r}")

    letters = []
    for ch, sym in zip(word, pattern):
        if sym == HIT_SYMBOL:
            letters.append(Hit(ch))
        elif sym == CONTAINS_SYMBOL:
            letters.append(Contains(ch))
        elif sym in MISS_SYMBOLS:
            letters.append(Miss(ch))
        else:
            raise MalformedRecord(f"unknown pattern symbol {sym!r} in {pattern!r}")
    return GuessRecord(tuple(letters))


def record_from_marks(word: str, hits: str = "", contains: str = "") -> GuessRecord:
    """
    Build a record the way a person reports feedback at the prompt.

    Args:
      word     : the guessed word
      hits     : 1-based positions that came back green, e.g. "15"
      contains : letters that came back yellow, e.g. "ra"; a letter given
                 twice marks two positions

    Each contains-letter marks the first position holding that letter that is
    not already marked. Every unmarked position is a Miss.
    """
    word = word.strip().lower()
    if len(word) != WORD_LENGTH:
        raise MalformedRecord(f"guess must have {WORD_LENGTH} letters: {word!r}")

    marks = [None] * WORD_LENGTH
    for d in hits.replace(",", "").replace(" ", ""):
        if not d.isdigit() or not 1 <= int(d) <= WORD_LENGTH:
            raise MalformedRecord(f"hit position must be a digit 1..{WORD_LENGTH}: {d!r}")
        marks[int(d) - 1] = Hit(word[int(d) - 1])

    for ch in contains.replace(",", "").replace(" ", "").lower():
        for i, w in enumerate(word):
            if w == ch and marks[i] is None:
                marks[i] = Contains(ch)
                break
        else:
            raise MalformedRecord(f"contains letter {ch!r} has no free position in {word!r}")

    return GuessRecord(tuple(m if m is not None else Miss(word[i]) for i, m in enumerate(marks)))
