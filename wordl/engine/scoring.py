"""
Feedback oracle: what the game would answer for (guess, answer).

Used by the offline simulator to play games against a known answer.

Pattern symbols:
  - 'G'  : correct letter in the correct position   -> Hit
  - 'Y'  : letter present, wrong position           -> Contains
  - '-'  : letter absent (or already used up)       -> Miss

Two passes, so repeated letters respect the answer's true multiplicity:
  1) mark greens, count the answer letters left unmatched
  2) mark yellows while unmatched copies remain
"""

from collections import Counter

from wordl.errors import MalformedRecord
from .feedback import Contains, GuessRecord, Hit, Miss, record_from_pattern


def score(guess: str, answer: str) -> str:
    """
    Examples:
      score("belle", "level") -> "-GYYY"
      score("lemon", "level") -> "GG---"
    """
    guess = guess.strip().lower()
    answer = answer.strip().lower()
    if len(guess) != len(answer):
        raise MalformedRecord(f"guess and answer differ in length: {guess!r} vs {answer!r}")

    pattern = ["-"] * len(guess)
    unmatched = Counter()
    for i, (g, a) in enumerate(zip(guess, answer)):
        if g == a:
            pattern[i] = "G"
        else:
            unmatched[a] += 1

    for i, g in enumerate(guess):
        if pattern[i] == "G":
            continue
        if unmatched[g] > 0:
            pattern[i] = "Y"
            unmatched[g] -= 1

    return "".join(pattern)


def score_record(guess: str, answer: str, *, include_hits: bool = False) -> GuessRecord:
    """
    The feedback for `guess` as a GuessRecord.

    A gray copy of a letter that is green elsewhere in the same guess only
    says "not here": the answer still has the green copy. Such grays become
    Contains, at most one per green copy, so the required count never exceeds
    the answer's true count (the green position satisfies it). Grays beyond
    that, and grays of a letter with no green copy, stay Miss.

    With include_hits the greens already count toward the required letters,
    so no gray is converted.
    """
    record = record_from_pattern(guess, score(guess, answer))
    if include_hits:
        return record

    spare = Counter(o.char for o in record if isinstance(o, Hit))
    letters = []
    for o in record:
        if isinstance(o, Miss) and spare[o.char] > 0:
            spare[o.char] -= 1
            letters.append(Contains(o.char))
        else:
            letters.append(o)
    return GuessRecord(tuple(letters))
