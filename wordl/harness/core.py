"""
Offline game simulation.

- run_case:  play one puzzle (one hidden answer) with a given ranker.
- run_batch: play many puzzles in sequence (optionally a sample prefix).
- Enforces Wordle's 6-turn limit at the harness layer.

Each game goes through a Session exactly as the interactive assistant does;
only the feedback comes from engine.scoring instead of a person.
"""

from __future__ import annotations

import logging
import time
from typing import Dict, Iterable, List, Tuple, Union

from wordl.engine.scoring import score, score_record
from wordl.errors import ContradictoryFeedback, ExhaustedCandidates
from wordl.solvers import BaseRanker, create_ranker
from .session import Session, Status

log = logging.getLogger(__name__)

# Single source of truth for Wordle turn budget.
WORDLE_MAX_TURNS = 6


def _assert_wordle_turns(max_turns: int) -> None:
    """Guardrail: prevent accidental runs with a different turn budget."""
    if max_turns != WORDLE_MAX_TURNS:
        raise ValueError(f"max_turns must be {WORDLE_MAX_TURNS} for Wordle-like rules; got {max_turns}")


def run_case(
        ranker: Union[str, BaseRanker],
        answer: str,
        *,
        words: Iterable[str],
        max_turns: int = WORDLE_MAX_TURNS,
        strict: bool = True,
        include_hits: bool = False,
) -> Dict:
    """
    Play one game until the answer is guessed, turns run out, or the
    dictionary can no longer produce a suggestion.

    Returns:
        dict with keys:
            answer (str), success (bool), guesses (int), reason (str),
            time_ms (float), history (list[(guess, pattern)])
        reason is one of: solved, out_of_turns, exhausted, contradictory
    """
    _assert_wordle_turns(max_turns)

    session = Session(words, ranker=ranker, strict=strict, include_hits=include_hits)
    history: List[Tuple[str, str]] = []
    reason = "out_of_turns"

    t0 = time.perf_counter_ns()
    for _ in range(max_turns):
        try:
            guess = session.suggest(1)[0]
        except ExhaustedCandidates:
            reason = "exhausted"
            break

        record = score_record(guess, answer, include_hits=include_hits)
        history.append((guess, score(guess, answer)))
        if guess == answer:
            reason = "solved"
            break

        try:
            status = session.guess(record)
        except ContradictoryFeedback:
            reason = "contradictory"
            break
        if status is Status.EXHAUSTED:
            reason = "exhausted"
            break

    dt = (time.perf_counter_ns() - t0) / 1_000_000.0
    log.debug("case %s: %s in %d guess(es)", answer, reason, len(history))
    return {
        "answer": answer,
        "success": reason == "solved",
        "guesses": len(history),
        "reason": reason,
        "time_ms": dt,
        "history": history,
    }


def run_batch(
        ranker: Union[str, BaseRanker],
        answers: List[str],
        *,
        words: Iterable[str],
        max_turns: int = WORDLE_MAX_TURNS,
        sample: int | None = None,
        strict: bool = True,
        include_hits: bool = False,
) -> List[Dict]:
    """
    Run many cases back-to-back. If 'sample' is provided, only the first K
    answers are played to speed up quick experiments.
    """
    _assert_wordle_turns(max_turns)

    words = list(words)
    rk = create_ranker(ranker) if isinstance(ranker, str) else ranker
    pool = answers[:sample] if sample is not None else answers

    out: List[Dict] = []
    for ans in pool:
        r = run_case(rk, ans, words=words, max_turns=max_turns,
                     strict=strict, include_hits=include_hits)
        r["ranker_id"] = rk.id
        out.append(r)
    return out
