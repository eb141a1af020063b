# apps/cli/assist.py
"""
Interactive assistant: suggests guesses and narrows the dictionary as you
report what the game answered.

Each round, enter the word you played followed by its feedback, either as a
pattern (G = green, Y = yellow, - = gray):

    > crane -Y--G

or with just the word, and you are asked for green positions (digits 1-5)
and yellow letters:

    > crane
      green positions: 5
      yellow letters : r

Other commands:
    fix <word> [<pattern>]   redo the last round (mistyped feedback)
    top <n>                  change how many suggestions are shown
    q                        quit

Usage:
    python -m apps.cli.assist --words wordl/datasets/data/words_5.txt
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional

from wordl.config import Settings, add_settings_arguments, settings_from_args
from wordl.datasets import load_words, pretty_summary, validate_wordlist
from wordl.engine import (WORD_LENGTH, GuessRecord, record_from_marks, record_from_pattern,
                          validate_guess)
from wordl.errors import ExhaustedCandidates, WordlError
from wordl.harness import Session, Status
from wordl.solvers import get_ranker_ids


PROMPT = "> "


def _read_record(session: Session, parts: List[str]) -> GuessRecord:
    """Turn '<word> [<pattern>]' into a record, prompting for marks if needed."""
    word = parts[0]
    if not validate_guess(word, session.vocabulary):
        # still recorded: the game may accept words our list lacks
        print(f"warning: {word!r} is not in the dictionary")
    if len(parts) > 1:
        return record_from_pattern(word, parts[1])
    hits = input("  green positions: ")
    contains = input("  yellow letters : ")
    return record_from_marks(word, hits=hits, contains=contains)


def _show(session: Session, top_n: int) -> None:
    print(f"{len(session.store)} candidate(s) left")
    for w in session.suggest(top_n):
        print(f"suggestion: {w}")


def run(session: Session, settings: Settings) -> Status:
    """The prompt loop. Returns the status the session ended in."""
    top_n = settings.top_n
    try:
        _show(session, top_n)
    except ExhaustedCandidates as e:
        print(f"error: {e}")
        return session.status

    while True:
        try:
            line = input(PROMPT).strip()
        except EOFError:
            print()
            return session.status
        if not line:
            continue

        parts = line.split()
        cmd = parts[0].lower()
        if cmd in ("q", "quit", "exit"):
            return session.status

        try:
            if cmd == "top" and len(parts) == 2:
                top_n = max(1, int(parts[1]))
            elif cmd == "fix" and len(parts) > 1:
                session.replace_last(_read_record(session, parts[1:]))
            else:
                session.guess(_read_record(session, parts))
        except (WordlError, IndexError, ValueError) as e:
            # bad input never ends the session; the round was not recorded
            print(f"error: {e}")
            continue

        status = session.status
        if status is Status.SOLVED:
            print(f"solved: {session.constraints.solution}")
            return status
        try:
            _show(session, top_n)
        except ExhaustedCandidates as e:
            print(f"error: {e} (use 'fix' to correct the last round)")


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordl — interactive guess assistant")
    add_settings_arguments(ap, ranker_choices=", ".join(get_ranker_ids()))
    args = ap.parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    rep = validate_wordlist(WORD_LENGTH, settings.words_path)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    session = Session(
        load_words(settings.words_path),
        ranker=settings.ranker,
        strict=settings.strict,
        include_hits=settings.include_hits,
    )
    status = run(session, settings)
    return 0 if status is Status.SOLVED else 1


if __name__ == "__main__":
    raise SystemExit(main())
