# apps/cli/run.py
"""
Batch simulation: play every answer (or a sample) with a ranker and record
how the assistant does.

This script:
  1) Validates the word list (prints counts + SHA).
  2) Loads the dictionary and the answer pool (defaults to the dictionary).
  3) Plays each game through a Session with a progress bar and writes:
       - CSV:  per-game results + guess/pattern history columns
       - JSON: manifest with config, word-list hash, git commit, summary

Usage:
    python -m apps.cli.run --ranker overlap --sample 200
"""

from __future__ import annotations

import argparse
import logging
import random
import sys
from pathlib import Path
from typing import Dict, List, Optional

from tqdm import tqdm

from wordl.config import add_settings_arguments, settings_from_args
from wordl.datasets import load_words, pretty_summary, validate_wordlist
from wordl.engine import WORD_LENGTH
from wordl.harness import run_case, summarize, write_csv, write_manifest
from wordl.harness.core import WORDLE_MAX_TURNS
from wordl.harness.io import git_commit_or_unknown, timestamp_id
from wordl.solvers import create_ranker, get_ranker_ids

log = logging.getLogger(__name__)


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="wordl — simulate games with a ranker")
    add_settings_arguments(ap, ranker_choices=", ".join(get_ranker_ids()))
    ap.add_argument("--answers", help="answer pool (default: the dictionary itself)")
    ap.add_argument("--sample", type=int,
                    help="play only a subset of answers (deterministic by seed)")
    ap.add_argument("--seed", type=int, default=123, help="RNG seed for --sample")
    ap.add_argument("--outdir", default="reports", help="directory for output files")
    ap.add_argument("--progress", choices=["auto", "bar", "off"], default="auto",
                    help="progress bar on stderr (auto = only on a terminal)")
    args = ap.parse_args(argv)
    settings = settings_from_args(args)

    logging.basicConfig(
        level=logging.DEBUG if settings.verbose else logging.INFO,
        format="%(levelname)s %(name)s: %(message)s",
    )
    # per-round session chatter is only interesting with --verbose
    if not settings.verbose:
        logging.getLogger("wordl.harness.session").setLevel(logging.WARNING)

    # 1) Validate the dictionary
    rep = validate_wordlist(WORD_LENGTH, settings.words_path)
    print(pretty_summary(rep))
    if not rep["exists"]:
        return 2

    # 2) Load dictionary and answers
    words = load_words(settings.words_path)
    answers = load_words(args.answers) if args.answers else list(words)
    ranker = create_ranker(settings.ranker)

    # 3) Choose cases (deterministic sample by seed)
    cases = list(answers)
    if args.sample and args.sample < len(cases):
        random.Random(args.seed).shuffle(cases)
        cases = cases[: args.sample]
    log.info("playing %d game(s) with ranker %s", len(cases), ranker.id)

    show_bar = args.progress == "bar" or (args.progress == "auto" and sys.stderr.isatty())
    results: List[Dict] = []
    for ans in tqdm(cases, ncols=80, desc="Running", unit="game", disable=not show_bar):
        r = run_case(ranker, ans, words=words, strict=settings.strict,
                     include_hits=settings.include_hits)
        r["ranker_id"] = ranker.id
        results.append(r)

    # 4) Write outputs (CSV + manifest)
    run_id = timestamp_id()
    outdir = Path(args.outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    csv_path = outdir / f"run_{run_id}.csv"
    manifest_path = outdir / f"run_{run_id}_manifest.json"

    summary = summarize(results)
    write_csv(results, str(csv_path), max_turns=WORDLE_MAX_TURNS)
    write_manifest({
        "run_id": run_id,
        "git_commit": git_commit_or_unknown(),
        "config": vars(args),
        "wordlist": rep,
        "num_cases": len(results),
        "ranker_id": ranker.id,
        "summary": summary,
    }, str(manifest_path))

    print(f"won {summary['wins']}/{summary['games']} ({summary['win_rate']:.1%}), "
          f"mean guesses {summary['mean_guesses']:.2f}, reasons {summary['reasons']}")
    print(f"Wrote: {csv_path}")
    print(f"Wrote: {manifest_path}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
