"""
Report files for simulation runs: one CSV row per game plus a JSON manifest.

Patterns are written with a leading apostrophe so a spreadsheet keeps
"-GYY-" as text.
"""

from __future__ import annotations

import csv
import datetime as dt
import json
import subprocess
from collections import Counter
from pathlib import Path
from typing import Dict, List


def _excel_safe_pattern(patt: str) -> str:
    return "'" + patt if patt else patt


def write_csv(results: List[Dict], path: str, max_turns: int) -> str:
    """One row per game; guess_i/patt_i columns run to max_turns, blank past the end."""
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)

    turn_cols = [c for i in range(1, max_turns + 1) for c in (f"guess_{i}", f"patt_{i}")]
    fields = ["ranker", "answer", "success", "reason", "guesses", "time_ms"] + turn_cols

    with p.open("w", newline="", encoding="utf-8") as f:
        out = csv.DictWriter(f, fieldnames=fields)
        out.writeheader()
        for r in results:
            row = {
                "ranker": r.get("ranker_id", "?"),
                "answer": r["answer"],
                "success": r["success"],
                "reason": r.get("reason", ""),
                "guesses": r["guesses"],
                "time_ms": round(float(r["time_ms"]), 3),
            }
            played = r.get("history", [])
            for turn in range(1, max_turns + 1):
                guess, patt = played[turn - 1] if turn <= len(played) else ("", "")
                row[f"guess_{turn}"] = guess
                row[f"patt_{turn}"] = _excel_safe_pattern(patt)
            out.writerow(row)

    return str(p)


def write_manifest(manifest: Dict, path: str) -> str:
    p = Path(path)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text(json.dumps(manifest, indent=2), encoding="utf-8")
    return str(p)


def summarize(results: List[Dict]) -> Dict:
    """Win rate, mean guesses over wins, and a count per finishing reason."""
    n = len(results)
    wins = [r for r in results if r["success"]]
    return {
        "games": n,
        "wins": len(wins),
        "win_rate": (len(wins) / n) if n else 0.0,
        "mean_guesses": (sum(r["guesses"] for r in wins) / len(wins)) if wins else 0.0,
        "reasons": dict(Counter(r["reason"] for r in results)),
    }


def timestamp_id() -> str:
    """UTC run id for file names, e.g. 20261019T024121Z."""
    return dt.datetime.now(dt.timezone.utc).strftime("%Y%m%dT%H%M%SZ")


def git_commit_or_unknown() -> str:
    """Short HEAD hash for the manifest, or 'unknown' outside a git checkout."""
    try:
        out = subprocess.check_output(["git", "rev-parse", "--short", "HEAD"],
                                      stderr=subprocess.DEVNULL)
    except (OSError, subprocess.CalledProcessError):
        return "unknown"
    return out.decode().strip()
