"""
Word-list validator.

What this module does:
- Validate the dictionary file the assistant is seeded from.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict (for manifests) and a pretty one-line summary.

Typical use:
    from wordl.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "wordl/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

import hashlib
from dataclasses import asdict, dataclass
from pathlib import Path
from typing import Dict, List, Tuple


@dataclass
class WordlistReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words
    invalid_lines: int   # number of invalid lines encountered
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


def _sha256_file(path: Path) -> str:
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Returns (valid_words, invalid_count). Blank lines count as invalid.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if w and w == w.lower() and w.isalpha() and len(w) == N:
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate a dictionary file for word length N.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` is
    strict: the file exists, is non-empty, and has no invalid lines.
    Duplicates are reported but do not fail validation (the store collapses
    them).
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, path, False, 0, "", 0, 0, False,
                             [f"word list not found: {path}"])
        return asdict(rep)

    words, invalid = _load_and_check(p, N)
    unique = len(set(words))

    issues: List[str] = []
    if not words:
        issues.append("word list contains 0 valid words")
    if invalid:
        issues.append(f"word list has {invalid} invalid line(s)")
    if unique != len(words):
        issues.append(f"word list contains {len(words) - unique} duplicate line(s)")

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=_sha256_file(p),
        unique_count=unique,
        invalid_lines=invalid,
        passed=bool(words) and invalid == 0,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Example:
        N=5 | words=5757 (uniq=5757, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    line = (f"N={report['N']} | words={report['count']} "
            f"(uniq={report['unique_count']}, sha={sha}) | {status}")
    if report["issues"]:
        line += " | " + "; ".join(report["issues"])
    return line
