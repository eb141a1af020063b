from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from wordl.engine.feedback import WORD_LENGTH

log = logging.getLogger(__name__)


def read_lines(p: Path | str) -> List[str]:
    """
    Read a UTF-8 text file into a list of lines, stripping trailing CR/LF.
    Raises FileNotFoundError if the path doesn't exist.
    """
    p = Path(p)
    if not p.exists():
        raise FileNotFoundError(p)
    return [ln.rstrip("\r\n") for ln in p.read_text(encoding="utf-8").splitlines()]


def write_lines(lines: Iterable[str], p: Path | str) -> str:
    """
    Write lines to a UTF-8 text file, ensuring a trailing newline.
    Returns the string path written.
    """
    p = Path(p)
    p.parent.mkdir(parents=True, exist_ok=True)
    p.write_text("\n".join(lines) + "\n", encoding="utf-8")
    return str(p)


def load_words(p: Path | str, N: int = WORD_LENGTH) -> List[str]:
    """
    Dictionary words from a one-word-per-line file: lowercased, blanks
    dropped, only alphabetic words of length N kept (file order).
    """
    words: List[str] = []
    skipped = 0
    for ln in read_lines(p):
        w = ln.strip().lower()
        if not w:
            continue
        if len(w) == N and w.isalpha():
            words.append(w)
        else:
            skipped += 1
    log.debug("loaded %d word(s) from %s, skipped %d", len(words), p, skipped)
    return words
