"""
Download the Stanford GraphBase five-letter word list and write a clean
dictionary file.

What it does:
- Downloads the plain-text list (one word per line).
- Lowercases, keeps alphabetic five-letter words, de-duplicates in file order.
- Writes the result where the apps look for it by default.

Usage:
    python -m script.fetch_words
    python -m script.fetch_words --out wordl/datasets/data/words_5.txt --sort
"""

import argparse

import requests

from wordl.config import DEFAULT_WORDS_PATH
from wordl.datasets import write_lines
from wordl.engine import WORD_LENGTH

URL = "https://raw.githubusercontent.com/charlesreid1/five-letter-words/master/sgb-words.txt"


def unique_preserve_order(words):
    seen = set()
    out = []
    for w in words:
        if w not in seen:
            seen.add(w)
            out.append(w)
    return out


def fetch_words(url: str = URL) -> list[str]:
    r = requests.get(url, timeout=30)
    r.raise_for_status()
    words = [ln.strip().lower() for ln in r.text.splitlines()]
    return unique_preserve_order(w for w in words if len(w) == WORD_LENGTH and w.isalpha())


def main():
    ap = argparse.ArgumentParser(description="Download the five-letter dictionary")
    ap.add_argument("--url", default=URL)
    ap.add_argument("--out", default=DEFAULT_WORDS_PATH)
    ap.add_argument("--sort", action="store_true", help="sort alphabetically instead of "
                                                        "keeping the source order")
    args = ap.parse_args()

    words = fetch_words(args.url)
    if args.sort:
        words = sorted(words)

    write_lines(words, args.out)
    print(f"Wrote {len(words)} words -> {args.out}")


if __name__ == "__main__":
    main()
