"""
Build an N-letter dictionary for the assistant from a raw word list.

Features:
- Keeps only lines that are exactly N lowercase letters after stripping
  (capitalised proper nouns and words with apostrophes are dropped).
- Dedupes while preserving original order.
- Optional sorting AFTER dedupe (alphabetical).
- Writes one word per line with a trailing newline.

Usage:
    python -m script.build_wordlist --in /usr/share/dict/words \
        --out packages/datasets/data/words_6.txt --N 6 --sort
"""

import argparse
from pathlib import Path
from typing import Iterable, List

from packages.datasets.io import read_lines, write_lines
from packages.engine.feedback import is_word


def unique_preserve_order(lines: Iterable[str]) -> List[str]:
    seen, out = set(), []
    for s in lines:
        if s not in seen:
            seen.add(s)
            out.append(s)
    return out


def extract_words(lines: Iterable[str], N: int) -> List[str]:
    return unique_preserve_order(w for w in (ln.strip() for ln in lines) if is_word(w, N))


def main():
    ap = argparse.ArgumentParser(description="Extract an N-letter word list for wordle-assist.")
    ap.add_argument("--in", dest="inp", required=True, help="raw word list, one word per line")
    ap.add_argument("--out", dest="out", required=True, help="output .txt file")
    ap.add_argument("--N", type=int, default=5, help="word length")
    ap.add_argument("--sort", action="store_true", help="sort alphabetically after dedupe")
    args = ap.parse_args()

    inp = Path(args.inp)
    lines = read_lines(inp)
    out = extract_words(lines, args.N)
    if args.sort:
        out = sorted(out)

    write_lines(out, args.out)
    print(f"Input: {inp} ({len(lines)} lines) -> Output: {args.out} ({len(out)} words)")


if __name__ == "__main__":
    main()
