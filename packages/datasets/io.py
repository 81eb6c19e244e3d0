from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from packages.engine.errors import DataSourceError
from packages.engine.feedback import is_word

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"


def default_wordlist(N: int = 5) -> Path:
    """Bundled dictionary for word length N (only N=5 ships)."""
    return DATA_DIR / f"words_{N}.txt"


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


def load_words(path: Path | str | None = None, N: int = 5, strict: bool = False) -> List[str]:
    """
    Load a newline-delimited dictionary of N-letter words.

    Lines are stripped and lowercased; blank lines are skipped. Anything else
    that isn't N letters a-z is malformed:
      - strict=False : dropped, with one WARNING giving the count
      - strict=True  : DataSourceError naming the first bad line

    Raises DataSourceError if the file is missing, unreadable or yields no words.
    """
    p = Path(path) if path is not None else default_wordlist(N)
    try:
        lines = read_lines(p)
    except (OSError, UnicodeDecodeError) as e:
        raise DataSourceError(f"can't read word list {p}: {e}") from e

    words: List[str] = []
    bad = 0
    for lineno, raw in enumerate(lines, start=1):
        w = raw.strip().lower()
        if not w:
            continue
        if not is_word(w, N):
            if strict:
                raise DataSourceError(f"{p}:{lineno}: not a {N}-letter word: {raw!r}")
            bad += 1
            continue
        words.append(w)

    if bad:
        logger.warning("%s: skipped %d malformed line(s)", p, bad)
    if not words:
        raise DataSourceError(f"word list {p} contains no {N}-letter words")

    logger.debug("%s: read %d words", p, len(words))
    return words
