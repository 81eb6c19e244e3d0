"""
Dictionary validator.

What this module does:
- Validate one word list (words_N.txt) before it is handed to the engine.
- Enforce formatting rules (lowercase, a–z only, exact length N, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw file.
- Return a machine-readable dict and provide a pretty one-line summary.

Typical use:
    from packages.datasets import validate_wordlist, pretty_summary
    rep = validate_wordlist(5, "packages/datasets/data/words_5.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict, field
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from packages.engine.feedback import is_word


@dataclass
class WordlistReport:
    N: int
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered
    passed: bool = False
    issues: List[str] = field(default_factory=list)


def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path, N: int) -> Tuple[List[str], int]:
    """
    Rules:
      - one token per line, already lowercase a–z, exact length N
      - empty/whitespace-only lines are INVALID

    Returns:
      (valid_words, invalid_count)
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.strip()
            if is_word(w, N):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def validate_wordlist(N: int, path: str) -> Dict:
    """
    Validate the dictionary at `path` for word length N.

    Returns a JSON-serializable dict (WordlistReport schema). `passed` is
    strict: the file exists, holds at least one word and has no invalid
    lines. Duplicates are listed in `issues` but do not fail the check.
    A file that can't be read or decoded gives a failed report, never an
    exception; the loader raises the fatal error.
    """
    p = Path(path)
    if not p.exists():
        rep = WordlistReport(N, str(path), False, 0, "", 0, 0,
                             issues=[f"word list not found: {path}"])
        return asdict(rep)

    try:
        words, invalid = _load_and_check(p, N)
        sha = _sha256_file(p)
    except (OSError, UnicodeDecodeError) as e:
        rep = WordlistReport(N, str(p), True, 0, "", 0, 0,
                             issues=[f"word list unreadable: {e}"])
        return asdict(rep)

    rep = WordlistReport(
        N=N,
        path=str(p),
        exists=True,
        count=len(words),
        sha256=sha,
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )

    if rep.count == 0:
        rep.issues.append("word list contains 0 valid words")
    if invalid:
        rep.issues.append(f"word list has {invalid} invalid line(s)")
    if rep.count != rep.unique_count:
        rep.issues.append(f"word list contains {rep.count - rep.unique_count} duplicate line(s)")

    rep.passed = rep.count > 0 and invalid == 0
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for the console.

    Example:
        N=5 | words=2309 (uniq=2309, invalid=0, sha=abc123def456) | OK
    """
    status = "OK" if report["passed"] else "FAIL"
    sha = (report.get("sha256") or "")[:12]
    return (
        f"N={report['N']} | words={report['count']} (uniq={report['unique_count']}, "
        f"invalid={report['invalid_lines']}, sha={sha}) | {status}"
    )
