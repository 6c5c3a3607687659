"""
Dataset validator for the word lists.

What this module does:
- Validate a pair of word lists: the guessable list (valid guesses that are
  never answers) and the solutions list (words that may be the answer).
- Enforce formatting rules (lowercase, a–z only, exact length, one per line).
- Detect duplicates and invalid lines; compute SHA-256 of the raw files.
- Report words that appear in both lists (the two are meant to be disjoint;
  overlap is harmless to the solvers, which dedupe the guess pool).
- Return a machine-readable dict (for manifests) and provide a pretty one-line summary.

Typical use:
    from wordle_solver.datasets import validate_wordlists, pretty_summary
    rep = validate_wordlists("data/guessable.txt", "data/solutions.txt")
    print(pretty_summary(rep))
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, List, Tuple
import hashlib

from wordle_solver.engine.validation import is_word_shape


# -----------------------------
# Dataclasses for structured reports
# -----------------------------

@dataclass
class FileReport:
    """Per-file diagnostics and metadata."""
    path: str            # file path (as given)
    exists: bool         # did the file exist on disk?
    count: int           # number of VALID words
    sha256: str          # SHA-256 of raw file bytes (empty string if missing)
    unique_count: int    # unique valid words (after dedupe)
    invalid_lines: int   # number of invalid lines encountered


@dataclass
class ValidationReport:
    """Top-level validation result for the (guessable, solutions) pair."""
    guessable: FileReport
    solutions: FileReport
    overlap: int         # words present in both lists
    passed: bool
    issues: List[str]    # human-friendly list of problems (if any)


# -----------------------------
# Helpers
# -----------------------------

def _sha256_file(path: Path) -> str:
    """Compute SHA-256 of a file's raw bytes."""
    h = hashlib.sha256()
    with path.open("rb") as f:
        for chunk in iter(lambda: f.read(8192), b""):
            h.update(chunk)
    return h.hexdigest()


def _load_and_check(path: Path) -> Tuple[List[str], int]:
    """
    Load words from a text file, counting the lines that aren't words.

    Same rules as datasets.io.load_word_list, but lenient: bad lines are
    counted instead of raised so the report can show all of them.
    """
    valid: List[str] = []
    invalid = 0

    with path.open("r", encoding="utf-8") as f:
        for raw in f:
            w = raw.rstrip()
            if is_word_shape(w):
                valid.append(w)
            else:
                invalid += 1

    return valid, invalid


def _file_report(path: Path, words: List[str], invalid: int) -> FileReport:
    return FileReport(
        path=str(path),
        exists=True,
        count=len(words),
        sha256=_sha256_file(path),
        unique_count=len(set(words)),
        invalid_lines=invalid,
    )


# -----------------------------
# Public API
# -----------------------------

def validate_wordlists(guessable_path: str, solutions_path: str) -> Dict:
    """
    Validate the guessable/solutions word lists.

    Returns
    -------
    Dict
        A JSON-serializable dictionary (see ValidationReport schema) with:
          - counts, SHA-256, duplicate/invalid flags
          - overlap between the lists
          - `passed` boolean (strict: requires non-empty solutions, no invalids)
          - `issues` (list of strings) to surface any problems
    """
    issues: List[str] = []

    g_p = Path(guessable_path)
    s_p = Path(solutions_path)

    # Early return if either file is missing
    if not g_p.exists() or not s_p.exists():
        if not g_p.exists():
            issues.append(f"guessable file not found: {guessable_path}")
        if not s_p.exists():
            issues.append(f"solutions file not found: {solutions_path}")
        rep = ValidationReport(
            guessable=FileReport(guessable_path, g_p.exists(), 0, "", 0, 0),
            solutions=FileReport(solutions_path, s_p.exists(), 0, "", 0, 0),
            overlap=0,
            passed=False,
            issues=issues,
        )
        return asdict(rep)

    guessable, g_invalid = _load_and_check(g_p)
    solutions, s_invalid = _load_and_check(s_p)
    g_report = _file_report(g_p, guessable, g_invalid)
    s_report = _file_report(s_p, solutions, s_invalid)

    both = set(guessable) & set(solutions)
    if both:
        # Surface a few examples to debug quickly (limit to 5 for brevity)
        issues.append(f"{len(both)} word(s) in both lists (e.g., {sorted(both)[:5]})")

    if s_report.count == 0:
        issues.append("solutions file contains 0 valid words")

    if g_invalid:
        issues.append(f"guessable has {g_invalid} invalid line(s)")
    if s_invalid:
        issues.append(f"solutions has {s_invalid} invalid line(s)")

    if g_report.count != g_report.unique_count:
        issues.append("guessable contains duplicate lines")
    if s_report.count != s_report.unique_count:
        issues.append("solutions contains duplicate lines")

    # An empty guessable list is fine: guesses then come from solutions only.
    passed = g_invalid == 0 and s_invalid == 0 and s_report.count > 0

    rep = ValidationReport(
        guessable=g_report,
        solutions=s_report,
        overlap=len(both),
        passed=passed,
        issues=issues,
    )
    return asdict(rep)


def pretty_summary(report: Dict) -> str:
    """
    Produce a compact, human-friendly one-liner for console/docs.

    Example:
        guessable=10657 (uniq=10657, sha=abc123...) | solutions=2315 (uniq=2315, sha=def456...) | overlap=0 | OK
    """
    g = report["guessable"]
    s = report["solutions"]
    status = "OK" if report["passed"] else "FAIL"
    # abbreviate sha to 12 chars for readability
    g_sha = (g.get("sha256") or "")[:12]
    s_sha = (s.get("sha256") or "")[:12]
    return (
        f"guessable={g['count']} (uniq={g['unique_count']}, sha={g_sha}) "
        f"| solutions={s['count']} (uniq={s['unique_count']}, sha={s_sha}) "
        f"| overlap={report['overlap']} | {status}"
    )
