from __future__ import annotations

"""
Lightweight fuzzy matcher used to rank library items against the search box.

A single field is scored by the first tier that applies:

* contiguous substring (prefix matches rank above interior ones)
* word-initial / acronym match ("mj" -> "Mid Journey")
* ordered subsequence ("mdjrn" -> "Midjourney"), weighted towards
  contiguous runs and word starts and discounted for long texts

0 means "no match" and is returned iff the query is not an ordered
subsequence of the text. Any positive value only matters relative to other
scores for the same query.
"""

from typing import Iterable, Optional

from .config import (
    SUBSEQ_ADJACENT_BONUS,
    SUBSEQ_BOUNDARY_BONUS,
    SUBSEQ_CHAR_POINTS,
    SUBSEQ_COVERAGE_FLOOR,
    SUBSEQ_SPAN,
    SUBSEQ_SQUASH_K,
    SUBSTRING_BASE,
    SUBSTRING_PREFIX_BONUS,
    WORD_INITIAL_BASE,
    WORD_INITIAL_SPAN,
    WORD_INITIAL_SQUASH_K,
)


def _word_initial_hits(q: str, t: str) -> int:
    """Number of words consumed, or 0 if the query was not fully consumed."""
    qi = 0
    hits = 0
    for word in t.split():
        if qi < len(q) and word.startswith(q[qi]):
            hits += 1
            qi += 1
    return hits if qi == len(q) else 0


def _subsequence_points(q: str, t: str) -> float:
    points = 0
    qi = 0
    prev = -2
    for ti, ch in enumerate(t):
        if qi == len(q):
            break
        if ch != q[qi]:
            continue
        points += SUBSEQ_CHAR_POINTS
        if ti == prev + 1:
            points += SUBSEQ_ADJACENT_BONUS
        if ti == 0 or t[ti - 1].isspace():
            points += SUBSEQ_BOUNDARY_BONUS
        prev = ti
        qi += 1

    if qi < len(q):
        return 0.0

    coverage = len(q) / len(t)
    return points * (SUBSEQ_COVERAGE_FLOOR + coverage * (1.0 - SUBSEQ_COVERAGE_FLOOR))


def fuzzy_score(query: Optional[str], text: Optional[str]) -> float:
    """
    Score how well ``text`` matches ``query`` (case-insensitive).
    Never raises; empty or missing inputs score 0.
    """
    if not query or not text:
        return 0.0

    q = query.casefold()
    t = text.casefold()

    pos = t.find(q)
    if pos >= 0:
        return SUBSTRING_BASE + (SUBSTRING_PREFIX_BONUS if pos == 0 else 0)

    hits = _word_initial_hits(q, t)
    if hits > 1:
        return WORD_INITIAL_BASE + WORD_INITIAL_SPAN * hits / (hits + WORD_INITIAL_SQUASH_K)

    raw = _subsequence_points(q, t)
    if raw <= 0:
        return 0.0
    return 1.0 + SUBSEQ_SPAN * raw / (raw + SUBSEQ_SQUASH_K)


def fuzzy_score_fields(query: Optional[str], fields: Iterable[Optional[str]]) -> float:
    """
    Best single-field score across an item's fields; absent/empty fields are skipped.
    """
    best = 0.0
    for field in fields:
        if not field:
            continue
        s = fuzzy_score(query, field)
        if s > best:
            best = s
    return best
