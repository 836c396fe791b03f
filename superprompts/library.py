from __future__ import annotations

"""
In-memory view over one user's prompt library.

The dashboard keeps the whole collection loaded; every keystroke or sidebar
click re-derives the visible list from it:

    filters -> sort mode -> fuzzy ranking (only when a query is typed)

Ranking is a stable sort on the fuzzy score, so prompts that tie keep the
order the selected sort mode gave them.
"""

import re
from datetime import datetime
from typing import Iterable, List, Optional, Sequence

from loguru import logger

from .config import DEFAULT_SORT_MODE, SORT_MODES, LibraryFilter, Prompt, RankedPrompt
from .fuzzy import fuzzy_score_fields
from .utils.text_clean import clean_query_text


# -----------------------
# Search fields
# -----------------------

def prompt_search_fields(prompt: Prompt) -> List[Optional[str]]:
    """Title, body, notes, every tag name, then the model name."""
    fields: List[Optional[str]] = [prompt.title, prompt.content, prompt.notes]
    fields.extend(t.name for t in prompt.tags)
    fields.append(prompt.model_name)
    return fields


# -----------------------
# Sidebar filters
# -----------------------

def is_filter_active(flt: LibraryFilter) -> bool:
    return bool(
        clean_query_text(flt.query)
        or flt.folder_id
        or flt.model_slug
        or flt.tags
        or flt.content_type
        or flt.favorites_only
    )


def _has_tags(prompt: Prompt, wanted: Sequence[str]) -> bool:
    have = {t.name.casefold() for t in prompt.tags}
    return all(w.casefold() in have for w in wanted)


def apply_filters(prompts: Iterable[Prompt], flt: LibraryFilter) -> List[Prompt]:
    out: List[Prompt] = []
    for p in prompts:
        if flt.folder_id and not p.in_folder(flt.folder_id):
            continue
        if flt.model_slug and (p.ai_model is None or p.ai_model.slug != flt.model_slug):
            continue
        if flt.tags and not _has_tags(p, flt.tags):
            continue
        if flt.content_type and p.content_type != flt.content_type:
            continue
        if flt.favorites_only and not p.is_favorite:
            continue
        out.append(p)
    return out


# -----------------------
# Sorting
# -----------------------

# fromisoformat before 3.11 only takes 3 or 6 fractional digits and no "Z"
_FRACTION_RX = re.compile(r"\.(\d+)")


def _timestamp(value: str) -> float:
    if not value:
        return 0.0
    iso = value.strip().replace("Z", "+00:00")
    iso = _FRACTION_RX.sub(lambda m: "." + m.group(1)[:6].ljust(6, "0"), iso, count=1)
    try:
        return datetime.fromisoformat(iso).timestamp()
    except ValueError:
        logger.warning("Unparseable timestamp {!r}; sorting it as oldest", value)
        return 0.0


def sort_prompts(prompts: Iterable[Prompt], mode: str = DEFAULT_SORT_MODE) -> List[Prompt]:
    """
    Order prompts for the list view. Unknown modes fall back to newest first.
    """
    items = list(prompts)
    if mode not in SORT_MODES:
        logger.warning("Unknown sort mode '{}'; falling back to '{}'", mode, DEFAULT_SORT_MODE)
        mode = DEFAULT_SORT_MODE

    if mode == "oldest":
        return sorted(items, key=lambda p: _timestamp(p.created_at))
    if mode == "title-az":
        return sorted(items, key=lambda p: p.title.casefold())
    if mode == "title-za":
        return sorted(items, key=lambda p: p.title.casefold(), reverse=True)
    if mode == "model-az":
        return sorted(items, key=lambda p: (p.model_name or "").casefold())
    return sorted(items, key=lambda p: _timestamp(p.created_at), reverse=True)


# -----------------------
# Fuzzy ranking
# -----------------------

def rank_prompts(prompts: Iterable[Prompt], query: str) -> List[RankedPrompt]:
    """
    Score every prompt against ``query``, drop non-matches and order by
    descending score. Ties keep their incoming order. A blank query ranks
    nothing: every prompt comes back with score 0 in its original order.
    """
    items = list(prompts)
    if not query:
        return [RankedPrompt(prompt=p, score=0) for p in items]

    scored = [RankedPrompt(prompt=p, score=fuzzy_score_fields(query, prompt_search_fields(p))) for p in items]
    hits = [r for r in scored if r.score > 0]
    hits.sort(key=lambda r: r.score, reverse=True)
    return hits


def filter_library(prompts: Iterable[Prompt], flt: LibraryFilter) -> List[RankedPrompt]:
    """
    Visible list for the current dashboard state.
    """
    items = list(prompts)
    query = clean_query_text(flt.query)

    filtered = apply_filters(items, flt)
    ordered = sort_prompts(filtered, flt.sort_mode)
    ranked = rank_prompts(ordered, query)

    logger.debug(
        "Library pass: {} prompts -> {} after filters -> {} shown (query_len={}, sort={})",
        len(items), len(filtered), len(ranked), len(query), flt.sort_mode,
    )
    return ranked
