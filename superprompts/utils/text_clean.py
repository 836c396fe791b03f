# superprompts/utils/text_clean.py
from __future__ import annotations

from typing import Optional

from ..config import MAX_QUERY_CHARS


def clean_query_text(q: Optional[str], max_len: Optional[int] = None) -> str:
    """
    Minimal query normaliser for the search box:
    - trim surrounding whitespace
    - hard cap at MAX_QUERY_CHARS
    Inner whitespace is left alone so substring matches stay exact.
    """
    q = "" if q is None else str(q)
    q = q.strip()
    cap = MAX_QUERY_CHARS if max_len is None else max_len
    if len(q) > cap:
        q = q[:cap]
    return q
