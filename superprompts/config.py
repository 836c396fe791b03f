from __future__ import annotations

import os
from typing import Dict, List, Literal, Optional, get_args

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------
# Fuzzy scoring tiers
# ---------------------------

# Tier 1: contiguous substring
SUBSTRING_BASE = 100
SUBSTRING_PREFIX_BONUS = 20

# Tier 2: acronym-style word-initial match
WORD_INITIAL_BASE = 60
# base + span * n / (n + k): 70 for two words, always below SUBSTRING_BASE
WORD_INITIAL_SPAN = SUBSTRING_BASE - WORD_INITIAL_BASE
WORD_INITIAL_SQUASH_K = 6

# Tier 3: ordered subsequence
SUBSEQ_CHAR_POINTS = 10
SUBSEQ_ADJACENT_BONUS = 5
SUBSEQ_BOUNDARY_BONUS = 3
SUBSEQ_COVERAGE_FLOOR = 0.5   # factor = floor + (1 - floor) * len(q) / len(t)
# 1 + span * raw / (raw + k): squashed into [1, WORD_INITIAL_BASE - 1)
SUBSEQ_SPAN = WORD_INITIAL_BASE - 2
SUBSEQ_SQUASH_K = 40.0


# ---------------------------
# Search box / list view
# ---------------------------

DEFAULT_MAX_QUERY_CHARS = 500
MAX_QUERY_CHARS = int(os.getenv("SUPERPROMPTS_MAX_QUERY_CHARS", str(DEFAULT_MAX_QUERY_CHARS)))

SortMode = Literal["newest", "oldest", "title-az", "title-za", "model-az"]
SORT_MODES: List[str] = list(get_args(SortMode))
DEFAULT_SORT_MODE: SortMode = "newest"

ContentType = Literal["IMAGE", "VIDEO", "AUDIO", "TEXT"]


# ---------------------------
# Pydantic models shared around the library
# ---------------------------

class _Row(BaseModel):
    # rows come straight from the database join; extra columns are fine
    model_config = ConfigDict(extra="ignore", protected_namespaces=())


class AiModel(_Row):
    id: str
    name: str
    slug: str
    category: str = ""
    content_type: Optional[ContentType] = None
    icon_url: Optional[str] = None
    is_default: bool = False


class Tag(_Row):
    id: str
    name: str
    color: Optional[str] = None


class Folder(_Row):
    id: str
    name: str
    color: str = ""
    sort_order: int = 0


class Prompt(_Row):
    """
    One library item, with its joined model and tags.
    Timestamps stay as the ISO strings the backend returns.
    """

    id: str
    title: str
    content: str = ""
    negative_prompt: Optional[str] = None
    notes: Optional[str] = None
    folder_id: Optional[str] = None
    folder_ids: List[str] = Field(default_factory=list)
    model_id: Optional[str] = None
    content_type: Optional[ContentType] = None
    is_favorite: bool = False
    is_public: bool = False
    created_at: str = ""
    updated_at: str = ""
    ai_model: Optional[AiModel] = None
    tags: List[Tag] = Field(default_factory=list)

    @property
    def model_name(self) -> Optional[str]:
        return self.ai_model.name if self.ai_model else None

    def in_folder(self, folder_id: str) -> bool:
        return self.folder_id == folder_id or folder_id in self.folder_ids


class LibraryFilter(BaseModel):
    """
    Per-session dashboard state: search box text plus the sidebar selections.
    ``None`` / empty means the filter is off.
    """

    model_config = ConfigDict(protected_namespaces=())

    query: str = ""
    folder_id: Optional[str] = None
    model_slug: Optional[str] = None
    tags: List[str] = Field(default_factory=list)
    content_type: Optional[ContentType] = None
    favorites_only: bool = False
    sort_mode: SortMode = DEFAULT_SORT_MODE


class RankedPrompt(BaseModel):
    prompt: Prompt
    score: float = Field(ge=0)


class LibraryCounts(BaseModel):
    """
    Sidebar pill counts.
    """

    total: int = 0
    favorites: int = 0
    by_folder: Dict[str, int] = Field(default_factory=dict)
    by_model: Dict[str, int] = Field(default_factory=dict)
    by_tag: Dict[str, int] = Field(default_factory=dict)
    by_content_type: Dict[str, int] = Field(default_factory=dict)
