import pytest

from superprompts.config import AiModel, Folder, Prompt, Tag


MIDJOURNEY = AiModel(id="m1", name="Midjourney", slug="midjourney", category="image", content_type="IMAGE")
KLING = AiModel(id="m2", name="Kling", slug="kling", category="video", content_type="VIDEO")
CLAUDE = AiModel(id="m3", name="Claude", slug="claude", category="text", content_type="TEXT")

CINEMATIC = Tag(id="t1", name="cinematic")
LANDSCAPE = Tag(id="t2", name="landscape")
WORK = Tag(id="t3", name="work")


@pytest.fixture
def models():
    return [MIDJOURNEY, KLING, CLAUDE]


@pytest.fixture
def folders():
    return [
        Folder(id="f2", name="Video", sort_order=2),
        Folder(id="f1", name="Favourites", sort_order=1),
        Folder(id="f3", name="Inbox", sort_order=1),
    ]


@pytest.fixture
def prompts():
    return [
        Prompt(
            id="p1",
            title="Neon city at night",
            content="cyberpunk street, rain, neon reflections",
            folder_id="f1",
            model_id="m1",
            ai_model=MIDJOURNEY,
            content_type="IMAGE",
            tags=[CINEMATIC],
            is_favorite=True,
            created_at="2024-01-01T10:00:00Z",
        ),
        Prompt(
            id="p2",
            title="Drone shot over fjord",
            content="slow aerial pan",
            notes="made with Kling",
            folder_ids=["f1", "f2"],
            model_id="m2",
            ai_model=KLING,
            content_type="VIDEO",
            tags=[CINEMATIC, LANDSCAPE],
            created_at="2024-03-01T10:00:00Z",
        ),
        Prompt(
            id="p3",
            title="Email summary",
            content="Summarize this email thread",
            model_id="m3",
            ai_model=CLAUDE,
            content_type="TEXT",
            tags=[WORK],
            created_at="2024-02-01T10:00:00+00:00",
        ),
        Prompt(
            id="p4",
            title="Portrait lighting",
            content="rembrandt lighting, 85mm",
            folder_id="f2",
            is_favorite=True,
            # legacy rows may lack timestamps and unknown columns are ignored
            share_slug="abc",
        ),
    ]
