from __future__ import annotations

from typing import Iterable, List, Sequence

from .config import AiModel, Folder, LibraryCounts, Prompt


def library_counts(prompts: Iterable[Prompt]) -> LibraryCounts:
    """
    Count prompts per sidebar bucket. A prompt filed in several folders is
    counted once in each of them.
    """
    counts = LibraryCounts()
    for p in prompts:
        counts.total += 1
        if p.is_favorite:
            counts.favorites += 1

        folders = set(p.folder_ids)
        if p.folder_id:
            folders.add(p.folder_id)
        for fid in folders:
            counts.by_folder[fid] = counts.by_folder.get(fid, 0) + 1

        if p.ai_model is not None:
            slug = p.ai_model.slug
            counts.by_model[slug] = counts.by_model.get(slug, 0) + 1

        for name in {t.name for t in p.tags}:
            counts.by_tag[name] = counts.by_tag.get(name, 0) + 1

        if p.content_type:
            counts.by_content_type[p.content_type] = counts.by_content_type.get(p.content_type, 0) + 1
    return counts


def order_folders(folders: Iterable[Folder]) -> List[Folder]:
    return sorted(folders, key=lambda f: f.sort_order)


def order_models(models: Iterable[AiModel], model_order: Sequence[str] = ()) -> List[AiModel]:
    """
    Alphabetical by name, with the user's saved slug order pulled to the front.
    Saved slugs that no longer exist are ignored.
    """
    by_name = sorted(models, key=lambda m: m.name.casefold())
    if not model_order:
        return by_name

    by_slug = {m.slug: m for m in by_name}
    ordered: List[AiModel] = []
    for slug in model_order:
        m = by_slug.pop(slug, None)
        if m is not None:
            ordered.append(m)
    ordered.extend(m for m in by_name if m.slug in by_slug)
    return ordered
