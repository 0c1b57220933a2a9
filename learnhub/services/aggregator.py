from __future__ import annotations

from typing import Sequence

from learnhub.models.resource import Category, Resource


def aggregate(video_resources: Sequence[Resource], course_resources: Sequence[Resource]) -> list[Resource]:
    """Videos/playlists (API order) then courses (extraction order). No dedupe, no sort."""
    return [*video_resources, *course_resources]


def filter_resources(resources: Sequence[Resource], category: Category | str) -> list[Resource]:
    category = Category(category)
    if category is Category.all:
        return list(resources)
    return [r for r in resources if r.type.value == category.value]
