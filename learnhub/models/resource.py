from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, field_validator


class ResourceType(str, Enum):
    video = "video"
    playlist = "playlist"
    course = "course"


class Category(str, Enum):
    """Results tab. `all` shows every resource type."""

    all = "all"
    video = "video"
    playlist = "playlist"
    course = "course"


class Page(str, Enum):
    home = "home"
    about = "about"
    results = "results"


class Resource(BaseModel):
    id: str
    title: str
    type: ResourceType
    link: str

    # video/playlist only
    thumbnail: str | None = None
    channel: str | None = None

    @field_validator("link")
    @classmethod
    def _absolute_http_link(cls, v: str) -> str:
        if not (v.startswith("http://") or v.startswith("https://")):
            raise ValueError(f"link must be an absolute http(s) URL: {v!r}")
        return v
