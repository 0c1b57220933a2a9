from __future__ import annotations

import asyncio

import pytest
from fastapi.testclient import TestClient

from learnhub.main import app
from learnhub.models.resource import Resource
from learnhub.services.controller import LearnHubController


def video(rid: str, title: str = "Video", kind: str = "video") -> Resource:
    link = (
        f"https://www.youtube.com/playlist?list={rid}"
        if kind == "playlist"
        else f"https://www.youtube.com/watch?v={rid}"
    )
    return Resource(
        id=rid,
        title=title,
        type=kind,
        link=link,
        thumbnail=f"https://i.ytimg.com/vi/{rid}/mqdefault.jpg",
        channel="Channel",
    )


def search_item(kind: str, ident: str, title: str = "Title", channel: str = "Chan") -> dict:
    id_field = "playlistId" if kind == "playlist" else "videoId"
    return {
        "kind": "youtube#searchResult",
        "id": {"kind": f"youtube#{kind}", id_field: ident},
        "snippet": {
            "title": title,
            "channelTitle": channel,
            "thumbnails": {"medium": {"url": f"https://i.ytimg.com/{ident}/mqdefault.jpg"}},
        },
    }


class FakeVideoSearch:
    def __init__(self, resources: list[Resource] | None = None, gate: asyncio.Event | None = None) -> None:
        self.resources = resources or []
        self.gate = gate
        self.queries: list[str] = []

    async def search(self, query: str) -> list[Resource]:
        self.queries.append(query)
        if self.gate is not None:
            await self.gate.wait()
        return list(self.resources)


class FakeGenerator:
    name = "fake"

    def __init__(self, text: str = "", error: Exception | None = None) -> None:
        self.text = text
        self.error = error
        self.prompts: list[str] = []

    async def generate(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.error is not None:
            raise self.error
        return self.text


COURSES_TEXT = (
    "Here are some options:\n"
    "1. [Python for Everybody](https://www.py4e.com) - free\n"
    "2. [CS50P](cs50.harvard.edu/python)\n"
)


@pytest.fixture
def fake_videos() -> FakeVideoSearch:
    return FakeVideoSearch(
        [
            video("vid00000001", "Python in 1 hour"),
            video("PLxyz1234567", "Python playlist", kind="playlist"),
        ]
    )


@pytest.fixture
def fake_generator() -> FakeGenerator:
    return FakeGenerator(COURSES_TEXT)


@pytest.fixture
def controller(fake_videos, fake_generator) -> LearnHubController:
    return LearnHubController(fake_videos, fake_generator)


@pytest.fixture
def client(controller):
    previous = app.state.controller
    app.state.controller = controller
    try:
        yield TestClient(app)
    finally:
        app.state.controller = previous
