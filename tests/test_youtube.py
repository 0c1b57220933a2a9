import asyncio

import httpx
import pytest

from conftest import search_item
from learnhub.models.resource import ResourceType
from learnhub.services.youtube import (
    YouTubeSearchClient,
    build_playlist_url,
    build_video_url,
    normalize_search_item,
    normalize_search_items,
)


def test_normalize_video_item():
    r = normalize_search_item(search_item("video", "dQw4w9WgXcQ", title="Learn Go", channel="Gophers"))
    assert r.id == "dQw4w9WgXcQ"
    assert r.type == ResourceType.video
    assert r.link == "https://www.youtube.com/watch?v=dQw4w9WgXcQ"
    assert r.title == "Learn Go"
    assert r.channel == "Gophers"
    assert r.thumbnail == "https://i.ytimg.com/dQw4w9WgXcQ/mqdefault.jpg"


def test_normalize_playlist_item():
    r = normalize_search_item(search_item("playlist", "PL123456789"))
    assert r.id == "PL123456789"
    assert r.type == ResourceType.playlist
    assert r.link == "https://www.youtube.com/playlist?list=PL123456789"


def test_normalize_uses_custom_host():
    r = normalize_search_item(search_item("video", "abc"), host="m.youtube.com")
    assert r.link == "https://m.youtube.com/watch?v=abc"


def test_normalize_items_keeps_order_one_per_item():
    items = [search_item("video", "v1"), search_item("playlist", "p1"), search_item("video", "v2")]
    out = normalize_search_items(items)
    assert [r.id for r in out] == ["v1", "p1", "v2"]
    assert [r.type.value for r in out] == ["video", "playlist", "video"]
    assert out[1].link == build_playlist_url("p1")
    assert out[2].link == build_video_url("v2")


def test_normalize_malformed_item_raises():
    with pytest.raises(KeyError):
        normalize_search_item({"id": {"kind": "youtube#video"}, "snippet": {}})


def _client(handler, api_key="test-key") -> YouTubeSearchClient:
    return YouTubeSearchClient(api_key, transport=httpx.MockTransport(handler))


def test_search_sends_expected_query_and_normalizes():
    seen = {}

    def handler(request: httpx.Request) -> httpx.Response:
        seen["path"] = request.url.path
        seen["params"] = dict(request.url.params)
        seen["api_key"] = request.headers.get("x-goog-api-key")
        return httpx.Response(200, json={"items": [search_item("video", "v1"), search_item("playlist", "p1")]})

    out = asyncio.run(_client(handler).search("rust"))

    assert seen["path"] == "/youtube/v3/search"
    assert seen["params"]["q"] == "learn rust"
    assert seen["params"]["part"] == "snippet"
    assert seen["params"]["type"] == "video,playlist"
    assert seen["params"]["maxResults"] == "10"
    assert "key" not in seen["params"]
    assert seen["api_key"] == "test-key"
    assert [r.id for r in out] == ["v1", "p1"]


def test_search_without_items_is_empty(caplog):
    caplog.set_level("INFO")
    out = asyncio.run(_client(lambda req: httpx.Response(200, json={"kind": "youtube#searchListResponse"})).search("x"))
    assert out == []
    assert "zero results" in caplog.text


def test_search_http_error_fails_soft(caplog):
    out = asyncio.run(_client(lambda req: httpx.Response(403, json={"error": {"code": 403}})).search("x"))
    assert out == []
    assert "provider error" in caplog.text


def test_search_network_error_fails_soft():
    def handler(request):
        raise httpx.ConnectError("boom", request=request)

    assert asyncio.run(_client(handler).search("x")) == []


def test_search_malformed_body_fails_soft():
    out = asyncio.run(_client(lambda req: httpx.Response(200, json={"items": [{"id": {}}]})).search("x"))
    assert out == []


def test_search_without_api_key_skips_request():
    calls = []

    def handler(request):
        calls.append(request)
        return httpx.Response(200, json={"items": []})

    assert asyncio.run(_client(handler, api_key=None).search("x")) == []
    assert calls == []


def test_search_error_does_not_log_api_key(caplog):
    out = asyncio.run(
        YouTubeSearchClient(
            "SECRET-YT-KEY",
            transport=httpx.MockTransport(lambda req: httpx.Response(403, json={"error": {"code": 403}})),
        ).search("x")
    )
    assert out == []
    assert "provider error" in caplog.text
    assert "SECRET-YT-KEY" not in caplog.text
