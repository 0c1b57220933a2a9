from __future__ import annotations

import logging
from typing import Any, Iterable

import httpx

from learnhub.models.resource import Resource, ResourceType

logger = logging.getLogger(__name__)

DEFAULT_HOST = "www.youtube.com"
API_KEY_HEADER = "x-goog-api-key"


def build_video_url(video_id: str, *, host: str = DEFAULT_HOST) -> str:
    return f"https://{host}/watch?v={video_id}"


def build_playlist_url(playlist_id: str, *, host: str = DEFAULT_HOST) -> str:
    return f"https://{host}/playlist?list={playlist_id}"


# ----------------------------
# Normalization
# ----------------------------

def normalize_search_item(item: dict[str, Any], *, host: str = DEFAULT_HOST) -> Resource:
    """
    Map one search.list item to a Resource.

    Expected shape (YouTube Data API v3):
      {
        "id": {"kind": "youtube#video", "videoId": "..."}      # or playlistId
        "snippet": {"title": "...", "channelTitle": "...",
                    "thumbnails": {"medium": {"url": "..."}}}
      }

    Raises KeyError/TypeError on malformed items; the client treats that as a
    provider failure.
    """
    ident = item["id"]
    snippet = item["snippet"]
    kind = ident["kind"]

    if "playlist" in kind:
        playlist_id = ident["playlistId"]
        rtype = ResourceType.playlist
        rid = ident.get("videoId") or playlist_id
        link = build_playlist_url(playlist_id, host=host)
    else:
        video_id = ident["videoId"]
        rtype = ResourceType.video
        rid = video_id
        link = build_video_url(video_id, host=host)

    return Resource(
        id=rid,
        title=snippet["title"],
        type=rtype,
        link=link,
        thumbnail=snippet["thumbnails"]["medium"]["url"],
        channel=snippet["channelTitle"],
    )


def normalize_search_items(items: Iterable[dict[str, Any]], *, host: str = DEFAULT_HOST) -> list[Resource]:
    return [normalize_search_item(it, host=host) for it in items]


# ----------------------------
# Search client
# ----------------------------

class YouTubeSearchClient:
    """
    Async client for the YouTube Data API `search` endpoint.

    `search()` never raises: provider errors and empty responses both come
    back as an empty list, but are logged differently.
    """

    def __init__(
        self,
        api_key: str | None,
        *,
        base_url: str = "https://www.googleapis.com/youtube/v3",
        host: str = DEFAULT_HOST,
        max_results: int = 10,
        timeout_s: float = 30.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self.api_key = api_key
        self.base_url = base_url.rstrip("/")
        self.host = host
        self.max_results = max_results
        self.timeout_s = timeout_s
        self.transport = transport

    def _params(self, query: str) -> dict[str, Any]:
        return {
            "part": "snippet",
            "maxResults": self.max_results,
            "q": f"learn {query}",
            "type": "video,playlist",
        }

    def _headers(self) -> dict[str, str]:
        # request URLs end up in exception messages; the key must not
        return {API_KEY_HEADER: self.api_key or ""}

    async def search(self, query: str) -> list[Resource]:
        if not self.api_key:
            logger.warning("YOUTUBE_API_KEY is missing; video search skipped for %r", query)
            return []

        url = f"{self.base_url}/search"
        try:
            async with httpx.AsyncClient(timeout=self.timeout_s, transport=self.transport) as client:
                r = await client.get(url, params=self._params(query), headers=self._headers())
                r.raise_for_status()
                data = r.json()

            items = data.get("items") if isinstance(data, dict) else None
            if not items:
                logger.info("Video search returned zero results for %r", query)
                return []

            resources = normalize_search_items(items, host=self.host)
        except Exception:
            logger.warning("Video search provider error for %r", query, exc_info=True)
            return []

        logger.info("Video search returned %d resource(s) for %r", len(resources), query)
        return resources
