from __future__ import annotations

import asyncio
import logging
import time
from dataclasses import dataclass
from typing import Callable, Protocol

from learnhub.core.config import Settings
from learnhub.models.resource import Category, Page, Resource
from learnhub.services import app_state as st
from learnhub.services.aggregator import aggregate
from learnhub.services.courses import fetch_courses
from learnhub.services.document import PageLayout, layout_with_font
from learnhub.services.llm.base import TextGenerator
from learnhub.services.llm.factory import build_text_generator
from learnhub.services.progress import displayed_progress
from learnhub.services.study_guide import StudyGuideExport, build_study_guide
from learnhub.services.youtube import YouTubeSearchClient

logger = logging.getLogger(__name__)


class SearchNotReady(Exception):
    """An operation needs a query and none has been searched yet."""


class VideoSearch(Protocol):
    async def search(self, query: str) -> list[Resource]:
        ...


@dataclass
class StateSnapshot:
    state: st.AppState
    progress: int
    visible: list[Resource]


class LearnHubController:
    """
    Owns the AppState and is the only place that replaces it.

    `search()` fans out to the video provider and the course provider,
    joins both, then publishes the merged list in a single transition.
    """

    def __init__(
        self,
        video_search: VideoSearch,
        generator: TextGenerator,
        *,
        clock: Callable[[], float] = time.monotonic,
        layout: PageLayout | None = None,
    ) -> None:
        self.video_search = video_search
        self.generator = generator
        self._clock = clock
        self.layout = layout
        self._state = st.AppState()

    @property
    def state(self) -> st.AppState:
        return self._state

    # -----------------------
    # Simple transitions
    # -----------------------
    def set_query(self, query: str) -> st.AppState:
        self._state = st.set_query(self._state, query)
        return self._state

    def navigate(self, page: Page | str) -> st.AppState:
        self._state = st.navigate(self._state, page)
        return self._state

    def select_tab(self, category: Category | str) -> st.AppState:
        self._state = st.select_tab(self._state, category)
        return self._state

    def visible_resources(self) -> list[Resource]:
        return st.visible_resources(self._state)

    def snapshot(self) -> StateSnapshot:
        s = self._state
        now = self._clock()
        elapsed_ms = (now - s.search_started_at) * 1000 if s.search_started_at is not None else 0.0
        finished_ms_ago = (now - s.search_finished_at) * 1000 if s.search_finished_at is not None else None
        progress = displayed_progress(
            searching=s.is_searching,
            elapsed_ms=elapsed_ms,
            finished_ms_ago=finished_ms_ago,
        )
        return StateSnapshot(state=s, progress=progress, visible=st.visible_resources(s))

    # -----------------------
    # Search
    # -----------------------
    async def search(self, query: str) -> bool:
        """
        Returns False when the call is ignored: blank query, or a search is
        already in flight. The flag is checked and set before the first
        await, so no lock is needed on a single event loop.
        """
        q = (query or "").strip()
        if not q:
            return False
        if self._state.is_searching:
            logger.info("Search for %r ignored: another search is in flight", q)
            return False

        self._state = st.begin_search(self._state, q, self._clock())
        try:
            videos, courses = await asyncio.gather(
                self.video_search.search(q),
                fetch_courses(self.generator, q),
            )
            resources = aggregate(videos, courses)
            self._state = st.complete_search(self._state, resources)
            logger.info(
                "Search %r: %d video/playlist + %d course resource(s)",
                q,
                len(videos),
                len(courses),
            )
        finally:
            self._state = st.end_search(self._state, self._clock())
        return True

    # -----------------------
    # Study guide export
    # -----------------------
    async def export_study_guide(self) -> StudyGuideExport | None:
        query = self._state.query.strip()
        if not query:
            raise SearchNotReady("Search for a topic before generating a study guide")
        if self._state.is_generating:
            logger.info("Study guide export for %r ignored: already generating", query)
            return None

        self._state = st.begin_export(self._state)
        try:
            return await build_study_guide(self.generator, query, self.layout)
        finally:
            self._state = st.end_export(self._state)


def build_controller(s: Settings) -> LearnHubController:
    video_search = YouTubeSearchClient(
        s.youtube_api_key,
        base_url=s.youtube_api_base_url,
        host=s.youtube_web_host,
        max_results=s.youtube_max_results,
        timeout_s=s.http_timeout_sec,
    )
    return LearnHubController(
        video_search,
        build_text_generator(s),
        layout=layout_with_font(s.pdf_font_path),
    )
