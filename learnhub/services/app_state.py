"""
Application state container.

`AppState` is immutable; every change goes through one of the transition
functions below, which return a new state.
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Sequence

from learnhub.models.resource import Category, Page, Resource
from learnhub.services.aggregator import filter_resources


@dataclass(frozen=True)
class AppState:
    query: str = ""
    resources: tuple[Resource, ...] = ()
    active_tab: Category = Category.all
    page: Page = Page.home
    is_searching: bool = False
    is_generating: bool = False

    # monotonic timestamps (seconds), only used for the cosmetic progress bar
    search_started_at: float | None = None
    search_finished_at: float | None = None


def set_query(state: AppState, query: str) -> AppState:
    return replace(state, query=query)


def navigate(state: AppState, page: Page | str) -> AppState:
    return replace(state, page=Page(page))


def select_tab(state: AppState, category: Category | str) -> AppState:
    return replace(state, active_tab=Category(category))


def begin_search(state: AppState, query: str, now: float) -> AppState:
    return replace(
        state,
        query=query,
        is_searching=True,
        search_started_at=now,
        search_finished_at=None,
    )


def complete_search(state: AppState, resources: Sequence[Resource]) -> AppState:
    return replace(state, resources=tuple(resources), page=Page.results)


def end_search(state: AppState, now: float) -> AppState:
    return replace(state, is_searching=False, search_finished_at=now)


def begin_export(state: AppState) -> AppState:
    return replace(state, is_generating=True)


def end_export(state: AppState) -> AppState:
    return replace(state, is_generating=False)


def visible_resources(state: AppState) -> list[Resource]:
    return filter_resources(state.resources, state.active_tab)
