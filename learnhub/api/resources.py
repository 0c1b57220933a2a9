from __future__ import annotations

import re
from urllib.parse import quote

from fastapi import APIRouter, Depends, HTTPException, Query, Request
from fastapi.responses import Response
from pydantic import BaseModel

from learnhub.models.resource import Category, Page, Resource
from learnhub.services.aggregator import filter_resources
from learnhub.services.controller import LearnHubController, SearchNotReady

router = APIRouter(tags=["resources"])

# not allowed in a quoted ASCII header value
_UNSAFE_FILENAME_RE = re.compile(r'[^\x20-\x7e]|["\\/]')


def get_controller(request: Request) -> LearnHubController:
    return request.app.state.controller


class SearchRequest(BaseModel):
    query: str


class SearchResponse(BaseModel):
    ok: bool
    accepted: bool
    query: str
    total: int
    resources: list[Resource]


class StateResponse(BaseModel):
    ok: bool
    query: str
    page: Page
    active_tab: Category
    is_searching: bool
    is_generating: bool
    progress: int
    total: int
    resources: list[Resource]


class ResourcesResponse(BaseModel):
    ok: bool
    category: Category
    total: int
    resources: list[Resource]


class TabRequest(BaseModel):
    category: Category


class QueryRequest(BaseModel):
    query: str


class NavigateRequest(BaseModel):
    page: Page


def content_disposition(filename: str) -> str:
    """
    `attachment` header with a sanitized ASCII `filename` plus the exact name
    in RFC 5987 `filename*` form.
    """
    fallback = _UNSAFE_FILENAME_RE.sub("_", filename)
    return f"attachment; filename=\"{fallback}\"; filename*=UTF-8''{quote(filename, safe='')}"


def _state_response(controller: LearnHubController) -> StateResponse:
    snap = controller.snapshot()
    s = snap.state
    return StateResponse(
        ok=True,
        query=s.query,
        page=s.page,
        active_tab=s.active_tab,
        is_searching=s.is_searching,
        is_generating=s.is_generating,
        progress=snap.progress,
        total=len(s.resources),
        resources=snap.visible,
    )


@router.get("/state", response_model=StateResponse)
def get_state(controller: LearnHubController = Depends(get_controller)) -> StateResponse:
    return _state_response(controller)


@router.post("/search", response_model=SearchResponse)
async def search(req: SearchRequest, controller: LearnHubController = Depends(get_controller)) -> SearchResponse:
    query = (req.query or "").strip()
    if not query:
        raise HTTPException(status_code=400, detail="Query is required")

    accepted = await controller.search(query)
    s = controller.state
    return SearchResponse(
        ok=True,
        accepted=accepted,
        query=s.query,
        total=len(s.resources),
        resources=list(s.resources),
    )


@router.get("/resources", response_model=ResourcesResponse)
def list_resources(
    category: Category = Query(default=Category.all),
    controller: LearnHubController = Depends(get_controller),
) -> ResourcesResponse:
    items = filter_resources(controller.state.resources, category)
    return ResourcesResponse(ok=True, category=category, total=len(items), resources=items)


@router.post("/tabs", response_model=ResourcesResponse)
def select_tab(req: TabRequest, controller: LearnHubController = Depends(get_controller)) -> ResourcesResponse:
    controller.select_tab(req.category)
    items = controller.visible_resources()
    return ResourcesResponse(ok=True, category=req.category, total=len(items), resources=items)


@router.post("/navigate", response_model=StateResponse)
def navigate(req: NavigateRequest, controller: LearnHubController = Depends(get_controller)) -> StateResponse:
    controller.navigate(req.page)
    return _state_response(controller)


@router.post("/query", response_model=StateResponse)
def set_query(req: QueryRequest, controller: LearnHubController = Depends(get_controller)) -> StateResponse:
    """Update the current topic without searching; the study guide export uses it."""
    controller.set_query(req.query)
    return _state_response(controller)


@router.post("/study-guide")
async def study_guide(controller: LearnHubController = Depends(get_controller)) -> Response:
    try:
        export = await controller.export_study_guide()
    except SearchNotReady as e:
        raise HTTPException(status_code=400, detail=str(e))

    if export is None:
        raise HTTPException(status_code=409, detail="Study guide generation already in progress")

    disposition = content_disposition(export.filename)

    return Response(
        content=export.content,
        media_type=export.media_type,
        headers={"Content-Disposition": disposition},
    )
