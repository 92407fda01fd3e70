from __future__ import annotations

from fastapi import APIRouter, Request

from timediary.routers import get_site_service

router = APIRouter(prefix="", tags=["site"])


@router.get("/snapshot")
def snapshot(request: Request):
    """Everything the page renders from: current user, diaries, stats."""
    return get_site_service(request).snapshot()


@router.get("/stats")
def stats(request: Request):
    return get_site_service(request).stats.get().to_dict()
