from __future__ import annotations

from fastapi import APIRouter, Request

from timediary.routers import get_site_service

router = APIRouter(prefix="/categories", tags=["categories"])


@router.get("")
def list_categories(request: Request):
    return {"categories": get_site_service(request).categories()}


@router.get("/{category}")
def browse(category: str, request: Request):
    view = get_site_service(request).browse_category(category)
    return {
        "category": view.category,
        "notice": view.notice.to_dict(),
        "diaries": [d.to_dict() for d in view.diaries],
    }
