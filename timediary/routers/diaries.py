from __future__ import annotations

from fastapi import APIRouter, Form, HTTPException, Query, Request

from timediary.routers import get_site_service
from timediary.services.site_service import CommentStatus

router = APIRouter(prefix="/diaries", tags=["diaries"])

_COMMENT_ERRORS = {
    CommentStatus.LOGIN_REQUIRED: 401,
    CommentStatus.EMPTY: 400,
    CommentStatus.NOT_FOUND: 404,
}


@router.get("")
def list_diaries(request: Request):
    return {"diaries": [d.to_dict() for d in get_site_service(request).diaries.all()]}


@router.get("/latest")
def latest(request: Request, limit: int = Query(3, ge=0, le=50)):
    return {"diaries": [d.to_dict() for d in get_site_service(request).diaries.latest(limit)]}


@router.get("/popular")
def popular(request: Request, limit: int = Query(4, ge=0, le=50)):
    return {"diaries": [d.to_dict() for d in get_site_service(request).diaries.popular(limit)]}


@router.get("/{diary_id}")
def get_diary(diary_id: str, request: Request):
    diary = get_site_service(request).diaries.get_by_id(diary_id)
    if not diary:
        raise HTTPException(404, "日记不存在")
    return {"diary": diary.to_dict()}


@router.post("/{diary_id}/open")
def open_diary(diary_id: str, request: Request):
    """Counts a view, like clicking a diary card."""
    diary = get_site_service(request).open_diary(diary_id)
    if not diary:
        raise HTTPException(404, "日记不存在")
    return {"diary": diary.to_dict()}


@router.post("/{diary_id}/comments")
def add_comment(diary_id: str, request: Request, content: str = Form("")):
    result = get_site_service(request).add_comment(diary_id, content)
    if not result.ok:
        raise HTTPException(_COMMENT_ERRORS[result.status], result.notice.message)
    return {"notice": result.notice.to_dict(), "diary": result.diary.to_dict() if result.diary else None}
