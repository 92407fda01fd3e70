from __future__ import annotations

from fastapi import APIRouter, Form, HTTPException, Request

from timediary.routers import get_site_service

router = APIRouter(prefix="/auth", tags=["auth"])


@router.get("/me")
def me(request: Request):
    user = get_site_service(request).current_user()
    return {"currentUser": user.to_dict() if user else None}


@router.post("/enter")
def enter(request: Request, username: str = Form("")):
    """Login-or-register by username."""
    result = get_site_service(request).enter(username)
    if not result.ok:
        raise HTTPException(400, result.notice.message)
    return {
        "result": result.kind.value,
        "notice": result.notice.to_dict(),
        "currentUser": result.user.to_dict() if result.user else None,
    }


@router.post("/logout")
def logout(request: Request):
    notice = get_site_service(request).logout()
    return {"notice": notice.to_dict(), "currentUser": None}
