"""
FastAPI routers grouped by concern (auth, diaries, categories, site).

Each module exposes an APIRouter that app.py includes. Handlers fetch the
SiteService from app.state and never touch the store directly.
"""

from fastapi import Request

from timediary.services.site_service import SiteService


def get_site_service(request: Request) -> SiteService:
    svc = getattr(getattr(request.app, "state", None), "site_service", None)
    if not svc:
        raise RuntimeError("SiteService not configured")
    return svc
