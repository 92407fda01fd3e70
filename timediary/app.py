from contextlib import asynccontextmanager
import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from starlette.middleware.base import BaseHTTPMiddleware

from timediary.core.config import Settings, get_settings
from timediary.core.log import configure_logging
from timediary.repositories.kv_store import KeyValueStore, build_store
from timediary.routers import auth as auth_router
from timediary.routers import categories as categories_router
from timediary.routers import diaries as diaries_router
from timediary.routers import site as site_router
from timediary.services.site_service import SiteService

logger = logging.getLogger(__name__)

DEV_ORIGINS = (
    "http://localhost:8000",
    "http://127.0.0.1:8000",
    "http://localhost:5173",
    "http://127.0.0.1:5173",
)


class SecurityHeadersMiddleware(BaseHTTPMiddleware):
    """Inject baseline security headers (anti clickjacking, sniffing, referrer policy)."""

    def __init__(self, app, *, enforce_hsts: bool) -> None:
        super().__init__(app)
        self._enforce_hsts = enforce_hsts

    async def dispatch(self, request, call_next):
        response = await call_next(request)
        response.headers.setdefault("X-Frame-Options", "DENY")
        response.headers.setdefault("X-Content-Type-Options", "nosniff")
        response.headers.setdefault("Referrer-Policy", "no-referrer-when-downgrade")
        if self._enforce_hsts:
            response.headers.setdefault("Strict-Transport-Security", "max-age=31536000; includeSubDomains")
        return response


def create_app(store: KeyValueStore | None = None, settings: Settings | None = None) -> FastAPI:
    """Build the app around one store; the store stands for one visitor profile."""
    settings = settings or get_settings()
    configure_logging(settings.log_level)

    store = store if store is not None else build_store(settings)
    site_service = SiteService.from_store(store)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # seed absent records once per process, not on every read
        site_service.initialize()
        yield

    app = FastAPI(title="时光日记 API", lifespan=lifespan)

    allowed_cors = set(settings.cors_origins)
    if settings.app_env != "prod":
        allowed_cors.update(DEV_ORIGINS)
    if allowed_cors:
        app.add_middleware(
            CORSMiddleware,
            allow_origins=sorted(allowed_cors),
            allow_credentials=True,
            allow_methods=["GET", "POST", "OPTIONS"],
            allow_headers=["*"],
        )
    app.add_middleware(SecurityHeadersMiddleware, enforce_hsts=settings.app_env == "prod")

    app.state.store = store
    app.state.site_service = site_service
    logger.info("Using %s store (%s env)", type(store).__name__, settings.app_env)

    app.include_router(site_router.router)
    app.include_router(auth_router.router)
    app.include_router(diaries_router.router)
    app.include_router(categories_router.router)
    return app
