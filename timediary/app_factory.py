"""Entry point for uvicorn/gunicorn (`timediary.app_factory:app`)."""
from timediary.app import create_app

app = create_app()

__all__ = ["app", "create_app"]
