"""FastAPI web application: post rendering and editor preview."""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import FastAPI, Request
from fastapi.responses import HTMLResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from polyblog.core.config import load_config
from polyblog.web.security import SecurityHeadersMiddleware

logger = logging.getLogger(__name__)

_TEMPLATES_DIR = Path(__file__).parent.parent / "templates"


def create_app() -> FastAPI:
    cfg = load_config()
    app = FastAPI(title=cfg.site.name, docs_url=None, redoc_url=None)

    app.add_middleware(SecurityHeadersMiddleware)

    # Custom error pages
    _error_404 = (_TEMPLATES_DIR / "web" / "404.html").read_text()
    _error_500 = (_TEMPLATES_DIR / "web" / "500.html").read_text()

    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        if exc.status_code == 404:
            return HTMLResponse(_error_404, status_code=404)
        if exc.status_code == 500:
            return HTMLResponse(_error_500, status_code=500)
        return HTMLResponse(str(exc.detail), status_code=exc.status_code)

    @app.exception_handler(Exception)
    async def unhandled_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled server error")
        return HTMLResponse(_error_500, status_code=500)

    # Health check
    @app.get("/health")
    def health():
        return {"status": "ok"}

    # Import routes here to avoid circular imports at module level
    from polyblog.web.routes import posts, preview

    app.include_router(preview.router)
    app.include_router(posts.router)

    logger.info("Web app ready (default locale: %s)", cfg.content.default_locale.value)
    return app
