"""Post rendering routes — JSON payload and full page preview."""

from __future__ import annotations

from fastapi import APIRouter
from fastapi.responses import HTMLResponse
from markupsafe import Markup

from polyblog.content.post import render_post
from polyblog.core.models import RenderedPost, RenderRequest
from polyblog.web.deps import get_config, render

router = APIRouter()


@router.post("/api/posts/render", response_model=RenderedPost)
async def render_post_json(req: RenderRequest) -> RenderedPost:
    cfg = get_config()
    return render_post(
        req.record,
        req.locale,
        default=cfg.content.default_locale,
        words_per_minute=cfg.content.words_per_minute,
    )


@router.post("/posts/preview", response_class=HTMLResponse)
async def post_page(req: RenderRequest):
    cfg = get_config()
    post = render_post(
        req.record,
        req.locale,
        default=cfg.content.default_locale,
        words_per_minute=cfg.content.words_per_minute,
    )
    return HTMLResponse(render("post.html",
        site=cfg.site,
        post=post,
        # Already sanitized by render_post; marked safe here and nowhere else
        body=Markup(post.html),
        record=req.record,
    ))
