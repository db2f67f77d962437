"""Editor preview: shows exactly what readers will get."""

from __future__ import annotations

from fastapi import APIRouter, Form
from fastapi.responses import HTMLResponse

from polyblog.content.render import sanitize_for_display

router = APIRouter()


@router.post("/preview", response_class=HTMLResponse)
async def preview(content: str = Form("")):
    return HTMLResponse(sanitize_for_display(content))
