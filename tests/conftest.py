from __future__ import annotations

from datetime import datetime

import pytest

from polyblog.core.models import ContentRecord


@pytest.fixture(autouse=True)
def _clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("POLYBLOG_SITE_NAME", "POLYBLOG_BASE_URL", "POLYBLOG_AUTHOR", "POLYBLOG_DEFAULT_LOCALE"):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def record() -> ContentRecord:
    return ContentRecord(
        id="1",
        slug="smm-basics",
        title_uz="SMM asoslari",
        title_ru="",
        title_en="SMM basics",
        content_uz="<h1>SMM asoslari</h1><p>Salom <strong>dunyo</strong></p>",
        content_ru="",
        content_en=(
            "<!DOCTYPE html><html><head><title>SMM</title><style>p{color:red}</style></head>"
            "<body><h1>SMM basics</h1><p style=\"color:#222\">Hello <em>world</em></p>"
            "<script>alert(1)</script></body></html>"
        ),
        excerpt_en="A short intro",
        tags=["smm", "marketing"],
        published_at=datetime(2024, 5, 1, 9, 30),
    )
