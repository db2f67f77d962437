"""Render path for stored post HTML.

Stored content stays untrusted. Every display goes through
:func:`sanitize_for_display`; the raw field is never injected directly and
the result is never written back.
"""

from __future__ import annotations

import logging
from typing import Union

from polyblog.content.locale import RecordLike, select_localized
from polyblog.content.normalize import normalize_structure
from polyblog.content.sanitize import sanitize_html
from polyblog.content.wrappers import strip_document_wrappers
from polyblog.core.models import DEFAULT_LOCALE, Locale

logger = logging.getLogger(__name__)

MAX_INPUT_BYTES = 1024 * 1024

# Re-parsing can still reshape the markup (a stripped tag joins text into
# attribute-like runs, misnested tables move links around), so the pipeline
# is repeated until its output is a fixed point.
MAX_PASSES = 4


def _bounded(raw_html: str) -> str:
    encoded = raw_html.encode("utf-8")
    if len(encoded) <= MAX_INPUT_BYTES:
        return raw_html
    logger.warning(
        "Post HTML is %d bytes, truncating to %d before sanitizing",
        len(encoded), MAX_INPUT_BYTES,
    )
    return encoded[:MAX_INPUT_BYTES].decode("utf-8", errors="ignore")


def _display_pass(html: str) -> str:
    return sanitize_html(normalize_structure(strip_document_wrappers(html)))


def sanitize_for_display(raw_html: str) -> str:
    """Turn one locale's stored HTML into a fragment safe for DOM injection."""
    if raw_html is None:
        return ""
    if not isinstance(raw_html, str):
        raw_html = str(raw_html)
    html = _display_pass(_bounded(raw_html))
    for _ in range(MAX_PASSES - 1):
        again = _display_pass(html)
        if again == html:
            return html
        html = again
    logger.warning("Post HTML still changing after %d sanitizer passes", MAX_PASSES)
    return html


def render_post_body(
    record: RecordLike,
    locale: Union[str, Locale, None],
    default: Locale = DEFAULT_LOCALE,
) -> str:
    return sanitize_for_display(select_localized(record, locale, "content", default))
