"""Per-post views built on the render path: API payload, meta description, markdown export."""

from __future__ import annotations

from typing import Union

from polyblog.content.locale import RecordLike, coerce_locale, resolved_locale, select_localized
from polyblog.content.render import sanitize_for_display
from polyblog.core.models import DEFAULT_LOCALE, ContentRecord, Locale, RenderedPost
from polyblog.utils.text import estimate_reading_time, html_to_text, truncate


def render_post(
    record: ContentRecord,
    locale: Union[str, Locale, None],
    default: Locale = DEFAULT_LOCALE,
    words_per_minute: int = 200,
) -> RenderedPost:
    """Everything a page needs for one post in one locale."""
    raw = select_localized(record, locale, "content", default)
    html = sanitize_for_display(raw)
    chosen = resolved_locale(record, locale, "content", default) or coerce_locale(locale, default)
    return RenderedPost(
        locale=chosen,
        title=html_to_text(select_localized(record, locale, "title", default)),
        html=html,
        reading_time=estimate_reading_time(html, words_per_minute),
        description=meta_description(record, locale, default),
    )


def meta_description(
    record: RecordLike,
    locale: Union[str, Locale, None],
    default: Locale = DEFAULT_LOCALE,
    limit: int = 160,
) -> str:
    """Localized excerpt, or the opening of the post's visible text."""
    excerpt = select_localized(record, locale, "excerpt", default).strip()
    if excerpt:
        return html_to_text(excerpt)
    body = html_to_text(sanitize_for_display(select_localized(record, locale, "content", default)))
    return truncate(body, limit, suffix="")


def post_to_markdown(
    record: ContentRecord,
    locale: Union[str, Locale, None],
    base_url: str,
    author: str = "",
    default: Locale = DEFAULT_LOCALE,
) -> str:
    title = html_to_text(select_localized(record, locale, "title", default))
    excerpt = html_to_text(select_localized(record, locale, "excerpt", default))
    body = html_to_text(sanitize_for_display(select_localized(record, locale, "content", default)))
    date = record.published_at.date().isoformat() if record.published_at else ""
    tags = ", ".join(record.tags)
    url = f"{base_url.rstrip('/')}/post/{record.slug}"

    lines = [f"# {title}", ""]
    if author:
        lines.append(f"**Author:** {author}  ")
    lines += [
        f"**Date:** {date}  ",
        f"**Tags:** {tags}  ",
        f"**URL:** {url}",
        "",
        "---",
        "",
    ]
    if excerpt:
        lines += [f"> {excerpt}", "", "---", ""]
    lines.append(body)
    return "\n".join(lines) + "\n"
