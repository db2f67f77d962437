"""Allow-list sanitization of post HTML.

This is the security boundary of the render path. Everything not listed in
the tables below is stripped (tags) or dropped (attributes, protocols), and
any remaining stray markup is escaped by the serializer.
"""

from __future__ import annotations

import logging
import re
from types import MappingProxyType

from bleach.html5lib_shim import Filter
from bleach.sanitizer import Cleaner

from polyblog.utils.text import TagStripper

logger = logging.getLogger(__name__)

# Tags safe for post bodies. No h1: the page template owns the title heading.
ALLOWED_TAGS: frozenset[str] = frozenset({
    "p", "br", "hr",
    "h2", "h3", "h4", "h5", "h6",
    "ul", "ol", "li",
    "dl", "dt", "dd",
    "strong", "b", "em", "i", "s", "del", "u",
    "sup", "sub", "abbr",
    "a", "img",
    "blockquote", "code", "pre",
    "table", "caption", "thead", "tbody", "tfoot", "tr", "th", "td",
    "div", "span",
    "figure", "figcaption",
})

ALLOWED_ATTRIBUTES = MappingProxyType({
    "a": ("href", "title", "target", "rel", "class"),
    "img": ("src", "alt", "title", "width", "height", "class"),
    "td": ("colspan", "rowspan", "align"),
    "th": ("colspan", "rowspan", "align"),
    "abbr": ("title",),
    "code": ("class",),
    "pre": ("class",),
    "div": ("class",),
    "span": ("class",),
    "figure": ("class",),
})

ALLOWED_PROTOCOLS: frozenset[str] = frozenset({"http", "https", "mailto"})

# Elements whose text must not leak into the output once the tag is stripped
_CONTENT_ELEMENTS = ("script", "style", "noscript", "template")

_drop_with_content = TagStripper(
    block=re.compile(r"<(?P<name>" + "|".join(_CONTENT_ELEMENTS) + r")\b[^<>]*>", re.IGNORECASE),
    block_ends={
        name: re.compile(r"(?P<close></" + name + r"\s*>)", re.IGNORECASE)
        for name in _CONTENT_ELEMENTS
    },
    unterminated_to_end=True,
)

_BLANK_TARGET_REL = ("noopener", "noreferrer")


class LinkRelFilter(Filter):
    """Merge ``noopener noreferrer`` into ``rel`` on ``target="_blank"`` links."""

    def __iter__(self):
        for token in Filter.__iter__(self):
            if token["type"] in ("StartTag", "EmptyTag") and token["name"] == "a":
                attrs = token.get("data") or {}
                target = attrs.get((None, "target"), "")
                if target.strip().lower() == "_blank":
                    rel = attrs.get((None, "rel"), "").split()
                    present = {value.lower() for value in rel}
                    rel.extend(v for v in _BLANK_TARGET_REL if v not in present)
                    attrs[(None, "rel")] = " ".join(rel)
                    token["data"] = attrs
            yield token


def _build_cleaner() -> Cleaner:
    # Cleaner keeps parser state, so each call gets its own instance
    return Cleaner(
        tags=ALLOWED_TAGS,
        attributes=dict(ALLOWED_ATTRIBUTES),
        protocols=ALLOWED_PROTOCOLS,
        strip=True,
        strip_comments=True,
        filters=[LinkRelFilter],
    )


def sanitize_html(raw_html: str) -> str:
    """Sanitize HTML, stripping dangerous tags/attributes while keeping safe content markup."""
    if not raw_html:
        return ""
    html = _drop_with_content(raw_html)
    cleaned = _build_cleaner().clean(html)
    if len(cleaned) < len(raw_html):
        logger.debug("Sanitizer removed %d characters", len(raw_html) - len(cleaned))
    return cleaned
