"""Structural clean-up applied to a fragment before sanitizing."""

from __future__ import annotations

import re

from polyblog.utils.text import TagStripper

# The page chrome renders the post title as the only <h1>
_strip_h1 = TagStripper(
    drop=re.compile(r"</h1\b[^<>]*>", re.IGNORECASE),
    block=re.compile(r"<(?P<name>h1)\b[^<>]*>", re.IGNORECASE),
    block_ends={"h1": re.compile(r"(?P<close></h1\s*>)", re.IGNORECASE)},
)

# Anchored at the start of a whitespace run so long runs are scanned once
_STYLE_ATTR_RE = re.compile(
    r"(?<!\s)\s*(?<![\w-])style\s*=\s*(?:\"[^\"<>]*\"|'[^'<>]*')",
    re.IGNORECASE,
)


def strip_headings(html: str) -> str:
    """Remove every <h1> element together with its contents.

    An <h1> that is never closed loses only its tag; stray closing tags go too.
    """
    return _strip_h1(html)


def strip_inline_styles(html: str) -> str:
    """Remove quoted ``style`` attributes from any element."""
    return _STYLE_ATTR_RE.sub("", html)


def normalize_structure(html: str) -> str:
    if not html:
        return ""
    return strip_inline_styles(strip_headings(html))
