"""Strip document-level scaffolding so only the body fragment remains.

Editors and the post generator sometimes hand back a whole document
(``<!DOCTYPE html><html><head>...</head><body>...</body></html>``) where a
fragment was expected. The page template already owns those elements.
"""

from __future__ import annotations

import re

from polyblog.utils.text import TagStripper

_WRAPPER_TAG_RE = re.compile(
    r"<!doctype\b[^<>]*>|</?(?:html|body)\b[^<>]*>|</head\s*>",
    re.IGNORECASE,
)
_HEAD_OPEN_RE = re.compile(r"<(?P<name>head)\b[^<>]*>", re.IGNORECASE)
# An unterminated <head> ends where <body> starts
_HEAD_END_RE = re.compile(r"(?P<close></head\s*>)|<body\b", re.IGNORECASE)

_strip = TagStripper(
    drop=_WRAPPER_TAG_RE,
    block=_HEAD_OPEN_RE,
    block_ends={"head": _HEAD_END_RE},
)


def strip_document_wrappers(html: str) -> str:
    """Remove DOCTYPE, <html>, <head>...</head> and <body> wrappers.

    Body contents are kept. Tags spliced together by a removal are removed
    as well, so the result is idempotent.
    """
    return _strip(html)
