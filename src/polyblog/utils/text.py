"""Text formatting helpers."""

from __future__ import annotations

import math
import re
from html import unescape
from typing import Mapping, Optional

_TAG_RE = re.compile(r"<[^<>]*>")
_WS_RE = re.compile(r"\s+")


class TagStripper:
    """Remove tags, and optionally whole elements, in one left-to-right pass.

    ``drop`` is matched against each complete ``<...>`` tag; a match is
    deleted on its own. ``block`` does the same for opening tags whose
    element goes with them: everything up to the matching end pattern in
    ``block_ends`` (keyed by the lowercased ``name`` group of ``block``) is
    skipped. Every end pattern has a ``close`` group: when it took part in
    the match the end is consumed, otherwise skipping stops just before it.

    Removed text is never re-read, but what it leaves behind is: the
    output buffer keeps every ``<`` that has not yet been closed by a
    ``>``, so a fresh tag spliced together from the pieces around a
    removal (``<ht<html>ml>``) is caught when its ``>`` arrives. The
    result is therefore stable under a second pass, and every character
    is looked at a bounded number of times.

    If a block has no end, only its opening tag is removed, unless
    ``unterminated_to_end`` is set, in which case the rest of the input
    goes too.
    """

    def __init__(
        self,
        drop: Optional[re.Pattern[str]] = None,
        block: Optional[re.Pattern[str]] = None,
        block_ends: Optional[Mapping[str, re.Pattern[str]]] = None,
        unterminated_to_end: bool = False,
    ) -> None:
        self.drop = drop
        self.block = block
        self.block_ends = dict(block_ends or {})
        self.unterminated_to_end = unterminated_to_end

    def __call__(self, html: str) -> str:
        if not html:
            return ""
        out: list[str] = []
        opens: list[int] = []  # offsets in out of '<' not yet followed by '>'
        last_gt = -1
        no_end: set[str] = set()
        pos, size = 0, len(html)

        while pos < size:
            gt = html.find(">", pos)
            stop = size if gt == -1 else gt + 1
            base = len(out)
            i = html.find("<", pos, stop)
            while i != -1:
                opens.append(base + i - pos)
                i = html.find("<", i + 1, stop)
            out.extend(html[pos:stop])
            pos = stop
            if gt == -1:
                break

            if not opens or opens[-1] < last_gt:
                opens.clear()
                last_gt = len(out) - 1
                continue
            start = opens.pop()
            tag = "".join(out[start:])

            opened = self.block.fullmatch(tag) if self.block is not None else None
            if opened is not None:
                del out[start:]
                name = opened.group("name").lower()
                if name in no_end:
                    end = None
                else:
                    end = self.block_ends[name].search(html, pos)
                if end is None:
                    # Later searches start further on and cannot succeed either
                    no_end.add(name)
                    if self.unterminated_to_end:
                        pos = size
                elif end.group("close") is not None:
                    pos = end.end()
                else:
                    pos = end.start()
            elif self.drop is not None and self.drop.fullmatch(tag):
                del out[start:]
            else:
                opens.clear()
                last_gt = len(out) - 1

        return "".join(out)


def html_to_text(html: str) -> str:
    """Strip HTML tags, decode entities and collapse whitespace."""
    if not html:
        return ""
    text = _TAG_RE.sub(" ", html)
    text = unescape(text).replace("\xa0", " ")
    return _WS_RE.sub(" ", text).strip()


def count_words(html: str) -> int:
    text = html_to_text(html)
    return len(text.split()) if text else 0


def estimate_reading_time(html: str, words_per_minute: int = 200) -> int:
    """Minutes needed to read ``html``, never less than one."""
    return max(1, math.ceil(count_words(html) / words_per_minute))


def truncate(text: str, max_length: int = 300, suffix: str = "...") -> str:
    """Truncate text to max_length, breaking at word boundary."""
    if len(text) <= max_length:
        return text
    truncated = text[: max_length - len(suffix)]
    # Break at last space
    last_space = truncated.rfind(" ")
    if last_space > max_length // 2:
        truncated = truncated[:last_space]
    return truncated + suffix
