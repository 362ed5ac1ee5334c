"""yt_channel_cc.normalize

Pure text helpers: filename stems from video titles and clean caption text.
No I/O and no YouTube dependencies, so everything here is trivially
unit-testable.
"""
from __future__ import annotations

import html
import re

__all__ = [
    "sanitize_title",
    "restore_apostrophes",
    "clean_entities",
    "strip_leading_hyphen",
    "decode_caption_text",
    "format_timestamp",
]

# ---------------------------------------------------------------------------
# Filename stems
# ---------------------------------------------------------------------------

_NOT_ALNUM_SPACE = re.compile(r"[^a-zA-Z0-9 ]")
_WHITESPACE = re.compile(r"\s+")


def restore_apostrophes(stem: str) -> str:
    """Compatibility shim: turn a literal ``39`` back into ``'``.

    Titles arrive from the search API with apostrophes encoded as ``&#39;``;
    once ``&``, ``#`` and ``;`` are stripped only ``39`` is left.  This is a
    known heuristic and also rewrites genuine ``39`` digits ("Route 39" ends
    up as "Route'").  It must run after stripping and whitespace removal.
    """
    return stem.replace("39", "'")


def sanitize_title(title: str) -> str:
    """Return the filename stem for *title* (may be empty)."""
    stem = _NOT_ALNUM_SPACE.sub("", title)
    stem = _WHITESPACE.sub("", stem)
    return restore_apostrophes(stem).strip()


# ---------------------------------------------------------------------------
# Caption text
# ---------------------------------------------------------------------------

_MANUAL_ENTITIES = (
    ("&#39;", "'"),
    ("&quot;", '"'),
    ("&amp;", "&"),
)
_LEADING_HYPHEN = re.compile(r"^-\s*")


def clean_entities(text: str) -> str:
    """Replace the entities that survive (or are produced by) generic decoding."""
    for entity, char in _MANUAL_ENTITIES:
        text = text.replace(entity, char)
    return text


def strip_leading_hyphen(text: str) -> str:
    return _LEADING_HYPHEN.sub("", text, count=1)


def decode_caption_text(text: str) -> str:
    """Decode entities (twice-encoded ones too) and drop the ``- `` speaker dash."""
    text = html.unescape(text)
    text = clean_entities(text)
    return strip_leading_hyphen(text)


# ---------------------------------------------------------------------------
# Timestamps
# ---------------------------------------------------------------------------

def format_timestamp(seconds: float | None) -> str:
    """Return ``HH:MM:SS`` for *seconds* (floored), or ``""`` when absent."""
    if seconds is None:
        return ""
    total = max(0, int(seconds))
    h, rest = divmod(total, 3600)
    m, s = divmod(rest, 60)
    return f"{h:02d}:{m:02d}:{s:02d}"
