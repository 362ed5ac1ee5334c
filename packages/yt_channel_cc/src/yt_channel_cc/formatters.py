"""yt_channel_cc.formatters – render caption entries as timestamped text."""
from __future__ import annotations

from typing import Iterable

from youtube_transcript_api import formatters as yt_fmt

from .models import CaptionEntry
from .normalize import decode_caption_text, format_timestamp

__all__ = [
    "CaptionTextFormatter",
    "EXT",
]

EXT = "txt"


class CaptionTextFormatter(yt_fmt.TextFormatter):
    """Plain text formatter emitting one ``HH:MM:SS text`` line per cue.

    Cues without a start time are written without a timestamp.
    """

    @staticmethod
    def format_line(entry: CaptionEntry) -> str:
        text = decode_caption_text(entry.text)
        return f"{format_timestamp(entry.start)} {text}".strip()

    def format_transcript(self, transcript: Iterable, **kw) -> str:  # type: ignore[override]
        return "\n".join(
            self.format_line(c if isinstance(c, CaptionEntry) else CaptionEntry.from_raw(c))
            for c in transcript
        )
