"""Plain value objects passed between the lister, fetcher and writer."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional

__all__ = ["VideoRef", "CaptionEntry"]


@dataclass(frozen=True)
class VideoRef:
    video_id: str
    title: str

    @property
    def url(self) -> str:
        return f"https://youtu.be/{self.video_id}"

    @classmethod
    def from_search_item(cls, item: Mapping[str, Any]) -> Optional["VideoRef"]:
        """Return a ``VideoRef`` for a search result, ``None`` for playlists/channels."""
        vid = (item.get("id") or {}).get("videoId")
        if not vid:
            return None
        title = (item.get("snippet") or {}).get("title") or ""
        return cls(video_id=vid, title=title)


@dataclass(frozen=True)
class CaptionEntry:
    text: str
    start: Optional[float] = None

    @classmethod
    def from_raw(cls, cue: Any) -> "CaptionEntry":
        """Accept the dict form of ``to_raw_data()`` or a snippet object."""
        if isinstance(cue, Mapping):
            text, start = cue.get("text", ""), cue.get("start")
        else:
            text, start = getattr(cue, "text", ""), getattr(cue, "start", None)
        return cls(text=text or "", start=None if start is None else float(start))
