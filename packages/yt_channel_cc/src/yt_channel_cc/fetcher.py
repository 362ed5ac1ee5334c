"""Caption retrieval for a single video through youtube-transcript-api."""

from __future__ import annotations

import logging
from typing import Iterator, Sequence

import requests
from youtube_transcript_api import YouTubeTranscriptApi

from .errors import FetchError, YouTubeTranscriptApiException
from .models import CaptionEntry

__all__ = ["DEFAULT_LANGUAGES", "fetch_captions"]

DEFAULT_LANGUAGES: tuple[str, ...] = ("en",)


def fetch_captions(
    video_id: str,
    *,
    languages: Sequence[str] | None = None,
    session: requests.Session | None = None,
) -> Iterator[CaptionEntry]:
    """Return the caption entries of *video_id* as a one-shot iterator.

    The request happens eagerly so failures surface here as
    :class:`FetchError`, not halfway through iteration.
    """
    api = YouTubeTranscriptApi(http_client=session)
    langs = list(languages) if languages else list(DEFAULT_LANGUAGES)
    logging.debug("fetching captions for %s (languages=%s)", video_id, langs)
    try:
        fetched = api.fetch(video_id, languages=langs)
    except (YouTubeTranscriptApiException, requests.exceptions.RequestException) as exc:
        raise FetchError(video_id, exc) from exc

    raw = fetched.to_raw_data() if hasattr(fetched, "to_raw_data") else list(fetched)
    return (CaptionEntry.from_raw(cue) for cue in raw)
