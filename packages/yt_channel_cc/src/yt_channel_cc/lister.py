"""yt_channel_cc.lister – enumerate a channel's videos via the Data API.

The search endpoint is paged; each page is requested only after the previous
one has been consumed.  Any failure raises :class:`ListingError` so that an
unreachable API is never mistaken for an empty channel.
"""

from __future__ import annotations

import logging
from typing import Any, Iterator

import requests

from .errors import ListingError
from .models import VideoRef

__all__ = [
    "SEARCH_URL",
    "PAGE_SIZE",
    "iter_search_pages",
    "list_channel_videos",
]

SEARCH_URL = "https://www.googleapis.com/youtube/v3/search"
PAGE_SIZE = 50
TIMEOUT = 30


def iter_search_pages(
    api_key: str,
    channel_id: str,
    *,
    session: requests.Session | None = None,
    page_size: int = PAGE_SIZE,
) -> Iterator[dict[str, Any]]:
    """Yield the decoded JSON body of every search page, newest first."""
    http = session or requests.Session()
    params: dict[str, Any] = {
        "key": api_key,
        "channelId": channel_id,
        "part": "snippet,id",
        "order": "date",
        "maxResults": page_size,
    }
    token: str | None = None
    page = 0
    while True:
        page += 1
        if token:
            params["pageToken"] = token
        logging.debug("search page %d for %s (token=%s)", page, channel_id, token)
        try:
            resp = http.get(SEARCH_URL, params=dict(params), timeout=TIMEOUT)
            resp.raise_for_status()
            body = resp.json()
        except (requests.exceptions.RequestException, ValueError) as exc:
            raise ListingError(channel_id, page, exc) from exc
        yield body
        token = body.get("nextPageToken")
        if not token:
            return


def list_channel_videos(
    api_key: str,
    channel_id: str,
    *,
    session: requests.Session | None = None,
    page_size: int = PAGE_SIZE,
    limit: int | None = None,
) -> list[VideoRef]:
    """Return every video of *channel_id* in the order the API returns them.

    Playlists and channels mixed into the search results are skipped.  With
    a positive *limit* no further pages are requested once enough videos are
    collected; ``None`` or a non-positive value lists everything.
    """
    videos: list[VideoRef] = []
    pages = iter_search_pages(api_key, channel_id, session=session, page_size=page_size)
    for body in pages:
        for item in body.get("items") or []:
            ref = VideoRef.from_search_item(item)
            if ref is not None:
                videos.append(ref)
        if limit is not None and limit > 0 and len(videos) >= limit:
            pages.close()
            return videos[:limit]
    logging.info("Listed %d videos for %s", len(videos), channel_id)
    return videos
