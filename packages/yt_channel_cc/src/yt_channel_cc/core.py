"""yt_channel_cc.core – per-video fetch + write routine and the batch loop.

Only high-level routines live here; parsing, formatting and file handling
are in their own modules.
"""

from __future__ import annotations

import asyncio
import logging
from pathlib import Path
from typing import Callable, Iterable, Sequence

import requests

from . import fetcher
from .errors import FetchError, WriteError
from .formatters import CaptionTextFormatter
from .models import VideoRef
from .writer import output_path, write_transcript

__all__ = [
    "grab",
    "run_batch",
]

# (status, video_id, title); status is ok, none, fail or write_fail
Result = tuple[str, str, str]

_FORMATTER = CaptionTextFormatter()


async def grab(
    video: VideoRef,
    out_dir: Path,
    langs: Sequence[str] | None,
    sem: asyncio.Semaphore,
    *,
    session: requests.Session | None = None,
    delay: float = 0.0,
) -> Result:
    """Fetch, format and save the transcript of *video*.

    Never raises for per-video problems; the outcome is the first element of
    the returned ``(status, video_id, title)`` tuple.
    """
    vid, title = video.video_id, video.title
    async with sem:
        try:
            try:
                cues = await asyncio.to_thread(
                    fetcher.fetch_captions, vid, languages=langs, session=session
                )
            except FetchError as exc:
                if exc.no_captions:
                    logging.warning("✖ no transcript for %s", vid)
                    return ("none", vid, title)
                logging.warning("✖ error getting transcript for %s: %s", vid, exc)
                return ("fail", vid, title)
            except Exception as exc:  # noqa: BLE001
                logging.error("✖ unexpected error for %s: %s", vid, exc)
                return ("fail", vid, title)

            path = output_path(out_dir, video)
            text = _FORMATTER.format_transcript(cues)
            try:
                write_transcript(path, text)
            except WriteError as exc:
                logging.error("✖ %s", exc)
                return ("write_fail", vid, title)
            logging.info("✔ saved %s", path)
            return ("ok", vid, title)
        finally:
            if delay:
                await asyncio.sleep(delay)


async def run_batch(
    videos: Iterable[VideoRef],
    out_dir: Path,
    langs: Sequence[str] | None = None,
    *,
    jobs: int = 1,
    session: requests.Session | None = None,
    delay: float = 0.0,
    on_result: Callable[[Result], None] | None = None,
) -> list[Result]:
    """Process *videos*; with ``jobs=1`` strictly one after another, in order."""
    sem = asyncio.Semaphore(max(1, jobs))
    results: list[Result] = []
    if jobs <= 1:
        for video in videos:
            res = await grab(video, out_dir, langs, sem, session=session, delay=delay)
            results.append(res)
            if on_result:
                on_result(res)
        return results

    tasks = [
        grab(video, out_dir, langs, sem, session=session, delay=delay)
        for video in videos
    ]
    for fut in asyncio.as_completed(tasks):
        res = await fut
        results.append(res)
        if on_result:
            on_result(res)
    return results
