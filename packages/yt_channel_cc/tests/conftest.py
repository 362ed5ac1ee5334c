"""
Shared fixtures.  A strict no-network policy is enforced: the Data API
session and YouTubeTranscriptApi are replaced with in-memory stubs.
"""
from __future__ import annotations

import asyncio
import sys
from pathlib import Path
from typing import Any

import pytest

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT / "src"))

from yt_channel_cc import cli, fetcher  # noqa: E402

CHANNEL_ID = "UCabcdefghijklmnopqrstuv"


# ────────────────────────── fake listing API ────────────────────────────── #
class FakeResponse:
    def __init__(self, payload: Any = None, status: int = 200, exc: Exception | None = None):
        self._payload = payload
        self.status_code = status
        self._exc = exc

    def raise_for_status(self) -> None:
        if self._exc is not None:
            raise self._exc

    def json(self) -> Any:
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


class FakeSession:
    """Serves search pages keyed by ``pageToken`` (``None`` = first page)."""

    def __init__(self, pages: dict[str | None, Any]):
        self.pages = pages
        self.calls: list[dict[str, Any]] = []
        self.headers: dict[str, str] = {}
        self.closed = False

    def get(self, url, params=None, **kw):
        params = dict(params or {})
        self.calls.append(params)
        resp = self.pages[params.get("pageToken")]
        if isinstance(resp, Exception):
            raise resp
        if isinstance(resp, FakeResponse):
            return resp
        return FakeResponse(resp)

    def close(self) -> None:
        self.closed = True


def search_item(video_id: str | None, title: str, kind: str = "youtube#video") -> dict:
    ident: dict[str, str] = {"kind": kind}
    if video_id:
        ident["videoId"] = video_id
    else:
        ident["playlistId"] = "PLsomething"
    return {"id": ident, "snippet": {"title": title}}


def build_pages(videos: list[tuple[str, str]], page_size: int = 50) -> dict[str | None, dict]:
    """Split *videos* into linked search pages the way the API does."""
    chunks = [videos[i:i + page_size] for i in range(0, len(videos), page_size)] or [[]]
    pages: dict[str | None, dict] = {}
    for n, chunk in enumerate(chunks):
        token = None if n == 0 else f"page{n}"
        body: dict[str, Any] = {"items": [search_item(v, t) for v, t in chunk]}
        if n + 1 < len(chunks):
            body["nextPageToken"] = f"page{n + 1}"
        pages[token] = body
    return pages


# ────────────────────────── fake transcript API ─────────────────────────── #
class _FT:
    def __init__(self, data):
        self._data = data

    def to_raw_data(self):
        return self._data


@pytest.fixture
def captions():
    """video_id → list of raw cues, or an exception instance to raise."""
    return {}


@pytest.fixture
def patch_transcript(monkeypatch, captions):
    """Stub out YouTubeTranscriptApi.fetch."""
    class _FakeApi:
        def __init__(self, *a, **kw):
            pass

        def fetch(self, video_id, languages=None):
            res = captions[video_id]
            if isinstance(res, Exception):
                raise res
            return _FT(res)

    monkeypatch.setattr(fetcher, "YouTubeTranscriptApi", _FakeApi)
    yield captions


@pytest.fixture
def channel_env(tmp_path, monkeypatch):
    """Run in an isolated cwd with API key + channel id in the environment."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("YOUTUBE_API_KEY", "test-key")
    monkeypatch.setenv("YOUTUBE_CHANNEL_ID", CHANNEL_ID)
    monkeypatch.delenv("YT_CHANNEL_CC_LOGLEVEL", raising=False)
    yield tmp_path


@pytest.fixture
def patch_session(monkeypatch):
    """Make the CLI use a FakeSession; call the returned function with pages."""
    holder: dict[str, FakeSession] = {}

    def _install(pages):
        sess = FakeSession(pages)
        holder["session"] = sess
        monkeypatch.setattr(cli, "make_session", lambda: sess)
        return sess

    return _install


# ---------------------------------------------------------------------------
# helper to invoke main() - catch SystemExit cleanly, return the exit code
def run_cli(*argv: str) -> int:
    try:
        asyncio.run(cli.main(list(argv)))
    except SystemExit as e:
        return 0 if e.code is None else e.code
    return 0
