from __future__ import annotations

import logging
from typing import Final

import requests
from fake_useragent import UserAgent

FALLBACK_UA: Final[str] = (
    "Mozilla/5.0 (X11; Linux x86_64) AppleWebKit/537.36 "
    "(KHTML, like Gecko) Chrome/124.0 Safari/537.36"
)


def pick_ua() -> str:
    """Return a plausible User-Agent string."""
    try:
        return UserAgent().random
    except Exception as exc:  # noqa: BLE001
        logging.warning("fake-useragent failed (%s) - using fallback UA", exc)
        return FALLBACK_UA


def make_session() -> requests.Session:
    """Shared HTTP session for the listing API and the transcript provider."""
    session = requests.Session()
    session.headers.update({"User-Agent": pick_ua()})
    return session
