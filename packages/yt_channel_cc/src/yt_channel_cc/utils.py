"""yt_channel_cc.utils

Small input-parsing helpers kept free of network code so they are easy to
unit-test.
"""
from __future__ import annotations

import re

from .errors import ConfigError

__all__ = [
    "parse_channel_id",
]

# ---------------------------------------------------------------------------
# Channel id detector
# ---------------------------------------------------------------------------

_CHAN_ID_RE = re.compile(r"^UC[A-Za-z0-9_-]{22}$")
_CHAN_URL_RE = re.compile(r"/channel/(UC[A-Za-z0-9_-]{22})(?:[/?#]|$)")


def parse_channel_id(value: str) -> str:
    """Return the ``UC…`` channel id from a raw id or a ``/channel/`` URL.

    Handles (``/@name``, ``/user/``) cannot be resolved without an extra API
    call and are rejected.
    """
    value = (value or "").strip()
    if _CHAN_ID_RE.match(value):
        return value
    if (m := _CHAN_URL_RE.search(value)):
        return m.group(1)
    raise ConfigError(f"Not a channel id or /channel/ URL: {value!r}")
