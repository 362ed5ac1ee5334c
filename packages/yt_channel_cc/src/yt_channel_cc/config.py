"""Runtime settings: environment (optionally from a ``.env`` file) plus CLI flags.

```bash
export YOUTUBE_API_KEY=...
export YOUTUBE_CHANNEL_ID=UC...
```
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Mapping

from dotenv import find_dotenv, load_dotenv

from .errors import ConfigError
from .utils import parse_channel_id

__all__ = [
    "ENV_API_KEY",
    "ENV_CHANNEL_ID",
    "DEFAULT_OUTDIR",
    "Settings",
    "load_settings",
]

ENV_API_KEY = "YOUTUBE_API_KEY"
ENV_CHANNEL_ID = "YOUTUBE_CHANNEL_ID"
DEFAULT_OUTDIR = "transcripts"


@dataclass
class Settings:
    api_key: str
    channel_id: str
    out_dir: Path = Path(DEFAULT_OUTDIR)
    languages: list[str] = field(default_factory=lambda: ["en"])
    limit: int | None = None
    jobs: int = 1
    delay: float = 0.0


def load_settings(args: Any = None, environ: Mapping[str, str] | None = None) -> Settings:
    """Build :class:`Settings` from parsed CLI *args* and the environment.

    A ``.env`` file (``args.env_file`` or the one found from the working
    directory) is loaded first; variables already set in the process win.
    Flags given on the command line override the environment.
    """
    if environ is None:
        env_file = getattr(args, "env_file", None) or find_dotenv(usecwd=True)
        load_dotenv(env_file, override=False)
        environ = os.environ

    api_key = getattr(args, "api_key", None) or environ.get(ENV_API_KEY, "")
    channel = getattr(args, "channel", None) or environ.get(ENV_CHANNEL_ID, "")
    if not api_key:
        raise ConfigError(f"No API key: set {ENV_API_KEY} or pass --api-key")
    if not channel:
        raise ConfigError(f"No channel: set {ENV_CHANNEL_ID} or pass --channel")

    jobs = getattr(args, "jobs", None)
    if jobs is None:
        jobs = 1
    if jobs < 1:
        raise ConfigError("--jobs must be at least 1")

    limit = getattr(args, "limit", None)
    if limit is not None and limit < 1:
        raise ConfigError("--limit must be at least 1")

    return Settings(
        api_key=api_key.strip(),
        channel_id=parse_channel_id(channel),
        out_dir=Path(getattr(args, "folder", None) or DEFAULT_OUTDIR).expanduser(),
        languages=list(getattr(args, "language", None) or ["en"]),
        limit=limit,
        jobs=jobs,
        delay=getattr(args, "sleep", None) or 0.0,
    )
