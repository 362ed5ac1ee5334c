"""Filesystem side of the pipeline: output paths and atomic writes."""

from __future__ import annotations

import logging
import os
import tempfile
from pathlib import Path

from .errors import WriteError
from .formatters import EXT
from .models import VideoRef
from .normalize import sanitize_title

__all__ = ["ensure_dir", "output_path", "write_transcript"]


def ensure_dir(path: Path) -> Path:
    path = Path(path).expanduser()
    try:
        path.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise WriteError(path, exc) from exc
    return path


def output_path(out_dir: Path, video: VideoRef) -> Path:
    """Return ``<out_dir>/<stem>.txt``; the video id stands in for empty stems."""
    stem = sanitize_title(video.title) or video.video_id
    return Path(out_dir) / f"{stem}.{EXT}"


def write_transcript(path: Path, text: str) -> Path:
    """Write *text* to *path* as UTF-8, atomically.

    The data goes to a temp file next to *path* which is then renamed over
    it, so the target is either the old file or the complete new one.
    """
    path = Path(path)
    tmp_name: str | None = None
    try:
        fd, tmp_name = tempfile.mkstemp(
            dir=path.parent, prefix=f".{path.stem}.", suffix=".part"
        )
        with os.fdopen(fd, "w", encoding="utf-8", newline="") as fh:
            fh.write(text)
        os.replace(tmp_name, path)
    except OSError as exc:
        if tmp_name and os.path.exists(tmp_name):
            try:
                os.unlink(tmp_name)
            except OSError as cleanup_exc:  # pragma: no cover - best effort
                logging.debug("Could not remove %s (%s)", tmp_name, cleanup_exc)
        raise WriteError(path, exc) from exc
    logging.debug("wrote %d chars to %s", len(text), path)
    return path
