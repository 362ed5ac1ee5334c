"""Top-level package for yt_channel_cc."""

from __future__ import annotations

from .models import VideoRef, CaptionEntry
from .normalize import (
    sanitize_title,
    restore_apostrophes,
    clean_entities,
    decode_caption_text,
    format_timestamp,
)
from .formatters import CaptionTextFormatter
from .errors import (
    ChannelCaptionsError,
    ConfigError,
    ListingError,
    FetchError,
    WriteError,
)
from .lister import list_channel_videos
from .fetcher import fetch_captions
from .writer import output_path, write_transcript
from .core import grab, run_batch
from .cli import main, cli_entry

__version__ = "0.1.0"

__all__ = [
    "VideoRef",
    "CaptionEntry",
    "sanitize_title",
    "restore_apostrophes",
    "clean_entities",
    "decode_caption_text",
    "format_timestamp",
    "CaptionTextFormatter",
    "ChannelCaptionsError",
    "ConfigError",
    "ListingError",
    "FetchError",
    "WriteError",
    "list_channel_videos",
    "fetch_captions",
    "output_path",
    "write_transcript",
    "grab",
    "run_batch",
    "main",
    "cli_entry",
]
