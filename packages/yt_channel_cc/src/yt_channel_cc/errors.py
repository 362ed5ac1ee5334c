"""yt_channel_cc.errors – domain exceptions plus compatibility wrappers
around youtube-transcript-api error classes.  New modules should import from
here instead of digging into private `_errors` internals.
"""
from __future__ import annotations

from importlib import import_module
from pathlib import Path

_errors = import_module("youtube_transcript_api._errors")

CouldNotRetrieveTranscript = getattr(_errors, "CouldNotRetrieveTranscript")
NoTranscriptFound = getattr(_errors, "NoTranscriptFound")
TranscriptsDisabled = getattr(_errors, "TranscriptsDisabled")
VideoUnavailable = getattr(_errors, "VideoUnavailable")
IpBlocked = getattr(_errors, "IpBlocked")
YouTubeTranscriptApiException = getattr(_errors, "YouTubeTranscriptApiException")
RequestBlocked = getattr(_errors, "RequestBlocked")


class ChannelCaptionsError(Exception):
    """Base class for all yt_channel_cc errors."""


class ConfigError(ChannelCaptionsError):
    """API key or channel id missing / malformed."""


class ListingError(ChannelCaptionsError):
    """A page of the channel listing could not be fetched."""

    def __init__(self, channel_id: str, page: int, cause: BaseException):
        self.channel_id = channel_id
        self.page = page
        self.cause = cause
        super().__init__(
            f"listing channel {channel_id} failed on page {page}: {cause}"
        )


class FetchError(ChannelCaptionsError):
    """Caption retrieval for a single video failed."""

    def __init__(self, video_id: str, cause: BaseException):
        self.video_id = video_id
        self.cause = cause
        super().__init__(f"{video_id}: {_first_line(cause)}")

    @property
    def no_captions(self) -> bool:
        """True when the video simply has no usable caption track."""
        return isinstance(self.cause, (TranscriptsDisabled, NoTranscriptFound))


class WriteError(ChannelCaptionsError):
    """Transcript file could not be written."""

    def __init__(self, path: Path, cause: BaseException):
        self.path = path
        self.cause = cause
        super().__init__(f"cannot write {path}: {cause}")


def _first_line(exc: BaseException) -> str:
    # youtube-transcript-api messages span many lines of troubleshooting text
    msg = str(exc).strip()
    for line in msg.splitlines():
        if line.strip():
            return line.strip()
    return exc.__class__.__name__


__all__ = [
    "ChannelCaptionsError",
    "ConfigError",
    "ListingError",
    "FetchError",
    "WriteError",
    "CouldNotRetrieveTranscript",
    "NoTranscriptFound",
    "TranscriptsDisabled",
    "VideoUnavailable",
    "IpBlocked",
    "RequestBlocked",
    "YouTubeTranscriptApiException",
]
