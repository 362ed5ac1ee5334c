"""
Logging setup shared by the CLI and programmatic callers.

Console output goes through :class:`rich.logging.RichHandler`; an optional
plain-text file handler always records DEBUG.  The console level can be
forced from the environment:

```bash
export YT_CHANNEL_CC_LOGLEVEL=DEBUG
```
"""

from __future__ import annotations

import logging
import os
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["ENV_LOGLEVEL", "console_level", "configure_logging"]

ENV_LOGLEVEL = "YT_CHANNEL_CC_LOGLEVEL"
LOG_FMT_FILE = "%(asctime)s - %(levelname)s - %(message)s"
DATE_FMT = "%Y-%m-%d %H:%M:%S"


def console_level(verbose: int) -> int:
    """0 → WARNING, 1 → INFO, 2+ → DEBUG, unless overridden by the env var."""
    env = os.getenv(ENV_LOGLEVEL)
    if env:
        return getattr(logging, env.upper(), logging.INFO)
    return [logging.WARNING, logging.INFO, logging.DEBUG][min(max(verbose, 0), 2)]


def configure_logging(
    verbose: int,
    log_file: Path | None = None,
    console: Console | None = None,
) -> RichHandler:
    """(Re)initialise root logging and return the console handler."""
    level = console_level(verbose)
    console_handler = RichHandler(
        console=console or Console(file=sys.stderr),
        show_time=False,
        show_level=True,
        show_path=False,
        markup=False,
    )
    console_handler.setLevel(level)
    handlers: list[logging.Handler] = [console_handler]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(logging.Formatter(LOG_FMT_FILE, DATE_FMT))
        file_handler.setLevel(logging.DEBUG)
        handlers.append(file_handler)

    # replace only our own handlers so repeated runs (and pytest's) stay intact
    root = logging.getLogger()
    for old in list(root.handlers):
        if getattr(old, "_yt_channel_cc", False):
            root.removeHandler(old)
            old.close()
    for h in handlers:
        h._yt_channel_cc = True  # type: ignore[attr-defined]
        root.addHandler(h)
    root.setLevel(logging.DEBUG if log_file else level)
    # chatty HTTP internals stay at WARNING unless -vv
    for name in ("urllib3", "requests"):
        logging.getLogger(name).setLevel(logging.DEBUG if verbose > 1 else logging.WARNING)
    return console_handler
