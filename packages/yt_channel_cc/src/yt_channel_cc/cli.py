from __future__ import annotations

import argparse
import asyncio
import logging
import signal
import sys
from pathlib import Path
from typing import Sequence

from rich.console import Console

from . import lister
from .config import DEFAULT_OUTDIR, ENV_API_KEY, ENV_CHANNEL_ID, load_settings
from .core import run_batch
from .errors import ConfigError, ListingError, WriteError
from .logger import configure_logging
from .status_display import create_status_display
from .user_agent import make_session
from .writer import ensure_dir


class _ManFmt(argparse.ArgumentDefaultsHelpFormatter, argparse.RawTextHelpFormatter):
    def __init__(self, prog):
        super().__init__(prog, max_help_position=32)


def build_parser() -> argparse.ArgumentParser:
    P = argparse.ArgumentParser(
        prog="yt-channel-cc",
        description=(
            "Download the captions of every video on a YouTube channel as "
            "timestamped text files.\n"
            f"Reads {ENV_API_KEY} and {ENV_CHANNEL_ID} from the environment or a .env file."
        ),
        formatter_class=_ManFmt,
    )
    P.add_argument("-o", "--folder", default=DEFAULT_OUTDIR, help="Destination directory")
    P.add_argument(
        "-l",
        "--language",
        action="append",
        help="Preferred caption language (repeatable, priority first; default en)",
    )
    P.add_argument(
        "-n", "--limit", type=int, help="Stop after N videos (handy for testing)"
    )
    P.add_argument(
        "-j", "--jobs", type=int, default=1, help="Concurrent transcript downloads"
    )
    P.add_argument(
        "-s",
        "--sleep",
        type=float,
        default=0.0,
        help="Seconds to wait after each video",
    )
    P.add_argument("--api-key", help=f"Data API key (overrides {ENV_API_KEY})")
    P.add_argument(
        "--channel",
        help=f"Channel id or /channel/ URL (overrides {ENV_CHANNEL_ID})",
    )
    P.add_argument("--env-file", help="Load variables from this .env file")
    P.add_argument(
        "-v", "--verbose", action="count", default=0, help="-v=info, -vv=debug"
    )
    P.add_argument("-L", "--log-file", metavar="FILE", help="Also write a full run-log to FILE")
    return P


def _emit_final_summary(results, out_dir: Path, console: Console) -> None:
    by_status: dict[str, list[tuple[str, str, str]]] = {}
    for res in results:
        by_status.setdefault(res[0], []).append(res)
    ok = by_status.get("ok", [])
    none = by_status.get("none", [])
    fail = by_status.get("fail", [])
    write_fail = by_status.get("write_fail", [])
    total = len(results)

    for label, group in (
        ("Videos without captions", none),
        ("Videos failed", fail),
        ("Videos not written", write_fail),
    ):
        if group:
            logging.info(
                "%s (%d): %s",
                label,
                len(group),
                ", ".join(f"https://youtu.be/{vid}" for _, vid, _ in group),
            )
    logging.info(
        "Summary: ok=%d  no_caption=%d  failed=%d  write_failed=%d  total=%d",
        len(ok),
        len(none),
        len(fail),
        len(write_fail),
        total,
    )

    console.print()
    for label, group, style in (
        ("Videos without captions:", none, "yellow"),
        ("Videos whose transcript failed to download:", fail, "red"),
        ("Videos whose transcript could not be written:", write_fail, "red"),
    ):
        if group:
            console.print(label, style=style, markup=False)
            for _, vid, title in group:
                console.print(f"• https://youtu.be/{vid} — {title[:70]}", style=style, markup=False)
    console.print(
        f"Summary: ✓ [green]{len(ok)}[/]   •  ↯ no-caption [yellow]{len(none)}[/]   "
        f"•  ⚠ failed [red]{len(fail) + len(write_fail)}[/]   (total {total})",
        highlight=False,
    )
    console.print(f"📁 Output Directory: {out_dir.resolve()}", markup=False, highlight=False)


async def _main(argv: Sequence[str] | None = None) -> None:
    P = build_parser()
    args = P.parse_args(argv)

    log_file = Path(args.log_file).expanduser() if args.log_file else None
    configure_logging(args.verbose, log_file)

    try:
        settings = load_settings(args)
    except ConfigError as exc:
        P.error(str(exc))

    console = Console()
    session = make_session()
    try:
        try:
            videos = lister.list_channel_videos(
                settings.api_key,
                settings.channel_id,
                session=session,
                limit=settings.limit,
            )
        except ListingError as exc:
            logging.error("Error fetching video list: %s", exc)
            console.print(
                f"Could not list videos for channel {settings.channel_id}: {exc.cause}",
                style="red",
                markup=False,
            )
            sys.exit(1)

        if not videos:
            logging.warning("No videos found for channel %s", settings.channel_id)
            console.print("No videos found.")
            return
        logging.info("Found %d videos", len(videos))
        console.print(f"Found {len(videos)} videos.", highlight=False)

        try:
            out_dir = ensure_dir(settings.out_dir)
        except WriteError as exc:
            logging.error("Cannot create output directory: %s", exc)
            console.print(
                f"Could not create output directory {exc.path}: {exc.cause}",
                style="red",
                markup=False,
            )
            sys.exit(1)
        status_display = create_status_display(console)
        status_display.set_total_videos(len(videos))
        status_display.update_status("Downloading transcripts...")
        status_display.start()
        try:
            results = await run_batch(
                videos,
                out_dir,
                settings.languages,
                jobs=settings.jobs,
                session=session,
                delay=settings.delay,
                on_result=lambda res: status_display.record(res[0]),
            )
            status_display.update_status("Finished")
        finally:
            status_display.stop()
    finally:
        session.close()

    _emit_final_summary(results, out_dir, console)
    for h in logging.getLogger().handlers:
        h.flush()


async def main(argv: Sequence[str] | None = None) -> None:
    def _sigint(signum, frame):
        raise KeyboardInterrupt

    signal.signal(signal.SIGINT, _sigint)
    try:
        await _main(argv)
    except KeyboardInterrupt:
        logging.warning("Interrupted by user")
        print("\nAborted by user")
        sys.exit(130)


def cli_entry() -> None:
    asyncio.run(main())
