"""Dynamic status display using Rich Live for yt_channel_cc."""

from __future__ import annotations

import logging
from typing import Optional

from rich.console import Console, Group
from rich.live import Live
from rich.panel import Panel
from rich.progress import BarColumn, Progress, SpinnerColumn, TextColumn
from rich.table import Table


class StatusDisplay:
    """Panel with the current phase, progress bar and outcome counters."""

    def __init__(self, console: Optional[Console] = None):
        self.console = console or Console()
        self.live_display: Optional[Live] = None
        self.status_message = "Initializing..."
        self.total_videos = 0
        self.processed = 0
        self.counts = {"ok": 0, "none": 0, "fail": 0, "write_fail": 0}
        self.progress = Progress(
            SpinnerColumn(),
            BarColumn(),
            TextColumn("[progress.percentage]{task.percentage:>3.0f}%"),
            console=self.console,
        )
        self.progress_task = None
        self._active = False

    def start(self) -> None:
        try:
            self.live_display = Live(
                self._generate_display(),
                console=self.console,
                refresh_per_second=4,
                transient=True,
            )
            self.live_display.start()
            self._active = True
        except Exception as e:  # noqa: BLE001
            logging.debug("Failed to start status display: %s", e)
            self._active = False

    def stop(self) -> None:
        if self.live_display and self._active:
            self.live_display.stop()
            self._active = False

    def update_status(self, message: str) -> None:
        self.status_message = message
        self._refresh_display()

    def set_total_videos(self, total: int) -> None:
        self.total_videos = total
        self.progress_task = self.progress.add_task("Transcripts", total=total)
        self._refresh_display()

    def record(self, status: str) -> None:
        """Count one finished video."""
        self.processed += 1
        self.counts[status] = self.counts.get(status, 0) + 1
        if self.progress_task is not None:
            self.progress.update(self.progress_task, completed=self.processed)
        self._refresh_display()

    def _generate_display(self) -> Panel:
        table = Table.grid(padding=(0, 1))
        table.add_column(style="bold blue", width=22)
        table.add_column()

        table.add_row("Status:", self.status_message)
        table.add_row("", "")
        if self.total_videos:
            pct = self.processed / self.total_videos * 100
            table.add_row(
                "📊 Processed:", f"{self.processed}/{self.total_videos} ({pct:.1f}%)"
            )
        else:
            table.add_row("📊 Processed:", str(self.processed))
        table.add_row("✅ Saved:", str(self.counts["ok"]))
        table.add_row("↯ No Captions:", str(self.counts["none"]))
        table.add_row("⚠ Failed:", str(self.counts["fail"]))
        table.add_row("💾 Write Failures:", str(self.counts["write_fail"]))

        content = [table]
        if self.progress_task is not None:
            content.append(self.progress)
        return Panel(
            Group(*content),
            title="[bold blue]Transcript Download[/bold blue]",
            border_style="blue",
        )

    def _refresh_display(self) -> None:
        if self.live_display and self._active:
            self.live_display.update(self._generate_display())


class FallbackStatusDisplay:
    """Used when stdout is not a terminal: status updates become log lines."""

    def __init__(self, console=None):
        self.total_videos = 0
        self.processed = 0

    def start(self) -> None:
        pass

    def stop(self) -> None:
        pass

    def update_status(self, message: str) -> None:
        logging.info("Status: %s", message)

    def set_total_videos(self, total: int) -> None:
        self.total_videos = total
        logging.info("Processing %d videos", total)

    def record(self, status: str) -> None:
        self.processed += 1
        logging.debug("Progress %d/%d (%s)", self.processed, self.total_videos, status)


def create_status_display(console: Optional[Console] = None) -> StatusDisplay | FallbackStatusDisplay:
    """Live panel on a terminal, plain logging otherwise."""
    console = console or Console()
    if console.is_terminal:
        return StatusDisplay(console)
    return FallbackStatusDisplay(console)
