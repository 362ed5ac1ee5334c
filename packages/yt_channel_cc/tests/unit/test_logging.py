"""Console verbosity and file logging configuration."""

import logging
from pathlib import Path

import pytest

from yt_channel_cc.logger import configure_logging, console_level


@pytest.fixture(autouse=True)
def _no_env_level(monkeypatch):
    monkeypatch.delenv("YT_CHANNEL_CC_LOGLEVEL", raising=False)
    yield
    root = logging.getLogger()
    for h in list(root.handlers):
        if getattr(h, "_yt_channel_cc", False):
            root.removeHandler(h)
            h.close()


@pytest.mark.parametrize(
    "verbose, level",
    [(0, logging.WARNING), (1, logging.INFO), (2, logging.DEBUG), (5, logging.DEBUG)],
)
def test_console_level_from_verbosity(verbose, level):
    assert console_level(verbose) == level


def test_env_overrides_verbosity(monkeypatch):
    monkeypatch.setenv("YT_CHANNEL_CC_LOGLEVEL", "error")
    assert console_level(2) == logging.ERROR


def test_file_handler_records_debug(tmp_path: Path):
    log_file = tmp_path / "logs" / "run.log"
    handler = configure_logging(0, log_file)
    assert handler.level == logging.WARNING

    logging.getLogger("yt_channel_cc.test").debug("deep detail %s", "abc")
    for h in logging.getLogger().handlers:
        h.flush()
    assert "deep detail abc" in log_file.read_text(encoding="utf-8")


def test_reconfigure_replaces_own_handlers(tmp_path: Path):
    configure_logging(1)
    configure_logging(2)
    ours = [h for h in logging.getLogger().handlers if getattr(h, "_yt_channel_cc", False)]
    assert len(ours) == 1
    assert ours[0].level == logging.DEBUG
