"""Appending received game logs to disk."""

from __future__ import annotations

import logging
import time
from pathlib import Path
from typing import Union

from .routing import GameLog

LOGS_FILE = "game.log"
WRITE_TO_DISK_SLEEP = 1.0

_log = logging.getLogger(__name__)


def format_log(gamelog: GameLog) -> str:
    """The line written to the log file for one game log."""
    moment = gamelog.current_time
    if moment.tzinfo is None:
        moment = moment.astimezone()
    stamp = moment.replace(microsecond=0).isoformat()
    if stamp.endswith("+00:00"):
        stamp = stamp[:-6] + "Z"
    return f"{stamp} {gamelog.username}: {gamelog.message}\n"


def write_log(gamelog: GameLog, path: Union[str, Path] = LOGS_FILE,
              delay: float = WRITE_TO_DISK_SLEEP) -> None:
    """Append a game log to the log file after a simulated slow write."""
    _log.info("received game log...")
    time.sleep(delay)
    try:
        handle = open(path, "a", encoding="utf-8")
    except OSError as exc:
        raise OSError(f"could not open logs file: {exc}") from exc
    with handle:
        try:
            handle.write(format_log(gamelog))
        except OSError as exc:
            raise OSError(f"could not write to logs file: {exc}") from exc