"""Routing keys, exchange names and the messages exchanged between peers."""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Mapping

ARMY_MOVES_PREFIX = "army_moves"
WAR_RECOGNITIONS_PREFIX = "war"
PAUSE_KEY = "pause"
GAME_LOG_SLUG = "game_logs"

EXCHANGE_PERIL_DIRECT = "peril_direct"
EXCHANGE_PERIL_TOPIC = "peril_topic"

_ZERO_TIME = datetime(1, 1, 1, tzinfo=timezone.utc)


def _format_time(moment: datetime) -> str:
    """RFC 3339 with the shortest exact fraction and 'Z' for UTC."""
    if moment.tzinfo is None:
        moment = moment.astimezone()
    text = re.sub(r"\.(\d*?)0*(?=[+-])", lambda m: f".{m.group(1)}" if m.group(1) else "",
                  moment.isoformat())
    return text[:-6] + "Z" if text.endswith("+00:00") else text


def _parse_time(text: str) -> datetime:
    """Parse an RFC 3339 timestamp; digits beyond microseconds are dropped."""
    if not re.fullmatch(r"\d{4}-\d{2}-\d{2}[Tt]\d{2}:\d{2}:\d{2}(\.\d+)?([Zz]|[+-]\d{2}:\d{2})", text):
        raise ValueError(f"invalid RFC 3339 time: {text!r}")
    text = re.sub(r"[Zz]$", "+00:00", text)
    text = re.sub(r"\.(\d+)", lambda m: "." + (m.group(1) + "000000")[:6], text)
    return datetime.fromisoformat(text[:10] + "T" + text[11:])


@dataclass(frozen=True)
class PlayingState:
    """Whether the game is paused."""

    is_paused: bool = False

    def to_dict(self) -> dict[str, Any]:
        return {"IsPaused": self.is_paused}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> PlayingState:
        return cls(is_paused=bool(data.get("IsPaused", False)))


@dataclass(frozen=True)
class GameLog:
    """A log line sent by a player."""

    current_time: datetime = _ZERO_TIME
    message: str = ""
    username: str = ""

    def to_dict(self) -> dict[str, Any]:
        return {
            "CurrentTime": _format_time(self.current_time),
            "Message": self.message,
            "Username": self.username,
        }

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> GameLog:
        raw_time = data.get("CurrentTime")
        return cls(
            current_time=_ZERO_TIME if raw_time is None else _parse_time(str(raw_time)),
            message=str(data.get("Message", "")),
            username=str(data.get("Username", "")),
        )