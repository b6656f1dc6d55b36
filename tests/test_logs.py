from datetime import datetime, timedelta, timezone

import pytest

from peril.logs import format_log, write_log
from peril.routing import GameLog


def _log(message="hi", username="alice", moment=None):
    if moment is None:
        moment = datetime(2024, 1, 2, 3, 4, 5, tzinfo=timezone.utc)
    return GameLog(current_time=moment, message=message, username=username)


def test_format_utc():
    assert format_log(_log()) == "2024-01-02T03:04:05Z alice: hi\n"


def test_format_with_offset_drops_fraction():
    moment = datetime(2024, 1, 2, 3, 4, 5, 123456, tzinfo=timezone(timedelta(hours=2)))
    assert format_log(_log(moment=moment)) == "2024-01-02T03:04:05+02:00 alice: hi\n"


def test_format_ends_with_username_and_message():
    line = format_log(_log(message="war is near", username="bob"))
    assert line.endswith(" bob: war is near\n")


def test_write_log_appends(tmp_path):
    path = tmp_path / "game.log"
    first = _log(message="one")
    second = _log(message="two", username="bob")
    write_log(first, path, 0)
    write_log(second, path, 0)
    assert path.read_text(encoding="utf-8") == format_log(first) + format_log(second)


def test_write_log_creates_file(tmp_path):
    path = tmp_path / "new.log"
    write_log(_log(), str(path), 0)
    assert path.read_text(encoding="utf-8") == format_log(_log())


def test_write_log_to_directory_fails(tmp_path):
    with pytest.raises(OSError, match="could not open logs file"):
        write_log(_log(), tmp_path, 0)