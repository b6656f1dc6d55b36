import io
import random

import pytest

from peril.console import (
    client_welcome,
    get_input,
    get_malicious_log,
    print_client_help,
    print_quit,
    print_server_help,
)
from peril.gamestate import GameError


class _FirstChoice:
    def choice(self, seq):
        return seq[0]


class _LastChoice:
    def choice(self, seq):
        return seq[-1]


def test_get_input_splits_words():
    assert get_input(io.StringIO("  move asia 1 \n")) == ["move", "asia", "1"]


def test_get_input_prints_prompt(capsys):
    get_input(io.StringIO("status\n"))
    assert capsys.readouterr().out == "> "


def test_get_input_reads_one_line_only():
    stream = io.StringIO("spawn europe infantry\nstatus\n")
    assert get_input(stream) == ["spawn", "europe", "infantry"]
    assert get_input(stream) == ["status"]


def test_get_input_end_of_input_is_empty():
    assert get_input(io.StringIO("")) == []


def test_get_input_blank_line_is_empty():
    assert get_input(io.StringIO("   \n")) == []


def test_client_welcome_returns_first_word(capsys):
    assert client_welcome(io.StringIO("alice bob\n")) == "alice"
    out = capsys.readouterr().out
    assert "Welcome, alice!" in out
    assert "Possible commands:" in out


def test_client_welcome_without_name_raises():
    with pytest.raises(GameError, match="you must enter a username. goodbye"):
        client_welcome(io.StringIO("\n"))


def test_client_help_lists_commands(capsys):
    print_client_help()
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Possible commands:"
    assert "* spam <n>" in lines
    assert "    spawn europe infantry" in lines
    assert lines[-1] == "* help"


def test_server_help_lists_commands(capsys):
    print_server_help()
    lines = capsys.readouterr().out.splitlines()
    assert lines == ["Possible commands:", "* pause", "* resume", "* quit", "* help"]


def test_print_quit(capsys):
    print_quit()
    assert capsys.readouterr().out == "I hate this game! (╯°□°)╯︵ ┻━┻\n"


def test_malicious_log_uses_rng():
    assert get_malicious_log(_FirstChoice()) == (
        "Never interrupt your enemy when he is making a mistake."
    )
    assert get_malicious_log(_LastChoice()) == "All warfare is based on deception."


def test_malicious_log_deterministic_with_seed():
    first = get_malicious_log(random.Random(42))
    second = get_malicious_log(random.Random(42))
    assert first == second


def test_malicious_log_draws_from_fixed_pool():
    seen = {get_malicious_log(random.Random(seed)) for seed in range(200)}
    assert "All warfare is based on deception." in seen
    assert len(seen) == 6