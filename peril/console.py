"""Console prompts, help text and flavour text shared by client and server."""

from __future__ import annotations

import random
import sys
from typing import Optional, TextIO

from .gamestate import GameError

_CLIENT_HELP = """Possible commands:
* move <location> <unitID> <unitID> <unitID>...
    example:
    move asia 1
* spawn <location> <rank>
    example:
    spawn europe infantry
* status
* spam <n>
    example:
    spam 5
* quit
* help
"""

_SERVER_HELP = """Possible commands:
* pause
* resume
* quit
* help
"""

_QUIT = "I hate this game! (╯°□°)╯︵ ┻━┻\n"

_MALICIOUS_LOGS = (
    "Never interrupt your enemy when he is making a mistake.",
    "The hardest thing of all for a soldier is to retreat.",
    "A soldier will fight long and hard for a bit of colored ribbon.",
    "It is well that war is so terrible, otherwise we should grow too fond of it.",
    "The art of war is simple enough. Find out where your enemy is. "
    "Get at him as soon as you can. Strike him as hard as you can, and keep moving on.",
    "All warfare is based on deception.",
)


def _emit(text: str) -> str:
    sys.stdout.write(text)
    sys.stdout.flush()
    return text


def print_client_help() -> str:
    """Print the player's commands and return the text printed."""
    return _emit(_CLIENT_HELP)


def print_server_help() -> str:
    """Print the server operator's commands and return the text printed."""
    return _emit(_SERVER_HELP)


def get_input(stream: Optional[TextIO] = None) -> list[str]:
    """Prompt and read one line, split into words; empty on end of input."""
    _emit("> ")
    return (sys.stdin if stream is None else stream).readline().split()


def client_welcome(stream: Optional[TextIO] = None) -> str:
    """Greet the player, ask for a username and show the help text."""
    _emit("Welcome to the Peril client!\nPlease enter your username:\n")
    words = get_input(stream)
    if not words:
        raise GameError("you must enter a username. goodbye")
    username = words[0]
    _emit(f"Welcome, {username}!\n")
    print_client_help()
    return username


def get_malicious_log(rng: Optional[random.Random] = None) -> str:
    """Pick a random war quote."""
    return (rng or random).choice(_MALICIOUS_LOGS)


def print_quit() -> str:
    """Print the farewell message and return the text printed."""
    return _emit(_QUIT)