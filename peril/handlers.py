"""Message handlers used by the client."""

from __future__ import annotations

import sys
from typing import Callable

from .gamedata import ArmyMove
from .gamestate import GameState, MoveOutcome
from .routing import PlayingState


def handler_move(state: GameState) -> Callable[[ArmyMove], MoveOutcome]:
    """A handler that applies incoming moves and then re-prints the prompt."""

    def handle(move: ArmyMove) -> MoveOutcome:
        try:
            return state.handle_move(move)
        finally:
            sys.stdout.write("> ")
            sys.stdout.flush()

    return handle


def handler_pause(state: GameState) -> Callable[[PlayingState], None]:
    """A handler that applies pause broadcasts and then re-prints the prompt."""

    def handle(playing_state: PlayingState) -> None:
        try:
            state.handle_pause(playing_state)
        finally:
            sys.stdout.write("> ")
            sys.stdout.flush()

    return handle