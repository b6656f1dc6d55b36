# peril

Building blocks for Peril, a multiplayer turn-based strategy game in which
players move armies across the continents and exchange messages through an
AMQP broker such as RabbitMQ.

## What it contains

- `peril.gamedata`: the game data. `Unit`, `Player`, `ArmyMove` and
  `RecognitionOfWar` are dataclasses with `to_dict()` / `from_dict()` for
  their JSON form. `UnitRank` holds the ranks (infantry, cavalry,
  artillery); `all_ranks()` and `all_locations()` return the valid ranks and
  the six locations (americas, europe, africa, asia, australia, antarctica).
- `peril.gamestate`: `GameState`, one player's thread-safe view of the game.
  - `command_spawn(words)` handles `spawn <location> <rank>` and returns the
    new `Unit`. The unit's id is the player's unit count plus one.
  - `command_move(words)` handles `move <location> <unitID> ...` and
    returns the `ArmyMove`. It is refused while the game is paused.
  - `command_status()` prints whether the game is paused and, if it is not,
    the player's units.
  - `handle_pause(state)` applies a `PlayingState` broadcast.
  - `handle_move(move)` reacts to a move and returns a `MoveOutcome`
    (`SAME_PLAYER`, `SAFE` or `MAKE_WAR`).
  - `handle_war(recognition)` returns a `WarResult` holding a `WarOutcome`,
    the winner and the loser.

  Commands that cannot be carried out raise `GameError`. The module also
  provides `overlapping_location()` and `units_to_power_level()`.
- `peril.routing`: the exchange names (`EXCHANGE_PERIL_DIRECT`,
  `EXCHANGE_PERIL_TOPIC`) and the routing keys (`ARMY_MOVES_PREFIX`,
  `WAR_RECOGNITIONS_PREFIX`, `PAUSE_KEY`, `GAME_LOG_SLUG`). It also holds the
  `PlayingState` and `GameLog` messages. Times in those messages are
  serialised as RFC 3339.
- `peril.pubsub`: helpers built on `pika`.
  - `declare_and_bind()` opens a channel, declares a durable or transient
    queue (`SimpleQueueType`) and binds it. It returns the channel and the
    queue name.
  - `publish_json()` publishes a value, or an object with `to_dict()`, as
    `application/json`.
  - `subscribe_json()` consumes JSON messages. Each message is optionally
    decoded, passed to a handler and then acknowledged. A message that
    cannot be decoded is logged and left unacknowledged.

  Setup failures raise `PubSubError`.
- `peril.handlers`: `handler_move(state)` and `handler_pause(state)` build
  message handlers for a `GameState`. Each handler re-prints the `> `
  prompt after it runs.
- `peril.logs`: `format_log()` turns a `GameLog` into a log line of the form
  `<RFC 3339 time> <username>: <message>`. `write_log()` waits
  (1 second by default) and then appends that line to `game.log` or to a
  path you give.
- `peril.console`: the console helpers.
  - `print_client_help()` and `print_server_help()` print the help text.
  - `get_input()` prints a prompt and returns one line split into words.
  - `client_welcome()` asks for a username and raises `GameError` if none
    is given.
  - `get_malicious_log()` returns a random war quote.
  - `print_quit()` prints the farewell message.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## A short example

```python
from peril.gamestate import GameState, GameError

state = GameState("alice")
state.command_spawn(["spawn", "europe", "infantry"])
state.command_spawn(["spawn", "europe", "artillery"])
move = state.command_move(["move", "asia", "1"])
print(move.to_dict()["ToLocation"])  # asia

try:
    state.command_spawn(["spawn", "mars", "infantry"])
except GameError as error:
    print(error)  # error: mars is not a valid location
```

## Wars

In a war, artillery counts 10, cavalry 5 and infantry 1. Only the
attacker's `GameState` fights the war. It compares the units of both sides
at the first location where they meet, and the side with the higher total
wins. If the attacker loses, or the war is a draw, the attacker's units at
that location are removed from its state. The defender's state reports
that it published the war. Any other player's state reports that it is not
involved.

## What it does not do

This package does not include the client or server programs. It provides
no command to run and no loop that reads commands and dispatches them. It
also does not connect to a broker on its own. You open the `pika`
connection and pass it, or its channels, to the functions in
`peril.pubsub`.