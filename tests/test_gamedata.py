import json

import pytest

from peril.gamedata import (
    ArmyMove,
    Player,
    RecognitionOfWar,
    Unit,
    UnitRank,
    all_locations,
    all_ranks,
)


def _player(name, *units):
    return Player(username=name, units={u.id: u for u in units})


def test_all_ranks_matches_enum():
    assert all_ranks() == {UnitRank.INFANTRY, UnitRank.CAVALRY, UnitRank.ARTILLERY}
    assert "cavalry" in all_ranks()


def test_all_locations():
    locations = all_locations()
    assert len(locations) == 6
    assert {"americas", "europe", "africa", "asia", "australia", "antarctica"} == locations


def test_rank_str_is_value():
    unit = Unit.from_dict({"ID": 1, "Rank": "artillery", "Location": "asia"})
    assert unit.rank is UnitRank.ARTILLERY
    assert str(unit.rank) == "artillery"


def test_unit_round_trip_and_keys():
    unit = Unit(id=3, rank=UnitRank.CAVALRY, location="africa")
    data = unit.to_dict()
    assert data == {"ID": 3, "Rank": "cavalry", "Location": "africa"}
    assert Unit.from_dict(data) == unit


def test_unit_rejects_unknown_rank():
    with pytest.raises(ValueError):
        Unit.from_dict({"ID": 1, "Rank": "dragon", "Location": "asia"})


def test_player_round_trip_through_json():
    player = _player(
        "alice",
        Unit(1, UnitRank.INFANTRY, "asia"),
        Unit(2, UnitRank.ARTILLERY, "europe"),
    )
    restored = Player.from_dict(json.loads(json.dumps(player.to_dict())))
    assert restored == player
    assert set(restored.units) == {1, 2}


def test_player_null_units():
    player = Player.from_dict({"Username": "bob", "Units": None})
    assert player.units == {}
    assert player.username == "bob"


def test_army_move_round_trip():
    unit = Unit(1, UnitRank.INFANTRY, "asia")
    move = ArmyMove(player=_player("alice", unit), units=[unit], to_location="asia")
    assert ArmyMove.from_dict(json.loads(json.dumps(move.to_dict()))) == move


def test_army_move_null_units():
    move = ArmyMove.from_dict({"Player": {"Username": "x"}, "Units": None, "ToLocation": "asia"})
    assert move.units == []
    assert move.to_location == "asia"


def test_recognition_of_war_round_trip():
    war = RecognitionOfWar(
        attacker=_player("alice", Unit(1, UnitRank.CAVALRY, "asia")),
        defender=_player("bob", Unit(1, UnitRank.INFANTRY, "asia")),
    )
    restored = RecognitionOfWar.from_dict(json.loads(json.dumps(war.to_dict())))
    assert restored == war
    assert restored.attacker.username == "alice"