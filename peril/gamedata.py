"""Players, units and the messages describing their actions."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

Location = str

_LOCATIONS = frozenset(("americas", "europe", "africa", "asia", "australia", "antarctica"))


class UnitRank(str, Enum):
    """The kinds of unit a player can spawn."""

    INFANTRY = "infantry"
    CAVALRY = "cavalry"
    ARTILLERY = "artillery"

    def __str__(self) -> str:
        return self.value


def all_ranks() -> frozenset[UnitRank]:
    """Every valid unit rank."""
    return frozenset(UnitRank)


def all_locations() -> frozenset[Location]:
    """Every valid location on the map."""
    return _LOCATIONS


@dataclass(frozen=True)
class Unit:
    """A single unit on the map."""

    id: int
    rank: UnitRank
    location: Location

    def to_dict(self) -> dict[str, Any]:
        return {"ID": self.id, "Rank": self.rank.value, "Location": self.location}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Unit:
        return cls(int(data.get("ID", 0)), UnitRank(data.get("Rank", "")),
                   str(data.get("Location", "")))


@dataclass
class Player:
    """A player and the units they own, keyed by unit id."""

    username: str = ""
    units: dict[int, Unit] = field(default_factory=dict)

    def to_dict(self) -> dict[str, Any]:
        return {"Username": self.username,
                "Units": {str(uid): unit.to_dict() for uid, unit in self.units.items()}}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> Player:
        units = data.get("Units") or {}
        return cls(str(data.get("Username", "")),
                   {int(uid): Unit.from_dict(unit) for uid, unit in units.items()})


@dataclass
class ArmyMove:
    """A player moving some of their units to a location."""

    player: Player
    units: list[Unit]
    to_location: Location

    def to_dict(self) -> dict[str, Any]:
        return {"Player": self.player.to_dict(),
                "Units": [unit.to_dict() for unit in self.units],
                "ToLocation": self.to_location}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> ArmyMove:
        return cls(Player.from_dict(data.get("Player") or {}),
                   [Unit.from_dict(unit) for unit in data.get("Units") or []],
                   str(data.get("ToLocation", "")))


@dataclass
class RecognitionOfWar:
    """A declaration of war between two players."""

    attacker: Player
    defender: Player

    def to_dict(self) -> dict[str, Any]:
        return {"Attacker": self.attacker.to_dict(), "Defender": self.defender.to_dict()}

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> RecognitionOfWar:
        return cls(Player.from_dict(data.get("Attacker") or {}),
                   Player.from_dict(data.get("Defender") or {}))