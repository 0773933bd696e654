"""Single court assignment."""

# Court Pairing
# Copyright (C) 2025  Court Pairing developers
#
# This program is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# This program is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with this program.  If not, see <http://www.gnu.org/licenses/>.

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from courtpairing.constants import PLAYERS_PER_COURT, PLAYERS_PER_TEAM
from courtpairing.exceptions import InvalidPairingException
from courtpairing.type_hints import Team


@dataclass(frozen=True)
class Match:
    """One doubles match on one court.

    Attributes
    ----------
    court : int
        Court number, 1-based and unique within a round.
    team1 : tuple of str
        Player ids of the first team.
    team2 : tuple of str
        Player ids of the second team.
    """

    court: int
    team1: Team
    team2: Team

    def __post_init__(self) -> None:
        if self.court < 1:
            raise InvalidPairingException(f"Court numbers start at 1, got {self.court}")
        if {len(self.team1), len(self.team2)} != {PLAYERS_PER_TEAM}:
            raise InvalidPairingException("Each team needs exactly two players")
        if len(set(self.players)) != PLAYERS_PER_COURT:
            raise InvalidPairingException(
                f"Players on court {self.court} must be distinct: {self.players}"
            )

    @property
    def players(self) -> Tuple[str, str, str, str]:
        """All four players, team1 first."""
        return (self.team1[0], self.team1[1], self.team2[0], self.team2[1])

    def shifted(self, offset: int) -> "Match":
        """Same match moved ``offset`` courts up."""
        return Match(court=self.court + offset, team1=self.team1, team2=self.team2)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match to dictionary."""
        return {
            "court": self.court,
            "team1": list(self.team1),
            "team2": list(self.team2),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Match":
        """Deserialize match from dictionary."""
        return cls(
            court=int(data["court"]),
            team1=tuple(data["team1"]),
            team2=tuple(data["team2"]),
        )
