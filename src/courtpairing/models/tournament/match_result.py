"""Match result data class."""

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
from typing import Any, Dict, Optional

from courtpairing.models.schedule.match import Match
from courtpairing.type_hints import Team


@dataclass
class MatchResult:
    """Represents the score of a single doubles match.

    Attributes
    ----------
    match : Match
        The court assignment that was played.
    team1_score : int
        Points scored by team1.
    team2_score : int
        Points scored by team2.
    """

    match: Match
    team1_score: int
    team2_score: int

    @property
    def is_tie(self) -> bool:
        return self.team1_score == self.team2_score

    @property
    def winning_team(self) -> Optional[Team]:
        """The team with more points, or None on a tie."""
        if self.team1_score > self.team2_score:
            return self.match.team1
        if self.team2_score > self.team1_score:
            return self.match.team2
        return None

    def to_dict(self) -> Dict[str, Any]:
        """Serialize match result to dictionary."""
        return {
            "match": self.match.to_dict(),
            "team1_score": self.team1_score,
            "team2_score": self.team2_score,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "MatchResult":
        """Deserialize match result from dictionary."""
        return cls(
            match=Match.from_dict(data["match"]),
            team1_score=data["team1_score"],
            team2_score=data["team2_score"],
        )
