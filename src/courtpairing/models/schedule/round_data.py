"""Data model for a scheduled round."""

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

from dataclasses import dataclass, field
from typing import Any, Dict, List

from courtpairing.models.schedule.match import Match


@dataclass
class Round:
    """Container for the court assignments of one time slot.

    Attributes
    ----------
    round_number : int
        Round number (1-indexed).
    matches : list of Match
        Matches ordered by court.
    sitting : list of str
        Ids of the players not on a court this round.
    """

    round_number: int
    matches: List[Match] = field(default_factory=list)
    sitting: List[str] = field(default_factory=list)

    @property
    def playing(self) -> List[str]:
        """Ids of every player on a court this round."""
        return [pid for match in self.matches for pid in match.players]

    def renumbered(self, round_number: int) -> "Round":
        """Copy of this round under a new number."""
        return Round(
            round_number=round_number,
            matches=list(self.matches),
            sitting=list(self.sitting),
        )

    def shifted(self, offset: int) -> "Round":
        """Copy of this round with every court moved ``offset`` up."""
        return Round(
            round_number=self.round_number,
            matches=[match.shifted(offset) for match in self.matches],
            sitting=list(self.sitting),
        )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize round to dictionary."""
        return {
            "round_number": self.round_number,
            "matches": [m.to_dict() for m in self.matches],
            "sitting": list(self.sitting),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Round":
        """Deserialize round from dictionary."""
        return cls(
            round_number=data["round_number"],
            matches=[Match.from_dict(m) for m in data.get("matches", [])],
            sitting=list(data.get("sitting", [])),
        )
