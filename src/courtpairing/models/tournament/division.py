"""Division data class."""

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

from courtpairing.constants import DEFAULT_DIVISION_COLOR


@dataclass
class Division:
    """A block of courts with its own group of players.

    Attributes
    ----------
    id : str
        Division id.
    name : str
        Display name.
    court_start : int
        First court of the division (1-based, inclusive).
    court_end : int
        Last court of the division (inclusive).
    color : str
        Display color.
    player_ids : list of str
        Players assigned to the division.
    """

    id: str
    name: str
    court_start: int
    court_end: int
    color: str = DEFAULT_DIVISION_COLOR
    player_ids: List[str] = field(default_factory=list)

    @property
    def num_courts(self) -> int:
        return self.court_end - self.court_start + 1

    @property
    def court_offset(self) -> int:
        """Amount added to a 1-based court number to land in this division."""
        return self.court_start - 1

    def overlaps(self, other: "Division") -> bool:
        return self.court_start <= other.court_end and self.court_end >= other.court_start

    def to_dict(self) -> Dict[str, Any]:
        """Serialize division to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "court_start": self.court_start,
            "court_end": self.court_end,
            "color": self.color,
            "player_ids": list(self.player_ids),
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "Division":
        """Deserialize division from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            court_start=int(data["court_start"]),
            court_end=int(data["court_end"]),
            color=data.get("color", DEFAULT_DIVISION_COLOR),
            player_ids=list(data.get("player_ids", [])),
        )
