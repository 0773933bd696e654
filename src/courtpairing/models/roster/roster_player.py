"""Roster player record."""

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


@dataclass
class RosterPlayer:
    """A signed-up player as seen by the waitlist.

    Attributes
    ----------
    id : str
        Unique player id.
    name : str
        Display name.
    is_playing : bool
        False once the player has dropped out or been benched.
    waitlist_position : int or None
        1-based rank in the overflow queue, None when not waitlisted.
    division_id : str or None
        Division the player is assigned to, if any.
    order_num : int
        Signup order, used to list the roster.
    """

    id: str
    name: str = ""
    is_playing: bool = True
    waitlist_position: Optional[int] = None
    division_id: Optional[str] = None
    order_num: int = 0

    @property
    def is_waitlisted(self) -> bool:
        return self.waitlist_position is not None

    @property
    def is_active(self) -> bool:
        """On the roster proper: playing and not queued."""
        return self.is_playing and not self.is_waitlisted

    def to_dict(self) -> Dict[str, Any]:
        """Serialize player to dictionary."""
        return {
            "id": self.id,
            "name": self.name,
            "is_playing": self.is_playing,
            "waitlist_position": self.waitlist_position,
            "division_id": self.division_id,
            "order_num": self.order_num,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RosterPlayer":
        """Deserialize player from dictionary."""
        return cls(
            id=str(data["id"]),
            name=data.get("name", ""),
            is_playing=bool(data.get("is_playing", True)),
            waitlist_position=data.get("waitlist_position"),
            division_id=data.get("division_id"),
            order_num=data.get("order_num", 0),
        )
