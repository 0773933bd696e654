"""ScheduleConfig data class."""

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

from courtpairing.constants import (
    DEFAULT_MAX_PLAYERS,
    DEFAULT_MODE,
    MAX_PLAYERS_LIMIT,
    PAIRING_MODES,
)
from courtpairing.exceptions import InvalidConfigurationException


@dataclass
class ScheduleConfig:
    """Schedule configuration settings.

    Attributes
    ----------
    num_courts : int
        Courts available to the whole event.
    mode : str
        Pairing mode, "rotating" or "fixed".
    num_rounds : int or None
        Requested number of rounds; None keeps whatever the scheduler produces.
    max_players : int
        Roster capacity before signups go to the waitlist.
    seed : int or None
        Seed for reproducible schedules; None draws from system entropy.
    """

    num_courts: int
    mode: str = DEFAULT_MODE
    num_rounds: Optional[int] = None
    max_players: int = DEFAULT_MAX_PLAYERS
    seed: Optional[int] = None

    def validate(self) -> None:
        """Raise InvalidConfigurationException when a setting is out of range."""
        if self.num_courts < 1:
            raise InvalidConfigurationException(
                f"Need at least one court, got {self.num_courts}"
            )
        if self.mode not in PAIRING_MODES:
            raise InvalidConfigurationException(
                f"Unknown pairing mode {self.mode!r}; expected one of {PAIRING_MODES}"
            )
        if self.num_rounds is not None and self.num_rounds < 1:
            raise InvalidConfigurationException(
                f"Round count must be positive, got {self.num_rounds}"
            )
        if not 1 <= self.max_players <= MAX_PLAYERS_LIMIT:
            raise InvalidConfigurationException(
                f"Capacity must be between 1 and {MAX_PLAYERS_LIMIT}, got {self.max_players}"
            )

    def to_dict(self) -> Dict[str, Any]:
        """Serialize configuration to dictionary."""
        return {
            "num_courts": self.num_courts,
            "mode": self.mode,
            "num_rounds": self.num_rounds,
            "max_players": self.max_players,
            "seed": self.seed,
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScheduleConfig":
        """Deserialize configuration from dictionary."""
        return cls(
            num_courts=data["num_courts"],
            mode=data.get("mode", DEFAULT_MODE),
            num_rounds=data.get("num_rounds"),
            max_players=data.get("max_players", DEFAULT_MAX_PLAYERS),
            seed=data.get("seed"),
        )
