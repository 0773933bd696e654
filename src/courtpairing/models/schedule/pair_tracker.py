"""Partnership and opponent bookkeeping for doubles scheduling."""

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
from itertools import combinations
from typing import TYPE_CHECKING, Any, Dict, Iterable, Iterator, List, Sequence

from courtpairing.exceptions import InvalidPairingException

if TYPE_CHECKING:
    from courtpairing.models.schedule.match import Match
    from courtpairing.models.schedule.round_data import Round


@dataclass(frozen=True, order=True)
class PairKey:
    """Order-independent key for two distinct players.

    Attributes
    ----------
    first : str
        The smaller of the two player ids.
    second : str
        The larger of the two player ids.
    """

    first: str
    second: str

    @classmethod
    def of(cls, player1_id: str, player2_id: str) -> "PairKey":
        """Build the canonical key for two players, in either order."""
        if player1_id == player2_id:
            raise InvalidPairingException(
                f"Cannot pair player {player1_id!r} with themself"
            )
        if player1_id < player2_id:
            return cls(player1_id, player2_id)
        return cls(player2_id, player1_id)

    def __iter__(self) -> Iterator[str]:
        yield self.first
        yield self.second

    def __contains__(self, player_id: object) -> bool:
        return player_id == self.first or player_id == self.second


@dataclass
class PairTracker:
    """
    Running counts used to score candidate teams.

    Attributes
    ----------
    partner_counts : dict of PairKey to int
        How many times each pair has played on the same team.
    opponent_counts : dict of PairKey to int
        How many times each pair has played on opposite teams.
    games_played : dict of str to int
        Matches played per player.
    partnered_pairs : int
        Number of distinct pairs that have partnered at least once.
    """

    partner_counts: Dict[PairKey, int] = field(default_factory=dict)
    opponent_counts: Dict[PairKey, int] = field(default_factory=dict)
    games_played: Dict[str, int] = field(default_factory=dict)
    partnered_pairs: int = 0

    @classmethod
    def for_players(cls, player_ids: Iterable[str]) -> "PairTracker":
        """Create a tracker with every player at zero games."""
        return cls(games_played={pid: 0 for pid in player_ids})

    @classmethod
    def from_schedule(
        cls, player_ids: Iterable[str], rounds: Sequence["Round"]
    ) -> "PairTracker":
        """Replay a finished schedule into a fresh tracker."""
        tracker = cls.for_players(player_ids)
        for round_data in rounds:
            for match in round_data.matches:
                tracker.record_match(match)
        return tracker

    def partner_count(self, player1_id: str, player2_id: str) -> int:
        """Times the two players have been partners."""
        return self.partner_counts.get(PairKey.of(player1_id, player2_id), 0)

    def opponent_count(self, player1_id: str, player2_id: str) -> int:
        """Times the two players have faced each other."""
        return self.opponent_counts.get(PairKey.of(player1_id, player2_id), 0)

    def games(self, player_id: str) -> int:
        """Games played so far by a player."""
        return self.games_played.get(player_id, 0)

    def add_partnership(self, player1_id: str, player2_id: str) -> bool:
        """Count one partnership; True when it is the pair's first."""
        key = PairKey.of(player1_id, player2_id)
        previous = self.partner_counts.get(key, 0)
        self.partner_counts[key] = previous + 1
        if previous == 0:
            self.partnered_pairs += 1
            return True
        return False

    def add_opponents(self, player1_id: str, player2_id: str) -> None:
        key = PairKey.of(player1_id, player2_id)
        self.opponent_counts[key] = self.opponent_counts.get(key, 0) + 1

    def add_game(self, player_id: str) -> None:
        self.games_played[player_id] = self.games_played.get(player_id, 0) + 1

    def record_match(self, match: "Match") -> None:
        """Apply one finished court assignment to every counter."""
        self.add_partnership(*match.team1)
        self.add_partnership(*match.team2)
        for player1_id in match.team1:
            for player2_id in match.team2:
                self.add_opponents(player1_id, player2_id)
        for player_id in match.players:
            self.add_game(player_id)

    def games_spread(self) -> int:
        """Difference between the most and fewest games played."""
        if not self.games_played:
            return 0
        counts = self.games_played.values()
        return max(counts) - min(counts)

    def unpartnered_pairs(self, player_ids: Sequence[str]) -> List[PairKey]:
        """Pairs among ``player_ids`` that have never shared a team."""
        return [
            PairKey.of(a, b)
            for a, b in combinations(player_ids, 2)
            if self.partner_count(a, b) == 0
        ]

    def to_dict(self) -> Dict[str, Any]:
        """Serialize counters to a JSON-friendly dictionary."""
        return {
            "partner_counts": [
                [key.first, key.second, count]
                for key, count in sorted(self.partner_counts.items())
            ],
            "opponent_counts": [
                [key.first, key.second, count]
                for key, count in sorted(self.opponent_counts.items())
            ],
            "games_played": dict(self.games_played),
            "partnered_pairs": self.partnered_pairs,
        }
