"""Standings for doubles play."""

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
from typing import Any, Dict, Iterable, List, Sequence

from courtpairing.models.tournament import MatchResult
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


@dataclass
class Ranking:
    """One row of the standings table."""

    player_id: str
    wins: int = 0
    losses: int = 0
    points_for: int = 0
    points_against: int = 0
    games_played: int = 0

    @property
    def point_differential(self) -> int:
        return self.points_for - self.points_against

    def to_dict(self) -> Dict[str, Any]:
        """Serialize ranking to dictionary."""
        return {
            "player_id": self.player_id,
            "wins": self.wins,
            "losses": self.losses,
            "points_for": self.points_for,
            "points_against": self.points_against,
            "point_differential": self.point_differential,
            "games_played": self.games_played,
        }


class StandingsCalculator:
    """Ranks players by individual results in doubles matches.

    Each player is credited with their team's result:
    - Wins, then point differential, decide the order
    - A tied match counts as played, but as neither a win nor a loss
    """

    def compute(
        self, player_ids: Sequence[str], results: Iterable[MatchResult]
    ) -> List[Ranking]:
        """Build the standings table.

        Args:
            player_ids: Players to rank; anyone else in the results is ignored
            results: Completed matches

        Returns:
            Rankings sorted by wins desc, then point differential desc
        """
        table: Dict[str, Ranking] = {pid: Ranking(pid) for pid in player_ids}

        for result in results:
            sides = (
                (result.match.team1, result.team1_score, result.team2_score),
                (result.match.team2, result.team2_score, result.team1_score),
            )
            for team, scored, conceded in sides:
                for player_id in team:
                    row = table.get(player_id)
                    if row is None:
                        continue
                    row.games_played += 1
                    row.points_for += scored
                    row.points_against += conceded
                    if scored > conceded:
                        row.wins += 1
                    elif scored < conceded:
                        row.losses += 1

        rankings = sorted(
            table.values(), key=lambda r: (-r.wins, -r.point_differential)
        )
        logger.debug(f"Computed standings for {len(rankings)} players")
        return rankings
