"""Fixed partners scheduler.

Teams stay together for the whole event and every team meets every other
team exactly once. Matchups come from the circle method:

- even number of teams: the last team is pinned and the others rotate,
  giving ``T - 1`` meta-rounds of ``T / 2`` matchups;
- odd number of teams: every team rotates and the team at the head of the
  circle has a bye, giving ``T`` meta-rounds of ``(T - 1) / 2`` matchups.

Meta-rounds with more matchups than courts are split over consecutive
physical rounds.
"""

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

from typing import Iterable, List, Optional, Sequence, Set

from courtpairing.constants import MIN_PLAYERS, PLAYERS_PER_TEAM
from courtpairing.exceptions import InvalidPairingException
from courtpairing.models.schedule import Match, Round
from courtpairing.type_hints import MetaRound, Team
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def circle_method_rounds(num_teams: int) -> List[MetaRound]:
    """Round-robin matchups between team indices ``0..num_teams-1``.

    Returns:
        One list of ``(home, away)`` index pairs per meta-round
    """
    if num_teams < 2:
        return []

    meta_rounds: List[MetaRound] = []
    if num_teams % 2 == 0:
        pinned = num_teams - 1
        circle = list(range(num_teams - 1))
        for _ in range(num_teams - 1):
            matchups = [(pinned, circle[0])]
            for i in range(1, num_teams // 2):
                matchups.append((circle[i], circle[num_teams - 1 - i]))
            meta_rounds.append(matchups)
            circle.append(circle.pop(0))
    else:
        circle = list(range(num_teams))
        for _ in range(num_teams):
            # circle[0] sits this one out
            matchups = [
                (circle[i], circle[num_teams - i])
                for i in range(1, (num_teams - 1) // 2 + 1)
            ]
            meta_rounds.append(matchups)
            circle.append(circle.pop(0))

    return meta_rounds


def make_teams(player_ids: Sequence[str]) -> List[Team]:
    """Pair players in listed order: (1, 2), (3, 4), ..."""
    return [
        (player_ids[i], player_ids[i + 1]) for i in range(0, len(player_ids) - 1, 2)
    ]


def _check_teams(teams: Iterable[Team], player_ids: Iterable[str]) -> None:
    roster = set(player_ids)
    seen: Set[str] = set()
    for team in teams:
        if len(team) != PLAYERS_PER_TEAM or team[0] == team[1]:
            raise InvalidPairingException(f"Team {team!r} needs two different players")
        for player_id in team:
            if player_id in seen:
                raise InvalidPairingException(
                    f"Player {player_id!r} is on more than one team"
                )
            if player_id not in roster:
                raise InvalidPairingException(
                    f"Player {player_id!r} on team {team!r} is not on the roster"
                )
            seen.add(player_id)


def generate_fixed(
    player_ids: Sequence[str],
    num_courts: int,
    teams: Optional[Sequence[Team]] = None,
) -> List[Round]:
    """Generate a fixed-partners round-robin schedule.

    Args:
        player_ids: Ids of the active players, an even number of at least four
        num_courts: Courts available
        teams: Pre-arranged teams; consecutive players are paired when omitted

    Returns:
        List of rounds, empty for an odd or too small player list or no usable court

    Raises:
        InvalidPairingException: If a supplied team is malformed, teams share a
            player or a team member is not in ``player_ids``
    """
    players = list(player_ids)
    n = len(players)
    if n < MIN_PLAYERS or n % PLAYERS_PER_TEAM != 0:
        logger.info(f"No fixed schedule for {n} players: need an even count of 4+")
        return []

    if teams:
        team_list = [tuple(team) for team in teams]
        _check_teams(team_list, players)
    else:
        team_list = make_teams(players)

    num_teams = len(team_list)
    max_courts = min(num_courts, num_teams // 2)
    if max_courts <= 0:
        logger.info(f"No fixed schedule for {num_teams} teams on {num_courts} courts")
        return []

    on_a_team = {pid for team in team_list for pid in team}
    teamless = [pid for pid in players if pid not in on_a_team]

    rounds: List[Round] = []
    for matchups in circle_method_rounds(num_teams):
        for start in range(0, len(matchups), max_courts):
            batch = matchups[start : start + max_courts]
            matches = [
                Match(court=court, team1=team_list[a], team2=team_list[b])
                for court, (a, b) in enumerate(batch, start=1)
            ]
            playing = {index for matchup in batch for index in matchup}
            sitting = [
                pid
                for index, team in enumerate(team_list)
                if index not in playing
                for pid in team
            ]
            sitting.extend(teamless)
            rounds.append(
                Round(round_number=len(rounds) + 1, matches=matches, sitting=sitting)
            )

    logger.info(
        f"Fixed schedule: {num_teams} teams, {max_courts} courts, {len(rounds)} rounds"
    )
    return rounds
