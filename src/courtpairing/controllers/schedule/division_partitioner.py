"""Schedule generation across court divisions.

This module runs the rotating or fixed scheduler once per division, moves
each division's courts into its reserved range and lines the division
schedules up into one list of rounds.
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

import random
from typing import Dict, List, Optional, Sequence

from courtpairing.constants import MIN_PLAYERS, MODE_FIXED, MODE_ROTATING
from courtpairing.exceptions import InvalidConfigurationException
from courtpairing.models.schedule import Round
from courtpairing.models.tournament import Division, ScheduleConfig
from courtpairing.pairing import generate_fixed, generate_rotating
from courtpairing.type_hints import DivisionSchedules, Team
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def validate_divisions(divisions: Sequence[Division], num_courts: int) -> None:
    """Check division names and court ranges.

    Raises:
        InvalidConfigurationException: If a division has no name, a range
            outside ``1..num_courts``, or overlaps another division
    """
    for index, division in enumerate(divisions):
        if not division.name or not division.name.strip():
            raise InvalidConfigurationException("Division name is required")
        if not 1 <= division.court_start <= division.court_end <= num_courts:
            raise InvalidConfigurationException(
                f"Courts for {division.name!r} must be between 1 and {num_courts}"
            )
        for other in divisions[:index]:
            if division.overlaps(other):
                raise InvalidConfigurationException(
                    f'Courts overlap with "{other.name}" '
                    f"(courts {other.court_start}-{other.court_end})"
                )


def balanced_split(
    player_ids: Sequence[str],
    divisions: Sequence[Division],
    rng: Optional[random.Random] = None,
) -> Dict[str, List[str]]:
    """Deal players out to divisions in random order.

    Returns:
        Division id -> assigned player ids; sizes differ by at most one
    """
    if not divisions:
        raise InvalidConfigurationException("Create divisions first")
    if rng is None:
        rng = random.Random()

    shuffled = list(player_ids)
    rng.shuffle(shuffled)
    assignments: Dict[str, List[str]] = {d.id: [] for d in divisions}
    for i, player_id in enumerate(shuffled):
        assignments[divisions[i % len(divisions)].id].append(player_id)
    return assignments


def run_scheduler(
    mode: str,
    player_ids: Sequence[str],
    num_courts: int,
    teams: Optional[Sequence[Team]] = None,
    rng: Optional[random.Random] = None,
) -> List[Round]:
    """Dispatch to the scheduler for ``mode``."""
    if mode == MODE_ROTATING:
        return generate_rotating(player_ids, num_courts, rng=rng)
    if mode == MODE_FIXED:
        return generate_fixed(player_ids, num_courts, teams=teams)
    raise InvalidConfigurationException(f"Unknown pairing mode {mode!r}")


def fit_round_count(rounds: List[Round], num_rounds: int) -> List[Round]:
    """Truncate or cyclically repeat ``rounds`` to exactly ``num_rounds``.

    Repeated rounds are copies of earlier ones, renumbered in sequence.
    """
    if not rounds or num_rounds <= 0:
        return []
    return [
        rounds[i % len(rounds)].renumbered(i + 1) for i in range(num_rounds)
    ]


def truncate_rounds(rounds: List[Round], num_rounds: Optional[int]) -> List[Round]:
    """Drop rounds beyond ``num_rounds``; never adds any."""
    if num_rounds is None or len(rounds) <= num_rounds:
        return rounds
    return [r.renumbered(i + 1) for i, r in enumerate(rounds[:num_rounds])]


def _teams_within(
    teams: Optional[Sequence[Team]], player_ids: Sequence[str]
) -> Optional[List[Team]]:
    if not teams:
        return None
    members = set(player_ids)
    subset = [team for team in teams if team[0] in members and team[1] in members]
    dropped = [
        team for team in teams if (team[0] in members) != (team[1] in members)
    ]
    if dropped:
        logger.warning(f"Ignoring teams split across divisions: {dropped}")
    if not subset:
        logger.warning(
            "No supplied team lies inside the division; pairing in listed order"
        )
        return None
    return subset


def partition_schedules(
    player_ids: Sequence[str],
    divisions: Sequence[Division],
    mode: str,
    num_rounds: Optional[int] = None,
    teams: Optional[Sequence[Team]] = None,
    rng: Optional[random.Random] = None,
) -> DivisionSchedules:
    """Schedule every division on its own courts.

    Args:
        player_ids: Active players; division members outside this list are ignored
        divisions: Divisions with their assigned players
        mode: "rotating" or "fixed"
        num_rounds: When set, every division schedule is fitted to this count
        teams: Pre-arranged fixed-mode teams; each division uses the ones inside it
        rng: Random source shared by the rotating runs

    Returns:
        Division id -> rounds, court numbers already in the division's range.
        Divisions with fewer than four eligible players are left out.
    """
    active = set(player_ids)
    schedules: DivisionSchedules = {}

    for division in divisions:
        members = [pid for pid in division.player_ids if pid in active]
        if len(members) < MIN_PLAYERS:
            logger.info(
                f"Skipping division {division.name!r}: {len(members)} eligible players"
            )
            continue

        rounds = run_scheduler(
            mode,
            members,
            division.num_courts,
            teams=_teams_within(teams, members),
            rng=rng,
        )
        rounds = [r.shifted(division.court_offset) for r in rounds]
        if num_rounds is not None and rounds and len(rounds) != num_rounds:
            logger.info(
                f"Fitting division {division.name!r} from {len(rounds)} to {num_rounds} rounds"
            )
            rounds = fit_round_count(rounds, num_rounds)
        schedules[division.id] = rounds

    return schedules


def merge_division_schedules(
    player_ids: Sequence[str], schedules: DivisionSchedules
) -> List[Round]:
    """Combine per-division schedules into one schedule.

    Round ``k`` holds every division's round ``k`` matches ordered by court.
    Active players not on a court that round are listed as sitting.
    """
    total = max((len(rounds) for rounds in schedules.values()), default=0)
    merged: List[Round] = []
    for index in range(total):
        matches = [
            match
            for rounds in schedules.values()
            if index < len(rounds)
            for match in rounds[index].matches
        ]
        matches.sort(key=lambda m: m.court)
        on_court = {pid for match in matches for pid in match.players}
        sitting = [pid for pid in player_ids if pid not in on_court]
        merged.append(Round(round_number=index + 1, matches=matches, sitting=sitting))
    return merged


def generate_schedule(
    player_ids: Sequence[str],
    config: ScheduleConfig,
    divisions: Optional[Sequence[Division]] = None,
    teams: Optional[Sequence[Team]] = None,
    rng: Optional[random.Random] = None,
) -> List[Round]:
    """Generate the schedule for an event.

    Args:
        player_ids: Active players in signup order
        config: Courts, mode and optional round count
        divisions: Court divisions; the whole pool plays together when empty
        teams: Pre-arranged fixed-mode teams
        rng: Random source; built from ``config.seed`` when omitted

    Returns:
        List of rounds

    Raises:
        InvalidConfigurationException: If the config or divisions are invalid
    """
    config.validate()
    if rng is None:
        rng = random.Random(config.seed)

    if not divisions:
        rounds = run_scheduler(
            config.mode, player_ids, config.num_courts, teams=teams, rng=rng
        )
        return truncate_rounds(rounds, config.num_rounds)

    validate_divisions(divisions, config.num_courts)
    schedules = partition_schedules(
        player_ids,
        divisions,
        config.mode,
        num_rounds=config.num_rounds,
        teams=teams,
        rng=rng,
    )
    merged = merge_division_schedules(player_ids, schedules)
    logger.info(
        f"Division schedule: {len(schedules)}/{len(divisions)} divisions scheduled, "
        f"{len(merged)} rounds"
    )
    return merged
