"""Rotating partners scheduler.

Partners change every round. Each round the players with the fewest games
take the courts, and teams are picked greedily so that pairs who have never
partnered are put together first and repeated opponents are avoided.

The loop stops once every pair of players has partnered at least once, or
after ``ceil(total_pairs / (courts * 2)) + n`` rounds, whichever comes first.
Full coverage is not guaranteed when courts are scarce.

Example:
    >>> import random
    >>> rounds = generate_rotating(["a", "b", "c", "d"], 1, rng=random.Random(1))
    >>> len(rounds)
    3
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

import math
import random
from itertools import combinations
from typing import List, Optional, Sequence, Set, Tuple

from courtpairing.constants import (
    MIN_PLAYERS,
    PLAYERS_PER_COURT,
    REPEAT_OPPONENT_PENALTY,
    UNPARTNERED_BONUS,
)
from courtpairing.models.schedule import Match, PairTracker, Round
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


def _pick_best(
    candidates: List[Tuple[float, Team]], rng: random.Random
) -> Optional[Team]:
    """Pick uniformly among the highest scoring candidates."""
    if not candidates:
        return None
    best_score = max(score for score, _ in candidates)
    best = [team for score, team in candidates if score == best_score]
    return rng.choice(best)


def _rank_by_games(
    player_ids: Sequence[str], tracker: PairTracker, rng: random.Random
) -> List[str]:
    """Players with the fewest games first, random order within a tie."""
    ranked = list(player_ids)
    rng.shuffle(ranked)
    # sort is stable, so the shuffle decides ties
    ranked.sort(key=tracker.games)
    return ranked


def _score_partners(team: Team, tracker: PairTracker) -> float:
    return -tracker.partner_count(*team)


def _score_opponents(team: Team, opposing: Team, tracker: PairTracker) -> float:
    partner_count = tracker.partner_count(*team)
    score = -partner_count
    if partner_count == 0:
        score += UNPARTNERED_BONUS
    met_before = sum(
        tracker.opponent_count(mine, theirs) for mine in opposing for theirs in team
    )
    return score - met_before * REPEAT_OPPONENT_PENALTY


def _fill_courts(
    active: Sequence[str],
    max_courts: int,
    tracker: PairTracker,
    rng: random.Random,
) -> List[Match]:
    """Assign the active players to courts 1..max_courts."""
    matches: List[Match] = []
    used: Set[str] = set()

    for court in range(1, max_courts + 1):
        available = [pid for pid in active if pid not in used]
        if len(available) < PLAYERS_PER_COURT:
            break

        team1 = _pick_best(
            [(_score_partners(t, tracker), t) for t in combinations(available, 2)],
            rng,
        )
        others = [pid for pid in available if pid not in team1]
        team2 = _pick_best(
            [
                (_score_opponents(t, team1, tracker), t)
                for t in combinations(others, 2)
            ],
            rng,
        )
        if team2 is None:
            break

        matches.append(Match(court=court, team1=team1, team2=team2))
        used.update(team1)
        used.update(team2)

    return matches


def generate_rotating(
    player_ids: Sequence[str],
    num_courts: int,
    rng: Optional[random.Random] = None,
) -> List[Round]:
    """Generate a rotating-partners schedule.

    Args:
        player_ids: Ids of the active players
        num_courts: Courts available
        rng: Random source for tie-breaking; a fresh one when omitted

    Returns:
        List of rounds, empty when fewer than four players or no usable court
    """
    players = list(player_ids)
    n = len(players)
    max_courts = min(num_courts, n // PLAYERS_PER_COURT)

    if n < MIN_PLAYERS or max_courts <= 0:
        logger.info(
            f"No rotating schedule for {n} players on {num_courts} courts"
        )
        return []

    if rng is None:
        rng = random.Random()

    tracker = PairTracker.for_players(players)
    total_pairs = n * (n - 1) // 2
    max_rounds = math.ceil(total_pairs / (max_courts * 2)) + n
    active_count = max_courts * PLAYERS_PER_COURT

    rounds: List[Round] = []
    while tracker.partnered_pairs < total_pairs and len(rounds) < max_rounds:
        ranked = _rank_by_games(players, tracker, rng)
        active, sitting = ranked[:active_count], ranked[active_count:]

        matches = _fill_courts(active, max_courts, tracker, rng)
        # counts only move once the whole round is set
        for match in matches:
            tracker.record_match(match)

        on_court = {pid for match in matches for pid in match.players}
        sitting.extend(pid for pid in active if pid not in on_court)

        rounds.append(
            Round(round_number=len(rounds) + 1, matches=matches, sitting=sitting)
        )
        logger.debug(
            f"Round {len(rounds)}: {len(matches)} matches, "
            f"{tracker.partnered_pairs}/{total_pairs} pairs partnered"
        )

    logger.info(
        f"Rotating schedule: {n} players, {max_courts} courts, {len(rounds)} rounds, "
        f"{tracker.partnered_pairs}/{total_pairs} pairs partnered"
    )
    return rounds
