"""Suggested round counts shown before a schedule is generated."""

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
from dataclasses import dataclass

from courtpairing.constants import (
    MIN_PLAYERS,
    MODE_ROTATING,
    PLAYERS_PER_COURT,
    ROUND_ESTIMATE_BUFFER,
)


@dataclass(frozen=True)
class RoundEstimate:
    """Suggested round count and a sentence explaining it."""

    rounds: int
    description: str


def estimate_rounds(num_players: int, num_courts: int, mode: str) -> RoundEstimate:
    """Estimate how many rounds a configuration needs.

    Rotating mode: enough rounds for every pair to partner once, plus a
    buffer for the greedy scheduler. Fixed mode: every team meets every
    other team once.
    """
    if num_players < MIN_PLAYERS:
        return RoundEstimate(0, "Need at least 4 players")

    max_courts = min(num_courts, num_players // PLAYERS_PER_COURT)
    if max_courts <= 0:
        return RoundEstimate(0, "Need at least one court")

    if mode == MODE_ROTATING:
        total_pairs = num_players * (num_players - 1) // 2
        min_rounds = math.ceil(total_pairs / (max_courts * 2))
        max_rounds = min_rounds + math.ceil(min_rounds * ROUND_ESTIMATE_BUFFER)
        return RoundEstimate(
            max_rounds,
            f"~{min_rounds}–{max_rounds} rounds so every player partners "
            "with every other player at least once",
        )

    num_teams = num_players // 2
    total_matchups = num_teams * (num_teams - 1) // 2
    rounds = math.ceil(total_matchups / max_courts)
    return RoundEstimate(
        rounds, f"{rounds} rounds for all {num_teams} teams to play each other"
    )
