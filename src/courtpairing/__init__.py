"""Court Pairing: round-robin doubles scheduling.

Rotating and fixed partner schedulers, court divisions, and waitlist
management for capped rosters.
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

from courtpairing.controllers import (
    Admission,
    Ranking,
    StandingsCalculator,
    WaitlistManager,
    balanced_split,
    generate_schedule,
    partition_schedules,
    validate_divisions,
)
from courtpairing.models import (
    Division,
    Match,
    MatchResult,
    PairKey,
    PairTracker,
    RosterPlayer,
    Round,
    ScheduleConfig,
)
from courtpairing.pairing import (
    RoundEstimate,
    estimate_rounds,
    generate_fixed,
    generate_rotating,
)

__version__ = "0.1.0"

__all__ = [
    "Admission",
    "Division",
    "Match",
    "MatchResult",
    "PairKey",
    "PairTracker",
    "Ranking",
    "RosterPlayer",
    "Round",
    "RoundEstimate",
    "ScheduleConfig",
    "StandingsCalculator",
    "WaitlistManager",
    "balanced_split",
    "estimate_rounds",
    "generate_fixed",
    "generate_rotating",
    "generate_schedule",
    "partition_schedules",
    "validate_divisions",
]
