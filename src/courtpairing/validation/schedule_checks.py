"""Schedule compliance checks.

Re-derives the properties a generated schedule must have from the schedule
itself:

- every round uses distinct courts, numbered 1..k when undivided
- every active player is on one court or sitting, exactly once per round
- games played per player stay within the allowed spread
- rotating mode: every pair of players partners at least once (quality)
- fixed mode: every pair of teams meets exactly once
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

from collections import Counter
from dataclasses import dataclass, field
from enum import Enum
from itertools import combinations
from typing import Dict, List, Optional, Sequence

from courtpairing.constants import MODE_FIXED, MODE_ROTATING
from courtpairing.models.schedule import PairKey, PairTracker, Round
from courtpairing.pairing.fixed import make_teams
from courtpairing.type_hints import Team
from courtpairing.utils import setup_logger

logger = setup_logger(__name__)


class CheckStatus(Enum):
    """Status of a single schedule check."""

    COMPLIANT = "COMPLIANT"
    VIOLATION = "VIOLATION"
    NOT_APPLICABLE = "NOT_APPLICABLE"


class ViolationType(Enum):
    """How serious a failed check is."""

    ABSOLUTE = "ABSOLUTE"  # schedule is unusable
    QUALITY = "QUALITY"  # best-effort goal missed


@dataclass
class CheckResult:
    """Result of one schedule check."""

    check: str
    status: CheckStatus
    violation_type: Optional[ViolationType] = None
    description: str = ""
    details: Dict[str, object] = field(default_factory=dict)

    @property
    def passed(self) -> bool:
        return self.status != CheckStatus.VIOLATION

    def to_dict(self) -> Dict[str, object]:
        return {
            "check": self.check,
            "status": self.status.value,
            "violation_type": self.violation_type.value if self.violation_type else None,
            "description": self.description,
            "details": self.details,
        }


@dataclass
class ValidationReport:
    """All check results for one schedule."""

    results: List[CheckResult]
    summary: str

    @property
    def violations(self) -> List[CheckResult]:
        return [
            r
            for r in self.results
            if r.status == CheckStatus.VIOLATION
            and r.violation_type == ViolationType.ABSOLUTE
        ]

    @property
    def quality_warnings(self) -> List[CheckResult]:
        return [
            r
            for r in self.results
            if r.status == CheckStatus.VIOLATION
            and r.violation_type == ViolationType.QUALITY
        ]

    @property
    def is_valid(self) -> bool:
        """True when no absolute check failed."""
        return not self.violations

    @property
    def compliance_percentage(self) -> float:
        """Share of applicable checks that passed."""
        applicable = [r for r in self.results if r.status != CheckStatus.NOT_APPLICABLE]
        if not applicable:
            return 100.0
        passed = sum(1 for r in applicable if r.status == CheckStatus.COMPLIANT)
        return (passed / len(applicable)) * 100.0

    def to_dict(self) -> Dict[str, object]:
        return {
            "summary": self.summary,
            "is_valid": self.is_valid,
            "compliance_percentage": self.compliance_percentage,
            "results": [r.to_dict() for r in self.results],
        }


class ScheduleValidator:
    """Runs every schedule check and collects a report."""

    def __init__(self, max_games_spread: int = 1):
        """Initialize the validator.

        Args:
            max_games_spread: Largest allowed gap between most and fewest games
        """
        self.max_games_spread = max_games_spread

    def validate(
        self,
        rounds: Sequence[Round],
        player_ids: Sequence[str],
        mode: str,
        teams: Optional[Sequence[Team]] = None,
        contiguous_courts: bool = True,
    ) -> ValidationReport:
        """Check a schedule.

        Args:
            rounds: The schedule
            player_ids: Players the schedule was generated for
            mode: "rotating" or "fixed"
            teams: Fixed-mode teams; consecutive pairs of ``player_ids`` when omitted
            contiguous_courts: Require courts 1..k each round (False for divisions)

        Returns:
            ValidationReport
        """
        tracker = PairTracker.from_schedule(player_ids, rounds)
        results = [
            self.check_courts(rounds, contiguous_courts),
            self.check_attendance(rounds, player_ids),
            self.check_games_spread(tracker),
            self.check_partner_coverage(tracker, player_ids, mode),
            self.check_matchup_coverage(rounds, player_ids, mode, teams),
        ]

        failed = [r.check for r in results if r.status == CheckStatus.VIOLATION]
        if failed:
            summary = f"{len(rounds)} rounds, failed: {', '.join(failed)}"
        else:
            summary = f"{len(rounds)} rounds, all checks passed"
        logger.info(f"Schedule validation: {summary}")
        return ValidationReport(results=results, summary=summary)

    def check_courts(
        self, rounds: Sequence[Round], contiguous: bool = True
    ) -> CheckResult:
        bad_rounds = []
        for round_data in rounds:
            courts = [m.court for m in round_data.matches]
            if len(set(courts)) != len(courts):
                bad_rounds.append(round_data.round_number)
            elif contiguous and sorted(courts) != list(range(1, len(courts) + 1)):
                bad_rounds.append(round_data.round_number)

        if bad_rounds:
            return CheckResult(
                "courts",
                CheckStatus.VIOLATION,
                ViolationType.ABSOLUTE,
                f"Court numbers repeated or not contiguous in rounds {bad_rounds}",
                {"rounds": bad_rounds},
            )
        return CheckResult("courts", CheckStatus.COMPLIANT)

    def check_attendance(
        self, rounds: Sequence[Round], player_ids: Sequence[str]
    ) -> CheckResult:
        expected = Counter(player_ids)
        problems: Dict[int, Dict[str, List[str]]] = {}
        for round_data in rounds:
            seen = Counter(round_data.playing) + Counter(round_data.sitting)
            doubled = sorted(pid for pid, count in seen.items() if count > 1)
            missing = sorted(pid for pid in expected if pid not in seen)
            unknown = sorted(pid for pid in seen if pid not in expected)
            if doubled or missing or unknown:
                problems[round_data.round_number] = {
                    "doubled": doubled,
                    "missing": missing,
                    "unknown": unknown,
                }

        if problems:
            return CheckResult(
                "attendance",
                CheckStatus.VIOLATION,
                ViolationType.ABSOLUTE,
                f"Players double-booked or unaccounted for in rounds {sorted(problems)}",
                {"rounds": problems},
            )
        return CheckResult("attendance", CheckStatus.COMPLIANT)

    def check_games_spread(self, tracker: PairTracker) -> CheckResult:
        spread = tracker.games_spread()
        if spread > self.max_games_spread:
            return CheckResult(
                "games_spread",
                CheckStatus.VIOLATION,
                ViolationType.QUALITY,
                f"Games played differ by {spread} (allowed {self.max_games_spread})",
                {"spread": spread},
            )
        return CheckResult("games_spread", CheckStatus.COMPLIANT, details={"spread": spread})

    def check_partner_coverage(
        self, tracker: PairTracker, player_ids: Sequence[str], mode: str
    ) -> CheckResult:
        if mode != MODE_ROTATING:
            return CheckResult("partner_coverage", CheckStatus.NOT_APPLICABLE)

        missing = tracker.unpartnered_pairs(player_ids)
        total = len(player_ids) * (len(player_ids) - 1) // 2
        details = {"partnered": total - len(missing), "total": total}
        if missing:
            details["unpartnered"] = [list(key) for key in missing]
            return CheckResult(
                "partner_coverage",
                CheckStatus.VIOLATION,
                ViolationType.QUALITY,
                f"{len(missing)} of {total} pairs never partnered",
                details,
            )
        return CheckResult("partner_coverage", CheckStatus.COMPLIANT, details=details)

    def check_matchup_coverage(
        self,
        rounds: Sequence[Round],
        player_ids: Sequence[str],
        mode: str,
        teams: Optional[Sequence[Team]] = None,
    ) -> CheckResult:
        if mode != MODE_FIXED:
            return CheckResult("matchup_coverage", CheckStatus.NOT_APPLICABLE)

        team_keys = [PairKey.of(*team) for team in (teams or make_teams(player_ids))]
        played: Counter = Counter()
        foreign = []
        for round_data in rounds:
            for match in round_data.matches:
                home, away = PairKey.of(*match.team1), PairKey.of(*match.team2)
                if home not in team_keys or away not in team_keys:
                    foreign.append(round_data.round_number)
                played[frozenset((home, away))] += 1

        expected = {frozenset(pair) for pair in combinations(team_keys, 2)}
        repeated = sum(1 for count in played.values() if count > 1)
        missing = len(expected - set(played))
        details = {
            "expected": len(expected),
            "played": len(played),
            "repeated": repeated,
            "missing": missing,
        }
        if foreign or repeated or missing:
            details["foreign_team_rounds"] = foreign
            return CheckResult(
                "matchup_coverage",
                CheckStatus.VIOLATION,
                ViolationType.ABSOLUTE,
                f"Team matchups: {len(played)}/{len(expected)} played, "
                f"{repeated} repeated, {missing} missing",
                details,
            )
        return CheckResult("matchup_coverage", CheckStatus.COMPLIANT, details=details)


def create_schedule_validator(max_games_spread: int = 1) -> ScheduleValidator:
    """Factory function to create a schedule validator."""
    return ScheduleValidator(max_games_spread=max_games_spread)
