import random

from courtpairing.models import Match, Round
from courtpairing.pairing import generate_fixed, generate_rotating
from courtpairing.validation import (
    CheckStatus,
    ViolationType,
    create_schedule_validator,
)


def _players(n):
    return [f"P{i}" for i in range(1, n + 1)]


def _by_check(report):
    return {r.check: r for r in report.results}


def test_rotating_schedule_passes():
    players = _players(8)
    rounds = generate_rotating(players, 2, rng=random.Random(0))

    report = create_schedule_validator().validate(rounds, players, "rotating")

    assert report.is_valid
    assert report.violations == []
    checks = _by_check(report)
    assert checks["matchup_coverage"].status == CheckStatus.NOT_APPLICABLE
    assert checks["games_spread"].passed


def test_fixed_schedule_passes():
    players = _players(10)
    rounds = generate_fixed(players, 2)

    report = create_schedule_validator().validate(rounds, players, "fixed")

    assert report.is_valid
    assert report.compliance_percentage == 100.0
    assert _by_check(report)["partner_coverage"].status == CheckStatus.NOT_APPLICABLE


def test_missing_fixed_round_is_a_violation():
    players = _players(8)
    rounds = generate_fixed(players, 2)[:-1]

    report = create_schedule_validator().validate(rounds, players, "fixed")

    assert not report.is_valid
    failed = report.violations[0]
    assert failed.check == "matchup_coverage"
    assert failed.details["missing"] == 2


def test_double_booked_player_is_a_violation():
    players = _players(8)
    rounds = [
        Round(
            1,
            [
                Match(1, ("P1", "P2"), ("P3", "P4")),
                Match(2, ("P1", "P5"), ("P6", "P7")),
            ],
            ["P8"],
        )
    ]

    report = create_schedule_validator().validate(rounds, players, "rotating")

    attendance = _by_check(report)["attendance"]
    assert attendance.status == CheckStatus.VIOLATION
    assert attendance.details["rounds"][1]["doubled"] == ["P1"]


def test_repeated_court_is_a_violation():
    players = _players(8)
    rounds = [
        Round(
            1,
            [
                Match(1, ("P1", "P2"), ("P3", "P4")),
                Match(1, ("P5", "P6"), ("P7", "P8")),
            ],
        )
    ]

    report = create_schedule_validator().validate(rounds, players, "rotating")

    assert _by_check(report)["courts"].violation_type == ViolationType.ABSOLUTE
    assert not report.is_valid


def test_shifted_courts_need_non_contiguous_mode():
    players = _players(4)
    rounds = [Round(1, [Match(3, ("P1", "P2"), ("P3", "P4"))])]
    validator = create_schedule_validator()

    assert not _by_check(validator.validate(rounds, players, "rotating"))["courts"].passed
    relaxed = validator.validate(rounds, players, "rotating", contiguous_courts=False)
    assert _by_check(relaxed)["courts"].passed


def test_short_rotating_schedule_is_only_a_quality_warning():
    players = _players(8)
    rounds = generate_rotating(players, 2, rng=random.Random(1))[:1]

    report = create_schedule_validator().validate(rounds, players, "rotating")

    assert report.is_valid
    warning = report.quality_warnings[0]
    assert warning.check == "partner_coverage"
    assert warning.details["partnered"] == 4
    assert report.to_dict()["results"][3]["status"] == "VIOLATION"
