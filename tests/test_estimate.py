import pytest

from courtpairing.pairing import estimate_rounds


def test_rotating_estimate_adds_buffer():
    estimate = estimate_rounds(8, 2, "rotating")

    assert estimate.rounds == 10
    assert "~7–10 rounds" in estimate.description


def test_rotating_estimate_caps_courts_by_players():
    assert estimate_rounds(8, 6, "rotating") == estimate_rounds(8, 2, "rotating")


@pytest.mark.parametrize(
    "players,courts,expected",
    [
        (4, 1, 1),
        (6, 1, 3),
        (8, 2, 3),
        (8, 1, 6),
        (12, 3, 5),
    ],
)
def test_fixed_estimate(players, courts, expected):
    estimate = estimate_rounds(players, courts, "fixed")

    assert estimate.rounds == expected
    assert f"{players // 2} teams" in estimate.description


def test_too_few_players():
    estimate = estimate_rounds(3, 2, "rotating")

    assert estimate.rounds == 0
    assert estimate.description == "Need at least 4 players"


def test_no_courts():
    assert estimate_rounds(8, 0, "fixed").rounds == 0
