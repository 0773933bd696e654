from collections import Counter
from itertools import combinations

import pytest

from courtpairing.exceptions import InvalidPairingException
from courtpairing.pairing import circle_method_rounds, generate_fixed, make_teams

FIXED_CASES = [
    (4, 1),
    (6, 1),
    (6, 2),
    (8, 2),
    (8, 1),
    (10, 2),
    (10, 3),
    (12, 3),
    (14, 3),
]


def _players(n):
    return [f"P{i}" for i in range(1, n + 1)]


def _team_matchups(rounds):
    return Counter(
        frozenset([match.team1, match.team2])
        for round_data in rounds
        for match in round_data.matches
    )


@pytest.mark.parametrize("num_teams", range(2, 10))
def test_circle_method_meets_every_team_once(num_teams):
    meta_rounds = circle_method_rounds(num_teams)

    seen = Counter(frozenset(m) for meta in meta_rounds for m in meta)
    assert set(seen) == {frozenset(p) for p in combinations(range(num_teams), 2)}
    assert set(seen.values()) == {1}

    for meta in meta_rounds:
        indices = [i for matchup in meta for i in matchup]
        assert len(indices) == len(set(indices))


@pytest.mark.parametrize("num_teams", [4, 6, 8])
def test_circle_method_even_shape(num_teams):
    meta_rounds = circle_method_rounds(num_teams)

    assert len(meta_rounds) == num_teams - 1
    assert all(len(meta) == num_teams // 2 for meta in meta_rounds)


@pytest.mark.parametrize("num_teams", [3, 5, 7])
def test_circle_method_odd_gives_each_team_one_bye(num_teams):
    meta_rounds = circle_method_rounds(num_teams)

    assert len(meta_rounds) == num_teams
    byes = []
    for meta in meta_rounds:
        assert len(meta) == (num_teams - 1) // 2
        playing = {i for matchup in meta for i in matchup}
        byes.extend(set(range(num_teams)) - playing)
    assert sorted(byes) == list(range(num_teams))


def test_circle_method_too_few_teams():
    assert circle_method_rounds(0) == []
    assert circle_method_rounds(1) == []


def test_make_teams_pairs_consecutive_players():
    assert make_teams(["a", "b", "c", "d", "e"]) == [("a", "b"), ("c", "d")]


@pytest.mark.parametrize("n", [0, 2, 3, 5, 7])
def test_odd_or_small_rosters_give_empty_schedule(n):
    assert generate_fixed(_players(n), 2) == []


@pytest.mark.parametrize("n,courts", FIXED_CASES)
def test_every_team_pair_meets_exactly_once(n, courts):
    rounds = generate_fixed(_players(n), courts)

    num_teams = n // 2
    matchups = _team_matchups(rounds)
    assert len(matchups) == num_teams * (num_teams - 1) // 2
    assert set(matchups.values()) == {1}


@pytest.mark.parametrize("n,courts", FIXED_CASES)
def test_attendance_and_courts(n, courts):
    players = _players(n)
    max_courts = min(courts, n // 4)
    rounds = generate_fixed(players, courts)

    for index, round_data in enumerate(rounds, start=1):
        assert round_data.round_number == index
        assert sorted(round_data.playing + round_data.sitting) == sorted(players)
        courts_used = [m.court for m in round_data.matches]
        assert courts_used == list(range(1, len(courts_used) + 1))
        assert len(courts_used) <= max_courts


@pytest.mark.parametrize("n,courts", FIXED_CASES)
def test_partners_never_change(n, courts):
    teams = set(make_teams(_players(n)))
    rounds = generate_fixed(_players(n), courts)

    for round_data in rounds:
        for match in round_data.matches:
            assert match.team1 in teams
            assert match.team2 in teams


def test_six_players_one_court():
    rounds = generate_fixed(_players(6), 1)

    assert len(rounds) == 3
    for round_data in rounds:
        assert len(round_data.matches) == 1
        assert len(round_data.sitting) == 2


@pytest.mark.parametrize(
    "n,courts,expected_rounds",
    [
        (8, 2, 3),
        (8, 1, 6),
        (10, 2, 5),
        (12, 2, 10),
        (12, 3, 5),
    ],
)
def test_meta_rounds_are_packed_onto_courts(n, courts, expected_rounds):
    assert len(generate_fixed(_players(n), courts)) == expected_rounds


def test_supplied_teams_are_kept():
    teams = [("a", "c"), ("b", "d"), ("e", "g"), ("f", "h")]
    rounds = generate_fixed(["a", "b", "c", "d", "e", "f", "g", "h"], 2, teams=teams)

    assert len(rounds) == 3
    for round_data in rounds:
        for match in round_data.matches:
            assert match.team1 in teams
            assert match.team2 in teams


def test_players_without_a_team_sit_every_round():
    teams = [("a", "b"), ("c", "d")]
    rounds = generate_fixed(["a", "b", "c", "d", "e", "f"], 2, teams=teams)

    assert len(rounds) == 1
    assert sorted(rounds[0].sitting) == ["e", "f"]


@pytest.mark.parametrize(
    "teams",
    [
        [("a", "a"), ("c", "d")],
        [("a", "b"), ("b", "c")],
        [("a", "b", "c"), ("d", "e")],
    ],
)
def test_malformed_teams_raise(teams):
    with pytest.raises(InvalidPairingException):
        generate_fixed(["a", "b", "c", "d", "e", "f"], 1, teams=teams)


def test_team_members_must_be_on_the_roster():
    with pytest.raises(InvalidPairingException, match="not on the roster"):
        generate_fixed(["a", "b", "c", "d"], 1, teams=[("a", "b"), ("x", "y")])
