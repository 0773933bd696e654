from courtpairing.controllers import StandingsCalculator
from courtpairing.models import Match, MatchResult


def _result(court, team1, team2, score1, score2):
    return MatchResult(Match(court, team1, team2), score1, score2)


def test_standings_rank_by_wins_then_point_differential():
    results = [
        _result(1, ("a", "b"), ("c", "d"), 11, 5),
        _result(1, ("a", "c"), ("b", "d"), 11, 9),
        _result(1, ("a", "d"), ("b", "c"), 4, 11),
    ]

    rankings = StandingsCalculator().compute(["a", "b", "c", "d"], results)

    assert [r.player_id for r in rankings] == ["b", "c", "a", "d"]
    a = rankings[2]
    assert (a.wins, a.losses, a.games_played) == (2, 1, 3)
    assert a.point_differential == 6 + 2 - 7
    assert rankings[-1].wins == 0


def test_tie_counts_as_played_only():
    rankings = StandingsCalculator().compute(
        ["a", "b", "c", "d"], [_result(1, ("a", "b"), ("c", "d"), 7, 7)]
    )

    for row in rankings:
        assert (row.wins, row.losses, row.games_played) == (0, 0, 1)


def test_unknown_players_are_ignored():
    rankings = StandingsCalculator().compute(
        ["a", "b"], [_result(2, ("a", "x"), ("b", "y"), 3, 11)]
    )

    assert [r.player_id for r in rankings] == ["b", "a"]
    assert rankings[0].to_dict()["point_differential"] == 8


def test_match_result_winner():
    result = _result(1, ("a", "b"), ("c", "d"), 9, 11)

    assert result.winning_team == ("c", "d")
    assert not result.is_tie
    assert MatchResult.from_dict(result.to_dict()) == result
